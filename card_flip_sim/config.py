import numbers
from dataclasses import dataclass
from typing import Optional, Tuple

# Game constants
INITIAL_BUDGET = 1_000_000_000
ITEM_COSTS = (200, 210, 220, 230)
RARITY_THRESHOLDS = (70, 438, 688)
ROLL_RANGE = (1, 1000)
MAX_PITY_REDRAWS = 100_000


@dataclass(frozen=True)
class SimulationConfig:
    """Everything a strategy run needs.

    Defaults reproduce the in-game rules. Tests pass small budgets and
    cost schedules instead.
    """
    initial_budget: int = INITIAL_BUDGET
    cost_schedule: Tuple[int, int, int, int] = ITEM_COSTS
    thresholds: Tuple[int, int, int] = RARITY_THRESHOLDS
    roll_range: Tuple[int, int] = ROLL_RANGE
    max_pity_redraws: int = MAX_PITY_REDRAWS
    seed: Optional[int] = None

    def __post_init__(self):
        # Normalize lists to tuples so the config stays hashable
        object.__setattr__(self, 'cost_schedule', tuple(self.cost_schedule))
        object.__setattr__(self, 'thresholds', tuple(self.thresholds))
        object.__setattr__(self, 'roll_range', tuple(self.roll_range))

        if self.initial_budget < 0:
            raise ValueError(f"initial_budget must be non-negative, got {self.initial_budget}")
        if len(self.cost_schedule) != 4:
            raise ValueError(f"cost_schedule needs exactly 4 entries, got {len(self.cost_schedule)}")
        if any(not isinstance(c, numbers.Integral) or isinstance(c, bool) or c <= 0 for c in self.cost_schedule):
            raise ValueError(f"cost_schedule entries must be positive integers: {self.cost_schedule}")
        if len(self.thresholds) != 3 or any(a >= b for a, b in zip(self.thresholds, self.thresholds[1:])):
            raise ValueError(f"thresholds must be 3 strictly increasing bounds: {self.thresholds}")
        if len(self.roll_range) != 2 or self.roll_range[0] >= self.roll_range[1]:
            raise ValueError(f"roll_range must be (low, high) with low < high: {self.roll_range}")
        if self.max_pity_redraws <= 0:
            raise ValueError(f"max_pity_redraws must be positive, got {self.max_pity_redraws}")
