import logging
from collections import namedtuple
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from card_flip_sim.cards import CARDS_PER_SET, shuffle
from card_flip_sim.rarity import Rarity, includes_sr_or_above
from card_flip_sim.results import aggregate

logger = logging.getLogger(__name__)

# cards_per_cycle: how many positions to draw before shuffling
# stop_on_sr: shuffle early once this cycle's draws include SR or above
Strategy = namedtuple('Strategy', ['name', 'title', 'cards_per_cycle', 'stop_on_sr'])

STRATEGIES = (
    Strategy('shuffle_each_card', 'Shuffle after every card', 1, False),
    Strategy('shuffle_every_two', 'Shuffle after every 2 cards', 2, False),
    Strategy('shuffle_every_three', 'Shuffle after every 3 cards', 3, False),
    Strategy('shuffle_every_four', 'Shuffle after all 4 cards', 4, False),
    Strategy('shuffle_on_sr_or_above', 'Shuffle once SR or above appears', CARDS_PER_SET, True),
)
STRATEGIES_BY_NAME = {s.name: s for s in STRATEGIES}


@dataclass
class SimulationRun:
    strategy: str
    draws: List[Rarity]
    cycles: int
    spent: int
    remaining: int
    # Per-cycle draw groups and the positions they came from, only kept when asked for
    cycle_draws: Optional[List[Tuple[Rarity, ...]]] = field(default=None, repr=False)
    cycle_positions: Optional[List[Tuple[int, ...]]] = field(default=None, repr=False)

    @property
    def tally(self):
        return aggregate(self.draws)


def get_strategy(strategy):
    if isinstance(strategy, Strategy):
        return strategy
    try:
        return STRATEGIES_BY_NAME[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown strategy {strategy!r}; expected one of {sorted(STRATEGIES_BY_NAME)}"
        ) from None


def simulate(strategy, config, source, record_cycles=False):
    """Spend the whole budget following one drawing strategy.

    Position 0 is always affordable inside the loop. Later positions are
    drawn only if the remaining budget covers their own cost; a position
    that can't be paid for is skipped and the set is shuffled after the
    cycle like any other.
    """
    strategy = get_strategy(strategy)
    costs = config.cost_schedule
    budget = config.initial_budget
    spent = 0
    draws = []
    cycle_draws = [] if record_cycles else None
    cycle_positions = [] if record_cycles else None
    cycles = 0

    cards = shuffle(source, config)

    while budget >= costs[0]:
        drawn = []
        positions = []
        for k in range(strategy.cards_per_cycle):
            if budget < costs[k]:
                continue
            drawn.append(cards[k])
            positions.append(k)
            budget -= costs[k]
            spent += costs[k]

            # Only this cycle's cards count, not the whole history
            if strategy.stop_on_sr and includes_sr_or_above(drawn):
                break

        draws.extend(drawn)
        cycles += 1
        if cycle_draws is not None:
            cycle_draws.append(tuple(drawn))
            cycle_positions.append(tuple(positions))

        cards = shuffle(source, config)

    logger.debug("%s: %d draws over %d cycles, %d spent, %d left",
                 strategy.name, len(draws), cycles, spent, budget)

    return SimulationRun(strategy.name, draws, cycles, spent, budget,
                         cycle_draws, cycle_positions)


def shuffle_each_card(config, source):
    return simulate('shuffle_each_card', config, source).tally


def shuffle_every_two(config, source):
    return simulate('shuffle_every_two', config, source).tally


def shuffle_every_three(config, source):
    return simulate('shuffle_every_three', config, source).tally


def shuffle_every_four(config, source):
    return simulate('shuffle_every_four', config, source).tally


def shuffle_on_sr_or_above(config, source):
    return simulate('shuffle_on_sr_or_above', config, source).tally
