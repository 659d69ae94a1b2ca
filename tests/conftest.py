import pytest

from card_flip_sim.config import SimulationConfig
from card_flip_sim.random_source import RandomSource


class ScriptedSource:
    """Plays back fixed floats in [0, 1), then repeats the last one."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value

    def randint(self, low, high):
        return RandomSource.randint(self, low, high)

    def index(self, n):
        return RandomSource.index(self, n)


@pytest.fixture
def source():
    return RandomSource(1234)


@pytest.fixture
def small_config():
    return SimulationConfig(initial_budget=5_000, cost_schedule=(1, 2, 3, 4))
