from card_flip_sim.config import SimulationConfig
from card_flip_sim.rarity import Rarity, classify, draw_rarity, includes_sr_or_above
from card_flip_sim.cards import PityGuaranteeError, permute, shuffle
from card_flip_sim.random_source import RandomSource
from card_flip_sim.results import aggregate, expected_distribution, format_tally
from card_flip_sim.plots import plot_distribution
from card_flip_sim.strategies import (
    STRATEGIES,
    SimulationRun,
    shuffle_each_card,
    shuffle_every_four,
    shuffle_every_three,
    shuffle_every_two,
    shuffle_on_sr_or_above,
    simulate,
)

__version__ = "0.1.0"
