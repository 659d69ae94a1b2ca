from enum import Enum

from card_flip_sim.config import RARITY_THRESHOLDS


class Rarity(str, Enum):
    UR = 'UR'
    SR = 'SR'
    R = 'R'
    N = 'N'

    def __str__(self):
        return self.value


# Highest rarity first
RARITY_ORDER = (Rarity.UR, Rarity.SR, Rarity.R, Rarity.N)
SR_OR_ABOVE = frozenset((Rarity.UR, Rarity.SR))


def classify(value, thresholds=RARITY_THRESHOLDS):
    """Map a rolled integer to its rarity band."""
    ur_max, sr_max, r_max = thresholds
    if value <= ur_max:
        return Rarity.UR
    elif value <= sr_max:
        return Rarity.SR
    elif value <= r_max:
        return Rarity.R
    else:
        return Rarity.N


def draw_rarity(source, config):
    return classify(source.randint(*config.roll_range), config.thresholds)


def is_sr_or_above(rarity):
    return rarity in SR_OR_ABOVE


def includes_sr_or_above(cards):
    return any(c in SR_OR_ABOVE for c in cards)
