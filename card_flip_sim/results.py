from collections import Counter

import numpy as np
import pandas as pd

from card_flip_sim.rarity import RARITY_ORDER, SR_OR_ABOVE

TIERS = [r.value for r in RARITY_ORDER]
TOTAL = 'Total'


def round_half_up(values):
    return np.floor(np.asarray(values, dtype=float) + 0.5)


def aggregate(draws):
    """Count and percentage per rarity, plus a total row.

    percent is rounded to one decimal, halves rounding up. The total row
    has no percentage (NaN). An empty run reports 0.0 everywhere.
    """
    counter = Counter(map(str, draws))
    unknown = set(counter) - set(TIERS)
    if unknown:
        raise ValueError(f"Unknown rarities in draws: {sorted(unknown)}")
    counts = np.array([counter[t] for t in TIERS], dtype=np.int64)
    total = sum(counter.values())

    if total > 0:
        percents = round_half_up(counts / total * 1000) / 10
    else:
        percents = np.zeros(len(TIERS))

    return pd.DataFrame(
        {'count': np.append(counts, total), 'percent': np.append(percents, np.nan)},
        index=TIERS + [TOTAL],
    )


def expected_distribution(config):
    """Probability of each rarity in a single slot of a dealt set.

    Three slots follow the base rates. The 4th is conditioned on the pity
    rule, and shuffling spreads it evenly over all four positions.
    """
    low, high = config.roll_range
    ur_max, sr_max, r_max = config.thresholds
    # randint never returns high itself
    edges = np.array([low - 1, ur_max, sr_max, r_max, high - 1], dtype=float)
    edges = np.clip(edges, low - 1, high - 1)
    base = np.diff(edges) / (high - low)

    high_tier = np.array([t in SR_OR_ABOVE for t in RARITY_ORDER])
    p_high = base[high_tier].sum()
    p_miss = (1 - p_high) ** 3

    guaranteed = (1 - p_miss) * base
    if p_high > 0:
        guaranteed[high_tier] += p_miss * base[high_tier] / p_high

    slot = (3 * base + guaranteed) / 4
    return pd.Series(slot, index=TIERS, name='expected')


def format_tally(df, expected=None):
    """String table for display: 1,234 counts, ~25.0% percentages."""
    out = pd.DataFrame(index=df.index)
    out['count'] = [f"{int(c):,}" for c in df['count']]
    out['percent'] = ['N/A' if pd.isna(p) else f"~{p:.1f}%" for p in df['percent']]
    if expected is not None:
        exp = expected.reindex(df.index)
        out['expected'] = ['N/A' if pd.isna(p) else f"~{p * 100:.1f}%" for p in exp]
    return out
