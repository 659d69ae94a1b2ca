import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from card_flip_sim.results import TIERS


def plot_distribution(results, expected=None):
    """Grouped bar chart of rarity percentage per strategy.

    results maps a strategy label to its tally. Returns the figure, saving
    it is up to the caller.
    """
    rows = []
    for label, tally in results.items():
        for tier in TIERS:
            rows.append({'strategy': label, 'rarity': tier, 'percent': tally.loc[tier, 'percent']})
    df = pd.DataFrame(rows)

    sns.set_style("whitegrid")
    fig, ax = plt.subplots(figsize=(12, 6))
    sns.barplot(data=df, x='rarity', y='percent', hue='strategy', order=TIERS, ax=ax)

    if expected is not None:
        for i, tier in enumerate(TIERS):
            ax.hlines(expected[tier] * 100, i - 0.4, i + 0.4, colors='black', linestyles='--')

    ax.set_title('Rarity Distribution by Shuffle Strategy')
    ax.set_xlabel('Rarity')
    ax.set_ylabel('Share of Draws (%)')
    ax.legend()
    fig.tight_layout()
    return fig
