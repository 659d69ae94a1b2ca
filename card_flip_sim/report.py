from card_flip_sim.results import format_tally


def ruleset_notice(config):
    costs = config.cost_schedule
    return f"""
== Card Flipping Simulator ==

Notes:
- Each strategy starts with {config.initial_budget:,} items
- Drawing a card costs {', '.join(f'{c}' for c in costs)} items in turn, resetting to {costs[0]} after a shuffle
- If the remaining items can't keep up a strategy (e.g. draw 2 then shuffle), the set is shuffled.
  The run ends once not even a single card can be drawn
- A shuffle deals 4 new cards, at least one of them SR or above (pity). Shuffling is free
- The pity rule is simulated as follows, which may differ from the actual game:
    - 3 cards are dealt at the normal rates
    - if those 3 include SR or above, the 4th is dealt at the normal rates
    - otherwise the 4th is redealt until it is SR or above
    - the 4 cards are then put in random order
- Because of that random order, which position you draw from makes no difference here
    - if the real game always placed the guaranteed card on the right, drawing from the right would be better
""".strip()


def render_result(title, tally, expected=None):
    table = format_tally(tally, expected)
    return f"\n{title}\n{table.to_string()}"
