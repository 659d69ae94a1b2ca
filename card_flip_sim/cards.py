import logging

from card_flip_sim.rarity import draw_rarity, includes_sr_or_above, is_sr_or_above

logger = logging.getLogger(__name__)

CARDS_PER_SET = 4


class PityGuaranteeError(RuntimeError):
    """The guaranteed slot never came up SR or above within the redraw cap."""


def permute(cards, source):
    """Fisher-Yates shuffle. Returns a new tuple, the input is left alone."""
    cards = list(cards)
    for i in range(len(cards) - 1, 0, -1):
        r = source.index(i + 1)
        cards[i], cards[r] = cards[r], cards[i]
    return tuple(cards)


def shuffle(source, config):
    """Deal a fresh set of 4 cards with at least one SR or above.

    Three cards are drawn at the normal rates. If none of them is SR or
    above, the 4th is redrawn until it is. The set is then put in random
    order so the guaranteed slot has no fixed position.
    """
    cards = [draw_rarity(source, config) for _ in range(CARDS_PER_SET - 1)]

    if includes_sr_or_above(cards):
        cards.append(draw_rarity(source, config))
    else:
        # Pity slot
        for _ in range(config.max_pity_redraws):
            last_card = draw_rarity(source, config)
            if is_sr_or_above(last_card):
                break
        else:
            logger.error("Pity slot failed after %d redraws", config.max_pity_redraws)
            raise PityGuaranteeError(
                f"no SR or above card after {config.max_pity_redraws} redraws"
            )
        cards.append(last_card)

    return permute(cards, source)
