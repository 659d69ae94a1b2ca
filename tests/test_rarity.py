import pytest

from card_flip_sim.config import SimulationConfig
from card_flip_sim.rarity import Rarity, classify, draw_rarity, includes_sr_or_above, is_sr_or_above


@pytest.mark.parametrize("value, expected", [
    (1, Rarity.UR),
    (70, Rarity.UR),
    (71, Rarity.SR),
    (438, Rarity.SR),
    (439, Rarity.R),
    (688, Rarity.R),
    (689, Rarity.N),
    (999, Rarity.N),
])
def test_classify_boundaries(value, expected):
    assert classify(value) is expected


def test_classify_custom_thresholds():
    assert classify(5, (5, 6, 7)) is Rarity.UR
    assert classify(6, (5, 6, 7)) is Rarity.SR
    assert classify(8, (5, 6, 7)) is Rarity.N


def test_draw_rarity_covers_all_tiers(source):
    config = SimulationConfig()
    seen = {draw_rarity(source, config) for _ in range(2000)}
    assert seen == set(Rarity)


def test_sr_or_above_predicates():
    assert is_sr_or_above(Rarity.UR)
    assert is_sr_or_above(Rarity.SR)
    assert not is_sr_or_above(Rarity.R)
    assert includes_sr_or_above([Rarity.N, Rarity.R, Rarity.SR])
    assert not includes_sr_or_above([Rarity.N, Rarity.R, Rarity.N])
    assert not includes_sr_or_above([])


def test_rarity_is_plain_string():
    assert Rarity.UR == 'UR'
    assert str(Rarity.N) == 'N'
