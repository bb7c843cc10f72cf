"""Tests for the combo catalog (perfect nutrient complements)."""

from core.farming.catalog import ComboCatalog, build_combos, combo_net, default_catalog, is_balanced
from core.farming.layouts import SEASON_RATIOS, LayoutRatio
from core.farming.plants import Plant, Season

P = Plant


def test_every_default_combo_is_in_season_and_balanced() -> None:
    catalog = default_catalog()
    assert len(catalog) > 0
    for season, ratio in catalog.keys():
        assert ratio in SEASON_RATIOS[season]
        for combo in catalog.lookup(season, ratio):
            assert len(combo) == ratio.bindings
            assert all(p.in_season(season) for p in combo)
            assert is_balanced(combo), combo


def test_spring_one_one_pairs() -> None:
    combos = default_catalog().lookup(Season.SPRING, LayoutRatio.ONE_ONE)
    assert set(combos) == {
        (P.EGGPLANT, P.TOMA_ROOT),
        (P.TOMA_ROOT, P.EGGPLANT),
        (P.TOMA_ROOT, P.POTATO),
        (P.POTATO, P.TOMA_ROOT),
    }
    assert len(combos) == 4


def test_winter_only_supports_one_one_one() -> None:
    catalog = default_catalog()
    assert catalog.lookup(Season.WINTER, LayoutRatio.ONE_ONE) == ()
    assert catalog.lookup(Season.WINTER, LayoutRatio.TWO_ONE) == ()
    combos = catalog.lookup(Season.WINTER, LayoutRatio.ONE_ONE_ONE)
    assert len(combos) == 12
    assert {frozenset(c) for c in combos} == {
        frozenset({P.CARROT, P.ASPARAGUS, P.POTATO}),
        frozenset({P.PUMPKIN, P.ASPARAGUS, P.POTATO}),
    }


def test_summer_excludes_one_one() -> None:
    assert default_catalog().lookup(Season.SUMMER, LayoutRatio.ONE_ONE) == ()
    assert build_combos(Season.SUMMER, LayoutRatio.ONE_ONE) == []


def test_two_one_binds_the_major_plant_twice() -> None:
    combos = default_catalog().lookup(Season.SPRING, LayoutRatio.TWO_ONE)
    assert set(combos) == {
        (P.TOMA_ROOT, P.TOMA_ROOT, P.DRAGON_FRUIT),
        (P.TOMA_ROOT, P.TOMA_ROOT, P.DURIAN),
        (P.TOMA_ROOT, P.TOMA_ROOT, P.POMEGRANATE),
    }


def test_two_one_one_shape() -> None:
    combos = default_catalog().lookup(Season.AUTUMN, LayoutRatio.TWO_ONE_ONE)
    assert combos
    for a, b, c, d in combos:
        assert a is b
        assert len({a, c, d}) == 3


def test_autumn_has_no_two_one_complement() -> None:
    assert default_catalog().lookup(Season.AUTUMN, LayoutRatio.TWO_ONE) == ()


def test_combo_net() -> None:
    assert combo_net((P.TOMA_ROOT, P.POTATO)) == (0, 0, 0)
    assert combo_net((P.CARROT, P.CORN)) == (-2, -2, 4)
    assert not is_balanced((P.CARROT, P.CORN))


def test_catalog_from_table_accepts_ids() -> None:
    catalog = ComboCatalog({("spring", "1:1"): [("carrot", "corn")], (Season.WINTER, LayoutRatio.ONE_ONE): []})
    assert catalog.lookup(Season.SPRING, LayoutRatio.ONE_ONE) == ((P.CARROT, P.CORN),)
    assert catalog.lookup(Season.WINTER, LayoutRatio.ONE_ONE) == ()
    assert catalog.lookup(Season.SUMMER, LayoutRatio.TWO_ONE) == ()
    assert len(catalog) == 1


def test_catalog_order_is_stable() -> None:
    a = ComboCatalog.from_plants()
    b = ComboCatalog.from_plants()
    for key in a.keys():
        assert a.lookup(*key) == b.lookup(*key)
