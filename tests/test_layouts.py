"""Tests for layout ratios, farm sizes and ratio availability."""

from collections import Counter

import pytest

from core.farming.errors import InvalidInput
from core.farming.layouts import FarmSize, LayoutRatio, available_ratios, ratios_for_size
from core.farming.plants import Season

ONE_ONE = LayoutRatio.ONE_ONE
TWO_ONE = LayoutRatio.TWO_ONE
ONE_ONE_ONE = LayoutRatio.ONE_ONE_ONE
TWO_ONE_ONE = LayoutRatio.TWO_ONE_ONE


@pytest.mark.parametrize(
    "ratio, tiles, bindings, seeds",
    [
        (ONE_ONE, (1, 1), 2, 4),
        (TWO_ONE, (2, 1), 3, 6),
        (ONE_ONE_ONE, (2, 2), 3, 12),
        (TWO_ONE_ONE, (2, 2), 4, 8),
    ],
)
def test_ratio_shape(ratio, tiles, bindings, seeds) -> None:
    assert ratio.tiles == tiles
    assert ratio.bindings == bindings
    assert ratio.min_seeds_per_crop == seeds


@pytest.mark.parametrize("ratio", list(LayoutRatio))
def test_every_binding_covers_the_same_area(ratio) -> None:
    counts = Counter(cell for row in ratio.pattern for cell in row if cell is not None)
    assert set(counts) == set(range(ratio.bindings))
    assert set(counts.values()) == {ratio.min_seeds_per_crop}


def test_kind_patterns() -> None:
    assert ONE_ONE.kinds == 2
    assert TWO_ONE.kind_pattern == (0, 0, 1)
    assert TWO_ONE_ONE.kind_pattern == (0, 0, 1, 2)
    assert TWO_ONE_ONE.kinds == 3


def test_filled_size() -> None:
    size = FarmSize(4, 2)
    assert ONE_ONE.filled_size(size) == 8
    assert TWO_ONE.filled_size(size) == 4
    assert ONE_ONE_ONE.filled_size(size) == 2
    assert TWO_ONE_ONE.filled_size(size) == 2
    assert ONE_ONE.filled_size_horizontal(size) == 4
    assert TWO_ONE.filled_size_horizontal(size) == 2
    # odd leftovers are not planted
    assert ONE_ONE_ONE.filled_size(FarmSize(3, 3)) == 1


@pytest.mark.parametrize(
    "raw, expected",
    [("1:1", ONE_ONE), ("TwoOne", TWO_ONE), ("ONE_ONE_ONE", ONE_ONE_ONE), ("2:1:1", TWO_ONE_ONE)],
)
def test_ratio_parse(raw, expected) -> None:
    assert LayoutRatio.parse(raw) is expected


def test_ratio_parse_unknown() -> None:
    with pytest.raises(InvalidInput):
        LayoutRatio.parse("3:1")


def test_farm_size_validation() -> None:
    assert FarmSize.parse("4x2") == FarmSize(4, 2)
    assert FarmSize.parse(" 6X4 ") == FarmSize(6, 4)
    for bad in ("4", "ax2", "4x2x1", ""):
        with pytest.raises(InvalidInput):
            FarmSize.parse(bad)
    with pytest.raises(InvalidInput):
        FarmSize(0, 2)
    with pytest.raises(InvalidInput):
        FarmSize(2, -1)


def test_ratios_for_size_follow_parity() -> None:
    assert ratios_for_size(FarmSize(4, 4)) == [ONE_ONE, TWO_ONE, ONE_ONE_ONE, TWO_ONE_ONE]
    assert ratios_for_size(FarmSize(4, 3)) == [ONE_ONE, TWO_ONE]
    assert ratios_for_size(FarmSize(3, 4)) == [ONE_ONE]


def test_available_ratios_by_season() -> None:
    assert available_ratios(FarmSize(4, 4), Season.SPRING) == [ONE_ONE, TWO_ONE, ONE_ONE_ONE, TWO_ONE_ONE]
    assert available_ratios(FarmSize(4, 4), Season.WINTER) == [ONE_ONE_ONE]
    assert available_ratios(FarmSize(4, 3), Season.SUMMER) == [TWO_ONE]
    with pytest.raises(InvalidInput):
        available_ratios(FarmSize(3, 3), Season.WINTER)
    with pytest.raises(InvalidInput):
        available_ratios(FarmSize(3, 1), Season.SUMMER)


def test_empty_holes_use_named_constant() -> None:
    from core.farming import layouts

    assert not hasattr(layouts, "_")
    assert ONE_ONE.pattern[1][1] is layouts.EMPTY
    assert TWO_ONE_ONE.pattern[1].count(layouts.EMPTY) == 2
