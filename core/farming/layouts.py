# -*- coding: utf-8 -*-
"""Layout ratios (sub-plot tiling patterns) and farm size.

A farm tile holds 3x3 planting holes. A layout ratio is a cell pattern over
one or more tiles; every hole carries the index of the combo binding planted
there, or None for a hole left empty. Footprint, binding count and the seed
cost per binding all derive from the pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from core.farming.errors import InvalidInput
from core.farming.plants import Season

HOLES_PER_TILE_SIDE = 3

EMPTY = None

PATTERNS: Dict[str, Tuple[Tuple[Optional[int], ...], ...]] = {
    "1:1": (
        (0, 0, 0),
        (0, EMPTY, 1),
        (1, 1, 1),
    ),
    "2:1": (
        (0, 0, 2, 2, 1, 1),
        (0, 0, 2, 2, 1, 1),
        (0, 0, 2, 2, 1, 1),
    ),
    "1:1:1": (
        (0, 1, 1, 1, 1, 0),
        (0, 1, 2, 2, 1, 0),
        (0, 2, 2, 2, 2, 0),
        (0, 2, 2, 2, 2, 0),
        (0, 1, 2, 2, 1, 0),
        (0, 1, 1, 1, 1, 0),
    ),
    "2:1:1": (
        (0, 0, 2, 2, 1, 1),
        (0, EMPTY, 2, 2, EMPTY, 1),
        (0, 3, 3, 3, 3, 1),
        (0, 3, 3, 3, 3, 1),
        (0, EMPTY, 2, 2, EMPTY, 1),
        (0, 0, 2, 2, 1, 1),
    ),
}

# Bindings sharing a kind hold the same plant (the "2" share of 2:1 / 2:1:1).
KIND_PATTERNS: Dict[str, Tuple[int, ...]] = {
    "1:1": (0, 1),
    "2:1": (0, 0, 1),
    "1:1:1": (0, 1, 2),
    "2:1:1": (0, 0, 1, 2),
}


@dataclass(frozen=True)
class FarmSize:
    """Farm dimensions in tiles."""

    width: int
    height: int

    def __post_init__(self) -> None:
        for field, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInput(f"Farm {field} must be an integer: {value!r}")
            if value <= 0:
                raise InvalidInput(f"Farm {field} cannot be 0")

    @classmethod
    def parse(cls, text: str) -> "FarmSize":
        """Parse "4x2" (also "4X2", "4*2", "4,2")."""
        raw = str(text or "").strip().lower()
        for sep in ("x", "*", ","):
            if sep in raw:
                parts = raw.split(sep)
                break
        else:
            parts = [raw]
        if len(parts) != 2:
            raise InvalidInput(f"Farm size expects WIDTHxHEIGHT: {text!r}")
        try:
            width, height = int(parts[0]), int(parts[1])
        except ValueError:
            raise InvalidInput(f"Farm size expects WIDTHxHEIGHT: {text!r}") from None
        return cls(width=width, height=height)


class LayoutRatio(Enum):
    ONE_ONE = "1:1"
    TWO_ONE = "2:1"
    ONE_ONE_ONE = "1:1:1"
    TWO_ONE_ONE = "2:1:1"

    @property
    def label(self) -> str:
        return self.value

    @property
    def pattern(self) -> Tuple[Tuple[Optional[int], ...], ...]:
        return PATTERNS[self.value]

    @property
    def kind_pattern(self) -> Tuple[int, ...]:
        return KIND_PATTERNS[self.value]

    @property
    def bindings(self) -> int:
        return len(self.kind_pattern)

    @property
    def kinds(self) -> int:
        return max(self.kind_pattern) + 1

    @property
    def cell_shape(self) -> Tuple[int, int]:
        """(columns, rows) of planting holes."""
        return len(self.pattern[0]), len(self.pattern)

    @property
    def tiles(self) -> Tuple[int, int]:
        cols, rows = self.cell_shape
        return cols // HOLES_PER_TILE_SIDE, rows // HOLES_PER_TILE_SIDE

    @property
    def min_seeds_per_crop(self) -> int:
        """Holes per binding; every binding of a ratio covers the same area."""
        return sum(1 for row in self.pattern for cell in row if cell == 0)

    def filled_size(self, size: FarmSize) -> int:
        tw, th = self.tiles
        return (size.width // tw) * (size.height // th)

    def filled_size_horizontal(self, size: FarmSize) -> int:
        return size.width // self.tiles[0]

    @classmethod
    def parse(cls, value: Any) -> "LayoutRatio":
        if isinstance(value, LayoutRatio):
            return value
        key = str(value or "").strip()
        for ratio in cls:
            if key == ratio.value or key.upper() == ratio.name or key.lower() == ratio.name.replace("_", "").lower():
                return ratio
        raise InvalidInput(f"Unknown crop layout: {value}")


RATIO_ORDER = (LayoutRatio.ONE_ONE, LayoutRatio.TWO_ONE, LayoutRatio.ONE_ONE_ONE, LayoutRatio.TWO_ONE_ONE)

SEASON_RATIOS: Dict[Season, Tuple[LayoutRatio, ...]] = {
    Season.AUTUMN: RATIO_ORDER,
    Season.SPRING: RATIO_ORDER,
    Season.WINTER: (LayoutRatio.ONE_ONE_ONE,),
    Season.SUMMER: RATIO_ORDER[1:],
}


def ratios_for_size(size: FarmSize) -> List[LayoutRatio]:
    """Ratios whose footprint divides the farm evenly."""
    if size.width % 2 == 0 and size.height % 2 == 0:
        return list(RATIO_ORDER)
    if size.width % 2 == 0:
        return [LayoutRatio.ONE_ONE, LayoutRatio.TWO_ONE]
    return [LayoutRatio.ONE_ONE]


def available_ratios(size: FarmSize, season: Season) -> List[LayoutRatio]:
    supported = SEASON_RATIOS.get(season, ())
    options = [r for r in ratios_for_size(size) if r in supported]
    if not options:
        raise InvalidInput("No available crop layouts")
    return options


def supported_pairs() -> Sequence[Tuple[Season, LayoutRatio]]:
    return [(season, ratio) for season in Season for ratio in SEASON_RATIOS[season]]
