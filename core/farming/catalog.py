# -*- coding: utf-8 -*-
"""Combo catalog: (season, layout ratio) -> ordered combos.

The default catalog keeps perfect nutrient complements only: for every
supported (season, ratio) pair, each ordered choice of distinct in-season
plants is expanded over the ratio's bindings and kept when the summed net
nutrient deltas are zero on every channel.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from itertools import permutations
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from core.farming.layouts import SEASON_RATIOS, LayoutRatio, supported_pairs
from core.farming.plants import Plant, Season, plants_in_season

logger = logging.getLogger(__name__)

Combo = Tuple[Plant, ...]
CatalogKey = Tuple[Season, LayoutRatio]


def expand_kinds(ratio: LayoutRatio, kinds: Sequence[Plant]) -> Combo:
    return tuple(kinds[k] for k in ratio.kind_pattern)


def combo_net(combo: Iterable[Plant]) -> Tuple[int, int, int]:
    totals = [0, 0, 0]
    for plant in combo:
        delta = plant.net_delta
        for i in range(3):
            totals[i] += delta[i]
    return totals[0], totals[1], totals[2]


def is_balanced(combo: Iterable[Plant]) -> bool:
    return all(v == 0 for v in combo_net(combo))


def build_combos(
    season: Season,
    ratio: LayoutRatio,
    *,
    plants: Optional[Sequence[Plant]] = None,
) -> List[Combo]:
    if ratio not in SEASON_RATIOS.get(season, ()):
        return []
    candidates = [p for p in (plants if plants is not None else plants_in_season(season)) if p.in_season(season)]
    combos: List[Combo] = []
    for kinds in permutations(candidates, ratio.kinds):
        combo = expand_kinds(ratio, kinds)
        if is_balanced(combo):
            combos.append(combo)
    return combos


class ComboCatalog:
    """Read-only lookup table of combos per (season, ratio)."""

    def __init__(self, table: Mapping[CatalogKey, Iterable[Sequence[Plant]]]):
        self._table: Dict[CatalogKey, Tuple[Combo, ...]] = {}
        for (season, ratio), combos in table.items():
            key = (Season.parse(season), LayoutRatio.parse(ratio))
            self._table[key] = tuple(tuple(Plant.parse(p) for p in combo) for combo in combos)

    @classmethod
    def from_plants(cls, plants: Optional[Sequence[Plant]] = None) -> "ComboCatalog":
        table: Dict[CatalogKey, List[Combo]] = {}
        for season, ratio in supported_pairs():
            combos = build_combos(season, ratio, plants=plants)
            if combos:
                table[(season, ratio)] = combos
        logger.debug("Built combo catalog: %d pairs, %d combos", len(table), sum(len(v) for v in table.values()))
        return cls(table)

    def lookup(self, season: Season, ratio: LayoutRatio) -> Tuple[Combo, ...]:
        return self._table.get((season, ratio), ())

    def keys(self) -> List[CatalogKey]:
        return list(self._table.keys())

    def __len__(self) -> int:
        return sum(len(v) for v in self._table.values())


@lru_cache(maxsize=1)
def default_catalog() -> ComboCatalog:
    return ComboCatalog.from_plants()
