# -*- coding: utf-8 -*-
"""Seed allocation engine (randomized first-fit greedy).

The candidate combos for (season, ratio) are shuffled once per run. Every
plot slot then scans that fixed order and commits the first combo whose
bindings can all be paid from the remaining seeds. A combo that cannot be
paid is flagged non-viable for the rest of the run: seeds only ever go down,
so it can never become affordable again. A slot whose scan finds nothing
stays empty and is not revisited.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from core.farming.catalog import Combo, ComboCatalog, default_catalog
from core.farming.errors import InvalidInput, NoCombosAvailable
from core.farming.layouts import FarmSize, LayoutRatio
from core.farming.plants import Plant, Season, normalize_inventory, used_plants

logger = logging.getLogger(__name__)

Shuffle = Callable[[List[Combo]], None]


@dataclass
class Allocation:
    season: Season
    ratio: LayoutRatio
    size: FarmSize
    capacity: int
    row_width: int
    combos: List[Combo]
    initial: Dict[Plant, int]
    remaining: Dict[Plant, int]
    candidates: int = 0
    pruned: int = 0
    unfilled: int = field(init=False)

    def __post_init__(self) -> None:
        self.unfilled = self.capacity - len(self.combos)

    def used_plants(self) -> List[Plant]:
        return used_plants(self.combos)

    def consumed(self) -> Dict[Plant, int]:
        return {p: self.initial[p] - self.remaining[p] for p in Plant if self.initial[p] != self.remaining[p]}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "season": self.season.value,
            "ratio": self.ratio.label,
            "farm": {"width": self.size.width, "height": self.size.height},
            "capacity": self.capacity,
            "row_width": self.row_width,
            "filled": len(self.combos),
            "unfilled": self.unfilled,
            "candidates": self.candidates,
            "pruned": self.pruned,
            "seeds_per_crop": self.ratio.min_seeds_per_crop,
            "plots": [[p.plant_id for p in combo] for combo in self.combos],
            "used": [p.plant_id for p in self.used_plants()],
            "seeds": {
                p.plant_id: {"initial": self.initial[p], "remaining": self.remaining[p]}
                for p in Plant
                if self.initial[p] or self.remaining[p]
            },
        }


def _try_consume(seeds: Mapping[Plant, int], combo: Sequence[Plant], cost: int) -> Optional[Dict[Plant, int]]:
    """Pay `cost` seeds per binding on a copy; None when any binding falls short."""
    trial = dict(seeds)
    for plant in combo:
        current = trial.get(plant, 0)
        if current < cost:
            return None
        trial[plant] = current - cost
    return trial


def _check_size(size: Any) -> FarmSize:
    if not isinstance(size, FarmSize):
        raise InvalidInput(f"Farm size must be a FarmSize: {size!r}")
    return size


def plan_allocation(
    season: Season,
    size: FarmSize,
    ratio: LayoutRatio,
    seeds: Optional[Mapping[Any, int]] = None,
    catalog: Optional[ComboCatalog] = None,
    *,
    rng: Optional[random.Random] = None,
    shuffle: Optional[Shuffle] = None,
) -> Allocation:
    size = _check_size(size)
    season = Season.parse(season)
    ratio = LayoutRatio.parse(ratio)
    initial = normalize_inventory(seeds)
    catalog = catalog if catalog is not None else default_catalog()

    capacity = ratio.filled_size(size)
    candidates = list(catalog.lookup(season, ratio))
    if not candidates:
        raise NoCombosAvailable(season, ratio)

    if shuffle is not None and rng is not None:
        raise InvalidInput("Pass either rng or shuffle, not both")
    if shuffle is not None:
        shuffle(candidates)
    else:
        (rng or random.Random()).shuffle(candidates)

    cost = ratio.min_seeds_per_crop
    viable = [True] * len(candidates)
    remaining = dict(initial)
    chosen: List[Combo] = []

    for slot in range(capacity):
        for idx, combo in enumerate(candidates):
            if not viable[idx]:
                continue
            trial = _try_consume(remaining, combo, cost)
            if trial is None:
                viable[idx] = False
                logger.debug("slot %d: pruned %s", slot, "/".join(p.plant_id for p in combo))
                continue
            remaining = trial
            chosen.append(combo)
            logger.debug("slot %d: planted %s", slot, "/".join(p.plant_id for p in combo))
            break
        else:
            logger.debug("slot %d: no affordable combo, left empty", slot)

    pruned = viable.count(False)
    logger.info(
        "Allocated %d/%d plots (%s, %s, %d candidates, %d pruned)",
        len(chosen),
        capacity,
        season.value,
        ratio.label,
        len(candidates),
        pruned,
    )
    return Allocation(
        season=season,
        ratio=ratio,
        size=size,
        capacity=capacity,
        row_width=ratio.filled_size_horizontal(size),
        combos=chosen,
        initial=initial,
        remaining=remaining,
        candidates=len(candidates),
        pruned=pruned,
    )


def allocate(
    season: Season,
    size: FarmSize,
    ratio: LayoutRatio,
    seeds: Optional[Mapping[Any, int]] = None,
    catalog: Optional[ComboCatalog] = None,
    *,
    rng: Optional[random.Random] = None,
    shuffle: Optional[Shuffle] = None,
) -> List[Combo]:
    return plan_allocation(season, size, ratio, seeds, catalog, rng=rng, shuffle=shuffle).combos
