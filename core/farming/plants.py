# -*- coding: utf-8 -*-
"""Plant catalog and seasonal calendar.

Each plant carries its seed label, the seasons it may be planted in, a
render color (any `rich` style) and its nutrient consumption over the three
soil nutrients (growth formula, compost, manure).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from core.farming.errors import InvalidInput

S = 2  # low consumption
M = 4  # medium consumption
L = 8  # high consumption


class Season(Enum):
    AUTUMN = "autumn"
    WINTER = "winter"
    SPRING = "spring"
    SUMMER = "summer"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Any) -> "Season":
        if isinstance(value, Season):
            return value
        key = str(value or "").strip().lower()
        for season in cls:
            if season.value == key:
                return season
        raise InvalidInput(f"Unknown season: {value}")


class Plant(Enum):
    # id, name, seed label, seasons, color, consumption
    CARROT = ("carrot", "Carrot", "Oblong Seeds", ("autumn", "winter", "spring"), "dark_orange", (M, 0, 0))
    CORN = ("corn", "Corn", "Clustered Seeds", ("autumn", "spring", "summer"), "yellow", (0, M, 0))
    DRAGON_FRUIT = ("dragon_fruit", "Dragon Fruit", "Bulbous Seeds", ("spring", "summer"), "magenta", (0, 0, L))
    DURIAN = ("durian", "Durian", "Brittle Seed Pods", ("spring",), "dark_khaki", (0, 0, L))
    EGGPLANT = ("eggplant", "Eggplant", "Swirly Seeds", ("autumn", "spring"), "purple", (0, 0, M))
    POMEGRANATE = ("pomegranate", "Pomegranate", "Windblown Seeds", ("spring", "summer"), "red3", (0, 0, L))
    PUMPKIN = ("pumpkin", "Pumpkin", "Sharp Seeds", ("autumn", "winter"), "orange3", (M, 0, 0))
    WATERMELON = ("watermelon", "Watermelon", "Square Seeds", ("spring", "summer"), "green", (M, 0, 0))
    ASPARAGUS = ("asparagus", "Asparagus", "Tubular Seeds", ("winter", "spring"), "chartreuse3", (0, M, 0))
    TOMA_ROOT = ("toma_root", "Toma Root", "Spiky Seeds", ("autumn", "spring", "summer"), "bright_red", (S, S, 0))
    POTATO = ("potato", "Potato", "Fluffy Seeds", ("autumn", "winter", "spring"), "tan", (0, 0, M))
    ONION = ("onion", "Onion", "Pointy Seeds", ("autumn", "spring", "summer"), "plum3", (L, 0, 0))
    PEPPER = ("pepper", "Pepper", "Lumpy Seeds", ("autumn", "summer"), "red", (L, L, 0))
    GARLIC = ("garlic", "Garlic", "Seed Pods", ("autumn", "winter", "spring", "summer"), "white", (0, L, 0))

    def __init__(
        self,
        plant_id: str,
        display_name: str,
        seed_name: str,
        seasons: Tuple[str, ...],
        color: str,
        consume: Tuple[int, int, int],
    ):
        self.plant_id = plant_id
        self.display_name = display_name
        self.seed_name = seed_name
        self.seasons = frozenset(Season(s) for s in seasons)
        self.color = color
        self.consume = consume

    def in_season(self, season: Season) -> bool:
        return season in self.seasons

    @property
    def net_delta(self) -> Tuple[int, int, int]:
        """Soil change per planted hole: consumed nutrients are restored
        evenly over the channels the plant does not consume."""
        total = sum(self.consume)
        restore = [c == 0 for c in self.consume]
        restore_count = sum(1 for r in restore if r)
        restore_each = total // restore_count if restore_count else 0
        return tuple((-self.consume[i]) + (restore_each if restore[i] else 0) for i in range(3))

    @classmethod
    def parse(cls, value: Any) -> "Plant":
        if isinstance(value, Plant):
            return value
        pid = normalize_plant_id(value)
        plant = _BY_ID.get(pid)
        if plant is None:
            raise InvalidInput(f"Unknown plant id: {value}")
        return plant


def normalize_plant_id(plant_id: Any) -> str:
    pid = str(plant_id or "").strip().lower().replace(" ", "_").replace("-", "_")
    if pid.startswith("farm_plant_"):
        pid = pid[len("farm_plant_") :]
    if pid.endswith("_seeds"):
        pid = pid[: -len("_seeds")]
    return pid


_BY_ID: Dict[str, Plant] = {p.plant_id: p for p in Plant}


def plants_in_season(season: Season) -> List[Plant]:
    return [p for p in Plant if p.in_season(season)]


def normalize_inventory(counts: Optional[Mapping[Any, Any]] = None) -> Dict[Plant, int]:
    """Return a full Plant -> count mapping; unspecified plants get 0."""
    inventory: Dict[Plant, int] = {p: 0 for p in Plant}
    for key, value in (counts or {}).items():
        plant = Plant.parse(key)
        try:
            count = int(value)
        except (TypeError, ValueError):
            raise InvalidInput(f"Seed count for {plant.display_name} is not a number: {value!r}") from None
        if count < 0:
            raise InvalidInput(f"Seed count for {plant.display_name} cannot be negative: {count}")
        inventory[plant] += count
    return inventory


def used_plants(combos: Iterable[Iterable[Plant]]) -> List[Plant]:
    """Distinct plants across combos, in first-use order."""
    used: List[Plant] = []
    for combo in combos:
        for plant in combo:
            if plant not in used:
                used.append(plant)
    return used
