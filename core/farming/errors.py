# -*- coding: utf-8 -*-
"""Planner error taxonomy."""

from __future__ import annotations

from typing import Any


class PlannerError(Exception):
    """Base class for farm planning failures."""


class InvalidInput(PlannerError, ValueError):
    """Bad farm size, season, ratio, plant id or seed count."""


class NoCombosAvailable(PlannerError):
    def __init__(self, season: Any, ratio: Any):
        self.season = season
        self.ratio = ratio
        season_label = getattr(season, "label", season)
        ratio_label = getattr(ratio, "label", ratio)
        super().__init__(f"No crops for season '{season_label}' and layout '{ratio_label}'")
