# -*- coding: utf-8 -*-
"""Farm planning: plants, layout ratios, combo catalog, seed allocation, grid."""

from core.farming.allocator import Allocation, allocate, plan_allocation  # noqa: F401
from core.farming.catalog import Combo, ComboCatalog, default_catalog  # noqa: F401
from core.farming.errors import InvalidInput, NoCombosAvailable, PlannerError  # noqa: F401
from core.farming.grid import compose, grid_zip, render_plot  # noqa: F401
from core.farming.layouts import FarmSize, LayoutRatio, available_ratios  # noqa: F401
from core.farming.plants import Plant, Season, normalize_inventory, used_plants  # noqa: F401
