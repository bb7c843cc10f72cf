#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""apps/cli/commands/plan.py

Farm plan front-end.

Notes
- Thin UI layer: collects season, farm size, layout and seed counts (flags
  first, interactive prompts for anything missing), then hands off to
  `core.farming`.
- Only in-season plants are asked for; the rest default to 0 seeds.
"""

from __future__ import annotations

import argparse
import logging
import random
import re
from typing import Dict, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from apps.cli.cli_common import CONFIG_PATH, dump_json, plant_text, print_err, setup_logging
from core.config import PlannerConfig, resolve_config
from core.farming import (
    Allocation,
    FarmSize,
    InvalidInput,
    LayoutRatio,
    Plant,
    PlannerError,
    Season,
    available_ratios,
    compose,
    default_catalog,
    normalize_inventory,
    plan_allocation,
)
from core.farming.plants import plants_in_season
from core.schemas.meta import build_meta

console = Console()
logger = logging.getLogger(__name__)


def _parse_seed_spec(spec: str) -> Dict[Plant, int]:
    """Parse seed counts into {Plant: count}.

    Accepted examples
    - "carrot=12,potato=8"
    - "carrot:12 toma_root:4"
    - "carrot_seeds=12" / "farm_plant_carrot=12"
    """
    out: Dict[Plant, int] = {}
    s = (spec or "").strip()
    if not s:
        return out
    for token in re.split(r"[,\s]+", s):
        if not token:
            continue
        m = re.fullmatch(r"([A-Za-z_\-]+)\s*[:=]\s*(-?[0-9]+)", token)
        if not m:
            raise InvalidInput(f"Bad seed count '{token}' (expected name=count)")
        plant = Plant.parse(m.group(1))
        out[plant] = out.get(plant, 0) + int(m.group(2))
    return out


def _ask_season(default: Optional[Season]) -> Season:
    choices = [s.value for s in Season]
    value = Prompt.ask(
        "Enter current season",
        console=console,
        choices=choices,
        default=(default or Season.AUTUMN).value,
    )
    return Season.parse(value)


def _ask_dimension(label: str) -> int:
    while True:
        value = IntPrompt.ask(f"Enter farm {label}", console=console)
        if value > 0:
            return value
        console.print("[red]Input cannot be 0[/red]")


def _ask_ratio(options: Sequence[LayoutRatio]) -> LayoutRatio:
    if len(options) == 1:
        return options[0]
    value = Prompt.ask(
        "Enter preferred crop layout",
        console=console,
        choices=[r.label for r in options],
        default=options[0].label,
    )
    return LayoutRatio.parse(value)


def _ask_seeds(season: Season) -> Dict[Plant, int]:
    seeds: Dict[Plant, int] = {}
    for plant in plants_in_season(season):
        while True:
            value = IntPrompt.ask(
                f"Enter number of {plant.display_name} Seeds ({plant.seed_name})",
                console=console,
                default=0,
            )
            if value >= 0:
                break
            console.print("[red]Seed count cannot be negative[/red]")
        if value:
            seeds[plant] = value
    return seeds


def layout_options(size: FarmSize, season: Season) -> List[LayoutRatio]:
    """Layouts that fit the farm and have at least one combo this season."""
    catalog = default_catalog()
    options = [r for r in available_ratios(size, season) if catalog.lookup(season, r)]
    if not options:
        raise InvalidInput(f"No available crop layouts for a {size.width}x{size.height} farm in {season.value}")
    return options


def _resolve_size(args: argparse.Namespace) -> Optional[FarmSize]:
    if args.size:
        return FarmSize.parse(args.size)
    if args.width is not None or args.height is not None:
        width = args.width if args.width is not None else _ask_dimension("width")
        height = args.height if args.height is not None else _ask_dimension("height")
        return FarmSize(width=width, height=height)
    return None


def collect_inputs(
    args: argparse.Namespace, cfg: PlannerConfig
) -> Tuple[Season, FarmSize, LayoutRatio, Dict[Plant, int]]:
    if args.season:
        season = Season.parse(args.season)
    elif cfg.default_season is not None:
        season = cfg.default_season
    else:
        season = _ask_season(None)

    size = _resolve_size(args)
    if size is None:
        size = FarmSize(width=_ask_dimension("width"), height=_ask_dimension("height"))

    options = layout_options(size, season)
    if args.ratio:
        ratio = LayoutRatio.parse(args.ratio)
        if ratio not in options:
            allowed = ", ".join(r.label for r in options)
            raise InvalidInput(
                f"Layout {ratio.label} not available for a {size.width}x{size.height} farm in {season.value} (choose: {allowed})"
            )
    else:
        ratio = _ask_ratio(options)

    if args.seeds is not None:
        seeds = _parse_seed_spec(args.seeds)
    else:
        seeds = _ask_seeds(season)
    inventory = normalize_inventory(seeds)
    for plant, count in inventory.items():
        if count and not plant.in_season(season):
            logger.info("Ignoring %d %s seeds: out of season in %s", count, plant.display_name, season.value)
            inventory[plant] = 0
    return season, size, ratio, inventory


def _seed_table(allocation: Allocation) -> Table:
    table = Table(title="Seeds", box=None, header_style="bold cyan")
    table.add_column("Plant")
    table.add_column("Start", justify="right")
    table.add_column("Used", justify="right")
    table.add_column("Left", justify="right", style="dim")
    consumed = allocation.consumed()
    for plant in Plant:
        start = allocation.initial[plant]
        if not start:
            continue
        table.add_row(
            plant_text(plant),
            str(start),
            str(consumed.get(plant, 0)),
            str(allocation.remaining[plant]),
        )
    return table


def print_plan(allocation: Allocation, *, show_grid: bool = True) -> None:
    if show_grid:
        for line in compose(allocation.combos, allocation.ratio, allocation.size):
            console.print(line, soft_wrap=True)

    for plant in allocation.used_plants():
        console.print(plant_text(plant))

    console.print(
        f"[dim]{allocation.season.label} | layout {allocation.ratio.label} | "
        f"plots {len(allocation.combos)}/{allocation.capacity}[/dim]"
    )
    if allocation.unfilled:
        console.print(f"[yellow]{allocation.unfilled} plot(s) left empty: not enough seeds[/yellow]")
    if any(allocation.initial.values()):
        console.print(_seed_table(allocation))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="farmplan plan", description="Plan crop placement for a farm.")
    p.add_argument("--season", default=None, help="Season (autumn/winter/spring/summer)")
    p.add_argument("--size", default=None, help="Farm size in tiles, e.g. 4x2")
    p.add_argument("--width", type=int, default=None, help="Farm width in tiles")
    p.add_argument("--height", type=int, default=None, help="Farm height in tiles")
    p.add_argument("--ratio", default=None, help="Crop layout (1:1 / 2:1 / 1:1:1 / 2:1:1)")
    p.add_argument("--seeds", default=None, help='Seed counts, e.g. "carrot=12,potato=8"')
    p.add_argument("--seed", type=int, default=None, help="Shuffle seed for a reproducible plan")
    p.add_argument("--json", action="store_true", help="Output JSON")
    p.add_argument("--no-grid", action="store_true", help="Skip the farm grid")
    p.add_argument("--verbose", action="store_true", help="Debug logging")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = resolve_config(config_path=CONFIG_PATH, shuffle_seed=args.seed)
    except PlannerError as exc:
        print_err(console, exc)
        return 2
    setup_logging(logging.DEBUG if args.verbose else cfg.log_level_value)
    console.no_color = not cfg.color

    try:
        season, size, ratio, seeds = collect_inputs(args, cfg)
        rng = random.Random(cfg.shuffle_seed) if cfg.shuffle_seed is not None else None
        allocation = plan_allocation(season, size, ratio, seeds, rng=rng)
    except PlannerError as exc:
        print_err(console, exc)
        return 2

    if args.json:
        doc = {"meta": build_meta(tool="farmplan plan", seed=cfg.shuffle_seed)}
        doc.update(allocation.to_dict())
        if not args.no_grid:
            doc["grid"] = [line.plain for line in compose(allocation.combos, ratio, size)]
        dump_json(doc)
        return 0

    print_plan(allocation, show_grid=not args.no_grid)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
