#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""List combo catalog entries per season and layout."""

from __future__ import annotations

import argparse
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table

from apps.cli.cli_common import dump_json, plants_text, print_err
from core.farming import LayoutRatio, PlannerError, Season, default_catalog
from core.farming.catalog import combo_net
from core.farming.layouts import SEASON_RATIOS
from core.schemas.meta import build_meta

console = Console()


def _pairs(season: Optional[str], ratio: Optional[str]):
    seasons = [Season.parse(season)] if season else list(Season)
    wanted = LayoutRatio.parse(ratio) if ratio else None
    for s in seasons:
        for r in SEASON_RATIOS[s]:
            if wanted is None or r == wanted:
                yield s, r


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="farmplan combos", description="List catalog combos.")
    p.add_argument("--season", default=None, help="Season filter")
    p.add_argument("--ratio", default=None, help="Layout filter (1:1 / 2:1 / 1:1:1 / 2:1:1)")
    p.add_argument("--json", action="store_true", help="Output JSON")
    args = p.parse_args(argv)

    catalog = default_catalog()
    try:
        pairs = list(_pairs(args.season, args.ratio))
    except PlannerError as exc:
        print_err(console, exc)
        return 2

    if args.json:
        doc: Dict[str, Any] = {"meta": build_meta(tool="farmplan combos"), "catalog": {}}
        for season, ratio in pairs:
            combos = catalog.lookup(season, ratio)
            doc["catalog"].setdefault(season.value, {})[ratio.label] = [[p.plant_id for p in c] for c in combos]
        dump_json(doc)
        return 0

    if not pairs:
        console.print("[yellow]No supported season/layout pair matches the filters[/yellow]")
        return 0

    for season, ratio in pairs:
        combos = catalog.lookup(season, ratio)
        table = Table(
            title=f"{season.label} | {ratio.label} | {ratio.min_seeds_per_crop} seeds per binding",
            box=None,
            header_style="bold cyan",
        )
        table.add_column("#", justify="right", style="dim", width=4)
        table.add_column("Plants")
        table.add_column("Net", style="dim")
        for idx, combo in enumerate(combos, start=1):
            table.add_row(str(idx), plants_text(combo), str(list(combo_net(combo))))
        if not combos:
            table.add_row("-", "[yellow]no combos[/yellow]", "")
        console.print(table)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
