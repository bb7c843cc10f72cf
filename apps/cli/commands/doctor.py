#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from apps.cli.cli_common import CONFIG_PATH, PROJECT_ROOT
from core.config import resolve_config
from core.farming import LayoutRatio, PlannerError, Season, default_catalog
from core.farming.layouts import RATIO_ORDER, SEASON_RATIOS
from core.version import versions

console = Console()


def _status(level: str) -> str:
    if level == "PASS":
        return "[green]PASS[/green]"
    if level == "WARN":
        return "[yellow]WARN[/yellow]"
    return "[red]FAIL[/red]"


def _check_config(path: Path) -> Tuple[str, str, str]:
    if not path.is_file():
        return "WARN", str(path), "Optional: create conf/settings.ini to set defaults"
    try:
        cfg = resolve_config(config_path=path)
    except PlannerError as exc:
        return "FAIL", str(exc), "Fix the value in conf/settings.ini"
    season = cfg.default_season.value if cfg.default_season else "ask"
    seed = cfg.shuffle_seed if cfg.shuffle_seed is not None else "random"
    return "PASS", f"season={season} seed={seed} color={cfg.color} log={cfg.log_level}", ""


def _coverage_table() -> Tuple[Table, int]:
    catalog = default_catalog()
    table = Table(title="Catalog coverage (combos)", box=None, header_style="bold cyan")
    table.add_column("Season", style="bold")
    for ratio in RATIO_ORDER:
        table.add_column(ratio.label, justify="right")
    empty = 0
    for season in Season:
        row = [season.label]
        for ratio in RATIO_ORDER:
            if ratio not in SEASON_RATIOS[season]:
                row.append("[dim]-[/dim]")
                continue
            count = len(catalog.lookup(season, ratio))
            if not count:
                empty += 1
                row.append("[yellow]0[/yellow]")
            else:
                row.append(str(count))
        table.add_row(*row)
    return table, empty


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="farmplan doctor", description="Farm planner health check")
    p.add_argument("--enforce", action="store_true", help="exit non-zero on failures (CI)")
    p.add_argument("--strict", action="store_true", help="treat WARN as FAIL (only when --enforce)")
    args = p.parse_args(argv)

    ver = versions()
    console.print(
        Panel(
            f"[bold cyan]Farm Planner Doctor[/bold cyan]\n"
            f"version {ver['project_version']} | catalog {ver['catalog_version']}",
            border_style="cyan",
        )
    )

    table = Table(title="Health Checks", box=None, show_header=True, header_style="bold cyan")
    table.add_column("Check", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Details", style="dim")
    table.add_column("Fix Hint", style="green")

    fail = 0
    warn = 0

    level, details, fix = _check_config(CONFIG_PATH)
    table.add_row("conf/settings.ini", _status(level), details, fix)
    if level == "FAIL":
        fail += 1
    elif level == "WARN":
        warn += 1

    coverage, empty = _coverage_table()
    level = "PASS" if not empty else "WARN"
    table.add_row(
        "catalog",
        _status(level),
        f"{len(default_catalog())} combos, {empty} supported pair(s) without combos",
        "Those layouts abort with 'No crops' in that season" if empty else "",
    )
    if empty:
        warn += 1

    for ratio in LayoutRatio:
        tw, th = ratio.tiles
        table.add_row(
            f"layout {ratio.label}",
            _status("PASS"),
            f"{tw}x{th} tiles, {ratio.bindings} bindings, {ratio.min_seeds_per_crop} seeds each",
            "",
        )

    console.print(table)
    console.print(coverage)
    console.print(f"[dim]Root: {PROJECT_ROOT} | Summary: FAIL={fail}, WARN={warn}[/dim]")

    if not args.enforce:
        return 0
    if fail:
        return 2
    if args.strict and warn:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
