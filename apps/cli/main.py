#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Unified CLI dispatcher for the farm planner."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import List, Optional, Tuple

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def _print_tools() -> None:
    from rich.console import Console
    from rich.table import Table

    from apps.cli.registry import get_tools

    table = Table(title="farmplan tools", box=None, header_style="bold cyan")
    table.add_column("Alias", style="bold")
    table.add_column("Description")
    table.add_column("Usage", style="dim")
    for tool in get_tools():
        table.add_row(tool["alias"], tool["desc"], tool["usage"])
    Console().print(table)


def _resolve_tool(alias: Optional[str]) -> Tuple[Optional[str], bool]:
    """Return (module, consumed_alias)."""
    from apps.cli.registry import DEFAULT_ALIAS, get_tools

    tools = get_tools()
    by_alias = {t["alias"]: t["module"] for t in tools}

    key = str(alias or "").strip()
    if not key or key.startswith("-"):
        return by_alias[DEFAULT_ALIAS], False
    if key in by_alias:
        return by_alias[key], True
    return None, True


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(argv) if argv is not None else list(sys.argv[1:])
    alias = argv[0] if argv else None
    if alias in ("help", "--tools"):
        _print_tools()
        return 0

    module_name, consumed = _resolve_tool(alias)
    if module_name is None:
        print(f"ERR: unknown tool '{alias}'")
        _print_tools()
        return 2
    if consumed:
        argv = argv[1:]

    module = importlib.import_module(module_name)
    return int(module.main(argv) or 0)


if __name__ == "__main__":
    raise SystemExit(main())
