#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Shared helpers for CLI tools."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from core.farming.plants import Plant

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONF_DIR = PROJECT_ROOT / "conf"
CONFIG_PATH = CONF_DIR / "settings.ini"


def setup_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def print_err(console: Console, message: Any) -> None:
    console.print(f"[red]ERR: {message}[/red]", highlight=False)


def dump_json(doc: Dict[str, Any]) -> None:
    print(json.dumps(doc, ensure_ascii=False, indent=2))


def plant_text(plant: Plant, label: Optional[str] = None) -> Text:
    return Text(label or plant.display_name, style=plant.color)


def plants_text(plants: Iterable[Plant], sep: str = " / ") -> Text:
    return Text(sep).join(plant_text(p) for p in plants)
