# -*- coding: utf-8 -*-
"""Planner config loader (conf/settings.ini + environment)."""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from core.farming.errors import InvalidInput
from core.farming.plants import Season

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "conf" / "settings.ini"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class PlannerConfig:
    default_season: Optional[Season] = None
    shuffle_seed: Optional[int] = None
    color: bool = True
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level, logging.WARNING)


def load_ini(path: Path) -> configparser.ConfigParser:
    cfg = configparser.ConfigParser()
    if path.exists():
        cfg.read(path, encoding="utf-8")
    return cfg


def _cfg_get(cfg: configparser.ConfigParser, section: str, key: str) -> Optional[str]:
    val = cfg.get(section, key, fallback="").strip()
    return val or None


def _parse_seed(val: Optional[str]) -> Optional[int]:
    if val is None or str(val).strip() == "":
        return None
    try:
        return int(str(val).strip())
    except ValueError:
        raise InvalidInput(f"SHUFFLE_SEED must be an integer: {val!r}") from None


def _parse_bool(val: Optional[str], default: bool) -> bool:
    if val is None:
        return default
    key = str(val).strip().lower()
    if key in ("1", "true", "yes", "on"):
        return True
    if key in ("0", "false", "no", "off"):
        return False
    raise InvalidInput(f"Expected a boolean: {val!r}")


def _parse_level(val: Optional[str]) -> str:
    level = str(val or "WARNING").strip().upper()
    if level not in LOG_LEVELS:
        raise InvalidInput(f"Unknown log level: {val!r}")
    return level


def resolve_config(
    *,
    config_path: Path = DEFAULT_CONFIG_PATH,
    season: Optional[str] = None,
    shuffle_seed: Optional[int] = None,
    log_level: Optional[str] = None,
) -> PlannerConfig:
    cfg = load_ini(config_path)

    season = season or os.environ.get("FARMPLAN_SEASON") or _cfg_get(cfg, "PLANNER", "DEFAULT_SEASON")
    seed_raw = shuffle_seed if shuffle_seed is not None else (
        os.environ.get("FARMPLAN_SEED") or _cfg_get(cfg, "PLANNER", "SHUFFLE_SEED")
    )
    log_level = log_level or os.environ.get("FARMPLAN_LOG_LEVEL") or _cfg_get(cfg, "LOGGING", "LEVEL")

    return PlannerConfig(
        default_season=Season.parse(season) if season else None,
        shuffle_seed=_parse_seed(seed_raw),
        color=_parse_bool(_cfg_get(cfg, "DISPLAY", "COLOR"), True),
        log_level=_parse_level(log_level),
    )
