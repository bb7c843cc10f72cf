# -*- coding: utf-8 -*-
"""Project and catalog version helpers."""

from __future__ import annotations

import hashlib
import json
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Dict

DIST_NAME = "wagstaff-farmplan"


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


@lru_cache(maxsize=1)
def _load_version_file() -> Dict[str, str]:
    path = _project_root() / "conf" / "version.json"
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    if not isinstance(data, dict):
        return {}
    return {k: v.strip() for k, v in data.items() if isinstance(v, str) and v.strip()}


def project_version() -> str:
    ver = _load_version_file().get("project_version")
    if ver:
        return ver
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "unknown"


@lru_cache(maxsize=1)
def catalog_version() -> str:
    """Short digest of the default combo catalog; changes whenever plant
    data or layout patterns change."""
    from core.farming.catalog import default_catalog

    catalog = default_catalog()
    h = hashlib.sha256()
    for season, ratio in catalog.keys():
        h.update(f"{season.value}|{ratio.label}".encode("utf-8"))
        for combo in catalog.lookup(season, ratio):
            h.update((",".join(p.plant_id for p in combo) + ";").encode("utf-8"))
    return h.hexdigest()[:12]


def versions() -> Dict[str, str]:
    return {
        "project_version": project_version(),
        "catalog_version": catalog_version(),
    }
