#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Metadata block attached to JSON plan/catalog exports."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from core.version import versions

PLAN_SCHEMA = 1


def now_iso() -> str:
    return datetime.now().astimezone().isoformat(timespec="seconds")


def build_meta(
    *,
    tool: str,
    schema: int = PLAN_SCHEMA,
    seed: Optional[int] = None,
) -> Dict[str, Any]:
    meta: Dict[str, Any] = {
        "schema": int(schema),
        "generated": now_iso(),
        "tool": str(tool),
    }
    meta.update(versions())
    if seed is not None:
        meta["shuffle_seed"] = int(seed)
    return meta
