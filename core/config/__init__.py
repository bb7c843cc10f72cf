# -*- coding: utf-8 -*-
from core.config.loader import DEFAULT_CONFIG_PATH, PlannerConfig, resolve_config  # noqa: F401
