#!/usr/bin/env python3
"""Farm planner tool registry."""

TOOLS = [
    {
        "module": "apps.cli.commands.plan",
        "alias": "plan",
        "desc": "Plan crop placement from season, farm size, layout and seeds",
        "usage": "farmplan plan [--season S] [--size WxH] [--ratio 1:1] [--seeds carrot=8,potato=8] [--seed N] [--json]",
    },
    {
        "module": "apps.cli.commands.combos",
        "alias": "combos",
        "desc": "List catalog combos per season and layout",
        "usage": "farmplan combos [--season S] [--ratio R] [--json]",
    },
    {
        "module": "apps.cli.commands.doctor",
        "alias": "doctor",
        "desc": "Config and catalog coverage health check",
        "usage": "farmplan doctor [--enforce]",
    },
]

DEFAULT_ALIAS = "plan"


def get_tools():
    return TOOLS
