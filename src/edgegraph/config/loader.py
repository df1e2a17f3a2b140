from __future__ import annotations

import logging
from typing import Any

from dynaconf import Dynaconf

from edgegraph.config.constants import DEFAULTS
from edgegraph.config.settings import GraphConfig


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def load_settings(**overrides: Any) -> Dynaconf:
    """
    Build the settings object.

    Precedence, lowest first: DEFAULTS, EDGEGRAPH_* environment
    variables (and a .env file), explicit overrides.
    """
    settings = Dynaconf(
        envvar_prefix="EDGEGRAPH",
        load_dotenv=True,
        settings_files=[],
    )
    for key, value in DEFAULTS.items():
        # environment values are already loaded and take priority
        if settings.get(key) is None:
            settings.set(key, value)
    for key, value in overrides.items():
        settings.set(key.upper(), value)
    return settings


def load_graph_config(**overrides: Any) -> GraphConfig:
    settings = load_settings(**overrides)

    config = GraphConfig(
        check_invariants=_parse_bool(settings.get("CHECK_INVARIANTS", False)),
        display_sorted=_parse_bool(settings.get("DISPLAY_SORTED", False)),
    )
    logging.getLogger("edgegraph.config").debug("loaded %s", config)
    return config
