"""
Configuration layer for edgegraph.

Configuration is explicit (passed to each graph, never global) and
typed. Defaults live in ``constants.DEFAULTS`` and can be overridden
through ``EDGEGRAPH_*`` environment variables via dynaconf.
"""

from edgegraph.config.settings import GraphConfig
from edgegraph.config.loader import load_graph_config, load_settings

__all__ = [
    "GraphConfig",
    "load_graph_config",
    "load_settings",
]
