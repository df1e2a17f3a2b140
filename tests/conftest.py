from __future__ import annotations

import pytest

from edgegraph.config.settings import GraphConfig
from edgegraph.graph.graph_store import EdgeListGraph


@pytest.fixture()
def graph() -> EdgeListGraph:
    return EdgeListGraph()


@pytest.fixture()
def checked_graph() -> EdgeListGraph:
    return EdgeListGraph(config=GraphConfig(check_invariants=True))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("EDGEGRAPH_CHECK_INVARIANTS", "EDGEGRAPH_DISPLAY_SORTED"):
        monkeypatch.delenv(name, raising=False)
