"""
edgegraph
=========

A minimal in-memory mutable directed graph with non-negative integer
edge weights and at most one edge per ordered vertex pair.

Core idea:
- Setting an edge to weight 0 deletes it; removing a vertex deletes
  every edge touching it.

Public API:
- EdgeListGraph
- GraphBuilder
- Edge
- InvalidWeight
"""

from edgegraph.graph.graph_schema import Edge, InvalidWeight
from edgegraph.graph.graph_base import Graph
from edgegraph.graph.graph_store import EdgeListGraph
from edgegraph.graph.graph_builder import GraphBuilder
from edgegraph.config import GraphConfig, load_graph_config

__all__ = [
    "Edge",
    "InvalidWeight",
    "Graph",
    "EdgeListGraph",
    "GraphBuilder",
    "GraphConfig",
    "load_graph_config",
]

__version__ = "0.1.0"
