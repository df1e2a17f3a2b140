"""
Graph subsystem for edgegraph.

Defines the weighted directed graph abstractions:
- the immutable Edge record and its weight validation
- the abstract Graph interface
- the EdgeListGraph container and its bulk builder
"""

from edgegraph.graph.graph_schema import Edge, InvalidWeight
from edgegraph.graph.graph_base import Graph
from edgegraph.graph.graph_store import EdgeListGraph
from edgegraph.graph.graph_builder import GraphBuilder

__all__ = [
    "Edge",
    "InvalidWeight",
    "Graph",
    "EdgeListGraph",
    "GraphBuilder",
]
