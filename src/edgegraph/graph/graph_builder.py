from __future__ import annotations

from typing import Hashable, Iterable, Optional, Tuple, Union

from edgegraph.config.settings import GraphConfig
from edgegraph.graph.graph_schema import Edge
from edgegraph.graph.graph_store import EdgeListGraph

EdgeLike = Union[Edge, Tuple[Hashable, Hashable, int]]


class GraphBuilder:
    """
    Populates an EdgeListGraph from iterables of vertices and edges.

    Every edge goes through EdgeListGraph.set, so later entries for the
    same pair overwrite earlier ones and a weight of 0 deletes.
    """

    def __init__(self, store: EdgeListGraph) -> None:
        self.store = store

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[EdgeLike],
        *,
        vertices: Iterable[Hashable] = (),
        config: Optional[GraphConfig] = None,
    ) -> EdgeListGraph:
        builder = cls(EdgeListGraph(config=config))
        builder.add_vertices(vertices)
        builder.add_edges(edges)
        return builder.store

    def add_vertices(self, vertices: Iterable[Hashable]) -> int:
        added = 0
        for vertex in vertices:
            if self.store.add(vertex):
                added += 1
        return added

    def add_edges(self, edges: Iterable[EdgeLike]) -> None:
        for item in edges:
            if isinstance(item, Edge):
                self.store.set(item.source, item.target, item.weight)
            else:
                source, target, weight = item
                self.store.set(source, target, weight)
