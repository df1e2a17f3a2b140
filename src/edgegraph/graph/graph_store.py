from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Hashable, Iterator, List, Optional

import networkx as nx

from edgegraph.config.settings import GraphConfig
from edgegraph.graph.graph_base import Graph
from edgegraph.graph.graph_schema import Edge, InvalidWeight

logger = logging.getLogger("edgegraph.graph")


class EdgeListGraph(Graph):
    """
    Mutable weighted directed graph backed by a networkx DiGraph.

    The DiGraph's nodes are the vertex set. Each stored edge keeps its
    Edge record under the "data" attribute, so edges are keyed on the
    (source, target) pair and at most one exists per pair.

    Invariants after every public call:
    - every edge endpoint is a vertex
    - no two edges share a (source, target) pair
    - every stored weight is a positive int
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self._graph = nx.DiGraph()
        self.config = config or GraphConfig()

    # -------------------- Vertices --------------------

    def add(self, vertex: Hashable) -> bool:
        if vertex in self._graph:
            return False
        self._graph.add_node(vertex)
        logger.debug("added vertex %r", vertex)
        self._after_mutation()
        return True

    def remove(self, vertex: Hashable) -> bool:
        if vertex not in self._graph:
            return False
        incident = self._graph.in_degree(vertex) + self._graph.out_degree(vertex)
        if self._graph.has_edge(vertex, vertex):
            incident -= 1
        # networkx drops every incident edge along with the node
        self._graph.remove_node(vertex)
        logger.debug("removed vertex %r with %d incident edge(s)", vertex, incident)
        self._after_mutation()
        return True

    def vertices(self) -> FrozenSet[Hashable]:
        return frozenset(self._graph.nodes)

    # -------------------- Edges --------------------

    def set(self, source: Hashable, target: Hashable, weight: int) -> int:
        # Build the record before touching state so a bad weight
        # leaves the graph as it was.
        try:
            edge = Edge(source=source, target=target, weight=weight)
        except InvalidWeight:
            logger.warning(
                "rejected weight %r for edge %r -> %r", weight, source, target
            )
            raise

        previous = self.weight(source, target)
        if previous:
            self._graph.remove_edge(source, target)

        self._graph.add_node(source)
        self._graph.add_node(target)

        if edge.weight > 0:
            self._graph.add_edge(source, target, data=edge)
            logger.debug("set edge %s (previous %d)", edge, previous)
        elif previous:
            logger.debug("deleted edge %r -> %r (was %d)", source, target, previous)

        self._after_mutation()
        return previous

    def has_edge(self, source: Hashable, target: Hashable) -> bool:
        return self._graph.has_edge(source, target)

    def weight(self, source: Hashable, target: Hashable) -> int:
        if not self._graph.has_edge(source, target):
            return 0
        return self._graph.edges[source, target]["data"].weight

    def edges(self) -> Iterator[Edge]:
        for _, _, data in self._graph.edges(data=True):
            yield data["data"]

    def get_edges(self) -> List[Edge]:
        return list(self.edges())

    # -------------------- Adjacency --------------------

    def sources(self, target: Hashable) -> Dict[Hashable, int]:
        if target not in self._graph:
            return {}
        return {
            source: data["data"].weight
            for source, data in self._graph.pred[target].items()
        }

    def targets(self, source: Hashable) -> Dict[Hashable, int]:
        if source not in self._graph:
            return {}
        return {
            target: data["data"].weight
            for target, data in self._graph.succ[source].items()
        }

    # -------------------- Analytics --------------------

    def vertex_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def __len__(self) -> int:
        return self.vertex_count()

    def __contains__(self, vertex: object) -> bool:
        try:
            return vertex in self._graph
        except TypeError:
            # unhashable values are never vertices
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdgeListGraph):
            return NotImplemented
        return self.vertices() == other.vertices() and set(self.edges()) == set(
            other.edges()
        )

    # -------------------- Display --------------------

    def to_display_string(self) -> str:
        """
        Debug dump: the vertex set, then one "source -> target (weight)"
        line per edge.

        Edge order is whatever the underlying collection yields, and a
        replaced edge may move. Do not parse or compare this output.
        """
        vertices = list(self._graph.nodes)
        edges = self.get_edges()
        if self.config.display_sorted:
            vertices.sort(key=str)
            edges.sort(key=lambda e: (str(e.source), str(e.target)))

        lines = ["Vertices: {" + ", ".join(str(v) for v in vertices) + "}", "Edges:"]
        lines.extend(str(edge) for edge in edges)
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return (
            f"EdgeListGraph(vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )

    # -------------------- Cloning --------------------

    def clone(self) -> "EdgeListGraph":
        g = EdgeListGraph(config=self.config)
        # Edge records are immutable, so sharing them is safe
        g._graph = self._graph.copy()
        return g

    # -------------------- Invariants --------------------

    def check_rep(self) -> None:
        """
        Validate the full structure. Raises AssertionError on a violation.

        Intended for debugging; enable per graph with
        GraphConfig(check_invariants=True).
        """
        for source, target, data in self._graph.edges(data=True):
            edge = data.get("data")
            assert isinstance(edge, Edge), f"missing record on {source!r} -> {target!r}"
            assert edge.key == (source, target), f"record {edge} stored under wrong pair"
            assert edge.weight > 0, f"non-positive weight stored: {edge}"
            assert source in self._graph and target in self._graph, (
                f"dangling edge {edge}"
            )

    def _after_mutation(self) -> None:
        if self.config.check_invariants:
            self.check_rep()
