from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AbstractSet, Dict, Hashable


class Graph(ABC):
    """
    Abstract mutable, weighted, directed graph.

    Vertices are hashable labels. Edges are directed, carry a positive
    integer weight, and at most one exists per ordered (source, target)
    pair.

    Implementations are not thread-safe; callers serialize access.
    """

    @staticmethod
    def empty() -> "Graph":
        """
        Create an empty graph with the default implementation.
        """
        from edgegraph.graph.graph_store import EdgeListGraph

        return EdgeListGraph()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    @abstractmethod
    def add(self, vertex: Hashable) -> bool:
        """
        Add a vertex. Returns True iff it was not already present.
        """
        raise NotImplementedError

    @abstractmethod
    def set(self, source: Hashable, target: Hashable, weight: int) -> int:
        """
        Add, change, or remove the edge from source to target.

        Both endpoints are added to the graph if absent. A positive weight
        stores the edge, a weight of 0 removes it.

        Returns the previous weight, or 0 if there was no such edge.
        Raises InvalidWeight for a negative weight, leaving the graph
        unchanged.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, vertex: Hashable) -> bool:
        """
        Remove a vertex and every edge touching it.

        Returns True iff the vertex was present.
        """
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @abstractmethod
    def vertices(self) -> AbstractSet[Hashable]:
        """
        Read-only snapshot of the vertex set.
        """
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: Hashable) -> Dict[Hashable, int]:
        """
        Map every vertex with an edge into target to that edge's weight.
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: Hashable) -> Dict[Hashable, int]:
        """
        Map every vertex with an edge from source to that edge's weight.
        """
        raise NotImplementedError

    @abstractmethod
    def to_display_string(self) -> str:
        """
        Human-readable dump for debugging. Not a serialization format.
        """
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_display_string()
