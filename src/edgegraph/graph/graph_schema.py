from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable


class InvalidWeight(ValueError):
    """
    Raised when an edge is given a negative weight.
    """

    def __init__(self, weight: int) -> None:
        super().__init__(f"edge weight must be non-negative, got {weight}")
        self.weight = weight


@dataclass(frozen=True)
class Edge:
    """
    Immutable directed, weighted connection between two vertices.

    Weight 0 is a valid value for the record itself; the graph never
    stores such an edge.
    """

    source: Hashable
    target: Hashable
    weight: int

    def __post_init__(self) -> None:
        if self.source is None or self.target is None:
            raise ValueError("edge source and target cannot be None")
        # bool is an int subclass but never a meaningful weight
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise TypeError(
                f"edge weight must be an int, got {type(self.weight).__name__}"
            )
        if self.weight < 0:
            raise InvalidWeight(self.weight)

    @property
    def key(self) -> tuple:
        return (self.source, self.target)

    def with_weight(self, weight: int) -> "Edge":
        return Edge(source=self.source, target=self.target, weight=weight)

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"
