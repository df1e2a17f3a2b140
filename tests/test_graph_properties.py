"""
Randomized operation sequences checked against a plain dict model.
"""

import random

import pytest

from edgegraph.graph.graph_schema import InvalidWeight
from edgegraph.graph.graph_store import EdgeListGraph

LABELS = ["a", "b", "c", "d", "e"]


def _assert_invariants(graph: EdgeListGraph) -> None:
    vertices = graph.vertices()
    pairs = set()
    for edge in graph.edges():
        assert edge.source in vertices
        assert edge.target in vertices
        assert edge.weight > 0
        assert edge.key not in pairs
        pairs.add(edge.key)


def _assert_symmetric(graph: EdgeListGraph) -> None:
    for v1 in graph.vertices():
        for v2, weight in graph.targets(v1).items():
            assert graph.sources(v2)[v1] == weight
        for v2, weight in graph.sources(v1).items():
            assert graph.targets(v2)[v1] == weight


def _apply(rng: random.Random, graph: EdgeListGraph, vertices: set, edges: dict):
    op = rng.choice(["add", "set", "set", "set", "remove", "negative"])
    u = rng.choice(LABELS)
    v = rng.choice(LABELS)

    if op == "add":
        assert graph.add(u) == (u not in vertices)
        vertices.add(u)
    elif op == "set":
        weight = rng.choice([0, 0, 1, 2, 5, 10])
        assert graph.set(u, v, weight) == edges.pop((u, v), 0)
        vertices.update((u, v))
        if weight > 0:
            edges[(u, v)] = weight
    elif op == "remove":
        assert graph.remove(u) == (u in vertices)
        vertices.discard(u)
        for key in [k for k in edges if u in k]:
            del edges[key]
    else:
        with pytest.raises(InvalidWeight):
            graph.set(u, v, -rng.randint(1, 10))


@pytest.mark.parametrize("seed", range(25))
def test_random_operations_match_model(seed):
    rng = random.Random(seed)
    graph = EdgeListGraph()
    vertices: set = set()
    edges: dict = {}

    for _ in range(60):
        _apply(rng, graph, vertices, edges)

        _assert_invariants(graph)
        _assert_symmetric(graph)
        assert graph.vertices() == vertices
        assert {e.key: e.weight for e in graph.edges()} == edges


@pytest.mark.parametrize("seed", range(5))
def test_clone_equals_source_graph_after_random_operations(seed):
    rng = random.Random(seed)
    graph = EdgeListGraph()

    for _ in range(40):
        _apply(rng, graph, set(graph.vertices()), {e.key: e.weight for e in graph.edges()})

    assert graph.clone() == graph
