"""
Shared graph fixtures.
"""

import math

import numpy as np
import pytest

from gridpath.domain.graph import Graph, add_node, add_or_set_edge, create_graph


@pytest.fixture
def diamond() -> Graph:
    """0-1-2 along the x axis (cost 2) and 0-3-2 over (1,1) (cost 4)."""
    g = create_graph()
    for p in [(0, 0), (1, 0), (2, 0), (1, 1)]:
        add_node(g, p)
    add_or_set_edge(g, 0, 1, 1)
    add_or_set_edge(g, 1, 2, 1)
    add_or_set_edge(g, 0, 3, 2)
    add_or_set_edge(g, 3, 2, 2)
    return g


def _random_graph(seed: int, n: int = 40, extra_edges: int = 60) -> Graph:
    # Weights are >= straight-line length so the euclidean heuristic is admissible.
    rng = np.random.default_rng(seed)
    g = create_graph()
    pts = rng.uniform(0, 50, size=(n, 2))
    for x, y in pts:
        add_node(g, (x, y))

    def weight(a: int, b: int) -> int:
        L = math.hypot(*(pts[a] - pts[b]))
        return math.ceil(L) + int(rng.integers(0, 10))

    # random spanning tree keeps it connected
    order = rng.permutation(n)
    for i in range(1, n):
        a, b = int(order[i]), int(order[rng.integers(0, i)])
        add_or_set_edge(g, a, b, weight(a, b))
    for _ in range(extra_edges):
        a, b = (int(v) for v in rng.choice(n, size=2, replace=False))
        add_or_set_edge(g, a, b, weight(a, b))
    return g


@pytest.fixture
def random_graph():
    return _random_graph
