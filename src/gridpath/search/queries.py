# gridpath/search/queries.py
from collections.abc import Sequence

import numpy as np

from gridpath.domain.graph import Graph, edge_weight
from gridpath.io.search_logging import default_hooks
from gridpath.runtime.types import NO_PARENT
from gridpath.search.astar import find_path
from gridpath.search.heuristics import Heuristic, euclidean_floor
from gridpath.search.hooks import SearchHooks


def get_path(
    graph: Graph,
    start: int,
    target: int,
    recalc: bool = False,
    *,
    heuristic: Heuristic = euclidean_floor,
    hooks: SearchHooks | None = None,
) -> list[int]:
    """
    Node ids from ``start`` (excluded) to ``target`` (included).

    With ``recalc`` a fresh ``find_path`` runs first; otherwise the parent links
    cached by the last search are walked as they are. Any failure gives ``[]``.
    """
    hooks = hooks or default_hooks()
    if not graph.has_node(start) or not graph.has_node(target):
        hooks.diagnostic("node id out of range", start=start, target=target, nodes=len(graph))
        return []

    # checked against the cached state, before any recalculation
    if not graph.state.reached(target):
        hooks.diagnostic("target never reached", start=start, target=target)
        return []

    if recalc:
        find_path(graph, start, target, heuristic=heuristic, hooks=hooks)

    parent = graph.state.parent
    path: list[int] = []
    current = target
    while current != start:
        if current == NO_PARENT or len(path) >= len(graph):
            hooks.diagnostic(
                "parent chain does not lead to start",
                start=start,
                target=target,
                kind=graph.state.kind.value,
                source=graph.state.source,
            )
            return []
        path.append(current)
        current = parent[current]

    path.reverse()
    return path


def get_nodes_in_range(graph: Graph, max_cost: float) -> set[int]:
    """Ids whose cached distance is within ``max_cost``; runs no search."""
    distance = np.asarray(graph.state.distance, dtype=np.float64)
    return {int(i) for i in np.flatnonzero(distance <= max_cost)}


def path_cost(graph: Graph, start: int, path: Sequence[int]) -> float | None:
    """Sum of edge weights along start -> path[0] -> ... -> path[-1]."""
    total, prev = 0, start
    for node_id in path:
        w = edge_weight(graph, prev, node_id)
        if w is None:
            return None
        total += w
        prev = node_id
    return total
