# gridpath/search/dijkstra.py
import time

from gridpath.domain.graph import Graph
from gridpath.io.search_logging import default_hooks
from gridpath.runtime.types import SearchKind
from gridpath.search.heap import PriorityHeap
from gridpath.search.hooks import SearchHooks


def find_paths_to_nodes(graph: Graph, source: int, *, hooks: SearchHooks | None = None) -> None:
    """
    Shortest paths from ``source`` to every node.

    Does not reset search state: nodes start from whatever distance/heuristic
    the previous run left behind, so call ``reset_search_state`` first for a
    clean sweep. Every node is popped exactly once.
    """
    hooks = hooks or default_hooks()
    if not graph.has_node(source):
        hooks.diagnostic("source not in graph", source=source, nodes=len(graph))
        return

    t0 = time.perf_counter()
    st = graph.state
    hooks.search_start(kind=SearchKind.ALL_TARGETS, source=source, target=None, nodes=len(graph))

    st.distance[source] = 0
    unvisited = PriorityHeap(st, len(graph))
    for node in graph.nodes:
        unvisited.insert(node.id)

    pops = 0
    while unvisited.non_empty():
        u = unvisited.pop_min()
        pops += 1
        hooks.pop(u, distance=st.distance[u], qsize=len(unvisited))
        for edge in graph.edges[u]:
            d = st.distance[u] + edge.weight
            if d < st.distance[edge.target]:
                st.distance[edge.target] = d
                st.parent[edge.target] = u
                # stale heuristics can reorder pops, so v may already be out
                if edge.target in unvisited:
                    unvisited.decrease_key(edge.target)

    st.mark(SearchKind.ALL_TARGETS, source)
    hooks.search_end(
        kind=SearchKind.ALL_TARGETS,
        source=source,
        target=None,
        found=True,
        pops=pops,
        wall_ms=(time.perf_counter() - t0) * 1000,
    )
