# gridpath/search/astar.py
import time

from gridpath.domain.graph import Graph, reset_search_state
from gridpath.io.search_logging import default_hooks
from gridpath.runtime.types import SearchKind
from gridpath.search.heap import PriorityHeap
from gridpath.search.heuristics import Heuristic, euclidean_floor
from gridpath.search.hooks import SearchHooks


def find_path(
    graph: Graph,
    source: int,
    target: int,
    *,
    heuristic: Heuristic = euclidean_floor,
    hooks: SearchHooks | None = None,
) -> bool:
    """
    Single-target search from ``source``, stopping as soon as ``target`` is popped.

    Always resets the graph's search state first. On success the parent chain
    from ``target`` leads back to ``source``; on failure ``target`` keeps the
    ``NO_PARENT`` sentinel. Optimal only for an admissible ``heuristic``.
    """
    hooks = hooks or default_hooks()
    if not graph.has_node(source) or not graph.has_node(target):
        hooks.diagnostic("node id out of range", source=source, target=target, nodes=len(graph))
        return False

    t0 = time.perf_counter()
    reset_search_state(graph)
    st, nodes = graph.state, graph.nodes
    goal = nodes[target].position
    hooks.search_start(kind=SearchKind.HEURISTIC, source=source, target=target, nodes=len(graph))

    open_set = PriorityHeap(st, len(graph))
    closed: set[int] = set()
    st.distance[source] = 0
    st.heuristic[source] = heuristic(nodes[source].position, goal)
    open_set.insert(source)

    found, pops = False, 0
    while open_set.non_empty():
        current = open_set.pop_min()
        pops += 1
        hooks.pop(current, distance=st.distance[current], qsize=len(open_set))
        closed.add(current)
        if current == target:
            found = True
            break

        for edge in graph.edges[current]:
            n = edge.target
            if n in closed:
                continue
            tentative = st.distance[current] + edge.weight
            queued = n in open_set
            if queued and st.distance[n] <= tentative:
                continue

            st.parent[n] = current
            st.distance[n] = tentative
            st.heuristic[n] = heuristic(nodes[n].position, goal)
            if queued:
                open_set.decrease_key(n)
            else:
                open_set.insert(n)

    st.mark(SearchKind.HEURISTIC, source, target)
    hooks.search_end(
        kind=SearchKind.HEURISTIC,
        source=source,
        target=target,
        found=found,
        pops=pops,
        wall_ms=(time.perf_counter() - t0) * 1000,
    )
    return found
