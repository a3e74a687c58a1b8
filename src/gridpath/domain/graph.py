# gridpath/domain/graph.py
import logging
from dataclasses import dataclass, field

from gridpath.domain.entities.geography import Edge, Node, Pt, to_point
from gridpath.domain.state import SearchState
from gridpath.runtime.types import INITIAL_DISTANCE, GraphType

log = logging.getLogger("gridpath.graph")


@dataclass
class Graph:
    """
    Append-only undirected graph.

    ``edges[i]`` is the adjacency list of ``nodes[i]``; every edge is stored once
    per direction. ``state`` holds the per-node results of the last search.
    """

    nodes: list[Node] = field(default_factory=list)
    edges: list[list[Edge]] = field(default_factory=list)
    graph_type: GraphType = GraphType.DISTANCE_2D
    state: SearchState = field(default_factory=SearchState)

    def __len__(self) -> int:
        return len(self.nodes)

    def has_node(self, node_id: int) -> bool:
        return 0 <= node_id < len(self.nodes)


def create_graph(
    graph_type: GraphType = GraphType.DISTANCE_2D, *, initial_distance: int = INITIAL_DISTANCE
) -> Graph:
    return Graph(graph_type=graph_type, state=SearchState(initial_distance=initial_distance))


def add_node(graph: Graph, position: Pt) -> int:
    node_id = len(graph.nodes)
    graph.nodes.append(Node(node_id, to_point(position)))
    graph.edges.append([])
    graph.state.append_node()
    return node_id


def add_or_set_edge(graph: Graph, a: int, b: int, weight: float) -> None:
    if not graph.has_node(a) or not graph.has_node(b):
        log.warning(
            "edge endpoint not in graph",
            extra={"extra": {"a": a, "b": b, "nodes": len(graph.nodes)}},
        )
        return

    if any(e.target == b for e in graph.edges[a]):
        log.debug("edge weight overridden", extra={"extra": {"a": a, "b": b, "weight": weight}})
        for e in graph.edges[a]:
            if e.target == b:
                e.weight = weight
        for e in graph.edges[b]:
            if e.target == a:
                e.weight = weight
        return

    graph.edges[a].append(Edge(b, weight))
    graph.edges[b].append(Edge(a, weight))


def reset_search_state(graph: Graph) -> None:
    graph.state.reset()


def neighbours(graph: Graph, node_id: int) -> list[Edge]:
    return graph.edges[node_id] if graph.has_node(node_id) else []


def edge_weight(graph: Graph, a: int, b: int) -> float | None:
    for e in neighbours(graph, a):
        if e.target == b:
            return e.weight
    return None
