# gridpath/app/pathfinder.py
from dataclasses import dataclass, field

from gridpath.domain.entities.geography import Pt
from gridpath.domain.graph import (
    Graph,
    add_node,
    add_or_set_edge,
    create_graph,
    reset_search_state,
)
from gridpath.io.search_logging import default_hooks
from gridpath.search.astar import find_path
from gridpath.search.dijkstra import find_paths_to_nodes
from gridpath.search.heuristics import Heuristic, euclidean_floor
from gridpath.search.hooks import SearchHooks
from gridpath.search.queries import get_nodes_in_range, get_path, path_cost


@dataclass
class Pathfinder:
    """One graph bound to a heuristic and a set of search hooks.

    Not thread-safe: only one search may be in flight per graph.
    """

    graph: Graph = field(default_factory=create_graph)
    heuristic: Heuristic = euclidean_floor
    hooks: SearchHooks = field(default_factory=default_hooks)

    def add_node(self, position: Pt) -> int:
        return add_node(self.graph, position)

    def add_or_set_edge(self, a: int, b: int, weight: float) -> None:
        add_or_set_edge(self.graph, a, b, weight)

    def reset(self) -> None:
        reset_search_state(self.graph)

    def find_paths_to_nodes(self, source: int) -> None:
        find_paths_to_nodes(self.graph, source, hooks=self.hooks)

    def find_path(self, source: int, target: int) -> bool:
        return find_path(self.graph, source, target, heuristic=self.heuristic, hooks=self.hooks)

    def get_path(self, start: int, target: int, recalc: bool = False) -> list[int]:
        return get_path(
            self.graph, start, target, recalc, heuristic=self.heuristic, hooks=self.hooks
        )

    def get_nodes_in_range(self, max_cost: float) -> set[int]:
        return get_nodes_in_range(self.graph, max_cost)

    def path_cost(self, start: int, path: list[int]) -> float | None:
        return path_cost(self.graph, start, path)
