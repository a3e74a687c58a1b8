# gridpath/search/heuristics.py
import math
from collections.abc import Callable

from gridpath.domain.entities.geography import Point

# h(position_of_node, position_of_target) -> estimated remaining cost
Heuristic = Callable[[Point, Point], float]

_heuristic_registry: dict[str, Heuristic] = {}


def register_heuristic(kind: str):
    def deco(fn: Heuristic):
        _heuristic_registry[kind] = fn
        return fn

    return deco


def make_heuristic(kind: str) -> Heuristic:
    try:
        return _heuristic_registry[kind]
    except KeyError:
        raise ValueError(f"Unknown heuristic kind {kind!r}")


def heuristic_kinds() -> list[str]:
    return sorted(_heuristic_registry)


@register_heuristic("euclidean")
def euclidean_floor(a: Point, b: Point) -> int:
    """Straight-line distance rounded down.

    Admissible only when every edge weight is at least the straight-line length
    between its endpoints.
    """
    return math.floor(math.hypot(b.x - a.x, b.y - a.y))


@register_heuristic("manhattan")
def manhattan_floor(a: Point, b: Point) -> int:
    # 4-connected square grids
    return math.floor(abs(b.x - a.x) + abs(b.y - a.y))


@register_heuristic("zero")
def zero(a: Point, b: Point) -> int:
    return 0
