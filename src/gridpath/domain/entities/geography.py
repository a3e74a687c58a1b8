from dataclasses import dataclass


# Core geometry types used by the graph store
@dataclass(frozen=True)
class Point:
    x: float
    y: float


Pt = Point | tuple[float, float]


def to_point(p: Pt) -> Point:
    return p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))


@dataclass
class Edge:
    target: int
    weight: float  # non-negative; the same value is stored in both directions


@dataclass(frozen=True)
class Node:
    id: int
    position: Point
