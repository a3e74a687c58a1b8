from enum import Enum

# Sentinels shared by the graph store, the heap and the engines
INITIAL_DISTANCE = 2_000_000  # "infinite" g-cost, never improved
NO_PARENT = -1
NO_SLOT = -1


class GraphType(Enum):
    DISTANCE_2D = "distance_2d"
    SQUARE = "square"
    HEXAGONAL = "hexagonal"


class SearchKind(Enum):
    NONE = "none"
    ALL_TARGETS = "all_targets"
    HEURISTIC = "heuristic"
