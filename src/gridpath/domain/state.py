# gridpath/domain/state.py
from dataclasses import dataclass, field

from gridpath.runtime.types import INITIAL_DISTANCE, NO_PARENT, NO_SLOT, SearchKind


@dataclass
class SearchState:
    """
    Per-node working state of the most recent search, keyed by node id.

    The lists are parallel to ``Graph.nodes``. They survive after a run and act
    as the cache that path and range queries read. ``kind``/``source``/``target``
    record which engine wrote them; combining results of different runs is the
    caller's problem.
    """

    initial_distance: int = INITIAL_DISTANCE
    distance: list[float] = field(default_factory=list)
    heuristic: list[float] = field(default_factory=list)
    parent: list[int] = field(default_factory=list)
    slot: list[int] = field(default_factory=list)  # valid only while in an active heap

    kind: SearchKind = SearchKind.NONE
    source: int | None = None
    target: int | None = None

    def __len__(self) -> int:
        return len(self.distance)

    def append_node(self) -> None:
        self.distance.append(self.initial_distance)
        self.heuristic.append(0)
        self.parent.append(NO_PARENT)
        self.slot.append(NO_SLOT)

    def reset(self) -> None:
        n = len(self.distance)
        self.distance[:] = [self.initial_distance] * n
        self.heuristic[:] = [0] * n
        self.parent[:] = [NO_PARENT] * n
        self.kind, self.source, self.target = SearchKind.NONE, None, None

    def priority(self, i: int) -> float:
        return self.distance[i] + self.heuristic[i]

    def reached(self, i: int) -> bool:
        return self.parent[i] != NO_PARENT

    def mark(self, kind: SearchKind, source: int, target: int | None = None) -> None:
        self.kind, self.source, self.target = kind, source, target
