# gridpath/search/heap.py
from gridpath.domain.state import SearchState
from gridpath.runtime.types import NO_SLOT


class PriorityHeap:
    """
    Binary min-heap of node ids ordered by (distance + heuristic, heuristic).

    Keys are read live from ``state``; each member's position in the backing
    array is mirrored into ``state.slot`` so ``decrease_key`` and ``contains``
    never scan. Capacity is fixed at construction.
    """

    def __init__(self, state: SearchState, capacity: int):
        self.state = state
        self._items: list[int] = [NO_SLOT] * capacity
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._items)

    def non_empty(self) -> bool:
        return self._size > 0

    def contains(self, node_id: int) -> bool:
        s = self.state.slot[node_id]
        return 0 <= s < self._size and self._items[s] == node_id

    __contains__ = contains

    def insert(self, node_id: int) -> None:
        if self._size >= len(self._items):
            raise IndexError(f"heap is full (capacity {len(self._items)})")
        self._items[self._size] = node_id
        self.state.slot[node_id] = self._size
        self._size += 1
        self._sift_up(node_id)

    def pop_min(self) -> int:
        if self._size == 0:
            raise IndexError("pop from empty heap")
        first = self._items[0]
        self._size -= 1
        last = self._items[self._size]
        self._items[self._size] = NO_SLOT
        self.state.slot[first] = NO_SLOT
        if self._size > 0:
            self._items[0] = last
            self.state.slot[last] = 0
            self._sift_down(last)
        return first

    def decrease_key(self, node_id: int) -> None:
        # Only valid after the node's priority went down; increases are not re-sifted.
        if not self.contains(node_id):
            raise KeyError(node_id)
        self._sift_up(node_id)

    # ---------------- ordering ----------------

    def _before(self, a: int, b: int) -> bool:
        st = self.state
        fa, fb = st.priority(a), st.priority(b)
        return fa < fb or (fa == fb and st.heuristic[a] < st.heuristic[b])

    def _swap(self, a: int, b: int) -> None:
        slot = self.state.slot
        sa, sb = slot[a], slot[b]
        self._items[sa], self._items[sb] = b, a
        slot[a], slot[b] = sb, sa

    def _sift_up(self, node_id: int) -> None:
        slot = self.state.slot
        while slot[node_id] > 0:
            parent = self._items[(slot[node_id] - 1) // 2]
            if not self._before(node_id, parent):
                return
            self._swap(node_id, parent)

    def _sift_down(self, node_id: int) -> None:
        slot = self.state.slot
        while True:
            left = slot[node_id] * 2 + 1
            right = left + 1
            if left >= self._size:
                return
            child = self._items[left]
            if right < self._size and self._before(self._items[right], child):
                child = self._items[right]
            if not self._before(child, node_id):
                return
            self._swap(node_id, child)

    # ---------------- diagnostics ----------------

    def snapshot(self) -> list[tuple[int, float, int]]:
        """(slot, priority, node id) for every member, in backing-array order."""
        return [(i, self.state.priority(n), n) for i, n in enumerate(self._items[: self._size])]

    def is_consistent(self) -> bool:
        for i in range(self._size):
            n = self._items[i]
            if self.state.slot[n] != i:
                return False
            if i > 0 and self._before(n, self._items[(i - 1) // 2]):
                return False
        return True
