# search/hooks.py
from typing import Protocol

from gridpath.runtime.types import SearchKind


class SearchHooks(Protocol):
    def search_start(self, *, kind: SearchKind, source, target, nodes): ...
    def pop(self, node_id: int, *, distance, qsize): ...
    def search_end(self, *, kind: SearchKind, source, target, found, pops, wall_ms): ...
    def diagnostic(self, reason: str, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def pop(self, *_, **__):
        pass

    def search_end(self, **_):
        pass

    def diagnostic(self, *_, **__):
        pass
