# io/search_logging.py
import json
import logging
import sys
from functools import cache

from gridpath.runtime.types import SearchKind
from gridpath.search.hooks import NoopHooks


class _SearchJsonFormatter(logging.Formatter):
    """One JSON object per record: event name, then run/search identity, then the rest.

    Keys whose value is None (e.g. ``target`` of an all-targets sweep) are left out.
    """

    LEAD = ("run_id", "kind", "source", "target")

    def format(self, record: logging.LogRecord) -> str:
        extra = getattr(record, "extra", None)
        extra = extra if isinstance(extra, dict) else {}
        payload = {"event": record.getMessage(), "level": record.levelname}
        for k in self.LEAD:
            if extra.get(k) is not None:
                payload[k] = extra[k]
        for k, v in extra.items():
            if k not in payload and v is not None:
                payload[k] = v
        payload["logger"] = record.name
        return json.dumps(payload, default=str)


def _json_logger(name="gridpath", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_SearchJsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Shapes and emits structured records for search lifecycle and diagnostics.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _json_logger(level=level)
        self._pops = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # --------------- search lifecycle -----------------------------

    def search_start(self, *, kind: SearchKind, source, target, nodes):
        self._pops = 0
        self._emit(
            "INFO", "search_start", kind=kind.value, source=source, target=target, nodes=nodes
        )

    def pop(self, node_id: int, *, distance, qsize):
        self._pops += 1
        if self.debug and (self._pops % self.sample_every) == 0:
            self._emit("DEBUG", "pop", node=node_id, distance=distance, qsize=qsize)

    def search_end(self, *, kind: SearchKind, source, target, found, pops, wall_ms):
        extra = dict(kind=kind.value, source=source, target=target, pops=pops, wall_ms=wall_ms)
        if found:
            self._emit("INFO", "path_found" if target is not None else "search_end", **extra)
        else:
            self._emit("WARNING", "path_not_found", **extra)

    # --------------- failures -------------------------------------

    def diagnostic(self, reason: str, **kw):
        self._emit("WARNING", reason, **kw)


@cache
def default_hooks() -> SearchLogging:
    # No handler of our own: records reach whatever the host configured.
    return SearchLogging(logger=logging.getLogger("gridpath"))
