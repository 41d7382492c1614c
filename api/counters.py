"""
In-memory request counters.

Every inbound request increments a per-path counter plus a global total.  The
store is owned by the application (``app.state.counters``) rather than being a
module global, so each test can work with a fresh instance.  Counts live for
the lifetime of the process and are never persisted.
"""
from __future__ import annotations

import threading
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class RequestCounters:
    """Read-only copy of the counters at a point in time."""

    total: int = 0
    by_endpoint: Dict[str, int] = field(default_factory=dict)


class RequestCounterStore:
    """Thread-safe mapping of request path to invocation count.

    Increments are guarded by a lock so ``total == sum(by_endpoint.values())``
    holds even when requests are served from several threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._total = 0
        self._by_endpoint: Counter[str] = Counter()

    def increment(self, path: str) -> None:
        with self._lock:
            self._total += 1
            self._by_endpoint[path] += 1

    def snapshot(self) -> RequestCounters:
        with self._lock:
            return RequestCounters(total=self._total, by_endpoint=dict(self._by_endpoint))

    @property
    def total(self) -> int:
        return self._total
