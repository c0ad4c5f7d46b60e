"""Hit Counter — counts requests served by the static file branch.

Invariants:
    - increment() is an atomic add: N concurrent calls raise the value by exactly N
    - reset() sets the value to 0
    - One instance per application (created in create_app), never a module global
"""

import threading


class HitCounter:
    """Thread-safe monotonically increasing counter with reset."""

    def __init__(self) -> None:
        self._hits = 0
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._hits += 1
            return self._hits

    def value(self) -> int:
        with self._lock:
            return self._hits

    def reset(self) -> None:
        with self._lock:
            self._hits = 0
