"""Monotonic, thread-safe id generator for person records."""
from __future__ import annotations

import threading


class IdSequence:
    """Hands out increasing integer ids; an id is never handed out twice."""

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("start must be >= 0")
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        """The id the next call to :meth:`next_id` will return."""
        with self._lock:
            return self._next


# Default sequence for stores created without one, so that all of them
# draw from the same counter within one process.
shared_sequence = IdSequence()
