"""
Identity generation.

Ids are issued by an IdSequence owned by whoever creates the entities (a
directory for students, a registry for enrollments) and passed in
explicitly. There is no module-level counter.
"""

import itertools
import threading


class IdSequence:
    """
    Monotonic, thread-safe integer id source.

    Usage:
        ids = IdSequence()
        ids.next_id()   # 1
        ids.next_id()   # 2

        IdSequence(start=100).next_id()   # 100
    """

    def __init__(self, start: int = 1):
        if start < 0:
            raise ValueError(f"IdSequence start must be non-negative, got {start}")
        self._counter = itertools.count(start)
        self._lock = threading.Lock()
        self._last = None

    def next_id(self) -> int:
        with self._lock:
            self._last = next(self._counter)
            return self._last

    @property
    def last_issued(self):
        """The most recently issued id, or None if nothing was issued yet."""
        return self._last

    def __call__(self) -> int:
        return self.next_id()
