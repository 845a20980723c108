from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import ContextManager, Dict, Hashable, Iterator, Protocol


class EmployeeLocks(Protocol):
    """Mutual exclusion keyed by employee id."""

    def hold(self, key: Hashable) -> ContextManager[None]:
        raise NotImplementedError


class KeyedLock:
    """In-process lock per key.

    Entries are never evicted; the key space is the set of enrolled employees.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[Hashable, threading.Lock] = {}

    def _lock_for(self, key: Hashable) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        lock = self._lock_for(key)
        with lock:
            yield
