"""Process-lifetime lookup caches.

Caches are shared by every caller of a mapper and are never evicted. Reads
are lock-free; writes take a lock only to keep the underlying dict
consistent. Two callers racing on the same key both compute the value and
the last write wins, which is harmless because the values are equal.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ConcurrentCache(Generic[K, V]):
    """Thread-safe, unbounded key-value cache."""

    def __init__(self) -> None:
        self._data: dict[K, V] = {}
        self._lock = threading.Lock()

    def get(self, key: K) -> V | None:
        """Return the cached value for *key*, or None."""
        return self._data.get(key)

    def put(self, key: K, value: V) -> V:
        """Store *value* under *key* and return it."""
        with self._lock:
            self._data[key] = value
        return value

    def get_or_compute(self, key: K, factory: Callable[[], V]) -> V:
        """Return the cached value, computing and storing it on a miss.

        The factory runs outside the lock.
        """
        value = self._data.get(key)
        if value is None:
            value = self.put(key, factory())
        return value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
