"""
Lock-guarded map with atomic single-key operations.

Each public method holds the lock for exactly one key operation, so callers
get insert-if-absent, compare-and-swap and remove-if-match semantics without
any multi-key transaction.
"""

import threading
from typing import Callable, Dict, Generic, Hashable, List, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


class ConcurrentMap(Generic[K, V]):
    """
    Thread-safe dictionary.

    Compare-and-swap operations compare by identity: a stored value only
    matches the exact object a caller previously read back with try_get().
    """

    def __init__(self) -> None:
        self._items: Dict[K, V] = {}
        self._lock = threading.Lock()

    def try_add(self, key: K, value: V) -> bool:
        """Insert value under key if the key is absent. Returns True on insert."""
        with self._lock:
            if key in self._items:
                return False
            self._items[key] = value
            return True

    def try_get(self, key: K) -> Optional[V]:
        """Return the value stored under key, or None."""
        with self._lock:
            return self._items.get(key)

    def contains(self, key: K) -> bool:
        with self._lock:
            return key in self._items

    def try_update(self, key: K, value: V, expected: V) -> bool:
        """
        Replace the value under key only if it is still ``expected``.

        Returns:
            True if the value was replaced, False if the key is absent or
            holds a different object
        """
        with self._lock:
            current = self._items.get(key, _MISSING)
            if current is _MISSING or current is not expected:
                return False
            self._items[key] = value
            return True

    def try_remove(self, key: K, expected: object = _MISSING) -> bool:
        """
        Remove key, optionally only if it still holds ``expected``.

        Returns:
            True if an entry was removed
        """
        with self._lock:
            current = self._items.get(key, _MISSING)
            if current is _MISSING:
                return False
            if expected is not _MISSING and current is not expected:
                return False
            del self._items[key]
            return True

    def values(self) -> List[V]:
        """Snapshot of the stored values."""
        with self._lock:
            return list(self._items.values())

    def find(self, predicate: Callable[[V], bool]) -> List[V]:
        """Snapshot of the stored values matching predicate."""
        return [value for value in self.values() if predicate(value)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]
