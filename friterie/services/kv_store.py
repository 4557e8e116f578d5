"""Key-value store abstraction behind sessions, reset tokens and rate limits.

The in-memory implementation is process-local: a restart drops every entry.
A multi-instance deployment needs a shared implementation of the same
interface (for example a Redis-backed one).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

V = TypeVar("V")


class KeyValueStore(ABC, Generic[V]):
    """Minimal capability needed by the auth stores: get/set/delete/sweep."""

    @abstractmethod
    def get(self, key: str) -> V | None:
        """Return the value stored under ``key`` or None."""

    @abstractmethod
    def set(self, key: str, value: V) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Remove ``key``; return True when an entry existed."""

    @abstractmethod
    def sweep(self, is_expired: Callable[[V], bool]) -> int:
        """Remove every entry for which ``is_expired`` is true; return the count."""

    @abstractmethod
    def __len__(self) -> int: ...


class InMemoryStore(KeyValueStore[V]):
    """Dict-backed store with no locking; one process, one thread at a time."""

    def __init__(self) -> None:
        self._data: dict[str, V] = {}

    def get(self, key: str) -> V | None:
        return self._data.get(key)

    def set(self, key: str, value: V) -> None:
        self._data[key] = value

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def sweep(self, is_expired: Callable[[V], bool]) -> int:
        expired_keys = [key for key, value in self._data.items() if is_expired(value)]
        for key in expired_keys:
            del self._data[key]
        return len(expired_keys)

    def __len__(self) -> int:
        return len(self._data)
