from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class KeyValueStore(ABC):
    """
    Port for the shared key-value store holding session data.

    Values must be JSON-serialisable. No transactions are exposed: ``set``
    overwrites unconditionally (last writer wins). Expiry is the store's own
    policy unless a ``ttl`` is passed explicitly.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the decoded value stored under ``key``, or None."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        """Store ``value`` under ``key``, expiring after ``ttl`` seconds when given."""
        ...

    @abstractmethod
    def delete(self, *keys: str) -> None:
        """Remove ``keys``; missing keys are ignored."""
        ...
