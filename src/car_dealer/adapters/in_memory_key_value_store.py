from __future__ import annotations

import json
from typing import Any

from car_dealer.ports.key_value_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """
    Canonical contract implementation for tests.

    - Values go through a JSON round-trip so callers never share references
    - ``ttl`` is recorded but never enforced
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, str] = {}
        self.ttls: dict[str, int] = {}
        for key, value in (data or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Any | None:
        raw = self._data.get(key)
        return json.loads(raw) if raw is not None else None

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        self._data[key] = json.dumps(value)
        if ttl is not None:
            self.ttls[key] = ttl
        else:
            self.ttls.pop(key, None)

    def delete(self, *keys: str) -> None:
        for key in keys:
            self._data.pop(key, None)
            self.ttls.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data
