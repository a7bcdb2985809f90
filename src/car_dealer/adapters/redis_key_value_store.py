"""Redis implementation of KeyValueStore."""

from __future__ import annotations

import json
import logging
from typing import Any

from redis import Redis

from car_dealer.ports.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class RedisKeyValueStore(KeyValueStore):
    """
    KeyValueStore backed by Redis.

    - Values are JSON-encoded on write and decoded on read
    - ``ttl`` maps to SET ... EX; without it the key's expiry is Redis policy
    - Connection errors propagate to the caller (no retries)
    """

    def __init__(self, client: Redis) -> None:
        self._client = client

    def get(self, key: str) -> Any | None:
        raw = self._client.get(key)
        if raw is None:
            return None

        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding undecodable value", extra={"key": key})
            return None

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        payload = json.dumps(value)
        if ttl is not None:
            self._client.set(key, payload, ex=ttl)
        else:
            self._client.set(key, payload)

    def delete(self, *keys: str) -> None:
        if keys:
            self._client.delete(*keys)
