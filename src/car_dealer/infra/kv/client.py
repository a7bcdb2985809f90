from __future__ import annotations

import threading

from redis import Redis

from car_dealer.infra.kv.config import redis_url

_client: Redis | None = None
_client_lock = threading.Lock()


def get_redis_client() -> Redis:
    """
    Get or create the process-wide Redis client.

    redis-py keeps its own connection pool, so one client is shared by every
    request. Responses are decoded to ``str``. Sync routes run on a thread
    pool, so creation is serialized to build exactly one client.
    """
    global _client
    if _client is None:
        with _client_lock:
            if _client is None:
                _client = Redis.from_url(redis_url(), decode_responses=True)
    return _client
