from __future__ import annotations

import os

DEFAULT_FAVOURITES_VIEW_TTL_SECONDS = 300


def redis_url() -> str:
    url = os.getenv("REDIS_URL")

    if not url:
        raise RuntimeError("REDIS_URL environment variable is not set")

    return url


def favourites_view_ttl() -> int:
    """Seconds a cached favourites view stays valid; bad values use the default."""
    raw = os.getenv("FAVOURITES_VIEW_TTL_SECONDS")
    if raw is None:
        return DEFAULT_FAVOURITES_VIEW_TTL_SECONDS

    try:
        ttl = int(raw)
    except ValueError:
        return DEFAULT_FAVOURITES_VIEW_TTL_SECONDS

    return ttl if ttl > 0 else DEFAULT_FAVOURITES_VIEW_TTL_SECONDS
