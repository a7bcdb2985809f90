from __future__ import annotations

import os

DEFAULT_POOL_SIZE = 10
DEFAULT_MAX_OVERFLOW = 20


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default

    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None

    if value < 0:
        raise RuntimeError(f"{name} must be >= 0, got {value}")

    return value


def pool_size() -> int:
    return _int_from_env("DATABASE_POOL_SIZE", DEFAULT_POOL_SIZE)


def max_overflow() -> int:
    return _int_from_env("DATABASE_MAX_OVERFLOW", DEFAULT_MAX_OVERFLOW)
