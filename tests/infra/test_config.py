"""Tests for environment-driven infrastructure configuration."""

from __future__ import annotations

import pytest

from car_dealer.infra.db.config import database_url, max_overflow, pool_size
from car_dealer.infra.kv.config import favourites_view_ttl, redis_url


# ==============================================================================
# Database
# ==============================================================================


def test_database_url_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        database_url()


def test_database_url_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://app@localhost/cars")

    assert database_url() == "postgresql+psycopg://app@localhost/cars"


def test_pool_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_POOL_SIZE", raising=False)
    monkeypatch.delenv("DATABASE_MAX_OVERFLOW", raising=False)

    assert pool_size() == 10
    assert max_overflow() == 20


def test_pool_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_POOL_SIZE", "4")
    monkeypatch.setenv("DATABASE_MAX_OVERFLOW", "0")

    assert pool_size() == 4
    assert max_overflow() == 0


@pytest.mark.parametrize("raw", ["many", "-1"])
def test_pool_size_rejects_bad_values(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("DATABASE_POOL_SIZE", raw)

    with pytest.raises(RuntimeError, match="DATABASE_POOL_SIZE"):
        pool_size()


# ==============================================================================
# Key-value store
# ==============================================================================


def test_redis_url_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REDIS_URL", raising=False)

    with pytest.raises(RuntimeError, match="REDIS_URL"):
        redis_url()


def test_redis_url_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")

    assert redis_url() == "redis://localhost:6379/0"


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 300), ("60", 60), ("0", 300), ("-10", 300), ("soon", 300)],
)
def test_favourites_view_ttl(monkeypatch: pytest.MonkeyPatch, raw: str | None, expected: int) -> None:
    if raw is None:
        monkeypatch.delenv("FAVOURITES_VIEW_TTL_SECONDS", raising=False)
    else:
        monkeypatch.setenv("FAVOURITES_VIEW_TTL_SECONDS", raw)

    assert favourites_view_ttl() == expected
