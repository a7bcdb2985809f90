"""
Dependency injection for FastAPI routes.

Key principle: database sessions are per-request, never cached. The Redis
client is a process-wide singleton (it pools its own connections), so the
key-value store wrapping it is cheap to build per request.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from car_dealer.adapters.postgres_classified_repository import PostgresClassifiedRepository
from car_dealer.adapters.redis_key_value_store import RedisKeyValueStore
from car_dealer.domain.paging import CLASSIFIEDS_PER_PAGE
from car_dealer.entrypoints.http.favourites_view_cache import FavouritesViewCache
from car_dealer.infra.db.session import get_session
from car_dealer.infra.kv.client import get_redis_client
from car_dealer.infra.kv.config import favourites_view_ttl
from car_dealer.ports.classified_repository import ClassifiedRepository
from car_dealer.ports.key_value_store import KeyValueStore
from car_dealer.use_cases.get_classified_by_id import GetClassifiedById
from car_dealer.use_cases.get_classified_ranges import GetClassifiedRanges
from car_dealer.use_cases.get_favourites import GetFavourites
from car_dealer.use_cases.search_classifieds import SearchClassifieds
from car_dealer.use_cases.toggle_favourite import ToggleFavourite


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() commits on success, rolls back on exception
    and always closes the session when the request ends.

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_classified_repository(db: Session = Depends(get_db)) -> ClassifiedRepository:
    return PostgresClassifiedRepository(session=db)


def get_key_value_store() -> KeyValueStore:
    return RedisKeyValueStore(client=get_redis_client())


def get_page_size() -> int:
    return CLASSIFIEDS_PER_PAGE


def get_search_classifieds_use_case(
    repository: ClassifiedRepository = Depends(get_classified_repository),
    store: KeyValueStore = Depends(get_key_value_store),
) -> SearchClassifieds:
    return SearchClassifieds(classified_repository=repository, store=store)


def get_classified_ranges_use_case(
    repository: ClassifiedRepository = Depends(get_classified_repository),
) -> GetClassifiedRanges:
    return GetClassifiedRanges(classified_repository=repository)


def get_classified_by_id_use_case(
    repository: ClassifiedRepository = Depends(get_classified_repository),
) -> GetClassifiedById:
    return GetClassifiedById(classified_repository=repository)


def get_toggle_favourite_use_case(
    store: KeyValueStore = Depends(get_key_value_store),
) -> ToggleFavourite:
    return ToggleFavourite(store=store)


def get_favourites_use_case(
    store: KeyValueStore = Depends(get_key_value_store),
    repository: ClassifiedRepository = Depends(get_classified_repository),
) -> GetFavourites:
    return GetFavourites(store=store, classified_repository=repository)


def get_favourites_view_cache(
    store: KeyValueStore = Depends(get_key_value_store),
) -> FavouritesViewCache:
    return FavouritesViewCache(store=store, ttl=favourites_view_ttl())
