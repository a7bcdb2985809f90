"""Cache of rendered favourites views, one entry per visitor."""

from __future__ import annotations

import logging

from pydantic import ValidationError as PydanticValidationError

from car_dealer.domain.favourites import Favourites, favourites_key, favourites_view_key
from car_dealer.entrypoints.http.dtos.favourites import FavouritesResponseDTO
from car_dealer.ports.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class FavouritesViewCache:
    """
    Read/write the JSON payload of GET /favourites in the key-value store.

    The toggle use case deletes the entry after every write to the visitor's
    favourites. A view written by a read that overlapped such a toggle is
    still caught on ``read``: an entry is only served while its ``ids`` equal
    the stored favourites.
    """

    def __init__(self, store: KeyValueStore, ttl: int) -> None:
        self._store = store
        self._ttl = ttl

    def read(self, source_id: str) -> FavouritesResponseDTO | None:
        key = favourites_view_key(source_id)
        cached = self._store.get(key)
        if cached is None:
            return None

        try:
            view = FavouritesResponseDTO.model_validate(cached)
        except PydanticValidationError:
            logger.warning("Discarding malformed favourites view", extra={"key": key})
            self._store.delete(key)
            return None

        current = Favourites.from_payload(self._store.get(favourites_key(source_id)))
        if tuple(view.ids) != current.ids:
            logger.info("Discarding stale favourites view", extra={"key": key})
            self._store.delete(key)
            return None

        return view

    def write(self, source_id: str, payload: FavouritesResponseDTO) -> None:
        self._store.set(
            favourites_view_key(source_id),
            payload.model_dump(mode="json"),
            ttl=self._ttl,
        )
