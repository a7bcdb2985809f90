"""Toggle a classified in a visitor's favourites."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from car_dealer.domain.errors import ValidationError
from car_dealer.domain.favourites import Favourites, favourites_key, favourites_view_key
from car_dealer.ports.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ToggleFavouriteRequest:
    source_id: str
    classified_id: int


@dataclass(frozen=True, slots=True)
class ToggleFavouriteResponse:
    ids: list[int]


class ToggleFavourite:
    """
    Add a classified to the visitor's favourites, or remove it if present.

    The record is read, toggled and written back whole. There is no
    compare-and-swap: two concurrent toggles for one session can lose an
    update (last writer wins).

    After the write the cached favourites view for the session is dropped so
    the next read reflects the change.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def execute(self, request: ToggleFavouriteRequest) -> ToggleFavouriteResponse:
        """
        Execute the toggle.

        Args:
            request: Session id and classified id to toggle

        Returns:
            ToggleFavouriteResponse with the full updated list of ids

        Raises:
            ValidationError: If classified_id is not an integer (store untouched)
        """
        classified_id = request.classified_id
        if not isinstance(classified_id, int) or isinstance(classified_id, bool):
            raise ValidationError(
                errors=[
                    {
                        "field": "id",
                        "message": "Must be an integer",
                        "code": "INVALID_ID",
                    }
                ]
            )

        key = favourites_key(request.source_id)
        favourites = Favourites.from_payload(self._store.get(key))
        was_favourite = favourites.contains(classified_id)

        favourites = favourites.toggled(classified_id)
        self._store.set(key, favourites.to_payload())
        self._store.delete(favourites_view_key(request.source_id))

        logger.info(
            "Favourite toggled",
            extra={
                "classified_id": classified_id,
                "action": "removed" if was_favourite else "added",
                "favourites_count": len(favourites.ids),
            },
        )

        return ToggleFavouriteResponse(ids=list(favourites.ids))
