from __future__ import annotations

from dataclasses import dataclass, field

from car_dealer.domain.classified import Classified
from car_dealer.domain.favourites import Favourites, favourites_key
from car_dealer.ports.classified_repository import ClassifiedRepository
from car_dealer.ports.key_value_store import KeyValueStore


@dataclass(frozen=True, slots=True)
class GetFavouritesRequest:
    source_id: str | None


@dataclass(frozen=True, slots=True)
class GetFavouritesResponse:
    ids: list[int] = field(default_factory=list)
    classifieds: list[Classified] = field(default_factory=list)


class GetFavourites:
    """
    Read a visitor's favourites and the live classifieds they point at.

    Read-only: a visitor without a session id gets an empty result and the
    store is not consulted. Ids whose classified is gone or no longer live
    stay in ``ids`` but have no entry in ``classifieds``.
    """

    def __init__(
        self,
        store: KeyValueStore,
        classified_repository: ClassifiedRepository,
    ) -> None:
        self._store = store
        self._repository = classified_repository

    def execute(self, request: GetFavouritesRequest) -> GetFavouritesResponse:
        if not request.source_id:
            return GetFavouritesResponse()

        favourites = Favourites.from_payload(self._store.get(favourites_key(request.source_id)))
        if not favourites.ids:
            return GetFavouritesResponse()

        return GetFavouritesResponse(
            ids=list(favourites.ids),
            classifieds=self._repository.get_by_ids(favourites.ids),
        )
