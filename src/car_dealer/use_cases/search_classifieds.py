from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from car_dealer.domain.classified import Classified, ClassifiedStatus
from car_dealer.domain.classified_filter import ClassifiedFilter
from car_dealer.domain.favourites import Favourites, favourites_key
from car_dealer.domain.paging import Paging, page_count
from car_dealer.ports.classified_repository import ClassifiedRepository
from car_dealer.ports.key_value_store import KeyValueStore


@dataclass(frozen=True, slots=True)
class SearchClassifiedsRequest:
    classified_filter: ClassifiedFilter
    paging: Paging
    source_id: str | None = None


@dataclass(frozen=True, slots=True)
class SearchClassifiedsResponse:
    classifieds: list[Classified]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    favourite_ids: list[int] = field(default_factory=list)


class SearchClassifieds:
    """
    Inventory listing: one page of live classifieds matching a filter.

    Filtering itself is delegated to the repository adapter; the use case
    validates paging, pins the status to LIVE and derives the page count.
    The visitor's favourite ids come along so each card can show its state;
    without a session id the store is not consulted.
    """

    def __init__(
        self,
        classified_repository: ClassifiedRepository,
        store: KeyValueStore,
    ) -> None:
        self._repository = classified_repository
        self._store = store

    def execute(self, request: SearchClassifiedsRequest) -> SearchClassifiedsResponse:
        """
        Execute inventory search.

        Args:
            request: Filter, paging and the optional visitor session id

        Returns:
            Response with the page of classifieds and pagination metadata

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        request.paging.validate()

        classified_filter = request.classified_filter
        if classified_filter.status != ClassifiedStatus.LIVE:
            classified_filter = dataclasses.replace(
                classified_filter, status=ClassifiedStatus.LIVE
            )

        result = self._repository.search(
            classified_filter=classified_filter,
            paging=request.paging,
        )

        return SearchClassifiedsResponse(
            classifieds=result.classifieds,
            total_count=result.total_count,
            page=request.paging.page,
            page_size=request.paging.page_size,
            total_pages=page_count(result.total_count, request.paging.page_size),
            favourite_ids=self._favourite_ids(request.source_id),
        )

    def _favourite_ids(self, source_id: str | None) -> list[int]:
        if not source_id:
            return []
        return list(Favourites.from_payload(self._store.get(favourites_key(source_id))).ids)
