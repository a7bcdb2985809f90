from __future__ import annotations

from collections.abc import Sequence

from car_dealer.domain.classified import (
    Bounds,
    Classified,
    ClassifiedRanges,
    ClassifiedStatus,
)
from car_dealer.domain.classified_filter import ClassifiedFilter
from car_dealer.domain.paging import Paging
from car_dealer.ports.classified_repository import ClassifiedRepository, SearchResult

# Filter target name -> Classified attribute holding the taxonomy id
_TAXONOMY_ATTRIBUTES = {
    "make": "make_id",
    "model": "model_id",
    "model_variant": "model_variant_id",
}


class InMemoryClassifiedRepository(ClassifiedRepository):
    """
    Canonical contract implementation for tests.

    - Stores classifieds in insertion order
    - Applies AND-semantics filtering, text search OR-ed across fields
    - Applies paging AFTER filtering
    - Returns total_count of matching classifieds before paging
    """

    def __init__(self, classifieds: list[Classified]) -> None:
        self._classifieds = classifieds

    def search(self, classified_filter: ClassifiedFilter, paging: Paging) -> SearchResult:
        matches = [c for c in self._classifieds if self._matches(c, classified_filter)]
        total_count = len(matches)

        start = paging.offset
        end = paging.offset + paging.limit

        return SearchResult(classifieds=matches[start:end], total_count=total_count)

    def get_by_id(self, classified_id: int) -> Classified | None:
        return next((c for c in self._classifieds if c.id == classified_id), None)

    def get_by_ids(self, classified_ids: Sequence[int]) -> list[Classified]:
        live = {c.id: c for c in self._classifieds if c.status == ClassifiedStatus.LIVE}
        return [live[i] for i in classified_ids if i in live]

    def get_ranges(self) -> ClassifiedRanges:
        live = [c for c in self._classifieds if c.status == ClassifiedStatus.LIVE]

        def bounds(attribute: str) -> Bounds:
            values = [getattr(c, attribute) for c in live]
            if not values:
                return Bounds()
            return Bounds(min=min(values), max=max(values))

        return ClassifiedRanges(
            year=bounds("year"),
            price=bounds("price"),
            odo_reading=bounds("odo_reading"),
        )

    def _matches(self, classified: Classified, classified_filter: ClassifiedFilter) -> bool:
        if classified.status != classified_filter.status:
            return False

        for name, identifier in classified_filter.taxonomy.items():
            if getattr(classified, _TAXONOMY_ATTRIBUTES[name]) != identifier:
                return False

        for name, member in classified_filter.enums.items():
            if getattr(classified, name) != member:
                return False

        for name, number in classified_filter.numbers.items():
            if getattr(classified, name) != number:
                return False

        for name, bounds in classified_filter.ranges.items():
            value = getattr(classified, name)
            if bounds.gte is not None and value < bounds.gte:
                return False
            if bounds.lte is not None and value > bounds.lte:
                return False

        text = classified_filter.text
        if text is not None:
            term = text.term.lower()
            haystacks = [getattr(classified, name) or "" for name in text.fields]
            if not any(term in haystack.lower() for haystack in haystacks):
                return False

        return True
