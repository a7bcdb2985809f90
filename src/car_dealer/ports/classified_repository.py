from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from car_dealer.domain.classified import Classified, ClassifiedRanges
from car_dealer.domain.classified_filter import ClassifiedFilter
from car_dealer.domain.paging import Paging


@dataclass(frozen=True)
class SearchResult:
    """Result from classified search including pagination metadata."""

    classifieds: list[Classified]
    total_count: int  # Total matching classifieds before paging


class ClassifiedRepository(ABC):
    """
    Port for classified data access.

    Contract (Preconditions):
        - filter and paging parameters must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def search(self, classified_filter: ClassifiedFilter, paging: Paging) -> SearchResult:
        """
        Search classifieds with a filter and paging.

        Args:
            classified_filter: Conditions to apply (AND semantics, text search OR-ed)
            paging: Pagination parameters - pre-validated

        Returns:
            SearchResult containing the requested page and the total count
        """
        ...

    @abstractmethod
    def get_by_id(self, classified_id: int) -> Classified | None:
        """Return the classified with ``classified_id``, or None."""
        ...

    @abstractmethod
    def get_by_ids(self, classified_ids: Sequence[int]) -> list[Classified]:
        """
        Return live classifieds for ``classified_ids`` in the given order.

        Ids that do not resolve to a live classified are skipped.
        """
        ...

    @abstractmethod
    def get_ranges(self) -> ClassifiedRanges:
        """Min/max of year, price and odometer reading over live classifieds."""
        ...
