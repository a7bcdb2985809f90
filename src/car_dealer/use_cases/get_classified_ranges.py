from __future__ import annotations

from car_dealer.domain.classified import ClassifiedRanges
from car_dealer.ports.classified_repository import ClassifiedRepository


class GetClassifiedRanges:
    """Bounds for the year/price/odometer range filters, over live stock only."""

    def __init__(self, classified_repository: ClassifiedRepository) -> None:
        self._repository = classified_repository

    def execute(self) -> ClassifiedRanges:
        return self._repository.get_ranges()
