"""Get classified by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_dealer.domain.classified import Classified, ClassifiedStatus
from car_dealer.domain.errors import NotFoundError
from car_dealer.ports.classified_repository import ClassifiedRepository


@dataclass(frozen=True, slots=True)
class GetClassifiedByIdRequest:
    classified_id: int


@dataclass(frozen=True, slots=True)
class GetClassifiedByIdResponse:
    classified: Classified


class GetClassifiedById:
    """
    Use case for retrieving a single live classified.

    Classifieds that exist but are not live are reported as missing, the
    same as ids that do not exist at all.
    """

    def __init__(self, classified_repository: ClassifiedRepository) -> None:
        self._repository = classified_repository

    def execute(self, request: GetClassifiedByIdRequest) -> GetClassifiedByIdResponse:
        """
        Raises:
            NotFoundError: If no live classified has the given id
        """
        classified = self._repository.get_by_id(request.classified_id)

        if classified is None or classified.status != ClassifiedStatus.LIVE:
            raise NotFoundError(resource="Classified", identifier=str(request.classified_id))

        return GetClassifiedByIdResponse(classified=classified)
