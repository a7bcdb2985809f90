from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from car_dealer.entrypoints.http.dtos.favourites import (
    FavouritesResponseDTO,
    ToggleFavouriteResponseDTO,
)
from car_dealer.entrypoints.http.mappers.classified_mapper import ClassifiedMapper
from car_dealer.use_cases.get_favourites import GetFavouritesResponse
from car_dealer.use_cases.toggle_favourite import ToggleFavouriteResponse


class FavouritesMapper:
    """Maps favourites use case results to REST response DTOs."""

    @staticmethod
    def to_toggle_response(result: ToggleFavouriteResponse) -> ToggleFavouriteResponseDTO:
        return ToggleFavouriteResponseDTO(ids=result.ids)

    @staticmethod
    def to_view_response(result: GetFavouritesResponse) -> FavouritesResponseDTO:
        return FavouritesResponseDTO(
            ids=result.ids,
            classifieds=[ClassifiedMapper.to_response(c) for c in result.classifieds],
        )

    @staticmethod
    def describe_validation_error(exc: PydanticValidationError) -> str:
        """One-line summary of a rejected request body, e.g. ``id: Input should be a valid integer``."""
        parts = []
        for error in exc.errors():
            location = ".".join(str(loc) for loc in error["loc"])
            parts.append(f"{location}: {error['msg']}" if location else error["msg"])
        return "; ".join(parts)
