from pydantic import BaseModel, ConfigDict, Field, StrictInt

from car_dealer.entrypoints.http.dtos.classifieds import ClassifiedResponseDTO


class ToggleFavouriteRequestDTO(BaseModel):
    """Body of POST /favourites. ``id`` must be a JSON integer: "42", 4.2 and true are rejected."""

    id: StrictInt = Field(description="Classified id to toggle", examples=[42])

    model_config = ConfigDict(json_schema_extra={"example": {"id": 42}})


class ToggleFavouriteResponseDTO(BaseModel):
    ids: list[int]


class FavouritesResponseDTO(BaseModel):
    ids: list[int]
    classifieds: list[ClassifiedResponseDTO]


class FavouriteErrorResponseDTO(BaseModel):
    error: str
