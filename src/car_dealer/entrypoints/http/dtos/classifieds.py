from pydantic import BaseModel, ConfigDict, Field, StrictStr

from car_dealer.domain.classified import (
    BodyType,
    Colour,
    CurrencyCode,
    FuelType,
    OdoUnit,
    Transmission,
    ULEZCompliance,
)


class ClassifiedFilterQueryDTO(BaseModel):
    """
    Recognised listing query parameters.

    Every field is an optional string under its camelCase wire name. Unknown
    keys are ignored; a non-string value (e.g. a repeated key) fails
    validation, which the mapper turns into the default live-only filter.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        protected_namespaces=(),
    )

    q: StrictStr | None = Field(
        default=None,
        description="Free text, case-insensitive match on title or description",
        examples=["golf"],
    )
    make: StrictStr | None = Field(default=None, description="Make id", examples=["4"])
    model: StrictStr | None = Field(default=None, description="Model id", examples=["9"])
    model_variant: StrictStr | None = Field(
        default=None, alias="modelVariant", description="Model variant id"
    )
    min_year: StrictStr | None = Field(default=None, alias="minYear", examples=["2018"])
    max_year: StrictStr | None = Field(default=None, alias="maxYear", examples=["2023"])
    min_price: StrictStr | None = Field(
        default=None, alias="minPrice", description="Minor units", examples=["500000"]
    )
    max_price: StrictStr | None = Field(
        default=None, alias="maxPrice", description="Minor units", examples=["2500000"]
    )
    min_reading: StrictStr | None = Field(default=None, alias="minReading")
    max_reading: StrictStr | None = Field(default=None, alias="maxReading")
    currency: StrictStr | None = Field(default=None, examples=["GBP"])
    odo_unit: StrictStr | None = Field(default=None, alias="odoUnit", examples=["MILES"])
    transmission: StrictStr | None = Field(default=None, examples=["automatic"])
    fuel_type: StrictStr | None = Field(default=None, alias="fuelType", examples=["petrol"])
    body_type: StrictStr | None = Field(default=None, alias="bodyType", examples=["suv"])
    colour: StrictStr | None = Field(default=None, examples=["black"])
    doors: StrictStr | None = Field(default=None, examples=["5"])
    seats: StrictStr | None = Field(default=None, examples=["5"])
    ulez_compliance: StrictStr | None = Field(
        default=None, alias="ulezCompliance", examples=["exempt"]
    )


class ClassifiedImageDTO(BaseModel):
    src: str
    alt: str


class ClassifiedDisplayDTO(BaseModel):
    """Human-readable labels for a classified's attributes."""

    price: str
    odo_reading: str
    odo_unit: str
    transmission: str
    fuel_type: str
    body_type: str
    colour: str
    ulez_compliance: str


class ClassifiedResponseDTO(BaseModel):
    id: int
    title: str
    description: str | None
    year: int
    price: int
    currency: CurrencyCode
    odo_reading: int
    odo_unit: OdoUnit
    transmission: Transmission
    fuel_type: FuelType
    body_type: BodyType
    colour: Colour
    doors: int
    seats: int
    ulez_compliance: ULEZCompliance
    make_id: int
    model_id: int
    model_variant_id: int | None
    images: list[ClassifiedImageDTO]
    display: ClassifiedDisplayDTO


class ClassifiedSearchResponseDTO(BaseModel):
    classifieds: list[ClassifiedResponseDTO]
    total: int
    page: int
    page_size: int
    total_pages: int
    favourite_ids: list[int] = Field(
        default_factory=list,
        description="Ids the visitor has favourited, for marking cards in the listing",
    )


class BoundsDTO(BaseModel):
    min: int | None
    max: int | None


class ClassifiedRangesResponseDTO(BaseModel):
    year: BoundsDTO
    price: BoundsDTO
    odo_reading: BoundsDTO
