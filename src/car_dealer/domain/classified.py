from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ClassifiedStatus(str, Enum):
    LIVE = "LIVE"
    DRAFT = "DRAFT"
    SOLD = "SOLD"


class CurrencyCode(str, Enum):
    GBP = "GBP"
    EUR = "EUR"
    USD = "USD"


class OdoUnit(str, Enum):
    MILES = "MILES"
    KILOMETERS = "KILOMETERS"


class Transmission(str, Enum):
    MANUAL = "MANUAL"
    AUTOMATIC = "AUTOMATIC"


class FuelType(str, Enum):
    PETROL = "PETROL"
    DIESEL = "DIESEL"
    ELECTRIC = "ELECTRIC"
    HYBRID = "HYBRID"


class BodyType(str, Enum):
    SEDAN = "SEDAN"
    HATCHBACK = "HATCHBACK"
    SUV = "SUV"
    COUPE = "COUPE"
    CONVERTIBLE = "CONVERTIBLE"
    WAGON = "WAGON"


class Colour(str, Enum):
    BLACK = "BLACK"
    BLUE = "BLUE"
    BROWN = "BROWN"
    GOLD = "GOLD"
    GREEN = "GREEN"
    GREY = "GREY"
    ORANGE = "ORANGE"
    PINK = "PINK"
    PURPLE = "PURPLE"
    RED = "RED"
    SILVER = "SILVER"
    WHITE = "WHITE"
    YELLOW = "YELLOW"


class ULEZCompliance(str, Enum):
    EXEMPT = "EXEMPT"
    NON_EXEMPT = "NON_EXEMPT"


@dataclass(frozen=True, slots=True)
class ClassifiedImage:
    src: str
    alt: str


@dataclass(frozen=True)
class Classified:
    id: int
    title: str
    year: int
    price: int  # Minor units (pence/cents)
    odo_reading: int
    make_id: int
    model_id: int
    description: str | None = None
    model_variant_id: int | None = None
    odo_unit: OdoUnit = OdoUnit.MILES
    currency: CurrencyCode = CurrencyCode.GBP
    transmission: Transmission = Transmission.MANUAL
    fuel_type: FuelType = FuelType.PETROL
    body_type: BodyType = BodyType.SEDAN
    colour: Colour = Colour.BLACK
    doors: int = 5
    seats: int = 5
    ulez_compliance: ULEZCompliance = ULEZCompliance.EXEMPT
    status: ClassifiedStatus = ClassifiedStatus.LIVE
    images: tuple[ClassifiedImage, ...] = ()


@dataclass(frozen=True, slots=True)
class Bounds:
    min: int | None = None
    max: int | None = None


@dataclass(frozen=True, slots=True)
class ClassifiedRanges:
    """Min/max of the range-filterable fields across live classifieds."""

    year: Bounds
    price: Bounds
    odo_reading: Bounds
