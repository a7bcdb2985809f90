"""Display labels for classified attributes."""

from __future__ import annotations

from car_dealer.domain.classified import (
    BodyType,
    Colour,
    CurrencyCode,
    FuelType,
    OdoUnit,
    Transmission,
    ULEZCompliance,
)

CURRENCY_SYMBOLS: dict[CurrencyCode, str] = {
    CurrencyCode.GBP: "£",
    CurrencyCode.EUR: "€",
    CurrencyCode.USD: "$",
}

BODY_TYPE_LABELS: dict[BodyType, str] = {
    BodyType.CONVERTIBLE: "Convertible",
    BodyType.COUPE: "Coupe",
    BodyType.HATCHBACK: "Hatchback",
    BodyType.SUV: "SUV",
    BodyType.WAGON: "Wagon",
    BodyType.SEDAN: "Sedan",
}

FUEL_TYPE_LABELS: dict[FuelType, str] = {
    FuelType.PETROL: "Petrol",
    FuelType.DIESEL: "Diesel",
    FuelType.ELECTRIC: "Electric",
    FuelType.HYBRID: "Hybrid",
}


def format_price(price: int | None, currency: CurrencyCode | None) -> str:
    """
    Format a price held in minor units as whole currency units.

    >>> format_price(1250000, CurrencyCode.GBP)
    '£12,500'
    """
    if not price:
        return "0"

    symbol = CURRENCY_SYMBOLS.get(currency, "") if currency else ""
    return f"{symbol}{round(price / 100):,}"


def format_number(num: int | float | None) -> str:
    if not num:
        return "0"
    return f"{num:,}"


def format_odometer_unit(unit: OdoUnit) -> str:
    return "mi" if unit == OdoUnit.MILES else "km"


def format_transmission(transmission: Transmission) -> str:
    return "Automatic" if transmission == Transmission.AUTOMATIC else "Manual"


def format_ulez_compliance(ulez_compliance: ULEZCompliance) -> str:
    return "Exempt" if ulez_compliance == ULEZCompliance.EXEMPT else "Non-Exempt"


def format_body_type(body_type: BodyType) -> str:
    return BODY_TYPE_LABELS.get(body_type, "Unknown")


def format_fuel_type(fuel_type: FuelType) -> str:
    return FUEL_TYPE_LABELS.get(fuel_type, "Unknown")


def format_colour(colour: Colour) -> str:
    return colour.value.capitalize()
