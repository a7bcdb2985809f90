"""Classified filter query builder.

Translates flat listing query parameters (``make=4&minYear=2018&q=golf``) into
a structured ``ClassifiedFilter`` that repositories turn into WHERE clauses.

Every recognised query key is described once in ``FILTER_FIELDS``; each
``FilterFieldKind`` owns a single parse-and-apply function in ``_APPLIERS``.
Adding a filter means adding a row to the table, not another branch.

The builder is pure and never raises: unknown keys and empty values are
skipped, and a value that cannot be parsed for its kind (``make=abc``,
``fuelType=steam``) contributes no condition.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

from car_dealer.domain.classified import (
    BodyType,
    ClassifiedStatus,
    Colour,
    CurrencyCode,
    FuelType,
    OdoUnit,
    Transmission,
    ULEZCompliance,
)

logger = logging.getLogger(__name__)

Number = int | float

TEXT_SEARCH_FIELDS: tuple[str, ...] = ("title", "description")


class FilterFieldKind(Enum):
    TAXONOMY = "taxonomy"
    ENUM = "enum"
    NUMERIC = "numeric"
    RANGE = "range"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class FilterField:
    """How one query parameter maps onto the classified filter."""

    param: str
    kind: FilterFieldKind
    target: str
    enum_type: type[Enum] | None = None
    bound: Literal["gte", "lte"] | None = None


FILTER_FIELDS: dict[str, FilterField] = {
    f.param: f
    for f in (
        FilterField("make", FilterFieldKind.TAXONOMY, "make"),
        FilterField("model", FilterFieldKind.TAXONOMY, "model"),
        FilterField("modelVariant", FilterFieldKind.TAXONOMY, "model_variant"),
        FilterField("odoUnit", FilterFieldKind.ENUM, "odo_unit", enum_type=OdoUnit),
        FilterField("currency", FilterFieldKind.ENUM, "currency", enum_type=CurrencyCode),
        FilterField(
            "transmission", FilterFieldKind.ENUM, "transmission", enum_type=Transmission
        ),
        FilterField("bodyType", FilterFieldKind.ENUM, "body_type", enum_type=BodyType),
        FilterField("fuelType", FilterFieldKind.ENUM, "fuel_type", enum_type=FuelType),
        FilterField("colour", FilterFieldKind.ENUM, "colour", enum_type=Colour),
        FilterField(
            "ulezCompliance",
            FilterFieldKind.ENUM,
            "ulez_compliance",
            enum_type=ULEZCompliance,
        ),
        FilterField("seats", FilterFieldKind.NUMERIC, "seats"),
        FilterField("doors", FilterFieldKind.NUMERIC, "doors"),
        FilterField("minYear", FilterFieldKind.RANGE, "year", bound="gte"),
        FilterField("maxYear", FilterFieldKind.RANGE, "year", bound="lte"),
        FilterField("minPrice", FilterFieldKind.RANGE, "price", bound="gte"),
        FilterField("maxPrice", FilterFieldKind.RANGE, "price", bound="lte"),
        FilterField("minReading", FilterFieldKind.RANGE, "odo_reading", bound="gte"),
        FilterField("maxReading", FilterFieldKind.RANGE, "odo_reading", bound="lte"),
        FilterField("q", FilterFieldKind.TEXT, "q"),
    )
}


@dataclass(frozen=True, slots=True)
class Range:
    gte: Number | None = None
    lte: Number | None = None

    def to_dict(self) -> dict[str, Number]:
        bounds: dict[str, Number] = {}
        if self.gte is not None:
            bounds["gte"] = self.gte
        if self.lte is not None:
            bounds["lte"] = self.lte
        return bounds


@dataclass(frozen=True, slots=True)
class TextSearch:
    """Case-insensitive substring match, OR-ed across ``fields``."""

    term: str
    fields: tuple[str, ...] = TEXT_SEARCH_FIELDS

    def to_dict(self) -> dict[str, Any]:
        return {
            "OR": [
                {name: {"contains": self.term, "mode": "insensitive"}}
                for name in self.fields
            ]
        }


@dataclass(frozen=True)
class ClassifiedFilter:
    """
    Conjunction of conditions over classifieds.

    ``status`` is always present. ``taxonomy`` maps make/model/model_variant to
    an id, ``enums`` and ``numbers`` hold exact matches, ``ranges`` hold
    inclusive bounds and ``text`` the optional free-text search.
    """

    status: ClassifiedStatus = ClassifiedStatus.LIVE
    taxonomy: Mapping[str, int] = field(default_factory=dict)
    enums: Mapping[str, Enum] = field(default_factory=dict)
    numbers: Mapping[str, Number] = field(default_factory=dict)
    ranges: Mapping[str, Range] = field(default_factory=dict)
    text: TextSearch | None = None

    @property
    def is_default(self) -> bool:
        return self == default_classified_filter()

    def to_dict(self) -> dict[str, Any]:
        """Structured form of the filter, one key per condition."""
        result: dict[str, Any] = {"status": self.status.value}
        if self.text is not None:
            result.update(self.text.to_dict())
        for name, identifier in self.taxonomy.items():
            result[name] = {"id": identifier}
        for name, member in self.enums.items():
            result[name] = member.value
        for name, number in self.numbers.items():
            result[name] = number
        for name, bounds in self.ranges.items():
            result[name] = bounds.to_dict()
        return result


@dataclass
class _FilterDraft:
    taxonomy: dict[str, int] = field(default_factory=dict)
    enums: dict[str, Enum] = field(default_factory=dict)
    numbers: dict[str, Number] = field(default_factory=dict)
    ranges: dict[str, dict[str, Number]] = field(default_factory=dict)
    text: TextSearch | None = None

    def freeze(self) -> ClassifiedFilter:
        return ClassifiedFilter(
            status=ClassifiedStatus.LIVE,
            taxonomy=dict(self.taxonomy),
            enums=dict(self.enums),
            numbers=dict(self.numbers),
            ranges={name: Range(**bounds) for name, bounds in self.ranges.items()},
            text=self.text,
        )


# Plain ASCII decimal or exponent notation; no digit separators.
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _parse_number(value: str) -> Number | None:
    value = value.strip()
    if not _NUMBER_PATTERN.fullmatch(value):
        return None

    try:
        return int(value)
    except ValueError:
        pass

    try:
        number = float(value)
    except ValueError:
        return None

    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def _apply_taxonomy(draft: _FilterDraft, filter_field: FilterField, value: str) -> bool:
    identifier = _parse_number(value)
    if not isinstance(identifier, int):
        return False
    draft.taxonomy[filter_field.target] = identifier
    return True


def _apply_enum(draft: _FilterDraft, filter_field: FilterField, value: str) -> bool:
    assert filter_field.enum_type is not None
    try:
        draft.enums[filter_field.target] = filter_field.enum_type(value.upper())
    except ValueError:
        return False
    return True


def _apply_numeric(draft: _FilterDraft, filter_field: FilterField, value: str) -> bool:
    number = _parse_number(value)
    if number is None:
        return False
    draft.numbers[filter_field.target] = number
    return True


def _apply_range(draft: _FilterDraft, filter_field: FilterField, value: str) -> bool:
    assert filter_field.bound is not None
    number = _parse_number(value)
    if number is None:
        return False
    draft.ranges.setdefault(filter_field.target, {})[filter_field.bound] = number
    return True


def _apply_text(draft: _FilterDraft, filter_field: FilterField, value: str) -> bool:
    draft.text = TextSearch(term=value)
    return True


_APPLIERS: dict[FilterFieldKind, Callable[[_FilterDraft, FilterField, str], bool]] = {
    FilterFieldKind.TAXONOMY: _apply_taxonomy,
    FilterFieldKind.ENUM: _apply_enum,
    FilterFieldKind.NUMERIC: _apply_numeric,
    FilterFieldKind.RANGE: _apply_range,
    FilterFieldKind.TEXT: _apply_text,
}


def default_classified_filter() -> ClassifiedFilter:
    """The filter used when no usable parameters were supplied: live only."""
    return ClassifiedFilter(status=ClassifiedStatus.LIVE)


def build_classified_filter(params: Mapping[str, str | None]) -> ClassifiedFilter:
    """
    Build a classified filter from string query parameters.

    Args:
        params: Query parameters keyed by their wire name (camelCase)

    Returns:
        ClassifiedFilter constrained to live classifieds
    """
    draft = _FilterDraft()

    for param, value in params.items():
        filter_field = FILTER_FIELDS.get(param)
        if filter_field is None or not value:
            continue

        if not _APPLIERS[filter_field.kind](draft, filter_field, value):
            logger.debug(
                "Ignoring malformed filter value",
                extra={"param": param, "value": value, "kind": filter_field.kind.value},
            )

    return draft.freeze()
