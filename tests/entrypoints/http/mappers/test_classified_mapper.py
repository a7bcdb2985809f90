"""
Test suite for ClassifiedFilterMapper and ClassifiedMapper.

Verifies:
- Query parameters are validated and turned into the domain filter
- Parameters that do not fit the schema fall back to the default filter
- Page resolution from the raw query
- Domain classifieds map to response DTOs with display labels
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from car_dealer.domain.classified import (
    Bounds,
    Classified,
    ClassifiedImage,
    ClassifiedRanges,
    CurrencyCode,
    FuelType,
    OdoUnit,
    Transmission,
)
from car_dealer.domain.classified_filter import build_classified_filter, default_classified_filter
from car_dealer.entrypoints.http.mappers.classified_mapper import (
    ClassifiedFilterMapper,
    ClassifiedMapper,
)
from car_dealer.use_cases.search_classifieds import SearchClassifiedsResponse


# ==============================================================================
# ClassifiedFilterMapper.from_query_params
# ==============================================================================


def test_from_query_params_builds_filter() -> None:
    result = ClassifiedFilterMapper.from_query_params(
        {"make": "4", "minYear": "2018", "fuelType": "diesel", "q": "estate"}
    )

    assert result == build_classified_filter(
        {"make": "4", "minYear": "2018", "fuelType": "diesel", "q": "estate"}
    )


def test_from_query_params_ignores_unknown_keys() -> None:
    result = ClassifiedFilterMapper.from_query_params({"utm_campaign": "spring", "page": "2"})

    assert result == default_classified_filter()


def test_from_query_params_ignores_malformed_values() -> None:
    result = ClassifiedFilterMapper.from_query_params({"make": "four", "model": "9"})

    assert result.to_dict() == {"status": "LIVE", "model": {"id": 9}}


def test_repeated_key_falls_back_to_default(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        result = ClassifiedFilterMapper.from_query_params({"make": ["4", "5"], "model": "9"})

    assert result == default_classified_filter()
    assert "Listing filter parameters rejected" in caplog.text


def test_all_values_ignored_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        result = ClassifiedFilterMapper.from_query_params({"seats": "1_000", "make": "two"})

    assert result.is_default
    record = next(r for r in caplog.records if r.message == "Listing filter parameters all ignored")
    assert record.parameters == ["make", "seats"]


def test_usable_or_absent_parameters_are_not_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO):
        ClassifiedFilterMapper.from_query_params({})
        ClassifiedFilterMapper.from_query_params({"make": "4"})

    assert "Listing filter parameters all ignored" not in caplog.text


def test_non_string_value_falls_back_to_default() -> None:
    assert ClassifiedFilterMapper.from_query_params({"doors": 5}) == default_classified_filter()


# ==============================================================================
# ClassifiedFilterMapper paging
# ==============================================================================


@pytest.mark.parametrize(
    "raw, expected_page",
    [
        ({}, 1),
        ({"page": "2"}, 2),
        ({"page": "0"}, 1),
        ({"page": "-5"}, 1),
        ({"page": "abc"}, 1),
        ({"page": ["2", "3"]}, 1),
    ],
)
def test_to_domain_paging(raw: dict, expected_page: int) -> None:
    paging = ClassifiedFilterMapper.to_domain_paging(raw, page_size=3)

    assert paging.page == expected_page
    assert paging.page_size == 3


def test_to_domain_request_combines_filter_and_paging() -> None:
    request = ClassifiedFilterMapper.to_domain_request({"make": "1", "page": "3"}, page_size=3)

    assert request.classified_filter.taxonomy == {"make": 1}
    assert request.paging.offset == 6
    assert request.source_id is None


def test_to_domain_request_carries_source_id() -> None:
    request = ClassifiedFilterMapper.to_domain_request({}, page_size=3, source_id="abc")

    assert request.source_id == "abc"


# ==============================================================================
# ClassifiedMapper
# ==============================================================================


@pytest.fixture
def classified(make_classified: Callable[..., Classified]) -> Classified:
    return make_classified(
        7,
        price=1_250_000,
        currency=CurrencyCode.GBP,
        odo_reading=45_000,
        odo_unit=OdoUnit.MILES,
        transmission=Transmission.AUTOMATIC,
        fuel_type=FuelType.HYBRID,
        model_variant_id=3,
        images=(ClassifiedImage(src="https://img.example/7.jpg", alt="Front"),),
    )


def test_to_response_maps_fields(classified: Classified) -> None:
    dto = ClassifiedMapper.to_response(classified)

    assert dto.id == 7
    assert dto.price == 1_250_000
    assert dto.currency == CurrencyCode.GBP
    assert dto.model_variant_id == 3
    assert [image.src for image in dto.images] == ["https://img.example/7.jpg"]


def test_to_display_formats_labels(classified: Classified) -> None:
    display = ClassifiedMapper.to_display(classified)

    assert display.price == "£12,500"
    assert display.odo_reading == "45,000"
    assert display.odo_unit == "mi"
    assert display.transmission == "Automatic"
    assert display.fuel_type == "Hybrid"
    assert display.body_type == "Sedan"
    assert display.colour == "Black"
    assert display.ulez_compliance == "Exempt"


def test_to_search_response(classified: Classified) -> None:
    dto = ClassifiedMapper.to_search_response(
        SearchClassifiedsResponse(
            classifieds=[classified],
            total_count=7,
            page=2,
            page_size=3,
            total_pages=3,
            favourite_ids=[7, 2],
        )
    )

    assert dto.total == 7
    assert dto.page == 2
    assert dto.page_size == 3
    assert dto.total_pages == 3
    assert [c.id for c in dto.classifieds] == [7]
    assert dto.favourite_ids == [7, 2]


def test_to_ranges_response() -> None:
    dto = ClassifiedMapper.to_ranges_response(
        ClassifiedRanges(
            year=Bounds(min=2015, max=2024),
            price=Bounds(min=300_000, max=7_500_000),
            odo_reading=Bounds(),
        )
    )

    assert dto.model_dump() == {
        "year": {"min": 2015, "max": 2024},
        "price": {"min": 300_000, "max": 7_500_000},
        "odo_reading": {"min": None, "max": None},
    }
