"""
Unit test suite for PostgresClassifiedRepository.

This test suite verifies the PostgreSQL implementation using mocks.
Tests verify:
- COUNT(*) and SELECT queries are executed for search
- Filters are translated to SQL WHERE clauses
- Paging (OFFSET/LIMIT) is applied
- Rows are converted to domain entities
- Lookups by id(s) and range aggregation
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import Session

from car_dealer.adapters.postgres_classified_repository import PostgresClassifiedRepository
from car_dealer.domain.classified import (
    BodyType,
    Bounds,
    Classified,
    ClassifiedImage,
    ClassifiedStatus,
    Colour,
    CurrencyCode,
    FuelType,
    OdoUnit,
    Transmission,
    ULEZCompliance,
)
from car_dealer.domain.classified_filter import build_classified_filter
from car_dealer.domain.paging import Paging
from car_dealer.infra.db.models import ClassifiedRow, ImageRow


@pytest.fixture()
def mock_session() -> Mock:
    """Mock SQLAlchemy session."""
    return Mock(spec=Session)


def _row(id: int, status: ClassifiedStatus = ClassifiedStatus.LIVE) -> ClassifiedRow:
    return ClassifiedRow(
        id=id,
        title=f"Classified {id}",
        description="Full service history",
        year=2020,
        price=1_250_000,
        odo_reading=40_000,
        doors=5,
        seats=5,
        odo_unit=OdoUnit.KILOMETERS,
        currency=CurrencyCode.GBP,
        transmission=Transmission.AUTOMATIC,
        fuel_type=FuelType.HYBRID,
        body_type=BodyType.SUV,
        colour=Colour.RED,
        ulez_compliance=ULEZCompliance.EXEMPT,
        status=status,
        make_id=1,
        model_id=2,
        model_variant_id=3,
        images=[ImageRow(src=f"https://img.example/{id}.jpg", alt=f"Classified {id}")],
    )


def _search_results(mock_session: Mock, total: int | None, rows: list[ClassifiedRow]) -> None:
    count_result = Mock()
    count_result.scalar.return_value = total

    select_result = Mock()
    select_result.scalars.return_value.all.return_value = rows

    mock_session.execute.side_effect = [count_result, select_result]


def _compiled(statement) -> str:
    return str(
        statement.compile(
            dialect=postgresql.dialect(),
            compile_kwargs={"literal_binds": True},
        )
    )


# ==============================================================================
# Search
# ==============================================================================


def test_search_executes_count_and_select_queries(mock_session: Mock) -> None:
    _search_results(mock_session, 2, [_row(1), _row(2)])
    repo = PostgresClassifiedRepository(mock_session)

    result = repo.search(build_classified_filter({}), Paging(page=1, page_size=3))

    assert mock_session.execute.call_count == 2
    assert result.total_count == 2
    assert [c.id for c in result.classifieds] == [1, 2]


def test_search_handles_null_count_as_zero(mock_session: Mock) -> None:
    _search_results(mock_session, None, [])
    repo = PostgresClassifiedRepository(mock_session)

    result = repo.search(build_classified_filter({}), Paging())

    assert result.total_count == 0
    assert result.classifieds == []


def test_search_applies_paging(mock_session: Mock) -> None:
    _search_results(mock_session, 10, [])
    repo = PostgresClassifiedRepository(mock_session)

    repo.search(build_classified_filter({}), Paging(page=3, page_size=3))

    select_sql = _compiled(mock_session.execute.call_args_list[1][0][0])
    assert "LIMIT 3" in select_sql
    assert "OFFSET 6" in select_sql
    assert "ORDER BY classifieds.created_at DESC, classifieds.id DESC" in select_sql


def test_search_always_restricts_to_live(mock_session: Mock) -> None:
    _search_results(mock_session, 0, [])
    repo = PostgresClassifiedRepository(mock_session)

    repo.search(build_classified_filter({}), Paging())

    count_sql = _compiled(mock_session.execute.call_args_list[0][0][0])
    assert "classifieds.status = 'LIVE'" in count_sql


def test_build_query_translates_every_filter_kind(mock_session: Mock) -> None:
    repo = PostgresClassifiedRepository(mock_session)
    classified_filter = build_classified_filter(
        {
            "make": "4",
            "modelVariant": "7",
            "fuelType": "electric",
            "seats": "7",
            "minYear": "2018",
            "maxPrice": "2000000",
            "q": "tesla",
        }
    )

    sql = _compiled(repo._build_query(classified_filter))

    assert "classifieds.make_id = 4" in sql
    assert "classifieds.model_variant_id = 7" in sql
    assert "classifieds.fuel_type = 'ELECTRIC'" in sql
    assert "classifieds.seats = 7" in sql
    assert "classifieds.year >= 2018" in sql
    assert "classifieds.price <= 2000000" in sql
    assert "classifieds.title" in sql
    assert "classifieds.description" in sql
    assert "tesla" in sql
    assert " OR " in sql


def test_build_query_without_conditions_only_filters_status(mock_session: Mock) -> None:
    repo = PostgresClassifiedRepository(mock_session)

    sql = _compiled(repo._build_query(build_classified_filter({})))

    assert "WHERE classifieds.status = 'LIVE'" in sql
    assert " AND " not in sql


# ==============================================================================
# Lookups
# ==============================================================================


def test_get_by_id_returns_domain_entity(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = _row(7)
    repo = PostgresClassifiedRepository(mock_session)

    result = repo.get_by_id(7)

    assert isinstance(result, Classified)
    assert result.id == 7


def test_get_by_id_returns_none_when_missing(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalar_one_or_none.return_value = None
    repo = PostgresClassifiedRepository(mock_session)

    assert repo.get_by_id(404) is None


def test_get_by_ids_keeps_caller_order(mock_session: Mock) -> None:
    mock_session.execute.return_value.scalars.return_value.all.return_value = [_row(1), _row(3)]
    repo = PostgresClassifiedRepository(mock_session)

    result = repo.get_by_ids([3, 2, 1])

    assert [c.id for c in result] == [3, 1]
    sql = _compiled(mock_session.execute.call_args[0][0])
    assert "classifieds.id IN (3, 2, 1)" in sql
    assert "classifieds.status = 'LIVE'" in sql


def test_get_by_ids_empty_skips_query(mock_session: Mock) -> None:
    repo = PostgresClassifiedRepository(mock_session)

    assert repo.get_by_ids([]) == []
    mock_session.execute.assert_not_called()


# ==============================================================================
# Ranges
# ==============================================================================


def test_get_ranges_maps_aggregates(mock_session: Mock) -> None:
    mock_session.execute.return_value.one.return_value = (
        2015,
        2024,
        300_000,
        7_500_000,
        120,
        98_000,
    )
    repo = PostgresClassifiedRepository(mock_session)

    ranges = repo.get_ranges()

    assert ranges.year == Bounds(min=2015, max=2024)
    assert ranges.price == Bounds(min=300_000, max=7_500_000)
    assert ranges.odo_reading == Bounds(min=120, max=98_000)
    sql = _compiled(mock_session.execute.call_args[0][0])
    assert "min(classifieds.year)" in sql
    assert "classifieds.status = 'LIVE'" in sql


def test_get_ranges_with_no_rows(mock_session: Mock) -> None:
    mock_session.execute.return_value.one.return_value = (None,) * 6
    repo = PostgresClassifiedRepository(mock_session)

    ranges = repo.get_ranges()

    assert ranges.year == Bounds()
    assert ranges.price == Bounds()


# ==============================================================================
# Row conversion
# ==============================================================================


def test_to_domain_maps_all_fields(mock_session: Mock) -> None:
    repo = PostgresClassifiedRepository(mock_session)

    classified = repo._to_domain(_row(11, status=ClassifiedStatus.SOLD))

    assert classified.title == "Classified 11"
    assert classified.price == 1_250_000
    assert classified.transmission == Transmission.AUTOMATIC
    assert classified.fuel_type == FuelType.HYBRID
    assert classified.colour == Colour.RED
    assert classified.odo_unit == OdoUnit.KILOMETERS
    assert classified.body_type == BodyType.SUV
    assert classified.status == ClassifiedStatus.SOLD
    assert (classified.make_id, classified.model_id, classified.model_variant_id) == (1, 2, 3)
    assert classified.images == (
        ClassifiedImage(src="https://img.example/11.jpg", alt="Classified 11"),
    )
