"""PostgreSQL implementation of ClassifiedRepository."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session, selectinload

from car_dealer.domain.classified import (
    Bounds,
    Classified,
    ClassifiedImage,
    ClassifiedRanges,
    ClassifiedStatus,
)
from car_dealer.domain.classified_filter import ClassifiedFilter
from car_dealer.domain.paging import Paging
from car_dealer.infra.db.models.classified import ClassifiedRow
from car_dealer.ports.classified_repository import ClassifiedRepository, SearchResult

if TYPE_CHECKING:
    from sqlalchemy.sql import Select

# Filter target name -> foreign key column it matches
_TAXONOMY_COLUMNS: dict[str, Any] = {
    "make": ClassifiedRow.make_id,
    "model": ClassifiedRow.model_id,
    "model_variant": ClassifiedRow.model_variant_id,
}


class PostgresClassifiedRepository(ClassifiedRepository):
    """
    PostgreSQL implementation of ClassifiedRepository.

    - Uses SQLAlchemy ORM for database access
    - Translates ClassifiedFilter into SQL WHERE clauses
    - Returns total_count via COUNT(*) query
    - Converts ClassifiedRow (infrastructure) to Classified (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def search(self, classified_filter: ClassifiedFilter, paging: Paging) -> SearchResult:
        """
        Search classifieds with a filter and paging.

        Executes two queries:
        1. COUNT(*) to get total matching classifieds (before paging)
        2. SELECT with OFFSET/LIMIT to get the requested page

        Args:
            classified_filter: Conditions to apply - must be pre-validated
            paging: Pagination parameters - must be pre-validated

        Returns:
            SearchResult with classifieds and total_count
        """
        query = self._build_query(classified_filter)

        count_query = select(func.count()).select_from(query.subquery())
        total_count = self._session.execute(count_query).scalar() or 0

        query = (
            query.options(selectinload(ClassifiedRow.images))
            .order_by(ClassifiedRow.created_at.desc(), ClassifiedRow.id.desc())
            .offset(paging.offset)
            .limit(paging.limit)
        )

        rows = self._session.execute(query).scalars().all()
        return SearchResult(
            classifieds=[self._to_domain(row) for row in rows],
            total_count=total_count,
        )

    def get_by_id(self, classified_id: int) -> Classified | None:
        query = (
            select(ClassifiedRow)
            .where(ClassifiedRow.id == classified_id)
            .options(selectinload(ClassifiedRow.images))
        )
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def get_by_ids(self, classified_ids: Sequence[int]) -> list[Classified]:
        if not classified_ids:
            return []

        query = (
            select(ClassifiedRow)
            .where(
                ClassifiedRow.id.in_(classified_ids),
                ClassifiedRow.status == ClassifiedStatus.LIVE,
            )
            .options(selectinload(ClassifiedRow.images))
        )
        rows = {row.id: row for row in self._session.execute(query).scalars().all()}

        # Keep the caller's ordering; the IN clause does not preserve it
        return [self._to_domain(rows[i]) for i in classified_ids if i in rows]

    def get_ranges(self) -> ClassifiedRanges:
        """
        Aggregate min/max of year, price and odometer reading.

        Only live classifieds are considered, whatever filters the caller
        applies elsewhere.
        """
        query = select(
            func.min(ClassifiedRow.year),
            func.max(ClassifiedRow.year),
            func.min(ClassifiedRow.price),
            func.max(ClassifiedRow.price),
            func.min(ClassifiedRow.odo_reading),
            func.max(ClassifiedRow.odo_reading),
        ).where(ClassifiedRow.status == ClassifiedStatus.LIVE)

        (
            min_year,
            max_year,
            min_price,
            max_price,
            min_reading,
            max_reading,
        ) = self._session.execute(query).one()

        return ClassifiedRanges(
            year=Bounds(min=min_year, max=max_year),
            price=Bounds(min=min_price, max=max_price),
            odo_reading=Bounds(min=min_reading, max=max_reading),
        )

    def _build_query(self, classified_filter: ClassifiedFilter) -> Select[tuple[ClassifiedRow]]:
        """
        Build SQLAlchemy query with the filter's conditions applied.

        Args:
            classified_filter: Conditions to apply

        Returns:
            SQLAlchemy select statement with WHERE clauses
        """
        query = select(ClassifiedRow).where(ClassifiedRow.status == classified_filter.status)

        for name, identifier in classified_filter.taxonomy.items():
            query = query.where(_TAXONOMY_COLUMNS[name] == identifier)

        for name, member in classified_filter.enums.items():
            query = query.where(getattr(ClassifiedRow, name) == member)

        for name, number in classified_filter.numbers.items():
            query = query.where(getattr(ClassifiedRow, name) == number)

        # Inclusive ranges
        for name, bounds in classified_filter.ranges.items():
            column = getattr(ClassifiedRow, name)
            if bounds.gte is not None:
                query = query.where(column >= bounds.gte)
            if bounds.lte is not None:
                query = query.where(column <= bounds.lte)

        # Case-insensitive substring match on any of the text fields
        text = classified_filter.text
        if text is not None:
            query = query.where(
                or_(
                    *(
                        getattr(ClassifiedRow, name).icontains(text.term, autoescape=True)
                        for name in text.fields
                    )
                )
            )

        return query

    def _to_domain(self, row: ClassifiedRow) -> Classified:
        """
        Convert database model (ClassifiedRow) to domain entity (Classified).

        Args:
            row: SQLAlchemy ClassifiedRow model

        Returns:
            Classified domain entity
        """
        return Classified(
            id=row.id,
            title=row.title,
            description=row.description,
            year=row.year,
            price=row.price,
            odo_reading=row.odo_reading,
            odo_unit=row.odo_unit,
            currency=row.currency,
            transmission=row.transmission,
            fuel_type=row.fuel_type,
            body_type=row.body_type,
            colour=row.colour,
            doors=row.doors,
            seats=row.seats,
            ulez_compliance=row.ulez_compliance,
            status=row.status,
            make_id=row.make_id,
            model_id=row.model_id,
            model_variant_id=row.model_variant_id,
            images=tuple(ClassifiedImage(src=image.src, alt=image.alt) for image in row.images),
        )
