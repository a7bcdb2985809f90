from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from car_dealer.domain.classified import Bounds, Classified, ClassifiedRanges
from car_dealer.domain.classified_filter import (
    ClassifiedFilter,
    build_classified_filter,
    default_classified_filter,
)
from car_dealer.domain.formatting import (
    format_body_type,
    format_colour,
    format_fuel_type,
    format_number,
    format_odometer_unit,
    format_price,
    format_transmission,
    format_ulez_compliance,
)
from car_dealer.domain.paging import Paging, resolve_page
from car_dealer.entrypoints.http.dtos.classifieds import (
    BoundsDTO,
    ClassifiedDisplayDTO,
    ClassifiedFilterQueryDTO,
    ClassifiedImageDTO,
    ClassifiedRangesResponseDTO,
    ClassifiedResponseDTO,
    ClassifiedSearchResponseDTO,
)
from car_dealer.use_cases.search_classifieds import (
    SearchClassifiedsRequest,
    SearchClassifiedsResponse,
)

logger = logging.getLogger(__name__)


class ClassifiedFilterMapper:
    """Maps raw listing query parameters to the domain filter and paging."""

    @staticmethod
    def from_query_params(raw: Mapping[str, Any]) -> ClassifiedFilter:
        """
        Validate raw query parameters and build the classified filter.

        Fails open: if the parameters do not fit the schema the listing falls
        back to the live-only default filter instead of erroring.

        Args:
            raw: Query parameters, one value per key (a list for repeated keys)

        Returns:
            ClassifiedFilter for the repository
        """
        try:
            dto = ClassifiedFilterQueryDTO.model_validate(raw)
        except PydanticValidationError as exc:
            return ClassifiedFilterMapper.fallback(exc)

        params = dto.model_dump(by_alias=True, exclude_none=True)
        classified_filter = build_classified_filter(params)
        if params and classified_filter.is_default:
            logger.info(
                "Listing filter parameters all ignored",
                extra={"parameters": sorted(params)},
            )
        return classified_filter

    @staticmethod
    def fallback(exc: PydanticValidationError) -> ClassifiedFilter:
        """Named fail-open path for query parameters that failed validation."""
        logger.warning(
            "Listing filter parameters rejected, using default filter",
            extra={
                "errors": [
                    {"field": ".".join(str(loc) for loc in error["loc"]), "type": error["type"]}
                    for error in exc.errors()
                ],
            },
        )
        return default_classified_filter()

    @staticmethod
    def to_domain_paging(raw: Mapping[str, Any], page_size: int) -> Paging:
        page = raw.get("page")
        return Paging(page=resolve_page(page if isinstance(page, str) else None), page_size=page_size)

    @staticmethod
    def to_domain_request(
        raw: Mapping[str, Any],
        page_size: int,
        source_id: str | None = None,
    ) -> SearchClassifiedsRequest:
        """
        Convenience method: builds complete domain request from raw parameters.

        Args:
            raw: Query parameters, one value per key
            page_size: Classifieds per page
            source_id: Visitor session id, when the cookie is present

        Returns:
            SearchClassifiedsRequest with filter and paging
        """
        return SearchClassifiedsRequest(
            classified_filter=ClassifiedFilterMapper.from_query_params(raw),
            paging=ClassifiedFilterMapper.to_domain_paging(raw, page_size),
            source_id=source_id,
        )


class ClassifiedMapper:
    """Maps domain classifieds to REST response DTOs."""

    @staticmethod
    def to_display(classified: Classified) -> ClassifiedDisplayDTO:
        return ClassifiedDisplayDTO(
            price=format_price(classified.price, classified.currency),
            odo_reading=format_number(classified.odo_reading),
            odo_unit=format_odometer_unit(classified.odo_unit),
            transmission=format_transmission(classified.transmission),
            fuel_type=format_fuel_type(classified.fuel_type),
            body_type=format_body_type(classified.body_type),
            colour=format_colour(classified.colour),
            ulez_compliance=format_ulez_compliance(classified.ulez_compliance),
        )

    @staticmethod
    def to_response(classified: Classified) -> ClassifiedResponseDTO:
        return ClassifiedResponseDTO(
            id=classified.id,
            title=classified.title,
            description=classified.description,
            year=classified.year,
            price=classified.price,
            currency=classified.currency,
            odo_reading=classified.odo_reading,
            odo_unit=classified.odo_unit,
            transmission=classified.transmission,
            fuel_type=classified.fuel_type,
            body_type=classified.body_type,
            colour=classified.colour,
            doors=classified.doors,
            seats=classified.seats,
            ulez_compliance=classified.ulez_compliance,
            make_id=classified.make_id,
            model_id=classified.model_id,
            model_variant_id=classified.model_variant_id,
            images=[ClassifiedImageDTO(src=image.src, alt=image.alt) for image in classified.images],
            display=ClassifiedMapper.to_display(classified),
        )

    @staticmethod
    def to_search_response(result: SearchClassifiedsResponse) -> ClassifiedSearchResponseDTO:
        return ClassifiedSearchResponseDTO(
            classifieds=[ClassifiedMapper.to_response(c) for c in result.classifieds],
            total=result.total_count,
            page=result.page,
            page_size=result.page_size,
            total_pages=result.total_pages,
            favourite_ids=result.favourite_ids,
        )

    @staticmethod
    def to_ranges_response(ranges: ClassifiedRanges) -> ClassifiedRangesResponseDTO:
        def bounds(value: Bounds) -> BoundsDTO:
            return BoundsDTO(min=value.min, max=value.max)

        return ClassifiedRangesResponseDTO(
            year=bounds(ranges.year),
            price=bounds(ranges.price),
            odo_reading=bounds(ranges.odo_reading),
        )
