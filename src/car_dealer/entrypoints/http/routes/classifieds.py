from fastapi import APIRouter, Depends, Request

from car_dealer.entrypoints.http.dependencies import (
    get_classified_by_id_use_case,
    get_classified_ranges_use_case,
    get_page_size,
    get_search_classifieds_use_case,
)
from car_dealer.entrypoints.http.dtos.classifieds import (
    ClassifiedRangesResponseDTO,
    ClassifiedResponseDTO,
    ClassifiedSearchResponseDTO,
)
from car_dealer.entrypoints.http.error_responses import ErrorResponse
from car_dealer.entrypoints.http.mappers.classified_mapper import (
    ClassifiedFilterMapper,
    ClassifiedMapper,
)
from car_dealer.entrypoints.http.query_params import query_params_to_mapping
from car_dealer.entrypoints.http.source_id import get_source_id
from car_dealer.use_cases.get_classified_by_id import (
    GetClassifiedById,
    GetClassifiedByIdRequest,
)
from car_dealer.use_cases.get_classified_ranges import GetClassifiedRanges
from car_dealer.use_cases.search_classifieds import SearchClassifieds


router = APIRouter(tags=["Classifieds"])


@router.get(
    "/classifieds",
    response_model=ClassifiedSearchResponseDTO,
    summary="Browse live classifieds",
    description="""
    One page of live classifieds matching the given filters.

    ## Filters
    - `make`, `model`, `modelVariant`: taxonomy ids
    - `odoUnit`, `currency`, `transmission`, `bodyType`, `fuelType`, `colour`,
      `ulezCompliance`: enum values, case-insensitive
    - `seats`, `doors`: exact numbers
    - `minYear`/`maxYear`, `minPrice`/`maxPrice`, `minReading`/`maxReading`:
      inclusive ranges
    - `q`: case-insensitive text match on title or description

    Filters combine with AND. Unusable parameters never fail the request: a
    malformed value is ignored, and a query that does not fit the schema at
    all falls back to every live classified.

    ## Pagination
    - `page`: 1-based; missing, non-numeric or < 1 means page 1

    ## Favourites
    `favourite_ids` lists the ids the visitor (by `sourceId` cookie) has
    favourited; empty without the cookie.

    ## Example
    ```
    GET /v1/classifieds?make=4&minYear=2018&fuelType=petrol&page=2
    ```
    """,
)
def list_classifieds(
    request: Request,
    use_case: SearchClassifieds = Depends(get_search_classifieds_use_case),
    page_size: int = Depends(get_page_size),
) -> ClassifiedSearchResponseDTO:
    """Parse → execute → map → return."""
    raw = query_params_to_mapping(request.query_params)
    domain_request = ClassifiedFilterMapper.to_domain_request(
        raw, page_size, source_id=get_source_id(request)
    )

    result = use_case.execute(domain_request)

    return ClassifiedMapper.to_search_response(result)


@router.get(
    "/classifieds/ranges",
    response_model=ClassifiedRangesResponseDTO,
    summary="Range filter bounds",
    description="Min/max year, price and odometer reading across live classifieds.",
)
def get_classified_ranges(
    use_case: GetClassifiedRanges = Depends(get_classified_ranges_use_case),
) -> ClassifiedRangesResponseDTO:
    return ClassifiedMapper.to_ranges_response(use_case.execute())


@router.get(
    "/classifieds/{classified_id}",
    response_model=ClassifiedResponseDTO,
    summary="Get a live classified",
    responses={404: {"model": ErrorResponse, "description": "Classified not found"}},
)
def get_classified(
    classified_id: int,
    use_case: GetClassifiedById = Depends(get_classified_by_id_use_case),
) -> ClassifiedResponseDTO:
    result = use_case.execute(GetClassifiedByIdRequest(classified_id=classified_id))
    return ClassifiedMapper.to_response(result.classified)
