import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from car_dealer.entrypoints.http.dependencies import (
    get_favourites_use_case,
    get_favourites_view_cache,
    get_toggle_favourite_use_case,
)
from car_dealer.entrypoints.http.dtos.favourites import (
    FavouriteErrorResponseDTO,
    FavouritesResponseDTO,
    ToggleFavouriteRequestDTO,
    ToggleFavouriteResponseDTO,
)
from car_dealer.entrypoints.http.favourites_view_cache import FavouritesViewCache
from car_dealer.entrypoints.http.mappers.favourites_mapper import FavouritesMapper
from car_dealer.entrypoints.http.source_id import get_or_create_source_id, get_source_id
from car_dealer.use_cases.get_favourites import GetFavourites, GetFavouritesRequest
from car_dealer.use_cases.toggle_favourite import ToggleFavourite, ToggleFavouriteRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Favourites"])


def _bad_request(message: str, request: Request) -> JSONResponse:
    logger.info(
        "Favourite toggle rejected",
        extra={"reason": message, "path": request.url.path, "method": request.method},
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@router.post(
    "/favourites",
    response_model=ToggleFavouriteResponseDTO,
    summary="Toggle a favourite",
    description="""
    Add the classified to the visitor's favourites, or remove it if already
    there. The visitor is identified by the `sourceId` cookie, which is set on
    the first toggle.

    Body: `{"id": <integer>}`. Anything else is rejected with 400 and
    `{"error": "<message>"}` before the favourites are read.
    """,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": ToggleFavouriteRequestDTO.model_json_schema(),
                }
            },
        }
    },
    responses={
        400: {"model": FavouriteErrorResponseDTO, "description": "Invalid request body"},
    },
)
async def toggle_favourite(
    request: Request,
    response: Response,
    use_case: ToggleFavourite = Depends(get_toggle_favourite_use_case),
) -> ToggleFavouriteResponseDTO | JSONResponse:
    # Body is parsed by hand so every input error is a 400 with {"error": ...}
    try:
        payload = await request.json()
    except ValueError:
        return _bad_request("Request body must be valid JSON", request)

    try:
        body = ToggleFavouriteRequestDTO.model_validate(payload)
    except PydanticValidationError as exc:
        return _bad_request(FavouritesMapper.describe_validation_error(exc), request)

    source_id = get_or_create_source_id(request, response)

    result = await run_in_threadpool(
        use_case.execute,
        ToggleFavouriteRequest(source_id=source_id, classified_id=body.id),
    )

    return FavouritesMapper.to_toggle_response(result)


@router.get(
    "/favourites",
    response_model=FavouritesResponseDTO,
    summary="List favourites",
    description="The visitor's favourite ids and the live classifieds behind them.",
)
def list_favourites(
    request: Request,
    use_case: GetFavourites = Depends(get_favourites_use_case),
    view_cache: FavouritesViewCache = Depends(get_favourites_view_cache),
) -> FavouritesResponseDTO:
    source_id = get_source_id(request)

    if source_id:
        cached = view_cache.read(source_id)
        if cached is not None:
            return cached

    result = use_case.execute(GetFavouritesRequest(source_id=source_id))
    view = FavouritesMapper.to_view_response(result)

    if source_id:
        view_cache.write(source_id, view)

    return view
