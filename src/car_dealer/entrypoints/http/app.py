from fastapi import FastAPI

from car_dealer.entrypoints.http.exception_handlers import register_exception_handlers
from car_dealer.entrypoints.http.routes.classifieds import router as classifieds_router
from car_dealer.entrypoints.http.routes.favourites import router as favourites_router
from car_dealer.entrypoints.http.routes.health import router as health_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Car Dealer API",
        description="""
        Car dealer inventory API: browse live classifieds and keep a list of
        favourites per visitor.

        ## Features
        - Filterable, paginated classifieds listing
        - Range filter bounds (year, price, odometer)
        - Anonymous favourites, keyed by the `sourceId` cookie

        ## Authentication
        None. Favourites are scoped to the browser's `sourceId` cookie.

        ## Error Handling
        Errors return structured JSON (`detail`, `code`, optional `errors`).
        The favourites toggle returns `{"error": "<message>"}` with 400.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(classifieds_router, prefix="/v1")
    app.include_router(favourites_router, prefix="/v1")

    return app


app = build_app()
