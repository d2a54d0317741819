from fastapi import FastAPI

from catalog_view.entrypoints.http.dependencies import catalog_session_lifespan
from catalog_view.entrypoints.http.exception_handlers import register_exception_handlers
from catalog_view.entrypoints.http.routes.health import router as health_router
from catalog_view.entrypoints.http.routes.products import router as products_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Catalog View API",
        description="""
        Filter, sort and paginate a fixed product catalog.

        ## Features
        - Free-text, category, brand, minimum rating and price filters
        - Stable sorting by price or rating
        - Page cursor clamped to the last page of the result

        ## Session
        The catalog is ingested at startup and a single filter state is
        kept for the lifetime of the process. Events are applied one at a time.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=catalog_session_lifespan,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(products_router, prefix="/v1")

    return app


app = build_app()
