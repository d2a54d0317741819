from fastapi import APIRouter, Body, Depends

from catalog_view.entrypoints.http.dependencies import get_catalog_session
from catalog_view.entrypoints.http.dtos.catalog_view import (
    CatalogViewResponseDTO,
    FilterEventDTO,
    FilterStateResponseDTO,
)
from catalog_view.entrypoints.http.error_responses import ErrorResponse
from catalog_view.entrypoints.http.mappers.catalog_view_mapper import CatalogViewMapper
from catalog_view.use_cases.catalog_session import CatalogSession


router = APIRouter(tags=["Products"])

_VIEW_EXAMPLE = {
    "items": [
        {
            "id": 1,
            "name": "Nike Air Sneakers",
            "category": "footwear",
            "price": 8990,
            "rating": 4.7,
        }
    ],
    "total_count": 13,
    "total_pages": 3,
    "current_page": 1,
    "per_page": 6,
}


# Routes are async without awaiting anything: each one runs to completion on
# the event loop, so filter events are applied strictly one at a time.


@router.get(
    "/products",
    response_model=CatalogViewResponseDTO,
    summary="Current catalog view",
    description="""
    Returns the visible page of the catalog for the current filters.

    Re-evaluating does not change any criterion; calling it twice in a row
    returns the same view.
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {"application/json": {"example": _VIEW_EXAMPLE}},
        },
    },
)
async def get_products(
    session: CatalogSession = Depends(get_catalog_session),
) -> CatalogViewResponseDTO:
    result = session.current_view()
    return CatalogViewMapper.to_response(result, per_page=session.state.per_page)


@router.get(
    "/products/filters",
    response_model=FilterStateResponseDTO,
    summary="Current filter state",
)
async def get_filters(
    session: CatalogSession = Depends(get_catalog_session),
) -> FilterStateResponseDTO:
    return CatalogViewMapper.to_state_response(session.state)


@router.post(
    "/products/events",
    response_model=CatalogViewResponseDTO,
    summary="Apply a filter event",
    description="""
    Applies one filter event and returns the refreshed view.

    ## Events
    - `search-changed`: free-text substring search on the name
    - `category-toggled`, `brand-toggled`, `rating-toggled`: check/uncheck a box
    - `sort-changed`: `none`, `price` or `rating`, `asc` or `desc`
    - `price-min-changed`, `price-max-changed`: raw text, non-digits dropped
    - `page-changed`: go to a page (clamped to the last page)

    Every event except `page-changed` resets the view to page 1.
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {"application/json": {"example": _VIEW_EXAMPLE}},
        },
        422: {
            "model": ErrorResponse,
            "description": "Validation error",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Invalid request parameters",
                        "code": "VALIDATION_ERROR",
                        "errors": [
                            {
                                "field": "category-toggled.category",
                                "message": "Input should be 'footwear', 'apparel', "
                                "'accessories', 'electronics' or 'other'",
                                "code": "enum",
                            }
                        ],
                    }
                }
            },
        },
    },
)
async def post_event(
    event: FilterEventDTO = Body(discriminator="type"),
    session: CatalogSession = Depends(get_catalog_session),
) -> CatalogViewResponseDTO:
    """Apply event following parse → execute → map → return pattern."""
    # 1. Map to domain event
    domain_event = CatalogViewMapper.to_domain_event(event)

    # 2. Apply and re-evaluate
    result = session.dispatch(domain_event)

    # 3. Map to response
    return CatalogViewMapper.to_response(result, per_page=session.state.per_page)
