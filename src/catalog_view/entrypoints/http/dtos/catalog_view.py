from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from catalog_view.domain.catalog import Category
from catalog_view.domain.filter_state import MAX_RATING, SortField, SortOrder


class ProductResponseDTO(BaseModel):
    id: int
    name: str
    category: Category
    price: int
    rating: float


class CatalogViewResponseDTO(BaseModel):
    """Visible page of the catalog with pagination metadata."""

    items: list[ProductResponseDTO]
    total_count: int
    total_pages: int
    current_page: int
    per_page: int


class FilterStateResponseDTO(BaseModel):
    """Current criteria, so a client can restore its controls."""

    search: str
    categories: list[Category]
    brands: list[str]
    min_ratings: list[int]
    effective_min_rating: int | None
    price_min: int
    price_max: int
    sort_by: SortField
    sort_order: SortOrder
    page: int
    per_page: int


# Raw price text as typed into an input box
PriceText = Annotated[str, Field(max_length=50)]


# ==============================================================================
# Filter events (request bodies, discriminated on "type")
# ==============================================================================


class SearchChangedDTO(BaseModel):
    type: Literal["search-changed"]
    text: str = Field(
        default="",
        description="Free-text search; empty clears the text filter",
        max_length=200,
    )


class CategoryToggledDTO(BaseModel):
    type: Literal["category-toggled"]
    category: Category
    on: bool


class BrandToggledDTO(BaseModel):
    type: Literal["brand-toggled"]
    token: str = Field(
        description="Brand token, matched as a case-insensitive substring of the name",
        min_length=1,
        max_length=100,
        examples=["sony"],
    )
    on: bool


class RatingToggledDTO(BaseModel):
    type: Literal["rating-toggled"]
    value: int = Field(description="Minimum rating threshold", ge=0, le=MAX_RATING)
    on: bool


class SortChangedDTO(BaseModel):
    type: Literal["sort-changed"]
    sort_by: SortField
    order: SortOrder = SortOrder.ASC


class PriceMinChangedDTO(BaseModel):
    type: Literal["price-min-changed"]
    value: Union[PriceText, int] = Field(
        description="Raw text (non-digits are dropped, no digits means 0) or integer",
        examples=["1 500"],
    )


class PriceMaxChangedDTO(BaseModel):
    type: Literal["price-max-changed"]
    value: Union[PriceText, int] = Field(
        description="Raw text (non-digits are dropped, no digits means 0) or integer",
        examples=["9990"],
    )


class PageChangedDTO(BaseModel):
    type: Literal["page-changed"]
    page: int = Field(description="1-based page number", ge=1)


FilterEventDTO = Union[
    SearchChangedDTO,
    CategoryToggledDTO,
    BrandToggledDTO,
    RatingToggledDTO,
    SortChangedDTO,
    PriceMinChangedDTO,
    PriceMaxChangedDTO,
    PageChangedDTO,
]
