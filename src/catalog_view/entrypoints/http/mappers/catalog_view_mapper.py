from __future__ import annotations

from catalog_view.domain.catalog import CatalogItem
from catalog_view.domain.events import (
    BrandToggled,
    CategoryToggled,
    FilterEvent,
    PageChanged,
    PriceMaxChanged,
    PriceMinChanged,
    RatingToggled,
    SearchChanged,
    SortChanged,
)
from catalog_view.domain.filter_state import FilterState
from catalog_view.entrypoints.http.dtos.catalog_view import (
    BrandToggledDTO,
    CatalogViewResponseDTO,
    CategoryToggledDTO,
    FilterEventDTO,
    FilterStateResponseDTO,
    PageChangedDTO,
    PriceMaxChangedDTO,
    PriceMinChangedDTO,
    ProductResponseDTO,
    RatingToggledDTO,
    SearchChangedDTO,
    SortChangedDTO,
)
from catalog_view.use_cases.query_engine import QueryResult


class CatalogViewMapper:
    """Maps between REST DTOs and domain models for the catalog view."""

    @staticmethod
    def to_domain_event(dto: FilterEventDTO) -> FilterEvent:
        """
        Converts an event request body to the matching domain event.

        Args:
            dto: Validated event body (one member of the FilterEventDTO union)

        Returns:
            FilterEvent: Domain event carrying the same payload

        Raises:
            ValueError: If the DTO is not a known event body
        """
        if isinstance(dto, SearchChangedDTO):
            return SearchChanged(text=dto.text)
        if isinstance(dto, CategoryToggledDTO):
            return CategoryToggled(category=dto.category, on=dto.on)
        if isinstance(dto, BrandToggledDTO):
            return BrandToggled(token=dto.token, on=dto.on)
        if isinstance(dto, RatingToggledDTO):
            return RatingToggled(value=dto.value, on=dto.on)
        if isinstance(dto, SortChangedDTO):
            return SortChanged(sort_by=dto.sort_by, order=dto.order)
        if isinstance(dto, PriceMinChangedDTO):
            return PriceMinChanged(raw=dto.value)
        if isinstance(dto, PriceMaxChangedDTO):
            return PriceMaxChanged(raw=dto.value)
        if isinstance(dto, PageChangedDTO):
            return PageChanged(page=dto.page)
        raise ValueError(f"Unsupported event body: {type(dto).__name__}")

    @staticmethod
    def to_product_response(item: CatalogItem) -> ProductResponseDTO:
        return ProductResponseDTO(
            id=item.id,
            name=item.name,
            category=item.category,
            price=item.price,
            rating=item.rating,
        )

    @staticmethod
    def to_response(result: QueryResult, per_page: int) -> CatalogViewResponseDTO:
        """
        Converts a query result to the REST view response.

        Args:
            result: Domain query result for the current page
            per_page: Page size of the session (echoed for clients)

        Returns:
            CatalogViewResponseDTO: Visible items with pagination metadata
        """
        return CatalogViewResponseDTO(
            items=[CatalogViewMapper.to_product_response(item) for item in result.visible_items],
            total_count=result.total_count,
            total_pages=result.total_pages,
            current_page=result.current_page,
            per_page=per_page,
        )

    @staticmethod
    def to_state_response(state: FilterState) -> FilterStateResponseDTO:
        # Sets are sorted so the response is deterministic
        return FilterStateResponseDTO(
            search=state.search,
            categories=sorted(state.categories, key=lambda category: category.value),
            brands=sorted(state.brands),
            min_ratings=sorted(state.min_ratings),
            effective_min_rating=state.effective_min_rating,
            price_min=state.price_min,
            price_max=state.price_max,
            sort_by=state.sort_by,
            sort_order=state.sort_order,
            page=state.page,
            per_page=state.per_page,
        )
