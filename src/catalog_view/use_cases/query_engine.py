from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from operator import attrgetter

from catalog_view.domain.catalog import Catalog, CatalogItem
from catalog_view.domain.filter_state import FilterState, SortField, SortOrder

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Visible page of the catalog plus pagination metadata."""

    visible_items: tuple[CatalogItem, ...]
    total_count: int  # Matching items before paging
    total_pages: int  # Never below 1, an empty result is "page 1 of 1"
    current_page: int


class QueryEngine:
    """
    Filter, sort and paginate a catalog according to a FilterState.

    - Applies every active filter with AND semantics (brands are OR'ed
      among themselves)
    - Sorts stably, so equal keys keep ingestion order in both directions
    - Applies paging AFTER filtering and sorting
    - Never raises: criteria that match nothing yield an empty page 1 of 1

    The engine holds no state. Its one side effect: when state.page lies
    beyond the last page it is clamped down in place before evaluate()
    returns, so the owner's cursor stays consistent with the result.
    """

    def evaluate(self, catalog: Catalog, state: FilterState) -> QueryResult:
        matches = [item for item in catalog.items if self._matches(item, state)]
        ordered = self._sort(matches, state)

        total_count = len(ordered)
        total_pages = math.ceil(total_count / state.per_page) or 1

        if state.page > total_pages:
            logger.info(
                "Page cursor clamped",
                extra={"requested_page": state.page, "total_pages": total_pages},
            )
            state.page = total_pages

        start = (state.page - 1) * state.per_page
        end = state.page * state.per_page

        logger.debug(
            "Catalog evaluated",
            extra={
                "catalog_size": len(catalog),
                "total_count": total_count,
                "page": state.page,
            },
        )

        return QueryResult(
            visible_items=tuple(ordered[start:end]),
            total_count=total_count,
            total_pages=total_pages,
            current_page=state.page,
        )

    def _matches(self, item: CatalogItem, state: FilterState) -> bool:
        name = item.name.lower()

        if state.search and state.search.lower() not in name:
            return False
        if state.categories and item.category not in state.categories:
            return False
        if state.brands and not any(brand in name for brand in state.brands):
            return False

        min_rating = state.effective_min_rating
        if min_rating is not None and item.rating < min_rating:
            return False

        # The price range has no "unset" value; defaults span the whole catalog
        return state.price_min <= item.price <= state.price_max

    def _sort(self, items: list[CatalogItem], state: FilterState) -> list[CatalogItem]:
        if state.sort_by is SortField.NONE:
            return items

        # sorted() is stable, including with reverse=True
        return sorted(
            items,
            key=attrgetter(state.sort_by.value),
            reverse=state.sort_order is SortOrder.DESC,
        )
