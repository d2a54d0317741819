"""Filter events raised by an event source (UI controls, HTTP clients).

Each event carries the payload of exactly one FilterState update operation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from catalog_view.domain.catalog import Category
from catalog_view.domain.errors import ValidationError
from catalog_view.domain.filter_state import FilterState, SortField, SortOrder


@dataclass(frozen=True, slots=True)
class SearchChanged:
    text: str


@dataclass(frozen=True, slots=True)
class CategoryToggled:
    category: Category
    on: bool


@dataclass(frozen=True, slots=True)
class BrandToggled:
    token: str
    on: bool


@dataclass(frozen=True, slots=True)
class RatingToggled:
    value: int
    on: bool


@dataclass(frozen=True, slots=True)
class SortChanged:
    sort_by: SortField
    order: SortOrder


@dataclass(frozen=True, slots=True)
class PriceMinChanged:
    raw: str | int


@dataclass(frozen=True, slots=True)
class PriceMaxChanged:
    raw: str | int


@dataclass(frozen=True, slots=True)
class PageChanged:
    page: int


FilterEvent = Union[
    SearchChanged,
    CategoryToggled,
    BrandToggled,
    RatingToggled,
    SortChanged,
    PriceMinChanged,
    PriceMaxChanged,
    PageChanged,
]


def apply_event(state: FilterState, event: FilterEvent) -> None:
    """
    Apply one event to the filter state via its matching update operation.

    Raises:
        ValidationError: If the event type is unknown or its payload is invalid
    """
    if isinstance(event, SearchChanged):
        state.set_search(event.text)
    elif isinstance(event, CategoryToggled):
        state.toggle_category(event.category, event.on)
    elif isinstance(event, BrandToggled):
        state.toggle_brand(event.token, event.on)
    elif isinstance(event, RatingToggled):
        state.toggle_min_rating(event.value, event.on)
    elif isinstance(event, SortChanged):
        state.set_sort_by(event.sort_by, event.order)
    elif isinstance(event, PriceMinChanged):
        state.set_price_min(event.raw)
    elif isinstance(event, PriceMaxChanged):
        state.set_price_max(event.raw)
    elif isinstance(event, PageChanged):
        state.go_to_page(event.page)
    else:
        raise ValidationError(f"Unknown filter event: {type(event).__name__}")
