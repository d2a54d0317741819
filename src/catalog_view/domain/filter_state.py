from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from catalog_view.domain.catalog import Catalog, Category
from catalog_view.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class FilterValidationError(ValidationError):
    """Raised when a filter or sort update receives an invalid value."""

    pass


class PagingValidationError(ValidationError):
    """Raised when a page navigation receives an invalid page number."""

    pass


DEFAULT_PER_PAGE = 6
MAX_RATING = 5

# ASCII digits only; other Unicode decimal digits count as non-digits
_NON_DIGITS = re.compile(r"[^0-9]")

# Longer digit runs saturate at MAX_PRICE
_MAX_PRICE_DIGITS = 18
MAX_PRICE = 10**_MAX_PRICE_DIGITS - 1


class SortField(str, Enum):
    NONE = "none"
    PRICE = "price"
    RATING = "rating"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


def parse_price(raw: str) -> int:
    """
    Parse a price typed by the user.

    Every character other than 0-9 is dropped ("12 990 $" -> 12990). Input with
    no digits at all yields 0 and absurdly long input yields MAX_PRICE, so this
    never raises.
    """
    digits = _NON_DIGITS.sub("", raw).lstrip("0")
    if len(digits) > _MAX_PRICE_DIGITS:
        return MAX_PRICE
    return int(digits) if digits else 0


@dataclass(slots=True)
class FilterState:
    """
    Current filter, sort and page criteria of one catalog session.

    Owned by a single controller and mutated only through the update methods
    below. Every update except go_to_page() resets the page cursor to 1, since
    new criteria invalidate the previous page. Empty sets and an empty search
    mean "no restriction".

    Invalid input is rejected before anything is mutated, so the query engine
    only ever sees valid state.
    """

    search: str = ""
    categories: set[Category] = field(default_factory=set)
    brands: set[str] = field(default_factory=set)
    min_ratings: set[int] = field(default_factory=set)
    price_min: int = 0
    price_max: int = 0
    sort_by: SortField = SortField.NONE
    sort_order: SortOrder = SortOrder.ASC
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE

    @classmethod
    def for_catalog(cls, catalog: Catalog) -> FilterState:
        """Default state under which every item of the catalog is visible."""
        return cls(price_max=catalog.max_price)

    @property
    def effective_min_rating(self) -> int | None:
        """Highest checked rating threshold; checking more boxes narrows."""
        return max(self.min_ratings) if self.min_ratings else None

    def set_search(self, text: str) -> None:
        self.search = text.strip()
        self.page = 1

    def toggle_category(self, category: Category | str, on: bool) -> None:
        try:
            value = Category(category)
        except ValueError:
            raise FilterValidationError(
                f"Unknown category: {category!r}", field="category"
            ) from None

        if on:
            self.categories.add(value)
        else:
            self.categories.discard(value)
        self.page = 1

    def toggle_brand(self, token: str, on: bool) -> None:
        normalized = token.strip().lower()
        if not normalized:
            raise FilterValidationError("Brand token must not be empty", field="brand")

        if on:
            self.brands.add(normalized)
        else:
            self.brands.discard(normalized)
        self.page = 1

    def toggle_min_rating(self, value: int, on: bool) -> None:
        if not 0 <= value <= MAX_RATING:
            raise FilterValidationError(
                f"Rating threshold must be between 0 and {MAX_RATING}", field="rating"
            )

        if on:
            self.min_ratings.add(value)
        else:
            self.min_ratings.discard(value)
        self.page = 1

    def set_sort_by(self, sort_by: SortField | str, order: SortOrder | str) -> None:
        try:
            sort_field = SortField(sort_by)
            sort_order = SortOrder(order)
        except ValueError as exc:
            raise FilterValidationError(str(exc), field="sort") from None

        self.sort_by = sort_field
        self.sort_order = sort_order
        self.page = 1

    def set_price_min(self, raw: str | int) -> None:
        self.price_min = _coerce_price(raw, "price_min")
        self.page = 1

    def set_price_max(self, raw: str | int) -> None:
        self.price_max = _coerce_price(raw, "price_max")
        self.page = 1

    def go_to_page(self, page: int) -> None:
        if page < 1:
            raise PagingValidationError("page must be >= 1", field="page")
        self.page = page


def _coerce_price(raw: str | int, field_name: str) -> int:
    if isinstance(raw, str):
        return parse_price(raw)
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise FilterValidationError(
            f"{field_name} must be text or an integer", field=field_name
        )
    if raw < 0:
        raise FilterValidationError(f"{field_name} must be >= 0", field=field_name)
    return raw
