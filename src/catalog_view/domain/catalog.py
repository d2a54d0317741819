from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Category(str, Enum):
    FOOTWEAR = "footwear"
    APPAREL = "apparel"
    ACCESSORIES = "accessories"
    ELECTRONICS = "electronics"
    OTHER = "other"


# Ordered (keywords -> category) rules. The first rule with a keyword contained
# in the lower-cased name wins, so the order is the tie-break policy.
CATEGORY_RULES: tuple[tuple[tuple[str, ...], Category], ...] = (
    (("shoe", "sneaker"), Category.FOOTWEAR),
    (("jeans",), Category.APPAREL),
    (("hoodie",), Category.APPAREL),
    (("t-shirt",), Category.APPAREL),
    (("accessor",), Category.ACCESSORIES),
    (("headphone", "sony"), Category.ELECTRONICS),
)


def infer_category(name: str) -> Category:
    """Infer the category of an item from its name (first matching rule wins)."""
    lowered = name.lower()
    for keywords, category in CATEGORY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return Category.OTHER


@dataclass(frozen=True, slots=True)
class RawItem:
    """Record produced by an ingestion adapter, before categorisation."""

    name: str
    price: int
    rating: float


@dataclass(frozen=True, slots=True)
class CatalogItem:
    id: int
    name: str
    category: Category
    price: int
    rating: float


@dataclass(frozen=True, slots=True)
class Catalog:
    """
    Fixed, ordered collection of items available for one session.

    - Items keep ingestion order; ids are assigned 1..n in that order
    - max_price seeds the default upper bound of the price filter
    """

    items: tuple[CatalogItem, ...] = ()
    max_price: int = 0

    @classmethod
    def from_records(cls, records: Iterable[RawItem]) -> Catalog:
        items = tuple(
            CatalogItem(
                id=position,
                name=record.name,
                category=infer_category(record.name),
                price=record.price,
                rating=record.rating,
            )
            for position, record in enumerate(records, start=1)
        )
        max_price = max((item.price for item in items), default=0)
        return cls(items=items, max_price=max_price)

    def __len__(self) -> int:
        return len(self.items)
