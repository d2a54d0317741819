from __future__ import annotations

from catalog_view.domain.catalog import RawItem
from catalog_view.ports.catalog_source import CatalogSource


class InMemoryCatalogSource(CatalogSource):
    """
    Canonical contract implementation for tests.

    - Returns records in insertion order
    - Returns a copy, so callers cannot alter the stored sequence
    """

    def __init__(self, records: list[RawItem]) -> None:
        self._records = list(records)

    def load(self) -> list[RawItem]:
        return list(self._records)
