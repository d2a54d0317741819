from __future__ import annotations

from abc import ABC, abstractmethod

from catalog_view.domain.catalog import RawItem
from catalog_view.domain.errors import InternalError


class CatalogLoadError(InternalError):
    """Raised when an ingestion adapter cannot read or parse its source."""

    pass


class CatalogSource(ABC):
    """
    Port for catalog ingestion.

    Implementations supply the raw item records of one session, in the order
    they should be displayed when no sort is selected.

    Contract:
        - Records are already structured (name, price, rating); no markup
        - price >= 0 and 0 <= rating <= 5
        - The returned sequence is not modified for the rest of the session
        - Returning zero records is valid
    """

    @abstractmethod
    def load(self) -> list[RawItem]:
        """
        Load every raw record of the catalog.

        Returns:
            Raw records in ingestion order

        Raises:
            CatalogLoadError: If the source cannot be read
        """
        ...
