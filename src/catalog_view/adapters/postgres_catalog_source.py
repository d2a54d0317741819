"""PostgreSQL implementation of CatalogSource."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog_view.domain.catalog import RawItem
from catalog_view.infra.db.models.product import ProductRow
from catalog_view.ports.catalog_source import CatalogLoadError, CatalogSource


class PostgresCatalogSource(CatalogSource):
    """
    PostgreSQL implementation of CatalogSource.

    - Reads the products table once, ordered by position (then id)
    - Converts ProductRow (infrastructure) to RawItem (domain)
    - Categories are not stored; they are inferred at ingestion
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize source with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def load(self) -> list[RawItem]:
        query = select(ProductRow).order_by(ProductRow.position, ProductRow.id)

        try:
            rows = self._session.execute(query).scalars().all()
        except SQLAlchemyError as exc:
            raise CatalogLoadError("Cannot read products table") from exc

        return [self._to_domain(row) for row in rows]

    def _to_domain(self, row: ProductRow) -> RawItem:
        return RawItem(name=row.name, price=row.price, rating=float(row.rating))
