"""JSON file implementation of CatalogSource."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from catalog_view.domain.catalog import RawItem
from catalog_view.ports.catalog_source import CatalogLoadError, CatalogSource

logger = logging.getLogger(__name__)


class RawItemRecord(BaseModel):
    """Shape of one entry of the catalog file."""

    name: str = Field(min_length=1)
    price: int = Field(ge=0)
    rating: float = Field(ge=0, le=5)

    model_config = ConfigDict(extra="ignore")


_RECORDS = TypeAdapter(list[RawItemRecord])


class JsonFileCatalogSource(CatalogSource):
    """
    Reads the catalog from a JSON array of {name, price, rating} objects.

    - Array order is ingestion order
    - Every entry is validated before the session starts; one bad entry
      rejects the whole file
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def load(self) -> list[RawItem]:
        try:
            payload = self._path.read_bytes()
        except OSError as exc:
            raise CatalogLoadError(
                f"Cannot read catalog file: {self._path}", path=str(self._path)
            ) from exc

        try:
            records = _RECORDS.validate_json(payload)
        except PydanticValidationError as exc:
            logger.error(
                "Invalid catalog file",
                extra={"path": str(self._path), "errors": exc.error_count()},
            )
            raise CatalogLoadError(
                f"Invalid catalog file: {self._path}", path=str(self._path)
            ) from exc

        return [
            RawItem(name=record.name, price=record.price, rating=record.rating)
            for record in records
        ]
