"""Environment-driven settings for catalog ingestion."""

from __future__ import annotations

import os
from pathlib import Path

CATALOG_SOURCES = ("json", "postgres")
DEFAULT_CATALOG_FILE = "data/catalog.json"


def catalog_source() -> str:
    """Which ingestion adapter feeds the session: "json" (default) or "postgres"."""
    source = os.getenv("CATALOG_SOURCE", "json").strip().lower()

    if source not in CATALOG_SOURCES:
        raise RuntimeError(
            f"CATALOG_SOURCE must be one of {', '.join(CATALOG_SOURCES)}, got {source!r}"
        )

    return source


def catalog_file() -> Path:
    return Path(os.getenv("CATALOG_FILE") or DEFAULT_CATALOG_FILE)
