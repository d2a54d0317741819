"""
Dependency injection for FastAPI routes.

The process serves one catalog session. The catalog is ingested once at
startup by catalog_session_lifespan(), off the event loop, and the session
(catalog + filter state) is kept on app.state. Providers are async so that
they, like the routes, run on the event loop and never overlap.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from catalog_view.adapters.json_file_catalog_source import JsonFileCatalogSource
from catalog_view.adapters.postgres_catalog_source import PostgresCatalogSource
from catalog_view.domain.errors import InternalError
from catalog_view.infra.config import catalog_file, catalog_source
from catalog_view.infra.db.session import get_session
from catalog_view.use_cases.catalog_session import CatalogSession, load_catalog_session

logger = logging.getLogger(__name__)


def build_catalog_session() -> CatalogSession:
    """
    Ingest the catalog from the configured source and start a session.

    CATALOG_SOURCE selects the adapter:
    - "json" (default): JSON file at CATALOG_FILE
    - "postgres": products table at DATABASE_URL

    Returns:
        CatalogSession: Started session with default filters
    """
    if catalog_source() == "postgres":
        with get_session() as db:
            return load_catalog_session(PostgresCatalogSource(session=db))

    return load_catalog_session(JsonFileCatalogSource(catalog_file()))


@asynccontextmanager
async def catalog_session_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Builds the process-wide session before the app starts serving."""
    # Ingestion does blocking file or database I/O
    app.state.catalog_session = await asyncio.to_thread(build_catalog_session)
    logger.info(
        "Catalog session started",
        extra={"catalog_size": len(app.state.catalog_session.catalog)},
    )
    yield


async def get_catalog_session(request: Request) -> CatalogSession:
    """
    Provides the process-wide catalog session.

    Args:
        request: Current request (gives access to app.state)

    Returns:
        CatalogSession: The session shared by every request of this app

    Raises:
        InternalError: If the app was started without its lifespan
    """
    session: CatalogSession | None = getattr(request.app.state, "catalog_session", None)
    if session is None:
        raise InternalError("Catalog session is not initialized")
    return session
