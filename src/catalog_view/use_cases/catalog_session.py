"""Catalog session use case.

Owns the catalog and the filter state of one session and runs the
event -> update -> evaluate -> render cycle.
"""

from __future__ import annotations

import logging

from catalog_view.domain.catalog import Catalog
from catalog_view.domain.events import FilterEvent, apply_event
from catalog_view.domain.filter_state import FilterState
from catalog_view.ports.catalog_source import CatalogSource
from catalog_view.ports.render_sink import RenderSink
from catalog_view.use_cases.query_engine import QueryEngine, QueryResult

logger = logging.getLogger(__name__)


class CatalogSession:
    """
    Single owner of a catalog and its filter state.

    Responsibilities:
    - Build the default FilterState for the catalog
    - Apply exactly one update per event, then re-evaluate the whole catalog
    - Hand every result to the render sink (if any)

    Events are handled one at a time and each runs to completion; the session
    is not meant to be shared between threads.
    """

    def __init__(
        self,
        catalog: Catalog,
        render_sink: RenderSink | None = None,
        engine: QueryEngine | None = None,
    ) -> None:
        """
        Initialize session with its catalog and collaborators.

        Args:
            catalog: Immutable catalog for the lifetime of the session
            render_sink: Receives each QueryResult (optional)
            engine: Query engine (defaults to a new QueryEngine)
        """
        self._catalog = catalog
        self._render_sink = render_sink
        self._engine = engine or QueryEngine()
        self._state = FilterState.for_catalog(catalog)

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def state(self) -> FilterState:
        return self._state

    def start(self) -> QueryResult:
        """Evaluate and render the initial, unfiltered view."""
        return self._refresh()

    def dispatch(self, event: FilterEvent) -> QueryResult:
        """
        Apply one filter event and refresh the view.

        Args:
            event: Event carrying the payload of one update operation

        Returns:
            QueryResult for the updated state

        Raises:
            ValidationError: If the event payload is invalid (state unchanged)
        """
        apply_event(self._state, event)
        logger.debug("Filter event applied", extra={"event": type(event).__name__})
        return self._refresh()

    def current_view(self) -> QueryResult:
        """Evaluate the current state without changing any criterion."""
        return self._engine.evaluate(self._catalog, self._state)

    def _refresh(self) -> QueryResult:
        result = self._engine.evaluate(self._catalog, self._state)
        if self._render_sink is not None:
            self._render_sink.render(result)
        return result


def load_catalog_session(
    source: CatalogSource, render_sink: RenderSink | None = None
) -> CatalogSession:
    """
    Ingest the catalog from a source and start a session over it.

    Args:
        source: Ingestion adapter supplying raw records
        render_sink: Receives each QueryResult (optional)

    Returns:
        Started CatalogSession
    """
    catalog = Catalog.from_records(source.load())
    logger.info(
        "Catalog loaded",
        extra={"catalog_size": len(catalog), "max_price": catalog.max_price},
    )

    session = CatalogSession(catalog, render_sink=render_sink)
    session.start()
    return session
