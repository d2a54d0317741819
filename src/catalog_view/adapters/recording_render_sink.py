from __future__ import annotations

from catalog_view.ports.render_sink import RenderSink
from catalog_view.use_cases.query_engine import QueryResult


class RecordingRenderSink(RenderSink):
    """Render sink that keeps every result it receives, oldest first."""

    def __init__(self) -> None:
        self.results: list[QueryResult] = []

    def render(self, result: QueryResult) -> None:
        self.results.append(result)

    @property
    def last(self) -> QueryResult | None:
        return self.results[-1] if self.results else None
