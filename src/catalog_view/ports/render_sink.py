from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalog_view.use_cases.query_engine import QueryResult


class RenderSink(ABC):
    """Port for presentation. Receives the query result after every evaluation."""

    @abstractmethod
    def render(self, result: QueryResult) -> None: ...
