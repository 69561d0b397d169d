from collections.abc import Iterable
from typing import Protocol

from documind.observability.base import MetricsHook

from .types import QueryResult, VectorItem


class VectorStore(Protocol):
    metrics_hook: MetricsHook

    async def upsert(self, *, items: Iterable[VectorItem]) -> None: ...

    async def query(
        self,
        *,
        vector: list[float],
        top_k: int,
        filters: dict | None = None,
    ) -> list[QueryResult]:
        """Nearest neighbours of ``vector``, most similar first."""
        ...

    async def close(self) -> None: ...
