import logging
from time import monotonic

from documind.embeddings.base import EmbeddingsClient
from documind.observability import names
from documind.observability.base import MetricsHook, NoOpMetricsHook
from documind.vectorstores.base import VectorStore

from .models import SearchHit

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 10


class Retriever:
    def __init__(
        self,
        embeddings_client: EmbeddingsClient,
        vector_store: VectorStore,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._embeddings = embeddings_client
        self._store = vector_store
        self.metrics_hook = metrics_hook

    async def search(self, query: str, top_k: int = DEFAULT_TOP_K) -> list[SearchHit]:
        """Embed ``query`` and return the closest child fragments, best first."""
        started = monotonic()
        [query_embedding] = await self._embeddings.embed([query])
        results = await self._store.query(vector=query_embedding.vector, top_k=top_k)

        hits = [
            SearchHit(
                child_id=str(r.metadata.get("chunk_id", r.id)),
                parent_id=str(r.metadata.get("parent_id") or ""),
                content=str(r.metadata.get("content", "")),
                score=r.score,
            )
            for r in results
        ]

        elapsed_ms = 1000 * (monotonic() - started)
        self.metrics_hook.record_latency(names.SEARCH_DURATION, elapsed_ms)
        logger.info("Search returned %d hits for %r", len(hits), query)
        return hits
