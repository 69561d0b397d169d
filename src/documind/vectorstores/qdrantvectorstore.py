import logging
from collections.abc import Iterable
from time import monotonic

from qdrant_client import AsyncQdrantClient
from qdrant_client.models import (
    Distance,
    FieldCondition,
    Filter,
    MatchValue,
    PointStruct,
    VectorParams,
)

from documind.observability import names
from documind.observability.base import MetricsHook, NoOpMetricsHook

from .base import VectorStore
from .types import QueryResult, VectorItem

logger = logging.getLogger(__name__)

DEFAULT_COLLECTION = "documind_chunks"


class QdrantVectorStore(VectorStore):
    """Child-fragment index backed by Qdrant."""

    def __init__(
        self,
        *,
        url: str | None = None,
        path: str | None = None,
        api_key: str | None = None,
        collection_name: str = DEFAULT_COLLECTION,
        vector_size: int,
        distance: Distance = Distance.COSINE,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        """
        Args:
            url: Qdrant server URL. Takes precedence over ``path``.
            path: Directory for Qdrant's embedded on-disk storage.
            api_key: API key for Qdrant Cloud (only used with url).
            collection_name: Collection holding the fragment vectors.
            vector_size: Dimensionality of the embedding model.
            distance: Similarity metric.
            metrics_hook: Hook for recording metrics.

        With neither ``url`` nor ``path`` the store runs in memory, which is
        what the tests use. Point ids must be UUIDs or unsigned ints; see
        ``documind.ids.point_id``.
        """
        self.metrics_hook = metrics_hook

        if url:
            self._client = AsyncQdrantClient(url=url, api_key=api_key)
        elif path:
            self._client = AsyncQdrantClient(path=path)
        else:
            self._client = AsyncQdrantClient(":memory:")

        self._collection_name = collection_name
        self._vector_size = vector_size
        self._distance = distance
        self._collection_ready = False

    @property
    def collection_name(self) -> str:
        return self._collection_name

    async def ensure_collection(self) -> bool:
        """Create the collection if missing. Returns True when it was created."""
        if self._collection_ready:
            return False

        if await self._client.collection_exists(self._collection_name):
            logger.info("Collection %s already exists", self._collection_name)
            created = False
        else:
            await self._client.create_collection(
                collection_name=self._collection_name,
                vectors_config=VectorParams(
                    size=self._vector_size,
                    distance=self._distance,
                ),
            )
            logger.info(
                "Collection %s created (size=%d, distance=%s)",
                self._collection_name,
                self._vector_size,
                self._distance,
            )
            created = True

        self._collection_ready = True
        return created

    async def close(self) -> None:
        await self._client.close()

    async def upsert(self, *, items: Iterable[VectorItem]) -> None:
        await self.ensure_collection()

        started = monotonic()
        points = [
            PointStruct(id=item.id, vector=item.vector, payload=dict(item.metadata))
            for item in items
        ]
        if not points:
            return

        await self._client.upsert(
            collection_name=self._collection_name,
            wait=True,
            points=points,
        )

        elapsed_ms = 1000 * (monotonic() - started)
        self.metrics_hook.record_latency(names.QDRANT_UPSERT_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.QDRANT_OPERATIONS_TOTAL, labels={"operation": "upsert"}
        )
        logger.debug("Upserted %d points in %.0fms", len(points), elapsed_ms)

    async def query(
        self,
        *,
        vector: list[float],
        top_k: int,
        filters: dict | None = None,
    ) -> list[QueryResult]:
        """
        Args:
            vector: Query embedding.
            top_k: Number of results to return.
            filters: Optional exact-match payload filters.

        Returns:
            Results sorted by similarity, highest first.
        """
        if top_k < 1:
            raise ValueError("top_k must be at least 1")
        await self.ensure_collection()

        started = monotonic()
        query_filter = None
        if filters:
            query_filter = Filter(
                must=[
                    FieldCondition(key=key, match=MatchValue(value=value))
                    for key, value in filters.items()
                ]
            )

        results = await self._client.query_points(
            collection_name=self._collection_name,
            query=vector,
            query_filter=query_filter,
            limit=top_k,
            with_payload=True,
        )

        elapsed_ms = 1000 * (monotonic() - started)
        self.metrics_hook.record_latency(names.QDRANT_QUERY_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.QDRANT_OPERATIONS_TOTAL, labels={"operation": "query"}
        )

        return [
            QueryResult(id=str(hit.id), score=hit.score, metadata=dict(hit.payload or {}))
            for hit in results.points
        ]
