from unittest.mock import AsyncMock

import pytest

from documind.embeddings.base import Embedding
from documind.retrieve.models import SearchHit
from documind.retrieve.search import Retriever
from documind.vectorstores.types import QueryResult


@pytest.fixture
def embeddings() -> AsyncMock:
    client = AsyncMock()
    client.embed.return_value = [Embedding(vector=[0.1, 0.2])]
    return client


class TestRetriever:
    @pytest.mark.asyncio
    async def test_maps_results_to_hits_in_rank_order(self, embeddings: AsyncMock) -> None:
        store = AsyncMock()
        store.query.return_value = [
            QueryResult(
                id="uuid-1",
                score=0.9,
                metadata={"chunk_id": "pods-p0-c1", "parent_id": "pods-p0", "content": "One."},
            ),
            QueryResult(
                id="uuid-2",
                score=0.4,
                metadata={"chunk_id": "svc-p2-c0", "parent_id": "svc-p2", "content": "Two."},
            ),
        ]

        hits = await Retriever(embeddings, store).search("what is a pod?", top_k=2)

        assert hits == [
            SearchHit(child_id="pods-p0-c1", parent_id="pods-p0", content="One.", score=0.9),
            SearchHit(child_id="svc-p2-c0", parent_id="svc-p2", content="Two.", score=0.4),
        ]
        embeddings.embed.assert_awaited_once_with(["what is a pod?"])
        store.query.assert_awaited_once_with(vector=[0.1, 0.2], top_k=2)

    @pytest.mark.asyncio
    async def test_missing_payload_fields(self, embeddings: AsyncMock) -> None:
        """A point without chunk metadata falls back to its point id and empty parent."""
        store = AsyncMock()
        store.query.return_value = [
            QueryResult(id="uuid-1", score=0.5, metadata={"parent_id": None})
        ]

        [hit] = await Retriever(embeddings, store).search("q")

        assert hit.child_id == "uuid-1"
        assert hit.parent_id == ""
        assert hit.content == ""
