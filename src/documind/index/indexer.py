import logging
from collections.abc import Sequence

from documind.chunking.models import Chunk
from documind.embeddings.base import EmbeddingsClient
from documind.ids import point_id
from documind.observability import names
from documind.observability.base import MetricsHook, NoOpMetricsHook
from documind.vectorstores.base import VectorStore
from documind.vectorstores.types import FragmentPayload, VectorItem

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 50


def to_vector_item(chunk: Chunk, vector: list[float]) -> VectorItem:
    payload: FragmentPayload = {
        "chunk_id": chunk.id,
        "content": chunk.content,
        "parent_id": chunk.parent_id,
        "source_file": chunk.source_file,
        "section_path": list(chunk.section_path),
    }
    return VectorItem(id=point_id(chunk.id), vector=vector, metadata=payload)


async def index_chunks(
    chunks: Sequence[Chunk],
    embeddings_client: EmbeddingsClient,
    vector_store: VectorStore,
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> int:
    """Embed and upsert chunks in fixed-size batches, in their original order.

    Returns:
        Number of chunks indexed.
    """
    if batch_size <= 0:
        raise ValueError("batch_size must be > 0")

    total_batches = (len(chunks) + batch_size - 1) // batch_size
    for batch_no, batch_start in enumerate(range(0, len(chunks), batch_size), start=1):
        batch = chunks[batch_start : batch_start + batch_size]
        logger.info(
            "Embedding batch %d/%d (%d chunks)", batch_no, total_batches, len(batch)
        )

        embeddings = await embeddings_client.embed([c.content for c in batch])
        if len(embeddings) != len(batch):
            raise ValueError(
                f"Expected {len(batch)} embeddings, got {len(embeddings)}"
            )

        await vector_store.upsert(
            items=[to_vector_item(c, e.vector) for c, e in zip(batch, embeddings)]
        )
        metrics_hook.increment(names.INDEX_BATCHES_TOTAL)
        metrics_hook.increment(names.INDEX_CHUNKS_TOTAL, len(batch))
        logger.debug("Uploaded batch %d", batch_no)

    logger.info("Indexed %d chunks total", len(chunks))
    return len(chunks)
