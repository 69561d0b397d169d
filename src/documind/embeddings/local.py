# src/documind/embeddings/local.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from time import monotonic

from sentence_transformers import SentenceTransformer

from documind.observability import names
from documind.observability.base import MetricsHook, NoOpMetricsHook

from .base import Embedding, EmbeddingsClient
from .config import DEFAULT_EMBEDDING_MODEL

logger = logging.getLogger(__name__)


class LocalEmbeddingsClient(EmbeddingsClient):
    """
    Sentence-transformers embeddings computed in-process.

    - the model is loaded once, at construction
    - texts are encoded in batches of ``batch_size``
    - encoding runs in a worker thread so the event loop stays free
    - vectors are unit length by default (cosine-ready)
    """

    def __init__(
        self,
        model_name: str = DEFAULT_EMBEDDING_MODEL,
        batch_size: int = 32,
        normalize: bool = True,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if batch_size <= 0:
            raise ValueError("batch_size must be > 0")
        self._model = SentenceTransformer(model_name)
        self._model_name = model_name
        self._batch_size = batch_size
        self._normalize = normalize
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized LocalEmbeddingsClient with model=%s, batch_size=%s, normalize=%s",
            model_name,
            batch_size,
            normalize,
        )

    @property
    def dimensions(self) -> int:
        return int(self._model.get_sentence_embedding_dimension())

    async def embed(self, texts: list[str]) -> list[Embedding]:
        if not texts:
            logger.debug("Empty input, returning empty list")
            return []

        started = monotonic()
        logger.debug("Embedding %d texts in batches of %d", len(texts), self._batch_size)
        embeddings: list[Embedding] = []

        for batch in _batch_iter(texts, self._batch_size):
            self.metrics_hook.record_gauge(names.EMBEDDINGS_BATCH_SIZE, len(batch))
            vectors = await asyncio.to_thread(
                self._model.encode,
                batch,
                convert_to_numpy=True,
                normalize_embeddings=self._normalize,
                show_progress_bar=False,
            )
            embeddings.extend(Embedding(vector=v.tolist()) for v in vectors)

        elapsed_ms = 1000 * (monotonic() - started)
        self.metrics_hook.record_latency(
            names.EMBEDDINGS_DURATION, elapsed_ms, labels={"backend": "local"}
        )
        self.metrics_hook.increment(
            names.EMBEDDINGS_REQUESTS_TOTAL, labels={"backend": "local"}
        )
        logger.debug("Embedded %d texts in %.0fms", len(embeddings), elapsed_ms)
        return embeddings


def _batch_iter(items: list[str], batch_size: int) -> Iterable[list[str]]:
    for i in range(0, len(items), batch_size):
        yield items[i : i + batch_size]
