# src/documind/embeddings/factory.py

from documind.observability.base import MetricsHook, NoOpMetricsHook

from .base import EmbeddingsClient
from .config import EmbeddingsConfig


def create_embeddings_client(
    config: EmbeddingsConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> EmbeddingsClient:
    if config.provider == "local":
        from .local import LocalEmbeddingsClient

        return LocalEmbeddingsClient(
            model_name=config.model,
            batch_size=config.batch_size,
            normalize=config.normalize,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown embeddings provider: {config.provider}")
