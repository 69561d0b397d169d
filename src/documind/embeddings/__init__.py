from .base import Embedding, EmbeddingsClient
from .config import DEFAULT_EMBEDDING_MODEL, EmbeddingsConfig
from .factory import create_embeddings_client

__all__ = [
    "DEFAULT_EMBEDDING_MODEL",
    "Embedding",
    "EmbeddingsClient",
    "EmbeddingsConfig",
    "create_embeddings_client",
]
