# src/documind/embeddings/config.py

from dataclasses import dataclass
from typing import Literal

Provider = Literal["local"]

DEFAULT_EMBEDDING_MODEL = "sentence-transformers/all-MiniLM-L6-v2"


@dataclass(frozen=True)
class EmbeddingsConfig:
    provider: Provider = "local"
    model: str = DEFAULT_EMBEDDING_MODEL
    batch_size: int = 32
    normalize: bool = True
