"""Runtime settings.

This is the only module that reads environment variables. Everything else
receives plain config objects.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from documind.embeddings.config import DEFAULT_EMBEDDING_MODEL, EmbeddingsConfig
from documind.index.indexer import DEFAULT_BATCH_SIZE
from documind.llms.config import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, LLMConfig
from documind.retrieve.search import DEFAULT_TOP_K
from documind.vectorstores.qdrantvectorstore import DEFAULT_COLLECTION


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class Settings:
    # ===== Vector store =====
    qdrant_url: str | None = field(
        default_factory=lambda: os.getenv("QDRANT_URL", "http://localhost:6333") or None
    )
    # Embedded on-disk Qdrant, used when QDRANT_URL is set to an empty string
    qdrant_path: str | None = field(default_factory=lambda: os.getenv("QDRANT_PATH") or None)
    qdrant_api_key: str | None = field(
        default_factory=lambda: os.getenv("QDRANT_API_KEY") or None
    )
    collection: str = field(
        default_factory=lambda: os.getenv("DOCUMIND_COLLECTION", DEFAULT_COLLECTION)
    )

    # ===== Embeddings =====
    embedding_model: str = field(
        default_factory=lambda: os.getenv("DOCUMIND_EMBEDDING_MODEL", DEFAULT_EMBEDDING_MODEL)
    )
    vector_size: int = field(default_factory=lambda: _env_int("DOCUMIND_VECTOR_SIZE", 384))

    # ===== Generation =====
    llm_model: str = field(default_factory=lambda: os.getenv("DOCUMIND_LLM_MODEL", DEFAULT_MODEL))
    anthropic_api_key: str | None = field(
        default_factory=lambda: os.getenv("ANTHROPIC_API_KEY") or None
    )
    max_tokens: int = field(
        default_factory=lambda: _env_int("DOCUMIND_MAX_TOKENS", DEFAULT_MAX_TOKENS)
    )

    # ===== Pipeline =====
    parent_store_path: str = field(
        default_factory=lambda: os.getenv("DOCUMIND_PARENT_STORE", "./data/parents.json")
    )
    batch_size: int = field(
        default_factory=lambda: _env_int("DOCUMIND_BATCH_SIZE", DEFAULT_BATCH_SIZE)
    )
    top_k: int = field(default_factory=lambda: _env_int("DOCUMIND_TOP_K", DEFAULT_TOP_K))
    log_level: str = field(
        default_factory=lambda: os.getenv("DOCUMIND_LOG_LEVEL", "INFO").upper()
    )

    def embeddings_config(self) -> EmbeddingsConfig:
        return EmbeddingsConfig(model=self.embedding_model)

    def llm_config(self) -> LLMConfig:
        return LLMConfig(
            model=self.llm_model,
            api_key=self.anthropic_api_key,
            max_tokens=self.max_tokens,
        )


def load_settings() -> Settings:
    """Read ``.env`` (without overriding exported variables), then the environment."""
    load_dotenv()
    return Settings()
