# Chunking
from .chunking import Chunk, ChunkKind, chunk_document

# Embeddings
from .embeddings import Embedding, EmbeddingsClient, EmbeddingsConfig

# Errors
from .errors import (
    ChunksFileError,
    DocumindError,
    MissingCredentialsError,
    ParentStoreError,
    SectionPathError,
    UnexpectedResponseError,
)

# Generation
from .generate import Confidence, GeneratedAnswer, PromptBuilder, process_answer

# Indexing
from .index import ParentStore, index_chunks

# Ingestion
from .ingest import ParsedDocument, load_documents, parse_document

# LLMs
from .llms import LLMConfig, create_llm_client

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Pipeline
from .pipeline import Answer, Documind

# Retrieval
from .retrieve import Retriever, SearchHit, expand_to_parents

# Vector stores
from .vectorstores import QdrantVectorStore, QueryResult, VectorItem, VectorStore

__all__ = [
    # Chunking
    "Chunk",
    "ChunkKind",
    "chunk_document",
    # Embeddings
    "Embedding",
    "EmbeddingsClient",
    "EmbeddingsConfig",
    # Errors
    "ChunksFileError",
    "DocumindError",
    "MissingCredentialsError",
    "ParentStoreError",
    "SectionPathError",
    "UnexpectedResponseError",
    # Generation
    "Confidence",
    "GeneratedAnswer",
    "PromptBuilder",
    "process_answer",
    # Indexing
    "ParentStore",
    "index_chunks",
    # Ingestion
    "ParsedDocument",
    "load_documents",
    "parse_document",
    # LLMs
    "LLMConfig",
    "create_llm_client",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Pipeline
    "Answer",
    "Documind",
    # Retrieval
    "Retriever",
    "SearchHit",
    "expand_to_parents",
    # Vector stores
    "QdrantVectorStore",
    "QueryResult",
    "VectorItem",
    "VectorStore",
]
