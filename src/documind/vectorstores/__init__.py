from .base import VectorStore
from .qdrantvectorstore import DEFAULT_COLLECTION, QdrantVectorStore
from .types import FragmentPayload, QueryResult, VectorItem

__all__ = [
    "DEFAULT_COLLECTION",
    "FragmentPayload",
    "QdrantVectorStore",
    "QueryResult",
    "VectorItem",
    "VectorStore",
]
