from .indexer import DEFAULT_BATCH_SIZE, index_chunks, to_vector_item
from .parentstore import ParentStore

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "ParentStore",
    "index_chunks",
    "to_vector_item",
]
