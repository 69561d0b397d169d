from .chunking import (
    MAX_FRAGMENT_CHARS,
    assemble_chunks,
    chunk_document,
    document_id,
    split_into_parents,
    split_parent_into_children,
)
from .models import Chunk, ChildFragment, ChunkKind, ParentSection
from .serialization import dump_chunks, dumps_chunks, load_chunks, loads_chunks

__all__ = [
    "MAX_FRAGMENT_CHARS",
    "Chunk",
    "ChildFragment",
    "ChunkKind",
    "ParentSection",
    "assemble_chunks",
    "chunk_document",
    "document_id",
    "dump_chunks",
    "dumps_chunks",
    "load_chunks",
    "loads_chunks",
    "split_into_parents",
    "split_parent_into_children",
]
