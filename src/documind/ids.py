# src/documind/ids.py

"""Chunk identifier normalisation.

Ids can come back from JSON files or vector payloads as ints or padded
strings. Every lookup goes through ``normalize_chunk_id`` so the parent
store and the context expander always agree on the key.
"""

import uuid

# Fixed namespace so point ids are stable across runs and machines.
POINT_ID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "https://documind/chunks")


def normalize_chunk_id(value: object) -> str:
    """Return the canonical string form of a chunk id.

    Raises:
        ValueError: If the id is ``None``, a bool, or blank.
    """
    if value is None or isinstance(value, bool):
        raise ValueError(f"Invalid chunk id: {value!r}")
    normalized = str(value).strip()
    if not normalized:
        raise ValueError("Chunk id must not be empty")
    return normalized


def point_id(chunk_id: object) -> str:
    """Deterministic UUID for a chunk, usable as a Qdrant point id."""
    return str(uuid.uuid5(POINT_ID_NAMESPACE, normalize_chunk_id(chunk_id)))
