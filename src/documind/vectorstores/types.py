from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypedDict


class FragmentPayload(TypedDict):
    """What each indexed child fragment carries next to its vector.

    ``chunk_id`` is the readable chunk id; the point id itself is a UUID
    derived from it.
    """

    chunk_id: str
    content: str
    parent_id: str | None
    source_file: str
    section_path: list[str]


@dataclass(frozen=True)
class VectorItem:
    id: str
    vector: list[float]
    metadata: Mapping[str, Any]


@dataclass(frozen=True)
class QueryResult:
    """One nearest-neighbour match. ``score`` is cosine similarity, higher is closer."""

    id: str
    score: float
    metadata: Mapping[str, Any]
