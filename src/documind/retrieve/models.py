from dataclasses import dataclass


@dataclass(frozen=True)
class SearchHit:
    """A child fragment returned by similarity search.

    ``score`` is whatever the vector index reports; nothing downstream
    recomputes or compares it.
    """

    child_id: str
    parent_id: str
    content: str
    score: float
