from dataclasses import dataclass
from typing import Protocol

from documind.observability.base import MetricsHook


@dataclass(frozen=True)
class Embedding:
    vector: list[float]


class EmbeddingsClient(Protocol):
    """Turns fragment texts and queries into vectors of a fixed size.

    The same client must embed both sides of a search, otherwise the
    vectors are not comparable.
    """

    metrics_hook: MetricsHook

    @property
    def dimensions(self) -> int:
        """Vector length; must match the vector store's collection size."""
        ...

    async def embed(self, texts: list[str]) -> list[Embedding]:
        """One embedding per text, in input order."""
        ...
