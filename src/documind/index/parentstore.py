# src/documind/index/parentstore.py

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from documind.chunking.models import Chunk
from documind.chunking.serialization import dumps_chunks, loads_chunks
from documind.errors import ParentStoreError
from documind.ids import normalize_chunk_id
from documind.observability import names
from documind.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)


class ParentStore:
    """Id-keyed store of parent chunks, cached in memory.

    Call ``load()`` once at startup. ``save()`` merges into the cache and
    writes the whole cache back to ``path``. Without a path the store
    lives in memory only.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._path = Path(path) if path is not None else None
        self._parents: dict[str, Chunk] = {}
        self.metrics_hook = metrics_hook

    @property
    def path(self) -> Path | None:
        return self._path

    def __len__(self) -> int:
        return len(self._parents)

    def __contains__(self, parent_id: object) -> bool:
        return self.get(parent_id) is not None

    def load(self) -> int:
        """Read the persisted parents into the cache.

        Returns:
            Number of parents held after loading.

        Raises:
            ParentStoreError: If the file exists but cannot be parsed.
        """
        if self._path is None or not self._path.exists():
            logger.info("Parent store not found, starting fresh")
            return len(self._parents)

        try:
            parents = loads_chunks(self._path.read_bytes())
        except (ValidationError, OSError) as exc:
            raise ParentStoreError(f"Cannot read parent store {self._path}: {exc}") from exc

        for parent in parents:
            self._parents[normalize_chunk_id(parent.id)] = parent

        self.metrics_hook.record_gauge(names.PARENT_STORE_SIZE, len(self._parents))
        logger.info("Loaded %d parents from %s", len(self._parents), self._path)
        return len(self._parents)

    def save(self, parents: Iterable[Chunk]) -> None:
        """Add parents to the store and write the full store through to disk.

        Raises:
            ValueError: If any chunk is not a parent. Nothing is stored then.
        """
        batch = list(parents)
        for chunk in batch:
            if not chunk.is_parent:
                raise ValueError(f"Only parent chunks can be stored, got {chunk.id!r}")

        for parent in batch:
            self._parents[normalize_chunk_id(parent.id)] = parent

        if self._path is not None:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(dumps_chunks(list(self._parents.values())))

        self.metrics_hook.record_gauge(names.PARENT_STORE_SIZE, len(self._parents))
        logger.info("Saved %d parents (%d total)", len(batch), len(self._parents))

    def get(self, parent_id: object) -> Chunk | None:
        try:
            key = normalize_chunk_id(parent_id)
        except ValueError:
            return None
        return self._parents.get(key)

    def get_many(self, parent_ids: Iterable[object]) -> list[Chunk]:
        """Fetch parents in first-occurrence order, one per distinct id.

        Unknown ids are skipped.
        """
        seen: set[str] = set()
        found = []
        misses = 0

        for raw_id in parent_ids:
            try:
                key = normalize_chunk_id(raw_id)
            except ValueError:
                misses += 1
                continue
            if key in seen:
                continue
            seen.add(key)

            parent = self._parents.get(key)
            if parent is None:
                misses += 1
                logger.debug("Parent %s not in store", key)
                continue
            found.append(parent)

        if misses:
            self.metrics_hook.increment(names.PARENT_STORE_MISSES_TOTAL, misses)
        return found
