import logging
from collections.abc import Sequence

from documind.chunking.models import Chunk
from documind.ids import normalize_chunk_id
from documind.index.parentstore import ParentStore
from documind.observability import names
from documind.observability.base import MetricsHook, NoOpMetricsHook

from .models import SearchHit

logger = logging.getLogger(__name__)


def expand_to_parents(
    hits: Sequence[SearchHit],
    store: ParentStore,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Chunk]:
    """Swap fragment hits for the sections they came from.

    Parents come back once each, in the order their id first appears among
    the hits. Hits whose parent is not in the store are dropped, so the
    result can be shorter than the number of distinct parent ids.
    """
    parent_ids: list[str] = []
    for hit in hits:
        try:
            parent_ids.append(normalize_chunk_id(hit.parent_id))
        except ValueError:
            logger.warning("Hit %s has no parent id, dropping it", hit.child_id)

    parents = store.get_many(parent_ids)

    missing = len(set(parent_ids)) - len(parents)
    if missing:
        metrics_hook.increment(names.EXPANSION_MISSING_PARENTS_TOTAL, missing)
        logger.warning(
            "%d of %d parents referenced by search hits are missing from the store",
            missing,
            len(set(parent_ids)),
        )
    return parents
