import logging
import re
from collections.abc import Sequence
from pathlib import PurePosixPath
from time import monotonic

from documind.ingest.models import ParsedDocument
from documind.observability import names
from documind.observability.base import MetricsHook, NoOpMetricsHook

from .models import DEFAULT_STRATEGY, Chunk, ChildFragment, ChunkKind, ParentSection

logger = logging.getLogger(__name__)

SECTION_LEVEL = 2
MAX_FRAGMENT_CHARS = 200

_LEADING_HEADING = re.compile(r"\A## .+\n?")
_SENTENCE = re.compile(r"[^.!?]+[.!?]+")


def split_into_parents(document: ParsedDocument) -> list[ParentSection]:
    """Cut the document at every level-2 header.

    Each section runs from its header up to the next level-2 header, the
    last one to the end of the document. Text before the first level-2
    header belongs to no section. No level-2 headers means no sections.
    """
    headers = [h for h in document.metadata.headers if h.level == SECTION_LEVEL]
    doc_id = document_id(document.path)

    parents = []
    for i, header in enumerate(headers):
        start = header.position
        end = headers[i + 1].position if i + 1 < len(headers) else len(document.content)
        parents.append(
            ParentSection(
                id=f"{doc_id}-p{i}",
                content=document.content[start:end],
                start_offset=start,
                end_offset=end,
                header=header,
            )
        )
    return parents


def split_parent_into_children(
    parent: ParentSection,
    *,
    max_chars: int = MAX_FRAGMENT_CHARS,
) -> list[ChildFragment]:
    """Greedily pack the section's sentences into fragments of at most ``max_chars``.

    The heading line is dropped first. Text after the last ``.``, ``!`` or
    ``?`` is not part of any sentence and is left out. A single sentence
    longer than ``max_chars`` becomes one oversized fragment.
    """
    if max_chars <= 0:
        raise ValueError("max_chars must be > 0")

    body = _LEADING_HEADING.sub("", parent.content, count=1)
    sentences = _SENTENCE.findall(body)

    groups: list[str] = []
    current = ""
    for sentence in sentences:
        if len(current) + len(sentence) <= max_chars:
            current += sentence
        else:
            if current:
                groups.append(current)
            current = sentence
    if current:
        groups.append(current)

    return [
        ChildFragment(id=f"{parent.id}-c{j}", parent_id=parent.id, content=group.strip())
        for j, group in enumerate(groups)
    ]


def assemble_chunks(
    document: ParsedDocument,
    parents: Sequence[ParentSection],
    children_by_parent: Sequence[Sequence[ChildFragment]],
    *,
    strategy: str = DEFAULT_STRATEGY,
) -> list[Chunk]:
    """Flatten sections into ``[parent, its children..., next parent, ...]``."""
    if len(parents) != len(children_by_parent):
        raise ValueError("children_by_parent must have one entry per parent")

    section_path = tuple(document.metadata.section_path)
    chunks = []
    for parent, children in zip(parents, children_by_parent):
        chunks.append(
            Chunk(
                id=parent.id,
                content=parent.content,
                parent_id=None,
                source_file=document.path,
                section_path=section_path,
                kind=ChunkKind.PARENT,
                strategy=strategy,
            )
        )
        for child in children:
            chunks.append(
                Chunk(
                    id=child.id,
                    content=child.content,
                    parent_id=child.parent_id,
                    source_file=document.path,
                    section_path=section_path,
                    kind=ChunkKind.CHILD,
                    strategy=strategy,
                )
            )
    return chunks


def chunk_document(
    document: ParsedDocument,
    *,
    strategy: str = DEFAULT_STRATEGY,
    max_chars: int = MAX_FRAGMENT_CHARS,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Chunk]:
    started = monotonic()

    parents = split_into_parents(document)
    children = [split_parent_into_children(p, max_chars=max_chars) for p in parents]
    chunks = assemble_chunks(document, parents, children, strategy=strategy)

    child_count = sum(len(c) for c in children)
    elapsed_ms = 1000 * (monotonic() - started)
    metrics_hook.record_latency(names.CHUNKING_DURATION, elapsed_ms)
    metrics_hook.increment(names.CHUNKING_DOCUMENTS_TOTAL)
    metrics_hook.increment(
        names.CHUNKING_CHUNKS_CREATED, len(parents), labels={"kind": "parent"}
    )
    metrics_hook.increment(
        names.CHUNKING_CHUNKS_CREATED, child_count, labels={"kind": "child"}
    )
    logger.debug(
        "Chunked %s into %d parents and %d children",
        document.path,
        len(parents),
        child_count,
    )
    return chunks


def document_id(path: str) -> str:
    """File name without its extension: ``docs/concepts/pods.md`` -> ``pods``."""
    return PurePosixPath(path.replace("\\", "/")).stem
