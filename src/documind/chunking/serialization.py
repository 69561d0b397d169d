import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from documind.errors import ChunksFileError

from .models import Chunk

logger = logging.getLogger(__name__)

_CHUNK_LIST = TypeAdapter(list[Chunk])


def dumps_chunks(chunks: Sequence[Chunk]) -> bytes:
    return _CHUNK_LIST.dump_json(list(chunks), indent=2, by_alias=True)


def loads_chunks(data: str | bytes) -> list[Chunk]:
    """Parse a JSON array of chunk records.

    Raises:
        pydantic.ValidationError: If a record is malformed or breaks the
            parent/child link rules.
    """
    return _CHUNK_LIST.validate_json(data)


def dump_chunks(chunks: Sequence[Chunk], path: str | Path) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(dumps_chunks(chunks))
    logger.info("Saved %d chunks to %s", len(chunks), target)


def load_chunks(path: str | Path) -> list[Chunk]:
    """
    Raises:
        ChunksFileError: If the file cannot be read or a record is invalid.
    """
    source = Path(path)
    try:
        chunks = loads_chunks(source.read_bytes())
    except (ValidationError, OSError) as exc:
        raise ChunksFileError(f"Cannot load chunks from {source}: {exc}") from exc
    logger.info("Loaded %d chunks from %s", len(chunks), source)
    return chunks
