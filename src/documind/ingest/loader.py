# ingest/loader.py

import logging
from pathlib import Path

from .models import RawDocument

logger = logging.getLogger(__name__)


def load_documents(root_dir: str | Path, *, suffix: str = ".md") -> list[RawDocument]:
    """Read every Markdown file below ``root_dir``.

    Documents are returned sorted by path so repeated ingestion runs see
    them in the same order.
    """
    root = Path(root_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"Source directory not found: {root}")

    documents = []
    for file_path in sorted(root.rglob(f"*{suffix}")):
        if not file_path.is_file():
            continue
        documents.append(
            RawDocument(
                path=file_path.as_posix(),
                content=file_path.read_text(encoding="utf-8"),
            )
        )
        logger.debug("Loaded %s", file_path)

    logger.info("Loaded %d documents from %s", len(documents), root)
    return documents
