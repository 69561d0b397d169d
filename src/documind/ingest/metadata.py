# ingest/metadata.py

import logging
import posixpath
import re

import yaml

from documind.errors import SectionPathError

from .models import DocumentMetadata, Header, ParsedDocument, RawDocument

logger = logging.getLogger(__name__)

_FRONT_MATTER = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
_HEADER = re.compile(r"^(#{1,6})[ \t]+(.+)$", re.MULTILINE)

SECTION_ANCHOR = "docs"
DEFAULT_TITLE = "Untitled"


def parse_document(raw: RawDocument) -> ParsedDocument:
    """Strip front matter and collect title, section path and headers.

    Raises:
        SectionPathError: If the path has no ``docs`` directory component.
    """
    front_matter, content = split_front_matter(raw.content)
    section_path = section_path_for(raw.path)
    headers = find_headers(content)

    title = front_matter.get("title")
    if not title:
        title = next((h.text for h in headers if h.level == 1), DEFAULT_TITLE)

    logger.debug(
        "Parsed %s: title=%r, sections=%s, headers=%d",
        raw.path,
        title,
        section_path,
        len(headers),
    )
    return ParsedDocument(
        path=raw.path,
        content=content,
        metadata=DocumentMetadata(
            title=str(title),
            source_path=raw.path,
            section_path=section_path,
            headers=headers,
        ),
    )


def split_front_matter(text: str) -> tuple[dict, str]:
    """Return the parsed YAML front matter and the body after it."""
    match = _FRONT_MATTER.match(text)
    if not match:
        return {}, text

    data = yaml.safe_load(match.group(1)) or {}
    if not isinstance(data, dict):
        # A scalar or list block is not front matter we understand
        data = {}
    return data, text[match.end() :]


def section_path_for(path: str) -> list[str]:
    """Directories between ``docs/`` and the file name.

    ``/site/docs/concepts/workloads/pods.md`` -> ``["concepts", "workloads"]``
    """
    parts = posixpath.normpath(path.replace("\\", "/")).split("/")
    try:
        anchor = parts.index(SECTION_ANCHOR)
    except ValueError:
        raise SectionPathError(f'"{SECTION_ANCHOR}" not found in path: {path}') from None
    return parts[anchor + 1 : -1]


def find_headers(content: str) -> list[Header]:
    return [
        Header(level=len(m.group(1)), text=m.group(2).strip(), position=m.start())
        for m in _HEADER.finditer(content)
    ]
