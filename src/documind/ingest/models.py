# ingest/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RawDocument:
    path: str
    content: str


@dataclass(frozen=True)
class Header:
    level: int
    text: str
    position: int


@dataclass(frozen=True)
class DocumentMetadata:
    title: str
    source_path: str
    section_path: list[str] = field(default_factory=list)
    headers: list[Header] = field(default_factory=list)


@dataclass(frozen=True)
class ParsedDocument:
    """A Markdown document with front matter removed.

    Header positions are character offsets into ``content``.
    """

    path: str
    content: str
    metadata: DocumentMetadata
