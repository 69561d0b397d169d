from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel

from documind.ids import normalize_chunk_id
from documind.ingest.models import Header

DEFAULT_STRATEGY = "recursive"


class ChunkKind(str, Enum):
    PARENT = "parent"
    CHILD = "child"


class Chunk(BaseModel):
    """A persisted retrieval unit: a whole level-2 section or a slice of one.

    Serialised with camelCase keys (``parentId``, ``sourceFile``, ...).
    Parents never carry a ``parent_id``; children always do.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    content: str
    parent_id: str | None = None
    source_file: str
    section_path: tuple[str, ...] = ()
    kind: ChunkKind
    strategy: str = DEFAULT_STRATEGY

    @field_validator("id", "parent_id", mode="before")
    @classmethod
    def _normalize_ids(cls, value: object) -> object:
        # ids written by other tools may be numbers
        if value is None:
            return None
        return normalize_chunk_id(value)

    @model_validator(mode="after")
    def _check_parent_link(self) -> "Chunk":
        if self.kind == ChunkKind.PARENT and self.parent_id is not None:
            raise ValueError(f"parent chunk {self.id!r} must not have a parent_id")
        if self.kind == ChunkKind.CHILD and not self.parent_id:
            raise ValueError(f"child chunk {self.id!r} requires a parent_id")
        return self

    @property
    def is_parent(self) -> bool:
        return self.kind == ChunkKind.PARENT


@dataclass(frozen=True)
class ParentSection:
    id: str
    content: str
    start_offset: int
    end_offset: int
    header: Header


@dataclass(frozen=True)
class ChildFragment:
    id: str
    parent_id: str
    content: str
