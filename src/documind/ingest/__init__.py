from .loader import load_documents
from .metadata import parse_document, section_path_for, split_front_matter
from .models import DocumentMetadata, Header, ParsedDocument, RawDocument

__all__ = [
    "DocumentMetadata",
    "Header",
    "ParsedDocument",
    "RawDocument",
    "load_documents",
    "parse_document",
    "section_path_for",
    "split_front_matter",
]
