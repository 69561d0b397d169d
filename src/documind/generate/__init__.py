from .citation import (
    Confidence,
    GeneratedAnswer,
    classify_confidence,
    parse_citations,
    process_answer,
    unique_citations,
)
from .prompt import CitationLegendEntry, PromptBuilder, build_citation_legend
from .stream import collect_stream

__all__ = [
    "CitationLegendEntry",
    "Confidence",
    "GeneratedAnswer",
    "PromptBuilder",
    "build_citation_legend",
    "classify_confidence",
    "collect_stream",
    "parse_citations",
    "process_answer",
    "unique_citations",
]
