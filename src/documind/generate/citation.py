"""Citation markers in generated answers.

The model is asked to cite context documents as ``[1]``, ``[2]``, ... .
``process_answer`` pulls those markers out, keeps the ones that point at a
document that was actually supplied, and derives a confidence level from
how many distinct documents were cited.

Confidence is a heuristic for how grounded an answer looks. It says
nothing about whether the answer is correct: a ``low`` answer may be right
and a ``high`` one wrong.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from documind.observability import names
from documind.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)

_CITATION = re.compile(r"\[(\d+)\]")


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class GeneratedAnswer:
    text: str
    citations: list[int]
    """Every marker in text order, duplicates and out-of-range values included."""
    unique_citations: list[int]
    """Distinct in-range markers, ascending."""
    confidence: Confidence


def parse_citations(text: str) -> list[int]:
    """``"[1] and [1][2]"`` -> ``[1, 1, 2]``."""
    return [int(m.group(1)) for m in _CITATION.finditer(text)]


def unique_citations(citations: Iterable[int]) -> list[int]:
    return sorted(set(citations))


def classify_confidence(valid_citation_count: int) -> Confidence:
    if valid_citation_count >= 2:
        return Confidence.HIGH
    if valid_citation_count == 1:
        return Confidence.MEDIUM
    return Confidence.LOW


def process_answer(
    text: str,
    parent_count: int,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> GeneratedAnswer:
    """Structure a raw model answer.

    Markers outside ``1..parent_count`` are dropped from
    ``unique_citations`` but stay in ``citations``.
    """
    citations = parse_citations(text)
    distinct = unique_citations(citations)
    valid = [n for n in distinct if 1 <= n <= parent_count]
    confidence = classify_confidence(len(valid))

    invalid = len(distinct) - len(valid)
    if invalid:
        metrics_hook.increment(names.CITATIONS_INVALID_TOTAL, invalid)
        logger.debug(
            "Ignoring %d citation(s) outside 1..%d: %s",
            invalid,
            parent_count,
            [n for n in distinct if n not in valid],
        )
    metrics_hook.increment(names.ANSWERS_TOTAL, labels={"confidence": confidence.value})

    return GeneratedAnswer(
        text=text.strip(),
        citations=citations,
        unique_citations=valid,
        confidence=confidence,
    )
