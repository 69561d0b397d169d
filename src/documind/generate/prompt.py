from collections.abc import Sequence
from dataclasses import dataclass

from documind.chunking.models import Chunk
from documind.prompts.prompts_library import PromptsLibrary

ANSWER_PROMPT = ("rag_answer", "1.0")
NO_CONTEXT_PROMPT = ("rag_no_context", "1.0")
CONTEXT_SEPARATOR = "\n\n---\n\n"


@dataclass(frozen=True)
class CitationLegendEntry:
    number: int
    source: str
    section: str


class PromptBuilder:
    def __init__(self, library: PromptsLibrary | None = None) -> None:
        self._library = library or PromptsLibrary()

    def build(self, question: str, parents: Sequence[Chunk]) -> str:
        """Render the answer prompt with parents numbered ``[1]..[n]``.

        The numbers match the ones ``process_answer`` validates against.
        """
        if not parents:
            return self._library.get(*NO_CONTEXT_PROMPT).render(question=question)

        context = CONTEXT_SEPARATOR.join(
            f"[{i}] Source: {parent.source_file}\n{parent.content}"
            for i, parent in enumerate(parents, start=1)
        )
        return self._library.get(*ANSWER_PROMPT).render(
            question=question, context=context
        )


def build_citation_legend(parents: Sequence[Chunk]) -> list[CitationLegendEntry]:
    return [
        CitationLegendEntry(
            number=i,
            source=parent.source_file,
            section=" > ".join(parent.section_path),
        )
        for i, parent in enumerate(parents, start=1)
    ]
