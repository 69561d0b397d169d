from pathlib import Path

import pytest

from documind.chunking.models import Chunk, ChunkKind
from documind.generate.prompt import PromptBuilder, build_citation_legend
from documind.prompts.prompts_library import PromptsLibrary


def parent(chunk_id: str, source: str, section: tuple[str, ...]) -> Chunk:
    return Chunk(
        id=chunk_id,
        content=f"## {chunk_id}\n\nContent of {chunk_id}.",
        source_file=source,
        section_path=section,
        kind=ChunkKind.PARENT,
    )


@pytest.fixture
def parents() -> list[Chunk]:
    return [
        parent("pods-p0", "docs/concepts/pods.md", ("concepts", "workloads")),
        parent("svc-p1", "docs/concepts/svc.md", ("concepts",)),
    ]


class TestPromptBuilder:
    def test_parents_are_numbered_from_one(self, parents: list[Chunk]) -> None:
        prompt = PromptBuilder().build("What is a pod?", parents)

        assert "[1] Source: docs/concepts/pods.md\n## pods-p0" in prompt
        assert "[2] Source: docs/concepts/svc.md\n## svc-p1" in prompt
        assert prompt.index("[1] Source") < prompt.index("[2] Source")

    def test_context_blocks_are_separated(self, parents: list[Chunk]) -> None:
        prompt = PromptBuilder().build("q", parents)

        assert "Content of pods-p0.\n\n---\n\n[2] Source" in prompt

    def test_question_and_citation_instructions_included(self, parents: list[Chunk]) -> None:
        prompt = PromptBuilder().build("What is a pod?", parents)

        assert "Question: What is a pod?" in prompt
        assert "Cite your sources using [1], [2]" in prompt

    def test_no_context_prompt(self) -> None:
        prompt = PromptBuilder().build("What is a pod?", [])

        assert "NO relevant documents" in prompt
        assert "Question: What is a pod?" in prompt
        assert "Source:" not in prompt

    def test_content_with_braces_is_kept_verbatim(self) -> None:
        chunk = Chunk(
            id="cfg-p0",
            content='## Config\n\nUse {"replicas": 3}.',
            source_file="docs/cfg.md",
            kind=ChunkKind.PARENT,
        )

        prompt = PromptBuilder().build("q", [chunk])

        assert 'Use {"replicas": 3}.' in prompt

    def test_uses_custom_library(self, tmp_path: Path) -> None:
        (tmp_path / "answer.yaml").write_text(
            """name: rag_answer
version: "1.0"
description: terse
inputs:
  question: q
  context: c
template: "{context} || {question}"
"""
        )
        (tmp_path / "none.yaml").write_text(
            """name: rag_no_context
version: "1.0"
description: terse
inputs:
  question: q
template: "nothing for {question}"
"""
        )
        builder = PromptBuilder(PromptsLibrary(tmp_path))

        assert builder.build("q?", []) == "nothing for q?"


class TestCitationLegend:
    def test_entries_match_prompt_numbers(self, parents: list[Chunk]) -> None:
        legend = build_citation_legend(parents)

        assert [(e.number, e.source, e.section) for e in legend] == [
            (1, "docs/concepts/pods.md", "concepts > workloads"),
            (2, "docs/concepts/svc.md", "concepts"),
        ]

    def test_empty(self) -> None:
        assert build_citation_legend([]) == []
