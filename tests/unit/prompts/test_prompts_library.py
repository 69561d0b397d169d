from pathlib import Path

import pytest

from documind.prompts.prompt import Prompt
from documind.prompts.prompts_library import PromptsLibrary


@pytest.fixture
def prompts_dir(tmp_path: Path) -> Path:
    """Create a temp directory with sample YAML prompt files."""
    (tmp_path / "answer.yaml").write_text(
        """name: answer
version: "1.0"
description: Answer with context
inputs:
  question: The question
  context: Numbered documents
template: "{context}\\n\\nQ: {question}"
"""
    )
    (tmp_path / "answer_v2.yaml").write_text(
        """name: answer
version: "2.0"
description: Answer without context
inputs:
  question: The question
template: "Q: {question}"
"""
    )
    (tmp_path / "notes.txt").write_text("not a prompt")
    return tmp_path


class TestPromptsLibrary:
    def test_loads_yaml_prompts_only(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(prompts_dir)

        assert library.list() == [("answer", "1.0"), ("answer", "2.0")]

    def test_get_prompt_by_name_and_version(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(prompts_dir).get("answer", "2.0")

        assert isinstance(prompt, Prompt)
        assert prompt.inputs == {"question": "The question"}
        assert prompt.template == "Q: {question}"

    def test_get_raises_keyerror_for_unknown_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(prompts_dir)

        with pytest.raises(KeyError, match="Prompt 'answer' version '9.9' not found"):
            library.get("answer", "9.9")

    def test_default_library_ships_rag_prompts(self) -> None:
        library = PromptsLibrary()

        assert ("rag_answer", "1.0") in library.list()
        assert ("rag_no_context", "1.0") in library.list()

    def test_empty_directory_loads_no_prompts(self, tmp_path: Path) -> None:
        assert PromptsLibrary(tmp_path).list() == []

    def test_contains_checks_name_and_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(prompts_dir)

        assert ("answer", "1.0") in library
        assert ("answer", "3.0") not in library

    def test_duplicate_version_rejected(self, prompts_dir: Path) -> None:
        (prompts_dir / "answer_copy.yaml").write_text(
            (prompts_dir / "answer.yaml").read_text()
        )

        with pytest.raises(ValueError, match="Duplicate prompt 'answer' version '1.0'"):
            PromptsLibrary(prompts_dir)

    def test_file_without_mapping_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.yaml").write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="does not contain a mapping"):
            PromptsLibrary(tmp_path)


class TestPromptRender:
    def test_fills_placeholders(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(prompts_dir).get("answer", "1.0")

        assert prompt.render(question="Why?", context="[1] doc") == "[1] doc\n\nQ: Why?"

    def test_missing_input_raises(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(prompts_dir).get("answer", "1.0")

        with pytest.raises(ValueError, match="missing inputs: context"):
            prompt.render(question="Why?")

    def test_unknown_input_raises(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(prompts_dir).get("answer", "2.0")

        with pytest.raises(ValueError, match="unknown inputs: extra"):
            prompt.render(question="Why?", extra="x")

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValueError):
            Prompt(
                name="p",
                version="1",
                description="d",
                inputs={},
                template="t",
                author="me",  # type: ignore[call-arg]
            )
