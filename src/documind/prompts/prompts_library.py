import logging
from pathlib import Path

import yaml

from .prompt import Prompt

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


class PromptsLibrary:
    """Versioned prompt templates read from ``*.yaml`` files.

    Defaults to the templates shipped with documind. A directory may hold
    several versions of the same prompt; each ``(name, version)`` pair
    must be unique.
    """

    def __init__(self, directory: str | Path = TEMPLATES_DIR) -> None:
        self._prompts: dict[tuple[str, str], Prompt] = {}
        self._directory = Path(directory)
        self._load_all(self._directory)
        logger.debug("Loaded %d prompts from %s", len(self._prompts), self._directory)

    def __contains__(self, key: object) -> bool:
        return key in self._prompts

    def get(self, name: str, version: str) -> Prompt:
        try:
            return self._prompts[(name, version)]
        except KeyError:
            logger.error("Prompt not found: name=%s, version=%s", name, version)
            raise KeyError(f"Prompt '{name}' version '{version}' not found") from None

    def list(self) -> list[tuple[str, str]]:
        return sorted(self._prompts)

    def _load_all(self, directory: Path) -> None:
        for file_path in sorted(directory.glob("*.yaml")):
            prompt = self._load_prompt(file_path)
            key = (prompt.name, prompt.version)
            if key in self._prompts:
                raise ValueError(
                    f"Duplicate prompt '{prompt.name}' version '{prompt.version}' in {file_path}"
                )
            self._prompts[key] = prompt

    def _load_prompt(self, file_path: Path) -> Prompt:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Prompt file {file_path} does not contain a mapping")
        return Prompt(**data)
