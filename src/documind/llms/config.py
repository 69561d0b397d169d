# src/documind/llms/config.py

from dataclasses import dataclass
from typing import Literal

DEFAULT_MODEL = "claude-3-haiku-20240307"
DEFAULT_MAX_TOKENS = 1000


@dataclass(frozen=True)
class LLMConfig:
    """Configuration for LLM clients.

    Immutable. Explicit. No magic defaults from environment.
    """

    provider: Literal["anthropic"] = "anthropic"
    model: str = DEFAULT_MODEL
    api_key: str | None = None  # Falls back to ANTHROPIC_API_KEY
    timeout: float = 30.0
    max_retries: int = 3
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = 0.0
