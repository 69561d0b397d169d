# src/documind/llms/base.py

from collections.abc import AsyncIterator
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol

from documind.observability.base import MetricsHook


class Role(str, Enum):
    """Message role in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    role: Role
    content: str


@dataclass(frozen=True)
class Usage:
    """Token usage for a completion."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


@dataclass(frozen=True)
class LLMResponse:
    """Normalized LLM response.

    Provider objects never leave the adapter; this is the only type
    callers see.
    """

    content: str
    finish_reason: Literal["stop", "length", "error"]
    usage: Usage
    latency_ms: float


class LLMClient(Protocol):
    """Protocol for LLM clients.

    - Stateless: every call receives the full message list
    - Transport only: retries only on network/rate-limit errors
    - No leakage: provider objects never escape the adapter
    """

    metrics_hook: MetricsHook

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        """Single completion.

        Raises:
            Provider-specific errors after retry exhaustion.
            UnexpectedResponseError: If the reply carries no text.
        """
        ...

    def stream(
        self,
        *,
        messages: list[Message],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> AsyncIterator[str]:
        """Yield the reply as incremental text fragments."""
        ...
