# src/documind/llms/anthropic.py

import logging
from collections.abc import AsyncIterator
from time import monotonic
from typing import Any, Literal

from anthropic import NOT_GIVEN, APIError, AsyncAnthropic
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from documind.errors import UnexpectedResponseError
from documind.observability import names
from documind.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient, LLMResponse, Message, Role, Usage
from .config import DEFAULT_MAX_TOKENS, DEFAULT_MODEL

logger = logging.getLogger(__name__)


class AnthropicLLMClient(LLMClient):
    """Anthropic LLM client.

    Stateless. Transport-only retries. No behavior.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        timeout: float = 30.0,
        max_retries: int = 3,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = 0.0,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ):
        self._client = AsyncAnthropic(api_key=api_key, timeout=timeout)
        self._model = model
        self._max_retries = max_retries
        self._max_tokens = max_tokens
        self._temperature = temperature
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized AnthropicLLMClient with model=%s, timeout=%s",
            model,
            timeout,
        )

    async def complete(
        self,
        *,
        messages: list[Message],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> LLMResponse:
        start = monotonic()
        system, non_system = self._extract_system(messages)

        logger.debug(
            "Calling Anthropic: model=%s, messages=%d", self._model, len(messages)
        )
        raw = await self._call_api(
            system=system,
            messages=self._convert_messages(non_system),
            temperature=self._temperature if temperature is None else temperature,
            max_tokens=max_tokens or self._max_tokens,
        )

        elapsed_ms = 1000 * (monotonic() - start)

        # Normalize immediately - provider objects never escape
        response = self._normalize_response(raw, elapsed_ms)

        self.metrics_hook.record_latency(names.LLM_COMPLETION_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.LLM_REQUESTS_TOTAL, labels={"provider": "anthropic"}
        )
        self.metrics_hook.increment(names.LLM_TOKENS_PROMPT, response.usage.prompt_tokens)
        self.metrics_hook.increment(
            names.LLM_TOKENS_COMPLETION, response.usage.completion_tokens
        )

        logger.info(
            "Anthropic completion: finish=%s, tokens=%d, latency=%.0fms",
            response.finish_reason,
            response.usage.total_tokens,
            elapsed_ms,
        )
        return response

    async def stream(
        self,
        *,
        messages: list[Message],
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> AsyncIterator[str]:
        """Yield text deltas as the model produces them.

        Retries cover opening the stream only; once text has been yielded a
        failure propagates to the caller.
        """
        start = monotonic()
        system, non_system = self._extract_system(messages)

        events = await self._call_api(
            system=system,
            messages=self._convert_messages(non_system),
            temperature=self._temperature if temperature is None else temperature,
            max_tokens=max_tokens or self._max_tokens,
            stream=True,
        )

        async for event in events:
            if event.type == "content_block_delta" and event.delta.type == "text_delta":
                yield event.delta.text

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.LLM_COMPLETION_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.LLM_REQUESTS_TOTAL, labels={"provider": "anthropic"}
        )
        logger.info("Anthropic stream finished in %.0fms", elapsed_ms)

    async def _call_api(
        self,
        *,
        system: str | None,
        messages: list[dict[str, Any]],
        temperature: float,
        max_tokens: int,
        stream: bool = False,
    ) -> Any:
        """Call Anthropic API with transport-only retries."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=10),
            retry=retry_if_exception_type(APIError),  # Transport only
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._client.messages.create(
                    model=self._model,
                    messages=messages,  # type: ignore[arg-type]
                    temperature=temperature,
                    max_tokens=max_tokens,
                    system=system if system else NOT_GIVEN,
                    stream=stream,
                )

    def _extract_system(
        self, messages: list[Message]
    ) -> tuple[str | None, list[Message]]:
        """Anthropic takes the system prompt as a separate parameter."""
        system_content = None
        non_system = []

        for m in messages:
            if m.role == Role.SYSTEM:
                system_content = m.content
            else:
                non_system.append(m)

        return system_content, non_system

    def _convert_messages(self, messages: list[Message]) -> list[dict]:
        return [{"role": m.role.value, "content": m.content} for m in messages]

    def _normalize_response(self, raw: Any, latency_ms: float) -> LLMResponse:
        """This is the boundary. Raw provider objects stop here."""
        texts = [block.text for block in raw.content if block.type == "text"]
        if not texts:
            raise UnexpectedResponseError("Unexpected response type from LLM")

        finish_reason: Literal["stop", "length", "error"]
        if raw.stop_reason in ("end_turn", "stop_sequence"):
            finish_reason = "stop"
        elif raw.stop_reason == "max_tokens":
            finish_reason = "length"
        else:
            finish_reason = "error"

        return LLMResponse(
            content="".join(texts),
            finish_reason=finish_reason,
            usage=Usage(
                prompt_tokens=raw.usage.input_tokens,
                completion_tokens=raw.usage.output_tokens,
                total_tokens=raw.usage.input_tokens + raw.usage.output_tokens,
            ),
            latency_ms=latency_ms,
        )
