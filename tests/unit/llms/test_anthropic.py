# tests/unit/llms/test_anthropic.py

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from anthropic import APIError

from documind.errors import UnexpectedResponseError
from documind.llms.anthropic import AnthropicLLMClient
from documind.llms.base import Message, Role


def text_block(text: str) -> MagicMock:
    block = MagicMock()
    block.type = "text"
    block.text = text
    return block


def make_response(*blocks: MagicMock, stop_reason: str = "end_turn") -> MagicMock:
    response = MagicMock()
    response.content = list(blocks)
    response.stop_reason = stop_reason
    response.usage.input_tokens = 10
    response.usage.output_tokens = 8
    return response


def delta_event(text: str) -> MagicMock:
    event = MagicMock()
    event.type = "content_block_delta"
    event.delta.type = "text_delta"
    event.delta.text = text
    return event


def other_event(event_type: str) -> MagicMock:
    event = MagicMock()
    event.type = event_type
    return event


async def event_stream(*events: MagicMock):  # type: ignore[no-untyped-def]
    for event in events:
        yield event


@pytest.fixture
def mock_client() -> MagicMock:
    with patch("documind.llms.anthropic.AsyncAnthropic") as mock_anthropic:
        client = AsyncMock()
        mock_anthropic.return_value = client
        yield client


class TestAnthropicLLMClient:
    @pytest.mark.asyncio
    async def test_complete_basic(self, mock_client: AsyncMock) -> None:
        """Test basic completion."""
        mock_client.messages.create.return_value = make_response(
            text_block("Pods have phases [1].")
        )

        client = AnthropicLLMClient(api_key="test-key")
        response = await client.complete(
            messages=[Message(role=Role.USER, content="What is a pod phase?")]
        )

        assert response.content == "Pods have phases [1]."
        assert response.finish_reason == "stop"
        assert response.usage.total_tokens == 18
        assert response.latency_ms >= 0

    @pytest.mark.asyncio
    async def test_defaults_sent_to_api(self, mock_client: AsyncMock) -> None:
        """Configured model, token limit and temperature reach the SDK call."""
        mock_client.messages.create.return_value = make_response(text_block("ok"))

        client = AnthropicLLMClient(
            api_key="test-key", model="claude-x", max_tokens=321, temperature=0.2
        )
        await client.complete(messages=[Message(role=Role.USER, content="Hi")])

        kwargs = mock_client.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-x"
        assert kwargs["max_tokens"] == 321
        assert kwargs["temperature"] == 0.2
        assert kwargs["messages"] == [{"role": "user", "content": "Hi"}]
        assert kwargs["stream"] is False

    @pytest.mark.asyncio
    async def test_per_call_overrides(self, mock_client: AsyncMock) -> None:
        mock_client.messages.create.return_value = make_response(text_block("ok"))

        client = AnthropicLLMClient(api_key="test-key")
        await client.complete(
            messages=[Message(role=Role.USER, content="Hi")],
            temperature=0.7,
            max_tokens=50,
        )

        kwargs = mock_client.messages.create.call_args.kwargs
        assert kwargs["temperature"] == 0.7
        assert kwargs["max_tokens"] == 50

    @pytest.mark.asyncio
    async def test_system_message_passed_separately(self, mock_client: AsyncMock) -> None:
        mock_client.messages.create.return_value = make_response(text_block("ok"))

        client = AnthropicLLMClient(api_key="test-key")
        await client.complete(
            messages=[
                Message(role=Role.SYSTEM, content="You are helpful."),
                Message(role=Role.USER, content="Hello"),
            ]
        )

        kwargs = mock_client.messages.create.call_args.kwargs
        assert kwargs["system"] == "You are helpful."
        assert kwargs["messages"] == [{"role": "user", "content": "Hello"}]

    @pytest.mark.asyncio
    async def test_max_tokens_finish_reason(self, mock_client: AsyncMock) -> None:
        mock_client.messages.create.return_value = make_response(
            text_block("Truncated..."), stop_reason="max_tokens"
        )

        client = AnthropicLLMClient(api_key="test-key")
        result = await client.complete(messages=[Message(role=Role.USER, content="test")])

        assert result.finish_reason == "length"

    @pytest.mark.asyncio
    async def test_response_without_text_raises(self, mock_client: AsyncMock) -> None:
        block = MagicMock()
        block.type = "tool_use"
        mock_client.messages.create.return_value = make_response(block)

        client = AnthropicLLMClient(api_key="test-key")
        with pytest.raises(UnexpectedResponseError):
            await client.complete(messages=[Message(role=Role.USER, content="test")])

    @pytest.mark.asyncio
    async def test_retries_transport_errors(self, mock_client: AsyncMock) -> None:
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        mock_client.messages.create.side_effect = [
            APIError("overloaded", request, body=None),
            make_response(text_block("second time lucky")),
        ]

        client = AnthropicLLMClient(api_key="test-key")
        result = await client.complete(messages=[Message(role=Role.USER, content="test")])

        assert result.content == "second time lucky"
        assert mock_client.messages.create.await_count == 2

    @pytest.mark.asyncio
    async def test_metrics_hook_called(self, mock_client: AsyncMock) -> None:
        mock_client.messages.create.return_value = make_response(text_block("ok"))
        metrics_hook = MagicMock()

        client = AnthropicLLMClient(api_key="test-key", metrics_hook=metrics_hook)
        await client.complete(messages=[Message(role=Role.USER, content="Hi")])

        metrics_hook.record_latency.assert_called_once()
        assert metrics_hook.record_latency.call_args[0][0] == "llm_completion_duration"


class TestAnthropicStreaming:
    @pytest.mark.asyncio
    async def test_yields_text_deltas_only(self, mock_client: AsyncMock) -> None:
        mock_client.messages.create.return_value = event_stream(
            other_event("message_start"),
            delta_event("Pods "),
            delta_event("have phases [1]."),
            other_event("message_stop"),
        )

        client = AnthropicLLMClient(api_key="test-key")
        pieces = [
            piece
            async for piece in client.stream(
                messages=[Message(role=Role.USER, content="What is a pod phase?")]
            )
        ]

        assert pieces == ["Pods ", "have phases [1]."]
        assert mock_client.messages.create.call_args.kwargs["stream"] is True
