# src/documind/llms/factory.py

import os

from documind.errors import MissingCredentialsError
from documind.observability.base import MetricsHook, NoOpMetricsHook

from .base import LLMClient
from .config import LLMConfig

ANTHROPIC_API_KEY_ENV = "ANTHROPIC_API_KEY"


def create_llm_client(
    config: LLMConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> LLMClient:
    """Create an LLM client from config.

    Raises:
        MissingCredentialsError: If no API key is configured or exported.
        ValueError: If provider is unknown.
    """
    if config.provider == "anthropic":
        from .anthropic import AnthropicLLMClient

        api_key = config.api_key or os.environ.get(ANTHROPIC_API_KEY_ENV)
        if not api_key:
            raise MissingCredentialsError(
                f"{ANTHROPIC_API_KEY_ENV} not found. Set it in a .env file or export it:\n"
                f"  echo '{ANTHROPIC_API_KEY_ENV}=your_key_here' >> .env"
            )

        return AnthropicLLMClient(
            api_key=api_key,
            model=config.model,
            timeout=config.timeout,
            max_retries=config.max_retries,
            max_tokens=config.max_tokens,
            temperature=config.temperature,
            metrics_hook=metrics_hook,
        )

    raise ValueError(f"Unknown LLM provider: {config.provider}")
