# src/documind/llms/__init__.py

"""LLM client layer for documind.

A thin, stateless abstraction over the answer-generating model.

Example:
    >>> from documind.llms import create_llm_client, LLMConfig, Message, Role
    >>>
    >>> client = create_llm_client(LLMConfig(api_key="..."))
    >>> response = await client.complete(
    ...     messages=[Message(role=Role.USER, content="Hello!")]
    ... )
    >>> print(response.content)
"""

from .base import LLMClient, LLMResponse, Message, Role, Usage
from .config import DEFAULT_MODEL, LLMConfig
from .factory import create_llm_client

__all__ = [
    # Factory
    "create_llm_client",
    # Protocol
    "LLMClient",
    # Config
    "DEFAULT_MODEL",
    "LLMConfig",
    # Types
    "Message",
    "Role",
    "LLMResponse",
    "Usage",
]
