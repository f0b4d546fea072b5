"""LLM provider module for arc-commit.

Provides a unified text-generation interface over the supported providers.
The active provider comes from arc_commit.config.
"""

from dotenv import load_dotenv

from arc_commit import config
from arc_commit.config import LLMProvider
from arc_commit.llm.base import BaseLLMProvider, LLMResult
from arc_commit.llm.exceptions import LLMError, MissingAPIKeyError

# Load environment variables from .env file
load_dotenv()


def get_provider(
    provider: LLMProvider | None = None,
    model: str | None = None,
) -> BaseLLMProvider:
    """Get an LLM provider instance.

    Args:
        provider: The provider to use. Defaults to the active provider.
        model: The model to use. Defaults to the configured model.

    Returns:
        An instance of the appropriate LLM provider.

    Raises:
        ValueError: If the provider is not supported.
    """
    provider = provider or config.ACTIVE_PROVIDER

    if provider == LLMProvider.ANTHROPIC:
        from arc_commit.llm.anthropic_provider import AnthropicProvider

        return AnthropicProvider(model=model)

    elif provider == LLMProvider.OPENAI:
        from arc_commit.llm.openai_provider import OpenAIProvider

        return OpenAIProvider(model=model)

    else:
        raise ValueError(f"Unsupported provider: {provider}")


__all__ = [
    "BaseLLMProvider",
    "LLMError",
    "MissingAPIKeyError",
    "LLMResult",
    "get_provider",
]
