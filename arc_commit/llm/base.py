"""Base classes and shared utilities for LLM providers."""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from arc_commit.llm.exceptions import LLMError, MissingAPIKeyError


@dataclass
class LLMResult:
    """Result from an LLM generation call, including token usage."""

    text: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0


class BaseLLMProvider(ABC):
    """Abstract base class for LLM providers."""

    model: str

    @abstractmethod
    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        model: Optional[str] = None,
    ) -> LLMResult:
        """Generate text from a system and user prompt.

        Args:
            system_prompt: Instructions for the model.
            user_prompt: The request itself.
            model: Model to use for this call. Defaults to the provider's model.

        Returns:
            An LLMResult containing the generated text and metadata.

        Raises:
            MissingAPIKeyError: If the API key is not set.
            LLMError: For any other failure, including an empty response.
        """
        pass

    @abstractmethod
    def get_api_key(self) -> str:
        """Get the API key from the environment or the credentials file."""
        pass

    def _get_api_key_with_fallback(self, env_var_name: str, provider_name: str) -> str:
        """Look up an API key in the environment, then in the credentials file.

        Args:
            env_var_name: Environment variable name to check.
            provider_name: Human-readable provider name for error messages.

        Returns:
            The API key string.

        Raises:
            MissingAPIKeyError: If the API key is not found.
            LLMError: If the credentials file cannot be read.
        """
        api_key = os.getenv(env_var_name)
        if api_key:
            return api_key

        from arc_commit.global_config import GlobalConfigError, get_credential

        try:
            api_key = get_credential(env_var_name)
        except GlobalConfigError as e:
            raise LLMError(f"Could not read {provider_name} API key: {e}") from e
        if api_key:
            return api_key

        raise MissingAPIKeyError(
            f"{provider_name} API key not found. Set it using:\n"
            f"  1. Environment variable: export {env_var_name}=your_key_here\n"
            f"  2. Run: arc-commit config set-key {provider_name.lower()}\n"
            f"  3. Manually add to ~/.arc-commit/credentials"
        )

    @staticmethod
    def _require_text(raw_response: Optional[str], provider_name: str) -> str:
        if not raw_response or not raw_response.strip():
            raise LLMError(f"{provider_name} returned an empty response.")
        return raw_response
