"""Anthropic Claude provider implementation."""

from typing import Optional

from anthropic import Anthropic

from arc_commit import config
from arc_commit.config import API_KEY_ENV_VARS, LLMProvider
from arc_commit.llm.base import BaseLLMProvider, LLMResult
from arc_commit.llm.exceptions import LLMError


class AnthropicProvider(BaseLLMProvider):
    """Anthropic Claude LLM provider."""

    def __init__(self, model: str | None = None):
        """Initialize the Anthropic provider.

        Args:
            model: The model to use. Defaults to the configured Anthropic model.
        """
        self.model = model or config.get_default_model(LLMProvider.ANTHROPIC)
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.ANTHROPIC]

    def get_api_key(self) -> str:
        """Get the Anthropic API key.

        Raises:
            MissingAPIKeyError: If ANTHROPIC_API_KEY is not found.
        """
        return self._get_api_key_with_fallback(self.api_key_env_var, "Anthropic")

    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        model: Optional[str] = None,
    ) -> LLMResult:
        """Generate text using Anthropic Claude."""
        api_key = self.get_api_key()
        model = model or self.model

        try:
            client = Anthropic(api_key=api_key)
            message = client.messages.create(
                model=model,
                max_tokens=config.MAX_TOKENS,
                temperature=config.TEMPERATURE,
                system=system_prompt,
                messages=[{"role": "user", "content": user_prompt}],
            )

            raw_response = "".join(
                block.text for block in message.content if getattr(block, "type", None) == "text"
            )
            input_tokens = message.usage.input_tokens
            output_tokens = message.usage.output_tokens

        except Exception as e:
            raise LLMError(f"Anthropic API call failed: {e}") from e

        return LLMResult(
            text=self._require_text(raw_response, "Anthropic"),
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
