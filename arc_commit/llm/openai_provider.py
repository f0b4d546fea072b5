"""OpenAI GPT provider implementation."""

from typing import Optional

from openai import OpenAI

from arc_commit import config
from arc_commit.config import API_KEY_ENV_VARS, LLMProvider
from arc_commit.llm.base import BaseLLMProvider, LLMResult
from arc_commit.llm.exceptions import LLMError


class OpenAIProvider(BaseLLMProvider):
    """OpenAI LLM provider."""

    def __init__(self, model: str | None = None):
        self.model = model or config.get_default_model(LLMProvider.OPENAI)
        self.api_key_env_var = API_KEY_ENV_VARS[LLMProvider.OPENAI]

    def get_api_key(self) -> str:
        """Get the OpenAI API key.

        Raises:
            MissingAPIKeyError: If OPENAI_API_KEY is not found.
        """
        return self._get_api_key_with_fallback(self.api_key_env_var, "OpenAI")

    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        model: Optional[str] = None,
    ) -> LLMResult:
        """Generate text using the OpenAI chat completions API."""
        api_key = self.get_api_key()
        model = model or self.model

        try:
            client = OpenAI(api_key=api_key)
            response = client.chat.completions.create(
                model=model,
                max_tokens=config.MAX_TOKENS,
                temperature=config.TEMPERATURE,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )

            raw_response = response.choices[0].message.content
            input_tokens = response.usage.prompt_tokens if response.usage else 0
            output_tokens = response.usage.completion_tokens if response.usage else 0

        except Exception as e:
            raise LLMError(f"OpenAI API call failed: {e}") from e

        return LLMResult(
            text=self._require_text(raw_response, "OpenAI"),
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
