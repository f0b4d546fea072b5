"""Configuration for arc-commit LLM providers.

Settings are loaded from ~/.arc-commit/config.yaml.
Use 'arc-commit config' commands to modify them.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator


class LLMProvider(Enum):
    """Supported LLM providers."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"


# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# These are used only if ~/.arc-commit/config.yaml doesn't exist

DEFAULT_PROVIDER = LLMProvider.ANTHROPIC
DEFAULT_MAX_TOKENS = 1024
DEFAULT_TEMPERATURE = 0.3

# Model used when neither --model nor the config file names one
DEFAULT_MODELS = {
    LLMProvider.ANTHROPIC: "claude-haiku-4-5-20251001",
    LLMProvider.OPENAI: "gpt-4.1-mini",
}


# ============================================================
# ACTIVE CONFIGURATION (loaded from global config)
# ============================================================

# Initially set to defaults - will be overridden by load_config()
ACTIVE_PROVIDER = DEFAULT_PROVIDER
ACTIVE_MODEL: Optional[str] = None
MAX_TOKENS = DEFAULT_MAX_TOKENS
TEMPERATURE = DEFAULT_TEMPERATURE


class AISettings(BaseModel):
    """Validated contents of the global config file."""

    provider: LLMProvider = DEFAULT_PROVIDER
    model: Optional[str] = None
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE

    @field_validator("model")
    @classmethod
    def model_must_not_be_blank(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty model string as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("max_tokens")
    @classmethod
    def max_tokens_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_tokens must be positive")
        return v

    @field_validator("temperature")
    @classmethod
    def temperature_in_range(cls, v: float) -> float:
        if not 0.0 <= v <= 2.0:
            raise ValueError("temperature must be between 0 and 2")
        return v


def load_config() -> AISettings:
    """Load configuration from the global config file.

    This should be called by the CLI before using the LLM.

    Returns:
        The validated settings that were applied.

    Raises:
        GlobalConfigError: If the file cannot be read or holds invalid values.
    """
    global ACTIVE_PROVIDER, ACTIVE_MODEL, MAX_TOKENS, TEMPERATURE

    # Import here to avoid circular dependency
    from arc_commit import global_config

    raw = global_config.load_global_config()
    known = {key: raw[key] for key in ("provider", "model", "max_tokens", "temperature") if raw.get(key) is not None}

    try:
        settings = AISettings(**known)
    except ValidationError as e:
        raise global_config.GlobalConfigError(
            f"Invalid settings in {global_config.get_config_file_path()}: {e}"
        ) from e

    ACTIVE_PROVIDER = settings.provider
    ACTIVE_MODEL = settings.model
    MAX_TOKENS = settings.max_tokens
    TEMPERATURE = settings.temperature

    return settings


def get_default_model(provider: LLMProvider | None = None) -> str:
    """Get the model to use when no --model override is given.

    Args:
        provider: The LLM provider. Defaults to ACTIVE_PROVIDER.

    Returns:
        The configured model, or the provider's built-in default.
    """
    provider = provider or ACTIVE_PROVIDER
    if ACTIVE_MODEL and provider == ACTIVE_PROVIDER:
        return ACTIVE_MODEL
    return DEFAULT_MODELS[provider]


# ============================================================
# API KEY ENVIRONMENT VARIABLES
# ============================================================

API_KEY_ENV_VARS = {
    LLMProvider.ANTHROPIC: "ANTHROPIC_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
}
