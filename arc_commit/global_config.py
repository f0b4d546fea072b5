"""User-level configuration stored in ~/.arc-commit/.

- config.yaml: provider, model and generation limits
- credentials: API keys for LLM providers
"""

import os
import stat
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from arc_commit.config import LLMProvider


class GlobalConfigError(Exception):
    """Raised when the global configuration cannot be read or written."""

    pass


_CONFIG_DIR = Path.home() / ".arc-commit"

_CREDENTIALS_HEADER = (
    "# arc-commit API credentials\n"
    "# Format: PROVIDER_API_KEY=your_key_here\n\n"
)


def get_global_config_dir() -> Path:
    """Get the global configuration directory (~/.arc-commit/)."""
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Create the global configuration directory if needed and return it."""
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    return get_global_config_dir() / "config.yaml"


def get_credentials_file_path() -> Path:
    return get_global_config_dir() / "credentials"


def is_configured() -> bool:
    """Check whether a config.yaml has been written."""
    return get_config_file_path().exists()


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if the file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but cannot be parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}") from e

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Config file {config_file} must contain a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Write the configuration dictionary to config.yaml."""
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w", encoding="utf-8") as f:
            yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}") from e


def set_provider_and_model(provider: LLMProvider, model: Optional[str] = None) -> None:
    """Persist the active provider and, optionally, its model.

    Passing no model clears any previously stored one so the provider's
    default is used.
    """
    config = load_global_config()
    config["provider"] = provider.value
    if model:
        config["model"] = model
    else:
        config.pop("model", None)
    save_global_config(config)


def _parse_credentials(text: str) -> Dict[str, str]:
    credentials = {}
    for line in text.splitlines():
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        credentials[key.strip()] = value.strip()
    return credentials


def load_credentials() -> Dict[str, str]:
    """Load API keys from the credentials file.

    Returns:
        Mapping of environment variable names to API keys.
    """
    credentials_file = get_credentials_file_path()

    if not credentials_file.exists():
        return {}

    try:
        return _parse_credentials(credentials_file.read_text(encoding="utf-8"))
    except OSError as e:
        raise GlobalConfigError(f"Failed to load credentials from {credentials_file}: {e}") from e


def save_credential(provider_key: str, api_key: str) -> None:
    """Save or update an API key in the credentials file.

    Args:
        provider_key: Environment variable name (e.g., "ANTHROPIC_API_KEY").
        api_key: The API key value.
    """
    ensure_global_config_dir()
    credentials_file = get_credentials_file_path()

    credentials = load_credentials()
    credentials[provider_key] = api_key

    body = "".join(f"{key}={value}\n" for key, value in credentials.items())
    try:
        credentials_file.write_text(_CREDENTIALS_HEADER + body, encoding="utf-8")
        # Owner read/write only
        os.chmod(credentials_file, stat.S_IRUSR | stat.S_IWUSR)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save credential: {e}") from e


def get_credential(provider_key: str) -> Optional[str]:
    """Get an API key from the credentials file, or None if absent."""
    return load_credentials().get(provider_key)
