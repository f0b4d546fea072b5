"""CLI commands for global configuration management."""

from typing import Optional

import typer

from arc_commit import global_config
from arc_commit.cli.utils import mask_api_key
from arc_commit.config import API_KEY_ENV_VARS, DEFAULT_MODELS, LLMProvider, load_config

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global arc-commit configuration in ~/.arc-commit/",
    add_completion=False,
)


def _parse_provider(name: str) -> LLMProvider:
    try:
        return LLMProvider(name.lower())
    except ValueError:
        valid = ", ".join(p.value for p in LLMProvider)
        typer.echo(f"Invalid provider: {name}", err=True)
        typer.echo(f"Valid providers: {valid}", err=True)
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        settings = load_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    source = global_config.get_config_file_path()
    if not global_config.is_configured():
        typer.echo(f"No config file at {source}; using defaults.")
    else:
        typer.echo(f"Current arc-commit configuration ({source}):")
    typer.echo()
    typer.echo(f"  Provider: {settings.provider.value}")
    typer.echo(f"  Model: {settings.model or DEFAULT_MODELS[settings.provider] + ' (default)'}")
    typer.echo(f"  Max Tokens: {settings.max_tokens}")
    typer.echo(f"  Temperature: {settings.temperature}")
    typer.echo()

    env_var = API_KEY_ENV_VARS[settings.provider]
    api_key = global_config.get_credential(env_var)
    if api_key:
        typer.echo(f"  API Key ({env_var}): {mask_api_key(api_key)}")
    else:
        typer.echo(f"  API Key ({env_var}): not set")


@config_app.command("set-key")
def config_set_key(
    provider: str = typer.Argument(..., help="Provider name (anthropic, openai)"),
) -> None:
    """Store an API key in ~/.arc-commit/credentials."""
    llm_provider = _parse_provider(provider)
    env_var = API_KEY_ENV_VARS[llm_provider]

    api_key = typer.prompt(f"Enter {env_var}", hide_input=True).strip()
    if not api_key:
        typer.echo("API key cannot be empty.", err=True)
        raise typer.Exit(1)

    try:
        global_config.save_credential(env_var, api_key)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Saved {env_var} to {global_config.get_credentials_file_path()}")


@config_app.command("set-provider")
def config_set_provider(
    provider: str = typer.Argument(..., help="Provider name (anthropic, openai)"),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model to use with this provider (default: provider's default model)",
    ),
) -> None:
    """Set the active LLM provider and model."""
    llm_provider = _parse_provider(provider)

    try:
        global_config.set_provider_and_model(llm_provider, model)
    except global_config.GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Provider set to {llm_provider.value}")
    typer.echo(f"Model set to {model or DEFAULT_MODELS[llm_provider]}")
