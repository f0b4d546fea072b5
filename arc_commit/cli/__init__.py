"""CLI entry point for arc-commit.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from arc_commit.cli.commit import commit_command
from arc_commit.cli.config import config_app
from arc_commit.cli.main import main_command

# Main application
app = typer.Typer(
    name="arc-commit",
    help="Git commit with AI-generated messages",
    add_completion=False,
)

app.add_typer(config_app, name="config")
app.command("commit")(commit_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "commit_command",
    "main_command",
]
