"""Root callback: runs the commit workflow when no subcommand is given."""

from typing import Optional

import typer

from arc_commit import __version__
from arc_commit.cli.commit import DRY_RUN_OPTION, MODEL_OPTION, YES_OPTION, run_commit


def _show_version(value: bool) -> None:
    if value:
        typer.echo(f"arc-commit {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    yes: bool = YES_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    model: Optional[str] = MODEL_OPTION,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Git commit with AI-generated messages.

    Without a subcommand this runs the same guided workflow as 'commit'.
    """
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    run_commit(yes, dry_run, model)
