"""CLI command for the interactive commit workflow."""

from typing import Optional

import typer

from arc_commit import config
from arc_commit.cli.utils import report_workflow_error
from arc_commit.git import GitGateway
from arc_commit.global_config import GlobalConfigError
from arc_commit.llm import get_provider
from arc_commit.models import RunOptions
from arc_commit.workflow import ApprovalWorkflow, WorkflowError, edit_in_editor

YES_OPTION = typer.Option(
    False,
    "--yes",
    "-y",
    help="Skip confirmation prompt and commit the first generated message",
)
DRY_RUN_OPTION = typer.Option(
    False,
    "--dry-run",
    help="Generate and display the message but don't commit",
)
MODEL_OPTION = typer.Option(
    None,
    "--model",
    "-m",
    help=f"Model to use (default: {config.DEFAULT_MODELS[config.DEFAULT_PROVIDER]})",
)


def run_commit(yes: bool, dry_run: bool, model: Optional[str]) -> None:
    """Load configuration and run one commit session.

    Raises:
        typer.Exit: With code 1 on any failure.
    """
    try:
        config.load_config()
    except GlobalConfigError as e:
        typer.echo("Error: failed to load AI config", err=True)
        typer.echo(f"Cause: {e}", err=True)
        raise typer.Exit(1)

    options = RunOptions(auto_approve=yes, dry_run=dry_run, model_override=model)
    workflow = ApprovalWorkflow(
        gateway=GitGateway(),
        generator=get_provider(),
        options=options,
        default_model=config.get_default_model(),
        editor=edit_in_editor,
    )

    try:
        workflow.run()
    except WorkflowError as e:
        report_workflow_error(e)
        raise typer.Exit(1)


def commit_command(
    yes: bool = YES_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    model: Optional[str] = MODEL_OPTION,
) -> None:
    """Create a commit with an AI-generated message.

    Interactive workflow:
      1. Checks for staged changes
      2. Generates a commit message with AI
      3. Presents it for approval, editing or regeneration
      4. Creates the commit
    """
    run_commit(yes, dry_run, model)
