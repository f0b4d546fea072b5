"""Shared utility functions for CLI commands."""

import typer

from arc_commit.workflow.exceptions import WorkflowError


def describe_causes(error: BaseException) -> list[str]:
    """Collect the messages of an exception's __cause__ chain, outermost first."""
    causes = []
    cause = error.__cause__
    while cause is not None:
        text = str(cause).strip()
        if text:
            causes.append(text)
        cause = cause.__cause__
    return causes


def report_workflow_error(error: WorkflowError) -> None:
    """Print a failed session's phase, causes and hint to stderr."""
    typer.echo(f"Error: {error.message}", err=True)
    for cause in describe_causes(error):
        typer.echo(f"Cause: {cause}", err=True)
    if error.hint:
        typer.echo(f"Hint: {error.hint}", err=True)


def mask_api_key(api_key: str) -> str:
    if len(api_key) > 12:
        return api_key[:8] + "..." + api_key[-4:]
    return "***"
