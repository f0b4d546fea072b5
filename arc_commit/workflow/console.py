"""Terminal input/output for the approval workflow."""

import typer

from arc_commit.workflow.exceptions import InputError


class TerminalConsole:
    """Reads answers with typer.prompt and writes with typer.echo.

    Progress notes go to stderr so stdout carries only the message itself.
    """

    def show(self, text: str = "") -> None:
        typer.echo(text)

    def note(self, text: str) -> None:
        typer.echo(text, err=True)

    def ask(self, question: str) -> str:
        """Read one line from the terminal.

        Raises:
            InputError: If input is closed or interrupted.
        """
        try:
            return typer.prompt(question, default="", show_default=False, prompt_suffix="")
        except typer.Abort as e:
            raise InputError("failed to read input") from e
