"""Edit text in the user's external editor."""

import os
import shlex
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from arc_commit.workflow.exceptions import EditorError

DEFAULT_EDITOR = "vim"


def find_editor() -> list[str]:
    """Get the editor command from $EDITOR, falling back to vim.

    Returns:
        List of command parts to run the editor.

    Raises:
        EditorError: If $EDITOR cannot be split into a command.
    """
    editor = os.environ.get("EDITOR", "").strip()
    if not editor:
        return [DEFAULT_EDITOR]
    try:
        return shlex.split(editor)
    except ValueError as e:
        raise EditorError("invalid $EDITOR value") from e


@contextmanager
def _scratch_file(initial: str) -> Iterator[Path]:
    """Yield a temp file holding `initial`; the file is removed on exit."""
    try:
        fd, name = tempfile.mkstemp(prefix="arc-commit-", suffix=".txt")
    except OSError as e:
        raise EditorError("failed to create temp file") from e

    path = Path(name)
    try:
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(initial)
        except OSError as e:
            raise EditorError("failed to write temp file") from e
        yield path
    finally:
        path.unlink(missing_ok=True)


def edit_in_editor(initial: str) -> str:
    """Open `initial` in the user's editor and return the saved text.

    The editor inherits the terminal and is waited on. The temp file is
    deleted whether or not the editor succeeds.

    Raises:
        EditorError: If the editor cannot start, exits non-zero, or the
            temp file cannot be written or read back as UTF-8.
    """
    editor_cmd = find_editor()

    with _scratch_file(initial) as path:
        try:
            result = subprocess.run(editor_cmd + [str(path)], check=False)
        except OSError as e:
            raise EditorError(f"editor not found: {editor_cmd[0]}") from e

        if result.returncode != 0:
            raise EditorError(f"editor exited with code {result.returncode}")

        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise EditorError("failed to read edited file") from e
