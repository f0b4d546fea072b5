"""Git command runner.

Contains:
- run_git: Run a git command and return the completed process
- _decode: Decode git output bytes
"""

import subprocess
from typing import Optional

from arc_commit.git.exceptions import GitError


def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def run_git(
    args: list[str],
    input_text: Optional[str] = None,
    ok_codes: tuple[int, ...] = (0,),
    capture_stderr: bool = True,
) -> subprocess.CompletedProcess:
    """Run a git command.

    Output is captured as bytes so stdin and stdout pass through without
    newline translation. With capture_stderr=False, git's stderr goes
    straight to the terminal and is left out of any GitError.

    Args:
        args: List of arguments to pass to git.
        input_text: Text written to git's stdin, encoded as UTF-8.
        ok_codes: Exit codes that count as success.
        capture_stderr: Whether to capture stderr instead of inheriting it.

    Returns:
        The completed process (stdout/stderr as bytes).

    Raises:
        GitError: If git is missing or exits with a code outside ok_codes.
    """
    stdin_bytes = input_text.encode("utf-8") if input_text is not None else None

    try:
        result = subprocess.run(
            ["git"] + args,
            input=stdin_bytes,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE if capture_stderr else None,
            check=False,
        )
    except FileNotFoundError as e:
        raise GitError("Git is not installed or not in PATH.") from e

    if result.returncode not in ok_codes:
        stderr = _decode(result.stderr).strip()
        raise GitError(
            f"Git command failed (exit {result.returncode}): git {' '.join(args)}\n{stderr}".rstrip()
        )

    return result
