"""Staged-change operations.

Contains:
- has_staged_changes: Check whether the index differs from HEAD
- get_staged_diff: Get the raw staged diff
- create_commit: Record a commit from a message passed on stdin
"""

from arc_commit.git.runner import _decode, run_git

# `git diff --quiet` exit codes
NO_DIFFERENCES = 0
DIFFERENCES_PRESENT = 1


def has_staged_changes() -> bool:
    """Check for staged changes with `git diff --staged --quiet`.

    Returns:
        True if differences exist, False if the index matches HEAD.

    Raises:
        GitError: For any exit code other than 0 or 1.
    """
    result = run_git(
        ["diff", "--staged", "--quiet"],
        ok_codes=(NO_DIFFERENCES, DIFFERENCES_PRESENT),
    )
    return result.returncode == DIFFERENCES_PRESENT


def get_staged_diff() -> str:
    """Get the staged diff as git prints it.

    Bytes that are not valid UTF-8 (e.g. latin-1 source files) are
    replaced with U+FFFD; everything else is returned unchanged.

    Returns:
        The diff text, possibly empty.

    Raises:
        GitError: If the command fails.
    """
    result = run_git(["diff", "--staged"])
    return _decode(result.stdout)


def create_commit(message: str) -> str:
    """Create a commit from the staged changes.

    The message is fed to `git commit -F -` so no shell quoting is involved
    and newlines and non-ASCII text survive unchanged. git's stderr,
    including hook output, is shown on the terminal as it happens.

    Args:
        message: The full commit message.

    Returns:
        git's stdout (the commit summary).

    Raises:
        GitError: If the commit fails.
    """
    result = run_git(["commit", "-F", "-"], input_text=message, capture_stderr=False)
    return _decode(result.stdout)
