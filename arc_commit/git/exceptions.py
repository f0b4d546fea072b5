"""Git-related exception classes.

Contains:
- GitError: Raised when a git invocation fails unexpectedly
"""


class GitError(Exception):
    """Raised when git cannot be run or exits with an unexpected status."""

    pass
