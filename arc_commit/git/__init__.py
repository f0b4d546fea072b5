"""Git access for arc-commit.

This package provides:
- exceptions: GitError
- runner: run_git
- staged: has_staged_changes, get_staged_diff, create_commit
- gateway: GitGateway
"""

from arc_commit.git.exceptions import GitError
from arc_commit.git.runner import run_git
from arc_commit.git.staged import (
    create_commit,
    get_staged_diff,
    has_staged_changes,
)
from arc_commit.git.gateway import GitGateway


__all__ = [
    "GitError",
    "run_git",
    "has_staged_changes",
    "get_staged_diff",
    "create_commit",
    "GitGateway",
]
