"""Workflow exception classes.

Every terminal failure of a commit session is one of these. The message
names the phase that failed; the underlying error is chained as __cause__.

- WorkflowError: Base class, carries an optional hint
- PreconditionError: Nothing staged, or an empty diff
- ExecutionError: git failed unexpectedly
- GenerationError: The LLM call failed
- EditorError: The editor could not be run or its file could not be used
- InputError: Reading from the terminal failed
"""

from typing import Optional

STAGE_HINT = "Stage changes first: git add <files>"


class WorkflowError(Exception):
    """Base exception for a failed commit session."""

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint


class PreconditionError(WorkflowError):
    """Raised when there is nothing to commit."""

    def __init__(self, message: str, hint: Optional[str] = STAGE_HINT):
        super().__init__(message, hint)


class ExecutionError(WorkflowError):
    pass


class GenerationError(WorkflowError):
    pass


class EditorError(WorkflowError):
    pass


class InputError(WorkflowError):
    pass
