"""Interactive approval workflow for AI-generated commit messages.

This package provides:
- machine: ApprovalWorkflow, the state machine for one commit session
- states: WorkflowState, WorkflowOutcome, Decision, parse_decision
- editor: edit_in_editor, find_editor
- console: TerminalConsole
- exceptions: WorkflowError and its subclasses
"""

from arc_commit.workflow.exceptions import (
    EditorError,
    ExecutionError,
    GenerationError,
    InputError,
    PreconditionError,
    WorkflowError,
)
from arc_commit.workflow.states import (
    Decision,
    WorkflowOutcome,
    WorkflowState,
    parse_decision,
)
from arc_commit.workflow.console import TerminalConsole
from arc_commit.workflow.editor import edit_in_editor, find_editor
from arc_commit.workflow.machine import ApprovalWorkflow


__all__ = [
    "ApprovalWorkflow",
    "Decision",
    "WorkflowOutcome",
    "WorkflowState",
    "parse_decision",
    "TerminalConsole",
    "edit_in_editor",
    "find_editor",
    "WorkflowError",
    "PreconditionError",
    "ExecutionError",
    "GenerationError",
    "EditorError",
    "InputError",
]
