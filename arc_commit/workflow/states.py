"""States, outcomes and user decisions of the approval workflow."""

from enum import Enum


class WorkflowState(Enum):
    """States of the approval state machine."""

    CHECKING_STAGED = "checking_staged"
    FETCHING_DIFF = "fetching_diff"
    GENERATING = "generating"
    PRESENTING = "presenting"
    APPROVING = "approving"
    REGENERATING = "regenerating"
    EDITING = "editing"
    CANCELLING = "cancelling"
    # Terminal
    COMMITTED = "committed"
    CANCELLED = "cancelled"
    PREVIEWED = "previewed"


class WorkflowOutcome(Enum):
    """How a successful session ended."""

    COMMITTED = "committed"
    CANCELLED = "cancelled"
    PREVIEWED = "previewed"


TERMINAL_STATES = {
    WorkflowState.COMMITTED: WorkflowOutcome.COMMITTED,
    WorkflowState.CANCELLED: WorkflowOutcome.CANCELLED,
    WorkflowState.PREVIEWED: WorkflowOutcome.PREVIEWED,
}


class Decision(Enum):
    """A user's answer at the approval prompt."""

    APPROVE = "approve"
    REGENERATE = "regenerate"
    EDIT = "edit"
    CANCEL = "cancel"
    INVALID = "invalid"


_DECISIONS = {
    "y": Decision.APPROVE,
    "yes": Decision.APPROVE,
    "n": Decision.REGENERATE,
    "no": Decision.REGENERATE,
    "e": Decision.EDIT,
    "edit": Decision.EDIT,
    "c": Decision.CANCEL,
    "cancel": Decision.CANCEL,
}


def parse_decision(raw: str) -> Decision:
    """Parse one line of user input into a Decision.

    Matching is case-insensitive and ignores surrounding whitespace.
    Anything unrecognised, including an empty line, is INVALID.
    """
    return _DECISIONS.get(raw.strip().lower(), Decision.INVALID)
