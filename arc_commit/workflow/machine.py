"""The approval state machine driving one commit session.

Each state has a handler method that performs the state's work and returns
the next state. `run()` steps through handlers until a terminal state is
reached; failures are raised as WorkflowError subclasses.
"""

from typing import Callable, Optional, Protocol

from arc_commit.git.exceptions import GitError
from arc_commit.llm.base import LLMResult
from arc_commit.llm.exceptions import LLMError
from arc_commit.llm.prompts import build_commit_prompt
from arc_commit.models import RunOptions
from arc_commit.workflow.console import TerminalConsole
from arc_commit.workflow.editor import edit_in_editor
from arc_commit.workflow.exceptions import (
    EditorError,
    ExecutionError,
    GenerationError,
    PreconditionError,
)
from arc_commit.workflow.states import (
    TERMINAL_STATES,
    Decision,
    WorkflowOutcome,
    WorkflowState,
    parse_decision,
)

SEPARATOR = "=" * 70
APPROVAL_PROMPT = "\n[y]es, [n]o (regenerate), [e]dit, [c]ancel: "
FEEDBACK_PROMPT = "\nWhat would you like improved? (or press Enter for generic): "
INVALID_CHOICE = "\nInvalid choice. Please enter y/n/e/c."


class VersionControl(Protocol):
    def has_staged_changes(self) -> bool: ...

    def fetch_staged_diff(self) -> str: ...

    def commit(self, message: str) -> str: ...


class TextGenerator(Protocol):
    def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        model: Optional[str] = None,
    ) -> LLMResult: ...


class Console(Protocol):
    def show(self, text: str = "") -> None: ...

    def note(self, text: str) -> None: ...

    def ask(self, question: str) -> str: ...


_NEXT_STATE = {
    Decision.APPROVE: WorkflowState.APPROVING,
    Decision.REGENERATE: WorkflowState.REGENERATING,
    Decision.EDIT: WorkflowState.EDITING,
    Decision.CANCEL: WorkflowState.CANCELLING,
}


class ApprovalWorkflow:
    """Generate a commit message, get it approved, and commit it.

    Args:
        gateway: Access to staged changes and commit creation.
        generator: LLM used to produce candidate messages.
        options: Session flags.
        default_model: Model used when options carry no override.
        console: Terminal input/output. Defaults to TerminalConsole.
        editor: Callable taking the current message and returning the edited text.
    """

    def __init__(
        self,
        gateway: VersionControl,
        generator: TextGenerator,
        options: RunOptions,
        default_model: str,
        console: Optional[Console] = None,
        editor: Callable[[str], str] = edit_in_editor,
    ):
        self.gateway = gateway
        self.generator = generator
        self.options = options
        self.default_model = default_model
        self.console = console or TerminalConsole()
        self.editor = editor

        self.state = WorkflowState.CHECKING_STAGED
        self.history: list[WorkflowState] = []
        self.diff: Optional[str] = None
        self.message: Optional[str] = None
        self.feedback = ""
        self.rounds = 0
        self.committed = False

        self._handlers: dict[WorkflowState, Callable[[], WorkflowState]] = {
            WorkflowState.CHECKING_STAGED: self._check_staged,
            WorkflowState.FETCHING_DIFF: self._fetch_diff,
            WorkflowState.GENERATING: self._generate,
            WorkflowState.PRESENTING: self._present,
            WorkflowState.APPROVING: self._approve,
            WorkflowState.REGENERATING: self._regenerate,
            WorkflowState.EDITING: self._edit,
            WorkflowState.CANCELLING: self._cancel,
        }

    @property
    def model(self) -> str:
        """The model used for every generation in this session."""
        return self.options.model_override or self.default_model

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def step(self) -> WorkflowState:
        """Run the current state's handler and move to the state it returns."""
        if self.finished:
            raise RuntimeError(f"Workflow already finished in state {self.state.value}")
        self.history.append(self.state)
        self.state = self._handlers[self.state]()
        return self.state

    def run(self) -> WorkflowOutcome:
        """Run the session to completion.

        Returns:
            How the session ended.

        Raises:
            WorkflowError: On any terminal failure.
        """
        while not self.finished:
            self.step()
        return TERMINAL_STATES[self.state]

    # ------------------------------------------------------------------
    # State handlers
    # ------------------------------------------------------------------

    def _check_staged(self) -> WorkflowState:
        self.console.note("Checking for staged changes...")
        try:
            staged = self.gateway.has_staged_changes()
        except GitError as e:
            raise ExecutionError("failed to check staged changes") from e

        if not staged:
            raise PreconditionError("no staged changes found")
        return WorkflowState.FETCHING_DIFF

    def _fetch_diff(self) -> WorkflowState:
        # Git may report staged changes yet print an empty diff, so the
        # emptiness check is kept separate from _check_staged.
        self.console.note("Generating diff...")
        try:
            diff = self.gateway.fetch_staged_diff()
        except GitError as e:
            raise ExecutionError("failed to get diff") from e

        if not diff:
            raise PreconditionError("no changes to commit")
        self.diff = diff
        return WorkflowState.GENERATING

    def _generate(self) -> WorkflowState:
        first_round = self.rounds == 0
        if first_round:
            self.console.note("Generating commit message with AI...")

        prompt = build_commit_prompt(self.diff, self.feedback)
        try:
            result = self.generator.generate(prompt.system, prompt.user, model=self.model)
        except LLMError as e:
            phase = "generate" if first_round else "regenerate"
            raise GenerationError(f"failed to {phase} commit message") from e

        self.message = result.text.strip()
        self.rounds += 1
        return WorkflowState.PRESENTING

    def _present(self) -> WorkflowState:
        self.console.show("\n" + SEPARATOR)
        self.console.show(self.message)
        self.console.show(SEPARATOR)

        if self.options.dry_run:
            self.console.show("\n(Dry run - no commit created)")
            return WorkflowState.PREVIEWED

        if self.options.auto_approve:
            self.console.note("\nAuto-committing...")
            return WorkflowState.APPROVING

        while True:
            decision = parse_decision(self.console.ask(APPROVAL_PROMPT))
            if decision is not Decision.INVALID:
                return _NEXT_STATE[decision]
            self.console.show(INVALID_CHOICE)

    def _approve(self) -> WorkflowState:
        self._commit(self.message)
        return WorkflowState.COMMITTED

    def _regenerate(self) -> WorkflowState:
        self.feedback = self.console.ask(FEEDBACK_PROMPT).strip()
        self.console.note("\nRegenerating...")
        return WorkflowState.GENERATING

    def _edit(self) -> WorkflowState:
        try:
            edited = self.editor(self.message)
        except EditorError as e:
            raise EditorError("failed to open editor") from e

        self.message = edited
        self._commit(edited)
        return WorkflowState.COMMITTED

    def _cancel(self) -> WorkflowState:
        self.console.show("\nCommit cancelled.")
        return WorkflowState.CANCELLED

    def _commit(self, message: str) -> None:
        if self.committed:
            raise RuntimeError("A commit was already created in this session")

        self.console.note("Committing...")
        try:
            output = self.gateway.commit(message)
        except GitError as e:
            raise ExecutionError("failed to create commit") from e

        self.committed = True
        if output and output.strip():
            self.console.show(output.rstrip())
