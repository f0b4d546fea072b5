"""Tests for arc_commit.workflow.machine module."""

import pytest

from arc_commit.git.exceptions import GitError
from arc_commit.llm.exceptions import LLMError
from arc_commit.models import RunOptions
from arc_commit.workflow import (
    ApprovalWorkflow,
    EditorError,
    ExecutionError,
    GenerationError,
    InputError,
    PreconditionError,
    WorkflowOutcome,
    WorkflowState,
)
from arc_commit.workflow.machine import APPROVAL_PROMPT, FEEDBACK_PROMPT, INVALID_CHOICE

from fakes import FakeGateway, FakeGenerator, ScriptedConsole

GENERATED = "feat: add foo\n\nExplain why."


def make_workflow(gateway, generator, answers=(), editor=None, **options):
    console = ScriptedConsole(list(answers))
    workflow = ApprovalWorkflow(
        gateway=gateway,
        generator=generator,
        options=RunOptions(**options),
        default_model="default-model",
        console=console,
        editor=editor or (lambda text: pytest.fail("editor should not run")),
    )
    return workflow, console


class TestPreconditions:
    """Tests for the staged-change checks."""

    def test_no_staged_changes(self, generator):
        """Test that nothing staged ends the session before any diff."""
        gateway = FakeGateway(staged=False)
        workflow, _ = make_workflow(gateway, generator)

        with pytest.raises(PreconditionError) as exc_info:
            workflow.run()

        assert exc_info.value.message == "no staged changes found"
        assert "git add" in exc_info.value.hint
        assert gateway.diff_calls == 0
        assert generator.calls == []

    def test_empty_diff(self, generator):
        """Test that staged-but-empty is reported separately."""
        gateway = FakeGateway(staged=True, diff="")
        workflow, _ = make_workflow(gateway, generator)

        with pytest.raises(PreconditionError) as exc_info:
            workflow.run()

        assert exc_info.value.message == "no changes to commit"
        assert generator.calls == []

    def test_check_failure_is_execution_error(self, generator):
        """Test that a failing staged check keeps its cause."""
        workflow, _ = make_workflow(FakeGateway(fail_on={"check"}), generator)

        with pytest.raises(ExecutionError) as exc_info:
            workflow.run()

        assert exc_info.value.message == "failed to check staged changes"
        assert isinstance(exc_info.value.__cause__, GitError)

    def test_diff_failure_is_execution_error(self, generator):
        """Test that a failing diff names the phase."""
        workflow, _ = make_workflow(FakeGateway(fail_on={"diff"}), generator)

        with pytest.raises(ExecutionError) as exc_info:
            workflow.run()

        assert exc_info.value.message == "failed to get diff"
        assert isinstance(exc_info.value.__cause__, GitError)


class TestDryRun:
    """Tests for --dry-run behavior."""

    @pytest.mark.parametrize("auto_approve", [False, True])
    def test_prints_and_never_commits(self, gateway, generator, auto_approve):
        """Test that dry run shows the message and exits regardless of --yes."""
        workflow, console = make_workflow(
            gateway, generator, dry_run=True, auto_approve=auto_approve
        )

        outcome = workflow.run()

        assert outcome is WorkflowOutcome.PREVIEWED
        assert GENERATED in console.shown
        assert any("Dry run" in line for line in console.shown)
        assert gateway.commits == []
        assert console.questions == []


class TestAutoApprove:
    """Tests for --yes behavior."""

    def test_commits_trimmed_message_once(self, gateway, generator):
        """Test that the first message is committed without prompting."""
        workflow, console = make_workflow(gateway, generator, auto_approve=True)

        outcome = workflow.run()

        assert outcome is WorkflowOutcome.COMMITTED
        assert gateway.commits == [GENERATED]
        assert console.questions == []
        assert len(generator.calls) == 1


class TestInteractiveDecisions:
    """Tests for the approval prompt."""

    def test_approve(self, gateway, generator):
        """Test that 'y' commits the candidate message."""
        workflow, console = make_workflow(gateway, generator, answers=["y"])

        assert workflow.run() is WorkflowOutcome.COMMITTED
        assert gateway.commits == [GENERATED]
        assert console.questions == [APPROVAL_PROMPT]

    def test_cancel(self, gateway, generator):
        """Test that 'cancel' ends without committing."""
        workflow, console = make_workflow(gateway, generator, answers=["cancel"])

        assert workflow.run() is WorkflowOutcome.CANCELLED
        assert gateway.commits == []
        assert "\nCommit cancelled." in console.shown

    def test_invalid_input_reprompts(self, gateway, generator):
        """Test that invalid answers re-prompt without regenerating."""
        workflow, console = make_workflow(
            gateway, generator, answers=["q", "", "maybe", "Y"]
        )

        assert workflow.run() is WorkflowOutcome.COMMITTED
        assert console.questions == [APPROVAL_PROMPT] * 4
        assert console.shown.count(INVALID_CHOICE) == 3
        assert len(generator.calls) == 1

    def test_input_error_is_terminal(self, gateway, generator):
        """Test that a closed input stream ends the session."""
        workflow, console = make_workflow(gateway, generator)

        def closed(question):
            raise InputError("failed to read input")

        console.ask = closed

        with pytest.raises(InputError):
            workflow.run()
        assert gateway.commits == []


class TestRegeneration:
    """Tests for the regenerate-with-feedback loop."""

    def test_feedback_reaches_next_prompt(self, gateway):
        """Test that feedback is appended to the next user prompt."""
        generator = FakeGenerator(["fix: first", "fix: second"])
        workflow, console = make_workflow(
            gateway, generator, answers=["no", "mention the bugfix", "y"]
        )

        workflow.run()

        assert "mention the bugfix" not in generator.calls[0]["user"]
        assert "mention the bugfix" in generator.calls[1]["user"]
        assert FEEDBACK_PROMPT in console.questions
        assert gateway.commits == ["fix: second"]

    def test_feedback_is_not_accumulated(self, gateway):
        """Test that only the latest round's feedback is sent."""
        generator = FakeGenerator(["a", "b", "c"])
        workflow, _ = make_workflow(
            gateway,
            generator,
            answers=["n", "first note", "n", "second note", "y"],
        )

        workflow.run()

        last_prompt = generator.calls[2]["user"]
        assert "second note" in last_prompt
        assert "first note" not in last_prompt
        assert gateway.commits == ["c"]

    def test_empty_feedback_adds_no_block(self, gateway):
        """Test that pressing Enter regenerates without a feedback block."""
        generator = FakeGenerator(["a", "b"])
        workflow, _ = make_workflow(gateway, generator, answers=["n", "   ", "y"])

        workflow.run()

        assert "User feedback" not in generator.calls[1]["user"]

    def test_diff_fetched_once(self, sample_diff):
        """Test that every round reuses the first diff."""
        gateway = FakeGateway(diff=sample_diff)
        generator = FakeGenerator(["a", "b", "c"])
        workflow, _ = make_workflow(
            gateway, generator, answers=["n", "", "n", "", "y"]
        )

        workflow.run()

        assert gateway.diff_calls == 1
        assert all(sample_diff in call["user"] for call in generator.calls)

    def test_each_round_is_presented(self, gateway):
        """Test that every generated message goes through the presenting state."""
        generator = FakeGenerator(["a", "b"])
        workflow, _ = make_workflow(gateway, generator, answers=["n", "", "y"])
        workflow.run()

        assert workflow.history.count(WorkflowState.PRESENTING) == 2

    def test_first_generation_failure(self, gateway):
        """Test that a failed first call is fatal and keeps the cause."""
        generator = FakeGenerator(error_at=0)
        workflow, _ = make_workflow(gateway, generator)

        with pytest.raises(GenerationError) as exc_info:
            workflow.run()

        assert exc_info.value.message == "failed to generate commit message"
        assert isinstance(exc_info.value.__cause__, LLMError)

    def test_regeneration_failure(self, gateway):
        """Test that a failed regeneration is fatal and commits nothing."""
        generator = FakeGenerator(["a"], error_at=1)
        workflow, _ = make_workflow(gateway, generator, answers=["n", "shorter"])

        with pytest.raises(GenerationError) as exc_info:
            workflow.run()

        assert exc_info.value.message == "failed to regenerate commit message"
        assert gateway.commits == []


class TestModelSelection:
    """Tests for the effective model."""

    def test_uses_default_model(self, gateway, generator):
        workflow, _ = make_workflow(gateway, generator, auto_approve=True)
        workflow.run()

        assert generator.calls[0]["model"] == "default-model"

    def test_override_wins(self, gateway):
        """Test that --model is used for every round."""
        generator = FakeGenerator(["a", "b"])
        workflow, _ = make_workflow(
            gateway, generator, answers=["n", "", "y"], model_override="claude-sonnet-4-5"
        )
        workflow.run()

        assert [call["model"] for call in generator.calls] == ["claude-sonnet-4-5"] * 2


class TestEdit:
    """Tests for the edit transition."""

    def test_commits_edited_text_directly(self, gateway, generator):
        """Test that edited text is committed with no further prompt."""
        seen = []

        def editor(text):
            seen.append(text)
            return "fix: corrected typo"

        workflow, console = make_workflow(gateway, generator, answers=["e"], editor=editor)

        assert workflow.run() is WorkflowOutcome.COMMITTED
        assert seen == [GENERATED]
        assert gateway.commits == ["fix: corrected typo"]
        assert console.questions == [APPROVAL_PROMPT]
        assert workflow.history[-1] is WorkflowState.EDITING
        assert workflow.state is WorkflowState.COMMITTED

    def test_editor_failure_is_terminal(self, gateway, generator):
        """Test that an editor failure ends the session without a commit."""
        def editor(text):
            raise EditorError("editor exited with code 1")

        workflow, _ = make_workflow(gateway, generator, answers=["edit"], editor=editor)

        with pytest.raises(EditorError) as exc_info:
            workflow.run()

        assert exc_info.value.message == "failed to open editor"
        assert "code 1" in str(exc_info.value.__cause__)
        assert gateway.commits == []


class TestCommit:
    """Tests for the commit step."""

    def test_commit_failure(self, generator):
        """Test that a failed commit is reported with its phase."""
        gateway = FakeGateway(fail_on={"commit"})
        workflow, _ = make_workflow(gateway, generator, auto_approve=True)

        with pytest.raises(ExecutionError) as exc_info:
            workflow.run()

        assert exc_info.value.message == "failed to create commit"

    def test_commit_output_is_shown(self, gateway, generator):
        workflow, console = make_workflow(gateway, generator, auto_approve=True)
        workflow.run()

        assert "[main abc1234] feat: add foo" in console.shown

    def test_commit_happens_at_most_once(self, gateway, generator):
        """Test that a second commit in one session is refused."""
        workflow, _ = make_workflow(gateway, generator, auto_approve=True)
        workflow.run()

        with pytest.raises(RuntimeError):
            workflow._commit("again")
        assert len(gateway.commits) == 1


class TestStateMachine:
    """Tests for stepping through states."""

    def test_transition_sequence(self, gateway, generator):
        """Test the exact states visited for a regenerate-then-approve run."""
        workflow, _ = make_workflow(
            gateway, FakeGenerator(["a", "b"]), answers=["n", "", "y"]
        )

        workflow.run()

        assert workflow.history == [
            WorkflowState.CHECKING_STAGED,
            WorkflowState.FETCHING_DIFF,
            WorkflowState.GENERATING,
            WorkflowState.PRESENTING,
            WorkflowState.REGENERATING,
            WorkflowState.GENERATING,
            WorkflowState.PRESENTING,
            WorkflowState.APPROVING,
        ]
        assert workflow.state is WorkflowState.COMMITTED

    def test_step_by_step(self, gateway, generator):
        """Test that each step returns the next state."""
        workflow, _ = make_workflow(gateway, generator, answers=["c"])

        assert workflow.step() is WorkflowState.FETCHING_DIFF
        assert workflow.step() is WorkflowState.GENERATING
        assert workflow.step() is WorkflowState.PRESENTING
        assert workflow.message == GENERATED
        assert workflow.step() is WorkflowState.CANCELLING
        assert workflow.step() is WorkflowState.CANCELLED
        assert workflow.finished

    def test_step_after_finish_raises(self, gateway, generator):
        workflow, _ = make_workflow(gateway, generator, dry_run=True)
        workflow.run()

        with pytest.raises(RuntimeError):
            workflow.step()
