"""Conventional Commits prompt for commit message generation.

The model is asked for plain text: the returned message is used as-is
(after trimming), so the prompt insists on no extra commentary.
"""

from arc_commit.models import PromptPair

SYSTEM_PROMPT = """You are an expert developer who writes clear, professional commit messages following conventional commits format.

Your task is to generate a commit message based on git diff output. Follow these principles:

1. **Format**: Use conventional commits (feat:, fix:, refactor:, docs:, test:, chore:)
2. **Subject line**: Concise summary (max 72 chars), imperative mood ("add" not "added")
3. **Body**: Explain WHY, not WHAT (the diff shows what changed)
4. **Scope**: Add scope when helpful (e.g., "feat(cli):", "fix(database):")
5. **Breaking changes**: Use "!" for breaking changes (e.g., "feat!:")

Style guidelines:
- Clear and professional tone
- No unnecessary words or filler
- Focus on user impact and intent
- Group related changes logically

Output ONLY the commit message, no additional commentary."""

USER_PROMPT_PREFIX = "Generate a conventional commit message for these changes:\n\n"

FEEDBACK_MARKER = "\n\nUser feedback for improvement: "


def build_commit_prompt(diff: str, feedback: str = "") -> PromptPair:
    """Build the system and user prompts for one generation attempt.

    Args:
        diff: The staged diff, inserted verbatim.
        feedback: Optional free-text guidance from the user. Only the latest
            round's feedback is ever passed in.

    Returns:
        The prompt pair.
    """
    user = USER_PROMPT_PREFIX + diff
    if feedback:
        user += FEEDBACK_MARKER + feedback
    return PromptPair(system=SYSTEM_PROMPT, user=user)
