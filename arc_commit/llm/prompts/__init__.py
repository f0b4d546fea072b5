"""LLM prompt templates for commit message generation."""

from arc_commit.llm.prompts.commit import (
    FEEDBACK_MARKER,
    SYSTEM_PROMPT,
    USER_PROMPT_PREFIX,
    build_commit_prompt,
)


__all__ = [
    "FEEDBACK_MARKER",
    "SYSTEM_PROMPT",
    "USER_PROMPT_PREFIX",
    "build_commit_prompt",
]
