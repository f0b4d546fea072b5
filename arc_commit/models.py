"""Data models shared across arc-commit.

Contains Pydantic models:
- PromptPair: System and user prompt for one generation attempt
- RunOptions: Session-wide flags supplied on the command line
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class PromptPair(BaseModel):
    """System and user prompt sent to the LLM."""

    model_config = ConfigDict(frozen=True)

    system: str
    user: str


class RunOptions(BaseModel):
    """Flags fixed for the whole commit session.

    Attributes:
        auto_approve: Commit the first generated message without prompting.
        dry_run: Only display the message; takes precedence over auto_approve.
        model_override: Model identifier to use instead of the default.
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    auto_approve: bool = False
    dry_run: bool = False
    model_override: Optional[str] = None

    @field_validator("model_override")
    @classmethod
    def blank_override_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()
