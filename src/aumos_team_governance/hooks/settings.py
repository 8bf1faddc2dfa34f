"""Hook runtime settings with Pydantic v2 validation.

Hooks are configured entirely through environment variables set by the
agent orchestrator:

- ``CLAUDE_AGENT_ROLE``  — free-text role label of the acting agent
- ``CLAUDE_AGENT_NAME``  — fallback when no role label is set
- ``CLAUDE_PROJECT_DIR`` — project root; defaults to the working directory

Example
-------
>>> settings = HookSettings.from_environ({"CLAUDE_AGENT_ROLE": "auth-developer"})
>>> settings.role_label
DomainDeveloper(domain='auth')
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from aumos_team_governance.permissions.role_parser import RoleLabel, detect_agent_role


class HookSettings(BaseModel):
    """Settings shared by every hook invocation."""

    model_config = {"extra": "ignore"}

    agent_role: str | None = Field(default=None)
    agent_name: str | None = Field(default=None)
    project_dir: Path = Field(default_factory=Path.cwd)

    @field_validator("agent_role", "agent_name", mode="before")
    @classmethod
    def blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("project_dir", mode="before")
    @classmethod
    def default_project_dir(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return Path.cwd()
        return value

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> HookSettings:
        """Build settings from *environ* (``os.environ`` when omitted)."""
        env = os.environ if environ is None else environ
        return cls.model_validate(
            {
                "agent_role": env.get("CLAUDE_AGENT_ROLE"),
                "agent_name": env.get("CLAUDE_AGENT_NAME"),
                "project_dir": env.get("CLAUDE_PROJECT_DIR"),
            }
        )

    @property
    def role_label(self) -> RoleLabel | None:
        """The acting agent's parsed role, or ``None`` when no label is set."""
        return detect_agent_role(
            {
                "CLAUDE_AGENT_ROLE": self.agent_role or "",
                "CLAUDE_AGENT_NAME": self.agent_name or "",
            }
        )
