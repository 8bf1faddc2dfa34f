"""JSON wire format of the agent's PreToolUse hooks.

Input (stdin)::

    {"tool_name": "Edit", "tool_input": {"file_path": "..."}, "hook_event_name": "PreToolUse"}

Output (stdout), at most one object per invocation::

    {"decision": "deny", "reason": "..."}
    {"hookSpecificOutput": {"additionalContext": "...", "hookEventName": "PreToolUse"}}
"""
from __future__ import annotations

import json
import logging
from typing import IO, Any

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class HookInput(BaseModel):
    """Job descriptor received from the agent runtime."""

    model_config = {"extra": "allow"}

    tool_name: str = Field(default="")
    tool_input: dict[str, Any] = Field(default_factory=dict)
    hook_event_name: str = Field(default="")

    @property
    def file_path(self) -> str:
        """Target file of the tool call, or ``""`` when absent."""
        value = self.tool_input.get("file_path") or self.tool_input.get("path") or ""
        return value if isinstance(value, str) else ""


def parse_hook_input(text: str) -> HookInput:
    """Parse *text* into a :class:`HookInput`.

    Empty or malformed input yields an empty descriptor, which every hook
    treats as "nothing to check".
    """
    if not text or not text.strip():
        return HookInput()
    try:
        return HookInput.model_validate(json.loads(text))
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.debug("Ignoring unreadable hook input: %s", exc)
        return HookInput()


def read_hook_input(stream: IO[str]) -> HookInput:
    return parse_hook_input(stream.read())


def deny_output(reason: str) -> dict[str, object]:
    return {"decision": "deny", "reason": reason}


def context_output(context: str, hook_event_name: str = "") -> dict[str, object]:
    """Wrap *context* as non-blocking additional context for the agent."""
    specific: dict[str, object] = {"additionalContext": context}
    if hook_event_name:
        specific["hookEventName"] = hook_event_name
    return {"hookSpecificOutput": specific}


def write_hook_output(stream: IO[str], payload: dict[str, object]) -> None:
    stream.write(json.dumps(payload))
    stream.flush()
