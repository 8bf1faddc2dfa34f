"""Agent PreToolUse hooks: write-permission checks and risk warnings.

Exports the hook handlers, the wire-format helpers and the runner used by
the ``team-gov hook`` commands.
"""
from __future__ import annotations

from aumos_team_governance.hooks.handlers import TeamHooks
from aumos_team_governance.hooks.paths import to_relative_path
from aumos_team_governance.hooks.protocol import (
    HookInput,
    context_output,
    deny_output,
    parse_hook_input,
    read_hook_input,
    write_hook_output,
)
from aumos_team_governance.hooks.runner import HOOK_NAMES, run_hook
from aumos_team_governance.hooks.settings import HookSettings

__all__ = [
    "HOOK_NAMES",
    "HookInput",
    "HookSettings",
    "TeamHooks",
    "context_output",
    "deny_output",
    "parse_hook_input",
    "read_hook_input",
    "run_hook",
    "to_relative_path",
    "write_hook_output",
]
