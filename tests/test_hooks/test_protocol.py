"""Tests for the hook wire format, settings and path handling."""
from __future__ import annotations

import io
import json
import pathlib

import pytest

from aumos_team_governance.hooks.paths import to_relative_path
from aumos_team_governance.hooks.protocol import (
    HookInput,
    context_output,
    deny_output,
    parse_hook_input,
    read_hook_input,
    write_hook_output,
)
from aumos_team_governance.hooks.settings import HookSettings
from aumos_team_governance.permissions.role_parser import (
    DomainDeveloper,
    StaticRole,
    Unresolved,
)


class TestParseHookInput:
    def test_edit_descriptor(self) -> None:
        hook_input = parse_hook_input(
            json.dumps(
                {
                    "tool_name": "Edit",
                    "tool_input": {"file_path": "src/a.py"},
                    "hook_event_name": "PreToolUse",
                }
            )
        )
        assert hook_input.tool_name == "Edit"
        assert hook_input.file_path == "src/a.py"
        assert hook_input.hook_event_name == "PreToolUse"

    def test_path_key_fallback(self) -> None:
        assert parse_hook_input('{"tool_input": {"path": "docs/x.md"}}').file_path == "docs/x.md"

    @pytest.mark.parametrize("text", ["", "   ", "not json", "[1, 2]"])
    def test_unreadable_input_is_empty(self, text: str) -> None:
        assert parse_hook_input(text) == HookInput()

    def test_non_string_path_ignored(self) -> None:
        assert parse_hook_input('{"tool_input": {"file_path": 3}}').file_path == ""

    def test_read_from_stream(self) -> None:
        stream = io.StringIO('{"tool_input": {"file_path": "a.py"}}')
        assert read_hook_input(stream).file_path == "a.py"


class TestOutputs:
    def test_deny_output(self) -> None:
        assert deny_output("nope") == {"decision": "deny", "reason": "nope"}

    def test_context_output_with_event(self) -> None:
        assert context_output("warn", "PreToolUse") == {
            "hookSpecificOutput": {"additionalContext": "warn", "hookEventName": "PreToolUse"}
        }

    def test_context_output_without_event(self) -> None:
        assert context_output("warn") == {"hookSpecificOutput": {"additionalContext": "warn"}}

    def test_write_hook_output_single_object(self) -> None:
        stream = io.StringIO()
        write_hook_output(stream, deny_output("x"))
        assert json.loads(stream.getvalue()) == {"decision": "deny", "reason": "x"}
        assert not stream.getvalue().endswith("\n")


class TestHookSettings:
    def test_from_environ(self, tmp_path: pathlib.Path) -> None:
        settings = HookSettings.from_environ(
            {"CLAUDE_AGENT_ROLE": "dba", "CLAUDE_PROJECT_DIR": str(tmp_path)}
        )
        assert settings.role_label == StaticRole("dba")
        assert settings.project_dir == tmp_path

    def test_name_fallback(self) -> None:
        settings = HookSettings.from_environ({"CLAUDE_AGENT_NAME": "auth-developer"})
        assert settings.role_label == DomainDeveloper("auth")

    def test_blank_values(self) -> None:
        settings = HookSettings.from_environ({"CLAUDE_AGENT_ROLE": "  ", "CLAUDE_PROJECT_DIR": ""})
        assert settings.role_label is None
        assert settings.project_dir == pathlib.Path.cwd()

    def test_role_preferred_over_name(self) -> None:
        settings = HookSettings.from_environ(
            {"CLAUDE_AGENT_ROLE": "qa-manager", "CLAUDE_AGENT_NAME": "auth-developer"}
        )
        assert settings.role_label == StaticRole("qa-manager")

    def test_blank_role_falls_back_to_name(self) -> None:
        settings = HookSettings.from_environ(
            {"CLAUDE_AGENT_ROLE": "", "CLAUDE_AGENT_NAME": "auth-developer"}
        )
        assert settings.role_label == DomainDeveloper("auth")

    def test_unrecognised_label_is_unresolved(self) -> None:
        settings = HookSettings.from_environ({"CLAUDE_AGENT_ROLE": "Night Watch"})
        assert settings.role_label == Unresolved("Night Watch")


class TestToRelativePath:
    def test_relative_passthrough(self, tmp_path: pathlib.Path) -> None:
        assert to_relative_path("src/a.py", tmp_path) == "src/a.py"

    def test_backslashes(self, tmp_path: pathlib.Path) -> None:
        assert to_relative_path("src\\a.py", tmp_path) == "src/a.py"

    def test_absolute_inside_project(self, tmp_path: pathlib.Path) -> None:
        target = tmp_path / "src" / "domains" / "auth" / "a.py"
        assert to_relative_path(str(target), tmp_path) == "src/domains/auth/a.py"

    def test_absolute_outside_project(self, tmp_path: pathlib.Path) -> None:
        outside = tmp_path.parent / "elsewhere.py"
        assert to_relative_path(str(outside), tmp_path / "project") is None

    @pytest.mark.parametrize("value", ["", "..", "../x.py", "."])
    def test_nothing_to_check(self, tmp_path: pathlib.Path, value: str) -> None:
        assert to_relative_path(value, tmp_path) is None
