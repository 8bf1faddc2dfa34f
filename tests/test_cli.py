"""Tests for the team-gov command-line interface."""
from __future__ import annotations

import json
import pathlib

import pytest
from click.testing import CliRunner

from aumos_team_governance.cli.main import cli


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


class TestVersion:
    def test_version_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "aumos-team-governance" in result.output


class TestCheck:
    def test_allowed_exits_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["check", "--role", "auth-developer", "--path", "src/domains/auth/a.py"]
        )
        assert result.exit_code == 0
        assert "ALLOWED" in result.output

    def test_denied_exits_one(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["check", "--role", "auth-developer", "--path", "src/domains/payment/a.py"]
        )
        assert result.exit_code == 1
        assert "DENIED" in result.output
        assert "payment-part-leader" in result.output

    def test_explicit_domain(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["check", "--role", "part-leader", "--domain", "auth", "--path", "src/domains/auth/a.py"],
        )
        assert result.exit_code == 0

    def test_unknown_role(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "--role", "ghost", "--path", "src/a.py"])
        assert result.exit_code == 1
        assert "Unknown role" in result.output


class TestClassify:
    def test_critical(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["classify", "services/payment/api.py"])
        assert result.exit_code == 0
        assert "CRITICAL" in result.output

    def test_unclassified(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["classify", "README.md"])
        assert result.exit_code == 0
        assert "unclassified" in result.output

    def test_custom_config(self, runner: CliRunner, tmp_path: pathlib.Path) -> None:
        config = tmp_path / "areas.yaml"
        config.write_text('- level: HIGH\n  patterns: ["README.md"]\n', encoding="utf-8")
        result = runner.invoke(cli, ["classify", "README.md", "--config", str(config)])
        assert result.exit_code == 0
        assert "HIGH" in result.output


class TestRoles:
    def test_lists_roles(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["roles"])
        assert result.exit_code == 0
        assert "dba" in result.output
        assert "part-leader" in result.output


class TestHookCommands:
    def test_permission_hook_denies(self, runner: CliRunner, tmp_path: pathlib.Path) -> None:
        result = runner.invoke(
            cli,
            ["hook", "permission"],
            input=json.dumps({"tool_input": {"file_path": "design/x.md"}}),
            env={"CLAUDE_AGENT_ROLE": "dba", "CLAUDE_PROJECT_DIR": str(tmp_path)},
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["decision"] == "deny"

    def test_risk_hook_silent_for_unclassified(
        self, runner: CliRunner, tmp_path: pathlib.Path
    ) -> None:
        result = runner.invoke(
            cli,
            ["hook", "risk"],
            input=json.dumps({"tool_input": {"file_path": "README.md"}}),
            env={"CLAUDE_PROJECT_DIR": str(tmp_path)},
        )
        assert result.exit_code == 0
        assert result.output == ""

    def test_log_level_option(self, runner: CliRunner, tmp_path: pathlib.Path) -> None:
        result = runner.invoke(
            cli,
            ["--log-level", "debug", "hook", "risk"],
            input="",
            env={"CLAUDE_PROJECT_DIR": str(tmp_path)},
        )
        assert result.exit_code == 0
