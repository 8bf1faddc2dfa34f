"""Test that the 3-line quickstart API works for aumos-team-governance."""
from __future__ import annotations

import pathlib


def test_quickstart_import() -> None:
    from aumos_team_governance import TeamGovernor

    governor = TeamGovernor()
    assert governor is not None


def test_quickstart_check_write() -> None:
    from aumos_team_governance import TeamGovernor

    governor = TeamGovernor()
    verdict = governor.check_write("auth-developer", "src/domains/auth/models/user.py")
    assert verdict.allowed is True


def test_quickstart_check_write_denied() -> None:
    from aumos_team_governance import TeamGovernor

    governor = TeamGovernor()
    assert governor.check_write("Chief Designer", "src/app.py").allowed is False


def test_quickstart_classify() -> None:
    from aumos_team_governance import RiskLevel, TeamGovernor

    governor = TeamGovernor()
    area = governor.classify("services/payment/api.py")
    assert area is not None
    assert area.level is RiskLevel.CRITICAL
    assert governor.classify("README.md") is None


def test_quickstart_analyze() -> None:
    from aumos_team_governance import TeamGovernor

    analysis = TeamGovernor().analyze("lib/core/engine.py")
    assert analysis is not None
    assert analysis.requires_review is True


def test_quickstart_from_project(tmp_path: pathlib.Path) -> None:
    from aumos_team_governance import TeamGovernor

    (tmp_path / "risk-areas.yaml").write_text(
        '- level: LOW\n  patterns: ["README.md"]\n', encoding="utf-8"
    )
    governor = TeamGovernor.from_project(tmp_path)
    assert governor.classify("services/payment/api.py") is None
    assert "risk_areas=1" in repr(governor)


def test_quickstart_components_accessible() -> None:
    from aumos_team_governance import PermissionResolver, RiskClassifier, TeamGovernor

    governor = TeamGovernor()
    assert isinstance(governor.resolver, PermissionResolver)
    assert isinstance(governor.classifier, RiskClassifier)
    assert governor.resolver.matcher is governor.classifier._matcher


def test_quickstart_repr() -> None:
    from aumos_team_governance import TeamGovernor

    assert "TeamGovernor" in repr(TeamGovernor())


def test_quickstart_from_project_undecodable_config(tmp_path: pathlib.Path) -> None:
    from aumos_team_governance import RiskLevel, TeamGovernor

    (tmp_path / "risk-areas.yaml").write_bytes(b'- level: LOW\n  reason: "caf\xe9"\n')
    area = TeamGovernor.from_project(tmp_path).classify("services/payment/api.py")
    assert area is not None
    assert area.level is RiskLevel.CRITICAL
