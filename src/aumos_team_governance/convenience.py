"""Convenience API for aumos-team-governance — 3-line quickstart.

Example
-------
::

    from aumos_team_governance import TeamGovernor
    governor = TeamGovernor()
    verdict = governor.check_write("auth-developer", "src/domains/auth/models/user.py")
    print(verdict.allowed)

"""
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from aumos_team_governance.matching.pattern_set import PatternMatcher
from aumos_team_governance.permissions.resolver import PermissionResolver, PermissionVerdict
from aumos_team_governance.permissions.role_parser import parse_role_label
from aumos_team_governance.risk.areas import RiskArea
from aumos_team_governance.risk.classifier import RiskAnalysis, RiskClassifier
from aumos_team_governance.risk.loader import RiskAreaLoader


class TeamGovernor:
    """Zero-config write permissions and risk classification for team agents.

    Bundles a PermissionResolver and a RiskClassifier that share one
    pattern matcher.

    Parameters
    ----------
    risk_areas:
        Risk areas to classify against. The built-in defaults are used
        when omitted.

    Example
    -------
    ::

        governor = TeamGovernor.from_project(Path("."))
        governor.classify("services/payment/api.py").level  # RiskLevel.CRITICAL
    """

    def __init__(self, risk_areas: Sequence[RiskArea] | None = None) -> None:
        self._matcher = PatternMatcher()
        self._resolver = PermissionResolver(matcher=self._matcher)
        self._classifier = RiskClassifier(risk_areas, matcher=self._matcher)

    @classmethod
    def from_project(cls, project_dir: str | Path) -> TeamGovernor:
        """Create a governor using the project's risk-area file, if any."""
        loader = RiskAreaLoader()
        return cls(risk_areas=loader.load_or_default(loader.discover(project_dir)))

    def check_write(self, role_label: str, path: str) -> PermissionVerdict:
        """Check whether the agent named by *role_label* may write *path*."""
        return self._resolver.check_label(parse_role_label(role_label), path)

    def classify(self, path: str) -> RiskArea | None:
        """Return the risk area of *path*, or ``None`` if unclassified."""
        return self._classifier.classify(path)

    def analyze(self, path: str) -> RiskAnalysis | None:
        return self._classifier.analyze(path)

    @property
    def resolver(self) -> PermissionResolver:
        return self._resolver

    @property
    def classifier(self) -> RiskClassifier:
        return self._classifier

    def __repr__(self) -> str:
        return f"TeamGovernor(risk_areas={len(self._classifier.areas)})"
