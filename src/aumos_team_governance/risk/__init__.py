"""Risk-area classification of file edits.

Example
-------
::

    from aumos_team_governance.risk import RiskClassifier

    analysis = RiskClassifier().analyze("src/domains/payment/charge.py")
    analysis.level        # RiskLevel.CRITICAL
    analysis.reviewers    # ('qa-manager', 'chief-architect')
"""
from __future__ import annotations

from aumos_team_governance.risk.areas import (
    DEFAULT_RISK_AREAS,
    RISK_LABELS,
    RiskArea,
    RiskLevel,
)
from aumos_team_governance.risk.classifier import (
    UNCLASSIFIED,
    RiskAnalysis,
    RiskClassifier,
    generate_checklist,
)
from aumos_team_governance.risk.loader import (
    CONFIG_CANDIDATES,
    RiskAreaEntry,
    RiskAreaLoader,
    RiskConfigError,
)
from aumos_team_governance.risk.report import format_warning_report

__all__ = [
    "CONFIG_CANDIDATES",
    "DEFAULT_RISK_AREAS",
    "RISK_LABELS",
    "RiskAnalysis",
    "RiskArea",
    "RiskAreaEntry",
    "RiskAreaLoader",
    "RiskClassifier",
    "RiskConfigError",
    "RiskLevel",
    "UNCLASSIFIED",
    "format_warning_report",
    "generate_checklist",
]
