"""Plain-text risk warning reports for the edit hook."""
from __future__ import annotations

from aumos_team_governance.risk.areas import RISK_LABELS, RiskLevel
from aumos_team_governance.risk.classifier import RiskAnalysis

_LEVEL_NOTICES: dict[RiskLevel, str] = {
    RiskLevel.CRITICAL: (
        "[WARNING] This file is in a CRITICAL risk area. "
        "Any changes require thorough review by qa-manager and chief-architect before merging. "
        "Proceed with extreme caution."
    ),
    RiskLevel.HIGH: (
        "[CAUTION] This file is in a HIGH risk area. "
        "Changes should be reviewed by the part-leader and tested thoroughly."
    ),
    RiskLevel.MEDIUM: (
        "[NOTE] This file is in a MEDIUM risk area. "
        "Verify contract compatibility and run related tests."
    ),
}


def format_warning_report(analysis: RiskAnalysis) -> str:
    """Render *analysis* as the multi-line warning shown to the agent."""
    lines = [
        "",
        f'[Risk Area Warning] {RISK_LABELS[analysis.level]} File: "{analysis.path}"',
    ]
    if analysis.reason:
        lines.append(f"  Reason: {analysis.reason}")

    if analysis.matched_patterns:
        lines += ["", "  Matched Patterns:"]
        lines += [f"    - {pattern}" for pattern in analysis.matched_patterns]

    if analysis.reviewers:
        lines += ["", "  Required Reviewers:"]
        lines += [f"    - {reviewer}" for reviewer in analysis.reviewers]

    if analysis.checklist:
        lines += ["", "  Confirmation Checklist (verify before proceeding):"]
        lines += [f"    [ ] {item}" for item in analysis.checklist]

    notice = _LEVEL_NOTICES.get(analysis.level)
    if notice:
        lines += ["", f"  {notice}"]

    return "\n".join(lines)
