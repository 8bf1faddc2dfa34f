#!/usr/bin/env python3
"""Example: Project risk areas — aumos-team-governance

Loads risk areas from YAML, prints the warning report the edit hook would
show, and runs the permission hook on a job descriptor.

Usage:
    python examples/02_custom_risk_areas.py
"""
from __future__ import annotations

import io
import json

from aumos_team_governance.hooks import run_hook
from aumos_team_governance.risk import RiskAreaLoader, RiskClassifier, format_warning_report

_RISK_AREAS_YAML = """
risk_areas:
  - level: CRITICAL
    patterns:
      - "**/ledger/**"
    reviewers:
      - qa-manager
      - chief-architect
    reason: "Double-entry ledger writes"
  - level: medium
    patterns:
      - "**/reports/*.{sql,py}"
    reason: "Finance reports read by auditors"
"""


def main() -> None:
    areas = RiskAreaLoader().load_from_yaml_string(_RISK_AREAS_YAML)
    classifier = RiskClassifier(areas)

    # Step 1: Risk report for a ledger edit
    analysis = classifier.analyze("src/domains/finance/ledger/post.py")
    if analysis is not None:
        print(format_warning_report(analysis))

    # Step 2: Permission hook for a designer editing source code
    stdin = io.StringIO(
        json.dumps(
            {
                "tool_name": "Edit",
                "tool_input": {"file_path": "src/domains/auth/ui/login.tsx"},
                "hook_event_name": "PreToolUse",
            }
        )
    )
    stdout = io.StringIO()
    run_hook("permission", stdin, stdout, environ={"CLAUDE_AGENT_ROLE": "Auth Designer"})
    print("\nPermission hook output:")
    print(stdout.getvalue() or "(allowed)")


if __name__ == "__main__":
    main()
