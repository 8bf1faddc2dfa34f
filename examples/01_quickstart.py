#!/usr/bin/env python3
"""Example: Quickstart — aumos-team-governance

Minimal working example: check agent writes against their roles and
classify the risk of the files they touch.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install aumos-team-governance
"""
from __future__ import annotations

import aumos_team_governance as gov


def main() -> None:
    print(f"aumos-team-governance version: {gov.__version__}")

    governor = gov.TeamGovernor()

    # Step 1: Check writes for a few agents
    writes = [
        ("auth-developer", "src/domains/auth/models/user.py"),
        ("auth-developer", "src/domains/payment/order.py"),
        ("DBA", "src/domains/auth/services/user_service.py"),
        ("Project Manager", "management/requests/to-auth/req-1.md"),
        ("intern", "README.md"),
    ]

    print("\nWrite permissions:")
    for label, path in writes:
        verdict = governor.check_write(label, path)
        icon = "ALLOW" if verdict.allowed else "DENY"
        print(f"  [{icon}] {label} -> {path}")
        if not verdict.allowed:
            print(f"    {verdict.kind.value if verdict.kind else ''}: {verdict.reason}")
            if verdict.escalation:
                print(f"    Escalate to: {verdict.escalation}")

    # Step 2: Classify file risk
    print("\nRisk classification:")
    for path in [
        "services/billing/core/processor.py",
        "app/services/user_service.ts",
        "src/api/handlers.py",
        "src/utils/strings.py",
        "README.md",
    ]:
        area = governor.classify(path)
        level = area.level.value if area else "unclassified"
        print(f"  {level:<12} {path}")


if __name__ == "__main__":
    main()
