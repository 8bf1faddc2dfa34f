"""Messages shown to an agent when a write is denied or unverifiable."""
from __future__ import annotations


def agent_label(role_id: str, domain: str | None) -> str:
    return f"{domain}-{role_id}" if domain else role_id


def format_denial_message(
    role_id: str,
    domain: str | None,
    file_path: str,
    reason: str,
    escalation: str | None = None,
) -> str:
    """Generic denial: restricted area, not in write paths or unknown role."""
    lines = [
        f'[Permission Denied] Agent "{agent_label(role_id, domain)}" cannot write to "{file_path}".',
        f"  Reason: {reason}",
    ]
    if escalation:
        lines.append(f'  Escalation: Request this change through "{escalation}".')
    return "\n".join(lines)


def format_boundary_violation_message(
    role_id: str,
    agent_domain: str,
    target_domain: str,
    file_path: str,
) -> str:
    """Denial for a write into another domain's subtree."""
    return "\n".join(
        [
            f'[Domain Boundary Violation] Agent "{agent_label(role_id, agent_domain)}" '
            f'cannot modify files in domain "{target_domain}".',
            f'  File: "{file_path}"',
            f'  Your domain: "{agent_domain}"',
            f'  Target domain: "{target_domain}"',
            f'  Escalation: Request this change through "{target_domain}-part-leader" '
            "or use the interface request protocol.",
        ]
    )


def format_unknown_agent_warning(file_path: str) -> str:
    return (
        "[Permission Warning] Agent role not detected (CLAUDE_AGENT_ROLE not set). "
        f'Unable to verify write permission for "{file_path}". '
        "Set CLAUDE_AGENT_ROLE environment variable for proper access control."
    )
