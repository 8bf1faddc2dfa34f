"""Role permission model for the project team.

Every agent acts under a role. Six roles are static; three more are
templates parametrised by the domain the agent works in:

- ``part-leader``      — leads one domain (``{domain}-part-leader``)
- ``domain-designer``  — designs one domain (``{domain}-designer``)
- ``domain-developer`` — implements one domain (``{domain}-developer``)

A RoleDefinition lists the glob patterns the role may ``read`` and
``write``, the restricted ``cannot`` patterns that take precedence over
``write``, the ``veto`` tokens it may raise, and an ordered ``escalation``
map from pattern to the role that should be asked instead.

Example
-------
::

    role = resolve_role("domain-developer", "auth")
    role.write
    # ('src/domains/auth/**', 'tests/auth/**')
    resolve_role("intern", None)
    # None
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

PART_LEADER = "part-leader"
DOMAIN_DESIGNER = "domain-designer"
DOMAIN_DEVELOPER = "domain-developer"

TEMPLATE_ROLE_KINDS: tuple[str, ...] = (PART_LEADER, DOMAIN_DESIGNER, DOMAIN_DEVELOPER)


@dataclass(frozen=True)
class RoleDefinition:
    """Path permissions of a single role.

    Attributes
    ----------
    role_id:
        Static identifier (``"dba"``) or template kind (``"part-leader"``).
    read:
        Patterns the role may read.
    write:
        Patterns the role may write.
    cannot:
        Restricted patterns; a match here denies even when ``write`` matches.
    escalation:
        Ordered, read-only mapping of pattern to escalation target label.
    veto:
        Review findings this role may veto on.
    domain:
        Domain of a templated role; always ``None`` for static roles.
    """

    role_id: str
    read: tuple[str, ...] = ()
    write: tuple[str, ...] = ()
    cannot: tuple[str, ...] = ()
    escalation: Mapping[str, str] = field(default_factory=dict, hash=False)
    veto: tuple[str, ...] = ()
    domain: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "escalation", MappingProxyType(dict(self.escalation)))

    @property
    def is_templated(self) -> bool:
        return self.domain is not None

    @property
    def label(self) -> str:
        """Display label, e.g. ``"auth-part-leader"`` or ``"dba"``."""
        return f"{self.domain}-{self.role_id}" if self.domain else self.role_id


# ---------------------------------------------------------------------------
# Static roles
# ---------------------------------------------------------------------------

STATIC_ROLES: dict[str, RoleDefinition] = {
    "project-manager": RoleDefinition(
        role_id="project-manager",
        read=("**/*",),
        write=(
            "management/requests/to-*/**",
            "management/meetings/**",
            "management/decisions/**",
        ),
        cannot=(
            "src/**",
            "contracts/standards/**",
            "design/**",
            "database/**",
            "qa/**",
        ),
        escalation={
            "src/**": "Domain Part Leader/Developer",
            "contracts/standards/**": "Chief Architect",
            "design/**": "Chief Designer",
            "database/**": "DBA",
        },
    ),
    "chief-architect": RoleDefinition(
        role_id="chief-architect",
        read=("**/*",),
        write=(
            "contracts/standards/**",
            "management/decisions/**",
        ),
        cannot=(
            "src/**",
            "design/**",
            "database/schema/**",
        ),
        escalation={
            "src/**": "Domain Developer",
            "design/**": "Chief Designer",
            "database/schema/**": "DBA",
        },
        veto=(
            "architecture-violation",
            "tech-standard-violation",
            "security-vulnerability",
        ),
    ),
    "chief-designer": RoleDefinition(
        role_id="chief-designer",
        read=("**/*",),
        write=(
            "contracts/standards/design-system.md",
            "design/**",
        ),
        cannot=(
            "src/**",
            "contracts/standards/coding-standards.md",
            "contracts/standards/api-standards.md",
            "contracts/standards/database-standards.md",
            "database/**",
        ),
        escalation={
            "src/**": "Domain Developer",
            "contracts/standards/coding-standards.md": "Chief Architect",
            "database/**": "DBA",
        },
        veto=(
            "design-guide-violation",
            "inconsistent-ui",
        ),
    ),
    "dba": RoleDefinition(
        role_id="dba",
        read=("**/*",),
        write=(
            "contracts/standards/database-standards.md",
            "database/schema/**",
            "database/**",
        ),
        cannot=(
            "src/**/services/**",
            "src/**/routes/**",
            "design/**",
        ),
        escalation={
            "src/**": "Domain Developer",
            "design/**": "Chief Designer",
        },
        veto=(
            "data-standard-violation",
            "dangerous-migration",
            "performance-issue-schema",
        ),
    ),
    "qa-manager": RoleDefinition(
        role_id="qa-manager",
        read=("**/*",),
        write=(
            "qa/**",
            "management/responses/from-qa/**",
        ),
        cannot=(
            "src/**",
            "contracts/standards/**",
            "design/**",
            "database/schema/**",
        ),
        escalation={
            "src/**": "Domain Developer (via bug report)",
            "contracts/standards/**": "Chief Architect",
            "design/**": "Chief Designer",
        },
        veto=(
            "quality-gate-fail",
            "coverage-insufficient",
            "critical-bug-exists",
        ),
    ),
    "maintenance-analyst": RoleDefinition(
        role_id="maintenance-analyst",
        read=("**/*",),
        write=(
            "docs/architecture/**",
            "docs/changelog/**",
            "docs/dependencies/**",
            ".claude/architecture/**",
            ".claude/changelog/**",
            ".claude/risk-areas.yaml",
        ),
        cannot=(
            "src/**",
            "contracts/**",
            "design/**",
            "database/schema/**",
        ),
        escalation={
            "src/**": "Domain Developer",
            "contracts/**": "Chief Architect",
            "design/**": "Chief Designer",
        },
    ),
}


# ---------------------------------------------------------------------------
# Domain-templated roles
# ---------------------------------------------------------------------------


def part_leader_role(domain: str) -> RoleDefinition:
    """Build the RoleDefinition of the part leader for *domain*.

    The ``!(...)`` entries in ``cannot`` express "every domain but this one".
    That syntax is not supported by the matcher and is skipped, so other
    domains are fenced off by the domain boundary check instead.
    """
    return RoleDefinition(
        role_id=PART_LEADER,
        read=(
            "**/*",
            "contracts/interfaces/**",
            f"management/requests/to-{domain}/**",
        ),
        write=(
            f"src/domains/{domain}/**",
            "management/requests/to-*/**",
            f"contracts/interfaces/{domain}-api.yaml",
            f"management/responses/from-{domain}/**",
        ),
        cannot=(
            f"src/domains/!({domain})/**",
            "contracts/standards/**",
            f"design/**/!({domain})/**",
        ),
        escalation={
            "contracts/standards/**": "Chief Architect",
            "design/**": "Chief Designer",
            "database/schema/**": "DBA",
        },
        domain=domain,
    )


def domain_designer_role(domain: str) -> RoleDefinition:
    """Build the RoleDefinition of the designer for *domain*."""
    return RoleDefinition(
        role_id=DOMAIN_DESIGNER,
        read=(
            "contracts/standards/design-system.md",
            "design/**",
            f"src/domains/{domain}/**",
            f"contracts/interfaces/{domain}-components.yaml",
        ),
        write=(
            f"design/{domain}/**",
            f"contracts/interfaces/{domain}-components.yaml",
        ),
        cannot=(
            "contracts/standards/design-system.md",
            "src/**",
            "database/**",
        ),
        escalation={
            "contracts/standards/design-system.md": "Chief Designer",
            "src/**": "Domain Developer",
            "database/**": "DBA",
        },
        domain=domain,
    )


def domain_developer_role(domain: str) -> RoleDefinition:
    """Build the RoleDefinition of the developer for *domain*."""
    return RoleDefinition(
        role_id=DOMAIN_DEVELOPER,
        read=(
            f"src/domains/{domain}/**",
            "contracts/standards/**",
            f"contracts/interfaces/{domain}-api.yaml",
            f"contracts/interfaces/{domain}-components.yaml",
            f"design/{domain}/**",
        ),
        write=(
            f"src/domains/{domain}/**",
            f"tests/{domain}/**",
        ),
        cannot=(
            "contracts/standards/**",
            "design/**",
            "database/schema/**",
        ),
        escalation={
            "contracts/standards/**": "Chief Architect",
            "design/**": "Domain Designer / Chief Designer",
            "database/schema/**": "DBA",
        },
        domain=domain,
    )


_TEMPLATES: dict[str, Callable[[str], RoleDefinition]] = {
    PART_LEADER: part_leader_role,
    DOMAIN_DESIGNER: domain_designer_role,
    DOMAIN_DEVELOPER: domain_developer_role,
}


def resolve_role(role_id: str, domain: str | None = None) -> RoleDefinition | None:
    """Return the RoleDefinition for *role_id*, or ``None`` if unresolvable.

    Static roles ignore *domain*. Template kinds require a non-empty domain.

    Parameters
    ----------
    role_id:
        Static role identifier or template kind.
    domain:
        Domain for template kinds.

    Returns
    -------
    RoleDefinition | None
    """
    static = STATIC_ROLES.get(role_id)
    if static is not None:
        return static
    template = _TEMPLATES.get(role_id)
    if template is not None and domain:
        return template(domain)
    return None


def list_roles() -> list[str]:
    """Return the static role identifiers followed by the template kinds."""
    return [*STATIC_ROLES, *TEMPLATE_ROLE_KINDS]
