"""Role-based write permissions for team agents.

Example
-------
::

    from aumos_team_governance.permissions import PermissionResolver, parse_role_label

    resolver = PermissionResolver()
    label = parse_role_label("Auth Developer")
    verdict = resolver.check_label(label, "src/domains/auth/models/user.py")
    assert verdict.allowed
"""
from __future__ import annotations

from aumos_team_governance.permissions.domain_boundary import (
    DOMAIN_ROOTS,
    BoundaryCheck,
    DomainBoundaryChecker,
    check_boundary,
)
from aumos_team_governance.permissions.resolver import (
    DenialKind,
    PermissionResolver,
    PermissionVerdict,
    check_permission,
)
from aumos_team_governance.permissions.role_parser import (
    DomainDesigner,
    DomainDeveloper,
    PartLeader,
    RoleLabel,
    StaticRole,
    Unresolved,
    detect_agent_role,
    parse_role_label,
)
from aumos_team_governance.permissions.roles import (
    STATIC_ROLES,
    TEMPLATE_ROLE_KINDS,
    RoleDefinition,
    list_roles,
    resolve_role,
)

__all__ = [
    # Role model
    "RoleDefinition",
    "STATIC_ROLES",
    "TEMPLATE_ROLE_KINDS",
    "list_roles",
    "resolve_role",
    # Label parsing
    "DomainDesigner",
    "DomainDeveloper",
    "PartLeader",
    "RoleLabel",
    "StaticRole",
    "Unresolved",
    "detect_agent_role",
    "parse_role_label",
    # Domain boundary
    "BoundaryCheck",
    "DOMAIN_ROOTS",
    "DomainBoundaryChecker",
    "check_boundary",
    # Resolver
    "DenialKind",
    "PermissionResolver",
    "PermissionVerdict",
    "check_permission",
]
