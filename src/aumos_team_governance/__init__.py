"""aumos-team-governance — Path permissions and risk areas for multi-agent project teams.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import aumos_team_governance as gov
>>> gov.__version__
'0.1.0'
>>> resolver = gov.PermissionResolver()
>>> resolver.check("domain-developer", "auth", "src/domains/auth/models/user.py").allowed
True
>>> gov.RiskClassifier().classify("README.md") is None
True
"""
from __future__ import annotations

__version__: str = "0.1.0"

from aumos_team_governance.convenience import TeamGovernor

# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------
from aumos_team_governance.matching.glob_compiler import GlobMatcher, compile_glob
from aumos_team_governance.matching.pattern_set import PatternMatcher

# ---------------------------------------------------------------------------
# Permissions
# ---------------------------------------------------------------------------
from aumos_team_governance.permissions.domain_boundary import (
    BoundaryCheck,
    DomainBoundaryChecker,
)
from aumos_team_governance.permissions.resolver import (
    DenialKind,
    PermissionResolver,
    PermissionVerdict,
)
from aumos_team_governance.permissions.role_parser import (
    RoleLabel,
    detect_agent_role,
    parse_role_label,
)
from aumos_team_governance.permissions.roles import RoleDefinition, resolve_role

# ---------------------------------------------------------------------------
# Risk
# ---------------------------------------------------------------------------
from aumos_team_governance.risk.areas import DEFAULT_RISK_AREAS, RiskArea, RiskLevel
from aumos_team_governance.risk.classifier import RiskAnalysis, RiskClassifier
from aumos_team_governance.risk.loader import RiskAreaLoader, RiskConfigError

__all__ = [
    "__version__",
    "TeamGovernor",
    # Matching
    "GlobMatcher",
    "PatternMatcher",
    "compile_glob",
    # Permissions
    "BoundaryCheck",
    "DenialKind",
    "DomainBoundaryChecker",
    "PermissionResolver",
    "PermissionVerdict",
    "RoleDefinition",
    "RoleLabel",
    "detect_agent_role",
    "parse_role_label",
    "resolve_role",
    # Risk
    "DEFAULT_RISK_AREAS",
    "RiskAnalysis",
    "RiskArea",
    "RiskAreaLoader",
    "RiskClassifier",
    "RiskConfigError",
    "RiskLevel",
]
