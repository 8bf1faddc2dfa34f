"""Write-permission resolution for team agents.

PermissionResolver combines the role model, the domain boundary checker
and the pattern matcher into a single verdict. Rules are applied in a fixed
order and the first applicable one wins:

1. Unresolvable role              -> deny (``unknown-role``)
2. Write into another domain      -> deny (``domain-boundary``)
3. Path in a restricted area      -> deny (``restricted-area``)
4. Path in the role's write set   -> allow
5. Anything else                  -> deny (``not-in-write-paths``)

``cannot`` is checked before ``write`` because some write patterns are
broad (the project manager's ``management/requests/to-*/**``) and the
restricted subtrees must win wherever the two overlap.

Example
-------
::

    resolver = PermissionResolver()
    verdict = resolver.check("domain-developer", "auth", "src/domains/payment/order.py")
    verdict.allowed      # False
    verdict.kind         # DenialKind.DOMAIN_BOUNDARY
    verdict.escalation   # 'payment-part-leader'
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from aumos_team_governance.matching.pattern_set import PatternMatcher
from aumos_team_governance.permissions.domain_boundary import DomainBoundaryChecker
from aumos_team_governance.permissions.roles import RoleDefinition, resolve_role

if TYPE_CHECKING:
    from aumos_team_governance.permissions.role_parser import RoleLabel

logger = logging.getLogger(__name__)


class DenialKind(str, Enum):
    """Why a write was denied."""

    UNKNOWN_ROLE = "unknown-role"
    DOMAIN_BOUNDARY = "domain-boundary"
    RESTRICTED_AREA = "restricted-area"
    NOT_IN_WRITE_PATHS = "not-in-write-paths"


@dataclass(frozen=True)
class PermissionVerdict:
    """Immutable result of a write-permission check.

    Attributes
    ----------
    allowed:
        Whether the write is permitted.
    path:
        The project-relative path that was evaluated.
    role_id:
        Role identifier the check ran under.
    domain:
        Domain of the acting agent, if any.
    reason:
        Explanation of a denial; ``None`` when allowed.
    escalation:
        Role to request the change from, when one is known.
    kind:
        Denial category; ``None`` when allowed.
    """

    allowed: bool
    path: str
    role_id: str | None = None
    domain: str | None = None
    reason: str | None = None
    escalation: str | None = None
    kind: DenialKind | None = None

    def __bool__(self) -> bool:
        return self.allowed

    def to_dict(self) -> dict[str, object]:
        """Return ``{allowed, reason?, escalation?, type?}``."""
        data: dict[str, object] = {"allowed": self.allowed}
        if self.reason is not None:
            data["reason"] = self.reason
        if self.escalation is not None:
            data["escalation"] = self.escalation
        if self.kind is not None:
            data["type"] = self.kind.value
        return data


class PermissionResolver:
    """Evaluates whether a role may write a project-relative path.

    Parameters
    ----------
    matcher:
        Pattern matcher to use. A fresh one (with its own compilation
        cache) is created when omitted.
    boundary_checker:
        Domain boundary checker. Defaults to the standard domain roots.
    """

    def __init__(
        self,
        matcher: PatternMatcher | None = None,
        boundary_checker: DomainBoundaryChecker | None = None,
    ) -> None:
        self._matcher = matcher or PatternMatcher()
        self._boundary = boundary_checker or DomainBoundaryChecker()

    @property
    def matcher(self) -> PatternMatcher:
        return self._matcher

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check(self, role_id: str, domain: str | None, path: str) -> PermissionVerdict:
        """Evaluate write permission for *path* under *role_id*.

        Parameters
        ----------
        role_id:
            Static role identifier or template kind.
        domain:
            Agent domain for templated roles. Blank values mean no domain.
        path:
            Project-relative path with ``/`` separators.

        Returns
        -------
        PermissionVerdict
        """
        domain = domain or None
        role = resolve_role(role_id, domain)
        if role is None:
            return self._deny(
                role_id,
                domain,
                path,
                DenialKind.UNKNOWN_ROLE,
                f'Unknown role "{role_id}" has no defined permissions.',
            )

        if domain:
            boundary = self._boundary.check(path, domain)
            if boundary.violation:
                return self._deny(
                    role_id,
                    domain,
                    path,
                    DenialKind.DOMAIN_BOUNDARY,
                    f'Domain boundary violation: "{domain}" agent cannot modify '
                    f'"{boundary.target_domain}" domain files.',
                    escalation=f"{boundary.target_domain}-part-leader",
                )

        if self._matcher.matches_any(path, role.cannot):
            return self._deny(
                role_id,
                domain,
                path,
                DenialKind.RESTRICTED_AREA,
                f'File path "{path}" is in a restricted area for role "{role_id}".',
                escalation=self._escalation(role, path),
            )

        if self._matcher.matches_any(path, role.write):
            logger.debug("Permission ALLOW: role=%s domain=%s path=%s", role_id, domain, path)
            return PermissionVerdict(allowed=True, path=path, role_id=role_id, domain=domain)

        return self._deny(
            role_id,
            domain,
            path,
            DenialKind.NOT_IN_WRITE_PATHS,
            f'File path "{path}" is not in the allowed write paths for role "{role_id}".',
            escalation=self._escalation(role, path),
        )

    def check_label(self, label: RoleLabel, path: str) -> PermissionVerdict:
        """Evaluate write permission for a parsed role label.

        An :class:`~aumos_team_governance.permissions.role_parser.Unresolved`
        label yields an ``unknown-role`` denial.
        """
        role_id = label.role_id
        if role_id is None:
            return self._deny(
                None,
                None,
                path,
                DenialKind.UNKNOWN_ROLE,
                f'Unknown role "{getattr(label, "raw", label)}" has no defined permissions.',
            )
        return self.check(role_id, label.domain, path)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _escalation(self, role: RoleDefinition, path: str) -> str | None:
        return self._matcher.find_first(path, role.escalation)

    def _deny(
        self,
        role_id: str | None,
        domain: str | None,
        path: str,
        kind: DenialKind,
        reason: str,
        escalation: str | None = None,
    ) -> PermissionVerdict:
        logger.debug(
            "Permission DENY (%s): role=%s domain=%s path=%s escalation=%s",
            kind.value,
            role_id,
            domain,
            path,
            escalation,
        )
        return PermissionVerdict(
            allowed=False,
            path=path,
            role_id=role_id,
            domain=domain,
            reason=reason,
            escalation=escalation,
            kind=kind,
        )


def check_permission(role_id: str, domain: str | None, path: str) -> PermissionVerdict:
    """Evaluate write permission with a throwaway :class:`PermissionResolver`."""
    return PermissionResolver().check(role_id, domain, path)
