"""Domain boundary detection for domain-scoped agents.

Three directory roots encode a domain in their second segment:

- ``src/domains/<domain>/...``
- ``tests/<domain>/...``
- ``design/<domain>/...``

An agent scoped to one domain must not modify files under another
domain's subtree. Paths outside these roots never violate a boundary.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

DOMAIN_ROOTS: tuple[str, ...] = ("src/domains", "tests", "design")


@dataclass(frozen=True)
class BoundaryCheck:
    """Outcome of a domain boundary check.

    Attributes
    ----------
    violation:
        True when the path belongs to a domain other than the agent's.
    target_domain:
        The foreign domain, or ``None`` when there is no violation.
    """

    violation: bool
    target_domain: str | None = None


_NO_VIOLATION = BoundaryCheck(violation=False)


class DomainBoundaryChecker:
    """Detects writes into another domain's subtree.

    Parameters
    ----------
    roots:
        Directory roots whose next segment names a domain.
    """

    def __init__(self, roots: tuple[str, ...] = DOMAIN_ROOTS) -> None:
        self._roots = roots
        self._patterns = [
            re.compile(rf"^{re.escape(root.strip('/'))}/([^/]+)/") for root in roots
        ]

    @property
    def roots(self) -> tuple[str, ...]:
        return self._roots

    def domain_of(self, path: str) -> str | None:
        """Return the domain encoded in *path*, or ``None``."""
        for pattern in self._patterns:
            found = pattern.match(path)
            if found:
                return found.group(1)
        return None

    def check(self, path: str, agent_domain: str | None) -> BoundaryCheck:
        """Check *path* against the agent's own domain.

        Parameters
        ----------
        path:
            Project-relative path.
        agent_domain:
            Domain of the acting agent; ``None`` disables the check.

        Returns
        -------
        BoundaryCheck
        """
        if not agent_domain:
            return _NO_VIOLATION
        target = self.domain_of(path)
        if target is None or target == agent_domain:
            return _NO_VIOLATION
        return BoundaryCheck(violation=True, target_domain=target)


def check_boundary(path: str, agent_domain: str | None) -> BoundaryCheck:
    """Check *path* against *agent_domain* using the default roots."""
    return DomainBoundaryChecker().check(path, agent_domain)
