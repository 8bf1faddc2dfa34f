"""Parsing of free-text agent role labels.

The orchestration layer tells a hook which agent is acting through the
``CLAUDE_AGENT_ROLE`` (or ``CLAUDE_AGENT_NAME``) environment variable, e.g.
``"Auth Part Leader"`` or ``"payment-developer"``. This module maps such a
label onto one of a closed set of variants:

- :class:`StaticRole`      — exact static role identifier
- :class:`PartLeader`      — ``{domain}-part-leader``
- :class:`DomainDesigner`  — ``{domain}-designer`` (except ``chief``)
- :class:`DomainDeveloper` — ``{domain}-developer``
- :class:`Unresolved`      — anything else

Rules are tried in order and the static table always comes first.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Union

from aumos_team_governance.permissions.roles import (
    DOMAIN_DESIGNER,
    DOMAIN_DEVELOPER,
    PART_LEADER,
    STATIC_ROLES,
)

logger = logging.getLogger(__name__)

ROLE_ENV_VARS: tuple[str, ...] = ("CLAUDE_AGENT_ROLE", "CLAUDE_AGENT_NAME")

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class StaticRole:
    role_id: str

    @property
    def domain(self) -> None:
        return None


@dataclass(frozen=True)
class PartLeader:
    domain: str

    @property
    def role_id(self) -> str:
        return PART_LEADER


@dataclass(frozen=True)
class DomainDesigner:
    domain: str

    @property
    def role_id(self) -> str:
        return DOMAIN_DESIGNER


@dataclass(frozen=True)
class DomainDeveloper:
    domain: str

    @property
    def role_id(self) -> str:
        return DOMAIN_DEVELOPER


@dataclass(frozen=True)
class Unresolved:
    raw: str

    @property
    def role_id(self) -> None:
        return None

    @property
    def domain(self) -> None:
        return None


RoleLabel = Union[StaticRole, PartLeader, DomainDesigner, DomainDeveloper, Unresolved]


@dataclass(frozen=True)
class _SuffixRule:
    suffix: str
    build: type[PartLeader] | type[DomainDesigner] | type[DomainDeveloper]
    excluded: frozenset[str] = frozenset()

    def apply(self, label: str) -> RoleLabel | None:
        if not label.endswith(self.suffix):
            return None
        domain = label[: -len(self.suffix)]
        if not domain or domain in self.excluded:
            return None
        return self.build(domain)


# "chief-designer" is a static role, never the designer of a "chief" domain.
_SUFFIX_RULES: tuple[_SuffixRule, ...] = (
    _SuffixRule("-part-leader", PartLeader),
    _SuffixRule("-designer", DomainDesigner, frozenset({"chief"})),
    _SuffixRule("-developer", DomainDeveloper),
)


def normalize_label(raw: str) -> str:
    """Lowercase *raw* and replace whitespace runs with hyphens."""
    return _WHITESPACE.sub("-", raw.strip().lower())


def parse_role_label(raw: str) -> RoleLabel:
    """Map a free-text role label to a :data:`RoleLabel` variant.

    Example
    -------
    >>> parse_role_label("Auth Part Leader")
    PartLeader(domain='auth')
    >>> parse_role_label("chief-designer")
    StaticRole(role_id='chief-designer')
    """
    label = normalize_label(raw)
    if label in STATIC_ROLES:
        return StaticRole(label)
    for rule in _SUFFIX_RULES:
        parsed = rule.apply(label)
        if parsed is not None:
            return parsed
    return Unresolved(raw)


def detect_agent_role(environ: Mapping[str, str]) -> RoleLabel | None:
    """Read the acting agent's role label from *environ*.

    ``CLAUDE_AGENT_ROLE`` takes priority over ``CLAUDE_AGENT_NAME``.

    Returns
    -------
    RoleLabel | None
        ``None`` when neither variable is set; otherwise the parsed label,
        which may be :class:`Unresolved`.
    """
    for name in ROLE_ENV_VARS:
        value = environ.get(name)
        if value:
            parsed = parse_role_label(value)
            logger.debug("Agent role %r from %s parsed as %r", value, name, parsed)
            return parsed
    return None
