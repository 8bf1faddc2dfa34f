"""Risk levels and risk-area definitions.

A risk area groups glob patterns under one risk level together with the
reviewers it requires and a human-readable reason. Levels are totally
ordered, CRITICAL first:

    CRITICAL (0) > HIGH (1) > MEDIUM (2) > LOW (3)

Lower priority numbers take precedence when a path matches several areas.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RiskLevel(str, Enum):
    """Risk classification levels, highest precedence first."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @property
    def priority(self) -> int:
        """Precedence rank; 0 is the highest."""
        return _PRIORITY[self]

    @property
    def requires_review(self) -> bool:
        return self in (RiskLevel.CRITICAL, RiskLevel.HIGH)

    @classmethod
    def parse(cls, value: str) -> RiskLevel | None:
        """Return the level named by *value* (case-insensitive), or ``None``."""
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


_PRIORITY: dict[RiskLevel, int] = {
    RiskLevel.CRITICAL: 0,
    RiskLevel.HIGH: 1,
    RiskLevel.MEDIUM: 2,
    RiskLevel.LOW: 3,
}

RISK_LABELS: dict[RiskLevel, str] = {level: f"[{level.value}]" for level in RiskLevel}


@dataclass(frozen=True)
class RiskArea:
    """A prioritised group of path patterns.

    Attributes
    ----------
    level:
        Risk level of every path in the area.
    patterns:
        Glob patterns selecting the area's paths.
    reviewers:
        Reviewer identifiers that must approve changes.
    reason:
        Why the area is risky.
    """

    level: RiskLevel
    patterns: tuple[str, ...]
    reviewers: tuple[str, ...] = ()
    reason: str = ""

    @property
    def priority(self) -> int:
        return self.level.priority


DEFAULT_RISK_AREAS: tuple[RiskArea, ...] = (
    RiskArea(
        level=RiskLevel.CRITICAL,
        patterns=(
            "**/payment/**",
            "**/billing/**",
            "**/auth/**",
        ),
        reviewers=("qa-manager", "chief-architect"),
        reason=(
            "Financial transaction or authentication/authorization logic. "
            "Bugs here can cause monetary loss, data breaches, or security vulnerabilities."
        ),
    ),
    RiskArea(
        level=RiskLevel.HIGH,
        patterns=(
            "**/services/*_service.py",
            "**/services/*_service.js",
            "**/services/*_service.ts",
            "**/core/**",
        ),
        reviewers=("part-leader",),
        reason=(
            "Core business logic or shared service layer. "
            "Changes propagate to multiple consumers and may cause cascading failures."
        ),
    ),
    RiskArea(
        level=RiskLevel.MEDIUM,
        patterns=(
            "**/api/**",
            "**/models/**",
        ),
        reason=(
            "API interface or data model layer. "
            "Changes may break contract compatibility with clients or data integrity."
        ),
    ),
    RiskArea(
        level=RiskLevel.LOW,
        patterns=(
            "**/tests/**",
            "**/utils/**",
        ),
        reason="Test or utility code with minimal blast radius. Standard review applies.",
    ),
)
