"""Risk classification of project-relative file paths.

RiskClassifier returns the single highest-priority risk area whose
patterns match a path. Files outside every area are *unclassified*
(``None``), which is not the same thing as a LOW classification.

Example
-------
>>> classifier = RiskClassifier()
>>> classifier.classify("services/billing/core/processor.py").level
<RiskLevel.CRITICAL: 'CRITICAL'>
>>> classifier.classify("README.md") is None
True
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from aumos_team_governance.matching.pattern_set import PatternMatcher
from aumos_team_governance.risk.areas import DEFAULT_RISK_AREAS, RiskArea, RiskLevel

logger = logging.getLogger(__name__)

UNCLASSIFIED = "NONE"

_CRITICAL_CHECKLIST: tuple[str, ...] = (
    "Verify no financial/monetary calculation errors",
    "Confirm no security vulnerabilities introduced",
    "Check authentication/authorization logic is intact",
    "Ensure full test coverage for modified code paths",
    "Review for sensitive data exposure (PII, credentials)",
    "Validate input sanitization and output encoding",
)

_HIGH_CHECKLIST: tuple[str, ...] = (
    "Verify backward compatibility with existing consumers",
    "Check for cascading side effects in dependent modules",
    "Run full test suite for the affected service domain",
    "Review shared state and concurrency implications",
)


@dataclass(frozen=True)
class RiskAnalysis:
    """Full risk assessment of one path.

    Attributes
    ----------
    path:
        The project-relative path.
    area:
        The winning risk area.
    matched_patterns:
        Every pattern of ``area`` that matched, for reporting.
    checklist:
        Confirmation items (CRITICAL and HIGH only).
    """

    path: str
    area: RiskArea
    matched_patterns: tuple[str, ...] = ()
    checklist: tuple[str, ...] = field(default_factory=tuple)

    @property
    def level(self) -> RiskLevel:
        return self.area.level

    @property
    def reviewers(self) -> tuple[str, ...]:
        return self.area.reviewers

    @property
    def reason(self) -> str:
        return self.area.reason

    @property
    def requires_review(self) -> bool:
        return self.area.level.requires_review


def generate_checklist(level: RiskLevel, area: RiskArea | None = None) -> list[str]:
    """Return the confirmation checklist for an edit at *level*.

    CRITICAL and HIGH levels get a fixed list of checks. Any level gets a
    final approval item when *area* names reviewers.
    """
    checklist: list[str] = []
    if level is RiskLevel.CRITICAL:
        checklist.extend(_CRITICAL_CHECKLIST)
    elif level is RiskLevel.HIGH:
        checklist.extend(_HIGH_CHECKLIST)

    if area is not None and area.reviewers:
        checklist.append(
            f"Obtain approval from required reviewers: {', '.join(area.reviewers)}"
        )
    return checklist


class RiskClassifier:
    """Classifies paths against a prioritised list of risk areas.

    Parameters
    ----------
    areas:
        Risk areas to classify against. Defaults to
        :data:`~aumos_team_governance.risk.areas.DEFAULT_RISK_AREAS`.
    matcher:
        Pattern matcher to use; a fresh one is created when omitted.
    """

    def __init__(
        self,
        areas: Sequence[RiskArea] | None = None,
        matcher: PatternMatcher | None = None,
    ) -> None:
        self._areas: tuple[RiskArea, ...] = tuple(
            areas if areas is not None else DEFAULT_RISK_AREAS
        )
        self._matcher = matcher or PatternMatcher()

    @property
    def areas(self) -> tuple[RiskArea, ...]:
        return self._areas

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def classify(
        self,
        path: str,
        areas: Sequence[RiskArea] | None = None,
    ) -> RiskArea | None:
        """Return the highest-priority area matching *path*.

        Areas that cannot beat the current best are skipped without testing
        their patterns. Among areas of the same level the first one listed
        wins.

        Parameters
        ----------
        path:
            Project-relative path.
        areas:
            Overrides the classifier's own areas for this call.

        Returns
        -------
        RiskArea | None
            ``None`` when the path is unclassified.
        """
        if not path:
            return None

        best: RiskArea | None = None
        for area in self._areas if areas is None else areas:
            if best is not None and area.priority >= best.priority:
                continue
            if self._matcher.matches_any(path, area.patterns):
                best = area

        logger.debug(
            "Risk classification: path=%s level=%s",
            path,
            best.level.value if best else UNCLASSIFIED,
        )
        return best

    def find_matched_patterns(self, path: str, area: RiskArea | None) -> list[str]:
        """Return every pattern of *area* that matches *path*."""
        if not path or area is None:
            return []
        return self._matcher.find_all(path, area.patterns)

    def level_for(self, path: str) -> str:
        """Return the level name for *path*, or ``"NONE"`` when unclassified."""
        area = self.classify(path)
        return area.level.value if area else UNCLASSIFIED

    def analyze(self, path: str) -> RiskAnalysis | None:
        """Classify *path* and gather reporting details.

        Returns
        -------
        RiskAnalysis | None
            ``None`` when the path is unclassified.
        """
        area = self.classify(path)
        if area is None:
            return None

        checklist = generate_checklist(area.level, area) if area.level.requires_review else []
        return RiskAnalysis(
            path=path,
            area=area,
            matched_patterns=tuple(self.find_matched_patterns(path, area)),
            checklist=tuple(checklist),
        )
