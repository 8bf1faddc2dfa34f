"""Pattern-set matching with a per-instance compilation cache.

PatternMatcher tests a path against collections of glob patterns. Each
instance owns its own memoisation table keyed by the literal pattern
string, so compiled matchers are shared between calls on the same
instance but never between instances.

Patterns containing the negation marker ``!(`` are not supported. They are
skipped during matching and never contribute a match.

Example
-------
::

    matcher = PatternMatcher()
    matcher.matches_any("src/domains/auth/user.py", ["src/**", "docs/**"])
    # True
    matcher.find_first("design/auth/ui.md", {"src/**": "Developer", "design/**": "Chief Designer"})
    # 'Chief Designer'
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from aumos_team_governance.matching.glob_compiler import GlobMatcher, compile_glob

logger = logging.getLogger(__name__)

NEGATION_MARKER = "!("


def is_negated(pattern: str) -> bool:
    """Return True if *pattern* uses the unsupported ``!(...)`` syntax."""
    return NEGATION_MARKER in pattern


class PatternMatcher:
    """Matches paths against ordered or unordered glob pattern collections."""

    def __init__(self) -> None:
        self._cache: dict[str, GlobMatcher] = {}

    # ------------------------------------------------------------------
    # Compilation
    # ------------------------------------------------------------------

    def compile(self, pattern: str) -> GlobMatcher:
        """Return the cached matcher for *pattern*, compiling it on first use."""
        matcher = self._cache.get(pattern)
        if matcher is None:
            matcher = compile_glob(pattern)
            self._cache[pattern] = matcher
        return matcher

    @property
    def cache_size(self) -> int:
        """Number of distinct patterns compiled by this instance."""
        return len(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def matches(self, path: str, pattern: str) -> bool:
        """Return True if *path* matches a single *pattern*.

        Negated patterns and empty paths never match.
        """
        if not path or is_negated(pattern):
            return False
        return self.compile(pattern).test(path)

    def matches_any(self, path: str, patterns: Iterable[str] | None) -> bool:
        """Return True if *path* matches at least one of *patterns*.

        Parameters
        ----------
        path:
            Project-relative path.
        patterns:
            Glob patterns. ``None`` or an empty collection never matches.

        Returns
        -------
        bool
        """
        if not patterns:
            return False
        return any(self.matches(path, pattern) for pattern in patterns)

    def find_first(self, path: str, labelled: Mapping[str, str] | None) -> str | None:
        """Return the label of the first pattern in *labelled* matching *path*.

        Entries are tried in insertion order; the first match wins.

        Parameters
        ----------
        path:
            Project-relative path.
        labelled:
            Mapping of pattern to label (e.g. an escalation map).

        Returns
        -------
        str | None
            The label, or ``None`` when no pattern matches.
        """
        if not labelled:
            return None
        for pattern, label in labelled.items():
            if self.matches(path, pattern):
                return label
        return None

    def find_all(self, path: str, patterns: Iterable[str] | None) -> list[str]:
        """Return every pattern in *patterns* that matches *path*, in order."""
        if not patterns:
            return []
        return [pattern for pattern in patterns if self.matches(path, pattern)]
