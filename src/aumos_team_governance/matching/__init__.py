"""Glob compilation and pattern-set matching for project-relative paths.

Example
-------
::

    from aumos_team_governance.matching import PatternMatcher, compile_glob

    assert compile_glob("a/**/b").test("a/b")
    assert PatternMatcher().matches_any("src/x.py", ["src/*.py"])
"""
from __future__ import annotations

from aumos_team_governance.matching.glob_compiler import (
    GlobMatcher,
    compile_glob,
    normalize_separators,
    parse_glob,
)
from aumos_team_governance.matching.pattern_set import (
    NEGATION_MARKER,
    PatternMatcher,
    is_negated,
)

__all__ = [
    "GlobMatcher",
    "NEGATION_MARKER",
    "PatternMatcher",
    "compile_glob",
    "is_negated",
    "normalize_separators",
    "parse_glob",
]
