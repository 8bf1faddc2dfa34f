"""Glob pattern compiler for project-relative file paths.

Translates filesystem-style wildcard patterns into anchored regular
expressions. Patterns are first parsed into a small tree of nodes and then
rendered, so alternation groups are compiled by structural recursion
rather than by splicing regex strings together.

Supported syntax
----------------
- ``**``     zero or more complete path segments when bounded by ``/``
             (or the start/end of the pattern). ``a/**/b`` matches ``a/b``.
             When not segment-bounded it degrades to two single-segment
             wildcards and never crosses ``/``.
- ``*``      any run of characters within one segment.
- ``?``      exactly one character other than ``/``.
- ``{a,b}``  alternation; each alternative is itself a pattern.
- ``[...]``  character class, passed through to the regex engine.

Unterminated ``{`` or ``[`` are matched literally. Compilation never
raises: a pattern the regex engine rejects degrades to an exact literal
match of the pattern text.

Example
-------
>>> matcher = compile_glob("src/**/models/*.py")
>>> matcher.test("src/models/user.py")
True
>>> matcher.test("src/domains/auth/models/user.py")
True
>>> matcher.test("src/models/sub/user.py")
False
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger(__name__)

_SEPARATOR = "/"


# ---------------------------------------------------------------------------
# Pattern tree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Literal:
    """Text matched character for character."""

    text: str


@dataclass(frozen=True)
class SegmentWildcard:
    """``*`` — any run of characters inside a single path segment."""


@dataclass(frozen=True)
class CharWildcard:
    """``?`` — exactly one character other than the separator."""


@dataclass(frozen=True)
class Globstar:
    """Segment-bounded ``**``.

    Attributes
    ----------
    consumes_separator:
        ``True`` for ``**/`` (zero or more whole segments, the trailing
        separator included). ``False`` for a trailing ``**`` which matches
        the whole remainder of the path.
    """

    consumes_separator: bool


@dataclass(frozen=True)
class InlineDoubleStar:
    """``**`` that is not bounded by separators."""


@dataclass(frozen=True)
class CharClass:
    """``[...]`` passed through to the regex engine unchanged."""

    body: str


@dataclass(frozen=True)
class Alternation:
    """``{a,b,...}`` — each option is a parsed sub-pattern."""

    options: tuple[tuple["GlobNode", ...], ...]


GlobNode = Union[
    Literal,
    SegmentWildcard,
    CharWildcard,
    Globstar,
    InlineDoubleStar,
    CharClass,
    Alternation,
]


def normalize_separators(value: str) -> str:
    """Return *value* with Windows separators replaced by ``/``."""
    return value.replace("\\", _SEPARATOR)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_glob(pattern: str) -> tuple[GlobNode, ...]:
    """Parse a glob pattern into a tuple of nodes.

    Adjacent literal characters are merged into a single :class:`Literal`.

    Parameters
    ----------
    pattern:
        Glob pattern using ``/`` separators.

    Returns
    -------
    tuple[GlobNode, ...]
    """
    nodes: list[GlobNode] = []
    pending: list[str] = []

    def flush() -> None:
        if pending:
            nodes.append(Literal("".join(pending)))
            pending.clear()

    length = len(pattern)
    index = 0
    while index < length:
        char = pattern[index]

        if char == "*":
            flush()
            if index + 1 < length and pattern[index + 1] == "*":
                after = index + 2
                left_bounded = index == 0 or pattern[index - 1] == _SEPARATOR
                right_bounded = after >= length or pattern[after] == _SEPARATOR
                if left_bounded and right_bounded:
                    if after < length:
                        nodes.append(Globstar(consumes_separator=True))
                        index = after + 1
                    else:
                        nodes.append(Globstar(consumes_separator=False))
                        index = after
                else:
                    nodes.append(InlineDoubleStar())
                    index = after
            else:
                nodes.append(SegmentWildcard())
                index += 1

        elif char == "?":
            flush()
            nodes.append(CharWildcard())
            index += 1

        elif char == "{":
            close = pattern.find("}", index)
            if close == -1:
                pending.append(char)
                index += 1
            else:
                flush()
                options = pattern[index + 1 : close].split(",")
                nodes.append(
                    Alternation(options=tuple(parse_glob(option) for option in options))
                )
                index = close + 1

        elif char == "[":
            close = pattern.find("]", index)
            if close == -1:
                pending.append(char)
                index += 1
            else:
                flush()
                nodes.append(CharClass(body=pattern[index : close + 1]))
                index = close + 1

        else:
            pending.append(char)
            index += 1

    flush()
    return tuple(nodes)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _render_node(node: GlobNode) -> str:
    if isinstance(node, Literal):
        return re.escape(node.text)
    if isinstance(node, SegmentWildcard):
        return "[^/]*"
    if isinstance(node, CharWildcard):
        return "[^/]"
    if isinstance(node, Globstar):
        return "(?:.+/)?" if node.consumes_separator else ".*"
    if isinstance(node, InlineDoubleStar):
        return "[^/]*[^/]*"
    if isinstance(node, CharClass):
        return node.body
    if isinstance(node, Alternation):
        return "(?:" + "|".join(render_regex(option) for option in node.options) + ")"
    raise TypeError(f"Unknown glob node: {node!r}")


def render_regex(nodes: tuple[GlobNode, ...]) -> str:
    """Render parsed nodes to an unanchored regular expression source."""
    return "".join(_render_node(node) for node in nodes)


# ---------------------------------------------------------------------------
# Compiled matcher
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GlobMatcher:
    """A compiled glob pattern.

    Attributes
    ----------
    pattern:
        The normalised pattern text.
    regex:
        The compiled expression; always applied with full-string matching.
    literal_fallback:
        ``True`` when the pattern could not be compiled as a glob and is
        matched as exact text instead.
    """

    pattern: str
    regex: re.Pattern[str]
    literal_fallback: bool = False

    def test(self, path: str) -> bool:
        """Return True if *path* matches the whole pattern."""
        return self.regex.fullmatch(normalize_separators(path)) is not None

    def __call__(self, path: str) -> bool:
        return self.test(path)


def compile_glob(pattern: str) -> GlobMatcher:
    """Compile a glob *pattern* into a :class:`GlobMatcher`.

    Compilation is deterministic and side-effect free. The empty pattern
    matches only the empty path.

    Parameters
    ----------
    pattern:
        Glob pattern. Backslashes are treated as path separators.

    Returns
    -------
    GlobMatcher
    """
    normalized = normalize_separators(pattern or "")
    source = render_regex(parse_glob(normalized))
    try:
        return GlobMatcher(pattern=normalized, regex=re.compile(source))
    except re.error as exc:
        logger.debug(
            "Glob %r rendered an invalid regex (%s); matching it literally.",
            normalized,
            exc,
        )
        return GlobMatcher(
            pattern=normalized,
            regex=re.compile(re.escape(normalized)),
            literal_fallback=True,
        )
