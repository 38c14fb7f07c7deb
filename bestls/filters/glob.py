"""Glob-style filename patterns for ``--filter-name``.

Supports ``*``, ``?``, ``[abc]`` and ``[!abc]``. Patterns are matched
against bare filenames only, case-sensitively.
"""

from __future__ import annotations

import fnmatch
import re
from dataclasses import dataclass

from ..errors import InvalidPatternError


def _check_character_classes(pattern: str) -> None:
    """Reject patterns with an unterminated ``[`` class."""
    i = 0
    n = len(pattern)
    while i < n:
        if pattern[i] != "[":
            i += 1
            continue
        j = i + 1
        if j < n and pattern[j] == "!":
            j += 1
        # A leading ``]`` is a literal member of the class.
        if j < n and pattern[j] == "]":
            j += 1
        while j < n and pattern[j] != "]":
            j += 1
        if j >= n:
            raise InvalidPatternError(pattern, f"unterminated character class at position {i}")
        i = j + 1


@dataclass(frozen=True)
class GlobMatcher:
    """Compiled glob pattern."""

    pattern: str
    regex: re.Pattern[str]

    def matches(self, name: str) -> bool:
        """Return whether the whole of ``name`` matches the pattern."""
        return self.regex.match(name) is not None


def compile_glob(pattern: str) -> GlobMatcher:
    """Validate and compile ``pattern``.

    Raises ``InvalidPatternError`` for empty patterns and unterminated
    character classes.
    """
    if not pattern:
        raise InvalidPatternError(pattern, "pattern is empty")
    _check_character_classes(pattern)
    try:
        regex = re.compile(fnmatch.translate(pattern))
    except re.error as exc:
        raise InvalidPatternError(pattern, str(exc)) from exc
    return GlobMatcher(pattern=pattern, regex=regex)


__all__ = [
    "GlobMatcher",
    "compile_glob",
]
