"""ANSI-aware text measurement for aligned terminal output.

Escape sequences are ignored when measuring, combining marks take no
columns, and East Asian wide characters take two.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    """Remove every ANSI escape sequence from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def pad_ansi(text: str, width: int) -> str:
    """Left-align ``text`` in ``width`` columns, padding with spaces."""
    return text + " " * max(0, width - display_width(text))


__all__ = [
    "ANSI_ESCAPE_RE",
    "TAB_STOP",
    "char_display_width",
    "strip_ansi",
    "display_width",
    "pad_ansi",
]
