"""Rounded-border table rendering for entry records.

Column colors come from ``Theme.table``; cells are measured with
``display_width`` so wide characters and escapes keep borders aligned.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..errors import InvalidColumnsError
from ..listing.types import EntryRecord
from ..theme import Theme, colorize
from .ansi import display_width, pad_ansi


@dataclass(frozen=True)
class Column:
    """One table column: selector key, header text, cell value, color slot."""

    key: str
    header: str
    value: Callable[[EntryRecord], str]
    color: Callable[[Theme], str] | None = None


COLUMNS: tuple[Column, ...] = (
    Column("name", "Name", lambda record: record.name, lambda theme: theme.table.name),
    Column("type", "Type", lambda record: record.kind.value),
    Column("size", "Size", lambda record: record.size_human, lambda theme: theme.table.size),
    Column("date", "Modified", lambda record: record.modified, lambda theme: theme.table.date),
    Column("permissions", "Permissions", lambda record: record.permissions),
    Column("owner", "Owner", lambda record: record.owner),
    Column("group", "Group", lambda record: record.group),
)
COLUMN_KEYS: tuple[str, ...] = tuple(column.key for column in COLUMNS)
_COLUMNS_BY_KEY: dict[str, Column] = {column.key: column for column in COLUMNS}

# Rounded box-drawing set.
TOP = ("╭", "┬", "╮")
MIDDLE = ("├", "┼", "┤")
BOTTOM = ("╰", "┴", "╯")
HORIZONTAL = "─"
VERTICAL = "│"


def parse_columns(text: str | None) -> tuple[str, ...]:
    """Parse a comma-separated column selector.

    Names are case-insensitive, duplicates are dropped, and the given order is
    kept. ``None`` or an empty selector selects every column. Raises
    ``InvalidColumnsError`` for unknown names.
    """
    if text is None:
        return COLUMN_KEYS
    keys = [part.strip().lower() for part in text.split(",")]
    keys = [key for key in keys if key]
    if not keys:
        return COLUMN_KEYS
    unknown = [key for key in keys if key not in _COLUMNS_BY_KEY]
    if unknown:
        raise InvalidColumnsError(unknown, COLUMN_KEYS)
    return tuple(dict.fromkeys(keys))


def cell_text(text: str) -> str:
    """Escape control characters so a cell stays on one line and one width."""
    return "".join(repr(ch)[1:-1] if unicodedata.category(ch) == "Cc" else ch for ch in text)


def _border(widths: list[int], parts: tuple[str, str, str]) -> str:
    left, joint, right = parts
    return left + joint.join(HORIZONTAL * (width + 2) for width in widths) + right


def _row(cells: list[str], widths: list[int]) -> str:
    padded = (pad_ansi(cell, width) for cell, width in zip(cells, widths))
    return VERTICAL + VERTICAL.join(f" {cell} " for cell in padded) + VERTICAL


def render_table(
    records: Sequence[EntryRecord],
    theme: Theme,
    use_color: bool = True,
    columns: Sequence[str] = COLUMN_KEYS,
) -> str:
    """Render ``records`` as a rounded-border table without a trailing newline.

    An empty record sequence still yields the bordered header row.
    """
    selected = [_COLUMNS_BY_KEY[key] for key in columns]
    headers = [column.header for column in selected]
    body = [[cell_text(column.value(record)) for column in selected] for record in records]

    widths = [display_width(header) for header in headers]
    for cells in body:
        for index, cell in enumerate(cells):
            widths[index] = max(widths[index], display_width(cell))

    if use_color:
        headers = [colorize(theme.table.header, header) for header in headers]
        body = [
            [
                colorize(column.color(theme), cell) if column.color is not None else cell
                for column, cell in zip(selected, cells)
            ]
            for cells in body
        ]

    lines = [_border(widths, TOP), _row(headers, widths)]
    if body:
        lines.append(_border(widths, MIDDLE))
        lines.extend(_row(cells, widths) for cells in body)
    lines.append(_border(widths, BOTTOM))
    return "\n".join(lines)


def render_compact(records: Sequence[EntryRecord]) -> str:
    """Render one name per line, uncolored, without a header."""
    return "\n".join(cell_text(record.name) for record in records)


__all__ = [
    "Column",
    "COLUMNS",
    "COLUMN_KEYS",
    "parse_columns",
    "cell_text",
    "render_table",
    "render_compact",
]
