"""Output emitters for listed entries.

``render_entries`` picks one emitter from (format, compact) and returns the
whole payload as a single string. Rendering is side-effect free.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..listing.types import EntryRecord
from ..request import OutputFormat
from ..theme import Theme
from .json_output import JSON_KEYS, render_json
from .table import COLUMN_KEYS, COLUMNS, parse_columns, render_compact, render_table


def render_entries(
    records: Sequence[EntryRecord],
    output_format: OutputFormat,
    *,
    compact: bool = False,
    use_color: bool = True,
    theme: Theme | None = None,
    columns: Sequence[str] = COLUMN_KEYS,
) -> str:
    """Render ``records`` in ``output_format``.

    ``compact`` and ``columns`` only affect the table format.
    """
    if output_format is OutputFormat.JSON:
        return render_json(records, pretty=False)
    if output_format is OutputFormat.JSON_PRETTY:
        return render_json(records, pretty=True)
    if compact:
        return render_compact(records)
    return render_table(records, theme if theme is not None else Theme(), use_color=use_color, columns=columns)


__all__ = [
    "JSON_KEYS",
    "COLUMNS",
    "COLUMN_KEYS",
    "parse_columns",
    "render_compact",
    "render_json",
    "render_table",
    "render_entries",
]
