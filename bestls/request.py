"""Listing request value and output-format resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .sorting import SortKey
from .theme import Theme


class OutputFormat(str, Enum):
    """Supported ``--format`` values."""

    TABLE = "table"
    JSON = "json"
    JSON_PRETTY = "json-pretty"


@dataclass(frozen=True)
class ListingRequest:
    """Everything the pipeline needs to produce one listing.

    ``max_depth`` only applies when ``tree`` is set and ``compact`` only
    applies to the table format. ``json``/``json_pretty`` are the legacy
    switches; see ``effective_format``.
    """

    path: Path
    include_hidden: bool = False
    tree: bool = False
    max_depth: int | None = None
    filter_ext: str | None = None
    filter_name: str | None = None
    min_size: str | None = None
    max_size: str | None = None
    sort_by: SortKey = SortKey.NAME
    format: OutputFormat = OutputFormat.TABLE
    json: bool = False
    json_pretty: bool = False
    compact: bool = False
    columns: str | None = None
    use_color: bool = True
    theme: Theme = field(default_factory=Theme)


def effective_format(request: ListingRequest) -> OutputFormat:
    """Resolve the output format; legacy switches win over ``format``.

    Priority is ``json_pretty`` > ``json`` > ``format``.
    """
    if request.json_pretty:
        return OutputFormat.JSON_PRETTY
    if request.json:
        return OutputFormat.JSON
    return OutputFormat(request.format)


__all__ = [
    "OutputFormat",
    "ListingRequest",
    "effective_format",
]
