"""Stable ordering of entry records by name, size, or modified text."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from .listing.types import EntryRecord


class SortKey(str, Enum):
    """Supported ``--sort`` values."""

    NAME = "name"
    SIZE = "size"
    DATE = "date"


# Code point order of valid ``str`` values equals UTF-8 byte order.
_KEY_FUNCS: dict[SortKey, Callable[[EntryRecord], object]] = {
    SortKey.NAME: lambda record: record.name,
    SortKey.SIZE: lambda record: record.size_bytes,
    # Lexicographic on the formatted text, not chronological.
    SortKey.DATE: lambda record: record.modified,
}


def sort_entries(records: list[EntryRecord], sort_by: SortKey | str) -> None:
    """Sort ``records`` in place, ascending and stable."""
    records.sort(key=_KEY_FUNCS[SortKey(sort_by)])


__all__ = [
    "SortKey",
    "sort_entries",
]
