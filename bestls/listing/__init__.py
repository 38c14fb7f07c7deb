"""Directory listing domain model.

This package contains the non-rendering listing primitives:
- entry record datatypes
- per-entry metadata extraction with platform-specific fields
- flat and depth-bounded tree traversal
"""

from __future__ import annotations

from .types import EntryKind, EntryRecord
from .metadata import (
    classify_mode,
    display_name,
    extract_entry,
    format_modified,
    format_permissions,
    human_size,
    record_from_stat,
    resolve_ownership,
)
from .traverse import extract_entries, is_hidden_name, list_entries, list_flat, list_tree, scan_directory

__all__ = [
    "EntryKind",
    "EntryRecord",
    "classify_mode",
    "display_name",
    "extract_entry",
    "format_modified",
    "format_permissions",
    "human_size",
    "record_from_stat",
    "resolve_ownership",
    "extract_entries",
    "is_hidden_name",
    "list_entries",
    "list_flat",
    "list_tree",
    "scan_directory",
]
