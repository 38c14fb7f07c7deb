"""Directory enumeration in flat and depth-bounded tree modes.

Entries of one directory level are collected first, then their metadata is
extracted in parallel. Tree mode walks an explicit ``(path, depth)`` queue
instead of recursing, so very deep trees do not grow the call stack.
"""

from __future__ import annotations

import logging
import os
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ..errors import RootReadError
from .metadata import extract_entry
from .types import EntryKind, EntryRecord

logger = logging.getLogger(__name__)

MAX_METADATA_WORKERS = 8


def is_hidden_name(name: str) -> bool:
    """Return whether ``name`` is a dotfile."""
    return name.startswith(".")


def scan_directory(directory: Path, include_hidden: bool) -> list[os.DirEntry]:
    """Collect the entries of ``directory`` under the hidden-file policy.

    Raises ``OSError`` when the directory cannot be opened or enumerated.
    """
    with os.scandir(directory) as it:
        return [entry for entry in it if include_hidden or not is_hidden_name(entry.name)]


def extract_entries(entries: list[os.DirEntry]) -> list[tuple[os.DirEntry, EntryRecord]]:
    """Extract metadata for ``entries`` across a worker pool.

    Entries whose metadata cannot be read are dropped. The result order is
    not meaningful; callers sort afterwards.
    """
    if not entries:
        return []
    if len(entries) == 1:
        record = extract_entry(entries[0])
        return [] if record is None else [(entries[0], record)]

    extracted: list[tuple[os.DirEntry, EntryRecord]] = []
    max_workers = min(MAX_METADATA_WORKERS, len(entries))
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="bestls-metadata") as executor:
        futures = [(entry, executor.submit(extract_entry, entry)) for entry in entries]
        for entry, future in futures:
            try:
                record = future.result()
            except Exception:
                logger.debug("metadata extraction failed for %s", entry.path, exc_info=True)
                continue
            if record is not None:
                extracted.append((entry, record))
    return extracted


def list_flat(path: Path, include_hidden: bool) -> list[EntryRecord]:
    """List the direct children of ``path``.

    Raises ``RootReadError`` when ``path`` cannot be read.
    """
    try:
        entries = scan_directory(path, include_hidden)
    except OSError as exc:
        raise RootReadError(path, exc) from exc
    return [record for _entry, record in extract_entries(entries)]


def list_tree(path: Path, include_hidden: bool, max_depth: int | None = None) -> list[EntryRecord]:
    """List ``path`` recursively, descending at most ``max_depth`` levels.

    The root directory is depth 0 and its children are always listed.
    Subdirectories found at depth ``d`` are entered only while
    ``d < max_depth``; ``max_depth=None`` is unbounded and ``max_depth=0``
    is equivalent to ``list_flat``. Only a failure to read the root raises
    ``RootReadError``; unreadable descendants are skipped.
    """
    records: list[EntryRecord] = []
    pending: deque[tuple[Path, int]] = deque([(path, 0)])

    while pending:
        directory, depth = pending.popleft()
        if max_depth is not None and depth > max_depth:
            continue

        try:
            entries = scan_directory(directory, include_hidden)
        except OSError as exc:
            if depth == 0:
                raise RootReadError(path, exc) from exc
            logger.debug("skipping unreadable directory %s: %s", directory, exc)
            continue

        for entry, record in extract_entries(entries):
            records.append(record)
            if record.kind is not EntryKind.DIRECTORY:
                continue
            if max_depth is None or depth < max_depth:
                pending.append((Path(entry.path), depth + 1))

    return records


def list_entries(
    path: Path,
    include_hidden: bool,
    tree: bool = False,
    max_depth: int | None = None,
) -> list[EntryRecord]:
    """Dispatch to flat or tree listing; ``max_depth`` is ignored in flat mode."""
    if tree:
        return list_tree(path, include_hidden, max_depth)
    return list_flat(path, include_hidden)


__all__ = [
    "MAX_METADATA_WORKERS",
    "is_hidden_name",
    "scan_directory",
    "extract_entries",
    "list_flat",
    "list_tree",
    "list_entries",
]
