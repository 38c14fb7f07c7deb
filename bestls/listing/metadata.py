"""Per-entry metadata extraction.

Builds ``EntryRecord`` values from ``os.DirEntry`` objects. This module is
the only place that branches on the host platform: permission strings and
owner/group resolution have one implementation per platform family, chosen
once at import time.
"""

from __future__ import annotations

import logging
import os
import stat
from datetime import datetime, timezone

from .types import EntryKind, EntryRecord

logger = logging.getLogger(__name__)

if os.name == "posix":
    import grp
    import pwd
else:  # pragma: no cover - exercised on Windows only
    grp = None
    pwd = None

SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")

# Fixed English names so formatting does not depend on the process locale.
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_PERMISSION_BITS: tuple[tuple[int, str], ...] = (
    (0o400, "r"),
    (0o200, "w"),
    (0o100, "x"),
    (0o040, "r"),
    (0o020, "w"),
    (0o010, "x"),
    (0o004, "r"),
    (0o002, "w"),
    (0o001, "x"),
)


def human_size(size_bytes: int) -> str:
    """Format ``size_bytes`` with base-1024 scaling, e.g. ``"1.5 KB"``.

    Plain bytes are shown without decimals; larger units use one decimal and
    saturate at ``TB``.
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    value = float(size_bytes)
    unit_index = 0
    while value >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1
    return f"{value:.1f} {SIZE_UNITS[unit_index]}"


def format_modified(mtime: float) -> str:
    """Format a POSIX timestamp as ``%a %d %b %Y %H:%M:%S`` in UTC.

    Returns an empty string when the timestamp cannot be represented.
    """
    try:
        moment = datetime.fromtimestamp(mtime, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return ""
    return (
        f"{_WEEKDAYS[moment.weekday()]} {moment.day:02d} {_MONTHS[moment.month - 1]} "
        f"{moment.year:04d} {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def classify_mode(mode: int) -> EntryKind:
    """Map ``st_mode`` file-type bits to an ``EntryKind``.

    Tested in order regular, directory, symlink; anything else is a file.
    """
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    return EntryKind.FILE


def _posix_permissions(st: os.stat_result) -> str:
    mode = st.st_mode
    return "".join(flag if mode & bit else "-" for bit, flag in _PERMISSION_BITS)


def _windows_permissions(st: os.stat_result) -> str:
    attributes = getattr(st, "st_file_attributes", 0)
    readonly = bool(attributes & getattr(stat, "FILE_ATTRIBUTE_READONLY", 0x1)) or not st.st_mode & stat.S_IWRITE
    return "r--" if readonly else "rw-"


def _posix_ownership(st: os.stat_result) -> tuple[str, str]:
    uid = st.st_uid
    gid = st.st_gid
    try:
        owner = pwd.getpwuid(uid).pw_name
    except KeyError:
        owner = str(uid)
    try:
        group = grp.getgrgid(gid).gr_name
    except KeyError:
        group = str(gid)
    return owner, group


def _windows_ownership(st: os.stat_result) -> tuple[str, str]:
    return "Owner", "Group"


def _unsupported_permissions(st: os.stat_result) -> str:
    return "N/A"


def _unsupported_ownership(st: os.stat_result) -> tuple[str, str]:
    return "N/A", "N/A"


if os.name == "posix":
    format_permissions = _posix_permissions
    resolve_ownership = _posix_ownership
elif os.name == "nt":  # pragma: no cover - exercised on Windows only
    format_permissions = _windows_permissions
    resolve_ownership = _windows_ownership
else:  # pragma: no cover
    format_permissions = _unsupported_permissions
    resolve_ownership = _unsupported_ownership


def display_name(raw_name: str) -> str:
    """Return a printable filename, replacing undecodable bytes with U+FFFD."""
    return os.fsencode(raw_name).decode("utf-8", errors="replace")


def record_from_stat(name: str, st: os.stat_result) -> EntryRecord:
    """Build an ``EntryRecord`` from an already-read ``lstat`` result."""
    size_bytes = int(st.st_size)
    owner, group = resolve_ownership(st)
    return EntryRecord(
        name=display_name(name),
        kind=classify_mode(st.st_mode),
        size_bytes=size_bytes,
        size_human=human_size(size_bytes),
        modified=format_modified(st.st_mtime),
        permissions=format_permissions(st),
        owner=owner,
        group=group,
    )


def extract_entry(entry: os.DirEntry) -> EntryRecord | None:
    """Read ``entry`` metadata once and build its record.

    Symlinks are not followed. Returns ``None`` when metadata cannot be read
    so callers can drop the entry without aborting the listing.
    """
    try:
        st = entry.stat(follow_symlinks=False)
    except OSError as exc:
        logger.debug("skipping %s: %s", entry.path, exc)
        return None
    return record_from_stat(entry.name, st)


__all__ = [
    "SIZE_UNITS",
    "human_size",
    "format_modified",
    "classify_mode",
    "format_permissions",
    "resolve_ownership",
    "display_name",
    "record_from_stat",
    "extract_entry",
]
