"""Domain datatypes for listed directory entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryKind(str, Enum):
    """Entry classification; devices, sockets and fifos report as ``FILE``."""

    FILE = "File"
    DIRECTORY = "Directory"
    SYMLINK = "Symlink"


@dataclass(frozen=True)
class EntryRecord:
    """Fully populated metadata for one listed entry."""

    name: str
    kind: EntryKind
    size_bytes: int
    size_human: str
    modified: str
    permissions: str
    owner: str
    group: str

    def to_json_dict(self) -> dict[str, object]:
        """Return the JSON object shape used by the json renderers."""
        return {
            "name": self.name,
            "e_type": self.kind.value,
            "len_bytes": self.size_bytes,
            "human_size": self.size_human,
            "modified": self.modified,
            "permissions": self.permissions,
            "owner": self.owner,
            "group": self.group,
        }


__all__ = [
    "EntryKind",
    "EntryRecord",
]
