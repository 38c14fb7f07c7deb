"""JSON array rendering for entry records."""

from __future__ import annotations

import json
from collections.abc import Sequence

from ..listing.types import EntryRecord

JSON_KEYS: tuple[str, ...] = (
    "name",
    "e_type",
    "len_bytes",
    "human_size",
    "modified",
    "permissions",
    "owner",
    "group",
)


def render_json(records: Sequence[EntryRecord], pretty: bool = False) -> str:
    """Serialize ``records`` as a JSON array.

    Compact output has no whitespace between tokens; pretty output indents by
    two spaces. Non-ASCII names are emitted as-is.
    """
    payload = [record.to_json_dict() for record in records]
    if pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


__all__ = [
    "JSON_KEYS",
    "render_json",
]
