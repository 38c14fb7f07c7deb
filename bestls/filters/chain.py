"""Filter chain construction and application.

Predicates run in a fixed order: extension, name pattern, minimum size,
maximum size. Every predicate is compiled up front by ``build_filter_config``
so invalid options fail before any directory is read.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..errors import InvalidMaxSizeError, InvalidMinSizeError, InvalidSizeError, InvalidSizeRangeError
from ..listing.types import EntryRecord
from .extension import ExtensionMatcher, parse_extension_list
from .glob import GlobMatcher, compile_glob
from .size import parse_size


@dataclass(frozen=True)
class FilterConfig:
    """Pre-compiled predicates; ``None`` disables a predicate."""

    extensions: ExtensionMatcher | None = None
    name_pattern: GlobMatcher | None = None
    min_size: int | None = None
    max_size: int | None = None

    @property
    def is_empty(self) -> bool:
        """Return whether every predicate is disabled."""
        return (
            self.extensions is None
            and self.name_pattern is None
            and self.min_size is None
            and self.max_size is None
        )

    def accepts(self, record: EntryRecord) -> bool:
        """Return whether ``record`` passes every enabled predicate."""
        if self.extensions is not None and not self.extensions.matches(record.name):
            return False
        if self.name_pattern is not None and not self.name_pattern.matches(record.name):
            return False
        if self.min_size is not None and record.size_bytes < self.min_size:
            return False
        if self.max_size is not None and record.size_bytes > self.max_size:
            return False
        return True


def build_filter_config(
    filter_ext: str | None = None,
    filter_name: str | None = None,
    min_size: str | None = None,
    max_size: str | None = None,
) -> FilterConfig:
    """Validate raw filter options and compile them.

    Raises ``InvalidPatternError``, ``InvalidMinSizeError``,
    ``InvalidMaxSizeError`` or ``InvalidSizeRangeError``.
    """
    extensions: ExtensionMatcher | None = None
    if filter_ext is not None:
        parsed = parse_extension_list(filter_ext)
        if parsed:
            extensions = ExtensionMatcher(parsed)

    name_pattern = compile_glob(filter_name) if filter_name is not None else None

    min_bytes: int | None = None
    if min_size is not None:
        try:
            min_bytes = parse_size(min_size)
        except InvalidSizeError as exc:
            raise InvalidMinSizeError(exc) from exc

    max_bytes: int | None = None
    if max_size is not None:
        try:
            max_bytes = parse_size(max_size)
        except InvalidSizeError as exc:
            raise InvalidMaxSizeError(exc) from exc

    if min_bytes is not None and max_bytes is not None and min_bytes > max_bytes:
        raise InvalidSizeRangeError(min_bytes, max_bytes)

    return FilterConfig(
        extensions=extensions,
        name_pattern=name_pattern,
        min_size=min_bytes,
        max_size=max_bytes,
    )


def apply_filters(records: Iterable[EntryRecord], config: FilterConfig) -> list[EntryRecord]:
    """Return the records accepted by ``config``, preserving order."""
    if config.is_empty:
        return list(records)
    return [record for record in records if config.accepts(record)]


__all__ = [
    "FilterConfig",
    "build_filter_config",
    "apply_filters",
]
