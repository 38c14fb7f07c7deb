"""Extension-list matching for ``--filter-ext``."""

from __future__ import annotations

from dataclasses import dataclass


def normalize_extension(raw: str) -> str:
    """Trim whitespace, drop one leading dot, and lower-case ``raw``."""
    ext = raw.strip()
    if ext.startswith("."):
        ext = ext[1:]
    return ext.lower()


def parse_extension_list(text: str) -> tuple[str, ...]:
    """Split a comma-separated list into normalized, non-empty extensions."""
    normalized = (normalize_extension(part) for part in text.split(","))
    return tuple(dict.fromkeys(ext for ext in normalized if ext))


@dataclass(frozen=True)
class ExtensionMatcher:
    """Normalized extension set; an empty set accepts every name.

    Both sides are compared lower-cased, so ``README.MD`` matches ``md``.
    """

    extensions: tuple[str, ...] = ()

    @classmethod
    def from_list(cls, extensions: list[str] | tuple[str, ...]) -> ExtensionMatcher:
        """Build a matcher, normalizing each extension once."""
        normalized = (normalize_extension(ext) for ext in extensions)
        return cls(tuple(dict.fromkeys(ext for ext in normalized if ext)))

    def matches(self, name: str) -> bool:
        """Return whether ``name`` ends with ``.<ext>`` for any extension."""
        if not self.extensions:
            return True
        lowered = name.lower()
        return any(lowered.endswith("." + ext) for ext in self.extensions)


__all__ = [
    "normalize_extension",
    "parse_extension_list",
    "ExtensionMatcher",
]
