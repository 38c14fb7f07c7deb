"""Human size string parsing (``"100"``, ``"1KB"``, ``"1.5MB"``)."""

from __future__ import annotations

import logging
import math
import re

from ..errors import InvalidSizeError

logger = logging.getLogger(__name__)

SIZE_MULTIPLIERS: dict[str, int] = {
    "": 1,
    "B": 1,
    "K": 1024,
    "KB": 1024,
    "M": 1024**2,
    "MB": 1024**2,
    "G": 1024**3,
    "GB": 1024**3,
    "T": 1024**4,
    "TB": 1024**4,
}

_NUMBER_RE = re.compile(r"(?:\d+(?:\.\d*)?|\.\d+)")


def split_size(text: str) -> tuple[str, str]:
    """Split an upper-cased size token at its first alphabetic character."""
    for index, ch in enumerate(text):
        if ch.isalpha():
            return text[:index], text[index:]
    return text, ""


def parse_size(text: str) -> int:
    """Parse ``text`` into a byte count.

    The token is trimmed and upper-cased; the numeric prefix may be a decimal
    and the unit suffix is one of B, K/KB, M/MB, G/GB, T/TB (base 1024). The
    product is floored. Raises ``InvalidSizeError`` on empty input, a
    malformed number, an unknown unit, or a value too large to represent.
    """
    token = text.strip().upper()
    if not token:
        raise InvalidSizeError(text, "size is empty")

    number, unit = split_size(token)
    if not number:
        raise InvalidSizeError(text, "missing number")
    if not _NUMBER_RE.fullmatch(number):
        raise InvalidSizeError(text, f"{number!r} is not a number")
    multiplier = SIZE_MULTIPLIERS.get(unit)
    if multiplier is None:
        raise InvalidSizeError(text, f"unknown unit {unit!r} (use B, KB, MB, GB or TB)")
    value = float(number) * multiplier
    if not math.isfinite(value):
        raise InvalidSizeError(text, "size is too large")
    return int(math.floor(value))


def parse_size_or_none(text: str) -> int | None:
    """Parse ``text`` like ``parse_size`` but log a warning instead of raising."""
    try:
        return parse_size(text)
    except InvalidSizeError as exc:
        logger.warning("%s", exc)
        return None


__all__ = [
    "SIZE_MULTIPLIERS",
    "split_size",
    "parse_size",
    "parse_size_or_none",
]
