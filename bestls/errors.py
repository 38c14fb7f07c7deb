"""Exception types raised by the listing pipeline.

Request-validation errors share ``InvalidRequestError`` so the CLI can map
them to a single usage-error exit code. Root and output failures wrap the
underlying ``OSError``.
"""

from __future__ import annotations

from pathlib import Path


class BestlsError(Exception):
    """Base class for all pipeline errors."""


class InvalidSizeError(BestlsError):
    """A human size string could not be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"invalid size {text!r}: {reason}")


class InvalidRequestError(BestlsError):
    """The request failed validation before traversal started."""


class InvalidPatternError(InvalidRequestError):
    """The ``--filter-name`` glob could not be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid name pattern {pattern!r}: {reason}")


class InvalidMinSizeError(InvalidRequestError):
    """The ``--min-size`` value is not a valid size."""

    def __init__(self, cause: InvalidSizeError) -> None:
        self.cause = cause
        super().__init__(f"invalid --min-size: {cause}")


class InvalidMaxSizeError(InvalidRequestError):
    """The ``--max-size`` value is not a valid size."""

    def __init__(self, cause: InvalidSizeError) -> None:
        self.cause = cause
        super().__init__(f"invalid --max-size: {cause}")


class InvalidSizeRangeError(InvalidRequestError):
    """Minimum size is strictly greater than maximum size."""

    def __init__(self, min_size: int, max_size: int) -> None:
        self.min_size = min_size
        self.max_size = max_size
        super().__init__(
            f"invalid size range: min-size ({min_size} bytes) is greater than max-size ({max_size} bytes)"
        )


class InvalidColumnsError(InvalidRequestError):
    """The ``--columns`` selector names an unknown column."""

    def __init__(self, unknown: list[str], allowed: tuple[str, ...]) -> None:
        self.unknown = unknown
        super().__init__(f"unknown column(s) {', '.join(unknown)}; choose from {', '.join(allowed)}")


class RootReadError(BestlsError):
    """The root directory could not be opened or enumerated."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read directory {path}: {cause.strerror or cause}")


class OutputError(BestlsError):
    """Rendered output could not be written to the destination file."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write output to {path}: {cause.strerror or cause}")


__all__ = [
    "BestlsError",
    "InvalidSizeError",
    "InvalidRequestError",
    "InvalidPatternError",
    "InvalidMinSizeError",
    "InvalidMaxSizeError",
    "InvalidSizeRangeError",
    "InvalidColumnsError",
    "RootReadError",
    "OutputError",
]
