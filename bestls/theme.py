"""Color theme values and palette helpers.

A theme is a pure value: colors for entry kinds, for file extensions, and
for table columns. Colors come from a fixed 16-name palette and are turned
into ANSI escapes through ``pygments.console``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pygments import console

from .listing.types import EntryKind

COLOR_NAMES: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
)

# pygments calls SGR 37 "gray" and its bright counterpart "white".
_CONSOLE_KEYS: dict[str, str] = {
    "black": "black",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "magenta",
    "cyan": "cyan",
    "white": "gray",
    "bright_black": "brightblack",
    "bright_red": "brightred",
    "bright_green": "brightgreen",
    "bright_yellow": "brightyellow",
    "bright_blue": "brightblue",
    "bright_magenta": "brightmagenta",
    "bright_cyan": "brightcyan",
    "bright_white": "white",
}


def normalize_color_name(name: object) -> str | None:
    """Return the palette name for ``name`` (case-insensitive) or ``None``."""
    if not isinstance(name, str):
        return None
    candidate = name.strip().lower()
    return candidate if candidate in _CONSOLE_KEYS else None


def color_code(color: str) -> str:
    """Return the ANSI escape that starts ``color``."""
    return console.codes[_CONSOLE_KEYS[color]]


def reset_code() -> str:
    """Return the ANSI escape that resets foreground and background."""
    return console.reset_color()


def colorize(color: str, text: str) -> str:
    """Wrap ``text`` in the escape for palette ``color`` and a reset."""
    return color_code(color) + text + reset_code()


@dataclass(frozen=True)
class FileTypeColors:
    """Colors per entry kind."""

    file: str = "bright_cyan"
    directory: str = "bright_blue"
    symlink: str = "bright_magenta"


@dataclass(frozen=True)
class TableColors:
    """Colors for table columns and the header row."""

    name: str = "bright_cyan"
    size: str = "bright_magenta"
    date: str = "bright_yellow"
    header: str = "bright_green"


def default_extension_colors() -> dict[str, str]:
    """Return the built-in extension to color mapping."""
    return {
        # programming languages
        "rs": "yellow",
        "py": "blue",
        "js": "yellow",
        "ts": "blue",
        "go": "bright_cyan",
        "c": "bright_blue",
        "cpp": "bright_blue",
        "java": "red",
        # documents
        "md": "cyan",
        "txt": "white",
        "pdf": "red",
        # configuration
        "toml": "red",
        "json": "green",
        "yaml": "magenta",
        "yml": "magenta",
        "xml": "yellow",
        # archives
        "zip": "red",
        "tar": "red",
        "gz": "red",
        # images
        "png": "magenta",
        "jpg": "magenta",
        "jpeg": "magenta",
        "gif": "magenta",
        "svg": "yellow",
    }


@dataclass(frozen=True)
class Theme:
    """Declarative display colors consumed read-only by renderers."""

    file_types: FileTypeColors = field(default_factory=FileTypeColors)
    extensions: dict[str, str] = field(default_factory=default_extension_colors)
    table: TableColors = field(default_factory=TableColors)


def default_theme() -> Theme:
    """Return a fresh copy of the built-in theme."""
    return Theme()


def file_color(kind: EntryKind, name: str, theme: Theme) -> str:
    """Resolve the display color for an entry.

    Directories and symlinks use their kind color. Files use the color of
    their lower-cased extension when the theme maps it, else the file color.
    """
    if kind is EntryKind.DIRECTORY:
        return theme.file_types.directory
    if kind is EntryKind.SYMLINK:
        return theme.file_types.symlink
    _stem, dot, ext = name.rpartition(".")
    if dot:
        color = theme.extensions.get(ext.lower())
        if color is not None:
            return color
    return theme.file_types.file


__all__ = [
    "COLOR_NAMES",
    "normalize_color_name",
    "color_code",
    "reset_code",
    "colorize",
    "FileTypeColors",
    "TableColors",
    "default_extension_colors",
    "Theme",
    "default_theme",
    "file_color",
]
