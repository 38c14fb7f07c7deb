"""Theme configuration file helpers.

Loads color overrides from ``<user_config_dir>/bestls/config.toml`` and
writes the sample file used by ``bestls theme``. Loading never raises: a
missing, unreadable, or malformed file yields the default theme.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from platformdirs import user_config_dir

from .filters.extension import normalize_extension
from .theme import FileTypeColors, TableColors, Theme, default_extension_colors, normalize_color_name

logger = logging.getLogger(__name__)

APP_NAME = "bestls"
CONFIG_FILENAME = "config.toml"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

SAMPLE_CONFIG = """\
# bestls configuration file

[colors]
# Entry kind colors
file = "bright_cyan"
directory = "bright_blue"
symlink = "bright_magenta"

[colors.table]
# Table column colors
name = "bright_cyan"
size = "bright_magenta"
date = "bright_yellow"
header = "bright_green"

[colors.extensions]
# Extension-based file colors (case-insensitive)
rs = "yellow"
py = "blue"
js = "yellow"
ts = "blue"
go = "bright_cyan"
md = "cyan"
json = "green"
toml = "red"
yaml = "magenta"
yml = "magenta"
"""


class ThemeConfigError(ValueError):
    """A config section holds a value that cannot be used."""


def _color_fields(section: object, defaults: dict[str, str], where: str) -> dict[str, str]:
    """Overlay the known color keys of ``section`` onto ``defaults``.

    Raises ``ThemeConfigError`` for a non-table section or an unknown color.
    """
    if section is None:
        return dict(defaults)
    if not isinstance(section, dict):
        raise ThemeConfigError(f"[{where}] must be a table")
    resolved = dict(defaults)
    for key in defaults:
        if key not in section:
            continue
        color = normalize_color_name(section[key])
        if color is None:
            raise ThemeConfigError(f"[{where}] {key} = {section[key]!r} is not a known color")
        resolved[key] = color
    return resolved


def theme_from_config(data: dict[str, object]) -> Theme:
    """Merge a parsed config document onto the default theme.

    Kind colors may sit directly under ``[colors]`` or in the legacy
    ``[colors.file_types]`` table. Extension entries with unknown colors are
    dropped one by one.
    """
    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        raise ThemeConfigError("[colors] must be a table")

    default_kinds = FileTypeColors()
    kind_defaults = {
        "file": default_kinds.file,
        "directory": default_kinds.directory,
        "symlink": default_kinds.symlink,
    }
    kinds = _color_fields(colors.get("file_types"), kind_defaults, "colors.file_types")
    kinds = _color_fields(
        {key: colors[key] for key in kind_defaults if key in colors},
        kinds,
        "colors",
    )

    default_table = TableColors()
    table = _color_fields(
        colors.get("table"),
        {
            "name": default_table.name,
            "size": default_table.size,
            "date": default_table.date,
            "header": default_table.header,
        },
        "colors.table",
    )

    extensions = default_extension_colors()
    raw_extensions = colors.get("extensions")
    if raw_extensions is not None:
        if not isinstance(raw_extensions, dict):
            raise ThemeConfigError("[colors.extensions] must be a table")
        for raw_ext, raw_color in raw_extensions.items():
            ext = normalize_extension(str(raw_ext))
            color = normalize_color_name(raw_color)
            if not ext or color is None:
                logger.debug("ignoring extension color %r = %r", raw_ext, raw_color)
                continue
            extensions[ext] = color

    return Theme(
        file_types=FileTypeColors(**kinds),
        extensions=extensions,
        table=TableColors(**table),
    )


def load_theme(path: Path | None = None) -> Theme:
    """Load the theme from ``path`` (default ``CONFIG_PATH``).

    Returns the default theme when the file is missing, unreadable, not
    valid TOML, or holds an unusable color section.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        return theme_from_config(data)
    except FileNotFoundError:
        return Theme()
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, ThemeConfigError) as exc:
        logger.debug("using default theme, cannot load %s: %s", config_path, exc)
        return Theme()


def write_sample_config(path: Path | None = None, *, overwrite: bool = False) -> tuple[Path, bool]:
    """Write the sample config and return ``(path, written)``.

    An existing file is left untouched unless ``overwrite`` is set. Raises
    ``OSError`` when the file cannot be written.
    """
    config_path = CONFIG_PATH if path is None else path
    if config_path.exists() and not overwrite:
        return config_path, False
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return config_path, True


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG_PATH",
    "CONFIG_PATH",
    "SAMPLE_CONFIG",
    "ThemeConfigError",
    "theme_from_config",
    "load_theme",
    "write_sample_config",
]
