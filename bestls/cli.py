"""Command-line front door for bestls.

Parses CLI options into a ``ListingRequest``, loads the user theme, and runs
the listing pipeline. Also hosts the ``completion`` and ``theme`` subcommands.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import config as theme_config
from .completion import SHELLS, generate_completion
from .errors import InvalidRequestError, OutputError, RootReadError
from .pipeline import run_listing
from .render import COLUMN_KEYS
from .request import ListingRequest, OutputFormat
from .sorting import SortKey
from .theme import Theme

PROG = "bestls"

DESCRIPTION = """\
bestls lists directory contents as a colorized table, a compact name list, or JSON.

Usage examples:
  bestls -p ./src
  bestls --format json --sort size
  bestls --tree --depth 2 --filter-ext py,md
  bestls completion bash > ~/.local/share/bash-completion/completions/bestls
"""


def _non_negative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, including subcommands."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-p",
        "--path",
        metavar="PATH",
        default=None,
        help="Directory path to list. Defaults to the current directory.",
    )
    parser.add_argument("-a", "--all", action="store_true", help="Include hidden files.")
    parser.add_argument(
        "-s",
        "--sort",
        dest="sort_by",
        choices=[key.value for key in SortKey],
        default=SortKey.NAME.value,
        help="Sort entries by the given attribute.",
    )
    parser.add_argument("--tree", action="store_true", help="List directories recursively.")
    parser.add_argument(
        "--depth",
        metavar="N",
        type=_non_negative_int,
        default=None,
        help="Maximum depth for tree traversal (requires --tree).",
    )
    parser.add_argument(
        "--filter-ext",
        metavar="EXT",
        default=None,
        help="Keep only these extensions, comma separated (e.g. rs,txt,md).",
    )
    parser.add_argument(
        "--filter-name",
        metavar="PATTERN",
        default=None,
        help="Keep only names matching a glob pattern (e.g. '*.txt').",
    )
    parser.add_argument("--min-size", metavar="SIZE", default=None, help="Minimum size (e.g. 100B, 1KB, 1.5MB).")
    parser.add_argument("--max-size", metavar="SIZE", default=None, help="Maximum size (e.g. 100B, 1KB, 1.5MB).")
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.TABLE.value,
        help="Output format. Legacy --json/--json-pretty override this.",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Compact JSON output (deprecated, use --format json).",
    )
    parser.add_argument(
        "--json-pretty",
        action="store_true",
        help="Pretty-printed JSON output (deprecated, use --format json-pretty).",
    )
    parser.add_argument("--compact", action="store_true", help="One name per line (table format only).")
    parser.add_argument(
        "--columns",
        metavar="COLS",
        default=None,
        help=f"Comma-separated table columns: {','.join(COLUMN_KEYS)}.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored output.")
    parser.add_argument(
        "--out",
        dest="output_file",
        metavar="FILE",
        default=None,
        help="Write output to FILE instead of stdout.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging on stderr.")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    completion = sub.add_parser("completion", help="Print a shell completion script.")
    completion.add_argument("shell", choices=SHELLS, help="Target shell.")

    theme = sub.add_parser("theme", help="Manage the color theme config file.")
    theme_sub = theme.add_subparsers(dest="theme_command", metavar="ACTION", required=True)
    init = theme_sub.add_parser("init", help="Create a sample config file if none exists.")
    init.add_argument("--show", action="store_true", help="Print the config file path afterwards.")
    theme_sub.add_parser("path", help="Print the config file path.")
    theme_sub.add_parser("reset", help="Overwrite the config file with the default theme.")

    return parser


def color_enabled(no_color: bool) -> bool:
    """Return whether colored output is wanted (``--no-color`` or ``NO_COLOR`` disable it)."""
    if no_color:
        return False
    return not os.environ.get("NO_COLOR")


def request_from_args(args: argparse.Namespace, theme: Theme, default_path: Path | None = None) -> ListingRequest:
    """Translate parsed CLI arguments into a ``ListingRequest``."""
    if args.path is not None:
        path = Path(args.path)
    else:
        path = default_path if default_path is not None else Path.cwd()
    return ListingRequest(
        path=path,
        include_hidden=args.all,
        tree=args.tree,
        max_depth=args.depth,
        filter_ext=args.filter_ext,
        filter_name=args.filter_name,
        min_size=args.min_size,
        max_size=args.max_size,
        sort_by=SortKey(args.sort_by),
        format=OutputFormat(args.format),
        json=args.json,
        json_pretty=args.json_pretty,
        compact=args.compact,
        columns=args.columns,
        use_color=color_enabled(args.no_color),
        theme=theme,
    )


def write_output(path: Path, payload: str) -> None:
    """Write ``payload`` plus a trailing newline to ``path``.

    Raises ``OutputError`` when the file cannot be written.
    """
    try:
        path.write_text(payload + "\n", encoding="utf-8")
    except OSError as exc:
        raise OutputError(path, exc) from exc


def run_theme_command(args: argparse.Namespace) -> None:
    """Handle ``bestls theme {init,path,reset}``."""
    config_path = theme_config.CONFIG_PATH
    if args.theme_command == "path":
        print(config_path)
        return

    overwrite = args.theme_command == "reset"
    try:
        config_path, written = theme_config.write_sample_config(config_path, overwrite=overwrite)
    except OSError as exc:
        raise SystemExit(f"Failed to write config {config_path}: {exc.strerror or exc}") from exc

    if overwrite:
        print(f"Theme reset to defaults: {config_path}")
        return
    if written:
        print("Created sample config file.")
    else:
        print("Config file already exists; left unchanged.")
    if args.show:
        print(config_path)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the listing.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is listed. Request-validation errors exit with status 2, read
    and write failures with status 1.
    """
    parser = build_parser()
    args = parser.parse_args()

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(name)s] %(levelname)s: %(message)s",
            stream=sys.stderr,
        )

    if args.command == "completion":
        sys.stdout.write(generate_completion(args.shell, parser, prog=PROG))
        return
    if args.command == "theme":
        run_theme_command(args)
        return

    if args.depth is not None and not args.tree:
        parser.error("--depth requires --tree")

    request = request_from_args(args, theme_config.load_theme(), default_path=default_path)
    try:
        payload = run_listing(request)
    except InvalidRequestError as exc:
        parser.error(str(exc))
    except RootReadError as exc:
        raise SystemExit(str(exc)) from exc

    if args.output_file is not None:
        try:
            write_output(Path(args.output_file), payload)
        except OutputError as exc:
            raise SystemExit(str(exc)) from exc
        return
    sys.stdout.write(payload + "\n")


if __name__ == "__main__":
    main()
