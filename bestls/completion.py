"""Shell completion scripts generated from the CLI parser.

Options, choices, and subcommands are read from the ``argparse`` parser so
scripts stay in sync with the command line without a separate table.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass

SHELLS: tuple[str, ...] = ("bash", "zsh", "fish")
PATH_DESTS = frozenset({"path", "output_file"})


@dataclass(frozen=True)
class OptionSpec:
    """Completion-relevant view of one optional argument."""

    short: tuple[str, ...]
    long: tuple[str, ...]
    help: str
    takes_value: bool
    choices: tuple[str, ...]
    is_path: bool

    @property
    def flags(self) -> tuple[str, ...]:
        return self.short + self.long


def _parser_actions(parser: argparse.ArgumentParser) -> list[argparse.Action]:
    """Return the actions registered on ``parser``."""
    # argparse has no public accessor for its action table.
    return list(parser._actions)


def _subparsers(parser: argparse.ArgumentParser) -> dict[str, argparse.ArgumentParser]:
    """Map subcommand names to their parsers; subparser actions hold a dict of choices."""
    commands: dict[str, argparse.ArgumentParser] = {}
    for action in _parser_actions(parser):
        if isinstance(action.choices, dict):
            commands.update(action.choices)
    return commands


def option_specs(parser: argparse.ArgumentParser) -> list[OptionSpec]:
    """Return completion specs for the parser's optional arguments."""
    specs: list[OptionSpec] = []
    for action in _parser_actions(parser):
        if not action.option_strings or action.help == argparse.SUPPRESS:
            continue
        short = tuple(flag for flag in action.option_strings if not flag.startswith("--"))
        long = tuple(flag for flag in action.option_strings if flag.startswith("--"))
        choices = tuple(str(choice) for choice in action.choices) if action.choices else ()
        specs.append(
            OptionSpec(
                short=short,
                long=long,
                help=(action.help or "").replace("%(default)s", str(action.default)),
                takes_value=action.nargs != 0,
                choices=choices,
                is_path=action.dest in PATH_DESTS,
            )
        )
    return specs


def subcommand_tree(parser: argparse.ArgumentParser) -> dict[str, tuple[str, ...]]:
    """Map each subcommand name to the words it accepts next."""
    tree: dict[str, tuple[str, ...]] = {}
    for name, subparser in _subparsers(parser).items():
        words: list[str] = []
        for sub_action in _parser_actions(subparser):
            if not sub_action.option_strings and sub_action.choices:
                words.extend(str(choice) for choice in sub_action.choices)
        tree[name] = tuple(words)
    return tree


def _bash_script(prog: str, parser: argparse.ArgumentParser) -> str:
    specs = option_specs(parser)
    subcommands = subcommand_tree(parser)
    func = "_" + prog.replace("-", "_")
    all_flags = " ".join(flag for spec in specs for flag in spec.flags)

    value_cases: list[str] = []
    for spec in specs:
        if not spec.takes_value:
            continue
        pattern = "|".join(spec.flags)
        if spec.choices:
            reply = f'COMPREPLY=($(compgen -W "{" ".join(spec.choices)}" -- "$cur"))'
        elif spec.is_path:
            reply = 'COMPREPLY=($(compgen -f -- "$cur"))'
        else:
            reply = "COMPREPLY=()"
        value_cases.append(f"        {pattern})\n            {reply}\n            return 0\n            ;;")

    sub_cases = [
        f'        {name})\n            COMPREPLY=($(compgen -W "{" ".join(words)}" -- "$cur"))\n            return 0\n            ;;'
        for name, words in subcommands.items()
    ]

    lines = [
        f"# bash completion for {prog}",
        f"{func}() {{",
        "    local cur prev",
        '    cur="${COMP_WORDS[COMP_CWORD]}"',
        '    prev="${COMP_WORDS[COMP_CWORD-1]}"',
        '    case "$prev" in',
        *value_cases,
        "    esac",
        "    if [[ ${COMP_CWORD} -eq 2 ]]; then",
        '        case "${COMP_WORDS[1]}" in',
        *sub_cases,
        "        esac",
        "    fi",
        '    if [[ ${COMP_CWORD} -eq 1 && "$cur" != -* ]]; then',
        f'        COMPREPLY=($(compgen -W "{" ".join(subcommands)}" -- "$cur"))',
        "        return 0",
        "    fi",
        f'    COMPREPLY=($(compgen -W "{all_flags}" -- "$cur"))',
        "}",
        f"complete -o default -F {func} {prog}",
    ]
    return "\n".join(lines) + "\n"


def _zsh_escape(text: str) -> str:
    return text.replace("'", "'\\''").replace("[", "\\[").replace("]", "\\]").replace(":", "\\:")


def _zsh_script(prog: str, parser: argparse.ArgumentParser) -> str:
    specs = option_specs(parser)
    subcommands = subcommand_tree(parser)
    arguments: list[str] = []
    for spec in specs:
        description = _zsh_escape(spec.help)
        if not spec.takes_value:
            action = ""
        elif spec.choices:
            action = f":value:({' '.join(spec.choices)})"
        elif spec.is_path:
            action = ":path:_files"
        else:
            action = ":value: "
        for flag in spec.flags:
            arguments.append(f"    '{flag}[{description}]{action}' \\")

    sub_lines = [f"            {name}) _values '{name}' {' '.join(words)} ;;" for name, words in subcommands.items()]
    lines = [
        f"#compdef {prog}",
        "",
        f"_{prog}() {{",
        "  local state",
        "  _arguments -s \\",
        *[f"  {argument}" for argument in arguments],
        "    '1: :->command' \\",
        "    '2: :->subcommand'",
        "  case $state in",
        "    command)",
        f"      _values 'command' {' '.join(subcommands)}",
        "      ;;",
        "    subcommand)",
        "      case $words[2] in",
        *sub_lines,
        "      esac",
        "      ;;",
        "  esac",
        "}",
        "",
        f'_{prog} "$@"',
    ]
    return "\n".join(lines) + "\n"


def _fish_escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("'", "\\'")


def _fish_script(prog: str, parser: argparse.ArgumentParser) -> str:
    specs = option_specs(parser)
    subcommands = subcommand_tree(parser)
    lines = [f"# fish completion for {prog}", f"complete -c {prog} -f"]
    for spec in specs:
        parts = [f"complete -c {prog}"]
        parts.extend(f"-s {flag.lstrip('-')}" for flag in spec.short)
        parts.extend(f"-l {flag.lstrip('-')}" for flag in spec.long)
        if spec.help:
            parts.append(f"-d '{_fish_escape(spec.help)}'")
        if spec.choices:
            parts.append(f"-x -a '{' '.join(spec.choices)}'")
        elif spec.is_path:
            parts.append("-r -F")
        elif spec.takes_value:
            parts.append("-x")
        lines.append(" ".join(parts))
    names = " ".join(subcommands)
    lines.append(f"complete -c {prog} -n 'not __fish_seen_subcommand_from {names}' -a '{names}'")
    for name, words in subcommands.items():
        lines.append(f"complete -c {prog} -n '__fish_seen_subcommand_from {name}' -a '{' '.join(words)}'")
    return "\n".join(lines) + "\n"


def generate_completion(shell: str, parser: argparse.ArgumentParser, prog: str = "bestls") -> str:
    """Return the completion script for ``shell``.

    Raises ``ValueError`` for shells outside ``SHELLS``.
    """
    if shell == "bash":
        return _bash_script(prog, parser)
    if shell == "zsh":
        return _zsh_script(prog, parser)
    if shell == "fish":
        return _fish_script(prog, parser)
    raise ValueError(f"unsupported shell: {shell}")


__all__ = [
    "SHELLS",
    "OptionSpec",
    "option_specs",
    "subcommand_tree",
    "generate_completion",
]
