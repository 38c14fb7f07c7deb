"""Tests for generated shell completion scripts."""

from __future__ import annotations

import argparse
import unittest

from bestls.cli import build_parser
from bestls.completion import generate_completion, option_specs, subcommand_tree


class CompletionSourceTests(unittest.TestCase):
    def test_option_specs_follow_the_parser(self) -> None:
        specs = {spec.long[0]: spec for spec in option_specs(build_parser()) if spec.long}
        self.assertIn("--filter-ext", specs)
        self.assertEqual(specs["--sort"].short, ("-s",))
        self.assertEqual(specs["--sort"].choices, ("name", "size", "date"))
        self.assertEqual(specs["--format"].choices, ("table", "json", "json-pretty"))
        self.assertTrue(specs["--path"].is_path)
        self.assertTrue(specs["--out"].is_path)
        self.assertFalse(specs["--tree"].takes_value)

    def test_subcommands_list_their_next_words(self) -> None:
        tree = subcommand_tree(build_parser())
        self.assertEqual(tree["completion"], ("bash", "zsh", "fish"))
        self.assertEqual(tree["theme"], ("init", "path", "reset"))

    def test_parser_without_subcommands_has_empty_tree(self) -> None:
        parser = argparse.ArgumentParser(prog="plain")
        parser.add_argument("--mode", choices=["a", "b"])
        self.assertEqual(subcommand_tree(parser), {})
        self.assertEqual([spec.long for spec in option_specs(parser)], [("--help",), ("--mode",)])


class CompletionScriptTests(unittest.TestCase):
    def test_bash_script_registers_function(self) -> None:
        script = generate_completion("bash", build_parser())
        self.assertIn("_bestls() {", script)
        self.assertIn('compgen -W "name size date"', script)
        self.assertIn("--json-pretty", script)
        self.assertTrue(script.endswith("complete -o default -F _bestls bestls\n"))

    def test_zsh_script_describes_options(self) -> None:
        script = generate_completion("zsh", build_parser())
        self.assertTrue(script.startswith("#compdef bestls\n"))
        self.assertIn("'--format[", script)
        self.assertIn(":value:(table json json-pretty)", script)
        self.assertIn("'--path[", script)
        self.assertIn(":path:_files", script)

    def test_fish_script_lists_flags_and_subcommands(self) -> None:
        script = generate_completion("fish", build_parser())
        self.assertIn("complete -c bestls -s a -l all", script)
        self.assertIn("-l depth", script)
        self.assertIn("-a 'completion theme'", script)
        self.assertIn("__fish_seen_subcommand_from theme' -a 'init path reset'", script)

    def test_prog_name_is_configurable(self) -> None:
        script = generate_completion("bash", build_parser(), prog="bls")
        self.assertIn("complete -o default -F _bls bls", script)

    def test_unknown_shell_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            generate_completion("powershell", build_parser())


if __name__ == "__main__":
    unittest.main()
