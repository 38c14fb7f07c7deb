"""Tests for table, compact, and JSON emitters.

Checks exact table geometry, theme-driven column colors, and the JSON
schema contract.
"""

from __future__ import annotations

import json
import unittest

from pygments import console

from bestls.errors import InvalidColumnsError
from bestls.listing import EntryKind, EntryRecord, human_size
from bestls.render import JSON_KEYS, render_entries
from bestls.render.ansi import display_width, strip_ansi
from bestls.render.table import COLUMN_KEYS, parse_columns, render_compact, render_table
from bestls.request import OutputFormat
from bestls.theme import TableColors, Theme


def _record(name: str, size: int, kind: EntryKind = EntryKind.FILE) -> EntryRecord:
    return EntryRecord(
        name=name,
        kind=kind,
        size_bytes=size,
        size_human=human_size(size),
        modified="Thu 01 Jan 1970 00:00:00",
        permissions="rw-r--r--",
        owner="alice",
        group="staff",
    )


class TableRenderTests(unittest.TestCase):
    def test_selected_columns_render_with_rounded_borders(self) -> None:
        output = render_table([_record("a.txt", 10)], Theme(), use_color=False, columns=("name", "size"))
        self.assertEqual(
            output,
            "\n".join(
                [
                    "╭───────┬──────╮",
                    "│ Name  │ Size │",
                    "├───────┼──────┤",
                    "│ a.txt │ 10 B │",
                    "╰───────┴──────╯",
                ]
            ),
        )

    def test_default_columns_are_in_fixed_order(self) -> None:
        output = render_table([_record("a.txt", 10)], Theme(), use_color=False)
        header = output.splitlines()[1]
        cells = [cell.strip() for cell in header.strip("│").split("│")]
        self.assertEqual(cells, ["Name", "Type", "Size", "Modified", "Permissions", "Owner", "Group"])

    def test_empty_listing_renders_header_only(self) -> None:
        output = render_table([], Theme(), use_color=False)
        lines = output.splitlines()
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[0].startswith("╭"))
        self.assertIn("Name", lines[1])
        self.assertTrue(lines[2].startswith("╰"))

    def test_colors_come_from_theme_table_slots(self) -> None:
        theme = Theme(table=TableColors(name="red", size="green", date="blue", header="yellow"))
        records = [_record("a.txt", 10)]
        colored = render_table(records, theme, use_color=True)

        self.assertIn(console.codes["yellow"] + "Name" + console.codes["reset"], colored)
        self.assertIn(console.codes["red"] + "a.txt" + console.codes["reset"], colored)
        self.assertIn(console.codes["green"] + "10 B" + console.codes["reset"], colored)
        self.assertIn(console.codes["blue"] + "Thu 01 Jan 1970 00:00:00" + console.codes["reset"], colored)
        self.assertNotIn(console.codes["red"] + "File", colored)
        self.assertEqual(strip_ansi(colored), render_table(records, theme, use_color=False))

    def test_wide_characters_keep_borders_aligned(self) -> None:
        output = render_table([_record("日本.txt", 1), _record("a", 2)], Theme(), use_color=False, columns=("name",))
        widths = {display_width(line) for line in output.splitlines()}
        self.assertEqual(len(widths), 1)

    def test_control_characters_in_names_keep_rows_intact(self) -> None:
        records = [_record("tab\there", 1), _record("line\nbreak", 2), _record("esc\x1b[31m", 3)]
        output = render_table(records, Theme(), use_color=False, columns=("name",))
        lines = output.splitlines()

        self.assertEqual(len(lines), 4 + len(records))
        self.assertEqual(len({display_width(line) for line in lines}), 1)
        self.assertIn("│ tab\\there ", output)
        self.assertIn("│ line\\nbreak ", output)
        self.assertIn("esc\\x1b[31m", output)
        self.assertNotIn("\x1b", output)

    def test_control_characters_are_escaped_in_compact_output(self) -> None:
        self.assertEqual(render_compact([_record("a\nb", 1), _record("c", 1)]), "a\\nb\nc")


class ColumnSelectorTests(unittest.TestCase):
    def test_missing_or_blank_selector_selects_everything(self) -> None:
        self.assertEqual(parse_columns(None), COLUMN_KEYS)
        self.assertEqual(parse_columns(" , "), COLUMN_KEYS)

    def test_selector_is_case_insensitive_and_deduplicated(self) -> None:
        self.assertEqual(parse_columns("Size, name,size"), ("size", "name"))

    def test_unknown_column_is_reported(self) -> None:
        with self.assertRaises(InvalidColumnsError) as ctx:
            parse_columns("name,mime")
        self.assertEqual(ctx.exception.unknown, ["mime"])


class DispatchTests(unittest.TestCase):
    def test_compact_emits_names_only(self) -> None:
        records = [_record("a.txt", 10), _record("b.txt", 20)]
        self.assertEqual(render_compact(records), "a.txt\nb.txt")
        output = render_entries(records, OutputFormat.TABLE, compact=True, use_color=True, theme=Theme())
        self.assertEqual(output, "a.txt\nb.txt")

    def test_compact_is_ignored_for_json(self) -> None:
        output = render_entries([_record("a.txt", 10)], OutputFormat.JSON, compact=True)
        self.assertTrue(output.startswith("["))

    def test_json_compact_has_documented_keys_and_no_whitespace(self) -> None:
        records = [_record("a.txt", 10), _record("src", 4096, EntryKind.DIRECTORY)]
        output = render_entries(records, OutputFormat.JSON)
        self.assertNotIn("\n", output)
        self.assertNotIn('": ', output)
        self.assertNotIn(", ", output)
        self.assertTrue(output.startswith('[{"name":"a.txt","e_type":"File","len_bytes":10,'))
        data = json.loads(output)
        self.assertEqual([set(item) for item in data], [set(JSON_KEYS), set(JSON_KEYS)])
        self.assertEqual(data[0]["e_type"], "File")
        self.assertEqual(data[1]["e_type"], "Directory")
        self.assertEqual(data[1]["len_bytes"], 4096)
        self.assertEqual(data[1]["human_size"], "4.0 KB")

    def test_json_pretty_is_indented_with_same_schema(self) -> None:
        records = [_record("a.txt", 10)]
        pretty = render_entries(records, OutputFormat.JSON_PRETTY)
        self.assertIn('\n  {\n    "name": "a.txt"', pretty)
        self.assertEqual(json.loads(pretty), json.loads(render_entries(records, OutputFormat.JSON)))

    def test_empty_json_is_an_empty_array(self) -> None:
        self.assertEqual(render_entries([], OutputFormat.JSON), "[]")
        self.assertEqual(render_entries([], OutputFormat.JSON_PRETTY), "[]")


if __name__ == "__main__":
    unittest.main()
