"""Tests for filter-chain validation and application."""

from __future__ import annotations

import unittest

from bestls.errors import (
    InvalidMaxSizeError,
    InvalidMinSizeError,
    InvalidPatternError,
    InvalidRequestError,
    InvalidSizeRangeError,
)
from bestls.filters import FilterConfig, apply_filters, build_filter_config
from bestls.listing import EntryKind, EntryRecord, human_size


def _record(name: str, size: int, kind: EntryKind = EntryKind.FILE) -> EntryRecord:
    return EntryRecord(
        name=name,
        kind=kind,
        size_bytes=size,
        size_human=human_size(size),
        modified="Thu 01 Jan 1970 00:00:00",
        permissions="rw-r--r--",
        owner="user",
        group="staff",
    )


class BuildFilterConfigTests(unittest.TestCase):
    def test_no_options_disables_every_predicate(self) -> None:
        config = build_filter_config()
        self.assertTrue(config.is_empty)
        self.assertEqual(config, FilterConfig())

    def test_sizes_are_parsed_to_bytes(self) -> None:
        config = build_filter_config(min_size="1KB", max_size="1MB")
        self.assertEqual(config.min_size, 1024)
        self.assertEqual(config.max_size, 1024**2)

    def test_blank_extension_list_disables_extension_predicate(self) -> None:
        self.assertIsNone(build_filter_config(filter_ext=" , ").extensions)

    def test_invalid_pattern_is_reported(self) -> None:
        with self.assertRaises(InvalidPatternError):
            build_filter_config(filter_name="[oops")

    def test_invalid_min_and_max_sizes_are_distinguished(self) -> None:
        with self.assertRaises(InvalidMinSizeError):
            build_filter_config(min_size="big")
        with self.assertRaises(InvalidMaxSizeError):
            build_filter_config(max_size="10XB")

    def test_inverted_range_is_rejected(self) -> None:
        with self.assertRaises(InvalidSizeRangeError) as ctx:
            build_filter_config(min_size="1MB", max_size="1KB")
        self.assertIsInstance(ctx.exception, InvalidRequestError)
        self.assertIn("invalid size range", str(ctx.exception))

    def test_equal_bounds_are_allowed(self) -> None:
        config = build_filter_config(min_size="2KB", max_size="2048")
        self.assertEqual((config.min_size, config.max_size), (2048, 2048))


class ApplyFiltersTests(unittest.TestCase):
    def test_size_range_keeps_only_records_inside_bounds(self) -> None:
        records = [_record("small", 100), _record("mid", 2048), _record("large", 1_500_000)]
        config = build_filter_config(min_size="1KB", max_size="1MB")
        self.assertEqual([r.name for r in apply_filters(records, config)], ["mid"])

    def test_equal_bounds_keep_exact_size_only(self) -> None:
        records = [_record("a", 2047), _record("b", 2048), _record("c", 2049)]
        config = build_filter_config(min_size="2048", max_size="2048")
        self.assertEqual([r.name for r in apply_filters(records, config)], ["b"])

    def test_record_is_kept_only_when_every_predicate_accepts(self) -> None:
        records = [
            _record("main.rs", 500),
            _record("lib.rs", 5000),
            _record("README.md", 500),
            _record("tool.py", 500),
        ]
        config = build_filter_config(filter_ext="rs,md", filter_name="*.rs", max_size="1KB")
        self.assertEqual([r.name for r in apply_filters(records, config)], ["main.rs"])

    def test_predicates_apply_to_directories_too(self) -> None:
        records = [_record("src", 4096, EntryKind.DIRECTORY), _record("a.txt", 10)]
        config = build_filter_config(max_size="1KB")
        self.assertEqual([r.name for r in apply_filters(records, config)], ["a.txt"])

    def test_empty_config_returns_a_copy_in_order(self) -> None:
        records = [_record("b", 1), _record("a", 2)]
        kept = apply_filters(records, FilterConfig())
        self.assertEqual(kept, records)
        self.assertIsNot(kept, records)


if __name__ == "__main__":
    unittest.main()
