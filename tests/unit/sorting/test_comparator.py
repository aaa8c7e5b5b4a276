"""Tests for the tiered listing comparator.

Covers tier placement, key comparators, direction handling, and stability.
"""

from __future__ import annotations

import itertools
import unittest
from datetime import datetime, timezone

from unixsort.listing_model import SORT_DIRECTIONS, SORT_KEYS, Entry, SortSpec
from unixsort.sorting import Configuration, sort_entries, timestamp_seconds

UNIX_ORDER = [
    ".hidden",
    ".profile",
    "123file",
    "ABC",
    "Makefile",
    "README",
    "_config",
    "abc",
    "readme",
    "zebra",
]

ALL_CONFIGURATIONS = [
    Configuration(use_c_locale_sorting=c_locale, sort_notebooks_first=notebooks_first)
    for c_locale, notebooks_first in itertools.product((True, False), repeat=2)
]
ALL_SPECS = [SortSpec(key=key, direction=direction) for key in SORT_KEYS for direction in SORT_DIRECTIONS]


def _names(entries: list[Entry]) -> list[str]:
    return [entry.name for entry in entries]


def _mixed_entries() -> list[Entry]:
    return [
        Entry("zeta.txt", "file", "2024-01-03T00:00:00Z", 30),
        Entry("beta.ipynb", "notebook", "2024-01-01T00:00:00Z", 200),
        Entry("docs", "directory", "2024-01-02T00:00:00Z", None),
        Entry("Alpha.py", "file", "2024-01-05T00:00:00Z", 5),
        Entry("alpha.ipynb", "notebook", "2024-01-04T00:00:00Z", 10),
        Entry("build", "directory", "2024-01-06T00:00:00Z", None),
    ]


class SortEntriesNameTests(unittest.TestCase):
    def test_c_locale_mode_matches_unix_collation(self) -> None:
        shuffled = ["readme", "_config", "zebra", "ABC", ".profile", "abc", "README", "123file", "Makefile", ".hidden"]
        entries = [Entry(name) for name in shuffled]

        result = sort_entries(entries, SortSpec("name", "ascending"), Configuration(use_c_locale_sorting=True))

        self.assertEqual(_names(result), UNIX_ORDER)

    def test_locale_mode_groups_case_variants_and_keeps_their_input_order(self) -> None:
        entries = [Entry("b"), Entry("ABC"), Entry("abc"), Entry("a")]

        result = sort_entries(entries, SortSpec("name", "ascending"), Configuration(use_c_locale_sorting=False))

        self.assertEqual(_names(result), ["a", "ABC", "abc", "b"])

    def test_locale_mode_sorts_numbers_naturally(self) -> None:
        entries = [Entry("file10"), Entry("file2"), Entry("file1")]

        result = sort_entries(entries, SortSpec("name", "ascending"), Configuration(use_c_locale_sorting=False))

        self.assertEqual(_names(result), ["file1", "file2", "file10"])

    def test_descending_reverses_names(self) -> None:
        entries = [Entry(name) for name in UNIX_ORDER]

        result = sort_entries(entries, SortSpec("name", "descending"), Configuration())

        self.assertEqual(_names(result), list(reversed(UNIX_ORDER)))

    def test_unknown_key_falls_back_to_name(self) -> None:
        entries = [Entry("b"), Entry("a")]

        result = sort_entries(entries, SortSpec("owner", "ascending"), Configuration())

        self.assertEqual(_names(result), ["a", "b"])


class SortEntriesTierTests(unittest.TestCase):
    def test_directories_come_first_for_every_spec_and_configuration(self) -> None:
        for spec, config in itertools.product(ALL_SPECS, ALL_CONFIGURATIONS):
            with self.subTest(spec=spec, config=config):
                result = sort_entries(_mixed_entries(), spec, config)
                kinds = [entry.is_dir for entry in result]
                self.assertEqual(kinds, [True, True, False, False, False, False])

    def test_notebooks_follow_directories_when_enabled(self) -> None:
        config = Configuration(sort_notebooks_first=True)
        for spec in ALL_SPECS:
            with self.subTest(spec=spec):
                result = sort_entries(_mixed_entries(), spec, config)
                types = [entry.type for entry in result]
                self.assertEqual(types, ["directory", "directory", "notebook", "notebook", "file", "file"])

    def test_notebooks_mix_with_files_when_disabled(self) -> None:
        result = sort_entries(_mixed_entries(), SortSpec("name", "ascending"), Configuration())

        self.assertEqual(_names(result), ["build", "docs", "Alpha.py", "alpha.ipynb", "beta.ipynb", "zeta.txt"])

    def test_descending_never_moves_directories_after_files(self) -> None:
        result = sort_entries(_mixed_entries(), SortSpec("name", "descending"), Configuration(sort_notebooks_first=True))

        self.assertEqual(_names(result), ["docs", "build", "beta.ipynb", "alpha.ipynb", "zeta.txt", "Alpha.py"])


class SortEntriesKeyTests(unittest.TestCase):
    def test_last_modified_ascending_puts_older_first(self) -> None:
        entries = [
            Entry("new", last_modified="2024-05-01T12:00:00Z"),
            Entry("old", last_modified="2020-01-01T00:00:00+00:00"),
            Entry("mid", last_modified=datetime(2022, 6, 1, tzinfo=timezone.utc)),
        ]

        ascending = sort_entries(entries, SortSpec("last_modified", "ascending"), Configuration())
        descending = sort_entries(entries, SortSpec("last_modified", "descending"), Configuration())

        self.assertEqual(_names(ascending), ["old", "mid", "new"])
        self.assertEqual(_names(descending), ["new", "mid", "old"])

    def test_malformed_timestamps_count_as_epoch(self) -> None:
        entries = [
            Entry("dated", last_modified="2024-01-01T00:00:00Z"),
            Entry("garbage", last_modified="not a date"),
            Entry("missing", last_modified=None),
        ]

        result = sort_entries(entries, SortSpec("last_modified", "ascending"), Configuration())

        self.assertEqual(_names(result), ["garbage", "missing", "dated"])
        self.assertEqual(timestamp_seconds("not a date"), 0.0)
        self.assertEqual(timestamp_seconds(float("nan")), 0.0)

    def test_file_size_ascending_lists_largest_first(self) -> None:
        entries = [Entry("small", size=1), Entry("large", size=300), Entry("medium", size=20)]

        ascending = sort_entries(entries, SortSpec("file_size", "ascending"), Configuration())
        descending = sort_entries(entries, SortSpec("file_size", "descending"), Configuration())

        self.assertEqual(_names(ascending), ["large", "medium", "small"])
        self.assertEqual(_names(descending), ["small", "medium", "large"])

    def test_missing_size_counts_as_zero(self) -> None:
        entries = [Entry("unknown", size=None), Entry("one", size=1), Entry("empty", size=0)]

        result = sort_entries(entries, SortSpec("file_size", "descending"), Configuration())

        self.assertEqual(_names(result), ["unknown", "empty", "one"])

    def test_huge_integer_size_sorts_without_overflow(self) -> None:
        entries = [Entry("small", size=1), Entry("huge", size=10**400), Entry("fractional", size=2.5)]

        result = sort_entries(entries, SortSpec("file_size", "ascending"), Configuration())

        self.assertEqual(_names(result), ["huge", "fractional", "small"])

    def test_huge_integer_timestamp_counts_as_epoch(self) -> None:
        entries = [Entry("dated", last_modified=1_700_000_000), Entry("huge", last_modified=10**400)]

        result = sort_entries(entries, SortSpec("last_modified", "ascending"), Configuration())

        self.assertEqual(_names(result), ["huge", "dated"])
        self.assertEqual(timestamp_seconds(10**400), 0.0)


class SortEntriesInvariantTests(unittest.TestCase):
    def test_ties_keep_input_order(self) -> None:
        entries = [Entry(f"f{idx}", size=7) for idx in range(6)]

        for direction in SORT_DIRECTIONS:
            with self.subTest(direction=direction):
                result = sort_entries(entries, SortSpec("file_size", direction), Configuration())
                self.assertEqual(result, entries)

    def test_input_is_not_mutated(self) -> None:
        entries = _mixed_entries()
        snapshot = list(entries)

        result = sort_entries(entries, SortSpec("name", "ascending"), Configuration())

        self.assertEqual(entries, snapshot)
        self.assertIsNot(result, entries)
        self.assertCountEqual(result, entries)

    def test_sorting_sorted_output_is_idempotent(self) -> None:
        for spec, config in itertools.product(ALL_SPECS, ALL_CONFIGURATIONS):
            with self.subTest(spec=spec, config=config):
                once = sort_entries(_mixed_entries(), spec, config)
                self.assertEqual(sort_entries(once, spec, config), once)

    def test_toggling_a_flag_twice_restores_output(self) -> None:
        entries = [Entry(name) for name in reversed(UNIX_ORDER)]
        spec = SortSpec("name", "ascending")
        original = Configuration()
        toggled = Configuration(use_c_locale_sorting=not original.use_c_locale_sorting)
        restored = Configuration(use_c_locale_sorting=not toggled.use_c_locale_sorting)

        self.assertNotEqual(sort_entries(entries, spec, toggled), sort_entries(entries, spec, original))
        self.assertEqual(sort_entries(entries, spec, restored), sort_entries(entries, spec, original))


if __name__ == "__main__":
    unittest.main()
