"""Pure sorting engine for directory listings."""

from __future__ import annotations

from .collation import c_locale_compare, locale_compare, locale_sort_key
from .comparator import (
    DEFAULT_CONFIGURATION,
    Configuration,
    build_entry_comparator,
    compare_by_key,
    entry_priority,
    sort_entries,
    timestamp_seconds,
)

__all__ = [
    "c_locale_compare",
    "locale_compare",
    "locale_sort_key",
    "Configuration",
    "DEFAULT_CONFIGURATION",
    "build_entry_comparator",
    "compare_by_key",
    "entry_priority",
    "sort_entries",
    "timestamp_seconds",
]
