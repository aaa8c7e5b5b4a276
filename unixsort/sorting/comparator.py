"""Tiered listing comparator.

Entries are grouped into tiers before any key comparison: directories, then
notebooks when ``sort_notebooks_first`` is set, then everything else. Tier
order never flips with the sort direction; only the key comparison inside a
tier does.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import cmp_to_key

from ..listing_model.types import DIRECTORY, NOTEBOOK, Entry, SortSpec
from .collation import c_locale_compare, locale_compare

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Configuration:
    """Process-wide sort preferences."""

    use_c_locale_sorting: bool = True
    sort_notebooks_first: bool = False


DEFAULT_CONFIGURATION = Configuration()


def entry_priority(entry: Entry, config: Configuration) -> int:
    """Return the tier of ``entry``: 0 directories, 1 notebooks, 2 the rest."""
    if entry.type == DIRECTORY:
        return 0
    if config.sort_notebooks_first and entry.type == NOTEBOOK:
        return 1
    return 2


def timestamp_seconds(value: object) -> float:
    """Normalize a ``last_modified`` value to epoch seconds.

    Missing or unparseable values count as the epoch.
    """
    if isinstance(value, datetime):
        moment = value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
        return (moment - EPOCH).total_seconds()
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, float):
        return value if math.isfinite(value) else 0.0
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return 0.0
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return timestamp_seconds(datetime.fromisoformat(text))
        except ValueError:
            return 0.0
    return 0.0


def entry_size(entry: Entry) -> int | float:
    size = entry.size
    if isinstance(size, bool) or not isinstance(size, (int, float)):
        return 0
    if isinstance(size, float) and not math.isfinite(size):
        return 0
    return size


def name_comparator(config: Configuration) -> Callable[[str, str], int]:
    return c_locale_compare if config.use_c_locale_sorting else locale_compare


def compare_by_key(a: Entry, b: Entry, key: str, config: Configuration) -> float:
    """Raw key comparison before the direction multiplier.

    ``file_size`` compares ``b`` against ``a``, so its ascending order shows
    the largest entries first. Unknown keys compare by name.
    """
    if key == "last_modified":
        return timestamp_seconds(a.last_modified) - timestamp_seconds(b.last_modified)
    if key == "file_size":
        size_a = entry_size(a)
        size_b = entry_size(b)
        return (size_b > size_a) - (size_b < size_a)
    return name_comparator(config)(a.name, b.name)


def build_entry_comparator(spec: SortSpec, config: Configuration) -> Callable[[Entry, Entry], float]:
    """Return a ``cmp``-style function applying tiers, then the directed key."""
    reverse = spec.reverse

    def compare(a: Entry, b: Entry) -> float:
        priority_a = entry_priority(a, config)
        priority_b = entry_priority(b, config)
        if priority_a != priority_b:
            return priority_a - priority_b
        return compare_by_key(a, b, spec.key, config) * reverse

    return compare


def sort_entries(
    entries: Iterable[Entry],
    spec: SortSpec,
    config: Configuration = DEFAULT_CONFIGURATION,
) -> list[Entry]:
    """Return a new stably-sorted list; ``entries`` is left untouched."""
    return sorted(entries, key=cmp_to_key(build_entry_comparator(spec, config)))


__all__ = [
    "Configuration",
    "DEFAULT_CONFIGURATION",
    "entry_priority",
    "timestamp_seconds",
    "entry_size",
    "name_comparator",
    "compare_by_key",
    "build_entry_comparator",
    "sort_entries",
]
