"""Domain model for directory listings.

This package contains non-UI listing primitives:
- entry and sort-spec datatypes
- filesystem scanning into entries
"""

from __future__ import annotations

from .types import (
    DIRECTORY,
    FILE,
    NOTEBOOK,
    SORT_DIRECTIONS,
    SORT_KEYS,
    Entry,
    SortSpec,
)
from .fs import NOTEBOOK_SUFFIX, entry_type_for, format_mtime, list_directory_entries

__all__ = [
    "DIRECTORY",
    "FILE",
    "NOTEBOOK",
    "SORT_DIRECTIONS",
    "SORT_KEYS",
    "Entry",
    "SortSpec",
    "NOTEBOOK_SUFFIX",
    "entry_type_for",
    "format_mtime",
    "list_directory_entries",
]
