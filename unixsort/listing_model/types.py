"""Domain datatypes for directory listing entries and sort requests."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

DIRECTORY = "directory"
NOTEBOOK = "notebook"
FILE = "file"

SORT_KEYS: tuple[str, ...] = ("name", "last_modified", "file_size")
SORT_DIRECTIONS: tuple[str, ...] = ("ascending", "descending")


@dataclass(frozen=True)
class Entry:
    """One directory listing row as exposed by the host contents model.

    ``type`` is ``"directory"``, ``"notebook"``, ``"file"`` or any other kind
    the host reports. ``last_modified`` may be an ISO-8601 string, a
    ``datetime`` or epoch seconds.
    """

    name: str
    type: str = FILE
    last_modified: str | datetime | float | None = None
    size: int | None = None

    @property
    def is_dir(self) -> bool:
        return self.type == DIRECTORY


@dataclass(frozen=True)
class SortSpec:
    """Column key plus direction, as picked in the listing header."""

    key: str = "name"
    direction: str = "ascending"

    @property
    def reverse(self) -> int:
        """Return ``-1`` for descending specs and ``1`` otherwise."""
        return -1 if self.direction == "descending" else 1


__all__ = [
    "DIRECTORY",
    "NOTEBOOK",
    "FILE",
    "SORT_KEYS",
    "SORT_DIRECTIONS",
    "Entry",
    "SortSpec",
]
