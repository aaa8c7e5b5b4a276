"""Filesystem scanning into listing entries."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

from .types import DIRECTORY, FILE, NOTEBOOK, Entry

NOTEBOOK_SUFFIX = ".ipynb"


def entry_type_for(name: str, is_dir: bool) -> str:
    """Classify a directory child the way the contents model does."""
    if is_dir:
        return DIRECTORY
    if name.lower().endswith(NOTEBOOK_SUFFIX):
        return NOTEBOOK
    return FILE


def format_mtime(mtime: float) -> str:
    """Return ``mtime`` epoch seconds as an ISO-8601 UTC timestamp."""
    return datetime.fromtimestamp(mtime, tz=timezone.utc).isoformat().replace("+00:00", "Z")


def list_directory_entries(
    directory: Path,
    show_hidden: bool = True,
) -> tuple[list[Entry], Exception | None]:
    """List children of ``directory`` as unsorted entries in scan order.

    Returns ``(entries, scan_error)``. ``scan_error`` is set when the
    directory cannot be scanned; stat failures on single children leave
    ``last_modified`` and ``size`` unset instead.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue

                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False

                last_modified: str | None = None
                size: int | None = None
                try:
                    stat = child.stat()
                    last_modified = format_mtime(stat.st_mtime)
                    if not is_dir:
                        size = int(stat.st_size)
                except OSError:
                    pass

                entries.append(
                    Entry(
                        name=name,
                        type=entry_type_for(name, is_dir),
                        last_modified=last_modified,
                        size=size,
                    )
                )
    except (PermissionError, OSError) as exc:
        return [], exc

    return entries, None


__all__ = [
    "NOTEBOOK_SUFFIX",
    "entry_type_for",
    "format_mtime",
    "list_directory_entries",
]
