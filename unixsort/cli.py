"""Command-line front door for unixsort.

Scans a directory, runs the listing through the sort controller with the
persisted settings, and prints the rows in display order.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from .errors import SettingsLoadError
from .listing_model import SORT_KEYS, Entry, SortSpec, list_directory_entries
from .runtime import Application, DirListing, FileBrowser, SettingsRegistry, activate
from .runtime.commands import COMMAND_TOGGLE_UNIX_SORT
from .runtime.settings import FILEBROWSER_PLUGIN_ID, SORT_NOTEBOOKS_FIRST

logger = logging.getLogger(__name__)


def render_listing(entries: Iterable[Entry]) -> str:
    """One name per line; directories get a trailing ``/``."""
    return "".join(f"{entry.name}/\n" if entry.is_dir else f"{entry.name}\n" for entry in entries)


def _store_notebooks_first(registry: SettingsRegistry, value: bool) -> None:
    try:
        registry.load(FILEBROWSER_PLUGIN_ID).set(SORT_NOTEBOOKS_FIRST, value)
    except SettingsLoadError:
        logger.debug("could not store %s", SORT_NOTEBOOKS_FIRST, exc_info=True)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the sorted listing of a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        description="List a directory in LC_COLLATE=C (Unix style) or locale-aware order."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("--key", choices=SORT_KEYS, default="name", help="Column to sort by.")
    parser.add_argument("--descending", action="store_true", help="Reverse the order within each tier.")
    parser.add_argument(
        "--notebooks-first",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Persist whether notebooks sort right after directories.",
    )
    parser.add_argument(
        "--toggle-unix-sorting",
        action="store_true",
        help="Flip the persisted Unix style sorting preference before listing.",
    )
    parser.add_argument("--no-hidden", action="store_true", help="Skip entries whose name starts with a dot.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr.")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    entries, scan_error = list_directory_entries(path, show_hidden=not args.no_hidden)
    if scan_error is not None:
        raise SystemExit(f"Cannot read directory {path}: {scan_error}")

    registry = SettingsRegistry()
    if args.notebooks_first is not None:
        _store_notebooks_first(registry, args.notebooks_first)

    listing = DirListing(entries)
    app = Application(settings=registry)
    app.tracker.add(FileBrowser(listing))
    activate(app)
    if args.toggle_unix_sorting:
        app.commands.execute(COMMAND_TOGGLE_UNIX_SORT)

    listing.sort(SortSpec(key=args.key, direction="descending" if args.descending else "ascending"))
    sys.stdout.write(render_listing(listing.sorted_items))


if __name__ == "__main__":
    main()
