"""Listing surfaces the sort controller drives.

``ListingHandle`` is the narrow contract the controller needs from a host
listing. ``DirListing`` implements it in memory; the CLI and tests use it in
place of a real file-browser widget.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol

from ..errors import ListingDisposedError
from ..listing_model.types import Entry, SortSpec

RefreshListener = Callable[["ListingHandle"], None]
SortStrategy = Callable[["ListingHandle", SortSpec], None]


class ListingHandle(Protocol):
    @property
    def sort_state(self) -> SortSpec | None: ...

    @property
    def is_disposed(self) -> bool: ...

    def items(self) -> list[Entry]: ...

    def set_sorted_items(self, items: list[Entry], spec: SortSpec) -> None: ...

    def update(self) -> None: ...

    def install_sort_strategy(self, strategy: SortStrategy | None) -> None: ...

    def add_refresh_listener(self, listener: RefreshListener) -> None: ...

    def remove_refresh_listener(self, listener: RefreshListener) -> None: ...


def default_sort(items: Iterable[Entry], spec: SortSpec) -> list[Entry]:
    """Built-in listing order used when no strategy is installed."""
    return sorted(
        items,
        key=lambda item: (not item.is_dir, item.name.lower()),
        reverse=spec.direction == "descending",
    )


class DirListing:
    """In-memory listing for one directory view."""

    def __init__(self, entries: Iterable[Entry] = (), sort_state: SortSpec | None = None) -> None:
        self._items: list[Entry] = list(entries)
        self._sorted_items: list[Entry] = list(self._items)
        self._sort_state = sort_state
        self._strategy: SortStrategy | None = None
        self._refresh_listeners: list[RefreshListener] = []
        self._disposed = False
        self.update_requests = 0

    @property
    def sort_state(self) -> SortSpec | None:
        return self._sort_state

    @property
    def sorted_items(self) -> list[Entry]:
        return list(self._sorted_items)

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def items(self) -> list[Entry]:
        if self._disposed:
            raise ListingDisposedError("listing has been disposed")
        return list(self._items)

    def set_sorted_items(self, items: list[Entry], spec: SortSpec) -> None:
        if self._disposed:
            raise ListingDisposedError("listing has been disposed")
        self._sorted_items = list(items)
        self._sort_state = spec

    def update(self) -> None:
        """Request a re-render of the displayed rows."""
        if self._disposed:
            return
        self.update_requests += 1

    def install_sort_strategy(self, strategy: SortStrategy | None) -> None:
        self._strategy = strategy

    def sort(self, spec: SortSpec) -> None:
        """Apply ``spec``; called when the user clicks a column header."""
        if self._strategy is not None:
            self._strategy(self, spec)
            return
        self.set_sorted_items(default_sort(self.items(), spec), spec)
        self.update()

    def refresh(self, entries: Iterable[Entry]) -> None:
        """Replace the underlying contents and notify refresh listeners."""
        if self._disposed:
            raise ListingDisposedError("listing has been disposed")
        self._items = list(entries)
        self._sorted_items = list(self._items)
        for listener in list(self._refresh_listeners):
            listener(self)

    def add_refresh_listener(self, listener: RefreshListener) -> None:
        if listener not in self._refresh_listeners:
            self._refresh_listeners.append(listener)

    def remove_refresh_listener(self, listener: RefreshListener) -> None:
        if listener in self._refresh_listeners:
            self._refresh_listeners.remove(listener)

    def dispose(self) -> None:
        self._disposed = True
        self._strategy = None
        self._refresh_listeners.clear()


class FileBrowser:
    """A file-browser widget owning one listing."""

    def __init__(self, listing: DirListing, browser_id: str = "filebrowser") -> None:
        self.id = browser_id
        self.listing = listing


class FileBrowserTracker:
    """Tracks open file browsers and announces additions and removals."""

    def __init__(self) -> None:
        self._browsers: list[FileBrowser] = []
        self._added_listeners: list[Callable[[FileBrowser], None]] = []
        self._removed_listeners: list[Callable[[FileBrowser], None]] = []

    def __iter__(self):
        return iter(list(self._browsers))

    def __len__(self) -> int:
        return len(self._browsers)

    def add(self, browser: FileBrowser) -> None:
        if browser in self._browsers:
            return
        self._browsers.append(browser)
        for listener in list(self._added_listeners):
            listener(browser)

    def remove(self, browser: FileBrowser) -> None:
        if browser not in self._browsers:
            return
        self._browsers.remove(browser)
        for listener in list(self._removed_listeners):
            listener(browser)

    def add_widget_added_listener(self, listener: Callable[[FileBrowser], None]) -> None:
        self._added_listeners.append(listener)

    def add_widget_removed_listener(self, listener: Callable[[FileBrowser], None]) -> None:
        self._removed_listeners.append(listener)


__all__ = [
    "ListingHandle",
    "RefreshListener",
    "SortStrategy",
    "default_sort",
    "DirListing",
    "FileBrowser",
    "FileBrowserTracker",
]
