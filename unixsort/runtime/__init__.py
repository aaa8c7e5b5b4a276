"""Runtime wiring around the sorting engine.

This package groups the settings-reactive controller, the listing contract
it drives, settings persistence, and the toggle command registration.
"""

from __future__ import annotations

from .controller import SortController
from .listing import DirListing, FileBrowser, FileBrowserTracker, ListingHandle
from .plugin import Application, activate
from .settings import SettingsDocument, SettingsRegistry

__all__ = [
    "SortController",
    "DirListing",
    "FileBrowser",
    "FileBrowserTracker",
    "ListingHandle",
    "Application",
    "activate",
    "SettingsDocument",
    "SettingsRegistry",
]
