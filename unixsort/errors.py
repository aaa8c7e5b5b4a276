"""Exceptions raised at the host boundary.

Both are caught by the sort controller; neither reaches the end user.
"""

from __future__ import annotations


class SettingsLoadError(Exception):
    """Settings store could not load a document."""

    def __init__(self, plugin_id: str, reason: str = "unknown settings document") -> None:
        super().__init__(f"{plugin_id}: {reason}")
        self.plugin_id = plugin_id
        self.reason = reason


class ListingDisposedError(Exception):
    """A listing handle was used after the host disposed it."""


__all__ = ["SettingsLoadError", "ListingDisposedError"]
