"""Settings documents with schema defaults and change notification.

A document holds the user values for one plugin id. ``get`` returns the
composite value: the stored user value when it has the schema type, the
schema default otherwise.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from ..errors import SettingsLoadError
from . import config

logger = logging.getLogger(__name__)

PLUGIN_ID = "unixsort:plugin"
FILEBROWSER_PLUGIN_ID = "filebrowser:browser"

USE_C_LOCALE_SORTING = "useCLocaleSorting"
SORT_NOTEBOOKS_FIRST = "sortNotebooksFirst"

DEFAULT_SCHEMAS: dict[str, dict[str, object]] = {
    PLUGIN_ID: {USE_C_LOCALE_SORTING: True},
    FILEBROWSER_PLUGIN_ID: {SORT_NOTEBOOKS_FIRST: False},
}

ChangeListener = Callable[["SettingsDocument"], None]


class SettingsDocument:
    """User values for one plugin, backed by a persistence callback."""

    def __init__(
        self,
        plugin_id: str,
        defaults: Mapping[str, object],
        values: Mapping[str, object],
        save_value: Callable[[str, str, object], None],
    ) -> None:
        self.plugin_id = plugin_id
        self._defaults = dict(defaults)
        self._values = dict(values)
        self._save_value = save_value
        self._listeners: list[ChangeListener] = []

    def get(self, key: str) -> object:
        if key not in self._defaults:
            raise KeyError(key)
        default = self._defaults[key]
        value = self._values.get(key)
        if isinstance(value, type(default)):
            return value
        return default

    def set(self, key: str, value: object) -> None:
        """Store and persist ``value``, then notify change listeners."""
        if key not in self._defaults:
            raise KeyError(key)
        self._values[key] = value
        self._save_value(self.plugin_id, key, value)
        self._emit_changed()

    def replace_values(self, values: Mapping[str, object]) -> None:
        """Swap in externally edited user values and notify listeners."""
        self._values = dict(values)
        self._emit_changed()

    def add_change_listener(self, listener: ChangeListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_change_listener(self, listener: ChangeListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit_changed(self) -> None:
        for listener in list(self._listeners):
            listener(self)


class SettingsRegistry:
    """Loads settings documents by plugin id and caches them."""

    def __init__(
        self,
        schemas: Mapping[str, Mapping[str, object]] | None = None,
        load_values: Callable[[str], dict[str, object]] = config.load_settings_values,
        save_value: Callable[[str, str, object], None] = config.save_settings_value,
    ) -> None:
        self._schemas = dict(DEFAULT_SCHEMAS if schemas is None else schemas)
        self._load_values = load_values
        self._save_value = save_value
        self._documents: dict[str, SettingsDocument] = {}

    def load(self, plugin_id: str) -> SettingsDocument:
        """Return the document for ``plugin_id``.

        Raises ``SettingsLoadError`` for unknown plugin ids or when the
        backing store fails.
        """
        cached = self._documents.get(plugin_id)
        if cached is not None:
            return cached
        defaults = self._schemas.get(plugin_id)
        if defaults is None:
            raise SettingsLoadError(plugin_id)
        try:
            values = self._load_values(plugin_id)
        except Exception as exc:
            raise SettingsLoadError(plugin_id, str(exc)) from exc
        document = SettingsDocument(plugin_id, defaults, values, self._save_value)
        self._documents[plugin_id] = document
        logger.debug("loaded settings document %s", plugin_id)
        return document

    def reload(self, plugin_id: str) -> None:
        """Re-read stored values for an already loaded document."""
        document = self._documents.get(plugin_id)
        if document is None:
            return
        try:
            values = self._load_values(plugin_id)
        except Exception:
            logger.debug("reload of %s failed; keeping current values", plugin_id, exc_info=True)
            return
        document.replace_values(values)


__all__ = [
    "PLUGIN_ID",
    "FILEBROWSER_PLUGIN_ID",
    "USE_C_LOCALE_SORTING",
    "SORT_NOTEBOOKS_FIRST",
    "DEFAULT_SCHEMAS",
    "SettingsDocument",
    "SettingsRegistry",
]
