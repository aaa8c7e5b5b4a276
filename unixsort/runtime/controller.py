"""Settings-reactive sort controller.

The controller owns the sort ``Configuration`` and the set of registered
listings. Every configuration change re-sorts each live listing that has a
sort spec; content refreshes re-sort the single listing that changed.
Nothing here raises to the host: disposed listings are dropped and failed
settings loads leave the defaults in place.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..errors import ListingDisposedError, SettingsLoadError
from ..listing_model.types import Entry, SortSpec
from ..sorting import DEFAULT_CONFIGURATION, Configuration, sort_entries
from .listing import ListingHandle
from .settings import (
    FILEBROWSER_PLUGIN_ID,
    PLUGIN_ID,
    SORT_NOTEBOOKS_FIRST,
    USE_C_LOCALE_SORTING,
    SettingsDocument,
    SettingsRegistry,
)

logger = logging.getLogger(__name__)


class SortController:
    """Applies the tiered comparator to every registered listing."""

    def __init__(self, configuration: Configuration = DEFAULT_CONFIGURATION) -> None:
        self.configuration = configuration
        self._listings: list[ListingHandle] = []
        self._extension_settings: SettingsDocument | None = None

    @property
    def listings(self) -> tuple[ListingHandle, ...]:
        return tuple(self._listings)

    def initialize(self, initial: Configuration) -> None:
        """Set the starting configuration without re-sorting."""
        self.configuration = initial

    def update_configuration(
        self,
        *,
        use_c_locale_sorting: bool | None = None,
        sort_notebooks_first: bool | None = None,
    ) -> bool:
        """Merge the given fields; re-sort everything when a value changed.

        Fields left as ``None`` or given a non-boolean value are ignored.
        """
        patch: dict[str, bool] = {}
        if isinstance(use_c_locale_sorting, bool):
            patch["use_c_locale_sorting"] = use_c_locale_sorting
        if isinstance(sort_notebooks_first, bool):
            patch["sort_notebooks_first"] = sort_notebooks_first
        updated = replace(self.configuration, **patch)
        if updated == self.configuration:
            return False
        self.configuration = updated
        self.resort_all()
        return True

    def toggle_c_locale_sorting(self) -> None:
        """Flip C-locale sorting, through the settings document when attached."""
        new_value = not self.configuration.use_c_locale_sorting
        if self._extension_settings is not None:
            try:
                self._extension_settings.set(USE_C_LOCALE_SORTING, new_value)
                return
            except Exception:
                logger.debug("could not write %s; toggling in memory", USE_C_LOCALE_SORTING, exc_info=True)
        self.update_configuration(use_c_locale_sorting=new_value)

    def attach_settings(self, registry: SettingsRegistry) -> None:
        """Load both settings documents and follow their changes.

        A document that fails to load leaves its field at the default.
        """
        try:
            browser_settings = registry.load(FILEBROWSER_PLUGIN_ID)
        except SettingsLoadError:
            logger.debug("filebrowser settings unavailable; notebooks-first stays default", exc_info=True)
        else:
            self._apply_browser_settings(browser_settings)
            browser_settings.add_change_listener(self._apply_browser_settings)

        try:
            extension_settings = registry.load(PLUGIN_ID)
        except SettingsLoadError:
            logger.debug("extension settings unavailable; C-locale sorting stays default", exc_info=True)
        else:
            self._extension_settings = extension_settings
            self._apply_extension_settings(extension_settings)
            extension_settings.add_change_listener(self._apply_extension_settings)

    def _apply_browser_settings(self, settings: SettingsDocument) -> None:
        value = settings.get(SORT_NOTEBOOKS_FIRST)
        self.update_configuration(sort_notebooks_first=value if isinstance(value, bool) else False)

    def _apply_extension_settings(self, settings: SettingsDocument) -> None:
        value = settings.get(USE_C_LOCALE_SORTING)
        self.update_configuration(use_c_locale_sorting=value if isinstance(value, bool) else True)

    def register_listing(self, handle: ListingHandle) -> None:
        """Take over sorting for ``handle`` and sort it if it has a spec."""
        if handle in self._listings:
            return
        self._listings.append(handle)
        handle.install_sort_strategy(self.sort_listing)
        handle.add_refresh_listener(self.on_listing_content_refreshed)
        spec = handle.sort_state
        if spec is not None:
            self.sort_listing(handle, spec)

    def unregister_listing(self, handle: ListingHandle) -> None:
        if handle not in self._listings:
            return
        self._listings.remove(handle)
        handle.install_sort_strategy(None)
        handle.remove_refresh_listener(self.on_listing_content_refreshed)

    def sort_listing(self, handle: ListingHandle, spec: SortSpec) -> None:
        """Sort ``handle`` with ``spec`` and push the result back."""
        try:
            items = handle.items()
            if not items:
                handle.set_sorted_items([], spec)
            else:
                handle.set_sorted_items(self.sort(items, spec), spec)
            handle.update()
        except ListingDisposedError:
            self._drop(handle)

    def sort(self, items: list[Entry], spec: SortSpec) -> list[Entry]:
        return sort_entries(items, spec, self.configuration)

    def resort_all(self) -> None:
        for handle in list(self._listings):
            if handle.is_disposed:
                self._drop(handle)
                continue
            spec = handle.sort_state
            if spec is None:
                continue
            self.sort_listing(handle, spec)

    def on_listing_content_refreshed(self, handle: ListingHandle) -> None:
        """Re-sort one listing after its contents changed."""
        if handle.is_disposed:
            self._drop(handle)
            return
        spec = handle.sort_state
        if spec is None:
            return
        self.sort_listing(handle, spec)

    def _drop(self, handle: ListingHandle) -> None:
        if handle in self._listings:
            self._listings.remove(handle)
            logger.debug("dropped disposed listing %r", handle)


__all__ = ["SortController"]
