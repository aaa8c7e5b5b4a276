"""Extension activation: wires settings, controller, command and browsers."""

from __future__ import annotations

from dataclasses import dataclass, field

from .commands import (
    COMMAND_TOGGLE_UNIX_SORT,
    CONTEXT_MENU_RANK,
    DIR_LISTING_ITEM_SELECTOR,
    DIR_LISTING_SELECTOR,
    TOGGLE_UNIX_SORT_CAPTION,
    TOGGLE_UNIX_SORT_LABEL,
    Command,
    CommandRegistry,
    ContextMenu,
    MenuItem,
)
from .controller import SortController
from .listing import FileBrowser, FileBrowserTracker
from .settings import SettingsRegistry


@dataclass
class Application:
    """Host services the extension needs at activation time."""

    tracker: FileBrowserTracker = field(default_factory=FileBrowserTracker)
    commands: CommandRegistry = field(default_factory=CommandRegistry)
    context_menu: ContextMenu = field(default_factory=ContextMenu)
    settings: SettingsRegistry | None = None


def activate(app: Application, controller: SortController | None = None) -> SortController:
    """Install sorting on every current and future file browser.

    Without a settings registry the controller runs purely in memory with
    default configuration.
    """
    if controller is None:
        controller = SortController()
    if app.settings is not None:
        controller.attach_settings(app.settings)

    app.commands.add_command(
        Command(
            command_id=COMMAND_TOGGLE_UNIX_SORT,
            label=TOGGLE_UNIX_SORT_LABEL,
            caption=TOGGLE_UNIX_SORT_CAPTION,
            is_toggleable=True,
            is_toggled=lambda: controller.configuration.use_c_locale_sorting,
            execute=controller.toggle_c_locale_sorting,
        )
    )
    for selector in (DIR_LISTING_ITEM_SELECTOR, DIR_LISTING_SELECTOR):
        app.context_menu.add_item(MenuItem(command=COMMAND_TOGGLE_UNIX_SORT, selector=selector, rank=CONTEXT_MENU_RANK))

    def register_browser(browser: FileBrowser) -> None:
        controller.register_listing(browser.listing)

    def unregister_browser(browser: FileBrowser) -> None:
        controller.unregister_listing(browser.listing)

    for browser in app.tracker:
        register_browser(browser)
    app.tracker.add_widget_added_listener(register_browser)
    app.tracker.add_widget_removed_listener(unregister_browser)
    return controller


__all__ = ["Application", "activate"]
