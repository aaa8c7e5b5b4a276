"""Command registry and context-menu item definitions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

COMMAND_TOGGLE_UNIX_SORT = "filebrowser:toggle-unix-sorting"
TOGGLE_UNIX_SORT_LABEL = "Unix Style Sorting"
TOGGLE_UNIX_SORT_CAPTION = "Sort: dot files first, uppercase before lowercase"

DIR_LISTING_ITEM_SELECTOR = ".jp-DirListing-item"
DIR_LISTING_SELECTOR = ".jp-DirListing"
CONTEXT_MENU_RANK = 100


@dataclass(frozen=True)
class Command:
    """One executable command plus its presentation metadata."""

    command_id: str
    label: str
    execute: Callable[[], None]
    caption: str = ""
    is_toggleable: bool = False
    is_toggled: Callable[[], bool] | None = None


@dataclass(frozen=True)
class MenuItem:
    command: str
    selector: str
    rank: int = CONTEXT_MENU_RANK


class CommandRegistry:
    """Command ids mapped to their definitions."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def add_command(self, command: Command) -> None:
        if command.command_id in self._commands:
            raise ValueError(f"command already registered: {command.command_id}")
        self._commands[command.command_id] = command

    def has_command(self, command_id: str) -> bool:
        return command_id in self._commands

    def label(self, command_id: str) -> str:
        return self._commands[command_id].label

    def is_toggled(self, command_id: str) -> bool:
        """Return toggled state; non-toggleable commands report ``False``."""
        command = self._commands[command_id]
        if not command.is_toggleable or command.is_toggled is None:
            return False
        return bool(command.is_toggled())

    def execute(self, command_id: str) -> None:
        self._commands[command_id].execute()


class ContextMenu:
    """Context-menu items keyed by the listing selector they attach to."""

    def __init__(self) -> None:
        self._items: list[MenuItem] = []

    def add_item(self, item: MenuItem) -> None:
        self._items.append(item)

    def items_for(self, selector: str) -> list[MenuItem]:
        """Items for ``selector`` in rank order; equal ranks keep insertion order."""
        return sorted((item for item in self._items if item.selector == selector), key=lambda item: item.rank)


__all__ = [
    "COMMAND_TOGGLE_UNIX_SORT",
    "TOGGLE_UNIX_SORT_LABEL",
    "TOGGLE_UNIX_SORT_CAPTION",
    "DIR_LISTING_ITEM_SELECTOR",
    "DIR_LISTING_SELECTOR",
    "CONTEXT_MENU_RANK",
    "Command",
    "MenuItem",
    "CommandRegistry",
    "ContextMenu",
]
