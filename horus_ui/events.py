"""Mapping of key presses to configurator actions."""

from __future__ import annotations

from enum import Enum

__all__ = ["AppEvent", "handle_key_event"]


class AppEvent(Enum):
    """Actions a key press can trigger."""

    QUIT = "quit"
    SAVE = "save"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    EDIT = "edit"
    TOGGLE = "toggle"
    SWITCH_PANEL = "switch_panel"
    OPEN_COLOR_PICKER = "open_color_picker"
    OPEN_ICON_SELECTOR = "open_icon_selector"
    UNKNOWN = "unknown"


_CHAR_EVENTS = {
    "q": AppEvent.QUIT,
    "s": AppEvent.SAVE,
    " ": AppEvent.TOGGLE,
    "c": AppEvent.OPEN_COLOR_PICKER,
    "i": AppEvent.OPEN_ICON_SELECTOR,
}

_NAMED_EVENTS = {
    "up": AppEvent.MOVE_UP,
    "down": AppEvent.MOVE_DOWN,
    "enter": AppEvent.EDIT,
    "tab": AppEvent.SWITCH_PANEL,
}


def handle_key_event(key: str) -> AppEvent:
    """Translate a key into an action.

    A single character stands for a typed character; longer strings name a
    special key such as ``"Up"``, ``"Down"``, ``"Enter"`` or ``"Tab"``.
    """
    if len(key) == 1:
        return _CHAR_EVENTS.get(key, AppEvent.UNKNOWN)
    return _NAMED_EVENTS.get(key.lower(), AppEvent.UNKNOWN)