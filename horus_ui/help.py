"""Help bar: shortcut lists per context, wrapped to the bar's width."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

__all__ = ["HelpContext", "help_items", "wrap_help", "help_lines", "help_height"]

HelpItem = Tuple[str, str]

_SEPARATOR = "  "
_MIN_HEIGHT = 3
_MAX_HEIGHT = 8


class HelpContext(Enum):
    """What the help bar describes: the main screen or an open popup."""

    MAIN = "main"
    COLOR_PICKER = "color_picker"
    ICON_SELECTOR = "icon_selector"


def _parse_table(table: str) -> Tuple[HelpItem, ...]:
    """Read a table whose rows are a key, whitespace, then a description."""
    rows = (row.strip() for row in table.splitlines())
    return tuple(tuple(row.split(None, 1)) for row in rows if row)  # type: ignore[misc]


_SHORTCUTS: Dict[HelpContext, Tuple[HelpItem, ...]] = {
    HelpContext.COLOR_PICKER: _parse_table(
        """
        [↑↓]        Navigate
        [Tab]       Mode
        [Enter]     Select
        [Esc]       Cancel
        """
    ),
    HelpContext.ICON_SELECTOR: _parse_table(
        """
        [↑↓]        Navigate
        [Tab]       Style
        [C]         Custom
        [Enter]     Select
        [Esc]       Cancel
        """
    ),
    HelpContext.MAIN: _parse_table(
        """
        [Tab]       Switch Panel
        [Enter]     Toggle/Edit
        [Shift+↑↓]  Reorder
        [1-4]       Theme
        [P]         Switch Theme
        [R]         Reset
        [E]         Edit Separator
        [S]         Save Config
        [W]         Write Theme
        [Ctrl+S]    Save Theme
        [Esc]       Quit
        """
    ),
}


def help_items(context: HelpContext) -> List[HelpItem]:
    """The (key, description) shortcuts shown in a context."""
    return list(_SHORTCUTS[context])


def _item_width(item: HelpItem) -> int:
    key, description = item
    return len(key) + 1 + len(description)


def wrap_help(items: Sequence[HelpItem], width: int) -> List[List[HelpItem]]:
    """Group shortcuts into lines that fit a bordered box ``width`` wide.

    A shortcut is never split; one too wide for any line gets a line of its own.
    """
    content_width = max(width - 2, 0)
    lines: List[List[HelpItem]] = []
    current: List[HelpItem] = []
    used = 0
    for item in items:
        extra = _item_width(item) + (len(_SEPARATOR) if current else 0)
        if used + extra <= content_width:
            current.append(item)
            used += extra
        else:
            if current:
                lines.append(current)
            current = [item]
            used = _item_width(item)
    if current:
        lines.append(current)
    return lines


def help_lines(context: HelpContext, width: int, status: Optional[str] = None) -> List[str]:
    """Text lines of the help bar, followed by a blank line and the status if given."""
    lines = [
        _SEPARATOR.join(f"{key} {description}" for key, description in line)
        for line in wrap_help(help_items(context), width)
    ]
    if status:
        lines.extend(["", status])
    return lines


def help_height(context: HelpContext, width: int, has_status: bool) -> int:
    """Height reserved for the help bar, borders included, between 3 and 8.

    A first shortcut too wide for the bar is counted as needing an extra line.
    """
    items = help_items(context)
    content_width = max(width - 2, 0)
    needed = max(len(wrap_help(items, width)), 1)
    if items and _item_width(items[0]) > content_width:
        needed += 1
    if has_status:
        needed += 2
    return max(_MIN_HEIGHT, min(needed + 2, _MAX_HEIGHT))