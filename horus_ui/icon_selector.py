"""State of the icon selector popup: emoji and Nerd Font lists plus custom entry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

__all__ = ["IconStyle", "IconInfo", "IconSelector", "plain_icons", "nerd_font_icons"]


class IconStyle(Enum):
    """Which icon set the selector shows."""

    PLAIN = "plain"
    NERD_FONT = "nerd_font"


@dataclass(frozen=True)
class IconInfo:
    """An icon offered in the selector, with a readable name."""

    icon: str
    name: str


_PLAIN_ICONS: Tuple[IconInfo, ...] = (
    IconInfo("🤖", "Robot (Model)"),
    IconInfo("💻", "Laptop (Computer)"),
    IconInfo("🖥️", "Desktop"),
    IconInfo("⚙️", "Gear (Settings)"),
    IconInfo("📁", "Folder"),
    IconInfo("📂", "Open Folder"),
    IconInfo("🗿", "Card Index"),
    IconInfo("📊", "Bar Chart"),
    IconInfo("🌿", "Branch (Git)"),
    IconInfo("🌱", "Seedling"),
    IconInfo("🔧", "Wrench"),
    IconInfo("⚡", "Lightning (Usage)"),
    IconInfo("⭐", "Star"),
    IconInfo("✨", "Sparkles"),
    IconInfo("🔥", "Fire"),
    IconInfo("💎", "Gem"),
    IconInfo("✓", "Check Mark"),
    IconInfo("✗", "X Mark"),
    IconInfo("●", "Circle (Dirty)"),
    IconInfo("○", "Open Circle"),
    IconInfo("▶", "Play"),
    IconInfo("▼", "Down Triangle"),
    IconInfo("►", "Right Triangle"),
    IconInfo("◄", "Left Triangle"),
)

_NERD_FONT_ICONS: Tuple[IconInfo, ...] = (
    IconInfo("\ue26d", "Robot (Model)"),
    IconInfo("\U000f02a2", "Git Branch"),
    IconInfo("\U000f024b", "Folder"),
    IconInfo("\uf111", "Circle"),
    IconInfo("\uf135", "Rocket"),
    IconInfo("\uf49b", "Chart"),
    IconInfo("\uf0c6", "Database"),
    IconInfo("\uf0c9", "List"),
    IconInfo("\uf013", "Cog"),
    IconInfo("\uf015", "Home"),
    IconInfo("\uf07b", "Folder Open"),
    IconInfo("\uf0e7", "Lightning"),
    IconInfo("\uf121", "Code"),
    IconInfo("\uf126", "Code Fork"),
    IconInfo("\uf1c0", "Database"),
    IconInfo("\uf251", "Headphones"),
    IconInfo("\uf252", "Terminal"),
    IconInfo("\uf269", "Map"),
    IconInfo("\uf2d0", "Chrome"),
    IconInfo("\uf31b", "Github"),
)

_STYLE_MODES = {
    "plain": IconStyle.PLAIN,
    "nerd_font": IconStyle.NERD_FONT,
    "powerline": IconStyle.NERD_FONT,
}


def plain_icons() -> List[IconInfo]:
    """The emoji and symbol icons, in display order."""
    return list(_PLAIN_ICONS)


def nerd_font_icons() -> List[IconInfo]:
    """The Nerd Font glyph icons, in display order."""
    return list(_NERD_FONT_ICONS)


def _icons_for(style: IconStyle) -> Tuple[IconInfo, ...]:
    return _PLAIN_ICONS if style is IconStyle.PLAIN else _NERD_FONT_ICONS


def _resolve_style(style: Union[IconStyle, str]) -> IconStyle:
    if isinstance(style, IconStyle):
        return style
    try:
        return _STYLE_MODES[style.lower()]
    except (KeyError, AttributeError):
        raise ValueError(f"unknown style mode: {style!r}") from None


@dataclass
class IconSelector:
    """Selection state of the icon selector.

    Each icon set keeps its own selected index and scroll offset.
    """

    is_open: bool = False
    icon_style: IconStyle = IconStyle.PLAIN
    selected_plain: int = 0
    selected_nerd: int = 0
    custom_input: str = ""
    editing_custom: bool = False
    current_icon: Optional[str] = None
    plain_offset: int = 0
    nerd_offset: int = 0

    def open(self, style: Union[IconStyle, str]) -> None:
        """Show the selector on the icon set matching a style mode.

        ``style`` is an :class:`IconStyle` or one of ``"plain"``, ``"nerd_font"``
        and ``"powerline"``; the last two both show Nerd Font icons.
        """
        self.icon_style = _resolve_style(style)
        self.is_open = True
        self._update_current_icon()

    def close(self) -> None:
        """Hide the selector and leave custom entry."""
        self.is_open = False
        self.editing_custom = False

    def toggle_style(self) -> None:
        """Switch between the emoji and the Nerd Font icon sets."""
        self.icon_style = (
            IconStyle.NERD_FONT if self.icon_style is IconStyle.PLAIN else IconStyle.PLAIN
        )
        self._update_current_icon()

    def start_custom_input(self) -> None:
        """Begin typing a custom icon into an empty entry."""
        self.editing_custom = True
        self.custom_input = ""

    def finish_custom_input(self) -> bool:
        """End custom entry; True if a non-empty icon was entered and selected."""
        self.editing_custom = False
        if self.custom_input:
            self.current_icon = self.custom_input
            return True
        return False

    def input_char(self, c: str) -> None:
        """Append a character to the custom icon while entering one."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        if self.editing_custom:
            self.custom_input += c

    def backspace(self) -> None:
        """Delete the last character of the custom icon while entering one."""
        if self.editing_custom:
            self.custom_input = self.custom_input[:-1]

    def move_selection(self, delta: int) -> None:
        """Move through the shown icon set, clamped to its ends; ignored during custom entry."""
        if self.editing_custom:
            return
        last = len(_icons_for(self.icon_style)) - 1
        if self.icon_style is IconStyle.PLAIN:
            self.selected_plain = max(0, min(self.selected_plain + delta, last))
        else:
            self.selected_nerd = max(0, min(self.selected_nerd + delta, last))
        self._update_current_icon()

    def selected_icon(self) -> Optional[str]:
        """The icon that would be applied, if any."""
        return self.current_icon

    def scroll_offset(self, view_height: int) -> int:
        """Scroll the shown list just enough to keep the selection visible.

        Returns the first visible index for a list ``view_height`` rows tall.
        """
        view = max(view_height, 1)
        if self.icon_style is IconStyle.PLAIN:
            selected, offset = self.selected_plain, self.plain_offset
        else:
            selected, offset = self.selected_nerd, self.nerd_offset

        if selected >= offset + view:
            offset = selected + 1 - view
        elif selected < offset:
            offset = selected

        if self.icon_style is IconStyle.PLAIN:
            self.plain_offset = offset
        else:
            self.nerd_offset = offset
        return offset

    def style_text(self) -> str:
        """The style selector line with the shown icon set marked."""
        if self.icon_style is IconStyle.PLAIN:
            return "[•] Emoji  [ ] Nerd Font"
        return "[ ] Emoji  [•] Nerd Font"

    def custom_text(self) -> str:
        """Text of the custom icon field."""
        if self.editing_custom:
            return f"> {self.custom_input} <"
        return "[Enter text to input custom icon]"

    def actions_text(self) -> str:
        """The key hints shown at the bottom of the popup."""
        if self.editing_custom:
            return "[Enter] Confirm  [Esc] Cancel"
        return "[Enter] Select  [Tab] Switch Style  [c] Custom  [Esc] Cancel"

    def _update_current_icon(self) -> None:
        icons = _icons_for(self.icon_style)
        index = self.selected_plain if self.icon_style is IconStyle.PLAIN else self.selected_nerd
        if 0 <= index < len(icons):
            self.current_icon = icons[index].icon