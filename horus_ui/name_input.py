"""Popup that asks for a theme name."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Optional, Tuple

__all__ = ["NameInput"]

_ALLOWED = frozenset(string.ascii_letters + string.digits + "_-")
_POPUP_WIDTH = 60
_POPUP_HEIGHT = 8
_HELP_RESERVE = 4


@dataclass
class NameInput:
    """Text entry for a name made of ASCII letters, digits, ``_`` and ``-``."""

    is_open: bool = False
    input: str = ""
    title: str = "Input Name"
    placeholder: str = "Enter name..."

    def open(self, title: str, placeholder: str) -> None:
        """Show the popup with an empty entry."""
        self.is_open = True
        self.input = ""
        self.title = title
        self.placeholder = placeholder

    def close(self) -> None:
        """Hide the popup and discard the entry."""
        self.is_open = False
        self.input = ""

    def input_char(self, c: str) -> None:
        """Append a character if it is allowed in a name."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        if c in _ALLOWED:
            self.input += c

    def backspace(self) -> None:
        """Delete the last character."""
        self.input = self.input[:-1]

    def value(self) -> Optional[str]:
        """The entered name, stripped, or None if it is blank."""
        stripped = self.input.strip()
        return stripped or None

    def display_text(self) -> str:
        """Text shown in the entry field: the input, or the placeholder when empty."""
        return f"> {self.input or self.placeholder} <"

    def popup_rect(self, width: int, height: int) -> Tuple[int, int, int, int]:
        """Place the popup in an area, keeping the bottom help lines uncovered.

        Returns ``(x, y, width, height)``.
        """
        popup_width = min(_POPUP_WIDTH, max(width - 4, 0))
        max_y = max(height - (_POPUP_HEIGHT + _HELP_RESERVE), 0)
        popup_y = max(height - _POPUP_HEIGHT, 0) // 2 if max_y > 2 else 2
        x = max(width - popup_width, 0) // 2
        return (x, min(popup_y, max_y), popup_width, _POPUP_HEIGHT)