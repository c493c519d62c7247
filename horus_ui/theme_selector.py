"""Layout of the theme selector: wrapped theme list, height, text and title."""

from __future__ import annotations

from typing import Iterable, List

__all__ = [
    "wrap_themes",
    "theme_selector_height",
    "theme_selector_text",
    "theme_selector_title",
]

_TITLE = "Themes"
_MODIFIED_MARK = "*"


def _width(text: str) -> int:
    # Measured in encoded bytes, so check marks count wider than they display.
    return len(text.encode("utf-8"))


def wrap_themes(themes: Iterable[str], current: str, width: int) -> List[str]:
    """Lay out the theme markers over lines that fit a bordered box ``width`` wide.

    The first entry always goes on the first line, even when it is too wide.
    """
    content_width = max(width - 2, 0)
    lines: List[str] = []
    current_line = ""
    first_line = True

    for index, theme in enumerate(themes):
        marker = "[✓]" if theme == current else "[ ]"
        part = f"{marker} {theme}"
        with_separator = part if index == 0 else f"  {part}"

        if first_line or _width(current_line) + _width(with_separator) <= content_width:
            current_line += with_separator
            first_line = False
        else:
            lines.append(current_line)
            current_line = part

    if current_line.strip():
        lines.append(current_line)
    return lines


def theme_selector_height(themes: Iterable[str], current: str, width: int) -> int:
    """Height of the theme selector box: its theme lines plus the two borders."""
    return max(len(wrap_themes(themes, current, width)), 1) + 2


def theme_selector_text(themes: Iterable[str], current: str, separator: str, width: int) -> str:
    """Full body text of the theme selector, ending with the separator in use."""
    body = "\n".join(wrap_themes(themes, current, width))
    return f'{body}\nSeparator: "{separator}"'


def theme_selector_title(modified: bool) -> str:
    """Box title, starred when the configuration differs from its theme."""
    return _TITLE + _MODIFIED_MARK * bool(modified)