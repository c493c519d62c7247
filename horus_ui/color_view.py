"""Text and layout of the colour picker popup: swatch grids, mode line and previews."""

from __future__ import annotations

from typing import Optional

from horus_ui.color_picker import ColorPickerMode, RgbField, RgbInput, color_name
from horus_ui.colors import AnsiColor, Color16, Color256, Rgb

__all__ = [
    "basic_columns",
    "extended_columns",
    "extended_page",
    "mode_text",
    "preview_text",
    "rgb_text",
    "hex_text",
    "swatch_text",
]

EXTENDED_COUNT = 256
_BASIC_SWATCH_WIDTH = 6
_EXTENDED_SWATCH_WIDTH = 7
_SWATCH = "██"

_MODE_TEXTS = {
    ColorPickerMode.BASIC16: "[•] Basic (ANSI 16)  [ ] Extended (256)  [ ] RGB",
    ColorPickerMode.EXTENDED256: "[ ] Basic (ANSI 16)  [•] Extended (256)  [ ] RGB",
    ColorPickerMode.RGB_INPUT: "[ ] Basic (ANSI 16)  [ ] Extended (256)  [•] RGB",
}


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def basic_columns(width: int) -> int:
    """Swatches per row in the basic grid for a content area ``width`` wide."""
    _check_size("width", width)
    return max(width // _BASIC_SWATCH_WIDTH, 1)


def extended_columns(width: int) -> int:
    """Swatches per row in the extended grid for a content area ``width`` wide."""
    _check_size("width", width)
    return max(width // _EXTENDED_SWATCH_WIDTH, 1)


def extended_page(selected: int, width: int, height: int) -> range:
    """Palette indices drawn on the page that holds ``selected``.

    Each swatch row takes two lines and two lines are kept for the info text;
    an area of two lines or fewer draws nothing.
    """
    _check_size("height", height)
    if not 0 <= selected < EXTENDED_COUNT:
        raise ValueError(f"selected must be in 0..255, got {selected}")
    columns = extended_columns(width)
    rows = (height - 2) // 2 if height > 3 else 1
    per_page = columns * rows
    start = (selected // per_page) * per_page
    if height <= 2:
        return range(start, start)
    return range(start, min(start + per_page, EXTENDED_COUNT))


def mode_text(mode: ColorPickerMode) -> str:
    """The mode selector line with the active mode marked."""
    return _MODE_TEXTS[mode]


def preview_text(color: Optional[AnsiColor]) -> str:
    """Description shown in the preview box for the colour about to be applied."""
    if color is None:
        return "████ No color selected"
    if isinstance(color, Color16):
        return f"████ Color 16: {color.c16} ({color_name(color.c16)})"
    if isinstance(color, Color256):
        return f"████ Color 256: {color.c256}"
    if isinstance(color, Rgb):
        return f"████ RGB: ({color.r}, {color.g}, {color.b})"
    raise TypeError(f"not a colour: {color!r}")


def _field(rgb_input: RgbInput, which: RgbField, text: str) -> str:
    return f"> {text} <" if rgb_input.editing_field is which else text


def rgb_text(rgb_input: RgbInput) -> str:
    """The RGB entry line, with the field being edited marked."""
    red = _field(rgb_input, RgbField.RED, rgb_input.r)
    green = _field(rgb_input, RgbField.GREEN, rgb_input.g)
    blue = _field(rgb_input, RgbField.BLUE, rgb_input.b)
    return f"R[{red}] G[{green}] B[{blue}]"


def hex_text(rgb_input: RgbInput) -> str:
    """The hex entry line, marked when it is being edited."""
    return f"#{_field(rgb_input, RgbField.HEX, rgb_input.hex)}"


def swatch_text(selected: bool) -> str:
    """A colour swatch, bracketed when selected."""
    return f"[ {_SWATCH} ]" if selected else f"  {_SWATCH}  "