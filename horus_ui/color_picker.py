"""State of the colour picker popup: basic, extended and RGB selection modes."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from horus_ui.colors import AnsiColor, Color16, Color256, Rgb

__all__ = [
    "NavDirection",
    "ColorPickerMode",
    "RgbField",
    "RgbInput",
    "ColorPicker",
    "color_name",
]

BASIC_COUNT = 16
EXTENDED_COUNT = 256

_COLOR_NAMES = (
    "Black",
    "Red",
    "Green",
    "Yellow",
    "Blue",
    "Magenta",
    "Cyan",
    "White",
    "DarkGray",
    "LightRed",
    "LightGreen",
    "LightYellow",
    "LightBlue",
    "LightMagenta",
    "LightCyan",
    "Gray",
)


def color_name(index: int) -> str:
    """Name of a basic ANSI colour index, or ``"Unknown"`` beyond the sixteen."""
    if 0 <= index < len(_COLOR_NAMES):
        return _COLOR_NAMES[index]
    return "Unknown"


class NavDirection(Enum):
    """Arrow-key direction inside the picker grid."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class ColorPickerMode(Enum):
    """Which palette the picker is showing."""

    BASIC16 = "basic16"
    EXTENDED256 = "extended256"
    RGB_INPUT = "rgb_input"


class RgbField(Enum):
    """Input field being edited in RGB mode."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    HEX = "hex"


_MODE_ORDER = (ColorPickerMode.BASIC16, ColorPickerMode.EXTENDED256, ColorPickerMode.RGB_INPUT)
_FIELD_ORDER = (RgbField.RED, RgbField.GREEN, RgbField.BLUE, RgbField.HEX)


@dataclass
class RgbInput:
    """Text typed into the RGB and hex fields."""

    r: str = ""
    g: str = ""
    b: str = ""
    hex: str = ""
    editing_field: RgbField = RgbField.RED


def _single_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _parse_byte(text: str) -> Optional[int]:
    if not text or any(ch not in string.digits for ch in text):
        return None
    value = int(text)
    return value if value <= 255 else None


def _grid_step(selected: int, cols: int, count: int, direction: NavDirection) -> int:
    last = count - 1
    row, col = divmod(selected, cols)
    if direction is NavDirection.UP:
        return min((row - 1) * cols + col, last) if row > 0 else selected
    if direction is NavDirection.DOWN:
        total_rows = -(-count // cols)
        return min((row + 1) * cols + col, last) if row + 1 < total_rows else selected
    if direction is NavDirection.LEFT:
        return selected - 1 if selected > 0 else last
    return selected + 1 if selected < last else 0


@dataclass
class ColorPicker:
    """Selection state of the colour picker.

    ``basic_cols`` and ``extended_cols`` hold the number of swatches per row
    last laid out, so arrow keys move through the grid as it is drawn.
    """

    is_open: bool = False
    mode: ColorPickerMode = ColorPickerMode.BASIC16
    selected_basic: int = 0
    selected_extended: int = 0
    rgb_input: RgbInput = field(default_factory=RgbInput)
    current_color: Optional[AnsiColor] = None
    show_extended: bool = False
    basic_cols: int = 4
    extended_cols: int = 16

    def open(self) -> None:
        """Show the picker on the basic palette with the first colour selected."""
        self.is_open = True
        self.mode = ColorPickerMode.BASIC16
        self.selected_basic = 0

    def close(self) -> None:
        """Hide the picker."""
        self.is_open = False

    def toggle_extended(self) -> None:
        """Switch between the basic and the extended palette."""
        self.show_extended = not self.show_extended
        self.mode = ColorPickerMode.EXTENDED256 if self.show_extended else ColorPickerMode.BASIC16

    def switch_to_rgb(self) -> None:
        """Switch to RGB input mode."""
        self.mode = ColorPickerMode.RGB_INPUT

    def cycle_mode(self) -> None:
        """Advance to the next mode: basic, extended, RGB, then basic again."""
        index = _MODE_ORDER.index(self.mode)
        self.mode = _MODE_ORDER[(index + 1) % len(_MODE_ORDER)]
        self.show_extended = self.mode is ColorPickerMode.EXTENDED256

    def move_selection(self, delta: int) -> None:
        """Move the selection by ``delta`` entries, clamped to the palette."""
        if self.mode is ColorPickerMode.BASIC16:
            self.selected_basic = max(0, min(self.selected_basic + delta, BASIC_COUNT - 1))
            self.current_color = Color16(self.selected_basic)
        elif self.mode is ColorPickerMode.EXTENDED256:
            self.selected_extended = max(
                0, min(self.selected_extended + delta, EXTENDED_COUNT - 1)
            )
            self.current_color = Color256(self.selected_extended)
        else:
            index = _FIELD_ORDER.index(self.rgb_input.editing_field)
            if delta > 0 and index < len(_FIELD_ORDER) - 1:
                self.rgb_input.editing_field = _FIELD_ORDER[index + 1]
            elif delta < 0 and index > 0:
                self.rgb_input.editing_field = _FIELD_ORDER[index - 1]

    def move_direction(self, direction: NavDirection) -> None:
        """Move through the swatch grid, or between RGB fields with left and right."""
        if self.mode is ColorPickerMode.BASIC16:
            self.selected_basic = _grid_step(
                self.selected_basic, self.basic_cols, BASIC_COUNT, direction
            )
            self.current_color = Color16(self.selected_basic)
        elif self.mode is ColorPickerMode.EXTENDED256:
            self.selected_extended = _grid_step(
                self.selected_extended, self.extended_cols, EXTENDED_COUNT, direction
            )
            self.current_color = Color256(self.selected_extended)
        elif direction in (NavDirection.LEFT, NavDirection.RIGHT):
            step = -1 if direction is NavDirection.LEFT else 1
            index = _FIELD_ORDER.index(self.rgb_input.editing_field)
            self.rgb_input.editing_field = _FIELD_ORDER[(index + step) % len(_FIELD_ORDER)]

    def input_char(self, c: str) -> None:
        """Type a character into the RGB field being edited; ignored in other modes."""
        _single_char(c)
        if self.mode is not ColorPickerMode.RGB_INPUT:
            return
        rgb = self.rgb_input
        editing = rgb.editing_field
        if editing is RgbField.HEX:
            if len(rgb.hex) < 6 and c in string.hexdigits:
                rgb.hex += c.upper()
        elif len(self._field_text(editing)) < 3 and c in string.digits:
            self._set_field_text(editing, self._field_text(editing) + c)
        self._update_rgb_color()

    def backspace(self) -> None:
        """Delete the last character of the RGB field being edited."""
        if self.mode is not ColorPickerMode.RGB_INPUT:
            return
        editing = self.rgb_input.editing_field
        self._set_field_text(editing, self._field_text(editing)[:-1])
        self._update_rgb_color()

    def selected_color(self) -> Optional[AnsiColor]:
        """The colour that would be applied, if any."""
        return self.current_color

    def _field_text(self, which: RgbField) -> str:
        rgb = self.rgb_input
        return {RgbField.RED: rgb.r, RgbField.GREEN: rgb.g, RgbField.BLUE: rgb.b, RgbField.HEX: rgb.hex}[
            which
        ]

    def _set_field_text(self, which: RgbField, text: str) -> None:
        attribute = {RgbField.RED: "r", RgbField.GREEN: "g", RgbField.BLUE: "b", RgbField.HEX: "hex"}[
            which
        ]
        setattr(self.rgb_input, attribute, text)

    def _update_rgb_color(self) -> None:
        hex_text = self.rgb_input.hex
        if len(hex_text) == 6 and all(ch in string.hexdigits for ch in hex_text):
            self.current_color = Rgb(
                int(hex_text[0:2], 16), int(hex_text[2:4], 16), int(hex_text[4:6], 16)
            )
            return
        parts = [_parse_byte(text) for text in (self.rgb_input.r, self.rgb_input.g, self.rgb_input.b)]
        if all(part is not None for part in parts):
            self.current_color = Rgb(*parts)