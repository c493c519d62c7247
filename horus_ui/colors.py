"""Colour values used by segment settings, with descriptions and terminal colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

__all__ = ["Color16", "Color256", "Rgb", "AnsiColor", "describe_color", "terminal_color"]


def _check_byte(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer in 0..255, got {value!r}")


@dataclass(frozen=True)
class Color16:
    """One of the basic ANSI colours, by index."""

    c16: int

    def __post_init__(self) -> None:
        _check_byte("c16", self.c16)


@dataclass(frozen=True)
class Color256:
    """A colour from the extended 256-colour palette."""

    c256: int

    def __post_init__(self) -> None:
        _check_byte("c256", self.c256)


@dataclass(frozen=True)
class Rgb:
    """A true colour given by its red, green and blue components."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_byte(name, getattr(self, name))


AnsiColor = Union[Color16, Color256, Rgb]

# Terminal colour: a named colour, a palette index, or an (r, g, b) triple.
TerminalColor = Union[str, int, Tuple[int, int, int]]

_TERMINAL_NAMES = (
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

_DESCRIPTIONS = (
    "Black",
    "Red",
    "Green",
    "Yellow",
    "Blue",
    "Magenta",
    "Cyan",
    "White",
    "Dark Gray",
    "Light Red",
    "Light Green",
    "Light Yellow",
    "Light Blue",
    "Light Magenta",
    "Light Cyan",
    "Gray",
)


def describe_color(color: Optional[AnsiColor], none_label: str = "Default") -> str:
    """Return the human-readable description of a colour, or ``none_label`` if unset."""
    if color is None:
        return none_label
    if isinstance(color, Color16):
        if color.c16 < len(_DESCRIPTIONS):
            return _DESCRIPTIONS[color.c16]
        return f"ANSI {color.c16}"
    if isinstance(color, Color256):
        return f"256:{color.c256}"
    if isinstance(color, Rgb):
        return f"RGB({color.r},{color.g},{color.b})"
    raise TypeError(f"not a colour: {color!r}")


def terminal_color(color: Optional[AnsiColor]) -> TerminalColor:
    """Map a colour to what the terminal draws: a name, a palette index or an RGB triple.

    Unset colours and basic indices beyond 15 draw as ``"White"``.
    """
    if color is None:
        return "White"
    if isinstance(color, Color16):
        if color.c16 < len(_TERMINAL_NAMES):
            return _TERMINAL_NAMES[color.c16]
        return "White"
    if isinstance(color, Color256):
        return color.c256
    if isinstance(color, Rgb):
        return (color.r, color.g, color.b)
    raise TypeError(f"not a colour: {color!r}")