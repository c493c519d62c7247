"""Popup for choosing or typing the separator drawn between segments."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from typing import List, Optional

__all__ = ["SeparatorPreset", "SeparatorEditor", "default_presets"]


@dataclass(frozen=True)
class SeparatorPreset:
    """A named separator offered in the preset list."""

    name: str
    value: str
    description: str


def default_presets() -> List[SeparatorPreset]:
    """The built-in separator presets, in display order."""
    return [
        SeparatorPreset("Pipe", " | ", "Classic pipe separator"),
        SeparatorPreset("Thin", " │ ", "Thin vertical line"),
        SeparatorPreset("Arrow", "\ue0b0", "Powerline arrow (seamless transition)"),
        SeparatorPreset("Space", "  ", "Double space"),
        SeparatorPreset("Dot", " • ", "Middle dot"),
    ]


@dataclass
class SeparatorEditor:
    """Editing state of the separator: free text plus an optional chosen preset."""

    is_open: bool = False
    input: str = ""
    presets: List[SeparatorPreset] = field(default_factory=default_presets)
    selected_preset: Optional[int] = None

    def open(self, current_separator: str) -> None:
        """Show the editor holding the current separator, marking a matching preset."""
        self.is_open = True
        self.input = current_separator
        self.selected_preset = next(
            (i for i, preset in enumerate(self.presets) if preset.value == current_separator),
            None,
        )

    def close(self) -> None:
        """Hide the editor and discard its state."""
        self.is_open = False
        self.input = ""
        self.selected_preset = None

    def clear(self) -> None:
        """Empty the entry and drop any preset selection."""
        self.input = ""
        self.selected_preset = None

    def input_char(self, c: str) -> None:
        """Append a non-control character; manual edits drop the preset selection."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        if unicodedata.category(c) != "Cc":
            self.input += c
            self.selected_preset = None

    def backspace(self) -> None:
        """Delete the last character and drop the preset selection."""
        self.input = self.input[:-1]
        self.selected_preset = None

    def move_preset_selection(self, delta: int) -> None:
        """Move through the presets, loading the chosen one into the entry.

        With no preset chosen, a positive step picks the first and any other the last.
        """
        if not self.presets:
            raise ValueError("no separator presets to choose from")
        last = len(self.presets) - 1
        if self.selected_preset is not None:
            index = max(0, min(self.selected_preset + delta, last))
        elif delta > 0:
            index = 0
        else:
            index = last
        self.selected_preset = index
        self.input = self.presets[index].value

    def separator(self) -> str:
        """The separator as currently entered."""
        return self.input

    def preset_lines(self) -> List[str]:
        """One display line per preset, the chosen one marked."""
        return [
            f"{'[•]' if i == self.selected_preset else '[ ]'} {preset.name} - {preset.description}"
            for i, preset in enumerate(self.presets)
        ]