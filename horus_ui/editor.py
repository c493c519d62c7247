"""Tracks which segment is being edited."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional

__all__ = ["EditorComponent"]


@dataclass
class EditorComponent:
    """Holds the identifier of the segment currently open for editing, if any."""

    editing_segment: Optional[Hashable] = None

    def edit_segment(self, segment_id: Hashable) -> None:
        """Start editing the given segment."""
        self.editing_segment = segment_id

    def stop_editing(self) -> None:
        """Stop editing any segment."""
        self.editing_segment = None

    def is_editing(self, segment_id: Hashable) -> bool:
        """Whether the given segment is the one being edited."""
        return self.editing_segment is not None and self.editing_segment == segment_id