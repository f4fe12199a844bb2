"""Cursor and selection state for a single-line text buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

Cursor = int  # character offset
Selection = Tuple[int, int]  # (start, end), start < end


@dataclass(slots=True)
class BufferState:
    """Mutable cursor + selection info for one engine run."""

    cursor: Cursor = 0
    selection: Optional[Selection] = None

    def set_cursor(self, offset: int) -> None:
        self.cursor = offset

    def clear_selection(self) -> None:
        self.selection = None

    def set_selection(self, start: int, end: int) -> None:
        """Select ``[start, end]`` and park the cursor on ``end``.

        An empty range is not a selection: the state falls back to a plain
        cursor at ``end``.
        """

        self.cursor = end
        self.selection = (start, end) if start != end else None

    def selection_range(self) -> Optional[Selection]:
        return self.selection

    @property
    def has_selection(self) -> bool:
        return self.selection is not None
