"""Bounds helpers shared by the engine."""

from __future__ import annotations

from typing import Optional

from .state import Cursor, Selection


class BufferValidationError(RuntimeError):
    """Raised when cursor or selection state falls outside the buffer."""

    def __init__(
        self,
        message: str,
        *,
        cursor: Cursor | None = None,
        selection: Optional[Selection] = None,
    ) -> None:
        super().__init__(message)
        self.cursor = cursor
        self.selection = selection


def clamp_offset(offset: int, length: int) -> int:
    return max(0, min(offset, length))


def ensure_cursor(text: str, cursor: Cursor) -> Cursor:
    if cursor < 0 or cursor > len(text):
        raise BufferValidationError("Cursor out of range", cursor=cursor)
    return cursor


def ensure_selection(text: str, selection: Optional[Selection]) -> Optional[Selection]:
    if selection is None:
        return None
    start, end = selection
    if not 0 <= start < end <= len(text):
        raise BufferValidationError("Selection out of range", selection=selection)
    return selection
