"""Buffer state, snapshot log and bounds helpers."""

from .snapshots import SnapshotLog
from .state import BufferState, Cursor, Selection
from .validation import (
    BufferValidationError,
    clamp_offset,
    ensure_cursor,
    ensure_selection,
)

__all__ = [
    "BufferState",
    "BufferValidationError",
    "Cursor",
    "Selection",
    "SnapshotLog",
    "clamp_offset",
    "ensure_cursor",
    "ensure_selection",
]
