"""Append-only log of buffer contents."""

from __future__ import annotations

from typing import Iterator, List


class SnapshotLog:
    """Records the buffer text after every content-changing command."""

    def __init__(self) -> None:
        self._entries: List[str] = []

    @property
    def is_empty(self) -> bool:
        return len(self._entries) == 0

    @property
    def current(self) -> str:
        """Most recent snapshot, or ``""`` before anything was recorded."""

        if self.is_empty:
            return ""
        return self._entries[-1]

    def record(self, text: str) -> str:
        self._entries.append(text)
        return text

    def to_list(self) -> List[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
