"""Dataclasses describing the edit commands the engine understands."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, Tuple, Union


class CommandValidationError(ValueError):
    """Raised when a command is built from ill-typed or unknown input."""

    def __init__(self, message: str, *, kind: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind


def _require_text(kind: str, name: str, value: object) -> None:
    if not isinstance(value, str):
        raise CommandValidationError(
            f"{kind}.{name} must be a string, got {type(value).__name__}",
            kind=kind,
        )


def _require_int(kind: str, name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful offset
    if isinstance(value, bool) or not isinstance(value, int):
        raise CommandValidationError(
            f"{kind}.{name} must be an integer, got {type(value).__name__}",
            kind=kind,
        )


class _CommandBase:
    __slots__ = ()

    kind: ClassVar[str] = ""

    def to_tuple(self) -> Tuple[object, ...]:
        return (self.kind, *(getattr(self, f.name) for f in fields(self)))  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Append(_CommandBase):
    """Add ``text`` at the end, or over the selection when one is active."""

    kind: ClassVar[str] = "APPEND"

    text: str

    def __post_init__(self) -> None:
        _require_text(self.kind, "text", self.text)


@dataclass(frozen=True, slots=True)
class Move(_CommandBase):
    """Shift the cursor by ``delta`` characters; negative moves left."""

    kind: ClassVar[str] = "MOVE"

    delta: int

    def __post_init__(self) -> None:
        _require_int(self.kind, "delta", self.delta)


@dataclass(frozen=True, slots=True)
class Backspace(_CommandBase):
    """Delete ``count`` characters left of the cursor, or the selection."""

    kind: ClassVar[str] = "BACKSPACE"

    count: int = 1

    def __post_init__(self) -> None:
        _require_int(self.kind, "count", self.count)


@dataclass(frozen=True, slots=True)
class Insert(_CommandBase):
    """Insert ``text`` at the cursor, or over the selection when one is active."""

    kind: ClassVar[str] = "INSERT"

    text: str

    def __post_init__(self) -> None:
        _require_text(self.kind, "text", self.text)


@dataclass(frozen=True, slots=True)
class Select(_CommandBase):
    """Select ``[left, right]``; both bounds are clamped to the buffer."""

    kind: ClassVar[str] = "SELECT"

    left: int
    right: int

    def __post_init__(self) -> None:
        _require_int(self.kind, "left", self.left)
        _require_int(self.kind, "right", self.right)


Command = Union[Append, Move, Backspace, Insert, Select]

COMMAND_TYPES: Tuple[type, ...] = (Append, Move, Backspace, Insert, Select)

__all__ = [
    "Append",
    "Backspace",
    "COMMAND_TYPES",
    "Command",
    "CommandValidationError",
    "Insert",
    "Move",
    "Select",
]
