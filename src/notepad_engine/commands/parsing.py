"""Conversion from loose ``("KIND", *args)`` tuples to command objects."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from .models import (
    COMMAND_TYPES,
    Append,
    Backspace,
    Command,
    CommandValidationError,
    Insert,
    Move,
    Select,
)

# kind -> (class, min args, max args)
_ARITY: Dict[str, tuple[type, int, int]] = {
    Append.kind: (Append, 1, 1),
    Move.kind: (Move, 1, 1),
    Backspace.kind: (Backspace, 0, 1),
    Insert.kind: (Insert, 1, 1),
    Select.kind: (Select, 2, 2),
}


def parse_command(raw: Command | Sequence[object]) -> Command:
    """Return ``raw`` as a command object.

    Command instances pass through untouched. Sequences are read as
    ``(kind, *args)`` with ``kind`` matched case-insensitively, so
    ``("BACKSPACE",)`` and ``["select", 0, 5]`` are both accepted.
    """

    if isinstance(raw, COMMAND_TYPES):
        return raw  # type: ignore[return-value]
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence) or not raw:
        raise CommandValidationError(f"Cannot parse command from {raw!r}")

    head, *args = raw
    if not isinstance(head, str):
        raise CommandValidationError(f"Command kind must be a string, got {head!r}")
    kind = head.strip().upper()
    try:
        cls, min_args, max_args = _ARITY[kind]
    except KeyError as exc:
        raise CommandValidationError(f"Unknown command '{head}'", kind=kind) from exc

    if not min_args <= len(args) <= max_args:
        expected = (
            str(min_args) if min_args == max_args else f"{min_args}-{max_args}"
        )
        raise CommandValidationError(
            f"{kind} takes {expected} argument(s), got {len(args)}", kind=kind
        )
    return cls(*args)


def parse_commands(raws: Iterable[Command | Sequence[object]]) -> List[Command]:
    return [parse_command(raw) for raw in raws]


__all__ = ["parse_command", "parse_commands"]
