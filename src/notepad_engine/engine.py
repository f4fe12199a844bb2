"""Sequential interpreter applying edit commands to a text buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union

from notepad_engine.buffer import (
    BufferState,
    Selection,
    SnapshotLog,
    clamp_offset,
    ensure_cursor,
    ensure_selection,
)
from notepad_engine.commands import (
    Append,
    Backspace,
    Command,
    Insert,
    Move,
    Select,
    parse_commands,
)
from notepad_engine.runtime import telemetry

CommandInput = Union[Command, Sequence[object]]
CommandHandler = Callable[[Command, BufferState, SnapshotLog], None]

# Commands that need existing content to act on.
_GUARDED = (Move, Backspace, Select)


@dataclass(frozen=True, slots=True)
class SkippedCommand:
    """Diagnostic for a command the engine ignored."""

    index: int
    command: Command
    reason: str


@dataclass(frozen=True, slots=True)
class StepView:
    """Buffer state right after a command was applied."""

    index: int
    command: Command
    text: str
    cursor: int
    selection: Optional[Selection]


SkipCallback = Callable[[SkippedCommand], None]
StepCallback = Callable[[StepView], None]


def _replace_selection(text: str, state: BufferState, log: SnapshotLog) -> None:
    assert state.selection is not None
    start, end = state.selection
    current = log.current
    log.record(current[:start] + text + current[end:])
    state.set_cursor(start + len(text))
    state.clear_selection()


def _apply_append(command: Command, state: BufferState, log: SnapshotLog) -> None:
    assert isinstance(command, Append)
    if state.has_selection:
        _replace_selection(command.text, state, log)
        return
    updated = log.record(log.current + command.text)
    state.set_cursor(len(updated))


def _apply_move(command: Command, state: BufferState, log: SnapshotLog) -> None:
    assert isinstance(command, Move)
    state.clear_selection()
    state.set_cursor(clamp_offset(state.cursor + command.delta, len(log.current)))


def _apply_backspace(command: Command, state: BufferState, log: SnapshotLog) -> None:
    assert isinstance(command, Backspace)
    if state.has_selection:
        _replace_selection("", state, log)
        return
    current = log.current
    cursor = state.cursor
    delete_start = clamp_offset(cursor - command.count, cursor)
    log.record(current[:delete_start] + current[cursor:])
    state.set_cursor(delete_start)


def _apply_insert(command: Command, state: BufferState, log: SnapshotLog) -> None:
    assert isinstance(command, Insert)
    if state.has_selection:
        _replace_selection(command.text, state, log)
        return
    if log.is_empty:
        log.record(command.text)
        state.set_cursor(len(command.text))
        return
    current = log.current
    cursor = state.cursor
    log.record(current[:cursor] + command.text + current[cursor:])
    state.set_cursor(cursor + len(command.text))


def _apply_select(command: Command, state: BufferState, log: SnapshotLog) -> None:
    assert isinstance(command, Select)
    length = len(log.current)
    left = clamp_offset(command.left, length)
    right = clamp_offset(command.right, length)
    state.set_selection(min(left, right), max(left, right))


_COMMAND_HANDLERS: Dict[type, CommandHandler] = {
    Append: _apply_append,
    Move: _apply_move,
    Backspace: _apply_backspace,
    Insert: _apply_insert,
    Select: _apply_select,
}


class EditEngine:
    """Runs command sequences against a fresh buffer and collects snapshots.

    Each ``run`` call starts from an empty buffer with the cursor at 0 and no
    selection. ``diagnostics`` holds the skips reported by the latest run.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        on_skip: Optional[SkipCallback] = None,
        on_step: Optional[StepCallback] = None,
        logger_name: str | None = None,
    ) -> None:
        self.name = name
        self.on_skip = on_skip
        self.on_step = on_step
        self._logger_name = logger_name
        self.diagnostics: List[SkippedCommand] = []

    def run(self, commands: Iterable[CommandInput]) -> List[str]:
        parsed = parse_commands(commands)
        state = BufferState()
        log = SnapshotLog()
        self.diagnostics = []

        with telemetry.span(
            "engine::run",
            logger_name=self._logger_name,
            component="engine",
            metadata={"engine": self.name, "commands": len(parsed)},
        ) as handle:
            for index, command in enumerate(parsed):
                if log.is_empty and isinstance(command, _GUARDED):
                    self._skip(index, command, "no content exists yet")
                    continue
                _COMMAND_HANDLERS[type(command)](command, state, log)
                ensure_cursor(log.current, state.cursor)
                ensure_selection(log.current, state.selection)
                if self.on_step is not None:
                    self.on_step(
                        StepView(
                            index=index,
                            command=command,
                            text=log.current,
                            cursor=state.cursor,
                            selection=state.selection,
                        )
                    )
            handle.add_metadata("snapshots", len(log))
            handle.add_metadata("skipped", len(self.diagnostics))

        telemetry.record_event(
            "engine.run",
            level="debug",
            data={
                "engine": self.name,
                "commands": len(parsed),
                "snapshots": len(log),
                "skipped": len(self.diagnostics),
            },
            logger_name=self._logger_name,
        )
        return log.to_list()

    def _skip(self, index: int, command: Command, reason: str) -> None:
        skipped = SkippedCommand(index=index, command=command, reason=reason)
        self.diagnostics.append(skipped)
        telemetry.record_event(
            "command.skipped",
            level="debug",
            data={"index": index, "command": command.kind, "reason": reason},
            logger_name=self._logger_name,
        )
        if self.on_skip is not None:
            self.on_skip(skipped)


def run(
    commands: Iterable[CommandInput], *, on_skip: Optional[SkipCallback] = None
) -> List[str]:
    """Apply ``commands`` in order and return the recorded buffer snapshots."""

    return EditEngine(on_skip=on_skip).run(commands)


__all__ = [
    "EditEngine",
    "SkippedCommand",
    "SkipCallback",
    "StepCallback",
    "StepView",
    "run",
]
