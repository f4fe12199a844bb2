from __future__ import annotations

from typing import List

import pytest

from notepad_engine import (
    Append,
    Backspace,
    EditEngine,
    Insert,
    Move,
    Select,
    SkippedCommand,
    StepView,
    run,
)
from notepad_engine.commands import Command
from notepad_engine.runtime import telemetry


def make_steps(commands: List[Command]) -> List[StepView]:
    steps: List[StepView] = []
    EditEngine(on_step=steps.append).run(commands)
    return steps


def test_scenario_append_move_backspace_insert() -> None:
    commands = [
        Append("Hi"),
        Append(" there!"),
        Move(-600),
        Move(6),
        Backspace(3),
        Insert("Squa"),
    ]

    assert run(commands) == ["Hi", "Hi there!", "Hi re!", "Hi Square!"]


def test_scenario_selection_replacement() -> None:
    commands = [
        Append("Hello World!"),
        Select(0, 5),
        Append("Hi"),
        Select(3, 8),
        Backspace(),
        Select(2, 2),
        Insert(" beautiful"),
        Select(-5, 100),
        Append("Greetings!"),
    ]

    assert run(commands) == [
        "Hello World!",
        "Hi World!",
        "Hi !",
        "Hi beautiful !",
        "Greetings!",
    ]


def test_scenario_clamped_selects() -> None:
    commands = [
        Append("Test"),
        Select(-10, 20),
        Insert("ABC"),
        Select(1, 1),
        Move(2),
        Select(0, 3),
        Backspace(),
    ]

    assert run(commands) == ["Test", "ABC", ""]


def test_loose_tuples_are_accepted() -> None:
    commands = [
        ("APPEND", "Hi"),
        ("APPEND", " there!"),
        ("MOVE", -600),
        ("MOVE", 6),
        ("BACKSPACE", 3),
        ("INSERT", "Squa"),
    ]

    assert run(commands) == ["Hi", "Hi there!", "Hi re!", "Hi Square!"]


def test_select_past_end_collapses_to_cursor_at_end() -> None:
    step = make_steps([Append("abc"), Select(10, 20)])[-1]

    assert step.text == "abc"
    assert step.selection is None
    assert step.cursor == 3


def test_select_with_inverted_bounds_is_sorted() -> None:
    step = make_steps([Append("abcdef"), Select(4, 1)])[-1]

    assert step.selection == (1, 4)
    assert step.cursor == 4


def test_backspace_count_past_cursor_deletes_from_start() -> None:
    commands = [Append("abcdef"), Move(-2), Backspace(100)]

    assert run(commands) == ["abcdef", "ef"]


def test_backspace_negative_count_deletes_nothing() -> None:
    assert run([Append("abc"), Backspace(-4)]) == ["abc", "abc"]


def test_backspace_with_selection_ignores_count() -> None:
    assert run([Append("abcdef"), Select(1, 3), Backspace(5)]) == ["abcdef", "adef"]


def test_move_clamps_to_buffer_end() -> None:
    commands = [Append("abc"), Move(-10), Move(99), Insert("!")]

    assert run(commands) == ["abc", "abc!"]


def test_move_clears_selection_without_repositioning() -> None:
    commands = [Append("abcdef"), Select(1, 3), Move(0), Insert("X")]

    assert run(commands) == ["abcdef", "abcXdef"]


def test_move_zero_never_records_snapshot() -> None:
    with_move = run([Append("abc"), Move(0), Move(0)])

    assert with_move == ["abc"]


def test_insert_then_backspace_restores_content() -> None:
    before = [Append("hello world"), Move(-6)]
    after = before + [Insert("big "), Backspace(len("big "))]

    snapshots = run(after)

    assert snapshots[-1] == run(before)[-1]


def test_insert_originates_content_on_empty_buffer() -> None:
    assert run([Insert("abc"), Insert("X")]) == ["abc", "abcX"]


def test_cursor_and_selection_invariants_hold() -> None:
    commands: List[Command] = [
        Append("alpha"),
        Select(-3, 3),
        Insert("zz"),
        Move(-100),
        Backspace(7),
        Append(" beta"),
        Select(2, 50),
        Backspace(),
        Move(40),
        Select(0, 0),
        Insert("gamma"),
        Select(9, -9),
    ]

    steps = make_steps(commands)

    assert [step.index for step in steps] == list(range(len(commands)))
    for step in steps:
        assert 0 <= step.cursor <= len(step.text)
        if step.selection is not None:
            start, end = step.selection
            assert 0 <= start < end <= len(step.text)


def test_guarded_commands_skip_on_empty_buffer() -> None:
    skipped: List[SkippedCommand] = []
    engine = EditEngine(on_skip=skipped.append)

    result = engine.run([Move(3), Backspace(), Select(0, 2), Append("ok")])

    assert result == ["ok"]
    assert [item.index for item in skipped] == [0, 1, 2]
    assert [item.command.kind for item in skipped] == ["MOVE", "BACKSPACE", "SELECT"]
    assert engine.diagnostics == skipped


def test_diagnostics_reset_between_runs() -> None:
    engine = EditEngine()
    engine.run([Move(1), Append("a")])
    assert len(engine.diagnostics) == 1

    assert engine.run([Append("b"), Move(1)]) == ["b"]
    assert engine.diagnostics == []


def test_runs_do_not_share_state() -> None:
    engine = EditEngine()

    assert engine.run([Append("first")]) == ["first"]
    assert engine.run([Insert("second")]) == ["second"]


def test_empty_command_list() -> None:
    assert run([]) == []


def test_invalid_command_raises_before_running() -> None:
    skipped: List[SkippedCommand] = []

    with pytest.raises(ValueError):
        run([Move(1), ("APPEND", 5)], on_skip=skipped.append)

    assert skipped == []


def test_step_observer_skips_guarded_commands() -> None:
    steps = make_steps([Move(1), Append("ab"), Select(0, 1), Move(5)])

    assert [step.index for step in steps] == [1, 2, 3]
    assert [step.command.kind for step in steps] == ["APPEND", "SELECT", "MOVE"]
    assert steps[1].selection == (0, 1)
    assert steps[2].selection is None
    assert steps[2].cursor == 2


def test_skip_event_stays_below_console_level(monkeypatch: pytest.MonkeyPatch) -> None:
    events: List[tuple[str, str]] = []

    def record_event(name: str, *, level: str = "info", **kwargs: object) -> None:
        del kwargs
        events.append((name, level))

    monkeypatch.setattr(telemetry, "record_event", record_event)

    EditEngine().run([Move(1), Append("a")])

    assert ("command.skipped", "debug") in events
    assert all(level == "debug" for _, level in events)
