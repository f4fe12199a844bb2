"""In-memory notepad driven by discrete edit commands."""

from .commands import (
    Append,
    Backspace,
    Command,
    CommandValidationError,
    Insert,
    Move,
    Select,
    parse_command,
    parse_commands,
)
from .engine import EditEngine, SkippedCommand, StepView, run

__all__ = [
    "Append",
    "Backspace",
    "Command",
    "CommandValidationError",
    "EditEngine",
    "Insert",
    "Move",
    "Select",
    "SkippedCommand",
    "StepView",
    "parse_command",
    "parse_commands",
    "run",
]

__version__ = "0.1.0"
