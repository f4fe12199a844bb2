"""Edit command types and the tuple parser."""

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
from .parsing import parse_command, parse_commands

__all__ = [
    "Append",
    "Backspace",
    "COMMAND_TYPES",
    "Command",
    "CommandValidationError",
    "Insert",
    "Move",
    "Select",
    "parse_command",
    "parse_commands",
]
