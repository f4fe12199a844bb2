"""Command-line demo: ``python -m notepad_engine commands.json``."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, List, Optional, Sequence, TextIO

from notepad_engine.commands import CommandValidationError
from notepad_engine.engine import EditEngine, SkippedCommand
from notepad_engine.runtime import telemetry

SAMPLE_COMMANDS: List[List[Any]] = [
    ["APPEND", "Hi"],
    ["APPEND", " there!"],
    ["MOVE", -600],
    ["MOVE", 6],
    ["BACKSPACE", 3],
    ["INSERT", "Squa"],
]


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="notepad_engine",
        description="Run a JSON list of edit commands and print the snapshots.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="JSON file holding [[KIND, *args], ...] (default: stdin)",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Ignore PATH and run the built-in sample commands",
    )
    parser.add_argument(
        "--show-skips",
        action="store_true",
        help="Report skipped commands on stderr",
    )
    parser.add_argument(
        "--preset",
        choices=telemetry.PRESETS,
        help="Telemetry preset to configure before running",
    )
    return parser.parse_args(argv)


def _load_commands(path: str, stdin: TextIO) -> Any:
    if path == "-":
        return json.load(stdin)
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    args = _parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    if args.preset:
        telemetry.configure(preset=args.preset)

    def report_skip(skipped: SkippedCommand) -> None:
        print(
            f"skipped #{skipped.index} {skipped.command.kind}: {skipped.reason}",
            file=stderr,
        )

    engine = EditEngine(
        name="cli", on_skip=report_skip if args.show_skips else None
    )
    try:
        raw = SAMPLE_COMMANDS if args.sample else _load_commands(args.path, stdin)
        if not isinstance(raw, list):
            raise CommandValidationError("Expected a JSON array of commands")
        snapshots = engine.run(raw)
    except (OSError, ValueError, RecursionError) as exc:
        print(f"error: {exc}", file=stderr)
        return 2

    json.dump(snapshots, stdout)
    stdout.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
