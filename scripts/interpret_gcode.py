#!/usr/bin/env python3
"""Interpret a G-code file and print the actions it produces.

Reads the program from a file (or stdin with ``-``), runs it through the
interpreter with a recording sink and prints one action per line.  Exits
with status 1 if any malformed words were reported.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Ensure package is importable when running from the scripts/ directory
# ---------------------------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_PROJECT_ROOT))

from gcodemachine.gcode.actions import MachineAction, RecordingSink
from gcodemachine.gcode.interpreter import GCodeInterpreter
from gcodemachine.printer.axes import Axis


def format_action(action: MachineAction) -> str:
    """Render one recorded action as a single line of text."""
    if action.position is not None:
        coords = " ".join(f"{axis.name}{action.position[axis]:.3f}" for axis in Axis)
        return f"{action.action_type:<16} {coords}"
    if action.action_type == "go_home":
        return f"{action.action_type:<16} 0x{int(action.axes):02x}"
    if action.action_type == "unprocessed":
        return f"{action.action_type:<16} {action.letter}{action.value:g} '{action.remaining}'"
    if action.value is not None:
        return f"{action.action_type:<16} {action.value:g}"
    return action.action_type


def main():
    parser = argparse.ArgumentParser(description="Interpret a G-code program")
    parser.add_argument("path", help="G-code file, or - for stdin")
    parser.add_argument("--inch", action="store_true",
                        help="Start in inch units, as if the program began with G20")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log at INFO level")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.path == "-":
        text = sys.stdin.read()
    else:
        text = Path(args.path).read_text()

    sink = RecordingSink()
    interpreter = GCodeInterpreter(sink)
    if args.inch:
        interpreter.interpret_line("G20")

    num_lines = interpreter.interpret_program(text)
    for action in sink.actions:
        print(format_action(action))

    errors = interpreter.get_errors()
    print(f"\n{num_lines} lines, {len(sink.actions)} actions, {len(errors)} errors",
          file=sys.stderr)
    sys.exit(1 if errors else 0)


if __name__ == "__main__":
    main()
