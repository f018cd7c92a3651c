#!/usr/bin/env python3
"""Benchmark G-code interpretation speed."""

import time
import argparse
import sys
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_PROJECT_ROOT))

from gcodemachine.gcode.actions import RecordingSink
from gcodemachine.gcode.interpreter import GCodeInterpreter
from gcodemachine.gcode.library import calibration_square_gcode
from gcodemachine.printer.simulated import SimulatedPrinter


def benchmark_interpretation(program: str, repeats: int) -> tuple[float, int]:
    """Interpret *program* *repeats* times into a recording sink."""
    sink = RecordingSink()
    interpreter = GCodeInterpreter(sink)
    lines = program.splitlines()

    start = time.perf_counter()
    for _ in range(repeats):
        interpreter.reset()
        sink.clear()
        interpreter.interpret_program(lines)
    elapsed = time.perf_counter() - start

    lines_per_sec = len(lines) * repeats / max(elapsed, 1e-6)
    return lines_per_sec, len(sink.actions)


def benchmark_simulated_printer(program: str, repeats: int) -> float:
    """Interpret *program* into a simulated printer."""
    printer = SimulatedPrinter()
    interpreter = GCodeInterpreter(printer)
    lines = program.splitlines()

    start = time.perf_counter()
    for _ in range(repeats):
        interpreter.reset()
        printer.reset()
        interpreter.interpret_program(lines)
    elapsed = time.perf_counter() - start

    return len(lines) * repeats / max(elapsed, 1e-6)


def main():
    parser = argparse.ArgumentParser(description="Benchmark the G-code interpreter")
    parser.add_argument("--layers", type=int, default=100)
    parser.add_argument("--repeats", type=int, default=20)
    args = parser.parse_args()

    program = calibration_square_gcode(num_layers=args.layers)

    print("=" * 60)
    print("G-code Interpreter Benchmark")
    print("=" * 60)

    print(f"\nInterpreting calibration square ({args.layers} layers) x{args.repeats}...")
    lines_per_sec, num_actions = benchmark_interpretation(program, args.repeats)
    print(f"  Actions per run: {num_actions}")
    print(f"  Lines/sec (recording sink): {lines_per_sec:,.0f}")

    lines_per_sec = benchmark_simulated_printer(program, args.repeats)
    print(f"  Lines/sec (simulated printer): {lines_per_sec:,.0f}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
