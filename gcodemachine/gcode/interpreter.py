"""G-code interpreter.

Walks the words of each line, keeps the machine's coordinate state and
hands the resulting actions to an :class:`ActionSink`.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable

import numpy as np

from gcodemachine.config import InterpreterConfig, DEFAULT_CONFIG
from gcodemachine.gcode.actions import ActionSink
from gcodemachine.gcode.tokenizer import GCodeTokenizer, Word
from gcodemachine.printer.axes import Axis, AxisMask
from gcodemachine.printer.state import MachineState
from gcodemachine.utils.errors import GCodeSyntaxError

logger = logging.getLogger(__name__)


class GCodeInterpreter:
    """Stateful interpreter that turns G-code lines into sink actions.

    A G or M word selects a handler by the integer part of its number; the
    handler then reads its own parameter words from the same line and stops
    at the first word that is not one of them, leaving it for the next
    command.  Unknown codes and letters go to ``sink.unprocessed``.

    One instance serves one command stream: calls must not overlap.
    """

    def __init__(
        self,
        sink: ActionSink | None = None,
        config: InterpreterConfig = DEFAULT_CONFIG,
    ) -> None:
        self.config = config
        self.sink: ActionSink = sink if sink is not None else ActionSink()
        self.tokenizer = GCodeTokenizer(config)
        self.state = MachineState(config)
        self.line_count: int = 0
        self.errors: list[str] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def interpret_line(self, line: str) -> None:
        """Interpret a single line of G-code.

        Malformed words end the line with a diagnostic in :attr:`errors`;
        whatever earlier words on the line did stays in effect.
        """
        self.line_count += 1
        remaining: str | None = line
        while remaining is not None:
            try:
                word = self.tokenizer.next_word(remaining)
            except GCodeSyntaxError as exc:
                self._report(exc)
                return
            if word is None:
                return
            remaining = self._dispatch(word)

    def interpret_program(self, program: str | Iterable[str]) -> int:
        """Interpret a full program.

        Parameters
        ----------
        program:
            Either a multi-line string or an iterable of lines.

        Returns
        -------
        Number of lines interpreted.
        """
        lines = program.splitlines() if isinstance(program, str) else program
        self.line_count = 0
        self.errors = []
        for line in lines:
            self.interpret_line(line)
        return self.line_count

    def reset(self) -> None:
        """Reset machine state and diagnostics to defaults."""
        self.state.reset()
        self.line_count = 0
        self.errors = []

    def get_errors(self) -> list[str]:
        """Diagnostics recorded since the last reset."""
        return self.errors

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, word: Word) -> str | None:
        if word.letter in ("G", "M") and math.isfinite(word.value):
            # A fractional code such as G0.9 selects G0.
            handler = self._DISPATCH.get(f"{word.letter}{int(word.value)}")
            if handler is not None:
                return handler(self, word.remaining)
        elif word.letter == "N":
            return word.remaining
        return self.sink.unprocessed(word.letter, word.value, word.remaining)

    def _peek(self, line: str) -> Word | None:
        """Next word of *line*, or None if there is none to take.

        Syntax errors are left in place for the top-level loop to report.
        """
        try:
            return self.tokenizer.next_word(line)
        except GCodeSyntaxError:
            return None

    def _report(self, exc: GCodeSyntaxError) -> None:
        message = f"Line {self.line_count}: {exc}"
        logger.warning(message)
        self.errors.append(message)

    # ------------------------------------------------------------------
    # Command handlers (private)
    # ------------------------------------------------------------------

    def _handle_move(
        self, line: str, emit: Callable[[np.ndarray], None]
    ) -> str:
        """Read F and axis words; emit one move if any axis was given."""
        state = self.state
        any_change = False
        while True:
            word = self._peek(line)
            if word is None:
                break
            unit_value = word.value * state.unit_scale
            axis = Axis.from_letter(word.letter)
            if word.letter == "F":
                if unit_value != state.feedrate:
                    self.sink.set_feedrate(unit_value)
                    state.feedrate = unit_value
            elif axis is not None:
                state.move_axis(axis, unit_value)
                any_change = True
            else:
                break  # Possibly start of new command.
            line = word.remaining

        if any_change:
            emit(state.position.copy())
        return line

    def _handle_g0(self, line: str) -> str:
        """Handle G0 (rapid move)."""
        return self._handle_move(line, self.sink.rapid_move)

    def _handle_g1(self, line: str) -> str:
        """Handle G1 (coordinated move)."""
        return self._handle_move(line, self.sink.coordinated_move)

    def _handle_g20(self, line: str) -> str:
        """Handle G20 (inch units)."""
        self.state.unit_scale = self.config.imperial_unit_scale
        return line

    def _handle_g21(self, line: str) -> str:
        """Handle G21 (millimetre units)."""
        self.state.unit_scale = self.config.metric_unit_scale
        return line

    def _handle_g28(self, line: str) -> str:
        """Handle G28 (home).

        Axis words are flags; their values, if any, are ignored.  A bare
        letter such as the X in ``G28 X Y`` counts too.
        """
        self.state.home()
        homing = AxisMask(0)
        while True:
            try:
                word = self.tokenizer.next_word(line)
            except GCodeSyntaxError as exc:
                axis = Axis.from_letter(exc.letter)
                if axis is None:
                    break
                homing |= axis.mask
                line = exc.remaining
                continue
            if word is None:
                break
            axis = Axis.from_letter(word.letter)
            if axis is None:
                break
            homing |= axis.mask
            line = word.remaining

        self.sink.go_home(homing if homing else AxisMask.ALL)
        return line

    def _handle_g90(self, line: str) -> str:
        """Handle G90 (absolute positioning)."""
        self.state.set_all_absolute(True)
        return line

    def _handle_g91(self, line: str) -> str:
        """Handle G91 (relative positioning)."""
        self.state.set_all_absolute(False)
        return line

    def _handle_g92(self, line: str) -> str:
        """Handle G92 (set position without moving)."""
        while True:
            word = self._peek(line)
            if word is None:
                break
            axis = Axis.from_letter(word.letter)
            if axis is None:
                break
            self.state.rebase_axis(axis, word.value * self.state.unit_scale)
            line = word.remaining
        return line

    def _handle_m82(self, line: str) -> str:
        """Handle M82 (absolute extruder)."""
        self.state.axis_absolute[self.config.extruder_axis] = True
        return line

    def _handle_m83(self, line: str) -> str:
        """Handle M83 (relative extruder)."""
        self.state.axis_absolute[self.config.extruder_axis] = False
        return line

    def _handle_m84(self, line: str) -> str:
        """Handle M84 (disable motors)."""
        self.sink.disable_motors()
        return line

    def _set_s_param(self, line: str, setter: Callable[[float], None]) -> str:
        """Pass an immediately following S word to *setter*, if there is one."""
        word = self._peek(line)
        if word is not None and word.letter == "S":
            setter(word.value)
            return word.remaining
        return line

    def _handle_m104(self, line: str) -> str:
        """Handle M104 (set hotend temperature, no wait)."""
        return self._set_s_param(line, self.sink.set_temperature)

    def _handle_m106(self, line: str) -> str:
        """Handle M106 (set fan speed)."""
        return self._set_s_param(line, self.sink.set_fanspeed)

    def _handle_m107(self, line: str) -> str:
        """Handle M107 (fan off)."""
        self.sink.set_fanspeed(0.0)
        return line

    def _handle_m109(self, line: str) -> str:
        """Handle M109 (set hotend temperature and wait)."""
        line = self._set_s_param(line, self.sink.set_temperature)
        self.sink.wait_temperature()
        return line

    def _handle_m116(self, line: str) -> str:
        """Handle M116 (wait for temperatures)."""
        self.sink.wait_temperature()
        return line

    # ------------------------------------------------------------------
    # Dispatch table
    # ------------------------------------------------------------------

    _DISPATCH: dict[str, Callable[[GCodeInterpreter, str], str]] = {
        "G0": _handle_g0,
        "G1": _handle_g1,
        "G20": _handle_g20,
        "G21": _handle_g21,
        "G28": _handle_g28,
        "G90": _handle_g90,
        "G91": _handle_g91,
        "G92": _handle_g92,
        "M82": _handle_m82,
        "M83": _handle_m83,
        "M84": _handle_m84,
        "M104": _handle_m104,
        "M106": _handle_m106,
        "M107": _handle_m107,
        "M109": _handle_m109,
        "M116": _handle_m116,
    }
