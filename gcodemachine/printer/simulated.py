from __future__ import annotations

import logging

import numpy as np

from gcodemachine.config import InterpreterConfig, DEFAULT_CONFIG
from gcodemachine.gcode.actions import ActionSink
from gcodemachine.gcode.tokenizer import GCodeTokenizer
from gcodemachine.printer.axes import Axis, AxisMask, NUM_AXES
from gcodemachine.utils.errors import GCodeSyntaxError

logger = logging.getLogger(__name__)


class SimulatedPrinter(ActionSink):
    """In-memory printer that applies interpreted actions to its own state.

    Also handles the bed heater codes the interpreter forwards unprocessed:
    ``M140 S<t>`` sets the bed target, ``M190 S<t>`` sets it and waits.
    """

    def __init__(self, config: InterpreterConfig = DEFAULT_CONFIG) -> None:
        self._tokenizer = GCodeTokenizer(config)
        self.position = np.zeros(NUM_AXES, dtype=np.float64)
        self.feedrate: float = 0.0
        self.hotend_target: float = 0.0
        self.bed_target: float = 0.0
        self.fan_speed: float = 0.0
        self.motors_enabled: bool = False
        self.homed = AxisMask(0)
        self.move_count: int = 0
        self.rapid_count: int = 0
        self.wait_count: int = 0
        self.ignored_words: list[str] = []

    def reset(self) -> None:
        """Reset to power-on defaults."""
        self.position[:] = 0.0
        self.feedrate = 0.0
        self.hotend_target = 0.0
        self.bed_target = 0.0
        self.fan_speed = 0.0
        self.motors_enabled = False
        self.homed = AxisMask(0)
        self.move_count = 0
        self.rapid_count = 0
        self.wait_count = 0
        self.ignored_words.clear()

    # ------------------------------------------------------------------ #
    #  Motion                                                             #
    # ------------------------------------------------------------------ #

    def rapid_move(self, position: np.ndarray) -> None:
        self.rapid_count += 1
        self.coordinated_move(position)

    def coordinated_move(self, position: np.ndarray) -> None:
        self.position[:] = position
        self.motors_enabled = True
        self.move_count += 1

    def set_feedrate(self, value: float) -> None:
        self.feedrate = value

    def go_home(self, axes: AxisMask) -> None:
        for axis in Axis:
            if axes & axis.mask:
                self.position[axis] = 0.0
        self.homed |= axes
        self.motors_enabled = True

    def disable_motors(self) -> None:
        self.motors_enabled = False
        # Position is lost once the steppers are free to turn.
        self.homed = AxisMask(0)

    # ------------------------------------------------------------------ #
    #  Heaters and fan                                                    #
    # ------------------------------------------------------------------ #

    def set_temperature(self, value: float) -> None:
        self.hotend_target = value

    def set_fanspeed(self, value: float) -> None:
        self.fan_speed = value

    def wait_temperature(self) -> None:
        self.wait_count += 1

    # ------------------------------------------------------------------ #
    #  Words the interpreter does not handle                              #
    # ------------------------------------------------------------------ #

    def unprocessed(self, letter: str, value: float, remaining: str) -> str | None:
        code = f"{letter}{value:g}"
        if code in ("M140", "M190"):
            remaining = self._read_bed_target(remaining)
            if code == "M190":
                self.wait_count += 1
            return remaining

        logger.debug(f"ignoring {code}")
        self.ignored_words.append(code)
        return remaining

    def _read_bed_target(self, remaining: str) -> str:
        try:
            word = self._tokenizer.next_word(remaining)
        except GCodeSyntaxError:
            return remaining
        if word is None or word.letter != "S":
            return remaining
        self.bed_target = word.value
        return word.remaining
