"""Action sink: the side effects the interpreter hands to the machine.

:class:`ActionSink` implements every capability as a logged no-op so the
interpreter runs standalone.  Collaborators subclass it and override only the
capabilities they drive.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from gcodemachine.printer.axes import AxisMask

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MachineAction:
    """One recorded call into an action sink."""

    action_type: str
    # "rapid_move", "coordinated_move", "set_feedrate", "set_temperature",
    # "set_fanspeed", "wait_temperature", "disable_motors", "go_home",
    # "unprocessed"

    position: tuple[float, ...] | None = None  # canonical units, one per axis
    value: float | None = None
    axes: AxisMask | None = None  # go_home only
    letter: str | None = None  # unprocessed only
    remaining: str | None = None  # unprocessed only


class ActionSink:
    """Receiver of interpreted actions.

    Every method is called synchronously from ``interpret_line`` and is
    expected to return promptly.
    """

    def rapid_move(self, position: np.ndarray) -> None:
        """G0.  Falls back to :meth:`coordinated_move` unless overridden."""
        self.coordinated_move(position)

    def coordinated_move(self, position: np.ndarray) -> None:
        logger.info(
            f"move(X={position[0]:.3f},Y={position[1]:.3f},"
            f"Z={position[2]:.3f},E={position[3]:.3f},...)"
        )

    def set_feedrate(self, value: float) -> None:
        logger.info(f"set_feedrate({value:.2f})")

    def set_temperature(self, value: float) -> None:
        logger.info(f"set_temperature({value:.1f})")

    def set_fanspeed(self, value: float) -> None:
        logger.info(f"set_fanspeed({value:.0f})")

    def wait_temperature(self) -> None:
        logger.info("wait_temperature()")

    def disable_motors(self) -> None:
        logger.info("disable_motors()")

    def go_home(self, axes: AxisMask) -> None:
        logger.info(f"go_home(0x{int(axes):02x})")

    def unprocessed(self, letter: str, value: float, remaining: str) -> str | None:
        """Handle a word the interpreter does not know.

        Parameters
        ----------
        letter:
            Upper-cased word letter.
        value:
            The word's number.
        remaining:
            Line text after the word.  The callback may read further words
            from it.

        Returns
        -------
        The text to resume tokenizing from, or None to drop the rest of the
        line.
        """
        logger.warning(f"unprocessed('{letter}', {value:g}, '{remaining}')")
        return None


class RecordingSink(ActionSink):
    """Sink that keeps every action in :attr:`actions`, in call order."""

    def __init__(self) -> None:
        self.actions: list[MachineAction] = []

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    def rapid_move(self, position: np.ndarray) -> None:
        self._record("rapid_move", position=_as_tuple(position))

    def coordinated_move(self, position: np.ndarray) -> None:
        self._record("coordinated_move", position=_as_tuple(position))

    def set_feedrate(self, value: float) -> None:
        self._record("set_feedrate", value=value)

    def set_temperature(self, value: float) -> None:
        self._record("set_temperature", value=value)

    def set_fanspeed(self, value: float) -> None:
        self._record("set_fanspeed", value=value)

    def wait_temperature(self) -> None:
        self._record("wait_temperature")

    def disable_motors(self) -> None:
        self._record("disable_motors")

    def go_home(self, axes: AxisMask) -> None:
        self._record("go_home", axes=AxisMask(axes))

    def unprocessed(self, letter: str, value: float, remaining: str) -> str | None:
        self._record("unprocessed", value=value, letter=letter, remaining=remaining)
        return remaining

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def of_type(self, action_type: str) -> list[MachineAction]:
        """Recorded actions with the given ``action_type``."""
        return [a for a in self.actions if a.action_type == action_type]

    def clear(self) -> None:
        self.actions.clear()

    def _record(self, action_type: str, **kwargs) -> None:
        self.actions.append(MachineAction(action_type=action_type, **kwargs))


def _as_tuple(position: np.ndarray) -> tuple[float, ...]:
    return tuple(float(v) for v in position)
