from __future__ import annotations
from dataclasses import dataclass, field
import numpy as np
from gcodemachine.config import InterpreterConfig, DEFAULT_CONFIG
from gcodemachine.printer.axes import Axis, NUM_AXES


def _zeros() -> np.ndarray:
    return np.zeros(NUM_AXES, dtype=np.float64)


def _all_absolute() -> np.ndarray:
    return np.ones(NUM_AXES, dtype=bool)


@dataclass
class MachineState:
    """Logical coordinate state mutated by interpreted commands.

    Not safe for unsynchronized concurrent access; give each command stream
    its own interpreter (and therefore its own state).
    """
    config: InterpreterConfig = DEFAULT_CONFIG

    # Input units -> canonical units (mm)
    unit_scale: float = 1.0

    # Per-axis registers, indexed by Axis
    axis_absolute: np.ndarray = field(default_factory=_all_absolute)
    relative_zero: np.ndarray = field(default_factory=_zeros)  # set by G92
    position: np.ndarray = field(default_factory=_zeros)  # last commanded

    feedrate: float = 0.0  # canonical units

    def __post_init__(self) -> None:
        self.unit_scale = self.config.metric_unit_scale
        self.feedrate = self.config.initial_feedrate

    def reset(self) -> None:
        """Reset state to power-on defaults."""
        self.unit_scale = self.config.metric_unit_scale
        self.axis_absolute[:] = True
        self.relative_zero[:] = 0.0
        self.position[:] = 0.0
        self.feedrate = self.config.initial_feedrate

    def set_all_absolute(self, absolute: bool) -> None:
        self.axis_absolute[:] = absolute

    def move_axis(self, axis: Axis, value: float) -> float:
        """Apply one already-scaled axis word and return the new position."""
        if self.axis_absolute[axis]:
            self.position[axis] = self.relative_zero[axis] + value
        else:
            self.position[axis] += value
        return float(self.position[axis])

    def rebase_axis(self, axis: Axis, value: float) -> None:
        """Make the current position read as *value* without moving."""
        self.relative_zero[axis] = self.position[axis] - value

    def home(self) -> None:
        self.position[:] = 0.0
        self.relative_zero[:] = 0.0

    def logical_position(self) -> np.ndarray:
        """Current position expressed against ``relative_zero``."""
        return self.position - self.relative_zero
