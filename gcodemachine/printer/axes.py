"""The closed set of seven logical machine axes."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class Axis(IntEnum):
    """Logical axis, valued by its slot in axis-indexed arrays."""

    X = 0
    Y = 1
    Z = 2
    E = 3  # extruder
    A = 4
    B = 5
    C = 6

    @property
    def mask(self) -> AxisMask:
        return AxisMask(1 << self.value)

    @classmethod
    def from_letter(cls, letter: str) -> Axis | None:
        """Return the axis named by *letter*, or ``None`` for non-axis letters."""
        return _AXIS_BY_LETTER.get(letter.upper())


class AxisMask(IntFlag):
    """Bitmask over :class:`Axis`, as passed to ``go_home``."""

    X = 1 << Axis.X
    Y = 1 << Axis.Y
    Z = 1 << Axis.Z
    E = 1 << Axis.E
    A = 1 << Axis.A
    B = 1 << Axis.B
    C = 1 << Axis.C
    ALL = X | Y | Z | E | A | B | C


NUM_AXES = len(Axis)
AXIS_LETTERS = "".join(axis.name for axis in Axis)

_AXIS_BY_LETTER: dict[str, Axis] = {axis.name: axis for axis in Axis}
