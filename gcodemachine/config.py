"""InterpreterConfig: unit scales and syntax markers for the G-code interpreter."""

from dataclasses import dataclass

from gcodemachine.printer.axes import Axis


@dataclass(frozen=True)
class InterpreterConfig:
    """Tunables shared by the tokenizer, interpreter and machine state."""

    # --- Units (canonical unit is the millimetre) ---
    metric_unit_scale: float = 1.0  # G21
    imperial_unit_scale: float = 25.4  # G20, mm per inch

    # --- Power-on state ---
    initial_feedrate: float = 0.0  # canonical units
    extruder_axis: Axis = Axis.E  # toggled on its own by M82 / M83

    # --- Syntax ---
    line_terminators: str = ";%"  # comment start, parameter-block delimiter
    checksum_marker: str = "*"  # rest of the line is ignored


# Singleton default config
DEFAULT_CONFIG = InterpreterConfig()
