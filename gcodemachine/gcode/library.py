"""Sample G-code programs.

Provides functions that return ready-to-use G-code strings for tests and
benchmarks without requiring external .gcode files.  Only codes the
interpreter handles are used, plus the bed heater codes M140/M190 which it
forwards to the sink.
"""

from __future__ import annotations

import math


# Extrusion constant: filament cross-section area for 1.75 mm filament
_FILAMENT_RADIUS = 1.75 / 2.0
_FILAMENT_AREA = math.pi * _FILAMENT_RADIUS ** 2  # ~2.405 mm^2


def _extrusion_length(
    segment_length: float,
    layer_height: float,
    extrusion_width: float = 0.4,
) -> float:
    """Filament length (mm) that deposits a segment of the given size."""
    volume = segment_length * layer_height * extrusion_width
    return volume / _FILAMENT_AREA


def calibration_square_gcode(
    size_mm: float = 20.0,
    layer_height: float = 0.2,
    num_layers: int = 10,
    nozzle_temp: float = 210.0,
    bed_temp: float = 60.0,
    print_speed: float = 60.0,
) -> str:
    """Generate G-code for a hollow square tower (perimeter only).

    Parameters
    ----------
    size_mm:
        Side length of the square in mm.
    layer_height:
        Layer height in mm.
    num_layers:
        Number of perimeter layers.
    nozzle_temp:
        Hotend temperature in degrees C.
    bed_temp:
        Bed temperature in degrees C.
    print_speed:
        Print speed in mm/s (converted to F in mm/min for G-code).

    Returns
    -------
    Multi-line G-code string.
    """
    feedrate = print_speed * 60.0
    travel_feedrate = 120.0 * 60.0
    z_feedrate = 300.0

    # Square origin, roughly centred on a 200 mm bed
    ox, oy = 90.0, 90.0

    lines: list[str] = []

    # -- Preamble --
    lines.append("; Calibration square")
    lines.append(f"; Size: {size_mm} mm, Layers: {num_layers}, Layer height: {layer_height} mm")
    lines.append("G21 ; millimetres")
    lines.append(f"M104 S{nozzle_temp:.0f} ; set hotend temp")
    lines.append(f"M140 S{bed_temp:.0f} ; set bed temp")
    lines.append(f"M109 S{nozzle_temp:.0f} ; wait for hotend")
    lines.append(f"M190 S{bed_temp:.0f} ; wait for bed")
    lines.append("G28 ; home all axes")
    lines.append("G90 ; absolute positioning")
    lines.append("M82 ; absolute extrusion")
    lines.append("G92 E0 ; reset extruder")
    lines.append("M106 S255 ; fan on full")
    lines.append("")

    e_total = 0.0

    for layer in range(num_layers):
        z = (layer + 1) * layer_height
        lines.append(f"; Layer {layer}")
        lines.append(f"G1 Z{z:.3f} F{z_feedrate:.0f}")
        lines.append(f"G0 X{ox:.3f} Y{oy:.3f} F{travel_feedrate:.0f}")

        corners = [
            (ox + size_mm, oy),
            (ox + size_mm, oy + size_mm),
            (ox, oy + size_mm),
            (ox, oy),
        ]
        for cx, cy in corners:
            e_total += _extrusion_length(size_mm, layer_height)
            lines.append(f"G1 X{cx:.3f} Y{cy:.3f} E{e_total:.5f} F{feedrate:.0f}")

        lines.append("")

    # -- End G-code --
    lines.append("; End")
    lines.append("M104 S0 ; hotend off")
    lines.append("M140 S0 ; bed off")
    lines.append("M107 ; fan off")
    lines.append("G28 X0 Y0 ; home X Y")
    lines.append("M84 ; disable steppers")

    return "\n".join(lines) + "\n"


def single_line_gcode(
    length_mm: float = 100.0,
    layer_height: float = 0.2,
    nozzle_temp: float = 210.0,
    print_speed: float = 30.0,
) -> str:
    """Generate G-code for a single straight extruded line.

    Written in relative mode with a relative extruder so every move word is
    a delta.
    """
    feedrate = print_speed * 60.0
    e_length = _extrusion_length(length_mm, layer_height)

    lines: list[str] = [
        "; Single line test",
        f"M109 S{nozzle_temp:.0f}",
        "G28",
        "G91",
        "M83",
        f"G1 Z{layer_height:.3f} F300",
        f"G1 X{length_mm:.3f} E{e_length:.5f} F{feedrate:.0f}",
        "G90",
        "M82",
        "; End",
        "M104 S0",
        "M84",
    ]
    return "\n".join(lines) + "\n"
