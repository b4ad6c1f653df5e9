# labelaxes/core/units.py
"""
Buffer units: parse unit names, measure an axes in a unit, and convert a
buffer distance into a fraction of the axes width/height.
"""

from __future__ import annotations

import logging
import math
import numbers

from matplotlib.axes import Axes

from labelaxes.core.config import CM_PER_INCH, POINTS_PER_INCH
from labelaxes.core.error_codes import DegenerateAxisError, InvalidOptionError, InvalidUnitError
from labelaxes.core.text_metrics import character_size_pt
from labelaxes.core.types import LabelOptions, Unit

logger = logging.getLogger(__name__)


def parse_unit(value: Unit | str) -> Unit:
    """
    Match a unit name case-insensitively; any unambiguous prefix is accepted
    ('norm', 'in', 'cent', 'char', 'po', 'pi'). Raises InvalidUnitError.
    """
    if isinstance(value, Unit):
        return value
    if not isinstance(value, str):
        raise InvalidUnitError(f"Buffer unit must be text, got {type(value).__name__}")
    key = value.strip().lower()
    if not key:
        raise InvalidUnitError("Buffer unit is empty")
    matches = [u for u in Unit if u.value.startswith(key)]
    if len(matches) != 1:
        expected = ", ".join(u.value for u in Unit)
        raise InvalidUnitError(f"Buffer unit {value!r} does not match exactly one of: {expected}")
    return matches[0]


def check_buffer(value: float, name: str) -> float:
    """Return value as float; raise InvalidOptionError unless it is a finite real scalar."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise InvalidOptionError(f"{name} must be a finite number, got {value!r}")
    return float(value)


def axis_size_in_unit(ax: Axes, unit: Unit | str) -> tuple[float, float]:
    """
    Return (width, height) of the axes box in unit.
    Uses the active axes position (figure fraction) times the figure size;
    the axes itself is not modified.
    """
    unit = parse_unit(unit)
    if unit is Unit.NORMALIZED:
        return (1.0, 1.0)
    fig = ax.get_figure()
    bbox = ax.get_position()
    fig_w_in, fig_h_in = fig.get_size_inches()
    width_in = float(bbox.width * fig_w_in)
    height_in = float(bbox.height * fig_h_in)
    if unit is Unit.INCHES:
        return (width_in, height_in)
    if unit is Unit.CENTIMETERS:
        return (width_in * CM_PER_INCH, height_in * CM_PER_INCH)
    if unit is Unit.POINTS:
        return (width_in * POINTS_PER_INCH, height_in * POINTS_PER_INCH)
    if unit is Unit.PIXELS:
        dpi = float(fig.dpi)
        return (width_in * dpi, height_in * dpi)
    char_w_pt, char_h_pt = character_size_pt()
    return (
        width_in * POINTS_PER_INCH / char_w_pt,
        height_in * POINTS_PER_INCH / char_h_pt,
    )


def normalize_buffer(buffer: float, unit: Unit | str, axis_size: float) -> float:
    """
    Buffer as a fraction of the axes extent. Identity for normalized units;
    otherwise buffer / axis_size. Raises DegenerateAxisError if axis_size <= 0.
    """
    unit = parse_unit(unit)
    if unit is Unit.NORMALIZED:
        return float(buffer)
    if not math.isfinite(axis_size) or axis_size <= 0:
        raise DegenerateAxisError(f"Axes extent is {axis_size!r} {unit.value}; cannot normalize buffer")
    return float(buffer) / float(axis_size)


def normalize_buffers(ax: Axes, options: LabelOptions) -> tuple[float, float]:
    """Return (hbuffer, vbuffer) in axes fractions; each uses its own unit."""
    hunit = parse_unit(options.hbufferunit)
    vunit = parse_unit(options.vbufferunit)
    width = axis_size_in_unit(ax, hunit)[0]
    height = axis_size_in_unit(ax, vunit)[1]
    hbuffer = normalize_buffer(options.hbuffer, hunit, width)
    vbuffer = normalize_buffer(options.vbuffer, vunit, height)
    logger.debug(
        "buffers %.4g %s, %.4g %s -> (%.4f, %.4f)",
        options.hbuffer, hunit.value, options.vbuffer, vunit.value, hbuffer, vbuffer,
    )
    return hbuffer, vbuffer
