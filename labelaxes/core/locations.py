# labelaxes/core/locations.py
"""
Location keywords -> Anchor: parse user input into a Location, then look up
position and alignment in a static table. Buffers are already axes fractions here.
"""

from __future__ import annotations

import logging
import numbers
from typing import Callable

import numpy as np

from labelaxes.core.config import NUMERIC_LOCATION_ALIASES
from labelaxes.core.error_codes import InvalidLocationError
from labelaxes.core.types import Anchor, HAlign, Location, VAlign

logger = logging.getLogger(__name__)

PositionFn = Callable[[float, float], tuple[float, float]]

# (x, y) as a function of (hbuffer, vbuffer), horizontal alignment, vertical alignment
_ANCHOR_TABLE: dict[Location, tuple[PositionFn, HAlign, VAlign]] = {
    Location.NORTH: (lambda h, v: (0.5, 1.0 - v), "center", "top"),
    Location.SOUTH: (lambda h, v: (0.5, v), "center", "bottom"),
    Location.EAST: (lambda h, v: (1.0 - h, 0.5), "right", "middle"),
    Location.WEST: (lambda h, v: (h, 0.5), "left", "middle"),
    Location.CENTER: (lambda h, v: (0.5, 0.5), "center", "middle"),
    Location.NORTHEAST: (lambda h, v: (1.0 - h, 1.0 - v), "right", "top"),
    Location.NORTHWEST: (lambda h, v: (h, 1.0 - v), "left", "top"),
    Location.SOUTHEAST: (lambda h, v: (1.0 - h, v), "right", "bottom"),
    Location.SOUTHWEST: (lambda h, v: (h, v), "left", "bottom"),
    Location.NORTHOUTSIDE: (lambda h, v: (0.5, 1.0 + v), "center", "bottom"),
    Location.SOUTHOUTSIDE: (lambda h, v: (0.5, -v), "center", "top"),
    Location.EASTOUTSIDE: (lambda h, v: (1.0 + h, 0.5), "left", "middle"),
    Location.WESTOUTSIDE: (lambda h, v: (-h, 0.5), "right", "middle"),
    Location.NORTHEASTOUTSIDE: (lambda h, v: (1.0 + h, 1.0), "left", "top"),
    Location.NORTHWESTOUTSIDE: (lambda h, v: (-h, 1.0), "right", "top"),
    Location.SOUTHEASTOUTSIDE: (lambda h, v: (1.0 + h, 0.0), "left", "bottom"),
    Location.SOUTHWESTOUTSIDE: (lambda h, v: (-h, 0.0), "right", "bottom"),
    Location.NORTHEASTOUTSIDEABOVE: (lambda h, v: (1.0, 1.0 + v), "right", "bottom"),
    Location.NORTHWESTOUTSIDEABOVE: (lambda h, v: (0.0, 1.0 + v), "left", "bottom"),
    Location.SOUTHEASTOUTSIDEBELOW: (lambda h, v: (1.0, -v), "right", "top"),
    Location.SOUTHWESTOUTSIDEBELOW: (lambda h, v: (0.0, -v), "left", "top"),
}


def parse_location(value: Location | str | int | float) -> Location:
    """
    Normalize a keyword (any case, surrounding whitespace ignored) or a legacy
    numeric code (1, 2, 3, 4, -1) to a Location. Raises InvalidLocationError.
    """
    if isinstance(value, Location):
        return value
    if isinstance(value, bool):
        raise InvalidLocationError(f"Location not recognized: {value!r}")
    if isinstance(value, numbers.Real):
        if not float(value).is_integer():
            raise InvalidLocationError(f"Location not recognized: {value!r}")
        key = str(int(value))
    elif isinstance(value, str):
        key = value.strip().lower()
    else:
        raise InvalidLocationError(f"Location must be a keyword or numeric code, got {type(value).__name__}")
    key = NUMERIC_LOCATION_ALIASES.get(key, key)
    try:
        return Location(key)
    except ValueError:
        raise InvalidLocationError(f"Location not recognized: {value!r}") from None


def resolve(
    location: Location | str | int | float,
    hbuffer: float,
    vbuffer: float,
    rng: np.random.Generator | int | None = None,
) -> Anchor:
    """
    Return the Anchor for a location given normalized buffers.
    'random' draws x then y from rng (Generator, seed, or None for fresh entropy);
    every other location ignores rng.
    """
    loc = parse_location(location)
    if loc is Location.RANDOM:
        gen = np.random.default_rng(rng)
        x, y = (float(u) for u in gen.random(2))
        anchor = Anchor(location=loc, x=x, y=y, halign="center", valign="middle")
    else:
        position, halign, valign = _ANCHOR_TABLE[loc]
        x, y = position(float(hbuffer), float(vbuffer))
        anchor = Anchor(location=loc, x=x, y=y, halign=halign, valign=valign)
    logger.debug("anchor %s -> (%.4f, %.4f) %s/%s", loc.value, anchor.x, anchor.y, anchor.halign, anchor.valign)
    return anchor
