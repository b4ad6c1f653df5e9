"""Place text labels at named locations in or around matplotlib axes."""

from labelaxes.core.error_codes import (
    DegenerateAxisError,
    InvalidLabelTypeError,
    InvalidLocationError,
    InvalidOptionError,
    InvalidUnitError,
    LabelAxesError,
    ShapeMismatchError,
)
from labelaxes.core.locations import parse_location, resolve
from labelaxes.core.placement import label_axes
from labelaxes.core.types import Anchor, LabelOptions, Location, Unit
from labelaxes.core.units import normalize_buffer

__all__ = [
    "Anchor",
    "DegenerateAxisError",
    "InvalidLabelTypeError",
    "InvalidLocationError",
    "InvalidOptionError",
    "InvalidUnitError",
    "LabelAxesError",
    "LabelOptions",
    "Location",
    "ShapeMismatchError",
    "Unit",
    "label_axes",
    "normalize_buffer",
    "parse_location",
    "resolve",
]
