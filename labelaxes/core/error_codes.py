"""
Structured errors for label placement.
Every exception carries a stable error key; map keys to user-facing messages in the UI.
"""

from __future__ import annotations

# Known error keys
SHAPE_MISMATCH = "shape_mismatch"
INVALID_LABEL_TYPE = "invalid_label_type"
INVALID_LOCATION = "invalid_location"
INVALID_UNIT = "invalid_unit"
INVALID_OPTION = "invalid_option"
DEGENERATE_AXIS = "degenerate_axis"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    SHAPE_MISMATCH: "Give exactly one label per axes.",
    INVALID_LABEL_TYPE: "Each label must be text or a list of text lines.",
    INVALID_LOCATION: "Unknown location. Use a keyword such as 'NorthEast' or a code 1, 2, 3, 4, -1.",
    INVALID_UNIT: "Unknown buffer unit. Use normalized, inches, centimeters, characters, points or pixels.",
    INVALID_OPTION: "Invalid option. Buffers must be finite numbers; position and alignment are set automatically.",
    DEGENERATE_AXIS: "Axes has zero size in the buffer unit. Draw the axes before labeling or use normalized buffers.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)


class LabelAxesError(Exception):
    """Base class for all labeling errors."""
    code: str = ""


class ShapeMismatchError(LabelAxesError, ValueError):
    """Axes and labels differ in count, or an axes element is not an Axes."""
    code = SHAPE_MISMATCH


class InvalidLabelTypeError(LabelAxesError, TypeError):
    code = INVALID_LABEL_TYPE


class InvalidLocationError(LabelAxesError, ValueError):
    code = INVALID_LOCATION


class InvalidUnitError(LabelAxesError, ValueError):
    code = INVALID_UNIT


class InvalidOptionError(LabelAxesError, ValueError):
    """Non-numeric buffer or a reserved text property."""
    code = INVALID_OPTION


class DegenerateAxisError(LabelAxesError, ValueError):
    """Axes extent in the requested unit is not positive; normalization is undefined."""
    code = DEGENERATE_AXIS
