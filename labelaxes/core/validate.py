# labelaxes/core/validate.py
"""
Check that a drawn label sits where its location promises: inside locations
must keep the label box within the axes box, outside locations must keep it clear
of the axes box. Return (ok, min_clearance) in axes fractions.
"""

from __future__ import annotations

from matplotlib.text import Text
from shapely.geometry import Point, box
from shapely.geometry.base import BaseGeometry

from labelaxes.core.config import CONTAINMENT_TOLERANCE
from labelaxes.core.types import Location

AXES_BOX = box(0.0, 0.0, 1.0, 1.0)


def label_box_axes(text: Text) -> BaseGeometry:
    """Rendered extent of text as a shapely box in axes coordinates."""
    ax = text.axes
    extent = text.get_window_extent()
    (x0, y0), (x1, y1) = ax.transAxes.inverted().transform(extent.get_points())
    return box(min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))


def _min_distance_to_boundary(rect: BaseGeometry) -> float:
    """Minimum distance from rect corners to the axes boundary."""
    boundary = AXES_BOX.boundary
    return min(float(boundary.distance(Point(c))) for c in rect.exterior.coords)


def validate_label_placement(
    text: Text,
    location: Location,
    tolerance: float = CONTAINMENT_TOLERANCE,
) -> tuple[bool, float]:
    """
    True if the label box respects location (inside vs outside the axes box).
    Also returns min clearance from the label box to the axes boundary.
    """
    rect = label_box_axes(text)
    if location.is_inside:
        ok = AXES_BOX.buffer(tolerance).contains(rect)
        return ok, _min_distance_to_boundary(rect) if ok else 0.0
    overlap = rect.intersection(AXES_BOX).area
    ok = overlap <= tolerance
    return ok, float(rect.distance(AXES_BOX)) if ok else 0.0
