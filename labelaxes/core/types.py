# labelaxes/core/types.py
"""
Enums and dataclasses for locations, units, anchors, options and label requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Literal

from labelaxes.core.config import DEFAULT_BUFFER_UNIT, DEFAULT_HBUFFER, DEFAULT_VBUFFER, SEED

if TYPE_CHECKING:
    from matplotlib.axes import Axes


HAlign = Literal["left", "center", "right"]
VAlign = Literal["top", "middle", "bottom"]


class Location(Enum):
    """Named label positions relative to the axes box."""
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    CENTER = "center"
    NORTHEAST = "northeast"
    NORTHWEST = "northwest"
    SOUTHEAST = "southeast"
    SOUTHWEST = "southwest"
    NORTHOUTSIDE = "northoutside"
    SOUTHOUTSIDE = "southoutside"
    EASTOUTSIDE = "eastoutside"
    WESTOUTSIDE = "westoutside"
    NORTHEASTOUTSIDE = "northeastoutside"
    NORTHWESTOUTSIDE = "northwestoutside"
    SOUTHEASTOUTSIDE = "southeastoutside"
    SOUTHWESTOUTSIDE = "southwestoutside"
    NORTHEASTOUTSIDEABOVE = "northeastoutsideabove"
    NORTHWESTOUTSIDEABOVE = "northwestoutsideabove"
    SOUTHEASTOUTSIDEBELOW = "southeastoutsidebelow"
    SOUTHWESTOUTSIDEBELOW = "southwestoutsidebelow"
    RANDOM = "random"

    @property
    def is_inside(self) -> bool:
        """True if the label is drawn within the axes box."""
        return "outside" not in self.value


class Unit(Enum):
    """Length units a buffer may be given in."""
    NORMALIZED = "normalized"
    INCHES = "inches"
    CENTIMETERS = "centimeters"
    CHARACTERS = "characters"
    POINTS = "points"
    PIXELS = "pixels"


@dataclass(frozen=True)
class Anchor:
    """Axes-fraction position and alignment of one label."""
    location: Location
    x: float
    y: float
    halign: HAlign
    valign: VAlign


@dataclass(frozen=True)
class LabelOptions:
    """
    Recognized labeling options. Units may be given as Unit or as a (prefix of a) unit name.
    Text style goes to label_axes as keyword arguments, not here.
    """
    hbuffer: float = DEFAULT_HBUFFER
    hbufferunit: Unit | str = DEFAULT_BUFFER_UNIT
    vbuffer: float = DEFAULT_VBUFFER
    vbufferunit: Unit | str = DEFAULT_BUFFER_UNIT
    seed: int | None = SEED
    check_placement: bool = False


@dataclass
class LabelRequest:
    """One planned label: target axes, text, resolved anchor and normalized buffers."""
    axes: Axes
    text: str
    anchor: Anchor
    hbuffer: float
    vbuffer: float
