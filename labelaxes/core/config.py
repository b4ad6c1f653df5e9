# labelaxes/core/config.py
"""
Central configuration for axes labeling.
All defaults and conversion constants live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Location -----
DEFAULT_LOCATION: str = "northeast"
"""Location used when label_axes is called without one."""

NUMERIC_LOCATION_ALIASES: dict[str, str] = {
    "1": "northeast",
    "2": "northwest",
    "3": "southwest",
    "4": "southeast",
    "-1": "northeastoutside",
}
"""Legacy legend-style numeric codes."""

# ----- Buffers -----
DEFAULT_HBUFFER: float = 1 / 50
"""Distance between the horizontally-aligned side of a label and its anchor edge."""

DEFAULT_VBUFFER: float = 1 / 50
"""Distance between the vertically-aligned side of a label and its anchor edge."""

DEFAULT_BUFFER_UNIT: str = "normalized"

# ----- Unit conversion -----
CM_PER_INCH: float = 2.54
POINTS_PER_INCH: float = 72.0

CHARACTER_SAMPLE: str = "x"
"""Character whose advance width defines one horizontal 'characters' unit."""

CHARACTER_LINE_SPACING: float = 1.2
"""Baseline-to-baseline distance as a multiple of font size (matplotlib Text default)."""

FONT_OVERSAMPLE: int = 10
"""Pillow loads fonts at font_size * FONT_OVERSAMPLE px so integer sizing does not skew metrics."""

# ----- Text properties -----
RESERVED_TEXT_PROPERTIES: frozenset[str] = frozenset({
    "x",
    "y",
    "s",
    "text",
    "position",
    "transform",
    "parent",
    "axes",
    "figure",
    "units",
    "ha",
    "horizontalalignment",
    "va",
    "verticalalignment",
})
"""Text properties set by label_axes itself; callers may not pass them."""

# ----- Placement check -----
CONTAINMENT_TOLERANCE: float = 1e-6
"""Tolerance (axes fraction) for label-box containment / disjointness."""

# ----- Determinism -----
SEED: int | None = None
"""Seed for 'random' placement; None for non-deterministic."""

# ----- Rendering -----
RENDER_WIDTH_PX: int = 800
RENDER_HEIGHT_PX: int = 600
RENDER_DPI: int = 100

GALLERY_NCOLS: int = 4
"""Columns in the all-locations gallery figure."""

GALLERY_FONT_SIZE_PT: float = 8.0

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Log level for the CLI and UI. Set env LOG_LEVEL=DEBUG to see every anchor."""
