# labelaxes/core/text_metrics.py
"""
Size of one 'characters' unit in pt, measured with Pillow on the font matplotlib
would use. Width = advance of CHARACTER_SAMPLE; height = baseline-to-baseline distance.
"""

from __future__ import annotations

import warnings

from labelaxes.core.config import CHARACTER_LINE_SPACING, CHARACTER_SAMPLE, FONT_OVERSAMPLE

_font_warning_emitted: set[str] = set()


def _load_font(font_path: str, size_px: int):
    """Load PIL ImageFont; fallback with warning if the file cannot be read."""
    global _font_warning_emitted
    from PIL import ImageFont

    try:
        return ImageFont.truetype(font_path, size=size_px)
    except (OSError, IOError):
        pass
    if font_path not in _font_warning_emitted:
        _font_warning_emitted.add(font_path)
        warnings.warn(f"Font not readable: {font_path!r}; using default.", UserWarning)
    return ImageFont.load_default()


def _default_font_path(family: str | list[str] | None, font_size_pt: float) -> str:
    from matplotlib import font_manager

    props = font_manager.FontProperties(family=family, size=font_size_pt)
    return font_manager.findfont(props)


def character_size_pt(
    font_size_pt: float | None = None,
    family: str | list[str] | None = None,
) -> tuple[float, float]:
    """
    Return (width_pt, height_pt) of one character cell.
    Defaults to matplotlib's rcParams font.size / font.family.
    """
    import matplotlib as mpl

    size_pt = float(font_size_pt if font_size_pt is not None else mpl.rcParams["font.size"])
    font_path = _default_font_path(family, size_pt)
    size_px = max(1, int(round(size_pt * FONT_OVERSAMPLE)))
    font = _load_font(font_path, size_px)
    # At 72 DPI, 1 pt = 1 px; font was loaded oversampled, so scale back.
    try:
        size_used = float(getattr(font, "size", size_px))
    except (TypeError, ValueError):
        size_used = float(size_px)
    scale = size_pt / max(1.0, size_used)
    width = float(font.getlength(CHARACTER_SAMPLE)) * scale
    height = size_pt * CHARACTER_LINE_SPACING
    return (width, height)
