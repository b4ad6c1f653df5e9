# labelaxes/core/render.py
"""
Matplotlib figures for the CLI, smoke run and UI: a labeled subplot grid and a
gallery with one axes per location.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.text import Text

from labelaxes.core.config import (
    DEFAULT_LOCATION,
    GALLERY_FONT_SIZE_PT,
    GALLERY_NCOLS,
    RENDER_DPI,
    RENDER_HEIGHT_PX,
    RENDER_WIDTH_PX,
)
from labelaxes.core.error_codes import InvalidOptionError
from labelaxes.core.placement import check_text_props, draw_labels, plan_labels
from labelaxes.core.types import LabelOptions, LabelRequest, Location


def _new_fig(
    nrows: int,
    ncols: int,
    width_px: int,
    height_px: int,
    dpi: int = RENDER_DPI,
) -> tuple[Figure, np.ndarray]:
    # Wide gaps between subplots leave room for outside labels
    fig = plt.figure(figsize=(width_px / dpi, height_px / dpi), dpi=dpi)
    axes = fig.subplots(
        nrows,
        ncols,
        squeeze=False,
        gridspec_kw={"wspace": 0.6, "hspace": 0.7, "left": 0.1, "right": 0.9, "top": 0.9, "bottom": 0.1},
    )
    return fig, axes


def _draw_sample(ax: plt.Axes, index: int) -> None:
    """Something to label: a phase-shifted sine."""
    x = np.linspace(0.0, 2.0 * np.pi, 100)
    ax.plot(x, np.sin(x + index * np.pi / 4), linewidth=1)
    ax.set_xlim(0.0, 2.0 * np.pi)
    ax.set_ylim(-1.2, 1.2)
    ax.tick_params(labelsize=6)


def build_labeled_grid(
    labels: list[Any],
    location: Location | str | int | float = DEFAULT_LOCATION,
    options: LabelOptions | None = None,
    nrows: int = 1,
    ncols: int | None = None,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    **text_props: Any,
) -> tuple[Figure, list[LabelRequest], list[Text]]:
    """Figure with nrows x ncols sample plots, each labeled at the same location."""
    if nrows < 1 or (ncols is not None and ncols < 1):
        raise InvalidOptionError(f"Grid needs at least one row and column, got {nrows} x {ncols}")
    check_text_props(text_props)
    opts = options if options is not None else LabelOptions()
    ncols = ncols if ncols is not None else max(1, -(-len(labels) // nrows))
    fig, axes = _new_fig(nrows, ncols, width_px, height_px)
    flat = list(axes.ravel())
    for i, ax in enumerate(flat):
        if i < len(labels):
            _draw_sample(ax, i)
        else:
            ax.axis("off")
    try:
        requests = plan_labels(flat[: len(labels)], labels, location, opts)
        texts = draw_labels(requests, check_placement=opts.check_placement, **text_props)
    except Exception:
        plt.close(fig)
        raise
    return fig, requests, texts


def build_gallery(
    options: LabelOptions | None = None,
    ncols: int = GALLERY_NCOLS,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int | None = None,
    **text_props: Any,
) -> tuple[Figure, list[LabelRequest], list[Text]]:
    """One axes per Location, each labeled with its own keyword."""
    check_text_props(text_props)
    text_props.setdefault("fontsize", GALLERY_FONT_SIZE_PT)
    opts = options if options is not None else LabelOptions()
    locations = list(Location)
    nrows = -(-len(locations) // ncols)
    height = height_px if height_px is not None else int(width_px * nrows / ncols)
    fig, axes = _new_fig(nrows, ncols, width_px, height)
    flat = list(axes.ravel())
    requests: list[LabelRequest] = []
    texts: list[Text] = []
    try:
        for i, ax in enumerate(flat):
            if i >= len(locations):
                ax.axis("off")
                continue
            _draw_sample(ax, i)
            # One call per location; label_axes shares a location across its batch
            reqs = plan_labels(ax, locations[i].value, locations[i], opts)
            texts.extend(draw_labels(reqs, check_placement=opts.check_placement, **text_props))
            requests.extend(reqs)
    except Exception:
        plt.close(fig)
        raise
    return fig, requests, texts


def save_figure(fig: Figure, output_path: str | Path, dpi: int = RENDER_DPI) -> None:
    """Write fig as PNG and close it. Outside labels are kept via a tight bbox."""
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*tight.*", category=UserWarning)
        fig.savefig(output_path, dpi=dpi, facecolor="white", bbox_inches="tight")
    plt.close(fig)
