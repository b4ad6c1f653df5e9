# labelaxes/core/placement.py
"""
Label one or more axes at a named location.
All inputs are validated and planned before the first Text is created.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Sequence
from typing import Any

import numpy as np
from matplotlib.axes import Axes
from matplotlib.text import Text

from labelaxes.core.config import DEFAULT_LOCATION, RESERVED_TEXT_PROPERTIES
from labelaxes.core.error_codes import InvalidLabelTypeError, InvalidOptionError, ShapeMismatchError
from labelaxes.core.locations import parse_location, resolve
from labelaxes.core.types import Anchor, LabelOptions, LabelRequest, Location
from labelaxes.core.units import check_buffer, normalize_buffers, parse_unit
from labelaxes.core.validate import validate_label_placement

logger = logging.getLogger(__name__)

_MPL_VALIGN = {"top": "top", "middle": "center", "bottom": "bottom"}


def _as_axes_list(axes: Axes | Sequence[Axes] | np.ndarray) -> list[Axes]:
    """Flatten a single Axes, a sequence, or an ndarray of Axes (C order)."""
    if isinstance(axes, Axes):
        return [axes]
    if isinstance(axes, np.ndarray):
        items = list(axes.ravel())
    elif isinstance(axes, Sequence) and not isinstance(axes, str):
        items = list(axes)
    else:
        raise ShapeMismatchError(f"axes must be an Axes or a sequence of Axes, got {type(axes).__name__}")
    for i, ax in enumerate(items):
        if not isinstance(ax, Axes):
            raise ShapeMismatchError(f"axes[{i}] is not a matplotlib Axes: {type(ax).__name__}")
    return items


def _label_text(label: Any, index: int) -> str:
    """One label: str, or a sequence of str joined as lines."""
    if isinstance(label, str):
        return label
    if isinstance(label, (Sequence, np.ndarray)) and not isinstance(label, (bytes, bytearray)):
        lines = list(label)
        if all(isinstance(line, str) for line in lines):
            return "\n".join(lines)
    raise InvalidLabelTypeError(
        f"labels[{index}] must be text or a sequence of text lines, got {type(label).__name__}"
    )


def _as_label_list(labels: Any) -> list[str]:
    if isinstance(labels, str):
        return [labels]
    if isinstance(labels, np.ndarray):
        labels = list(labels.ravel())
    if not isinstance(labels, Sequence):
        raise InvalidLabelTypeError(f"labels must be text or a sequence of labels, got {type(labels).__name__}")
    return [_label_text(label, i) for i, label in enumerate(labels)]


def check_text_props(text_props: dict[str, Any]) -> None:
    """Reject text properties that label_axes owns (position, transform, alignment)."""
    reserved = sorted(k for k in text_props if k.lower() in RESERVED_TEXT_PROPERTIES)
    if reserved:
        raise InvalidOptionError(f"Text properties set by label_axes cannot be passed: {', '.join(reserved)}")


def _check_seed(seed: int | None) -> int | None:
    """None or a non-negative int; anything else raises InvalidOptionError."""
    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral) or seed < 0:
        raise InvalidOptionError(f"seed must be None or a non-negative integer, got {seed!r}")
    return int(seed)


def _checked_options(options: LabelOptions | None) -> LabelOptions:
    """Options with units parsed to Unit and buffers checked."""
    opts = options if options is not None else LabelOptions()
    return LabelOptions(
        hbuffer=check_buffer(opts.hbuffer, "hbuffer"),
        hbufferunit=parse_unit(opts.hbufferunit),
        vbuffer=check_buffer(opts.vbuffer, "vbuffer"),
        vbufferunit=parse_unit(opts.vbufferunit),
        seed=_check_seed(opts.seed),
        check_placement=opts.check_placement,
    )


def plan_labels(
    axes: Axes | Sequence[Axes] | np.ndarray,
    labels: Any,
    location: Location | str | int | float = DEFAULT_LOCATION,
    options: LabelOptions | None = None,
) -> list[LabelRequest]:
    """
    Validate inputs and compute one LabelRequest per axes, in input order.
    Creates nothing. Raises on the first bad input (see error_codes).
    """
    opts = _checked_options(options)
    loc = parse_location(location)
    axes_list = _as_axes_list(axes)
    texts = _as_label_list(labels)
    if not axes_list:
        raise ShapeMismatchError("No axes given")
    if len(texts) != len(axes_list):
        raise ShapeMismatchError(f"Got {len(axes_list)} axes but {len(texts)} labels")

    rng = np.random.default_rng(opts.seed)
    requests: list[LabelRequest] = []
    for ax, s in zip(axes_list, texts):
        hbuffer, vbuffer = normalize_buffers(ax, opts)
        anchor = resolve(loc, hbuffer, vbuffer, rng=rng)
        requests.append(LabelRequest(axes=ax, text=s, anchor=anchor, hbuffer=hbuffer, vbuffer=vbuffer))
    return requests


def apply_anchor(text: Text, anchor: Anchor) -> None:
    """Move text to anchor (axes coordinates) and set its alignment."""
    text.set_transform(text.axes.transAxes)
    text.set_position((anchor.x, anchor.y))
    text.set_horizontalalignment(anchor.halign)
    text.set_verticalalignment(_MPL_VALIGN[anchor.valign])


def draw_labels(
    requests: Sequence[LabelRequest],
    check_placement: bool = False,
    **text_props: Any,
) -> list[Text]:
    """
    Create one Text per request, forwarding text_props to Axes.text.
    If creation fails part way, texts already created are removed before re-raising.
    """
    created: list[Text] = []
    try:
        for req in requests:
            ax = req.axes
            text = ax.text(0.0, 0.0, req.text, transform=ax.transAxes, **text_props)
            created.append(text)
            apply_anchor(text, req.anchor)
    except Exception:
        for text in created:
            text.remove()
        raise

    if check_placement:
        for req, text in zip(requests, created):
            ok, clearance = validate_label_placement(text, req.anchor.location)
            if not ok:
                logger.warning(
                    "Label %r does not fit its location %s (clearance %.4f)",
                    req.text, req.anchor.location.value, clearance,
                )
    return created


def label_axes(
    axes: Axes | Sequence[Axes] | np.ndarray,
    labels: Any,
    location: Location | str | int | float = DEFAULT_LOCATION,
    options: LabelOptions | None = None,
    **text_props: Any,
) -> list[Text]:
    """
    Place labels[i] on axes[i] at location; return the created Text objects in order.

    labels: one str (single axes) or a sequence whose items are str or
    sequences of str (multiline). location: keyword such as 'NorthWestOutside'
    or a legacy code 1, 2, 3, 4, -1. options: buffers, buffer units, seed.
    text_props: any matplotlib Text property except position, transform and alignment.
    """
    check_text_props(text_props)
    opts = options if options is not None else LabelOptions()
    requests = plan_labels(axes, labels, location, opts)
    texts = draw_labels(requests, check_placement=opts.check_placement, **text_props)
    logger.debug("Placed %d label(s) at %s", len(texts), requests[0].anchor.location.value)
    return texts
