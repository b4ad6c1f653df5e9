# tests/test_placement.py
"""
label_axes end-to-end on real matplotlib axes: anchors applied to Text objects,
input shapes, multiline labels, and no Text left behind when a batch fails.
"""

from __future__ import annotations

import logging

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from labelaxes.core.error_codes import (
    DegenerateAxisError,
    InvalidLabelTypeError,
    InvalidLocationError,
    InvalidOptionError,
    InvalidUnitError,
    ShapeMismatchError,
)
from labelaxes.core.placement import apply_anchor, label_axes, plan_labels
from labelaxes.core.locations import resolve
from labelaxes.core.types import LabelOptions, Location


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


def _two_inch_axes():
    fig = plt.figure(figsize=(4, 4), dpi=100)
    return fig.add_axes([0.25, 0.25, 0.5, 0.5])


def test_northwestoutside_with_inch_buffer() -> None:
    ax = _two_inch_axes()
    opts = LabelOptions(hbuffer=0.3, hbufferunit="inches")
    (text,) = label_axes(ax, "A)", "northwestoutside", opts)
    assert text.get_text() == "A)"
    assert text.axes is ax
    assert text.get_transform() is ax.transAxes
    x, y = text.get_position()
    assert x == pytest.approx(-0.15)
    assert y == pytest.approx(1.0)
    assert text.get_horizontalalignment() == "right"
    assert text.get_verticalalignment() == "top"


@pytest.mark.parametrize("hbuffer,vbuffer", [(0.0, 0.0), (0.2, 0.4), (1.0, 2.0)])
def test_center_is_independent_of_buffers(hbuffer: float, vbuffer: float) -> None:
    ax = _two_inch_axes()
    opts = LabelOptions(hbuffer=hbuffer, hbufferunit="inches", vbuffer=vbuffer)
    (text,) = label_axes(ax, "Center", "center", opts)
    assert text.get_position() == pytest.approx((0.5, 0.5))
    assert text.get_horizontalalignment() == "center"
    assert text.get_verticalalignment() == "center"


def test_default_location_is_northeast() -> None:
    ax = _two_inch_axes()
    (text,) = label_axes(ax, "x")
    assert text.get_position() == pytest.approx((0.98, 0.98))
    assert text.get_horizontalalignment() == "right"
    assert text.get_verticalalignment() == "top"


def test_middle_maps_to_matplotlib_center() -> None:
    ax = _two_inch_axes()
    (text,) = label_axes(ax, "E", "East")
    assert text.get_verticalalignment() == "center"
    assert text.get_horizontalalignment() == "right"


def test_subplot_array_in_c_order() -> None:
    fig, axs = plt.subplots(2, 2)
    texts = label_axes(axs, ["a", "b", "c", "d"], "south")
    assert [t.get_text() for t in texts] == ["a", "b", "c", "d"]
    assert texts[1].axes is axs[0, 1]
    assert texts[2].axes is axs[1, 0]
    for ax in axs.ravel():
        assert len(ax.texts) == 1


def test_multiline_label() -> None:
    fig, (ax1, ax2) = plt.subplots(1, 2)
    texts = label_axes([ax1, ax2], [["first", "second"], "single"], "north")
    assert texts[0].get_text() == "first\nsecond"
    assert texts[1].get_text() == "single"


def test_text_props_forwarded() -> None:
    ax = _two_inch_axes()
    (text,) = label_axes(ax, "B)", 2, fontsize=14, fontweight="bold", color="red")
    assert text.get_fontsize() == 14
    assert text.get_fontweight() == "bold"
    assert text.get_color() == "red"


@pytest.mark.parametrize("prop", ["ha", "verticalalignment", "transform", "position", "x", "Units", "parent"])
def test_reserved_text_props_rejected(prop: str) -> None:
    ax = _two_inch_axes()
    with pytest.raises(InvalidOptionError):
        label_axes(ax, "A", "north", **{prop: None})
    assert len(ax.texts) == 0


def test_shape_mismatch_creates_nothing() -> None:
    fig, axs = plt.subplots(1, 3)
    with pytest.raises(ShapeMismatchError):
        label_axes(list(axs), ["a", "b"], "north")
    assert all(len(ax.texts) == 0 for ax in axs)


@pytest.mark.parametrize("bad_axes,labels", [([], []), ([None], ["a"]), ("ax", ["a"]), (3, ["a"])])
def test_invalid_axes_rejected(bad_axes, labels) -> None:
    with pytest.raises(ShapeMismatchError):
        label_axes(bad_axes, labels, "north")


@pytest.mark.parametrize("bad_labels", [[3], [["a", 2]], 5, {"a": 1}, [b"raw"]])
def test_invalid_label_type(bad_labels) -> None:
    ax = _two_inch_axes()
    with pytest.raises(InvalidLabelTypeError):
        label_axes([ax], bad_labels, "north")
    assert len(ax.texts) == 0


def test_invalid_location_and_unit_create_nothing() -> None:
    ax = _two_inch_axes()
    with pytest.raises(InvalidLocationError):
        label_axes(ax, "A", "northnorth")
    with pytest.raises(InvalidUnitError):
        label_axes(ax, "A", "north", LabelOptions(vbufferunit="furlongs"))
    with pytest.raises(InvalidOptionError):
        label_axes(ax, "A", "north", LabelOptions(hbuffer="wide"))
    assert len(ax.texts) == 0


def test_degenerate_axis_aborts_whole_batch() -> None:
    fig = plt.figure(figsize=(4, 4), dpi=100)
    good = fig.add_axes([0.1, 0.1, 0.3, 0.3])
    flat = fig.add_axes([0.6, 0.6, 0.0, 0.3])
    with pytest.raises(DegenerateAxisError):
        label_axes([good, flat], ["ok", "flat"], "west", LabelOptions(hbuffer=0.1, hbufferunit="inches"))
    assert len(good.texts) == 0
    assert len(flat.texts) == 0


def test_host_error_leaves_no_text() -> None:
    fig, (ax1, ax2) = plt.subplots(1, 2)
    with pytest.raises(AttributeError):
        label_axes([ax1, ax2], ["a", "b"], "north", notaproperty=1)
    assert len(ax1.texts) == 0 and len(ax2.texts) == 0


def test_random_with_seed_is_reproducible() -> None:
    fig, axs = plt.subplots(1, 3)
    opts = LabelOptions(seed=11)
    first = [t.get_position() for t in label_axes(axs, ["a", "b", "c"], "random", opts)]
    second = [t.get_position() for t in label_axes(axs, ["a", "b", "c"], "random", opts)]
    assert first == second
    assert first[0] != first[1]


def test_plan_labels_creates_nothing() -> None:
    fig, axs = plt.subplots(1, 2)
    requests = plan_labels(axs, ["a", "b"], "southeast", LabelOptions(hbuffer=0.05, vbuffer=0.1))
    assert [r.text for r in requests] == ["a", "b"]
    assert requests[0].anchor.location is Location.SOUTHEAST
    assert requests[0].anchor.x == pytest.approx(0.95)
    assert requests[0].anchor.y == pytest.approx(0.1)
    assert all(len(ax.texts) == 0 for ax in axs)


def test_apply_anchor_moves_existing_text() -> None:
    ax = _two_inch_axes()
    text = ax.text(3.0, 4.0, "moved")
    apply_anchor(text, resolve("southwestoutsidebelow", 0.1, 0.1))
    assert text.get_transform() is ax.transAxes
    assert text.get_position() == pytest.approx((0.0, -0.1))
    assert text.get_horizontalalignment() == "left"
    assert text.get_verticalalignment() == "top"


def test_check_placement_logs_overflow(caplog) -> None:
    fig = plt.figure(figsize=(2, 2), dpi=100)
    ax = fig.add_axes([0.2, 0.2, 0.6, 0.6])
    with caplog.at_level(logging.WARNING, logger="labelaxes.core.placement"):
        label_axes(ax, "a label far too long for this axes", "center", LabelOptions(check_placement=True), fontsize=20)
    assert any("does not fit" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize("seed", ["abc", -1, 1.5, True])
def test_invalid_seed_rejected(seed) -> None:
    ax = _two_inch_axes()
    with pytest.raises(InvalidOptionError):
        label_axes(ax, "A", "random", LabelOptions(seed=seed))
    assert len(ax.texts) == 0


def test_numpy_integer_seed_accepted() -> None:
    ax = _two_inch_axes()
    (a,) = label_axes(ax, "A", "random", LabelOptions(seed=np.int64(4)))
    (b,) = label_axes(ax, "B", "random", LabelOptions(seed=4))
    assert a.get_position() == b.get_position()
