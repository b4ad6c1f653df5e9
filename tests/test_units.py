# tests/test_units.py
"""
Unit parsing, axes size per unit on a figure of known size, and buffer normalization.
"""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from labelaxes.core.error_codes import DegenerateAxisError, InvalidOptionError, InvalidUnitError
from labelaxes.core.text_metrics import character_size_pt
from labelaxes.core.types import LabelOptions, Unit
from labelaxes.core.units import (
    axis_size_in_unit,
    check_buffer,
    normalize_buffer,
    normalize_buffers,
    parse_unit,
)


@pytest.fixture
def ax():
    # 4 x 3 in figure at 100 dpi; axes is 2 in wide and 1.5 in tall
    fig = plt.figure(figsize=(4, 3), dpi=100)
    axes = fig.add_axes([0.25, 0.25, 0.5, 0.5])
    yield axes
    plt.close(fig)


@pytest.mark.parametrize(
    "text,unit",
    [
        ("normalized", Unit.NORMALIZED),
        ("norm", Unit.NORMALIZED),
        ("IN", Unit.INCHES),
        (" Pixels ", Unit.PIXELS),
        ("cent", Unit.CENTIMETERS),
        ("char", Unit.CHARACTERS),
        ("po", Unit.POINTS),
        ("pi", Unit.PIXELS),
        (Unit.POINTS, Unit.POINTS),
    ],
)
def test_parse_unit(text, unit: Unit) -> None:
    assert parse_unit(text) is unit


@pytest.mark.parametrize("bad", ["p", "", "  ", "furlongs", "inchesx", 3, None])
def test_parse_unit_invalid(bad) -> None:
    with pytest.raises(InvalidUnitError):
        parse_unit(bad)


@pytest.mark.parametrize("b", [0.0, 0.02, 0.3, -0.1, 5.0])
@pytest.mark.parametrize("size", [0.0, -1.0, 2.0, 1000.0])
def test_normalize_normalized_is_identity(b: float, size: float) -> None:
    assert normalize_buffer(b, "normalized", size) == b


@pytest.mark.parametrize("unit", ["inches", "centimeters", "characters", "points", "pixels"])
def test_normalize_divides_by_axis_size(unit: str) -> None:
    assert normalize_buffer(0.3, unit, 2.0) == pytest.approx(0.15)
    assert normalize_buffer(10.0, unit, 400.0) == pytest.approx(0.025)


@pytest.mark.parametrize("size", [0.0, -2.0, float("nan")])
def test_normalize_degenerate_axis(size: float) -> None:
    with pytest.raises(DegenerateAxisError):
        normalize_buffer(0.3, "inches", size)


def test_axis_size_in_unit(ax) -> None:
    assert axis_size_in_unit(ax, "normalized") == (1.0, 1.0)
    assert axis_size_in_unit(ax, "inches") == pytest.approx((2.0, 1.5))
    assert axis_size_in_unit(ax, "centimeters") == pytest.approx((5.08, 3.81))
    assert axis_size_in_unit(ax, "points") == pytest.approx((144.0, 108.0))
    assert axis_size_in_unit(ax, "pixels") == pytest.approx((200.0, 150.0))


def test_axis_size_in_characters(ax) -> None:
    char_w, char_h = character_size_pt()
    w, h = axis_size_in_unit(ax, "characters")
    assert w == pytest.approx(144.0 / char_w)
    assert h == pytest.approx(108.0 / char_h)


def test_axis_size_does_not_modify_axes(ax) -> None:
    before = ax.get_position().bounds
    axis_size_in_unit(ax, "centimeters")
    assert ax.get_position().bounds == before


def test_normalize_buffers_mixed_units(ax) -> None:
    opts = LabelOptions(hbuffer=0.3, hbufferunit="inches", vbuffer=0.05, vbufferunit="normalized")
    h, v = normalize_buffers(ax, opts)
    assert h == pytest.approx(0.15)
    assert v == pytest.approx(0.05)
    opts = LabelOptions(hbuffer=0.02, hbufferunit="norm", vbuffer=15.0, vbufferunit="pixels")
    h, v = normalize_buffers(ax, opts)
    assert h == pytest.approx(0.02)
    assert v == pytest.approx(0.1)


@pytest.mark.parametrize("bad", ["0.1", None, float("inf"), True])
def test_check_buffer_rejects_non_numbers(bad) -> None:
    with pytest.raises(InvalidOptionError):
        check_buffer(bad, "hbuffer")
