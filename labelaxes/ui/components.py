"""
Shared UI blocks for the preview app: option parsing, anchor table, figure and downloads.
"""

from __future__ import annotations

import io
import json

import streamlit as st
from matplotlib.figure import Figure

from labelaxes.core.config import RENDER_DPI
from labelaxes.core.types import LabelOptions, LabelRequest


def options_from_inputs(
    hbuffer: float,
    hbufferunit: str,
    vbuffer: float,
    vbufferunit: str,
    seed_text: str,
    check_placement: bool = False,
) -> LabelOptions:
    """Build LabelOptions from sidebar values; empty or non-integer seed text means no seed."""
    seed_text = (seed_text or "").strip()
    try:
        seed = int(seed_text) if seed_text else None
    except ValueError:
        seed = None
    return LabelOptions(
        hbuffer=hbuffer,
        hbufferunit=hbufferunit,
        vbuffer=vbuffer,
        vbufferunit=vbufferunit,
        seed=seed,
        check_placement=check_placement,
    )


def anchor_rows(requests: list[LabelRequest]) -> list[dict]:
    """One table row per label."""
    return [
        {
            "label": r.text.replace("\n", " | "),
            "location": r.anchor.location.value,
            "x": round(r.anchor.x, 4),
            "y": round(r.anchor.y, 4),
            "halign": r.anchor.halign,
            "valign": r.anchor.valign,
        }
        for r in requests
    ]


def figure_png_bytes(fig: Figure, dpi: int = RENDER_DPI) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=dpi, facecolor="white", bbox_inches="tight")
    return buf.getvalue()


def render_figure_with_downloads(fig: Figure, labels_data: dict, key_prefix: str = "dl") -> None:
    """Figure, then PNG and JSON download buttons side by side."""
    png = figure_png_bytes(fig)
    st.image(png, width="stretch")
    left, right = st.columns(2)
    with left:
        st.download_button("Download labels.png", data=png, file_name="labels.png", mime="image/png", key=f"{key_prefix}_png")
    with right:
        st.download_button(
            "Download labels.json",
            data=json.dumps(labels_data, indent=2).encode("utf-8"),
            file_name="labels.json",
            mime="application/json",
            key=f"{key_prefix}_json",
        )


def render_anchor_table(requests: list[LabelRequest], labels_data: dict | None = None) -> None:
    rows = anchor_rows(requests)
    if labels_data is not None:
        for row, entry in zip(rows, labels_data.get("labels", [])):
            if "placement_ok" in entry:
                row["fits"] = entry["placement_ok"]
    st.dataframe(rows, width="stretch")
