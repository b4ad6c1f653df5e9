"""
Streamlit preview: sidebar (labels, location, buffers, seed, grid), tabs Preview / Gallery / Help.
Run from repo root: streamlit run labelaxes/ui/app.py
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

# Configure logging from env (e.g. LOG_LEVEL=DEBUG for development)
_log_level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, _log_level_name, logging.INFO))

# Ensure repo root is on path when Streamlit loads this file outside an install
_repo_root = Path(__file__).resolve().parent.parent.parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

import matplotlib.pyplot as plt
import streamlit as st

from labelaxes.core.config import DEFAULT_BUFFER_UNIT, DEFAULT_HBUFFER, DEFAULT_VBUFFER
from labelaxes.core.error_codes import LabelAxesError, user_message
from labelaxes.core.render import build_gallery, build_labeled_grid
from labelaxes.core.reporting import labels_to_dict
from labelaxes.core.runner import parse_labels
from labelaxes.core.types import Location, Unit
from labelaxes.ui import components as ui_components
from labelaxes.ui.help_text import (
    GLOSSARY_MD,
    TOOLTIP_BUFFER,
    TOOLTIP_CHECK,
    TOOLTIP_LABELS,
    TOOLTIP_LOCATION,
    TOOLTIP_SEED,
    TOOLTIP_UNIT,
)

logger = logging.getLogger(__name__)

_UNITS = [u.value for u in Unit]
_LOCATIONS = [loc.value for loc in Location]


def _sidebar() -> dict:
    st.sidebar.header("Labels")
    labels_text = st.sidebar.text_input("Labels", value="A),B),C),D)", help=TOOLTIP_LABELS)
    location = st.sidebar.selectbox(
        "Location", _LOCATIONS, index=_LOCATIONS.index("northwestoutside"), help=TOOLTIP_LOCATION
    )
    st.sidebar.header("Buffers")
    hbuffer = st.sidebar.number_input("hbuffer", value=DEFAULT_HBUFFER, step=0.01, format="%.3f", help=TOOLTIP_BUFFER)
    hbufferunit = st.sidebar.selectbox("hbuffer unit", _UNITS, index=_UNITS.index(DEFAULT_BUFFER_UNIT), help=TOOLTIP_UNIT)
    vbuffer = st.sidebar.number_input("vbuffer", value=DEFAULT_VBUFFER, step=0.01, format="%.3f", help=TOOLTIP_BUFFER)
    vbufferunit = st.sidebar.selectbox("vbuffer unit", _UNITS, index=_UNITS.index(DEFAULT_BUFFER_UNIT), help=TOOLTIP_UNIT)
    seed_text = st.sidebar.text_input("Seed", value="", help=TOOLTIP_SEED)
    st.sidebar.header("Layout")
    nrows = int(st.sidebar.number_input("Rows", min_value=1, max_value=6, value=2))
    fontsize = st.sidebar.slider("Font size (pt)", min_value=6, max_value=24, value=12)
    bold = st.sidebar.checkbox("Bold", value=True)
    check = st.sidebar.checkbox("Check placement", value=True, help=TOOLTIP_CHECK)
    options = ui_components.options_from_inputs(hbuffer, hbufferunit, vbuffer, vbufferunit, seed_text, check)
    text_props = {"fontsize": fontsize}
    if bold:
        text_props["fontweight"] = "bold"
    return {
        "labels": parse_labels(labels_text),
        "location": location,
        "options": options,
        "nrows": nrows,
        "text_props": text_props,
    }


def _preview_tab(inputs: dict) -> None:
    if not inputs["labels"]:
        st.info("Enter at least one label.")
        return
    try:
        fig, requests, texts = build_labeled_grid(
            inputs["labels"],
            inputs["location"],
            inputs["options"],
            nrows=inputs["nrows"],
            **inputs["text_props"],
        )
    except LabelAxesError as e:
        logger.info("Preview failed: %s", e)
        st.error(user_message(e.code))
        return
    labels_data = labels_to_dict(requests, inputs["options"], inputs["location"], texts)
    ui_components.render_figure_with_downloads(fig, labels_data, key_prefix="preview")
    ui_components.render_anchor_table(requests, labels_data)
    plt.close(fig)


def _gallery_tab(inputs: dict) -> None:
    try:
        fig, requests, texts = build_gallery(inputs["options"])
    except LabelAxesError as e:
        st.error(user_message(e.code))
        return
    labels_data = labels_to_dict(requests, inputs["options"], "gallery", texts)
    ui_components.render_figure_with_downloads(fig, labels_data, key_prefix="gallery")
    plt.close(fig)


def main() -> None:
    st.set_page_config(page_title="labelaxes", layout="wide")
    st.title("labelaxes")
    inputs = _sidebar()
    preview, gallery, help_tab = st.tabs(["Preview", "Gallery", "Help"])
    with preview:
        _preview_tab(inputs)
    with gallery:
        _gallery_tab(inputs)
    with help_tab:
        st.markdown(GLOSSARY_MD)


main()
