# labelaxes/core/reporting.py
"""
Create reports/<run_name>/ and write labels.json (exact schema), run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from matplotlib.text import Text

from labelaxes.core.config import (
    CONTAINMENT_TOLERANCE,
    DEFAULT_HBUFFER,
    DEFAULT_LOCATION,
    DEFAULT_VBUFFER,
    REPORTS_DIR,
    SEED,
)
from labelaxes.core.types import Anchor, LabelOptions, LabelRequest, Unit
from labelaxes.core.units import parse_unit
from labelaxes.core.validate import validate_label_placement

SCHEMA_VERSION = "1.0"


def _unit_name(unit: Unit | str) -> str:
    """Canonical unit name, so a prefix such as 'in' is reported as 'inches'."""
    return parse_unit(unit).value


def options_to_dict(options: LabelOptions) -> dict:
    return {
        "hbuffer": options.hbuffer,
        "hbufferunit": _unit_name(options.hbufferunit),
        "vbuffer": options.vbuffer,
        "vbufferunit": _unit_name(options.vbufferunit),
        "seed": options.seed,
    }


def anchor_to_dict(anchor: Anchor) -> dict:
    return {
        "location": anchor.location.value,
        "anchor": {"x": anchor.x, "y": anchor.y},
        "halign": anchor.halign,
        "valign": anchor.valign,
    }


def request_to_dict(request: LabelRequest, text: Text | None = None) -> dict:
    """One labels.json entry. With the drawn text, adds the placement check result."""
    out = {"text": request.text}
    out.update(anchor_to_dict(request.anchor))
    out["hbuffer_normalized"] = request.hbuffer
    out["vbuffer_normalized"] = request.vbuffer
    if text is not None:
        ok, clearance = validate_label_placement(text, request.anchor.location)
        out["placement_ok"] = ok
        out["min_clearance"] = clearance
    return out


def labels_to_dict(
    requests: list[LabelRequest],
    options: LabelOptions,
    location: str,
    texts: list[Text] | None = None,
) -> dict:
    """Exact structure for labels.json."""
    drawn = texts if texts is not None else [None] * len(requests)
    return {
        "schema_version": SCHEMA_VERSION,
        "input": {
            "location": location,
            "options": options_to_dict(options),
        },
        "labels": [request_to_dict(r, t) for r, t in zip(requests, drawn)],
    }


def run_metadata_dict(
    run_name: str,
    location: str,
    labels: list[str],
    options: LabelOptions,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "location": location,
        "labels": labels,
        "options": options_to_dict(options),
        "config": {
            "DEFAULT_LOCATION": DEFAULT_LOCATION,
            "DEFAULT_HBUFFER": DEFAULT_HBUFFER,
            "DEFAULT_VBUFFER": DEFAULT_VBUFFER,
            "CONTAINMENT_TOLERANCE": CONTAINMENT_TOLERANCE,
            "SEED": SEED,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_labels_json(report_dir: Path, data: dict) -> Path:
    """Write labels.json to report_dir. Returns path to file."""
    path = report_dir / "labels.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    location: str,
    labels: list[str],
    options: LabelOptions,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, location, labels, options)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
