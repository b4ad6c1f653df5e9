# labelaxes/core/smoke.py
"""
Single entrypoint to verify labeling end-to-end: every location rendered into
reports/smoke/ with default options. Does not run on import.
"""

from __future__ import annotations

from pathlib import Path

from labelaxes.core.render import build_gallery, save_figure
from labelaxes.core.reporting import (
    ensure_report_dir,
    labels_to_dict,
    write_labels_json,
    write_run_metadata_json,
)
from labelaxes.core.types import LabelOptions


def main(repo_root: Path | None = None) -> Path:
    """Render the gallery with default options and run_name='smoke'. Returns the report dir."""
    root = repo_root if repo_root is not None else Path.cwd().resolve()
    options = LabelOptions()
    fig, requests, texts = build_gallery(options)

    report_dir = ensure_report_dir(root, "smoke")
    write_labels_json(report_dir, labels_to_dict(requests, options, "gallery", texts))
    write_run_metadata_json(report_dir, "smoke", "gallery", [r.text for r in requests], options)
    save_figure(fig, report_dir / "labels.png")
    return report_dir


if __name__ == "__main__":
    main()
