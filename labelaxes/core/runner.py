# labelaxes/core/runner.py
"""
CLI entrypoint: label a grid of sample plots (or the all-locations gallery),
render labels.png and export labels.json / run_metadata.json.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from labelaxes.core.config import (
    DEFAULT_BUFFER_UNIT,
    DEFAULT_HBUFFER,
    DEFAULT_LOCATION,
    DEFAULT_VBUFFER,
    LOG_LEVEL,
    REPORTS_DIR,
    SEED,
)
from labelaxes.core.error_codes import LabelAxesError, user_message
from labelaxes.core.render import build_gallery, build_labeled_grid, save_figure
from labelaxes.core.reporting import (
    ensure_report_dir,
    labels_to_dict,
    write_labels_json,
    write_run_metadata_json,
)
from labelaxes.core.types import LabelOptions

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Place text labels at named locations on plot axes.")
    p.add_argument("--labels", type=str, default="A),B),C)", help="Comma-separated labels; '|' splits lines")
    p.add_argument("--location", type=str, default=DEFAULT_LOCATION, help="e.g. NorthWest, SouthEastOutside, 1")
    p.add_argument("--hbuffer", type=float, default=DEFAULT_HBUFFER, help="Horizontal buffer")
    p.add_argument("--hbufferunit", type=str, default=DEFAULT_BUFFER_UNIT, help="Horizontal buffer unit")
    p.add_argument("--vbuffer", type=float, default=DEFAULT_VBUFFER, help="Vertical buffer")
    p.add_argument("--vbufferunit", type=str, default=DEFAULT_BUFFER_UNIT, help="Vertical buffer unit")
    p.add_argument("--seed", type=int, default=SEED, help="Seed for random placement")
    p.add_argument("--nrows", type=int, default=1, help="Rows of sample plots")
    p.add_argument("--ncols", type=int, default=None, help="Columns of sample plots (default: fit labels)")
    p.add_argument("--fontsize", type=float, default=None, help="Label font size (pt)")
    p.add_argument("--fontweight", type=str, default=None, help="Label font weight, e.g. bold")
    p.add_argument("--gallery", action="store_true", help="Render every location instead of --labels")
    p.add_argument("--check", action="store_true", help="Warn when a label does not fit its location")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    return p.parse_args(argv)


def parse_labels(text: str) -> list[str | list[str]]:
    """'A),B)' -> ['A)', 'B)']; 'top|bottom' inside one label becomes a multiline label."""
    out: list[str | list[str]] = []
    for part in (text or "").split(","):
        part = part.strip()
        if not part:
            continue
        out.append(part.split("|") if "|" in part else part)
    return out


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    options = LabelOptions(
        hbuffer=args.hbuffer,
        hbufferunit=args.hbufferunit,
        vbuffer=args.vbuffer,
        vbufferunit=args.vbufferunit,
        seed=args.seed,
        check_placement=args.check,
    )
    text_props = {}
    if args.fontsize is not None:
        text_props["fontsize"] = args.fontsize
    if args.fontweight is not None:
        text_props["fontweight"] = args.fontweight

    try:
        if args.gallery:
            location = "gallery"
            fig, requests, texts = build_gallery(options, **text_props)
        else:
            location = args.location
            labels = parse_labels(args.labels)
            fig, requests, texts = build_labeled_grid(
                labels,
                location,
                options,
                nrows=args.nrows,
                ncols=args.ncols,
                **text_props,
            )
    except LabelAxesError as e:
        logger.error("%s (%s)", user_message(e.code), e)
        raise SystemExit(2) from e

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    labels_path = write_labels_json(report_dir, labels_to_dict(requests, options, location, texts))
    metadata_path = write_run_metadata_json(
        report_dir,
        args.run_name,
        location,
        [r.text for r in requests],
        options,
    )
    png_path = report_dir / "labels.png"
    save_figure(fig, png_path)

    for p in (png_path, labels_path, metadata_path):
        print(p)


if __name__ == "__main__":
    main()
