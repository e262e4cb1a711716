"""
CLI module to render one planform to PNG files using planform.synth.
Parameters come from an optional JSON file (same keys as resolve() accepts),
with a few command-line overrides for quick square / super-square / hex sets.
"""

from __future__ import annotations

import argparse
from pathlib import Path
import json
import cv2
from typing import Any, Dict, List, Optional

from .synth import make_planform, to_uint8

IMG_EXT = ".png"  # lossless


def save_images(out_dir: Path, images: Dict[str, Any], gray_scale: float, prefix: str = "planform") -> List[Path]:
    """Write each image as an 8-bit grayscale PNG named <prefix>_<name>.png."""
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for name, img in images.items():
        p = out_dir / f"{prefix}_{name}{IMG_EXT}"
        if not cv2.imwrite(str(p), to_uint8(img, gray_scale)):
            raise RuntimeError(f"Failed to write {p}")
        written.append(p)
    return written


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Render planform stimuli to PNG files.")
    ap.add_argument("--out-dir", type=str, required=True)
    ap.add_argument("--config-file", type=str, default=None, help="JSON file with planform parameters")
    ap.add_argument("--component-count", type=int, default=None, help="4 (square) or 6 (hexagonal)")
    ap.add_argument("--phase-offset", type=float, default=None, help="Second-pair phase in radians (pi = super-square)")
    ap.add_argument("--prefix", type=str, default="planform")
    args = ap.parse_args(argv)

    params: Dict[str, Any] = {}
    if args.config_file:
        with open(args.config_file, "r", encoding="utf-8") as f:
            params = json.load(f)
    if args.component_count is not None:
        params["component_count"] = args.component_count
    if args.phase_offset is not None:
        params["phase_offset"] = args.phase_offset

    pf = make_planform(params)
    out_dir = Path(args.out_dir)
    written = save_images(out_dir, pf.images, pf.gray_scale, prefix=args.prefix)

    print(f"[batch_job] component_count={pf.component_count} size={pf.image_size_px}px -> wrote {len(written)} images into {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
