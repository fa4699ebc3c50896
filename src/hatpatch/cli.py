"""hatpatch command-line interface."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .models import Tile, Variant
from .patch import Patch, add_tile
from .seams import snap_tolerance
from .shapes import EDGE_INDICES, EDGE_TABLES, EDGE_VERTICES, build_tile


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="hatpatch CLI")
    parser.add_argument("--verbose", "-v", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    describe = sub.add_parser("describe", help="Print the edge table of a variant")
    describe.add_argument("--variant", default="U", help="U or R")

    place = sub.add_parser("place", help="Place tiles in order and report the patch")
    place.add_argument(
        "--tile", dest="tiles", action="append", required=True,
        help="VARIANT,X,Y,ANGLE in world units, e.g. U,1.6,0.05,0",
    )
    place.add_argument("--scale", type=float, default=25.0,
                       help="Zoom scale used for the snap tolerance")
    place.add_argument("--render-out", dest="render_path")
    place.add_argument("--boundary", action="store_true",
                       help="Mark boundary edge centers in the render")
    place.add_argument("--ammann", action="store_true",
                       help="Draw Ammann bars in the render")
    place.add_argument("--report-json", dest="report_json")

    return parser


def parse_tile_spec(text: str) -> Tile:
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 4:
        raise ValueError(f"Tile spec {text!r} must be VARIANT,X,Y,ANGLE")
    variant, x, y, angle = parts
    return build_tile(Variant.parse(variant), float(x), float(y), int(angle))


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.command == "describe":
            _cmd_describe(args)
        elif args.command == "place":
            _cmd_place(args)
    except ValueError as exc:
        print(exc)
        raise SystemExit(1)


def _cmd_describe(args) -> None:
    variant = Variant.parse(args.variant)
    print(f"{variant.name} edges:")
    for i in EDGE_INDICES:
        angle, length = EDGE_TABLES[variant][i]
        a, b = EDGE_VERTICES[i]
        print(f"  {i:2d}: v{a:<2d} -> v{b:<2d} angle {angle:3d} {length.value}")


def _cmd_place(args) -> None:
    from .diagnostics import patch_report, report_lines

    tiles: List[Tile] = [parse_tile_spec(spec) for spec in args.tiles]
    tolerance = snap_tolerance(args.scale)
    patch = Patch()
    for tile in tiles:
        placed = add_tile(patch, tile, tolerance)
        print(f"placed {placed.variant.value} at ({placed.x:.4f}, {placed.y:.4f}) "
              f"angle {placed.angle}")

    for line in report_lines(patch):
        print(line)

    if args.report_json:
        report = patch_report(patch)
        Path(args.report_json).write_text(json.dumps(report, indent=2), encoding="utf-8")
        print(f"Saved {args.report_json}")

    if args.render_path:
        from .render import render_png
        render_png(patch, args.render_path,
                   show_boundary=args.boundary, show_ammann=args.ammann)
        print(f"Saved {args.render_path}")


if __name__ == "__main__":
    main()
