"""
pathwalk command line: measure SVG path data.

Usage:
  pathwalk "M0 0 L3 0 L3 4 Z"                    # total length
  pathwalk "M0 0 Q50 100 100 0" --at 40          # point 40 units along
  pathwalk "M0 0 Q50 100 100 0" --at 40 --angle  # tangent angle there (degrees)
  pathwalk "M0 0 C0 50 100 50 100 0" --samples 5 # evenly spaced points
"""

from __future__ import annotations

import argparse
import logging
import sys

from pathwalk.config import settings
from pathwalk.svg.parser import PathDataError, parse_path_data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pathwalk", description="Arc-length measurement for SVG path data")
    parser.add_argument("d", help="SVG path data, e.g. 'M0 0 L10 0'")
    parser.add_argument("--at", type=float, metavar="DIST", help="Report the point DIST units along the path")
    parser.add_argument("--angle", action="store_true", help="With --at, report the tangent angle instead")
    parser.add_argument("--samples", type=int, metavar="N", help="Print N evenly spaced points")
    parser.add_argument(
        "--tolerance",
        type=float,
        default=settings.pathwalk_tolerance,
        help="Flatness tolerance in path units (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        path = parse_path_data(args.d)
    except PathDataError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.samples is not None:
        for x, y in path.sample_points(args.samples, args.tolerance):
            print(f"{x:.6f} {y:.6f}")
        return 0

    if args.at is None:
        print(f"{path.length(args.tolerance):.6f}")
        return 0

    if args.angle:
        angle, ok = path.normal_angle_at_length(args.at, args.tolerance)
        result = f"{angle:.6f}"
    else:
        (x, y), ok = path.point_at_length(args.at, args.tolerance)
        result = f"{x:.6f} {y:.6f}"

    if not ok:
        print(f"distance {args.at} is beyond the end of the path", file=sys.stderr)
        return 1
    print(result)
    return 0
