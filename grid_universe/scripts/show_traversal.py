"""
Print the points of a line or rectangle perimeter traversal.

Usage:
    python scripts/show_traversal.py line 1 5 5 1
    python scripts/show_traversal.py rect 0 0 2 3 --coord u8
    python scripts/show_traversal.py corners 5 9 5 9 --array
"""

import argparse
import logging
import sys
from pathlib import Path

# Add grid_core / grid_iters to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from grid_core.coord import COORD_TYPES, resolve_coord
from grid_core.errors import GridTraversalError
from grid_core.log import setup_logger
from grid_iters import LineTraversal, PerimeterTraversal


def build_traversal(kind, values, coord):
    """Construct the traversal named by kind from four integers."""
    a, b, c, d = values
    if kind == "line":
        return LineTraversal((a, b), (c, d), coord)
    if kind == "rect":
        return PerimeterTraversal.with_dimensions((a, b), (c, d), coord)
    if kind == "corners":
        return PerimeterTraversal.with_corners((a, b), (c, d), coord)
    raise ValueError(f"Unknown traversal kind: {kind}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print grid traversal points")
    parser.add_argument(
        "kind",
        choices=["line", "rect", "corners"],
        help="line: x0 y0 x1 y1 | rect: left top width height | corners: left top right bottom",
    )
    parser.add_argument("values", type=int, nargs=4, help="Four integers (see kind)")
    parser.add_argument(
        "--coord",
        type=str,
        default="isize",
        choices=sorted(COORD_TYPES),
        help="Coordinate type (default: isize)",
    )
    parser.add_argument("--array", action="store_true", help="Print as a numpy array")
    parser.add_argument("--log-file", type=Path, default=None, help="Optional log file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logger("show_traversal", args.log_file, level)
    # Route traversal debug records through the same handlers
    for name in ("grid_iters.bresenham", "grid_iters.perimeter"):
        logging.getLogger(name).setLevel(level)
        logging.getLogger(name).handlers = logger.handlers

    coord = resolve_coord(args.coord)

    try:
        traversal = build_traversal(args.kind, args.values, coord)
    except GridTraversalError as e:
        logger.error(f"{args.kind} {args.values}: {e}")
        return 1

    if args.array:
        points = traversal.to_array()
        print(points)
        count = len(points)
    else:
        count = 0
        for point in traversal:
            print(f"{point[0]} {point[1]}")
            count += 1

    logger.info(f"{args.kind} {args.values} ({coord.name}): {count} points")
    return 0


if __name__ == "__main__":
    sys.exit(main())
