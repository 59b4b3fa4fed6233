"""
Command line interface.

    monotri triangulate polygon.poly -o polygon.tri
    monotri generate star 100 -o polygons/star_100.poly
    monotri check polygon.poly
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from . import polylines
from .errors import TriangulationError
from .points import Point
from .polyio import format_poly, format_tri, read_poly, write_poly, write_tri
from .triangulate import triangulate_polygon
from .validate import validate

logger = logging.getLogger(__name__)

# Deterministic rotation that keeps generated vertices off shared x / y values.
DEFAULT_ROTATION = 0.123456789

GENERATORS: Dict[str, Callable[[int, int], List[Point]]] = {
    "regular": lambda n, seed: polylines.make_regular_polyline(100.0, n),
    "star": lambda n, seed: polylines.star_polygon(max(3, n // 2), 100.0, 30.0),
    "random": lambda n, seed: polylines.random_polygon(n, seed=seed),
    "comb": lambda n, seed: polylines.comb_polygon(max(1, n)),
    "lshape": lambda n, seed: polylines.l_shape(),
}


def cmd_triangulate(args: argparse.Namespace) -> int:
    pts = read_poly(args.input)
    start = time.perf_counter()
    indices = triangulate_polygon(pts, axis=args.axis)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("triangulated %s: n=%d, triangles=%d, time_ms=%.3f",
                args.input, len(pts), len(indices) // 3, elapsed_ms)

    if args.output is None:
        sys.stdout.write(format_tri(pts, indices))
    else:
        write_tri(pts, indices, args.output)
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    pts = GENERATORS[args.kind](args.n, args.seed)
    if args.rotate:
        pts = polylines.rotate_points(pts, args.rotate)
    if args.clockwise:
        pts.reverse()

    if args.output is None:
        sys.stdout.write(format_poly(pts))
    else:
        write_poly(pts, args.output)
        logger.info("wrote %d vertices to %s", len(pts), args.output)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    pts = read_poly(args.input)
    indices = triangulate_polygon(pts, axis=args.axis)
    ok, msg = validate(pts, indices)
    status = "PASS" if ok else f"FAIL: {msg}"
    print(f"{args.input}: n={len(pts)}, triangles={len(indices) // 3} - {status}")
    return 0 if ok else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="monotri", description="Simple polygon triangulation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("triangulate", help="Triangulate a .poly file into a .tri file")
    p.add_argument("input", type=Path)
    p.add_argument("-o", "--output", type=Path, default=None, help="Output .tri path (default: stdout)")
    p.add_argument("--axis", type=int, choices=(0, 1), default=0, help="Sweep axis: 0 = x, 1 = y")
    p.set_defaults(func=cmd_triangulate)

    p = sub.add_parser("generate", help="Generate a test polygon")
    p.add_argument("kind", choices=sorted(GENERATORS))
    p.add_argument("n", type=int, nargs="?", default=12, help="Vertex count (teeth for comb)")
    p.add_argument("-o", "--output", type=Path, default=None, help="Output .poly path (default: stdout)")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--rotate", type=float, default=DEFAULT_ROTATION,
                   help=f"Rotation in radians (default: {DEFAULT_ROTATION}, 0 to disable)")
    p.add_argument("--clockwise", action="store_true", help="Emit the polygon in clockwise order")
    p.set_defaults(func=cmd_generate)

    p = sub.add_parser("check", help="Triangulate a .poly file and validate the result")
    p.add_argument("input", type=Path)
    p.add_argument("--axis", type=int, choices=(0, 1), default=0)
    p.set_defaults(func=cmd_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return args.func(args)
    except (TriangulationError, OSError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
