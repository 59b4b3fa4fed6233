"""
Plain-text polygon and triangulation files.

.poly:
    N
    x0 y0
    ...

.tri: a .poly block followed by
    M
    a0 b0 c0
    ...

Blank lines and lines starting with '#' are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence, TextIO, Tuple

from .errors import PolygonFormatError
from .points import Point

Triangle = Tuple[int, int, int]


def _content_lines(f: TextIO) -> List[str]:
    return [l.strip() for l in f if l.strip() and not l.strip().startswith("#")]


def _parse_points(lines: List[str], i: int) -> Tuple[List[Point], int]:
    try:
        n = int(lines[i])
        pts = []
        for line in lines[i + 1:i + 1 + n]:
            x, y = map(float, line.split())
            pts.append((x, y))
    except (IndexError, ValueError) as e:
        raise PolygonFormatError(f"Malformed point block: {e}") from e
    if len(pts) != n:
        raise PolygonFormatError(f"Expected {n} points, found {len(pts)}")
    return pts, i + 1 + n


def format_poly(points: Iterable[Sequence[float]]) -> str:
    pts = list(points)
    lines = [str(len(pts))]
    # high precision so a round trip never creates accidental ties
    lines.extend(f"{x:.17g} {y:.17g}" for x, y in pts)
    return "\n".join(lines) + "\n"


def format_tri(points: Iterable[Sequence[float]], indices: Sequence[int]) -> str:
    lines = [str(len(indices) // 3)]
    lines.extend(f"{indices[i]} {indices[i + 1]} {indices[i + 2]}" for i in range(0, len(indices) - 2, 3))
    return format_poly(points) + "\n".join(lines) + "\n"


def write_poly(points: Iterable[Sequence[float]], path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_poly(points))


def read_poly(path: Path) -> List[Point]:
    with open(path, "r", encoding="utf-8") as f:
        lines = _content_lines(f)
    if not lines:
        raise PolygonFormatError(f"{path}: empty file")
    pts, _ = _parse_points(lines, 0)
    return pts


def write_tri(points: Iterable[Sequence[float]], indices: Sequence[int], path: Path) -> None:
    """Write a polygon and its flat triangle index list."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_tri(points, indices))


def read_tri(path: Path) -> Tuple[List[Point], List[Triangle]]:
    with open(path, "r", encoding="utf-8") as f:
        lines = _content_lines(f)
    if not lines:
        raise PolygonFormatError(f"{path}: empty file")

    pts, i = _parse_points(lines, 0)
    tris: List[Triangle] = []
    if i < len(lines):
        try:
            m = int(lines[i])
            for line in lines[i + 1:i + 1 + m]:
                a, b, c = map(int, line.split())
                tris.append((a, b, c))
        except ValueError as e:
            raise PolygonFormatError(f"{path}: malformed triangle block: {e}") from e
        if len(tris) != m:
            raise PolygonFormatError(f"{path}: expected {m} triangles, found {len(tris)}")
    return pts, tris
