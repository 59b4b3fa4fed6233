"""
Winding-order tests for polygons and triangles.

Both tests use the same shoelace-style accumulation,
sum((next.x - last.x) * (next.y + last.y)), which is twice the signed area
with the sign flipped: a non-negative sum means clockwise.
"""

from __future__ import annotations

from typing import Sequence

from .points import Point


def polygon_is_clockwise(points: Sequence[Point]) -> bool:
    """True if the closed polygon is clockwise (zero area counts as clockwise)."""
    total = 0.0
    last = points[-1]
    for nxt in points:
        total += (nxt[0] - last[0]) * (nxt[1] + last[1])
        last = nxt
    return total >= 0


def triangle_is_clockwise(a: Point, b: Point, c: Point) -> bool:
    """Same test as polygon_is_clockwise, unrolled for three points."""
    return (
        (b[0] - a[0]) * (b[1] + a[1]) +
        (c[0] - b[0]) * (c[1] + b[1]) +
        (a[0] - c[0]) * (a[1] + c[1])
    ) >= 0


def polygon_signed_area(points: Sequence[Point]) -> float:
    """Signed area of a closed polygon, positive when counter-clockwise."""
    n = len(points)
    area = 0.0
    for i in range(n):
        x0, y0 = points[i]
        x1, y1 = points[(i + 1) % n]
        area += x0 * y1 - x1 * y0
    return area / 2


def triangle_signed_area(a: Point, b: Point, c: Point) -> float:
    """Signed area of triangle abc, positive when counter-clockwise."""
    return ((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])) / 2
