"""
2D cross-section generators.

Bases for prisms, pyramids and extrusions (regular, circle, star, rectangle,
square) plus the polygon families used for testing and benchmarking.
"""

from __future__ import annotations

import math
import random
from typing import List

from .errors import PreconditionError
from .points import Point

TAU = math.pi * 2


def make_regular_polyline(radius: float, sides: int, clockwise: bool = False) -> List[Point]:
    """Regular polygon inscribed in a circle of `radius`, with a vertex at (0, radius)."""
    if sides < 3:
        raise PreconditionError("There must be at least 3 sides in a regular polyline")

    polyline = []
    for i in range(sides):
        j = i if clockwise else (sides - 1 - i)
        angle = TAU * j / sides
        polyline.append((math.sin(angle) * radius, math.cos(angle) * radius))
    return polyline


def make_circle_polyline(radius: float, clockwise: bool = False, subdivisions: int = 12) -> List[Point]:
    return make_regular_polyline(radius, subdivisions, clockwise)


def make_star_polyline(outer_radius: float, inner_radius: float, sides: int,
                       clockwise: bool = False) -> List[Point]:
    """Star with `sides` outer points, alternating with inner points (2 * sides vertices)."""
    if sides < 3:
        raise PreconditionError("There must be at least 3 sides in a star polyline")

    half_angle = TAU / sides / 2
    polyline = []
    for i in range(sides):
        j = i if clockwise else (sides - 1 - i)
        outer_angle = TAU * j / sides
        inner_angle = outer_angle + half_angle
        outer = (math.sin(outer_angle) * outer_radius, math.cos(outer_angle) * outer_radius)
        inner = (math.sin(inner_angle) * inner_radius, math.cos(inner_angle) * inner_radius)
        if clockwise:
            polyline.extend((outer, inner))
        else:
            polyline.extend((inner, outer))
    return polyline


def make_rectangle_polyline(width: float, height: float, clockwise: bool = False) -> List[Point]:
    hw = width / 2
    hh = height / 2
    if clockwise:
        return [(hw, hh), (hw, -hh), (-hw, -hh), (-hw, hh)]
    return [(hw, hh), (-hw, hh), (-hw, -hh), (hw, -hh)]


def make_square_polyline(length: float, clockwise: bool = False) -> List[Point]:
    return make_rectangle_polyline(length, length, clockwise)


# Polygon families for tests and benchmarks

def convex_polygon(n: int = 6, radius: float = 1.0) -> List[Point]:
    return [(radius * math.cos(TAU * i / n + math.pi / 2),
             radius * math.sin(TAU * i / n + math.pi / 2)) for i in range(n)]


def star_polygon(points: int = 5, outer: float = 2.0, inner: float = 0.8) -> List[Point]:
    pts = []
    for i in range(points * 2):
        angle = math.pi / 2 + i * math.pi / points
        r = outer if i % 2 == 0 else inner
        pts.append((r * math.cos(angle), r * math.sin(angle)))
    return pts


def comb_polygon(teeth: int = 3) -> List[Point]:
    pts = [(0.0, 0.0), (teeth * 2.0, 0.0), (teeth * 2.0, 1.0)]
    for i in range(teeth - 1, -1, -1):
        x = i * 2 + 1
        pts.extend([(x + 0.5, 1.0), (float(x), 2.0), (x - 0.5, 1.0)])
    pts.append((0.0, 1.0))
    return pts


def l_shape() -> List[Point]:
    return [(0.0, 0.0), (2.0, 0.0), (2.0, 1.0), (1.0, 1.0), (1.0, 2.0), (0.0, 2.0)]


def paper_example() -> List[Point]:
    """Clockwise 12-gon with notches on every side."""
    return [
        (0.0, 2.5), (1.2, 5.5), (2.5, 3.8), (4.0, 6.5),
        (5.5, 4.8), (7.0, 7.0), (8.0, 5.5), (6.5, 3.5),
        (8.0, 1.5), (5.0, 2.5), (3.0, 0.0), (1.5, 1.5),
    ]


def random_polygon(n: int, radius: float = 100.0, seed: int = 42) -> List[Point]:
    """Vertices at sorted random angles around the origin, with random radii."""
    rng = random.Random(seed + n)
    angles = sorted(rng.random() * TAU for _ in range(n))
    points = []
    for angle in angles:
        r = radius * (0.4 + 0.6 * rng.random())
        points.append((r * math.cos(angle), r * math.sin(angle)))
    return points


def rotate_points(points: List[Point], angle_rad: float) -> List[Point]:
    ca = math.cos(angle_rad)
    sa = math.sin(angle_rad)
    return [(ca * x - sa * y, sa * x + ca * y) for (x, y) in points]
