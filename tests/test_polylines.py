import math

import pytest

from monotri.errors import PreconditionError
from monotri.orientation import polygon_is_clockwise, polygon_signed_area
from monotri.polylines import (
    comb_polygon,
    convex_polygon,
    make_circle_polyline,
    make_rectangle_polyline,
    make_regular_polyline,
    make_square_polyline,
    make_star_polyline,
    paper_example,
    random_polygon,
    rotate_points,
    star_polygon,
)


@pytest.mark.parametrize("clockwise", [False, True])
def test_regular_polyline(clockwise):
    pts = make_regular_polyline(2.0, 6, clockwise)
    assert len(pts) == 6
    assert polygon_is_clockwise(pts) == clockwise
    for x, y in pts:
        assert math.isclose(math.hypot(x, y), 2.0)
    assert any(math.isclose(x, 0.0, abs_tol=1e-12) and math.isclose(y, 2.0) for x, y in pts)


def test_circle_polyline():
    assert len(make_circle_polyline(1.0)) == 12
    assert len(make_circle_polyline(1.0, subdivisions=32)) == 32


@pytest.mark.parametrize("clockwise", [False, True])
def test_star_polyline(clockwise):
    pts = make_star_polyline(3.0, 1.0, 5, clockwise)
    assert len(pts) == 10
    assert polygon_is_clockwise(pts) == clockwise
    radii = sorted(round(math.hypot(x, y), 9) for x, y in pts)
    assert radii == [1.0] * 5 + [3.0] * 5


def test_too_few_sides():
    with pytest.raises(PreconditionError):
        make_regular_polyline(1.0, 2)
    with pytest.raises(PreconditionError):
        make_star_polyline(2.0, 1.0, 2)


def test_rectangle_and_square():
    assert polygon_signed_area(make_rectangle_polyline(4.0, 2.0)) == pytest.approx(8.0)
    assert polygon_signed_area(make_rectangle_polyline(4.0, 2.0, clockwise=True)) == pytest.approx(-8.0)
    assert polygon_signed_area(make_square_polyline(3.0)) == pytest.approx(9.0)


def test_families_are_counter_clockwise():
    for pts in (convex_polygon(10), star_polygon(6), comb_polygon(4), random_polygon(30)):
        assert not polygon_is_clockwise(pts)
    assert polygon_is_clockwise(paper_example())


def test_comb_size():
    assert len(comb_polygon(1)) == 7
    assert len(comb_polygon(5)) == 19


def test_random_polygon_is_seeded():
    assert random_polygon(20, seed=1) == random_polygon(20, seed=1)
    assert random_polygon(20, seed=1) != random_polygon(20, seed=2)


def test_rotation_keeps_area():
    pts = star_polygon(5)
    assert polygon_signed_area(rotate_points(pts, 0.4)) == pytest.approx(polygon_signed_area(pts))
