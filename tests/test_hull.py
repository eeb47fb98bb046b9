import math
import random

import numpy as np
import pytest

from trackline.errors import DegenerateResultError, InvalidInputError
from trackline.line.polygon import ConvexPolygon
from trackline.line.polyline import PolyLine2d
from trackline.points.point import Point2d
from trackline.topology.hull import (
    convex_hull,
    convex_hull_monotone,
    convex_hull_monotone_inplace,
    convex_hull_of,
    convex_hull_quadrant_filter,
)
from trackline.topology.orientation import cross2

ALGORITHMS = [convex_hull_quadrant_filter, convex_hull_monotone]

ROSETTA = [
    (16, 3), (12, 17), (0, 6), (-4, -6), (16, 6), (16, -7), (16, -3), (17, -4), (5, 19),
    (19, -8), (3, 16), (12, 13), (3, -4), (17, 5), (-3, 15), (-3, -9), (0, 11), (-9, -3),
    (-4, -2), (12, 10),
]
ROSETTA_HULL = [(-9, -3), (-3, -9), (19, -8), (17, 5), (12, 17), (5, 19), (-3, 15)]


def _pts(pairs):
    return [Point2d(x, y) for x, y in pairs]


def _vertices(polygon):
    return [tuple(row) for row in polygon.points.tolist()]


def _grid():
    return [Point2d(x, y) for x in range(-1, 2) for y in range(-2, 3)]


def _assert_encloses(polygon, points):
    xy = np.array([tuple(p) for p in points], dtype=float)
    verts = polygon.points
    for a, b in zip(verts, np.roll(verts, -1, axis=0)):
        assert (cross2(a, b, xy.T) >= -1e-9).all()


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_square_with_interior_point(algorithm):
    hull = algorithm([(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)])
    assert isinstance(hull, ConvexPolygon)
    assert _vertices(hull) == [(0, 0), (4, 0), (4, 4), (0, 4)]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_triangle_is_its_own_hull(algorithm):
    pts = [(3, 1), (0, 0), (1, 5)]
    assert set(_vertices(algorithm(pts))) == {(3.0, 1.0), (0.0, 0.0), (1.0, 5.0)}


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_rosetta_data(algorithm):
    points = _pts(ROSETTA)
    assert _vertices(algorithm(points)) == [tuple(map(float, p)) for p in ROSETTA_HULL]
    shuffled = list(points)
    random.Random(123).shuffle(shuffled)
    assert _vertices(algorithm(shuffled)) == [tuple(map(float, p)) for p in ROSETTA_HULL]


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_grid_with_collinear_edges(algorithm):
    points = _grid()
    random.Random(234).shuffle(points)
    assert _vertices(algorithm(points)) == [(-1, -2), (1, -2), (1, 2), (-1, 2)]

    points += _pts([(-1.1, 0), (0, -2.1), (1.1, 0), (0, 2.1)])
    random.Random(345).shuffle(points)
    assert _vertices(algorithm(points)) == [
        (-1.1, 0), (-1, -2), (0, -2.1), (1, -2), (1.1, 0), (1, 2), (0, 2.1), (-1, 2),
    ]


def test_quadrant_filter_keeps_vertex_on_shared_boundary():
    # (1, 9) lies in the lower-right region but outside the upper-left edge only
    points = _pts([(0, 0), (10, 10), (1, 9), (0.5, 1)])
    expected = [(0.0, 0.0), (10.0, 10.0), (1.0, 9.0)]
    assert _vertices(convex_hull_quadrant_filter(points)) == expected
    assert _vertices(convex_hull_monotone(points)) == expected


def test_circle_of_grid_points_agrees():
    radius = 5000.0 / 64
    cx, cy = 1.5, 10.5
    points = []
    x = cx - radius
    while x <= cx + radius:
        y = cy - radius
        while y <= cy + radius:
            if math.hypot(x - cx, y - cy) <= radius:
                points.append(Point2d(x, y))
            y += 1
        x += 1
    random.Random(456).shuffle(points)
    quadrant = convex_hull_quadrant_filter(points)
    monotone = convex_hull_monotone(points)
    assert quadrant == monotone
    _assert_encloses(quadrant, points)


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_random_points_agree(seed):
    rng = np.random.default_rng(seed)
    xy = rng.uniform(-100.0, 100.0, size=(300, 2))
    quadrant = convex_hull_quadrant_filter(xy)
    monotone = convex_hull_monotone(xy)
    assert _vertices(quadrant) == _vertices(monotone)
    _assert_encloses(quadrant, xy)
    # vertices come from the input
    inputs = set(map(tuple, xy.tolist()))
    assert set(_vertices(quadrant)) <= inputs


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_collinear_points_are_degenerate(algorithm):
    with pytest.raises(DegenerateResultError):
        algorithm([(0, 0), (1, 1), (2, 2), (3, 3)])


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_single_distinct_point_is_degenerate(algorithm):
    with pytest.raises(DegenerateResultError):
        algorithm([(1, 1)])
    with pytest.raises(DegenerateResultError):
        algorithm([(1, 1), (1, 1)])


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_none_and_empty_input(algorithm):
    with pytest.raises(InvalidInputError):
        algorithm(None)
    with pytest.raises(InvalidInputError):
        algorithm([])


def test_input_list_is_not_modified():
    points = _pts(ROSETTA)
    original = list(points)
    convex_hull_quadrant_filter(points)
    convex_hull_monotone(points)
    assert points == original


def test_inplace_variant_sorts_caller_list():
    points = _pts(ROSETTA)
    hull = convex_hull_monotone_inplace(points)
    assert _vertices(hull) == [tuple(map(float, p)) for p in ROSETTA_HULL]
    assert points == sorted(points, key=lambda p: (p.x, p.y))


@pytest.mark.parametrize("bad", [(3, 1, 9), (3, float("nan")), "xy!"])
def test_inplace_variant_leaves_list_alone_when_rejected(bad):
    points = [(5, 5), (0, 0), bad, (1, 4)]
    before = list(points)
    with pytest.raises(InvalidInputError):
        convex_hull_monotone_inplace(points)
    assert points == before


def test_inplace_variant_rejects_non_list():
    with pytest.raises(InvalidInputError):
        convex_hull_monotone_inplace(tuple(_pts(ROSETTA)))
    with pytest.raises(InvalidInputError):
        convex_hull_monotone_inplace([])


def test_lazy_iterator_input():
    hull = convex_hull(iter(_pts(ROSETTA)))
    assert _vertices(hull) == [tuple(map(float, p)) for p in ROSETTA_HULL]


def test_shapes_as_input():
    a = PolyLine2d([(0, 0), (4, 0)])
    b = PolyLine2d([(4, 4), (0, 4), (2, 2)])
    expected = [(0, 0), (4, 0), (4, 4), (0, 4)]
    assert _vertices(convex_hull(a, b)) == expected
    assert _vertices(convex_hull_of({a, b})) == expected
    assert _vertices(convex_hull(Point2d(0, 0), Point2d(4, 0), b)) == expected


def test_bad_array_shape():
    with pytest.raises(InvalidInputError):
        convex_hull_quadrant_filter(np.zeros((4, 3)))
