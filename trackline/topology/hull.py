# -*- coding: utf-8 -*-
# Trackline/trackline/topology/hull.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose
-------
Convex hulls of 2D point sets. Two algorithms are provided and cross-check each other:

- Quadrant filter (Alshamrani et al., "A Preprocessing Technique for Fast Convex Hull
  Computation"): find the four extreme points, discard every point inside the
  quadrilateral they span, sort the four remaining buckets and scan them.
- Monotone chain (Andrew): sort everything, sweep a lower and an upper chain.

Main Tasks
----------
    1. Normalize caller input (points, arrays, lazy iterators, shapes) into Point2d.
    2. `convex_hull_quadrant_filter(points)` and `convex_hull_monotone(points)`.
    3. `convex_hull_monotone_inplace(point_list)`: same as the monotone chain but
       sorts the caller's list in place.
    4. `convex_hull(...)` / `convex_hull_of(shapes)`: entry points, quadrant filter.

Notes
-----
- Both algorithms start at the lowest-leftmost point and run counter-clockwise.
- Region tests in the partition step are evaluated together with the edge test, so a
  point on a shared boundary that is not outside one edge can still be tested against
  the next one. Assembly is closed by pruning against the first point.
- Results are ConvexPolygon instances; fewer than 3 vertices raise
  DegenerateResultError from the polygon constructor.
"""

import logging
from typing import Iterable, List

import numpy as np

from ..errors import InvalidInputError
from ..points.point import Point2d
from ..line.polygon import ConvexPolygon
from .orientation import is_strictly_ccw

logger = logging.getLogger(__name__)

__all__ = [
    "convex_hull",
    "convex_hull_of",
    "convex_hull_quadrant_filter",
    "convex_hull_monotone",
    "convex_hull_monotone_inplace",
]


# ------------------------------
# Input adapters
# ------------------------------
def _to_point(obj) -> Point2d:
    if isinstance(obj, Point2d):
        return obj
    try:
        n = len(obj)
    except TypeError:
        raise InvalidInputError("Cannot interpret {!r} as a 2D point".format(obj))
    if n != 2:
        raise InvalidInputError("Expected a 2D point, got {} coordinates".format(n))
    return Point2d(obj[0], obj[1])


def _collect_points(source) -> List[Point2d]:
    """
    Flatten any supported hull input into a fresh list of Point2d.

    Supported: (N, 2) ndarray, a shape with get_points(), or any iterable (single pass)
    whose elements are points, coordinate pairs or shapes.
    """
    if source is None:
        raise InvalidInputError("No points provided (source is None).")
    if isinstance(source, np.ndarray):
        if source.ndim != 2 or source.shape[1] != 2:
            raise InvalidInputError(
                "Expected (N, 2) array for points, got shape {}.".format(source.shape)
            )
        out = [Point2d(x, y) for x, y in source]
    elif hasattr(source, "get_points"):
        out = [_to_point(p) for p in source.get_points()]
    else:
        out = []
        for item in source:
            if hasattr(item, "get_points"):
                out.extend(_to_point(p) for p in item.get_points())
            else:
                out.append(_to_point(item))
    if not out:
        raise InvalidInputError("Empty point collection.")
    return out


def _xy(p):
    return (p[0], p[1])


def _xy_reversed(p):
    # x descending, y ascending
    return (-p[0], p[1])


def _clean_and_append(result: list, point) -> None:
    """Pop trailing points that do not make a strict CCW turn with `point`, then append."""
    last = result[-1]
    if last[0] == point[0] and last[1] == point[1]:
        return
    while len(result) >= 2 and not is_strictly_ccw(result[-2], result[-1], point):
        result.pop()
    result.append(point)


# ------------------------------
# Algorithms
# ------------------------------
def _quadrant_filter(points: List[Point2d]) -> List[Point2d]:
    min_x = min_y = max_x = max_y = points[0]
    for p in points:
        if p.x < min_x.x or (p.x == min_x.x and p.y < min_x.y):
            min_x = p
        if p.y < min_y.y or (p.y == min_y.y and p.x > min_y.x):
            min_y = p
        if p.x > max_x.x or (p.x == max_x.x and p.y < max_x.y):
            max_x = p
        if p.y > max_y.y or (p.y == max_y.y and p.x > max_y.x):
            max_y = p

    lower_left, lower_right, upper_right, upper_left = [], [], [], []
    for p in points:
        if p.x <= min_y.x and p.y <= min_x.y and is_strictly_ccw(min_x, p, min_y):
            lower_left.append(p)
        elif p.x >= min_y.x and p.y <= max_x.y and is_strictly_ccw(min_y, p, max_x):
            lower_right.append(p)
        elif p.x >= max_y.x and p.y >= max_x.y and is_strictly_ccw(max_x, p, max_y):
            upper_right.append(p)
        elif p.x <= max_y.x and p.y >= min_x.y and is_strictly_ccw(max_y, p, min_x):
            upper_left.append(p)

    logger.debug(
        "[ConvexHull] quadrant filter: total=%d ll=%d lr=%d ur=%d ul=%d",
        len(points), len(lower_left), len(lower_right), len(upper_right), len(upper_left),
    )

    lower_left.sort(key=_xy)
    lower_right.sort(key=_xy)
    upper_right.sort(key=_xy_reversed)
    upper_left.sort(key=_xy_reversed)

    result = [min_x]
    for bucket, corner in (
        (lower_left, min_y),
        (lower_right, max_x),
        (upper_right, max_y),
        (upper_left, min_x),
    ):
        for p in bucket:
            _clean_and_append(result, p)
        _clean_and_append(result, corner)
    # closing append of min_x duplicates the start
    if len(result) > 1 and result[-1] == result[0]:
        result.pop()
    return result


def _monotone_chain(sorted_points: List[Point2d]) -> List[Point2d]:
    result: List[Point2d] = []
    for p in sorted_points:
        while len(result) >= 2 and not is_strictly_ccw(result[-2], result[-1], p):
            result.pop()
        result.append(p)
    low_limit = len(result) + 1
    for i in range(len(sorted_points) - 2, -1, -1):
        p = sorted_points[i]
        while len(result) >= low_limit and not is_strictly_ccw(result[-2], result[-1], p):
            result.pop()
        result.append(p)
    if result:
        result.pop()
    return result


# ------------------------------
# Public API
# ------------------------------
def convex_hull_quadrant_filter(points) -> ConvexPolygon:
    """
    Convex hull by extreme-point pre-filtering. The input is never modified.

    Raises
    ------
    InvalidInputError
        None or empty input.
    DegenerateResultError
        Fewer than 3 hull vertices (collinear points, a single distinct point).
    """
    pts = _collect_points(points)
    return ConvexPolygon(_quadrant_filter(pts))


def convex_hull_monotone(points) -> ConvexPolygon:
    """Convex hull by Andrew's monotone chain, on an owned sorted copy of the input."""
    pts = _collect_points(points)
    pts.sort(key=_xy)
    return ConvexPolygon(_monotone_chain(pts))


def convex_hull_monotone_inplace(point_list: list) -> ConvexPolygon:
    """
    Monotone chain hull that sorts `point_list` itself (x, then y) before sweeping.

    The caller's list is reordered; treat the call as an exclusive write on that list.
    """
    if point_list is None:
        raise InvalidInputError("No points provided (point_list is None).")
    if not isinstance(point_list, list):
        raise InvalidInputError(
            "In-place hull needs a mutable list, got {}".format(type(point_list).__name__)
        )
    if not point_list:
        raise InvalidInputError("Empty point collection.")
    pts = [_to_point(p) for p in point_list]
    order = sorted(range(len(pts)), key=lambda i: _xy(pts[i]))
    point_list[:] = [point_list[i] for i in order]
    return ConvexPolygon(_monotone_chain([pts[i] for i in order]))


def convex_hull(*sources) -> ConvexPolygon:
    """
    Convex hull of everything passed in (quadrant filter).

    Accepts a single iterable/array of points, or one or more shapes (objects with
    get_points(): points, polylines, polygons).
    """
    if not sources:
        raise InvalidInputError("No points provided.")
    if len(sources) == 1:
        return convex_hull_quadrant_filter(sources[0])
    return convex_hull_quadrant_filter(sources)


def convex_hull_of(shapes: Iterable) -> ConvexPolygon:
    """Convex hull of a collection (list, set, ...) of shapes."""
    if shapes is None:
        raise InvalidInputError("No shapes provided (shapes is None).")
    return convex_hull_quadrant_filter(list(shapes))
