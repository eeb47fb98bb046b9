# -*- coding: utf-8 -*-
# Trackline/trackline/line/polygon.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose:
--------
Immutable convex polygon, the result type of the hull algorithms.

Pipeline:
---------
input points → (N,2) float64 → drop explicit closing point → count >= 3 → no duplicate
neighbours → every vertex a strict CCW turn (wrap-around included)
"""

from typing import Iterator

import numpy as np

from ..errors import DegenerateResultError, InvalidInputError, OutOfRangeError
from ..ops._validation import _as_points, _first_duplicate_adjacent
from ..ops.arclength import Bounds, bounding_extent
from ..points.point import Point2d
from ..topology.orientation import turns_strictly_ccw

__all__ = ["ConvexPolygon"]


class ConvexPolygon:
    """
    Closed, counter-clockwise, strictly convex 2D polygon.

    Parameters
    ----------
    points : iterable of points or (N, 2) array
        Vertices in CCW order. A closing point equal to the first one is dropped.

    Raises
    ------
    DegenerateResultError
        Fewer than 3 vertices remain.
    InvalidInputError
        Duplicate neighbouring vertices, or a vertex that is not a strict CCW turn.
    """

    def __init__(self, points):
        if not isinstance(points, np.ndarray):
            points = list(points)
        if len(points) == 0:
            raise DegenerateResultError("Polygon needs at least 3 distinct vertices, got 0")
        pts = _as_points(points, dim=2)
        if pts.shape[0] > 1 and np.array_equal(pts[0], pts[-1]):
            pts = pts[:-1]
        if pts.shape[0] < 3:
            raise DegenerateResultError(
                "Polygon needs at least 3 distinct vertices, got {}".format(pts.shape[0]),
                {"size": int(pts.shape[0])},
            )
        dup = _first_duplicate_adjacent(pts)
        if dup >= 0:
            raise InvalidInputError(
                "Polygon vertex {} duplicates vertex {}".format(dup, dup - 1),
                {"point": pts[dup].tolist()},
            )
        bad = np.flatnonzero(~turns_strictly_ccw(pts))
        if bad.size:
            raise InvalidInputError(
                "Polygon is not strictly convex and counter-clockwise at vertices {}".format(bad.tolist())
            )
        pts.setflags(write=False)
        self._points = pts

    # --------------------
    # Accessors
    # --------------------
    @property
    def points(self) -> np.ndarray:
        """Read-only (N, 2) vertex array (closing point not repeated)."""
        return self._points

    @property
    def size(self) -> int:
        return int(self._points.shape[0])

    def __len__(self) -> int:
        return self.size

    def get(self, i: int) -> Point2d:
        if not 0 <= i < self.size:
            raise OutOfRangeError("Bad index {}".format(i), {"size": self.size})
        return Point2d(*self._points[i])

    def get_points(self) -> Iterator[Point2d]:
        for x, y in self._points:
            yield Point2d(x, y)

    __iter__ = get_points

    @property
    def bounds(self) -> Bounds:
        return bounding_extent(self._points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ConvexPolygon):
            return NotImplemented
        return np.array_equal(self._points, other._points)

    def __hash__(self) -> int:
        return hash(self._points.tobytes())

    def __repr__(self) -> str:
        inner = ", ".join("({:g}, {:g})".format(x, y) for x, y in self._points)
        return "ConvexPolygon([{}])".format(inner)
