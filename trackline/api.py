# -*- coding: utf-8 -*-
# Trackline/trackline/api.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose
-------
Thin, import-only façade over the geometry core. Exposes one helper per workflow:
(1) build a polyline of the right dimension, (2) compute a convex hull with either
algorithm, (3) offset a 2D polyline.

Main Tasks
----------
    1. `polyline` → PolyLine2d or PolyLine3d depending on the coordinate count.
    2. `convex_hull` → ConvexPolygon via the quadrant filter (default) or monotone chain.
    3. `offset_line` → re-export of trackline.line.offset.offset_line.

Notes
-----
- Detailed behaviour lives in `trackline.line` and `trackline.topology.hull`.
"""

from typing import Optional

from .errors import InvalidInputError
from .line.offset import offset_line
from .line.polygon import ConvexPolygon
from .line.polyline import PolyLine, PolyLine2d, PolyLine3d
from .ops._validation import _as_points
from .topology.hull import (
    convex_hull_monotone,
    convex_hull_of,
    convex_hull_quadrant_filter,
)

__all__ = [
    "polyline",
    "convex_hull",
    "convex_hull_of",
    "offset_line",
]

_HULL_ALGORITHMS = {
    "quadrant": convex_hull_quadrant_filter,
    "monotone": convex_hull_monotone,
}


def polyline(points, *, clean: bool = False) -> PolyLine:
    """
    Build a polyline, choosing the 2D or 3D type from the coordinate count.

    Args
    ----
    points : array-like or iterable of points
        (N, 2) or (N, 3) coordinates, Point2d/Point3d instances or a lazy iterator.
    clean : bool, optional
        Drop consecutive duplicate points first (default: False, duplicates raise).

    Returns
    -------
    PolyLine2d or PolyLine3d
    """
    pts = _as_points(points)
    cls = PolyLine2d if pts.shape[1] == 2 else PolyLine3d
    return cls.create_and_clean(pts) if clean else cls(pts)


def convex_hull(points, algorithm: Optional[str] = None) -> ConvexPolygon:
    """
    Convex hull of a point collection, array, iterator or shape.

    Args
    ----
    points :
        Anything accepted by trackline.topology.hull (points, pairs, (N, 2) array,
        shapes with get_points()).
    algorithm : str, optional
        "quadrant" (default) or "monotone". Neither modifies the input.

    Returns
    -------
    ConvexPolygon
    """
    name = algorithm or "quadrant"
    if name not in _HULL_ALGORITHMS:
        raise InvalidInputError(
            "Unknown hull algorithm {!r}".format(name), {"choices": sorted(_HULL_ALGORITHMS)}
        )
    return _HULL_ALGORITHMS[name](points)
