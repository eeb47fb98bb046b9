# -*- coding: utf-8 -*-
# Trackline/trackline/__init__.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Modules:
--------
- points:   immutable 2D/3D points and rays.
- topology: orientation predicate and convex hulls.
- ops:      arc-length table, bracketing search, sub-line kernels.
- line:     PolyLine2d/PolyLine3d, ConvexPolygon, offset contract.
- config:   OffsetParameters and named defaults.
- errors:   typed exception hierarchy.
- export:   tab-separated coordinate dumps.
- logs:     logging setup for scripts.
- api:      high-level helpers.
"""

import logging

from .errors import (
    GeometryError, InvalidInputError, OutOfRangeError,
    DegenerateResultError, InternalInconsistencyError,
)
from .config import OffsetParameters, DEFAULT_OFFSET_PARAMETERS
from .points import Point2d, Point3d, Ray2d, Ray3d
from .line import ConvexPolygon, PolyLine2d, PolyLine3d
from .api import polyline, convex_hull, convex_hull_of, offset_line

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "points", "topology", "ops", "line", "config", "errors", "export", "logs", "api",
    "GeometryError", "InvalidInputError", "OutOfRangeError",
    "DegenerateResultError", "InternalInconsistencyError",
    "OffsetParameters", "DEFAULT_OFFSET_PARAMETERS",
    "Point2d", "Point3d", "Ray2d", "Ray3d",
    "ConvexPolygon", "PolyLine2d", "PolyLine3d",
    "polyline", "convex_hull", "convex_hull_of", "offset_line",
]
