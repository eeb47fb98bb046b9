# -*- coding: utf-8 -*-
# Trackline/trackline/line/__init__.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Line Subfolder:
---------------
- base:     ArcLengthLine protocol + derived free functions (reverse, fractional wrappers).
- polyline: PolyLine (shared implementation), PolyLine2d, PolyLine3d.
- polygon:  ConvexPolygon (hull result type).
- offset:   offset_line contract (shapely-backed).
"""

from .base import (
    ArcLengthLine, reverse, extract_fractional,
    get_location_fraction, get_location_fraction_extended,
)
from .polygon import ConvexPolygon
from .polyline import PolyLine, PolyLine2d, PolyLine3d
from .offset import offset_line

__all__ = [
    "ArcLengthLine", "reverse", "extract_fractional",
    "get_location_fraction", "get_location_fraction_extended",
    "ConvexPolygon", "PolyLine", "PolyLine2d", "PolyLine3d", "offset_line",
]
