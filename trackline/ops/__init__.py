# -*- coding: utf-8 -*-
# Trackline/trackline/ops/__init__.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Ops Subfolder:
--------------
Array-level kernels behind the line types. Work on (N, 2) or (N, 3) float64 arrays.


Contents
--------
- arclength: cumulative length table, bounding extent, ArcLengthIndex
             (bracketing search, interpolation and extrapolation)

- subline:   extract / truncate / noise filter / consecutive duplicate removal

- _validation: shared input coercion and checks (internal)
"""

from .arclength import Bounds, cumulative_arclength, bounding_extent, ArcLengthIndex
from .subline import (
    extract_points, truncate_points, noise_filter_points, drop_consecutive_duplicates,
)

__all__ = [
    # arclength
    "Bounds", "cumulative_arclength", "bounding_extent", "ArcLengthIndex",
    # subline
    "extract_points", "truncate_points", "noise_filter_points",
    "drop_consecutive_duplicates",
]
