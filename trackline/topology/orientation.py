# -*- coding: utf-8 -*-
# Trackline/trackline/topology/orientation.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose
-------
Turn direction of three ordered 2D points. Pure kernels; inputs are anything indexable
as [x, y] (Point2d, tuples, numpy rows).

Main Tasks
----------
    1. `cross2(a, b, c)`: doubled signed area of triangle (a, b, c).
    2. `is_strictly_ccw(a, b, c)`: True iff that area is strictly positive.
    3. `turns_strictly_ccw(points)`: vectorized check over a closed (N, 2) loop.
"""

import numpy as np

__all__ = ["cross2", "is_strictly_ccw", "turns_strictly_ccw"]


def cross2(a, b, c) -> float:
    """(b.x-a.x)*(c.y-a.y) - (b.y-a.y)*(c.x-a.x)."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def is_strictly_ccw(a, b, c) -> bool:
    """Collinear and clockwise turns are both False."""
    return (b[0] - a[0]) * (c[1] - a[1]) > (b[1] - a[1]) * (c[0] - a[0])


def turns_strictly_ccw(points: np.ndarray) -> np.ndarray:
    """
    Boolean mask, one entry per vertex of an implicitly closed loop (no repeated last
    point): True where (prev, vertex, next) is a strict CCW turn.
    """
    a = np.roll(points, 1, axis=0)
    c = np.roll(points, -1, axis=0)
    b = points
    lhs = (b[:, 0] - a[:, 0]) * (c[:, 1] - a[:, 1])
    rhs = (b[:, 1] - a[:, 1]) * (c[:, 0] - a[:, 0])
    return lhs > rhs
