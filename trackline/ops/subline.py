# -*- coding: utf-8 -*-
# Trackline/trackline/ops/subline.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose
-------
Array-level sub-line operations on an ArcLengthIndex: extract a [start, end] range,
truncate at a position, collapse short segments (noise filter) and drop consecutive
duplicates. Every function returns a new (M, d) array (or None for "unchanged");
building the line object is left to the caller.

Main Tasks
----------
    1. `extract_points(index, start, end)`: cut points at both ends, whole vertices between.
    2. `truncate_points(index, position)`: prefix up to `position`.
    3. `noise_filter_points(points, noise_level)`: keep first/last, drop close neighbours.
    4. `drop_consecutive_duplicates(points, tol)`.

Notes
-----
- Cut points that land exactly on a table entry reuse that vertex.
- `extract_points` may return a sequence that violates the line invariants when the
  interval is too short for the floating point resolution; the line constructor
  reports that as DegenerateResultError.
"""

import math
from typing import Optional

import numpy as np

from ..errors import InvalidInputError
from .arclength import ArcLengthIndex, _interpolate

__all__ = [
    "extract_points",
    "truncate_points",
    "noise_filter_points",
    "drop_consecutive_duplicates",
]


def extract_points(index: ArcLengthIndex, start: float, end: float) -> np.ndarray:
    """
    Points of the sub-line between arc-length positions `start` and `end`.

    Raises
    ------
    InvalidInputError
        NaN bounds, start < 0, start >= end or end > length.
    """
    length = index.length
    if math.isnan(start) or math.isnan(end) or start < 0.0 or start >= end or end > length:
        raise InvalidInputError(
            "Bad interval ({}, {}); length of line is {}".format(start, end, length),
            {"start": start, "end": end, "length": length},
        )
    pts = index.points
    table = index.lengths
    size = index.size

    cumulative = 0.0
    next_cumulative = 0.0
    i = 0
    out = []
    # segment containing start
    while start > cumulative:
        i += 1
        cumulative = table[i - 1]
        next_cumulative = table[i]
        if next_cumulative >= start:
            break
    if start == next_cumulative:
        out.append(pts[i].copy())
    else:
        fraction = (start - cumulative) / (next_cumulative - cumulative)
        out.append(_interpolate(pts[i - 1], pts[i], fraction))
        if end > next_cumulative:
            out.append(pts[i].copy())
    # whole vertices up to the segment containing end
    while end > next_cumulative:
        i += 1
        if i >= size:
            break
        cumulative = next_cumulative
        next_cumulative = table[i]
        if next_cumulative >= end:
            break
        out.append(pts[i].copy())
    if end == next_cumulative:
        out.append(pts[i].copy())
    elif i < size:
        fraction = (end - cumulative) / (next_cumulative - cumulative)
        point = _interpolate(pts[i - 1], pts[i], fraction)
        if not np.array_equal(point, out[-1]):
            out.append(point)
    return np.array(out, dtype=np.float64)


def truncate_points(index: ArcLengthIndex, position: float) -> Optional[np.ndarray]:
    """
    Points of the sub-line [0, position]; None when `position` equals the length.

    Raises
    ------
    InvalidInputError
        position <= 0, position > length or NaN.
    """
    length = index.length
    if math.isnan(position) or position <= 0.0 or position > length:
        raise InvalidInputError(
            "Position {} out of range (0, {}]".format(position, length),
            {"position": position, "length": length},
        )
    if position == length:
        return None
    i = index.find(position)
    table = index.lengths
    fraction = (position - table[i]) / (table[i + 1] - table[i])
    if fraction == 0.0:
        last = index.points[i]
    else:
        last = _interpolate(index.points[i], index.points[i + 1], fraction)
        i += 1
    return np.vstack((index.points[:i], last[np.newaxis, :]))


def noise_filter_points(points: np.ndarray, noise_level: float) -> Optional[np.ndarray]:
    """
    Drop points closer than `noise_level` to the last retained point.

    The first and last point always survive: a dropped last point replaces the last
    retained one. If that collapses the result to two identical points, the original
    second point is re-inserted. Returns None when nothing was dropped.
    """
    n = points.shape[0]
    if n <= 2:
        return None
    kept = []
    prev = None
    for k in range(n):
        current = points[k]
        if prev is not None and float(np.linalg.norm(current - prev)) < noise_level:
            if k == n - 1:
                if len(kept) > 1:
                    kept[-1] = current
                else:
                    kept.append(current)
            continue
        kept.append(current)
        prev = current
    if len(kept) == n:
        return None
    if len(kept) == 2 and np.array_equal(kept[0], kept[1]):
        kept.insert(1, points[1])
    return np.array(kept, dtype=np.float64)


def drop_consecutive_duplicates(points: np.ndarray, tol: float = 0.0) -> np.ndarray:
    """
    Remove exact (or tolerance-close) consecutive duplicates.

    Args
    ----
    points : np.ndarray
        Input points, shape (N, d).
    tol : float, optional
        Absolute tolerance for equality (`np.allclose` with rtol=0). Default: 0.0.

    Returns
    -------
    np.ndarray
        Filtered points retaining original order.
    """
    if points.shape[0] <= 1:
        return points
    keep = [0]
    for k in range(1, points.shape[0]):
        if not np.allclose(points[k], points[keep[-1]], atol=tol, rtol=0.0):
            keep.append(k)
    return points[np.array(keep, dtype=int)]
