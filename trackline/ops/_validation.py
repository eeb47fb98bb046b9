# -*- coding: utf-8 -*-
# Trackline/trackline/ops/_validation.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose:
--------
Centralized validation for point arrays so that every polyline constructor and ops
helper applies the same shape, finiteness and duplicate checks.

Main Tasks:
   1. Coerce lists, tuples, arrays and lazy iterators of points into (N, d) float64 arrays
   2. Validate shape and finiteness, reporting offending indices
   3. Locate the first duplicate-adjacent pair
"""

from typing import Optional
import numpy as np

from ..errors import InvalidInputError


def _as_points(points, dim: Optional[int] = None) -> np.ndarray:
    """
    Return `points` as a fresh (N, d) float64 array (d = `dim` or inferred 2/3).

    Raises
    ------
    InvalidInputError
        None input, ragged rows, wrong dimension or non-finite values.
    """
    if points is None:
        raise InvalidInputError("No geometry provided (points is None).")
    if not isinstance(points, np.ndarray):
        rows = [tuple(p) for p in points]
        if not rows:
            raise InvalidInputError("Empty point collection.")
        try:
            points = np.array(rows, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise InvalidInputError("Cannot interpret input as a point array: {}".format(e))
    else:
        points = np.array(points, dtype=np.float64)
    _assert_points(points, dim)
    return points


def _assert_points(points: np.ndarray, dim: Optional[int] = None) -> None:
    """Validate (N, d) shape with d in {2, 3} (or == dim) and finite values."""
    if points.ndim != 2 or points.shape[1] not in (2, 3):
        raise InvalidInputError(
            "Expected (N, 2) or (N, 3) array for points, got shape {}.".format(points.shape)
        )
    if dim is not None and points.shape[1] != dim:
        raise InvalidInputError(
            "Expected (N, {}) array for points, got shape {}.".format(dim, points.shape)
        )
    if not np.isfinite(points).all():
        bad_indices = np.argwhere(~np.isfinite(points))
        raise InvalidInputError(
            "Non-finite coordinates detected at indices: {}".format(bad_indices.tolist())
        )


def _first_duplicate_adjacent(points: np.ndarray) -> int:
    """Index i of the first point equal to point i-1, or -1 if there is none."""
    if points.shape[0] < 2:
        return -1
    same = np.all(points[1:] == points[:-1], axis=1)
    hits = np.flatnonzero(same)
    return int(hits[0]) + 1 if hits.size else -1
