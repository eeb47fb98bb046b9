# -*- coding: utf-8 -*-
# Trackline/trackline/ops/arclength.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose
-------
Arc-length indexing of an ordered point sequence: the cumulative length table, the
bounding extent, the bracketing binary search and position lookup with linear
interpolation/extrapolation. Dimension agnostic ((N, 2) and (N, 3) arrays).

Main Tasks
----------
    1. `cumulative_arclength(points)` -> S with S[0] = 0, S[-1] = total length.
    2. `bounding_extent(points)` -> Bounds(min, max).
    3. `ArcLengthIndex`: immutable table + `find`, `locate`, `locate_extended`.

Notes
-----
- `locate*` return (point_row, direction_vector); turning that into a ray type is the
  caller's job.
- Arrays held by ArcLengthIndex are flagged read-only.
"""

import logging
import math
from collections import namedtuple
from typing import Tuple

import numpy as np

from ..errors import InternalInconsistencyError, InvalidInputError, OutOfRangeError
from ._validation import _first_duplicate_adjacent

logger = logging.getLogger(__name__)

__all__ = ["Bounds", "cumulative_arclength", "bounding_extent", "ArcLengthIndex"]

Bounds = namedtuple("Bounds", ["min", "max"])


def cumulative_arclength(points: np.ndarray) -> np.ndarray:
    """
    Compute cumulative arclength for a polyline.

    Parameters
    ----------
    points : np.ndarray
        Array of shape (N, d).

    Returns
    -------
    np.ndarray
        Array of shape (N,), with S[0]=0 and S[-1]=total length.
    """
    seg = np.linalg.norm(points[1:] - points[:-1], axis=1)
    return np.concatenate(([0.0], np.cumsum(seg)))


def bounding_extent(points: np.ndarray) -> Bounds:
    """Axis-aligned extent as Bounds(min=(d,), max=(d,))."""
    return Bounds(points.min(axis=0), points.max(axis=0))


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def _interpolate(p0: np.ndarray, p1: np.ndarray, fraction: float) -> np.ndarray:
    if fraction == 0.0:
        return p0.copy()
    if fraction == 1.0:
        return p1.copy()
    return (1.0 - fraction) * p0 + fraction * p1


class ArcLengthIndex:
    """
    Cumulative length table over a validated (N, d) point array.

    Parameters
    ----------
    points : np.ndarray
        (N, d) float64 array, N >= 2, finite, no two consecutive rows identical.

    Attributes
    ----------
    points : np.ndarray
        Read-only copy of the input.
    lengths : np.ndarray
        Read-only (N,) cumulative lengths, strictly increasing.
    bounds : Bounds
        Axis-aligned extent of the points.
    """

    def __init__(self, points: np.ndarray):
        if points.shape[0] < 2:
            raise InvalidInputError(
                "Need at least 2 points, got {}".format(points.shape[0]),
                {"size": int(points.shape[0])},
            )
        dup = _first_duplicate_adjacent(points)
        if dup >= 0:
            raise InvalidInputError(
                "Degenerate line; point {} has the same coordinates as point {}".format(dup - 1, dup),
                {"index": dup, "point": points[dup].tolist()},
            )
        self.points = _readonly(np.array(points, dtype=np.float64))
        self.lengths = _readonly(cumulative_arclength(self.points))
        self.bounds = Bounds(*(_readonly(a) for a in bounding_extent(self.points)))

    # --------------------
    # Table access
    # --------------------
    @property
    def size(self) -> int:
        return int(self.points.shape[0])

    @property
    def length(self) -> float:
        return float(self.lengths[-1])

    def length_at_index(self, index: int) -> float:
        if not 0 <= index < self.size:
            raise OutOfRangeError("Bad index {}".format(index), {"size": self.size})
        return float(self.lengths[index])

    def find(self, position: float) -> int:
        """
        Index i with lengths[i] <= position <= lengths[i + 1].

        Binary search; position 0 maps to 0 and the total length to size - 2.

        Raises
        ------
        OutOfRangeError
            Position is NaN or outside [0, length].
        InternalInconsistencyError
            The search ended without a bracketing index (corrupted table).
        """
        if math.isnan(position) or position < 0.0 or position > self.length:
            raise OutOfRangeError(
                "Position {} is outside [0, {}]".format(position, self.length),
                {"position": position, "length": self.length},
            )
        if position == 0.0:
            return 0
        lengths = self.lengths
        index = -1
        lo, hi = 0, self.size - 1
        while lo <= hi:
            if hi == lo:
                index = lo
                break
            mid = lo + (hi - lo) // 2
            if position < lengths[mid]:
                hi = mid - 1
            elif position > lengths[mid + 1]:
                lo = mid + 1
            else:
                index = mid
                break
        if 0 <= index < self.size - 1 and lengths[index] <= position <= lengths[index + 1]:
            return index
        logger.error("[ArcLengthIndex] find(%r) did not bracket; length=%r", position, self.length)
        raise InternalInconsistencyError(
            "Could not find position {} on line with length {}".format(position, self.length),
            {"position": position, "length": self.length, "index": index},
        )

    def segment_direction(self, index: int) -> np.ndarray:
        """Vector from point `index` to point `index + 1`."""
        return self.points[index + 1] - self.points[index]

    # --------------------
    # Position lookup
    # --------------------
    def locate(self, position: float) -> Tuple[np.ndarray, np.ndarray]:
        """
        Point and direction vector at `position` in [0, length].

        The end points use the direction of the first/last segment.
        """
        if math.isnan(position) or position < 0.0 or position > self.length:
            raise OutOfRangeError(
                "Position {} out of range [0, {}]".format(position, self.length),
                {"position": position, "length": self.length},
            )
        if position == 0.0:
            return self.points[0].copy(), self.segment_direction(0)
        if position == self.length:
            n = self.size
            return self.points[n - 1].copy(), self.segment_direction(n - 2)
        index = self.find(position)
        fraction = (position - self.lengths[index]) / (self.lengths[index + 1] - self.lengths[index])
        point = _interpolate(self.points[index], self.points[index + 1], fraction)
        return point, self.segment_direction(index)

    def locate_extended(self, position: float) -> Tuple[np.ndarray, np.ndarray]:
        """
        Like `locate`, but positions outside [0, length] are extrapolated along the
        first segment (before the start) or the last segment (beyond the end).
        """
        if not math.isfinite(position):
            raise OutOfRangeError("Position must be finite, got {}".format(position))
        if 0.0 <= position <= self.length:
            return self.locate(position)
        if position < 0.0:
            fraction = position / (self.lengths[1] - self.lengths[0])
            direction = self.segment_direction(0)
            return self.points[0] + fraction * direction, direction

        n1 = self.size - 1
        n2 = n1 - 1
        excess = position - self.length
        while True:
            span = self.lengths[n1] - self.lengths[n2]
            fraction = excess / span if span > 0.0 else math.inf
            if not math.isinf(fraction):
                break
            n2 -= 1
            if n2 < 0:
                logger.error("[ArcLengthIndex] cannot determine heading beyond end of line")
                raise InternalInconsistencyError(
                    "Cannot extrapolate beyond the end: all trailing segments are degenerate",
                    {"position": position, "length": self.length},
                )
        direction = self.points[n1] - self.points[n2]
        return self.points[n1] + fraction * direction, direction
