# -*- coding: utf-8 -*-
# Trackline/trackline/line/polyline.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose:
--------
Immutable polylines in 2D and 3D backed by an ArcLengthIndex. One implementation
(`PolyLine`) is shared by both dimensions; `PolyLine2d` / `PolyLine3d` only fix the
dimension and the point/ray types handed out.

Pipeline:
---------
input points → ndarray(float64, shape=(N,d)) → finite → N >= 2 → no duplicate neighbours
→ cumulative length table + bounds (read-only)

Notes:
------
- Every transformation returns a new line; `truncate(length)` and no-op noise
  filtering return the line itself.
- Equality is exact: same class and identical coordinates.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple

import numpy as np

from ..errors import DegenerateResultError, InvalidInputError, OutOfRangeError
from ..export import to_tsv
from ..ops._validation import _as_points
from ..ops.arclength import ArcLengthIndex, Bounds
from ..ops.subline import (
    drop_consecutive_duplicates,
    extract_points,
    noise_filter_points,
    truncate_points,
)
from ..points.point import Point2d, Point3d
from ..points.ray import Ray2d, Ray3d
from . import base

logger = logging.getLogger(__name__)

__all__ = ["PolyLine", "PolyLine2d", "PolyLine3d"]


class PolyLine(ABC):
    """
    Ordered sequence of >= 2 points with arc-length queries.

    Parameters
    ----------
    points : array-like, list, tuple or iterator
        Points (Point2d/Point3d, coordinate tuples or an (N, d) array).

    Raises
    ------
    InvalidInputError
        Fewer than 2 points, non-finite coordinates, wrong dimension or two
        consecutive identical points.
    """

    _dim: Optional[int] = None

    def __init__(self, points):
        pts = _as_points(points, self._dim)
        self._index = ArcLengthIndex(pts)

    # --------------------
    # Hooks for the concrete dimension
    # --------------------
    @abstractmethod
    def _point(self, row):
        """Point type for one coordinate row."""
        pass

    @abstractmethod
    def _ray(self, row, direction):
        """Ray type for a location row and its direction vector."""
        pass

    # --------------------
    # Accessors
    # --------------------
    @property
    def points(self) -> np.ndarray:
        """Read-only (N, d) coordinate array."""
        return self._index.points

    @property
    def lengths(self) -> np.ndarray:
        """Read-only cumulative length table."""
        return self._index.lengths

    @property
    def size(self) -> int:
        return self._index.size

    def __len__(self) -> int:
        return self._index.size

    def _check_index(self, i: int) -> None:
        if not 0 <= i < self.size:
            raise OutOfRangeError("Bad index {}".format(i), {"size": self.size})

    def get(self, i: int):
        self._check_index(i)
        return self._point(self.points[i])

    def get_x(self, i: int) -> float:
        self._check_index(i)
        return float(self.points[i, 0])

    def get_y(self, i: int) -> float:
        self._check_index(i)
        return float(self.points[i, 1])

    @property
    def first(self):
        return self._point(self.points[0])

    @property
    def last(self):
        return self._point(self.points[-1])

    def get_points(self) -> Iterator:
        for row in self.points:
            yield self._point(row)

    __iter__ = get_points

    def get_segment(self, i: int) -> Tuple:
        """(start, end) points of segment i, 0 <= i < size - 1."""
        if not 0 <= i < self.size - 1:
            raise OutOfRangeError("Bad segment index {}".format(i), {"segments": self.size - 1})
        return self._point(self.points[i]), self._point(self.points[i + 1])

    @property
    def bounds(self) -> Bounds:
        return self._index.bounds

    @property
    def length(self) -> float:
        return self._index.length

    def get_length(self) -> float:
        return self._index.length

    def length_at_index(self, i: int) -> float:
        return self._index.length_at_index(i)

    def find(self, position: float) -> int:
        return self._index.find(position)

    # --------------------
    # Position queries
    # --------------------
    def get_location(self, position: float):
        """Ray at arc-length `position` in [0, length]."""
        return self._ray(*self._index.locate(position))

    def get_location_extended(self, position: float):
        """Ray at any finite `position`; outside [0, length] extrapolates linearly."""
        return self._ray(*self._index.locate_extended(position))

    def get_location_fraction(self, fraction: float, tolerance: Optional[float] = None):
        return base.get_location_fraction(self, fraction, tolerance)

    def get_location_fraction_extended(self, fraction: float):
        return base.get_location_fraction_extended(self, fraction)

    # --------------------
    # Derived lines
    # --------------------
    def extract(self, start: float, end: float):
        """
        Sub-line between arc-length positions `start` and `end`.

        Raises
        ------
        InvalidInputError
            Bad interval (NaN, start < 0, start >= end, end > length).
        DegenerateResultError
            The interval is too short to form a valid line.
        """
        pts = extract_points(self._index, start, end)
        try:
            return type(self)(pts)
        except InvalidInputError as e:
            raise DegenerateResultError(
                "Interval too short to extract a line: {}".format(e),
                {"start": start, "end": end},
            )

    def extract_fractional(self, start: float, end: float):
        return base.extract_fractional(self, start, end)

    def truncate(self, position: float):
        """Sub-line [0, position]; the line itself when position == length."""
        pts = truncate_points(self._index, position)
        if pts is None:
            return self
        return type(self)(pts)

    def reverse(self):
        return base.reverse(self)

    def noise_filtered_line(self, noise_level: float):
        """
        Line without points closer than `noise_level` to their retained predecessor.
        First and last point are always kept.
        """
        pts = noise_filter_points(self.points, noise_level)
        if pts is None:
            return self
        logger.debug(
            "[PolyLine] noise filter %.6g: %d -> %d points", noise_level, self.size, pts.shape[0]
        )
        return type(self)(pts)

    @classmethod
    def create_and_clean(cls, points):
        """Build a line after dropping consecutive duplicate points (input is not modified)."""
        pts = _as_points(points, cls._dim)
        return cls(drop_consecutive_duplicates(pts))

    @classmethod
    def concatenate(cls, *lines, tolerance: float = 0.0):
        """
        Join lines end to start. The first point of every following line is dropped, so
        with a positive tolerance the joint takes the end point of the preceding line.

        Raises
        ------
        InvalidInputError
            No lines, or a gap larger than `tolerance` between consecutive lines.
        """
        if not lines:
            raise InvalidInputError("Empty argument list")
        if len(lines) == 1:
            return lines[0]
        for k in range(1, len(lines)):
            gap = float(np.linalg.norm(lines[k - 1].points[-1] - lines[k].points[0]))
            if gap > tolerance:
                raise InvalidInputError(
                    "Lines are not connected: line {} ends {} from the start of line {}".format(
                        k - 1, gap, k
                    ),
                    {"gap": gap, "tolerance": tolerance},
                )
        stacked = [lines[0].points] + [line.points[1:] for line in lines[1:]]
        return cls(np.vstack(stacked))

    # --------------------
    # Text output
    # --------------------
    def to_excel(self) -> str:
        """Tab-separated coordinates, one point per line."""
        return to_tsv(self)

    # --------------------
    # Value semantics
    # --------------------
    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return np.array_equal(self.points, other.points)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.points.tobytes()))

    def __repr__(self) -> str:
        inner = ", ".join("(" + ", ".join("{:g}".format(v) for v in row) + ")" for row in self.points)
        return "{}([{}])".format(type(self).__name__, inner)


class PolyLine2d(PolyLine):
    """Polyline in the XY plane; hands out Point2d and Ray2d."""

    _dim = 2

    def _point(self, row) -> Point2d:
        return Point2d(row[0], row[1])

    def _ray(self, row, direction) -> Ray2d:
        return Ray2d.towards(row, direction[0], direction[1])

    @classmethod
    def from_xy(cls, x, y) -> "PolyLine2d":
        """Build from separate x and y coordinate arrays of equal length."""
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        if x.ndim != 1 or x.shape != y.shape:
            raise InvalidInputError(
                "x and y must be 1-D arrays of equal length",
                {"x_shape": x.shape, "y_shape": y.shape},
            )
        return cls(np.column_stack((x, y)))

    def to_plot(self) -> str:
        """Compact path string: 'M x,y L x,y ...' with 3 decimals."""
        parts = []
        for k, (x, y) in enumerate(self.points):
            parts.append("{}{:.3f},{:.3f}".format("M" if k == 0 else " L", x, y))
        return "".join(parts) + "\n"


class PolyLine3d(PolyLine):
    """Polyline in 3D space; hands out Point3d and Ray3d."""

    _dim = 3

    def _point(self, row) -> Point3d:
        return Point3d(row[0], row[1], row[2])

    def _ray(self, row, direction) -> Ray3d:
        return Ray3d.towards(row, direction[0], direction[1], direction[2])

    def get_z(self, i: int) -> float:
        self._check_index(i)
        return float(self.points[i, 2])

    def project(self) -> PolyLine2d:
        """
        Projection onto the XY plane, consecutive duplicates removed.

        Raises
        ------
        DegenerateResultError
            Fewer than 2 distinct projected points (e.g. a vertical line).
        """
        xy = drop_consecutive_duplicates(np.array(self.points[:, :2]))
        if xy.shape[0] < 2:
            raise DegenerateResultError("Projection of line onto XY plane is a single point")
        return PolyLine2d(xy)
