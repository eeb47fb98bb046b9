# -*- coding: utf-8 -*-
# Trackline/trackline/points/point.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose:
--------
Immutable finite-coordinate points in 2D and 3D. They are the value type handed out by
polylines and consumed by the hull algorithms.

Main Tasks:
-----------
    1. Reject NaN/inf coordinates at construction (InvalidInputError).
    2. Exact coordinate equality and hashing (dataclass semantics).
    3. Distance, linear interpolation and indexable access (p[0], p[1]).
"""

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from ..errors import InvalidInputError

__all__ = ["Point2d", "Point3d"]


def _finite(name: str, value) -> float:
    try:
        fval = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError("Non-numeric coordinate {}: {!r}".format(name, value))
    if not math.isfinite(fval):
        raise InvalidInputError("Non-finite coordinate {}".format(name), {name: fval})
    return fval


@dataclass(frozen=True)
class Point2d:
    """Point in the XY plane."""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", _finite("x", self.x))
        object.__setattr__(self, "y", _finite("y", self.y))

    def __getitem__(self, i: int) -> float:
        return self.as_tuple()[i]

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return 2

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def distance(self, other: "Point2d") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def interpolate(self, other: "Point2d", fraction: float) -> "Point2d":
        """Point at `fraction` of the way to `other` (0 -> self, 1 -> other)."""
        if fraction == 0.0:
            return self
        if fraction == 1.0:
            return other
        return Point2d(
            (1.0 - fraction) * self.x + fraction * other.x,
            (1.0 - fraction) * self.y + fraction * other.y,
        )

    def get_points(self) -> Iterator["Point2d"]:
        """A point is a shape of one point (hull input)."""
        yield self


@dataclass(frozen=True)
class Point3d:
    """Point in 3D space."""
    x: float
    y: float
    z: float

    def __post_init__(self):
        object.__setattr__(self, "x", _finite("x", self.x))
        object.__setattr__(self, "y", _finite("y", self.y))
        object.__setattr__(self, "z", _finite("z", self.z))

    def __getitem__(self, i: int) -> float:
        return self.as_tuple()[i]

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return 3

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def distance(self, other: "Point3d") -> float:
        return math.sqrt(
            (other.x - self.x) ** 2 + (other.y - self.y) ** 2 + (other.z - self.z) ** 2
        )

    def interpolate(self, other: "Point3d", fraction: float) -> "Point3d":
        if fraction == 0.0:
            return self
        if fraction == 1.0:
            return other
        return Point3d(
            (1.0 - fraction) * self.x + fraction * other.x,
            (1.0 - fraction) * self.y + fraction * other.y,
            (1.0 - fraction) * self.z + fraction * other.z,
        )

    def project(self) -> Point2d:
        """Drop the z coordinate."""
        return Point2d(self.x, self.y)

    def get_points(self) -> Iterator["Point3d"]:
        yield self
