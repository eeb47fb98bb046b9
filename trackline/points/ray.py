# -*- coding: utf-8 -*-
# Trackline/trackline/points/ray.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose:
--------
Points with a direction ("rays"), returned by polyline location queries.

Conventions:
------------
- `dir_z`: rotation around the Z axis, i.e. angle from +X in the XY plane (radians).
- `dir_y`: angle from +Z towards the XY plane (3D only); pi/2 means horizontal.

Notes:
------
- Ray3d.epsilon_equals compares dir_y and dir_z independently after wrapping each
  difference into [-pi, pi). The pair (-dir_y, dir_z + pi) describes the same
  direction and is NOT reported equal. Known limitation, kept until dedicated tests
  pin down the intended behaviour.
"""

import math
from dataclasses import dataclass

from ..errors import InvalidInputError
from .point import Point2d, Point3d, _finite

__all__ = ["normalize_around_zero", "Ray2d", "Ray3d"]


def normalize_around_zero(angle: float) -> float:
    """Wrap an angle into [-pi, pi)."""
    return (angle + math.pi) % (2.0 * math.pi) - math.pi


def _check_epsilons(epsilon_coordinate: float, epsilon_rotation: float) -> None:
    for name, eps in (("epsilon_coordinate", epsilon_coordinate), ("epsilon_rotation", epsilon_rotation)):
        if math.isnan(eps) or eps < 0.0:
            raise InvalidInputError("{} must be a non-negative number, got {}".format(name, eps))


def _direction(name: str, value) -> float:
    fval = float(value)
    if math.isnan(fval):
        raise InvalidInputError("NaN direction {}".format(name))
    return fval


@dataclass(frozen=True)
class Ray2d:
    """Point in the XY plane with heading `dir_z`."""
    x: float
    y: float
    dir_z: float

    def __post_init__(self):
        object.__setattr__(self, "x", _finite("x", self.x))
        object.__setattr__(self, "y", _finite("y", self.y))
        object.__setattr__(self, "dir_z", _direction("dir_z", self.dir_z))

    @classmethod
    def towards(cls, point, dx: float, dy: float) -> "Ray2d":
        """Ray at `point` heading along the vector (dx, dy)."""
        return cls(point[0], point[1], math.atan2(dy, dx))

    @property
    def point(self) -> Point2d:
        return Point2d(self.x, self.y)

    def epsilon_equals(self, other: "Ray2d", epsilon_coordinate: float, epsilon_rotation: float) -> bool:
        _check_epsilons(epsilon_coordinate, epsilon_rotation)
        if abs(self.x - other.x) > epsilon_coordinate or abs(self.y - other.y) > epsilon_coordinate:
            return False
        return abs(normalize_around_zero(self.dir_z - other.dir_z)) <= epsilon_rotation


@dataclass(frozen=True)
class Ray3d:
    """Point in 3D space with direction angles (dir_y, dir_z)."""
    x: float
    y: float
    z: float
    dir_y: float
    dir_z: float

    def __post_init__(self):
        object.__setattr__(self, "x", _finite("x", self.x))
        object.__setattr__(self, "y", _finite("y", self.y))
        object.__setattr__(self, "z", _finite("z", self.z))
        object.__setattr__(self, "dir_y", _direction("dir_y", self.dir_y))
        object.__setattr__(self, "dir_z", _direction("dir_z", self.dir_z))

    @classmethod
    def towards(cls, point, dx: float, dy: float, dz: float) -> "Ray3d":
        return cls(
            point[0], point[1], point[2],
            math.atan2(math.hypot(dx, dy), dz),
            math.atan2(dy, dx),
        )

    @property
    def point(self) -> Point3d:
        return Point3d(self.x, self.y, self.z)

    def epsilon_equals(self, other: "Ray3d", epsilon_coordinate: float, epsilon_rotation: float) -> bool:
        """Component-wise comparison; see module notes for the angle limitation."""
        _check_epsilons(epsilon_coordinate, epsilon_rotation)
        for a, b in ((self.x, other.x), (self.y, other.y), (self.z, other.z)):
            if abs(a - b) > epsilon_coordinate:
                return False
        if abs(normalize_around_zero(self.dir_y - other.dir_y)) > epsilon_rotation:
            return False
        return abs(normalize_around_zero(self.dir_z - other.dir_z)) <= epsilon_rotation
