# -*- coding: utf-8 -*-
# Trackline/trackline/points/__init__.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Points Subfolder:
-----------------
- point: immutable finite 2D/3D points (Point2d, Point3d).
- ray:   points with direction (Ray2d, Ray3d) and angle wrapping.
"""

from .point import Point2d, Point3d
from .ray import Ray2d, Ray3d, normalize_around_zero

__all__ = ["Point2d", "Point3d", "Ray2d", "Ray3d", "normalize_around_zero"]
