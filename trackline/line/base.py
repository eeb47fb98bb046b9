# -*- coding: utf-8 -*-
# Trackline/trackline/line/base.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose
-------
Capability interface shared by the 2D and 3D polylines ("ordered point sequence with
arc-length queries") and the behaviour derived from it as free functions: reversal and
the fractional position / extraction wrappers.

Main Tasks
----------
    1. `ArcLengthLine` protocol: points, length, get_location*, extract.
    2. `reverse`, `extract_fractional`.
    3. `get_location_fraction` (strict or tolerance-clamped), `get_location_fraction_extended`.

Notes
-----
- Concrete line classes must be constructible from an (N, d) array (used by `reverse`).
- The line methods of the same names delegate here.
"""

import math
from typing import Optional, Protocol, runtime_checkable

import numpy as np

from ..errors import InvalidInputError, OutOfRangeError

__all__ = [
    "ArcLengthLine",
    "reverse",
    "extract_fractional",
    "get_location_fraction",
    "get_location_fraction_extended",
]


@runtime_checkable
class ArcLengthLine(Protocol):
    """Structural type of a polyline with arc-length queries."""

    @property
    def points(self) -> np.ndarray: ...

    @property
    def length(self) -> float: ...

    def get_location(self, position: float): ...

    def get_location_extended(self, position: float): ...

    def extract(self, start: float, end: float): ...


def reverse(line):
    """Same points, opposite order (a new line of the same type)."""
    return type(line)(line.points[::-1])


def extract_fractional(line, start: float, end: float):
    """
    Sub-line between fractions `start` and `end` of the length.

    Raises
    ------
    InvalidInputError
        NaN bounds or not 0 <= start < end <= 1.
    """
    if math.isnan(start) or math.isnan(end) or start < 0.0 or start >= end or end > 1.0:
        raise InvalidInputError(
            "Bad fractional interval ({}, {})".format(start, end), {"start": start, "end": end}
        )
    length = line.length
    return line.extract(start * length, end * length)


def get_location_fraction(line, fraction: float, tolerance: Optional[float] = None):
    """
    Location at `fraction` of the length.

    Without `tolerance` the fraction must lie in [0, 1]. With a tolerance, values within
    `tolerance` of that range are clamped into it; anything further out is rejected.

    Raises
    ------
    OutOfRangeError
        Fraction NaN or outside the (tolerated) range.
    """
    if math.isnan(fraction):
        raise OutOfRangeError("Fraction is NaN")
    if tolerance is None:
        if fraction < 0.0 or fraction > 1.0:
            raise OutOfRangeError("Fraction {} not in [0, 1]".format(fraction), {"fraction": fraction})
    else:
        if fraction < -tolerance or fraction > 1.0 + tolerance:
            raise OutOfRangeError(
                "Fraction {} not in [0, 1] within tolerance {}".format(fraction, tolerance),
                {"fraction": fraction, "tolerance": tolerance},
            )
        fraction = min(max(fraction, 0.0), 1.0)
    return line.get_location(fraction * line.length)


def get_location_fraction_extended(line, fraction: float):
    """Location at `fraction` of the length; fractions outside [0, 1] extrapolate."""
    return line.get_location_extended(fraction * line.length)
