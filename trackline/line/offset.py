# -*- coding: utf-8 -*-
# Trackline/trackline/line/offset.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose
-------
Offset-line contract: a 2D polyline displaced sideways by a signed distance (positive is
to the left). Parameter handling, the minimum-offset short circuit and the noise
pre-filter are done here; the curve itself is built by shapely's `offset_curve`.

Main Tasks
----------
    1. Validate the offset and the OffsetParameters.
    2. Noise-filter the reference line with |offset| / ratio clamped to [min, max].
    3. Map `circle_precision` to shapely quadrant segments and offset with round joins.
    4. Wrap the result back into a PolyLine2d.
"""

import logging
import math
from typing import Optional

from shapely.geometry import LineString

from ..config import DEFAULT_OFFSET_PARAMETERS, OffsetParameters
from ..errors import DegenerateResultError, InvalidInputError
from .polyline import PolyLine2d

logger = logging.getLogger(__name__)

__all__ = ["quadrant_segments", "offset_line"]

_MAX_QUADRANT_SEGMENTS = 1024


def quadrant_segments(radius: float, circle_precision: float) -> int:
    """
    Number of chords per quarter circle so that a chord deviates at most
    `circle_precision` from an arc of `radius`.
    """
    if circle_precision >= radius:
        return 1
    step = 2.0 * math.acos(1.0 - circle_precision / radius)
    return int(min(_MAX_QUADRANT_SEGMENTS, max(1, math.ceil((math.pi / 2.0) / step))))


def offset_line(line, offset: float, params: Optional[OffsetParameters] = None):
    """
    Line at signed distance `offset` from `line` (positive: left of the direction of travel).

    Parameters
    ----------
    line : PolyLine2d
        Reference line. 3D lines must be projected first.
    offset : float
        Signed offset distance.
    params : OffsetParameters, optional
        Defaults to DEFAULT_OFFSET_PARAMETERS.

    Returns
    -------
    PolyLine2d
        The offset line, or `line` itself when |offset| < params.minimum_offset.

    Raises
    ------
    InvalidInputError
        NaN offset, a non-2D line or a params object of the wrong type.
    DegenerateResultError
        The offset curve is empty or falls apart into several pieces.
    """
    if params is None:
        params = DEFAULT_OFFSET_PARAMETERS
    if not isinstance(params, OffsetParameters):
        raise InvalidInputError(
            "params must be OffsetParameters, got {}".format(type(params).__name__)
        )
    if not isinstance(line, PolyLine2d):
        raise InvalidInputError(
            "Offset is defined for PolyLine2d only, got {}".format(type(line).__name__)
        )
    if math.isnan(offset):
        raise InvalidInputError("Offset is NaN")
    if abs(offset) < params.minimum_offset:
        return line

    reference = line.noise_filtered_line(params.noise_level(offset))
    segs = quadrant_segments(abs(offset), params.circle_precision)
    curve = LineString(reference.points).offset_curve(offset, quad_segs=segs, join_style="round")
    if curve.is_empty or curve.geom_type != "LineString":
        raise DegenerateResultError(
            "Offset curve is not a single line",
            {"offset": offset, "geom_type": curve.geom_type},
        )
    logger.debug(
        "[offset_line] offset=%.6g quad_segs=%d: %d -> %d points",
        offset, segs, reference.size, len(curve.coords),
    )
    return PolyLine2d.create_and_clean(list(curve.coords))
