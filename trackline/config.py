# -*- coding: utf-8 -*-
# Trackline/trackline/config.py

"""
Project: Trackline
Author: Erfan Vaezi
Date: 10/19/2026

Purpose
-------
Named parameter set for offset-line construction. Replaces a family of overloads with
one frozen dataclass carrying the defaults, validated against a `RANGES` table.

Main Tasks
----------
    1. Hold the default constants for offset construction.
    2. Expose `OffsetParameters` (frozen) and `DEFAULT_OFFSET_PARAMETERS`.
    3. Validate numeric fields (non-NaN, strictly positive) and the cross-field
       constraint minimum filter < maximum filter.
"""

import math
from dataclasses import dataclass, fields
from .errors import InvalidInputError

__all__ = [
    "DEFAULT_CIRCLE_PRECISION",
    "DEFAULT_OFFSET_MINIMUM_FILTER_VALUE",
    "DEFAULT_OFFSET_MAXIMUM_FILTER_VALUE",
    "DEFAULT_OFFSET_FILTER_RATIO",
    "DEFAULT_OFFSET_PRECISION",
    "RANGES",
    "OffsetParameters",
    "DEFAULT_OFFSET_PARAMETERS",
    "validate_offset_parameters",
]

# --------------------------
# Defaults
# --------------------------
DEFAULT_CIRCLE_PRECISION = 0.001
DEFAULT_OFFSET_MINIMUM_FILTER_VALUE = 0.001
DEFAULT_OFFSET_MAXIMUM_FILTER_VALUE = 0.1
DEFAULT_OFFSET_FILTER_RATIO = 10.0
DEFAULT_OFFSET_PRECISION = 0.00001

# (min, max, inclusive); all strictly positive
RANGES = {
    "circle_precision": (0.0, math.inf, False),
    "offset_minimum_filter_value": (0.0, math.inf, False),
    "offset_maximum_filter_value": (0.0, math.inf, False),
    "offset_filter_ratio": (0.0, math.inf, False),
    "minimum_offset": (0.0, math.inf, False),
}


@dataclass(frozen=True)
class OffsetParameters:
    """
    Parameters of the offset-line contract.

    Attributes
    ----------
    circle_precision : float
        Maximum deviation of arc approximations around convex corners.
    offset_minimum_filter_value : float
        Lower bound of the noise level used to pre-filter the reference line.
    offset_maximum_filter_value : float
        Upper bound of that noise level.
    offset_filter_ratio : float
        The noise level is |offset| / ratio, clamped into [min, max].
    minimum_offset : float
        Offsets with a smaller magnitude return the reference line unchanged.
    """
    circle_precision: float = DEFAULT_CIRCLE_PRECISION
    offset_minimum_filter_value: float = DEFAULT_OFFSET_MINIMUM_FILTER_VALUE
    offset_maximum_filter_value: float = DEFAULT_OFFSET_MAXIMUM_FILTER_VALUE
    offset_filter_ratio: float = DEFAULT_OFFSET_FILTER_RATIO
    minimum_offset: float = DEFAULT_OFFSET_PRECISION

    def __post_init__(self):
        validate_offset_parameters(self)

    def noise_level(self, offset: float) -> float:
        """Noise level used to filter the reference line before offsetting by `offset`."""
        return max(
            self.offset_minimum_filter_value,
            min(abs(offset) / self.offset_filter_ratio, self.offset_maximum_filter_value),
        )


def _check_range(key: str, val) -> None:
    lo, hi, inclusive = RANGES[key]
    try:
        fval = float(val)
    except (TypeError, ValueError):
        raise InvalidInputError("Non-numeric value for {k}: {v!r}".format(k=key, v=val))
    if math.isnan(fval):
        raise InvalidInputError("NaN value for {k}".format(k=key), {"key": key})
    ok = (lo <= fval <= hi) if inclusive else (lo < fval < hi)
    if not ok:
        raise InvalidInputError(
            "Out of range for {k}: {v}".format(k=key, v=fval),
            {"key": key, "value": fval, "min": lo, "max": hi, "inclusive": inclusive},
        )


def validate_offset_parameters(params: OffsetParameters) -> None:
    """
    Validate an OffsetParameters instance.

    Raises
    ------
    InvalidInputError
        - If a field is NaN, non-numeric or not strictly positive.
        - If offset_minimum_filter_value >= offset_maximum_filter_value.
    """
    for f in fields(params):
        _check_range(f.name, getattr(params, f.name))
    if params.offset_minimum_filter_value >= params.offset_maximum_filter_value:
        raise InvalidInputError(
            "offset_minimum_filter_value must be smaller than offset_maximum_filter_value",
            {
                "offset_minimum_filter_value": params.offset_minimum_filter_value,
                "offset_maximum_filter_value": params.offset_maximum_filter_value,
            },
        )


DEFAULT_OFFSET_PARAMETERS = OffsetParameters()
