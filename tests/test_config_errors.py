import dataclasses

import numpy as np
import pytest

from trackline.config import (
    DEFAULT_OFFSET_PARAMETERS,
    OffsetParameters,
    validate_offset_parameters,
)
from trackline.errors import (
    DegenerateResultError,
    GeometryError,
    InternalInconsistencyError,
    InvalidInputError,
    OutOfRangeError,
)
from trackline.line.polyline import PolyLine2d
from trackline.ops.arclength import ArcLengthIndex


# --------------------
# config
# --------------------
def test_defaults():
    p = DEFAULT_OFFSET_PARAMETERS
    assert p.circle_precision == 0.001
    assert p.offset_minimum_filter_value == 0.001
    assert p.offset_maximum_filter_value == 0.1
    assert p.offset_filter_ratio == 10
    assert p.minimum_offset == 0.00001
    assert OffsetParameters() == p


@pytest.mark.parametrize("field", [
    "circle_precision", "offset_minimum_filter_value", "offset_maximum_filter_value",
    "offset_filter_ratio", "minimum_offset",
])
@pytest.mark.parametrize("value", [0.0, -1.0, float("nan"), "abc"])
def test_fields_must_be_positive_numbers(field, value):
    with pytest.raises(InvalidInputError):
        OffsetParameters(**{field: value})


def test_minimum_filter_below_maximum():
    with pytest.raises(InvalidInputError) as exc:
        OffsetParameters(offset_minimum_filter_value=0.2, offset_maximum_filter_value=0.1)
    assert "offset_maximum_filter_value" in str(exc.value)


def test_parameters_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_OFFSET_PARAMETERS.circle_precision = 1.0
    validate_offset_parameters(DEFAULT_OFFSET_PARAMETERS)


def test_noise_level_is_clamped():
    p = DEFAULT_OFFSET_PARAMETERS
    assert p.noise_level(0.5) == pytest.approx(0.05)
    assert p.noise_level(-5.0) == 0.1
    assert p.noise_level(0.001) == 0.001


# --------------------
# errors
# --------------------
def test_error_hierarchy():
    for cls in (InvalidInputError, OutOfRangeError, DegenerateResultError):
        assert issubclass(cls, GeometryError)
        assert issubclass(cls, ValueError)
    assert issubclass(InternalInconsistencyError, GeometryError)
    assert issubclass(InternalInconsistencyError, RuntimeError)


def test_error_context_suffix():
    err = InvalidInputError("bad input", {"b": 2, "a": "x"})
    assert str(err) == "bad input | a='x', b=2"
    assert err.context == {"a": "x", "b": 2}
    assert str(OutOfRangeError("plain")) == "plain"


def test_error_context_is_truncated():
    err = GeometryError("long", {"v": "y" * 200})
    suffix = str(err).split("v=", 1)[1]
    assert len(suffix) == 120 and suffix.endswith("...")


def test_find_outside_line_is_out_of_range():
    line = PolyLine2d([(0, 0), (3, 0), (3, 4)])
    for position in (-5.0, 100.0, 7.0 + 1e-9, float("nan")):
        with pytest.raises(OutOfRangeError):
            line.find(position)
    assert line.find(7.0) == 1


def test_find_on_corrupted_table_is_internal_inconsistency():
    index = ArcLengthIndex(np.array([(0, 0), (3, 0), (3, 4)], dtype=float))
    index.lengths = np.array([0.0, float("nan"), 7.0])
    with pytest.raises(InternalInconsistencyError):
        index.find(1.0)
