import numpy as np
import pytest

from trackline.errors import DegenerateResultError, InvalidInputError
from trackline.line.polyline import PolyLine2d, PolyLine3d
from trackline.ops.arclength import ArcLengthIndex
from trackline.ops.subline import drop_consecutive_duplicates, extract_points


@pytest.fixture
def corner():
    return PolyLine2d([(0, 0), (3, 0), (3, 4)])


def _coords(line):
    return line.points.tolist()


# --------------------
# extract
# --------------------
def test_extract_whole_line_is_equal(corner):
    assert corner.extract(0.0, corner.length) == corner
    assert corner.extract_fractional(0.0, 1.0) == corner


def test_extract_across_vertex(corner):
    sub = corner.extract(1.0, 5.0)
    np.testing.assert_allclose(sub.points, [(1, 0), (3, 0), (3, 2)])
    assert sub.length == pytest.approx(4.0)


def test_extract_starting_on_vertex(corner):
    assert _coords(corner.extract(3.0, 7.0)) == [[3, 0], [3, 4]]


def test_extract_within_one_segment(corner):
    np.testing.assert_allclose(corner.extract(0.5, 1.5).points, [(0.5, 0), (1.5, 0)])


def test_extract_ending_on_vertex():
    line = PolyLine2d([(0, 0), (1, 0), (2, 0), (3, 0)])
    assert _coords(line.extract(0.5, 2.0)) == [[0.5, 0], [1, 0], [2, 0]]


def test_extract_fractional(corner):
    np.testing.assert_allclose(corner.extract_fractional(0.5, 1.0).points, [(3, 0.5), (3, 4)])


@pytest.mark.parametrize("start,end", [
    (-1.0, 2.0), (2.0, 2.0), (3.0, 2.0), (0.0, 7.5), (float("nan"), 1.0), (0.0, float("nan")),
])
def test_extract_bad_interval(corner, start, end):
    with pytest.raises(InvalidInputError):
        corner.extract(start, end)


@pytest.mark.parametrize("start,end", [(0.5, 0.5), (-0.1, 0.5), (0.0, 1.1)])
def test_extract_fractional_bad_interval(corner, start, end):
    with pytest.raises(InvalidInputError):
        corner.extract_fractional(start, end)


def test_extract_too_short_is_degenerate():
    # at x = 2**53 the float spacing is 2, so both cut points round onto the start vertex
    far = 2.0 ** 53
    line = PolyLine2d([(far, 0.0), (far + 64.0, 0.0)])
    with pytest.raises(DegenerateResultError):
        line.extract(0.25, 0.5)


def test_extract_points_is_dimension_agnostic():
    index = ArcLengthIndex(np.array([(0, 0, 0), (0, 0, 2), (0, 2, 2)], dtype=float))
    np.testing.assert_allclose(extract_points(index, 1.0, 3.0), [(0, 0, 1), (0, 0, 2), (0, 1, 2)])


def test_extract_3d():
    line = PolyLine3d([(0, 0, 0), (0, 0, 2), (0, 2, 2)])
    assert isinstance(line.extract(1.0, 3.0), PolyLine3d)


# --------------------
# truncate
# --------------------
def test_truncate_full_length_returns_same_object(corner):
    assert corner.truncate(corner.length) is corner


def test_truncate_inside_segment(corner):
    assert _coords(corner.truncate(5.0)) == [[0, 0], [3, 0], [3, 2]]
    assert _coords(corner.truncate(1.5)) == [[0, 0], [1.5, 0]]


def test_truncate_on_vertex_adds_no_extra_point(corner):
    assert _coords(corner.truncate(3.0)) == [[0, 0], [3, 0]]
    line = PolyLine2d([(0, 0), (1, 0), (2, 0), (3, 0)])
    assert _coords(line.truncate(2.0)) == [[0, 0], [1, 0], [2, 0]]


@pytest.mark.parametrize("position", [0.0, -1.0, 7.5, float("nan")])
def test_truncate_bad_position(corner, position):
    with pytest.raises(InvalidInputError):
        corner.truncate(position)


# --------------------
# noise filter
# --------------------
def test_noise_filter_drops_close_points():
    line = PolyLine2d([(0, 0), (1, 0), (1.05, 0), (2, 0)])
    assert _coords(line.noise_filtered_line(0.1)) == [[0, 0], [1, 0], [2, 0]]


def test_noise_filter_keeps_exact_last_point():
    line = PolyLine2d([(0, 0), (1, 0), (2, 0), (2.05, 0)])
    assert _coords(line.noise_filtered_line(0.1)) == [[0, 0], [1, 0], [2.05, 0]]


def test_noise_filter_reinserts_second_point_for_closed_line():
    line = PolyLine2d([(0, 0), (0.01, 0), (0.01, 0.01), (0, 0)])
    assert _coords(line.noise_filtered_line(1.0)) == [[0, 0], [0.01, 0], [0, 0]]


def test_noise_filter_returns_same_object_when_nothing_changes(corner):
    assert corner.noise_filtered_line(0.5) is corner
    two = PolyLine2d([(0, 0), (0.01, 0)])
    assert two.noise_filtered_line(1.0) is two


# --------------------
# helpers
# --------------------
def test_drop_consecutive_duplicates_with_tolerance():
    pts = np.array([(0, 0), (0, 1e-9), (1, 0), (1, 0), (0, 0)], dtype=float)
    np.testing.assert_array_equal(drop_consecutive_duplicates(pts, tol=1e-6), [(0, 0), (1, 0), (0, 0)])
    assert drop_consecutive_duplicates(pts).shape == (4, 2)
