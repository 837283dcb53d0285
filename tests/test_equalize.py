from __future__ import annotations

from itertools import accumulate

import numpy as np
import pytest

from bezmorph.modeling.curves import estimate_length
from bezmorph.modeling.drawing2d import Bezier2D, Shape, make_circle, make_point
from bezmorph.modeling.equalize import distribute_points, equalize
from bezmorph.validation import CannotRemovePointsError, InsufficientPointsError, InvalidParameterError


def _blob() -> Shape:
    return Shape(
        (
            make_point(0.6, 0.2, -10, 0.1, -45, 0.03, scale=100.0),
            make_point(0.7, 0.17, 180, 0.03, 0, 0.03, scale=100.0),
            make_point(0.8, 0.2, -135, 0.03, 170, 0.1, scale=100.0),
        )
    )


def _corner_indices(shape: Shape, count: int) -> list[int]:
    n = len(shape)
    lengths = [estimate_length(shape[i], shape[(i + 1) % n]) for i in range(n)]
    divisors = distribute_points(lengths, count - n)
    return [0] + list(accumulate(divisors))[:-1]


def test_distribute_points_even_lengths():
    assert distribute_points([1.0, 1.0, 1.0, 1.0], 4) == [2, 2, 2, 2]


def test_distribute_points_favours_densest_segment():
    assert distribute_points([3.0, 1.0], 2) == [3, 1]
    assert distribute_points([10.0, 1.0, 4.0], 3) == [3, 1, 2]


def test_distribute_points_ties_go_to_longer_segment():
    # After one split both densities are 1.0; the raw length breaks the tie.
    assert distribute_points([2.0, 1.0], 2) == [3, 1]
    assert distribute_points([1.0, 2.0], 2) == [1, 3]


def test_distribute_points_no_extra():
    assert distribute_points([5.0, 2.0, 1.0], 0) == [1, 1, 1]


def test_distribute_points_rejects_negative_extra():
    with pytest.raises(InvalidParameterError):
        distribute_points([1.0, 1.0, 1.0], -1)


def test_equalize_square_to_eight(unit_square: Shape):
    result = equalize(8, unit_square)
    assert len(result) == 8
    for i, corner in enumerate(unit_square):
        assert np.allclose(result[2 * i].xy, corner.xy)
    expected_mids = [(0.5, 0.0), (1.0, 0.5), (0.5, 1.0), (0.0, 0.5)]
    for i, mid in enumerate(expected_mids):
        assert np.allclose(result[2 * i + 1].xy, mid)


def test_equalize_square_midpoints_lie_on_edges(unit_square: Shape):
    result = equalize(8, unit_square)
    for i in range(4):
        start = result[2 * i].xy
        mid = result[2 * i + 1].xy
        end = result[(2 * i + 2) % 8].xy
        cross = (end - start)[0] * (mid - start)[1] - (end - start)[1] * (mid - start)[0]
        assert cross == pytest.approx(0.0, abs=1e-12)
        assert 0.0 < np.dot(mid - start, end - start) < np.dot(end - start, end - start)


@pytest.mark.parametrize("count", [3, 4, 7, 12, 25])
def test_equalize_returns_requested_count(count: int):
    assert len(equalize(count, _blob())) == count


@pytest.mark.parametrize("count", [5, 11, 16])
def test_equalize_preserves_original_points(count: int):
    shape = make_circle(radius=10.0, center=(3.0, -2.0), points=4)
    result = equalize(count, shape)
    for idx, corner in zip(_corner_indices(shape, count), shape):
        kept = result[idx]
        assert np.allclose(kept.xy, corner.xy)
        assert kept.handle_in.angle == corner.handle_in.angle
        assert kept.handle_out.angle == corner.handle_out.angle


def test_equalize_new_points_lie_on_original_segments():
    shape = _blob()
    count = 10
    n = len(shape)
    lengths = [estimate_length(shape[i], shape[(i + 1) % n]) for i in range(n)]
    divisors = distribute_points(lengths, count - n)
    result = equalize(count, shape)

    idx = 0
    for i, divisor in enumerate(divisors):
        a, b = shape[i], shape[(i + 1) % n]
        curve = Bezier2D(p0=a.xy, p1=a.handle_out_tip, p2=b.handle_in_tip, p3=b.xy)
        for k in range(1, divisor):
            assert np.allclose(result[idx + k].xy, curve.point_at(k / divisor))
        idx += divisor


def test_equalize_stitches_closing_handle():
    shape = make_circle(radius=10.0, points=4)
    result = equalize(8, shape)
    first = result[0]
    # Segment 3 (last -> first) was halved, so the first point's incoming handle halves too.
    assert first.handle_in.length == pytest.approx(shape[0].handle_in.length / 2)
    assert first.handle_out.length == pytest.approx(shape[0].handle_out.length / 2)


def test_equalize_outline_unchanged():
    shape = make_circle(radius=10.0, points=4)
    result = equalize(9, shape)
    original = shape.sample(bezier_samples=400)
    resampled = result.sample(bezier_samples=60)
    for point in resampled:
        nearest = np.min(np.linalg.norm(original - point, axis=1))
        assert nearest < 0.05


def test_equalize_same_count_returns_equal_shape(unit_square: Shape):
    assert equalize(4, unit_square) == unit_square
    blob = _blob()
    assert equalize(3, blob) == blob


def test_equalize_does_not_mutate_input():
    blob = _blob()
    snapshot = Shape(tuple(blob))
    equalize(9, blob)
    assert blob == snapshot


def test_equalize_accepts_point_sequence(unit_square: Shape):
    result = equalize(6, list(unit_square))
    assert isinstance(result, Shape)
    assert len(result) == 6


def test_equalize_cannot_remove_points(unit_square: Shape):
    with pytest.raises(CannotRemovePointsError):
        equalize(3, unit_square)


def test_equalize_requires_closed_shape():
    with pytest.raises(InsufficientPointsError):
        equalize(5, Shape.from_coords([(0, 0), (1, 0)]))


@pytest.mark.parametrize("count", [7.9, 6.5])
def test_equalize_rejects_fractional_count(unit_square: Shape, count: float):
    with pytest.raises(InvalidParameterError):
        equalize(count, unit_square)


def test_equalize_accepts_integral_float(unit_square: Shape):
    assert len(equalize(8.0, unit_square)) == 8
