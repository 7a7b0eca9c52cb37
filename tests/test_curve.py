import math

from hypothesis import given
from hypothesis import strategies as st
import numpy as np
from numpy.testing import assert_allclose
import pytest

from plot_viewer.curve import growing_sine, inclusive_stride, sample_curve
from plot_viewer.transform import AffineTransform, plot_transform
from plot_viewer.utils.geometry import Rect, Size2D

FULL = Rect.from_values(0.0, -1.0, 2.0, 2.0)


def test_growing_sine_values() -> None:
    xs = np.array([0.0, 0.1, 1.0, 1.1])
    expected = [math.sin(x * math.pi * 5.0) * x / 2.0 for x in xs]
    assert_allclose(growing_sine(xs), expected, atol=1e-15)
    assert growing_sine(np.array([0.1]))[0] == pytest.approx(0.05)


def test_inclusive_stride_exact_multiple() -> None:
    xs = inclusive_stride(0.0, 2.0, 0.005)
    assert xs.size == 401
    assert xs[0] == 0.0
    assert xs[-1] == 2.0


def test_inclusive_stride_appends_short_final_step() -> None:
    xs = inclusive_stride(0.0, 1.0, 0.3)
    assert_allclose(xs, [0.0, 0.3, 0.6, 0.9, 1.0])


def test_inclusive_stride_zero_span_yields_single_sample() -> None:
    assert inclusive_stride(0.5, 0.5, 0.1).tolist() == [0.5]


@pytest.mark.parametrize("step", [0.0, -0.1, math.inf, math.nan])
def test_inclusive_stride_rejects_bad_step(step: float) -> None:
    with pytest.raises(ValueError):
        inclusive_stride(0.0, 1.0, step)


@given(
    start=st.floats(min_value=-10.0, max_value=10.0),
    span=st.floats(min_value=1e-3, max_value=10.0),
    columns=st.integers(min_value=1, max_value=2000),
)
def test_inclusive_stride_is_increasing_and_closed(
    start: float, span: float, columns: int
) -> None:
    stop = start + span
    xs = inclusive_stride(start, stop, span / columns)
    assert xs[0] == start
    assert xs[-1] == stop
    assert np.all(np.diff(xs) > 0)
    assert columns + 1 <= xs.size <= columns + 2


def test_sample_curve_has_one_vertex_per_column_plus_one() -> None:
    viewport = Size2D(400.0, 300.0)
    path = sample_curve(FULL, viewport, plot_transform(FULL, viewport))
    assert path.shape == (401, 2)
    assert path[0, 0] == pytest.approx(0.0)
    assert path[-1, 0] == pytest.approx(400.0)
    # f(0) == 0 sits on the vertical midline of the device.
    assert path[0, 1] == pytest.approx(150.0)


def test_sample_curve_uses_supplied_function_and_transform() -> None:
    window = Rect.from_values(0.0, 0.0, 1.0, 1.0)
    path = sample_curve(
        window, Size2D(4.0, 4.0), AffineTransform.identity(), func=lambda x: x * 2
    )
    expected = [[0.0, 0.0], [0.25, 0.5], [0.5, 1.0], [0.75, 1.5], [1.0, 2.0]]
    assert_allclose(path, expected)


def test_sample_curve_without_width_is_empty() -> None:
    path = sample_curve(FULL, Size2D(0.0, 100.0), AffineTransform.identity())
    assert path.shape == (0, 2)
