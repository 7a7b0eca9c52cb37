"""Sampling of the displayed curve into a device-space polyline."""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from .transform import AffineTransform
from .utils.geometry import Rect, Size2D

CurveFunction = Callable[[np.ndarray], np.ndarray]

# Relative slack when deciding whether the last regular step already hit the end.
_STRIDE_EPS = 1e-9


def growing_sine(x: np.ndarray) -> np.ndarray:
    """``sin(5 * pi * x) * x / 2``, growing linearly in amplitude with ``x``."""
    x = np.asarray(x, dtype=np.float64)
    return np.sin(x * math.pi * 5.0) * x / 2.0


def inclusive_stride(start: float, stop: float, step: float) -> np.ndarray:
    """Return ``start, start + step, ...`` up to and including ``stop``.

    The final element is always exactly ``stop``; when the span is not a
    whole number of steps the last interval is shorter than ``step``.
    """
    if step <= 0 or not math.isfinite(step):
        raise ValueError(f"step must be a positive finite number, was {step}")
    span = float(stop) - float(start)
    if span < 0:
        return np.empty((0,), dtype=np.float64)
    count = int(math.floor(span / step * (1.0 + _STRIDE_EPS)))
    xs = float(start) + np.arange(count + 1, dtype=np.float64) * step
    if stop - xs[-1] > span * _STRIDE_EPS:
        xs = np.append(xs, float(stop))
    else:
        xs[-1] = float(stop)
    return xs


def sample_curve(
    window: Rect,
    viewport: Size2D,
    transform: AffineTransform,
    func: CurveFunction = growing_sine,
) -> np.ndarray:
    """Sample ``func`` across ``window`` once per device pixel column.

    Returns an ``(N, 2)`` float64 array of device-space vertices, empty when
    the viewport has no width yet.
    """
    if viewport.width <= 0:
        return np.empty((0, 2), dtype=np.float64)
    step = window.width / viewport.width
    xs = inclusive_stride(window.min_x, window.max_x, step)
    vertices = np.column_stack((xs, func(xs)))
    return transform.apply_to_array(vertices)


__all__ = ["CurveFunction", "growing_sine", "inclusive_stride", "sample_curve"]
