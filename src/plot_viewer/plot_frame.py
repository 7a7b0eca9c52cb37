"""Visible plot window state driven by pan and pinch gestures.

:class:`PlotFrameController` owns the window into the plot plane that is
currently on screen. Gesture handlers feed it device-space translations and
scale factors; it keeps the window inside the configured limits, rebuilds the
plot-to-device transform and the sampled curve, and tells subscribers about
every new window synchronously.

The controller has no toolkit dependency; the Qt view in :mod:`.app` is one
host for it.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import Callable, Iterator, List, Optional

import numpy as np

from .curve import CurveFunction, growing_sine, sample_curve
from .models import PlotLimits
from .transform import AffineTransform, plot_transform
from .utils.geometry import (
    Point2D,
    Rect,
    Size2D,
    Vector2D,
    center,
    constrain_point,
    constrain_size,
    divide,
    subtract,
)

logger = logging.getLogger(__name__)

WindowObserver = Callable[[Rect], None]


class GesturePhase(enum.Enum):
    BEGAN = "began"
    CHANGED = "changed"
    ENDED = "ended"
    CANCELLED = "cancelled"


class PlotFrameController:
    """Maintain the visible plot window and everything derived from it.

    Phases of a single gesture are expected in order (``BEGAN``, any number of
    ``CHANGED``, then ``ENDED`` or ``CANCELLED``); out-of-order phases are not
    detected.
    """

    def __init__(
        self,
        limits: Optional[PlotLimits] = None,
        curve: CurveFunction = growing_sine,
        viewport_size: Size2D = Size2D(),
    ) -> None:
        self._limits = limits if limits is not None else PlotLimits()
        self._limits.validate()
        self._curve = curve
        self._observers: List[WindowObserver] = []

        self._viewport_size = viewport_size
        self._forward = AffineTransform.identity()
        self._inverse = AffineTransform.identity()
        self._path = _empty_path()

        self._pan_origin_at_start = self.max_window.origin
        self._window_at_pinch_start = self.max_window

        self._window = self.max_window
        self._update_transform()

    # ----------------------------- Properties ---------------------------------

    @property
    def max_window(self) -> Rect:
        return self._limits.max_window

    @property
    def min_window_size(self) -> Size2D:
        return self._limits.min_window_size

    @property
    def window(self) -> Rect:
        """The region of the plot plane currently shown."""
        return self._window

    @property
    def viewport_size(self) -> Size2D:
        return self._viewport_size

    @property
    def forward_transform(self) -> AffineTransform:
        """Plot to device mapping for the current window and viewport."""
        return self._forward

    @property
    def inverse_transform(self) -> AffineTransform:
        """Device to plot mapping; the analytic inverse of the forward one."""
        return self._inverse

    @property
    def path(self) -> np.ndarray:
        """Device-space polyline as a read-only ``(N, 2)`` array."""
        return self._path

    def path_points(self) -> Iterator[Point2D]:
        for x, y in self._path:
            yield Point2D(float(x), float(y))

    # ----------------------------- Observation --------------------------------

    def subscribe(self, callback: WindowObserver) -> Callable[[], None]:
        """Call ``callback(window)`` after every window assignment.

        Returns a function that removes the subscription.
        """
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    # ------------------------------- Inputs -----------------------------------

    def set_viewport_size(self, size: Size2D) -> None:
        """Record a new device size for the rendering surface."""
        logger.debug("viewport resized to %.1f x %.1f", size.width, size.height)
        self._viewport_size = size
        self._update_transform()

    def pan(self, phase: GesturePhase, translation: Vector2D = Vector2D()) -> None:
        """Apply a drag.

        ``translation`` is the cumulative device-space movement since the
        gesture began. Releasing or cancelling a pan keeps the last window.
        """
        if phase is GesturePhase.BEGAN:
            self._pan_origin_at_start = self._window.origin
            logger.debug("pan began at %s", self._pan_origin_at_start)
        elif phase is GesturePhase.CHANGED:
            plot_delta = self._inverse.apply_to_vector(translation)
            origin = self._clamp_origin(
                subtract(self._pan_origin_at_start, plot_delta), self._window.size
            )
            self._set_window(Rect(origin, self._window.size))

    def pinch(self, phase: GesturePhase, scale: float = 1.0) -> None:
        """Apply a zoom.

        ``scale`` is the cumulative factor since the gesture began; values
        above one zoom in. The zoom keeps the center of the window the gesture
        started from. Cancelling restores that starting window.
        """
        if phase is GesturePhase.BEGAN:
            self._window_at_pinch_start = self._window
            logger.debug("pinch began at %s", self._window_at_pinch_start)
        elif phase is GesturePhase.CANCELLED:
            logger.debug("pinch cancelled, restoring %s", self._window_at_pinch_start)
            self._set_window(self._window_at_pinch_start)
        elif phase is GesturePhase.CHANGED:
            if not math.isfinite(scale) or scale <= 0.0:
                logger.debug("ignoring pinch scale %r", scale)
                return
            start = self._window_at_pinch_start
            new_size = constrain_size(
                divide(start.size, scale), self.min_window_size, self.max_window.size
            )
            new_origin = subtract(center(start), divide(_as_vector(new_size), 2.0))
            self._set_window(Rect(self._clamp_origin(new_origin, new_size), new_size))

    def reset(self) -> None:
        """Show the whole plot plane again."""
        self._set_window(self.max_window)

    # ----------------------------- Conversions --------------------------------

    def device_to_plot(self, point: Point2D) -> Point2D:
        return self._inverse.apply_to_point(point)

    def plot_to_device(self, point: Point2D) -> Point2D:
        return self._forward.apply_to_point(point)

    # ------------------------------ Internals ---------------------------------

    def _clamp_origin(self, origin: Point2D, size: Size2D) -> Point2D:
        """Keep a window of ``size`` at ``origin`` inside ``max_window``."""
        room = Rect(self.max_window.origin, subtract(self.max_window.size, size))
        return constrain_point(origin, room)

    def _set_window(self, window: Rect) -> None:
        self._window = window
        self._update_transform()
        for callback in list(self._observers):
            callback(window)

    def _update_transform(self) -> None:
        if not self._viewport_size.is_positive():
            logger.debug("viewport not laid out yet; deferring transform")
            return
        self._forward = plot_transform(self._window, self._viewport_size)
        self._inverse = self._forward.inverted()
        self._generate_path()

    def _generate_path(self) -> None:
        path = sample_curve(
            self._window, self._viewport_size, self._forward, self._curve
        )
        path.flags.writeable = False
        self._path = path


def _as_vector(size: Size2D) -> Vector2D:
    return Vector2D(size.width, size.height)


def _empty_path() -> np.ndarray:
    path = np.empty((0, 2), dtype=np.float64)
    path.flags.writeable = False
    return path


__all__ = ["GesturePhase", "PlotFrameController", "WindowObserver"]
