"""Geometry helpers used by the plot frame controller and the Qt view.

All values are immutable. Functions are total over finite floats; NaN and
infinite inputs pass through with ordinary floating-point semantics.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Tuple, Union, overload

import numpy as np


@dataclass(frozen=True)
class Vector2D:
    """A displacement ``(dx, dy)``."""

    dx: float = 0.0
    dy: float = 0.0


@dataclass(frozen=True)
class Point2D:
    """A position ``(x, y)``."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Size2D:
    """A magnitude ``(width, height)``; non-negative by convention."""

    width: float = 0.0
    height: float = 0.0

    def is_positive(self) -> bool:
        return self.width > 0.0 and self.height > 0.0


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle spanning ``origin`` to ``origin + size``."""

    origin: Point2D = Point2D()
    size: Size2D = Size2D()

    @classmethod
    def from_values(cls, x: float, y: float, width: float, height: float) -> "Rect":
        return cls(Point2D(x, y), Size2D(width, height))

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def min_x(self) -> float:
        return self.origin.x

    @property
    def max_x(self) -> float:
        return self.origin.x + self.size.width

    @property
    def min_y(self) -> float:
        return self.origin.y

    @property
    def max_y(self) -> float:
        return self.origin.y + self.size.height


@overload
def add(lhs: Point2D, rhs: Vector2D) -> Point2D: ...


@overload
def add(lhs: Size2D, rhs: Union[Size2D, Vector2D]) -> Size2D: ...


@overload
def add(lhs: Vector2D, rhs: Vector2D) -> Vector2D: ...


@overload
def add(lhs: Rect, rhs: Vector2D) -> Rect: ...


def add(lhs, rhs):
    """Component-wise sum. Rects are translated by moving their origin."""
    if isinstance(rhs, Vector2D):
        dx, dy = rhs.dx, rhs.dy
    elif isinstance(rhs, Size2D) and isinstance(lhs, Size2D):
        dx, dy = rhs.width, rhs.height
    else:
        raise TypeError(f"cannot add {type(rhs).__name__} to {type(lhs).__name__}")

    if isinstance(lhs, Point2D):
        return Point2D(lhs.x + dx, lhs.y + dy)
    if isinstance(lhs, Size2D):
        return Size2D(lhs.width + dx, lhs.height + dy)
    if isinstance(lhs, Vector2D):
        return Vector2D(lhs.dx + dx, lhs.dy + dy)
    if isinstance(lhs, Rect):
        return Rect(add(lhs.origin, Vector2D(dx, dy)), lhs.size)
    raise TypeError(f"cannot add {type(rhs).__name__} to {type(lhs).__name__}")


@overload
def subtract(lhs: Point2D, rhs: Point2D) -> Vector2D: ...


@overload
def subtract(lhs: Point2D, rhs: Vector2D) -> Point2D: ...


@overload
def subtract(lhs: Size2D, rhs: Union[Size2D, Vector2D]) -> Size2D: ...


@overload
def subtract(lhs: Vector2D, rhs: Vector2D) -> Vector2D: ...


@overload
def subtract(lhs: Rect, rhs: Vector2D) -> Rect: ...


def subtract(lhs, rhs):
    """Component-wise difference; two points yield the vector between them."""
    if isinstance(lhs, Point2D) and isinstance(rhs, Point2D):
        return Vector2D(lhs.x - rhs.x, lhs.y - rhs.y)
    if isinstance(rhs, Vector2D):
        return add(lhs, Vector2D(-rhs.dx, -rhs.dy))
    if isinstance(lhs, Size2D) and isinstance(rhs, Size2D):
        return Size2D(lhs.width - rhs.width, lhs.height - rhs.height)
    raise TypeError(f"cannot subtract {type(rhs).__name__} from {type(lhs).__name__}")


@overload
def scale(value: Vector2D, factor: float) -> Vector2D: ...


@overload
def scale(value: Size2D, factor: float) -> Size2D: ...


def scale(value, factor):
    """Multiply both components by ``factor``."""
    if isinstance(value, Vector2D):
        return Vector2D(value.dx * factor, value.dy * factor)
    if isinstance(value, Size2D):
        return Size2D(value.width * factor, value.height * factor)
    raise TypeError(f"cannot scale {type(value).__name__}")


@overload
def divide(value: Vector2D, divisor: float) -> Vector2D: ...


@overload
def divide(value: Size2D, divisor: float) -> Size2D: ...


def divide(value, divisor):
    """Divide both components by ``divisor``.

    A zero divisor follows IEEE semantics (``inf``/``nan`` components) rather
    than raising, so callers that care must check beforehand.
    """
    if isinstance(value, Vector2D):
        dx, dy = _ieee_divide(value.dx, value.dy, divisor)
        return Vector2D(dx, dy)
    if isinstance(value, Size2D):
        width, height = _ieee_divide(value.width, value.height, divisor)
        return Size2D(width, height)
    raise TypeError(f"cannot divide {type(value).__name__}")


def _ieee_divide(first: float, second: float, divisor: float) -> Tuple[float, float]:
    with np.errstate(divide="ignore", invalid="ignore"):
        q = np.array([first, second], dtype=np.float64) / np.float64(divisor)
    return float(q[0]), float(q[1])


def magnitude(v: Vector2D) -> float:
    """Euclidean length of ``v``."""
    return math.hypot(v.dx, v.dy)


def center(r: Rect) -> Point2D:
    """Return ``origin + size / 2``."""
    return Point2D(r.origin.x + r.width / 2.0, r.origin.y + r.height / 2.0)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lo, hi]``."""
    return min(max(value, lo), hi)


def constrain_point(p: Point2D, bounds: Rect) -> Point2D:
    """Clamp each axis of ``p`` into ``bounds`` independently."""
    return Point2D(
        clamp(p.x, bounds.min_x, bounds.max_x),
        clamp(p.y, bounds.min_y, bounds.max_y),
    )


def constrain_rect(r: Rect, bounds: Rect) -> Rect:
    """Translate ``r`` by the smallest offset that places it inside ``bounds``.

    The result is only a valid containment when ``bounds`` is at least as
    large as ``r`` in both dimensions.
    """
    if r.min_x < bounds.min_x:
        dx = bounds.min_x - r.min_x
    elif r.max_x > bounds.max_x:
        dx = bounds.max_x - r.max_x
    else:
        dx = 0.0
    if r.min_y < bounds.min_y:
        dy = bounds.min_y - r.min_y
    elif r.max_y > bounds.max_y:
        dy = bounds.max_y - r.max_y
    else:
        dy = 0.0
    return add(r, Vector2D(dx, dy))


def constrain_size(s: Size2D, min_size: Size2D, max_size: Size2D) -> Size2D:
    """Clamp width and height independently between ``min_size`` and ``max_size``."""
    return Size2D(
        clamp(s.width, min_size.width, max_size.width),
        clamp(s.height, min_size.height, max_size.height),
    )


__all__ = [
    "Vector2D",
    "Point2D",
    "Size2D",
    "Rect",
    "add",
    "subtract",
    "scale",
    "divide",
    "magnitude",
    "center",
    "clamp",
    "constrain_point",
    "constrain_rect",
    "constrain_size",
]
