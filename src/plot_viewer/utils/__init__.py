"""Toolkit-independent helpers shared by the controller and the view."""

from .geometry import (
    Point2D,
    Rect,
    Size2D,
    Vector2D,
    add,
    center,
    clamp,
    constrain_point,
    constrain_rect,
    constrain_size,
    divide,
    magnitude,
    scale,
    subtract,
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
