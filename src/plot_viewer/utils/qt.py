"""Qt helper utilities."""

from PySide6 import QtCore, QtGui
import numpy as np

from .geometry import Point2D, Size2D, Vector2D


def point_from_qt(p: QtCore.QPointF | QtCore.QPoint) -> Point2D:
    return Point2D(float(p.x()), float(p.y()))


def vector_from_qt(p: QtCore.QPointF | QtCore.QPoint) -> Vector2D:
    """Read a Qt point that carries a displacement, e.g. a drag offset."""
    return Vector2D(float(p.x()), float(p.y()))


def size_from_qt(s: QtCore.QSizeF | QtCore.QSize) -> Size2D:
    return Size2D(float(s.width()), float(s.height()))


def polyline_to_path(vertices: np.ndarray) -> QtGui.QPainterPath:
    """Build an open painter path through ``(N, 2)`` device-space vertices."""
    path = QtGui.QPainterPath()
    pts = np.asarray(vertices, dtype=np.float64)
    if pts.size == 0:
        return path
    path.moveTo(float(pts[0, 0]), float(pts[0, 1]))
    for x, y in pts[1:]:
        path.lineTo(float(x), float(y))
    return path


__all__ = [
    "point_from_qt",
    "vector_from_qt",
    "size_from_qt",
    "polyline_to_path",
]
