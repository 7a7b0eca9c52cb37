import numpy as np
import pytest

QtCore = pytest.importorskip("PySide6.QtCore")
pytest.importorskip("PySide6.QtGui")

from plot_viewer.utils.geometry import Point2D, Size2D, Vector2D  # noqa: E402
from plot_viewer.utils.qt import (  # noqa: E402
    point_from_qt,
    polyline_to_path,
    size_from_qt,
    vector_from_qt,
)


def test_point_and_size_conversions() -> None:
    assert point_from_qt(QtCore.QPointF(1.5, -2.0)) == Point2D(1.5, -2.0)
    assert point_from_qt(QtCore.QPoint(3, 4)) == Point2D(3.0, 4.0)
    assert vector_from_qt(QtCore.QPointF(-1.0, 2.0)) == Vector2D(-1.0, 2.0)
    assert size_from_qt(QtCore.QSize(640, 480)) == Size2D(640.0, 480.0)
    assert size_from_qt(QtCore.QSizeF(2.5, 0.5)) == Size2D(2.5, 0.5)


def test_polyline_to_path() -> None:
    vertices = np.array([[0.0, 0.0], [10.0, 5.0], [20.0, -5.0]])
    path = polyline_to_path(vertices)
    assert path.elementCount() == 3
    last = path.elementAt(2)
    assert (last.x, last.y) == (20.0, -5.0)
    assert path.currentPosition() == QtCore.QPointF(20.0, -5.0)


def test_polyline_to_path_empty() -> None:
    assert polyline_to_path(np.empty((0, 2))).isEmpty()
