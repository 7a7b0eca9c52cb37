"""Qt application entry point for the plot_viewer demo."""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, Optional

from PySide6 import QtCore, QtGui, QtWidgets

from . import __version__ as APP_VERSION
from .models import AppConfig, PlotStyle, load_config
from .plot_frame import GesturePhase, PlotFrameController
from .utils.geometry import Rect, Vector2D, subtract
from .utils.qt import point_from_qt, polyline_to_path, size_from_qt, vector_from_qt

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "PLOT_VIEWER_LOG_LEVEL"

# One wheel notch zooms by this factor.
WHEEL_ZOOM_STEP = 1.25

_GESTURE_PHASES: Dict[QtCore.Qt.GestureState, GesturePhase] = {
    QtCore.Qt.GestureState.GestureStarted: GesturePhase.BEGAN,
    QtCore.Qt.GestureState.GestureUpdated: GesturePhase.CHANGED,
    QtCore.Qt.GestureState.GestureFinished: GesturePhase.ENDED,
    QtCore.Qt.GestureState.GestureCanceled: GesturePhase.CANCELLED,
}


# --------------------------------- Plot View ----------------------------------


class PlotView(QtWidgets.QWidget):
    """Paints the controller's polyline and feeds it pan and zoom input."""

    def __init__(
        self,
        controller: PlotFrameController,
        style: PlotStyle,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._style = style
        self._drag_start: Optional[QtCore.QPointF] = None
        self._pinch_active = False
        self._pan_blocked = False

        self.setAttribute(QtCore.Qt.WidgetAttribute.WA_AcceptTouchEvents, True)
        self.grabGesture(QtCore.Qt.GestureType.PanGesture)
        self.grabGesture(QtCore.Qt.GestureType.PinchGesture)
        self.setFocusPolicy(QtCore.Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(160, 120)
        self.setSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding,
        )

    @property
    def controller(self) -> PlotFrameController:
        return self._controller

    # ----------------------------- Layout -------------------------------------

    def resizeEvent(self, e: QtGui.QResizeEvent) -> None:
        super().resizeEvent(e)
        self._controller.set_viewport_size(size_from_qt(e.size()))

    # ----------------------------- Gestures -----------------------------------

    def event(self, e: QtCore.QEvent) -> bool:
        if e.type() == QtCore.QEvent.Type.Gesture:
            return self._gesture_event(e)  # type: ignore[arg-type]
        return super().event(e)

    def _gesture_event(self, e: QtWidgets.QGestureEvent) -> bool:
        pinch = e.gesture(QtCore.Qt.GestureType.PinchGesture)
        if isinstance(pinch, QtWidgets.QPinchGesture):
            phase = _GESTURE_PHASES.get(pinch.state())
            if phase is not None:
                self.apply_pinch_gesture(phase, float(pinch.totalScaleFactor()))
            e.accept(pinch)

        pan = e.gesture(QtCore.Qt.GestureType.PanGesture)
        if isinstance(pan, QtWidgets.QPanGesture):
            phase = _GESTURE_PHASES.get(pan.state())
            if phase is not None:
                self.apply_pan_gesture(phase, vector_from_qt(pan.offset()))
            e.accept(pan)

        self.update()
        return True

    def apply_pinch_gesture(self, phase: GesturePhase, scale: float) -> None:
        self._pinch_active = phase in (GesturePhase.BEGAN, GesturePhase.CHANGED)
        self._controller.pinch(phase, scale)

    def apply_pan_gesture(self, phase: GesturePhase, offset: Vector2D) -> None:
        """Forward a touch pan unless a pinch owns the window.

        Qt's pan gesture is a two-finger one and fires alongside a pinch. A pan
        that overlaps a pinch is dropped until it ends.
        """
        if phase is GesturePhase.BEGAN or self._pinch_active:
            self._pan_blocked = self._pinch_active
        if not self._pan_blocked:
            self._controller.pan(phase, offset)
        if phase in (GesturePhase.ENDED, GesturePhase.CANCELLED):
            self._pan_blocked = False

    def mousePressEvent(self, e: QtGui.QMouseEvent) -> None:
        if e.button() != QtCore.Qt.MouseButton.LeftButton:
            super().mousePressEvent(e)
            return
        self._drag_start = e.position()
        self._controller.pan(GesturePhase.BEGAN)
        e.accept()

    def mouseMoveEvent(self, e: QtGui.QMouseEvent) -> None:
        if self._drag_start is None:
            return
        delta = subtract(point_from_qt(e.position()), point_from_qt(self._drag_start))
        self._controller.pan(GesturePhase.CHANGED, delta)
        self.update()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent) -> None:
        if self._drag_start is not None:
            self._drag_start = None
            self._controller.pan(GesturePhase.ENDED)
        e.accept()

    def wheelEvent(self, e: QtGui.QWheelEvent) -> None:
        notches = e.angleDelta().y() / 120.0
        if notches == 0:
            return
        self._controller.pinch(GesturePhase.BEGAN)
        self._controller.pinch(GesturePhase.CHANGED, WHEEL_ZOOM_STEP**notches)
        self._controller.pinch(GesturePhase.ENDED)
        self.update()
        e.accept()

    def keyPressEvent(self, e: QtGui.QKeyEvent) -> None:
        key = e.key()
        if key == QtCore.Qt.Key.Key_Escape:
            if self._pinch_active:
                self._pinch_active = False
                self._controller.pinch(GesturePhase.CANCELLED)
            if self._drag_start is not None:
                self._drag_start = None
                self._controller.pan(GesturePhase.CANCELLED)
        elif key in (QtCore.Qt.Key.Key_R, QtCore.Qt.Key.Key_Home):
            self._controller.reset()
        else:
            super().keyPressEvent(e)
            return
        self.update()

    # ----------------------------- Painting -----------------------------------

    def paintEvent(self, e: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing, True)
        painter.fillRect(self.rect(), QtGui.QColor(self._style.background_color))

        path = self._controller.path
        if path.shape[0] < 2:
            return
        pen = QtGui.QPen(QtGui.QColor(self._style.stroke_color))
        pen.setWidthF(self._style.line_width)
        painter.setPen(pen)
        painter.setBrush(QtCore.Qt.BrushStyle.NoBrush)
        painter.drawPath(polyline_to_path(path))


# -------------------------------- Main Window ---------------------------------


class MainWindow(QtWidgets.QWidget):
    """Plot view framed by labels showing the visible bounds."""

    def __init__(self, cfg: AppConfig, app_version: str = "") -> None:
        super().__init__(None)
        self._precision = max(0, int(cfg.style.label_precision))
        self.setWindowTitle(f"plot_viewer {app_version or 'unknown'}")

        self.controller = PlotFrameController(cfg.limits)
        self.plot_view = PlotView(self.controller, cfg.style, self)

        self.min_x_label = QtWidgets.QLabel(self)
        self.max_x_label = QtWidgets.QLabel(self)
        self.min_y_label = QtWidgets.QLabel(self)
        self.max_y_label = QtWidgets.QLabel(self)
        for label in (self.max_x_label, self.min_y_label, self.max_y_label):
            label.setAlignment(QtCore.Qt.AlignmentFlag.AlignRight)

        grid = QtWidgets.QGridLayout(self)
        grid.addWidget(self.max_y_label, 0, 0, QtCore.Qt.AlignmentFlag.AlignTop)
        grid.addWidget(self.plot_view, 0, 1, 2, 2)
        grid.addWidget(self.min_y_label, 1, 0, QtCore.Qt.AlignmentFlag.AlignBottom)
        grid.addWidget(self.min_x_label, 2, 1)
        grid.addWidget(self.max_x_label, 2, 2)
        grid.setColumnStretch(1, 1)
        grid.setColumnStretch(2, 1)
        grid.setRowStretch(0, 1)
        grid.setRowStretch(1, 1)

        self._unsubscribe = self.controller.subscribe(self._on_window_changed)
        self._on_window_changed(self.controller.window)
        self.resize(640, 480)

    def _format(self, value: float) -> str:
        return f"{value:.{self._precision}f}"

    def _on_window_changed(self, window: Rect) -> None:
        self.min_x_label.setText(self._format(window.min_x))
        self.max_x_label.setText(self._format(window.max_x))
        self.min_y_label.setText(self._format(window.min_y))
        self.max_y_label.setText(self._format(window.max_y))

    def closeEvent(self, e: QtGui.QCloseEvent) -> None:
        self._unsubscribe()
        super().closeEvent(e)


# ----------------------------------- Main -------------------------------------


def _configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def main() -> None:
    _configure_logging()
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("plot_viewer")
    app.setApplicationVersion(APP_VERSION)

    cfg = load_config()
    logger.info("Starting plot_viewer %s", APP_VERSION)
    window = MainWindow(cfg, APP_VERSION)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
