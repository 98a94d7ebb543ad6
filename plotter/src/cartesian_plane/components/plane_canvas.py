"""Plane canvas widget - shows the plane's backing image."""

from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QPainter

from cartesian_plane.constants import CANVAS_WIDTH, CANVAS_HEIGHT
from cartesian_plane.utils.drawing_surface import QImageSurface


class PlaneCanvasWidget(QWidget):
    """Fixed-size widget displaying a QImageSurface.

    The Plane draws into the surface synchronously; when a frame is presented
    the widget schedules a repaint that blits the finished image. Mouse
    movement is reported in Cartesian units once a plane is attached.
    """

    cursor_moved = pyqtSignal(float, float)  # Cartesian x, y under the cursor
    cursor_left = pyqtSignal()

    def __init__(self, parent=None, width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
        super().__init__(parent)

        self.surface = QImageSurface(width, height, on_present=self._on_present)

        # Reference set by the main window
        self.plane = None

        self.setFixedSize(width, height)
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.setMouseTracking(True)

    def _on_present(self, surface):
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.drawImage(0, 0, self.surface.image())
        painter.end()

    def mouseMoveEvent(self, event):
        if self.plane is not None:
            pos = self.plane.transformer.to_cartesian(event.x(), event.y())
            self.cursor_moved.emit(pos.x, pos.y)
        super().mouseMoveEvent(event)

    def leaveEvent(self, event):
        self.cursor_left.emit()
        super().leaveEvent(event)
