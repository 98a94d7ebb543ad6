"""Drawing surface abstraction for plane rendering.

The renderer speaks a small canvas-style vocabulary (paths, arcs, fill,
stroke). DrawingSurface defines that vocabulary; QImageSurface implements it
on a QImage backing store using QPainter/QPainterPath.

Angles passed to arc() follow the canvas convention: radians, measured from
the +X axis, growing clockwise on screen (because pixel Y grows down).
"""

import math
from abc import ABC, abstractmethod
from contextlib import contextmanager

from PyQt5.QtCore import Qt, QRectF
from PyQt5.QtGui import QImage, QPainter, QPainterPath, QPen, QBrush, QColor

from cartesian_plane.constants import CANVAS_BACKGROUND
from cartesian_plane.models.color import Color


class DrawingSurface(ABC):
    """Abstract pixel-addressed drawing target.

    Subclasses must implement the path primitives plus width/height.
    frame() brackets one complete redraw; the default does nothing.
    """

    @property
    @abstractmethod
    def width(self):
        pass

    @property
    @abstractmethod
    def height(self):
        pass

    @contextmanager
    def frame(self):
        """Bracket one full redraw."""
        yield self

    @abstractmethod
    def clear_rect(self, x, y, w, h):
        pass

    @abstractmethod
    def begin_path(self):
        pass

    @abstractmethod
    def close_path(self):
        pass

    @abstractmethod
    def move_to(self, x, y):
        pass

    @abstractmethod
    def line_to(self, x, y):
        pass

    @abstractmethod
    def arc(self, cx, cy, radius, start_angle, end_angle):
        pass

    @abstractmethod
    def fill(self, color):
        pass

    @abstractmethod
    def stroke(self, color, width):
        pass


class QImageSurface(DrawingSurface):
    """QImage backing store painted with QPainter.

    A painter is only open inside frame(). When the frame ends the
    on_present callback fires so a widget can repaint from image().
    """

    def __init__(self, width, height, background=CANVAS_BACKGROUND, on_present=None):
        """
        Args:
            width: Image width in pixels
            height: Image height in pixels
            background: Hex color used by clear_rect, or None for transparent
            on_present: Optional callable(surface) invoked after each frame
        """
        self._colors = {}
        self._image = QImage(int(width), int(height), QImage.Format_ARGB32_Premultiplied)
        self._background = self._resolve(background) if background else QColor(Qt.transparent)
        self._image.fill(self._background)
        self._painter = None
        self._path = QPainterPath()
        self.on_present = on_present

    @property
    def width(self):
        return self._image.width()

    @property
    def height(self):
        return self._image.height()

    def image(self):
        """Backing QImage (do not paint on it while a frame is open)."""
        return self._image

    @contextmanager
    def frame(self):
        self._painter = QPainter(self._image)
        self._painter.setRenderHint(QPainter.Antialiasing)
        try:
            yield self
        finally:
            self._painter.end()
            self._painter = None
        if self.on_present is not None:
            self.on_present(self)

    # ========================================
    # Primitives
    # ========================================

    def clear_rect(self, x, y, w, h):
        painter = self._active_painter()
        painter.save()
        painter.setCompositionMode(QPainter.CompositionMode_Source)
        painter.fillRect(QRectF(x, y, w, h), self._background)
        painter.restore()

    def begin_path(self):
        self._path = QPainterPath()

    def close_path(self):
        self._path.closeSubpath()

    def move_to(self, x, y):
        self._path.moveTo(x, y)

    def line_to(self, x, y):
        # Canvas semantics: a line with no current point just starts a subpath
        if self._path.elementCount() == 0:
            self._path.moveTo(x, y)
        else:
            self._path.lineTo(x, y)

    def arc(self, cx, cy, radius, start_angle, end_angle):
        rect = QRectF(cx - radius, cy - radius, radius * 2, radius * 2)
        # Qt measures degrees counter-clockwise on screen, canvas radians clockwise
        start_deg = -math.degrees(start_angle)
        sweep_deg = -math.degrees(end_angle - start_angle)
        if self._path.elementCount() == 0:
            self._path.arcMoveTo(rect, start_deg)
        self._path.arcTo(rect, start_deg, sweep_deg)

    def fill(self, color):
        self._active_painter().fillPath(self._path, QBrush(self._resolve(color)))

    def stroke(self, color, width):
        pen = QPen(self._resolve(color))
        pen.setWidthF(width)
        pen.setCapStyle(Qt.FlatCap)
        self._active_painter().strokePath(self._path, pen)

    # ========================================
    # Helpers
    # ========================================

    def _active_painter(self):
        if self._painter is None:
            raise RuntimeError("QImageSurface drawn outside of frame()")
        return self._painter

    def _resolve(self, color):
        """Hex string -> QColor, cached per surface."""
        qcolor = self._colors.get(color)
        if qcolor is None:
            parsed = Color.from_hex(color)
            if parsed is None:
                raise ValueError(f"Invalid color: {color!r}")
            qcolor = parsed.to_qcolor()
            self._colors[color] = qcolor
        return qcolor
