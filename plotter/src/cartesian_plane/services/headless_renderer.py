"""Headless Plane Renderer Service.

Renders a plane offscreen into a QImage without any window, and writes
QImages out as PNG files. Uses the same Plane/QImageSurface pipeline as the
interactive canvas, so exports match what is on screen pixel for pixel.
"""

import sys
import logging
import numpy as np
from PIL import Image
from pathlib import Path

from PyQt5.QtGui import QGuiApplication, QImage

from cartesian_plane.constants import CANVAS_WIDTH, CANVAS_HEIGHT, DEFAULT_SCALE, CANVAS_BACKGROUND
from cartesian_plane.models.plane import Plane
from cartesian_plane.utils.drawing_surface import QImageSurface

logger = logging.getLogger(__name__)


def ensure_gui_app():
    """Return existing Qt application or create a headless one."""
    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication(sys.argv)
    return app


def render_plane_image(points=(), vectors=(), width=CANVAS_WIDTH, height=CANVAS_HEIGHT,
                       scale=DEFAULT_SCALE, background=CANVAS_BACKGROUND):
    """Render points and vectors onto a fresh plane.

    Args:
        points: Iterable of Point, drawn in order
        vectors: Iterable of Vector, drawn in order
        width, height: Surface size in pixels
        scale: Pixels per Cartesian unit
        background: Hex background color, or None for transparent

    Returns:
        QImage holding the finished frame
    """
    ensure_gui_app()
    surface = QImageSurface(width, height, background=background)
    plane = Plane(surface, scale=scale)
    for point in points:
        plane.add_point(point)
    for vector in vectors:
        plane.add_vector(vector)
    logger.info("Rendered %d point(s) and %d vector(s) at %dx%d",
                len(plane.points), len(plane.vectors), width, height)
    return surface.image()


def image_to_array(image: QImage) -> np.ndarray:
    """Copy a QImage into an (height, width, 4) uint8 RGBA array."""
    rgba = image.convertToFormat(QImage.Format_RGBA8888)
    width, height = rgba.width(), rgba.height()
    ptr = rgba.constBits()
    ptr.setsize(rgba.sizeInBytes())
    # Rows may be padded, so slice each scanline to width * 4 bytes
    rows = np.frombuffer(ptr, dtype=np.uint8).reshape(height, rgba.bytesPerLine())
    return rows[:, :width * 4].reshape(height, width, 4).copy()


def save_png(image: QImage, output_path):
    """Write a QImage to disk as PNG.

    Returns:
        Path of the written file
    """
    output_path = Path(output_path)
    if output_path.suffix.lower() != '.png':
        output_path = output_path.with_suffix('.png')
    output_path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(image_to_array(image)).save(output_path, format='PNG')
    logger.info("Saved %s", output_path)
    return output_path
