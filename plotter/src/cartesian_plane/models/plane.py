"""
Cartesian Plane Plotter - Plane Model

The Plane is the single owner of everything that gets plotted. It holds the
ordered point and vector sequences, the coordinate transformer and the
drawing surface, and it repaints the whole surface after every mutation so
the surface never shows stale content.

Draw order on every redraw:
    clear -> grid -> axes -> points (insertion order) -> vectors (insertion order)
"""

import logging

import numpy as np

from cartesian_plane.constants import (
    DEFAULT_SCALE, GRID_SUBDIVISIONS,
    GRID_LINE_WIDTH, AXIS_LINE_WIDTH,
    GRID_AXIS_COLOR, GRID_MAJOR_COLOR, GRID_MINOR_COLOR, AXIS_COLOR
)
from cartesian_plane.utils.coordinate_transforms import CoordinateTransformer


def gridline_tint(position, center, scale):
    """Pick the color for a gridline at a pixel position.

    The line through the center gets the axis tint, lines on a full-unit
    boundary get the major tint, everything else the minor tint.

    Args:
        position: Pixel coordinate of the gridline (x for vertical, y for horizontal)
        center: Pixel coordinate of the principal axis on the same pass
        scale: Pixels per Cartesian unit

    Returns:
        Hex color string
    """
    if position == center:
        return GRID_AXIS_COLOR
    if position % scale == 0:
        return GRID_MAJOR_COLOR
    return GRID_MINOR_COLOR


def gridline_positions(extent, scale):
    """Pixel positions of gridlines across one dimension.

    Starts at 0 and steps by scale / GRID_SUBDIVISIONS while below extent.
    """
    return np.arange(0, extent, scale / GRID_SUBDIVISIONS)


class Plane:
    """Cartesian plane bound to one drawing surface.

    Points and vectors are only mutated through add_point, add_vector and
    clear; each of those finishes with a full redraw.
    """

    def __init__(self, surface, scale=DEFAULT_SCALE):
        """
        Args:
            surface: DrawingSurface to render onto (fixed size)
            scale: Pixels per Cartesian unit
        """
        self._logger = logging.getLogger('Plane')
        self._surface = surface
        self._transformer = CoordinateTransformer(surface.width, surface.height, scale)
        self._points = []
        self._vectors = []
        self._listeners = []  # Callbacks to notify after each mutation
        self.redraw()
        self._logger.debug(f"Created plane on {self._transformer}")

    # ========================================
    # Read-only access
    # ========================================

    @property
    def surface(self):
        return self._surface

    @property
    def transformer(self):
        return self._transformer

    @property
    def points(self):
        """Plotted points in insertion order (read-only snapshot)."""
        return tuple(self._points)

    @property
    def vectors(self):
        """Plotted vectors in insertion order (read-only snapshot)."""
        return tuple(self._vectors)

    # ========================================
    # Mutation
    # ========================================

    def add_point(self, point):
        """Append a point and redraw."""
        self._points.append(point)
        self._logger.debug(f"Added point ({point.x}, {point.y})")
        self._changed()

    def add_vector(self, vector):
        """Append a vector and redraw."""
        self._vectors.append(vector)
        self._logger.debug(
            f"Added vector ({vector.origin.x}, {vector.origin.y}) -> ({vector.tip.x}, {vector.tip.y})"
        )
        self._changed()

    def clear(self):
        """Remove every point and vector; grid and axes stay."""
        self._points = []
        self._vectors = []
        self._logger.debug("Cleared plane")
        self._changed()

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback):
        """
        Add a listener to be notified after each mutation

        Args:
            callback: Function to call after the redraw (receives point_count, vector_count)
        """
        self._listeners.append(callback)

    def remove_listener(self, callback):
        """Remove a listener"""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _changed(self):
        self.redraw()
        for callback in list(self._listeners):
            callback(len(self._points), len(self._vectors))

    # ========================================
    # Rendering
    # ========================================

    def redraw(self):
        """Repaint the whole surface from the current sequences."""
        with self._surface.frame():
            self._draw_grid_and_axes()
            for point in self._points:
                point.render(self._surface, self._transformer)
            for vector in self._vectors:
                vector.render(self._surface, self._transformer)

    def _draw_grid_and_axes(self):
        surface = self._surface
        t = self._transformer
        width, height = t.width, t.height

        surface.clear_rect(0, 0, width, height)

        # Vertical gridlines
        for x in gridline_positions(width, t.scale):
            x = float(x)
            surface.begin_path()
            surface.move_to(x, 0)
            surface.line_to(x, height)
            surface.stroke(gridline_tint(x, t.center_x, t.scale), GRID_LINE_WIDTH)

        # Horizontal gridlines
        for y in gridline_positions(height, t.scale):
            y = float(y)
            surface.begin_path()
            surface.move_to(0, y)
            surface.line_to(width, y)
            surface.stroke(gridline_tint(y, t.center_y, t.scale), GRID_LINE_WIDTH)

        # Principal axes on top of the grid
        surface.begin_path()
        surface.move_to(0, t.center_y)
        surface.line_to(width, t.center_y)
        surface.stroke(AXIS_COLOR, AXIS_LINE_WIDTH)

        surface.begin_path()
        surface.move_to(t.center_x, 0)
        surface.line_to(t.center_x, height)
        surface.stroke(AXIS_COLOR, AXIS_LINE_WIDTH)
