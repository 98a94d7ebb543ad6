"""
Cartesian Plane Plotter - Plottable Geometry

Point and Vector are immutable value objects in Cartesian units.
Anything plottable exposes render(surface, transformer): the transformer
locates the entity in pixel space, the surface receives the primitives.
"""

import math
from dataclasses import dataclass

from cartesian_plane.constants import (
    POINT_RADIUS, POINT_COLOR,
    VECTOR_COLOR, VECTOR_LINE_WIDTH,
    ARROW_LENGTH, ARROW_HALF_ANGLE
)
from cartesian_plane.models.transform import Vec2


@dataclass(frozen=True)
class Point:
    """Position in Cartesian units."""
    x: float
    y: float

    def render(self, surface, transformer):
        """Draw a filled circular marker at this position."""
        cx, cy = transformer.to_canvas(self.x, self.y)

        surface.begin_path()
        surface.arc(cx, cy, POINT_RADIUS, 0, 2 * math.pi)
        surface.fill(POINT_COLOR)
        surface.close_path()


@dataclass(frozen=True)
class Vector:
    """Directed segment from origin to tip.

    Endpoints are held by reference, never copied.
    """
    origin: Point
    tip: Point

    def pixel_endpoints(self, transformer):
        """Return (start, end) as Vec2 canvas pixels."""
        start = transformer.to_canvas(self.origin.x, self.origin.y)
        end = transformer.to_canvas(self.tip.x, self.tip.y)
        return start, end

    def pixel_angle(self, transformer):
        """Direction of the segment in pixel space (radians).

        A degenerate vector yields atan2(0, 0) == 0.
        """
        start, end = self.pixel_endpoints(transformer)
        return math.atan2(end.y - start.y, end.x - start.x)

    def arrowhead(self, transformer):
        """Arrowhead triangle in canvas pixels.

        Returns:
            (tip, left, right) Vec2 vertices; the edges sit ARROW_HALF_ANGLE
            either side of the segment, ARROW_LENGTH long.
        """
        _, end = self.pixel_endpoints(transformer)
        angle = self.pixel_angle(transformer)
        left = Vec2(end.x - ARROW_LENGTH * math.cos(angle - ARROW_HALF_ANGLE),
                    end.y - ARROW_LENGTH * math.sin(angle - ARROW_HALF_ANGLE))
        right = Vec2(end.x - ARROW_LENGTH * math.cos(angle + ARROW_HALF_ANGLE),
                     end.y - ARROW_LENGTH * math.sin(angle + ARROW_HALF_ANGLE))
        return end, left, right

    def render(self, surface, transformer):
        """Stroke the shaft, then fill the arrowhead at the tip."""
        start, end = self.pixel_endpoints(transformer)

        surface.begin_path()
        surface.move_to(start.x, start.y)
        surface.line_to(end.x, end.y)
        surface.stroke(VECTOR_COLOR, VECTOR_LINE_WIDTH)

        tip, left, right = self.arrowhead(transformer)
        surface.begin_path()
        surface.move_to(tip.x, tip.y)
        surface.line_to(left.x, left.y)
        surface.line_to(right.x, right.y)
        surface.close_path()
        surface.fill(VECTOR_COLOR)
