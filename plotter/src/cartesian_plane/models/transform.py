"""Coordinate pair data structure shared by both coordinate spaces."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """2D coordinate pair.

    Used for any x/y pair across the two spaces:
    - Cartesian units (center-origin, Y-up)
    - Canvas pixels (top-left origin, Y-down)
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))
