"""
Cartesian Plane Plotter - Data Models

This module contains the value types that get plotted.
This is the MODEL in MVC architecture.

Public API: Import Point, Vector, Vec2, Color from cartesian_plane.models.
The Plane itself lives in cartesian_plane.models.plane (it depends on utils and is imported directly).
"""

from .transform import Vec2
from .color import Color
from .geometry import Point, Vector

__all__ = ['Vec2', 'Color', 'Point', 'Vector']
