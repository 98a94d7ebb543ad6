"""
Cartesian Plane Plotter - Constants and Configuration

This module contains all constant values used throughout the application:
- Coordinate system definitions (scale, canvas size)
- Marker and arrowhead sizes
- Color palette for grid, axes, points and vectors
- Window defaults
"""

import math

# ======================================================================
# COORDINATE SYSTEM
# ======================================================================
# Cartesian space: origin at the canvas center, Y grows UP.
# Canvas space: origin at the top-left corner, Y grows DOWN (INVERTED!)

# Pixels per Cartesian unit
DEFAULT_SCALE = 30

# Fixed drawing surface size in pixels (no resize support)
CANVAS_WIDTH = 600
CANVAS_HEIGHT = 400

# ======================================================================
# MARKERS
# ======================================================================

POINT_RADIUS = 5  # Filled circle radius in pixels

ARROW_LENGTH = 12  # Arrowhead edge length in pixels
ARROW_HALF_ANGLE = math.pi / 6  # Edges sit +/-30 degrees off the segment

VECTOR_LINE_WIDTH = 2.5

# ======================================================================
# GRID AND AXES
# ======================================================================

GRID_LINE_WIDTH = 0.5
AXIS_LINE_WIDTH = 1.5

# Minor gridlines every half unit
GRID_SUBDIVISIONS = 2

# ======================================================================
# COLOR PALETTE (dark theme)
# ======================================================================

CANVAS_BACKGROUND = '#1E2233'

POINT_COLOR = '#FF6B6B'
VECTOR_COLOR = '#8EFFC1'

GRID_AXIS_COLOR = '#546DE5'   # Gridline lying on a principal axis
GRID_MAJOR_COLOR = '#404B69'  # Full-unit gridlines
GRID_MINOR_COLOR = '#353A50'  # Half-unit gridlines

AXIS_COLOR = '#00F2FE'

# ======================================================================
# INPUT
# ======================================================================

# Separator between the two components of a vector endpoint ("x,y")
ENDPOINT_SEPARATOR = ','

# ======================================================================
# WINDOW
# ======================================================================

WINDOW_TITLE = "Cartesian Plane"
WINDOW_MIN_WIDTH = 900
WINDOW_MIN_HEIGHT = 480
