"""UI components for the Cartesian Plane Plotter

- plane_canvas: widget showing the plane's backing image
- input_panel: point/vector text fields and action buttons
"""

from .plane_canvas import PlaneCanvasWidget
from .input_panel import InputPanel

__all__ = [
    'PlaneCanvasWidget',
    'InputPanel',
]
