"""
Cartesian Plane Plotter - Color Domain Model

Canonical color representation for rendering.
Palette entries in constants.py are hex strings; the drawing surface
resolves them through this class.
"""

from typing import Optional


class Color:
    """Immutable color representation with uint8 RGB storage.

    Internal storage: _r, _g, _b (uint8 0-255)
    """

    def __init__(self, r: int, g: int, b: int):
        # Clamp to valid uint8 range
        self._r = max(0, min(255, int(r)))
        self._g = max(0, min(255, int(g)))
        self._b = max(0, min(255, int(b)))

    def to_qcolor(self):
        """Convert to PyQt5 QColor object.

        Returns:
            QColor: Qt color object for painting
        """
        from PyQt5.QtGui import QColor
        return QColor(self._r, self._g, self._b)

    @staticmethod
    def from_hex(hex_string: str) -> Optional['Color']:
        """Create Color from hex string: #RRGGBB or RRGGBB.

        Returns:
            Color object if parse succeeds, None otherwise
        """
        if not isinstance(hex_string, str):
            return None

        hex_string = hex_string.lstrip('#')
        if len(hex_string) != 6:
            return None

        try:
            channels = [int(hex_string[i:i + 2], 16) for i in (0, 2, 4)]
        except ValueError:
            return None
        return Color(*channels)
