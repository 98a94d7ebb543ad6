"""Coordinate transformation utilities for canvas rendering.

Provides conversion between the two coordinate systems:
- Cartesian space (origin at canvas center, Y-up, units)
- Canvas pixels (origin at top-left, Y-down)
"""

from cartesian_plane.constants import DEFAULT_SCALE
from cartesian_plane.models.transform import Vec2


class CoordinateTransformer:
	"""Affine map between Cartesian units and canvas pixels.

	The center is fixed at half the surface size and the scale never changes
	after construction, so both directions are pure functions of their inputs.
	"""

	def __init__(self, width, height, scale=DEFAULT_SCALE):
		"""
		Args:
			width: Surface width in pixels
			height: Surface height in pixels
			scale: Pixels per Cartesian unit (must be positive)
		"""
		if width <= 0 or height <= 0:
			raise ValueError(f"Surface size must be positive, got {width}x{height}")
		if scale <= 0:
			raise ValueError(f"Scale must be positive, got {scale}")
		self._width = width
		self._height = height
		self._scale = scale
		self._center_x = width / 2
		self._center_y = height / 2

	@property
	def width(self):
		return self._width

	@property
	def height(self):
		return self._height

	@property
	def scale(self):
		return self._scale

	@property
	def center_x(self):
		return self._center_x

	@property
	def center_y(self):
		return self._center_y

	def to_canvas(self, x, y):
		"""Convert Cartesian position to canvas pixel coordinates.

		Cartesian Y grows up, pixel Y grows down, so Y is inverted.

		Args:
			x: Cartesian X (units)
			y: Cartesian Y (units)

		Returns:
			Vec2 in canvas pixels
		"""
		return Vec2(self._center_x + x * self._scale,
		            self._center_y - y * self._scale)

	def to_cartesian(self, px, py):
		"""Convert canvas pixel coordinates to Cartesian position.

		Exact inverse of to_canvas (up to floating-point rounding).

		Args:
			px: Canvas X pixel
			py: Canvas Y pixel

		Returns:
			Vec2 in Cartesian units
		"""
		return Vec2((px - self._center_x) / self._scale,
		            (self._center_y - py) / self._scale)

	def __repr__(self):
		return f"CoordinateTransformer({self._width}x{self._height}, scale={self._scale})"
