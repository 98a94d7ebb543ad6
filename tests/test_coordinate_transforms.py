"""
Tests for CoordinateTransformer.

Verifies:
- Center derived from surface size
- Origin mapping and Y inversion
- Inverse law in both directions
- Reference scenario (600x400, scale 30)
- Construction guards
"""
import random
import pytest
from cartesian_plane.models.transform import Vec2
from cartesian_plane.utils.coordinate_transforms import CoordinateTransformer


# ══════════════════════════════════════════════════════════════════════════
# Construction
# ══════════════════════════════════════════════════════════════════════════

class TestConstruction:

    def test_center_is_half_size(self, transformer):
        assert transformer.center_x == 300
        assert transformer.center_y == 200

    def test_odd_size_center_is_fractional(self):
        t = CoordinateTransformer(301, 201, 30)
        assert t.center_x == 150.5
        assert t.center_y == 100.5

    def test_default_scale(self):
        from cartesian_plane.constants import DEFAULT_SCALE
        t = CoordinateTransformer(600, 400)
        assert t.scale == DEFAULT_SCALE

    @pytest.mark.parametrize("scale", [0, -1, -30])
    def test_non_positive_scale_rejected(self, scale):
        with pytest.raises(ValueError):
            CoordinateTransformer(600, 400, scale)

    @pytest.mark.parametrize("size", [(0, 400), (600, 0), (-10, 10)])
    def test_non_positive_size_rejected(self, size):
        with pytest.raises(ValueError):
            CoordinateTransformer(size[0], size[1], 30)


# ══════════════════════════════════════════════════════════════════════════
# Cartesian -> Canvas
# ══════════════════════════════════════════════════════════════════════════

class TestToCanvas:

    def test_returns_vec2(self, transformer):
        assert isinstance(transformer.to_canvas(1, 1), Vec2)

    @pytest.mark.parametrize("width,height,scale", [(600, 400, 30), (800, 800, 40), (123, 77, 7)])
    def test_origin_maps_to_center(self, width, height, scale):
        t = CoordinateTransformer(width, height, scale)
        assert t.to_canvas(0, 0) == Vec2(t.center_x, t.center_y)

    def test_y_up_is_pixel_up(self, transformer):
        assert transformer.to_canvas(0, 1).y == transformer.center_y - 30
        assert transformer.to_canvas(0, -1).y == transformer.center_y + 30

    def test_x_right_is_pixel_right(self, transformer):
        assert transformer.to_canvas(1, 0).x == transformer.center_x + 30
        assert transformer.to_canvas(-1, 0).x == transformer.center_x - 30

    def test_reference_point(self, transformer):
        px, py = transformer.to_canvas(2, 3)
        assert (px, py) == (360, 110)

    def test_outside_surface_is_not_clamped(self, transformer):
        assert transformer.to_canvas(100, -100) == Vec2(3300, 3200)


# ══════════════════════════════════════════════════════════════════════════
# Canvas -> Cartesian
# ══════════════════════════════════════════════════════════════════════════

class TestToCartesian:

    def test_center_maps_to_origin(self, transformer):
        assert transformer.to_cartesian(300, 200) == Vec2(0, 0)

    def test_top_left_corner(self, transformer):
        assert transformer.to_cartesian(0, 0) == Vec2(-10, 200 / 30)

    def test_reference_point(self, transformer):
        assert transformer.to_cartesian(360, 110) == Vec2(2, 3)


# ══════════════════════════════════════════════════════════════════════════
# Inverse law
# ══════════════════════════════════════════════════════════════════════════

class TestInverse:

    def test_cartesian_round_trip(self, transformer):
        rng = random.Random(7)
        for _ in range(200):
            x = rng.uniform(-1e4, 1e4)
            y = rng.uniform(-1e4, 1e4)
            back = transformer.to_cartesian(*transformer.to_canvas(x, y))
            assert back.x == pytest.approx(x, abs=1e-9)
            assert back.y == pytest.approx(y, abs=1e-9)

    def test_pixel_round_trip(self):
        t = CoordinateTransformer(641, 479, 17)
        rng = random.Random(11)
        for _ in range(200):
            px = rng.uniform(-5000, 5000)
            py = rng.uniform(-5000, 5000)
            back = t.to_canvas(*t.to_cartesian(px, py))
            assert back.x == pytest.approx(px, abs=1e-9)
            assert back.y == pytest.approx(py, abs=1e-9)
