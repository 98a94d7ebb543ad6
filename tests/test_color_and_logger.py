"""
Tests for the Color model and the logging/notification helpers.

Verifies:
- Color construction, clamping, hex parsing, QColor conversion
- Every palette constant resolves to a Color
- notify_user falls back to the log without a main window
- loggerRaise re-raises in debug and release mode
"""
import logging
import pytest

from cartesian_plane import constants
from cartesian_plane.models.color import Color
from cartesian_plane.utils import logger as logger_module


# ══════════════════════════════════════════════════════════════════════════
# Color
# ══════════════════════════════════════════════════════════════════════════

class TestColor:

    @staticmethod
    def channels(color):
        q = color.to_qcolor()
        return (q.red(), q.green(), q.blue())

    def test_from_hex(self, qapp):
        assert self.channels(Color.from_hex("#FF6B6B")) == (255, 107, 107)

    def test_from_hex_no_hash(self, qapp):
        assert self.channels(Color.from_hex("00ff00")) == (0, 255, 0)

    @pytest.mark.parametrize("text", ["", "#FFF", "#GGGGGG", None, 123])
    def test_from_hex_invalid(self, text):
        assert Color.from_hex(text) is None

    def test_clamping(self, qapp):
        assert self.channels(Color(300, -10, 128)) == (255, 0, 128)

    def test_palette_resolves(self):
        names = [
            'CANVAS_BACKGROUND', 'POINT_COLOR', 'VECTOR_COLOR', 'AXIS_COLOR',
            'GRID_AXIS_COLOR', 'GRID_MAJOR_COLOR', 'GRID_MINOR_COLOR',
        ]
        for name in names:
            assert isinstance(Color.from_hex(getattr(constants, name)), Color), name


# ══════════════════════════════════════════════════════════════════════════
# Logger helpers
# ══════════════════════════════════════════════════════════════════════════

class TestLogger:

    @pytest.fixture(autouse=True)
    def no_window(self):
        logger_module.set_main_window(None)
        yield
        logger_module.set_main_window(None)

    def test_notify_without_window_logs(self, caplog):
        with caplog.at_level(logging.WARNING, logger='CartesianPlane'):
            logger_module.notify_user("Invalid coordinates", "Enter valid X and Y coordinates.")
        assert "Enter valid X and Y coordinates." in caplog.text

    def test_logger_raise_debug_mode(self, monkeypatch):
        monkeypatch.setattr(logger_module, "DEBUG_MODE", True)
        with pytest.raises(RuntimeError):
            logger_module.loggerRaise(RuntimeError("boom"), "Failed")

    def test_logger_raise_release_mode_logs_and_raises(self, monkeypatch, caplog):
        monkeypatch.setattr(logger_module, "DEBUG_MODE", False)
        with caplog.at_level(logging.ERROR, logger='CartesianPlane'):
            with pytest.raises(RuntimeError):
                logger_module.loggerRaise(RuntimeError("boom"), "Failed to export PNG")
        assert "Failed to export PNG" in caplog.text
