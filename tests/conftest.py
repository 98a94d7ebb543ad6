"""
Shared fixtures for Cartesian Plane Plotter tests.

Provides a recording drawing surface, transformers and planes sized like the
600x400 / scale 30 reference canvas.
"""
import sys
import os
from contextlib import contextmanager

import pytest

# Ensure plotter/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'plotter', 'src'))

# Widgets and QImages render without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from cartesian_plane.constants import VECTOR_COLOR, POINT_COLOR
from cartesian_plane.utils.drawing_surface import DrawingSurface


# ── Recording surface ────────────────────────────────────────────────────

class RecordingSurface(DrawingSurface):
    """DrawingSurface that records every primitive, one list per frame."""

    def __init__(self, width=600, height=400):
        self._width = width
        self._height = height
        self.frames = []
        self._ops = []

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def last_frame(self):
        return self.frames[-1]

    @contextmanager
    def frame(self):
        self._ops = []
        yield self
        self.frames.append(self._ops)

    def clear_rect(self, x, y, w, h):
        self._ops.append(('clear_rect', x, y, w, h))

    def begin_path(self):
        self._ops.append(('begin_path',))

    def close_path(self):
        self._ops.append(('close_path',))

    def move_to(self, x, y):
        self._ops.append(('move_to', x, y))

    def line_to(self, x, y):
        self._ops.append(('line_to', x, y))

    def arc(self, cx, cy, radius, start_angle, end_angle):
        self._ops.append(('arc', cx, cy, radius, start_angle, end_angle))

    def fill(self, color):
        self._ops.append(('fill', color))

    def stroke(self, color, width):
        self._ops.append(('stroke', color, width))


def paths(ops):
    """Group recorded ops into (path_ops, paint_op) pairs, in paint order."""
    result = []
    current = []
    for op in ops:
        if op[0] == 'begin_path':
            current = []
        elif op[0] in ('fill', 'stroke'):
            result.append((list(current), op))
        elif op[0] != 'clear_rect':
            current.append(op)
    return result


def plotted_entities(ops):
    """Summarize a frame as ('point', cx, cy) / ('vector', x1, y1, x2, y2) in draw order."""
    entities = []
    for path_ops, paint in paths(ops):
        if paint == ('fill', POINT_COLOR):
            arc = next(op for op in path_ops if op[0] == 'arc')
            entities.append(('point', arc[1], arc[2]))
        elif paint[0] == 'stroke' and paint[1] == VECTOR_COLOR:
            start = next(op for op in path_ops if op[0] == 'move_to')
            end = next(op for op in path_ops if op[0] == 'line_to')
            entities.append(('vector', start[1], start[2], end[1], end[2]))
    return entities


# ── Fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def recording_surface():
    """Fresh 600x400 recording surface"""
    return RecordingSurface(600, 400)


@pytest.fixture
def transformer():
    """Transformer for the 600x400 / scale 30 reference canvas"""
    from cartesian_plane.utils.coordinate_transforms import CoordinateTransformer
    return CoordinateTransformer(600, 400, 30)


@pytest.fixture
def plane(recording_surface):
    """Plane bound to a recording surface"""
    from cartesian_plane.models.plane import Plane
    return Plane(recording_surface, scale=30)


@pytest.fixture
def notifications():
    """Collects (title, message) pairs passed to a notify callback"""
    calls = []

    def notify(title, message):
        calls.append((title, message))

    notify.calls = calls
    return notify
