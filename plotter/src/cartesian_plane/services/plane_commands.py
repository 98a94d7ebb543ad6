"""
Cartesian Plane Plotter - Plane Command Handlers

Discrete handlers behind the Add Point / Add Vector / Clear actions.
The Plane and the notification callback are passed in, so handlers hold no
global state and can be driven directly from tests.

Each add handler either mutates the plane once and returns True, or notifies
the user and returns False leaving the plane untouched.
"""

import logging

from cartesian_plane.models.geometry import Vector
from cartesian_plane.services.input_parsing import parse_point_input, parse_endpoint_input

logger = logging.getLogger(__name__)

INVALID_INPUT_TITLE = "Invalid coordinates"


def handle_add_point(plane, x_text, y_text, notify):
    """Parse point fields and plot the point.

    Args:
        plane: Plane to mutate
        x_text: Raw X field text
        y_text: Raw Y field text
        notify: Callable(title, message) used to report bad input

    Returns:
        True if a point was added
    """
    result = parse_point_input(x_text, y_text)
    if not result.ok:
        logger.info("Rejected point input x=%r y=%r", x_text, y_text)
        notify(INVALID_INPUT_TITLE, result.error.message)
        return False
    plane.add_point(result.value)
    return True


def handle_add_vector(plane, origin_text, tip_text, notify):
    """Parse endpoint fields and plot the vector.

    Both endpoints must parse before anything is constructed.

    Returns:
        True if a vector was added
    """
    origin = parse_endpoint_input(origin_text)
    tip = parse_endpoint_input(tip_text)
    for result in (origin, tip):
        if not result.ok:
            logger.info("Rejected vector input origin=%r tip=%r", origin_text, tip_text)
            notify(INVALID_INPUT_TITLE, result.error.message)
            return False
    plane.add_vector(Vector(origin.value, tip.value))
    return True


def handle_clear(plane):
    """Remove everything plotted."""
    plane.clear()
