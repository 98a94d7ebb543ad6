"""
Cartesian Plane Plotter - Input Parsing Service

Turns raw text from the input fields into Points. Bad input is returned as
a value (ParseResult.error) rather than raised, so callers decide how to
tell the user and never mutate the plane on failure.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Optional

from cartesian_plane.constants import ENDPOINT_SEPARATOR
from cartesian_plane.models.geometry import Point

# Plain decimal with optional sign and exponent: "2", "-0.5", ".5", "1e3"
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class InvalidCoordinateInput(ValueError):
    """Raised (via ParseResult.unwrap) when coordinate text is not a finite number."""

    def __init__(self, raw_text, message):
        super().__init__(message)
        self.raw_text = raw_text
        self.message = message


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a parse: either value or error is set."""
    value: Any = None
    error: Optional[InvalidCoordinateInput] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self):
        """Return the value, raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value


def parse_coordinate(text) -> ParseResult:
    """Parse a single coordinate.

    Leading/trailing whitespace is ignored. Only plain decimal notation is
    accepted; empty text, other numeric syntax ("1_000", "0x10", "nan",
    "inf") and values that overflow to infinity are rejected.

    Args:
        text: Raw field text

    Returns:
        ParseResult with a float value
    """
    raw = text if text is not None else ""
    stripped = raw.strip()
    if not stripped:
        return ParseResult(error=InvalidCoordinateInput(raw, "Coordinate is empty."))
    if not DECIMAL_PATTERN.fullmatch(stripped):
        return ParseResult(error=InvalidCoordinateInput(raw, f"'{stripped}' is not a number."))
    value = float(stripped)
    if not math.isfinite(value):
        return ParseResult(error=InvalidCoordinateInput(raw, f"'{stripped}' is not a finite number."))
    return ParseResult(value=value)


def parse_point_input(x_text, y_text) -> ParseResult:
    """Parse the two point fields into a Point.

    Returns:
        ParseResult with a Point value, or the first failing coordinate's error
    """
    x = parse_coordinate(x_text)
    y = parse_coordinate(y_text)
    for result in (x, y):
        if not result.ok:
            return ParseResult(error=InvalidCoordinateInput(
                result.error.raw_text,
                "Enter valid X and Y coordinates."
            ))
    return ParseResult(value=Point(x.value, y.value))


def parse_endpoint_input(text) -> ParseResult:
    """Parse a vector endpoint written as "x,y".

    Exactly two comma-separated components are required.

    Returns:
        ParseResult with a Point value
    """
    raw = text if text is not None else ""
    parts = raw.split(ENDPOINT_SEPARATOR)
    error = InvalidCoordinateInput(raw, "Enter valid origin/tip coordinates (format: x,y).")
    if len(parts) != 2:
        return ParseResult(error=error)
    x = parse_coordinate(parts[0])
    y = parse_coordinate(parts[1])
    if not (x.ok and y.ok):
        return ParseResult(error=error)
    return ParseResult(value=Point(x.value, y.value))
