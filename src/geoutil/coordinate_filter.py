#!/usr/bin/env python3
"""
Heuristic filter for placeholder or garbage coordinate values.
"""

from typing import Any
import logging
import math
import re

logger = logging.getLogger(__name__)

# Leading decimal number, optionally in scientific notation
_LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: Any) -> float:
    """
    Parse a coordinate value leniently.

    Numbers are converted directly. Text is parsed from its leading numeric
    prefix, so "12.5abc" gives 12.5 and text without a numeric prefix gives 0.
    """
    if isinstance(value, (int, float)):
        return float(value)
    match = _LEADING_NUMBER.match(str(value))
    if not match:
        return 0.0
    return float(match.group(0))


def coordinate_text(value: Any) -> str:
    """
    Render a coordinate value as text for the scientific-notation check.

    Booleans render as "1" and "". Floats use exponent notation below 1e-4
    and from 1e15 upward in magnitude.
    """
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, float) and value != 0 and math.isfinite(value):
        if abs(value) >= 1e15 or abs(value) < 1e-4:
            return f"{value:E}"
    return str(value)


def is_meaningful_coordinate(longitude: Any, latitude: Any) -> bool:
    """
    Check whether a coordinate pair looks like a real GPS fix.

    This is not a geographic range check. It rejects values that are known
    to come from placeholders or upstream formatting bugs:

    - either value missing
    - both values 0
    - both values 1
    - scientific notation anywhere after the first character of the
      concatenated text of both values

    Args:
        longitude: Longitude as a number or text
        latitude: Latitude as a number or text

    Returns:
        True if the pair is plausibly a real coordinate
    """
    if longitude is None or latitude is None:
        return False

    lon_value = parse_number(longitude)
    lat_value = parse_number(latitude)

    if lon_value == 0 and lat_value == 0:
        return False

    if lon_value == 1 and lat_value == 1:
        return False

    # An "E" at index 0 is not rejected
    text = (coordinate_text(longitude) + coordinate_text(latitude)).upper()
    if text.find("E") > 0:
        logger.debug(f"Rejecting coordinate in scientific notation: {longitude}, {latitude}")
        return False

    return True
