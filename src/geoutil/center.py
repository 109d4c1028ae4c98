#!/usr/bin/env python3
"""
Centroid calculation for sets of geographic coordinates.
"""

from collections.abc import Sequence
from typing import Any, NamedTuple, Optional
import logging
import math

from .geometry import distance

logger = logging.getLogger(__name__)


class CenterResult(NamedTuple):
    """Centre of a set of coordinates and, optionally, its bounding radius."""

    latitude: float
    longitude: float
    radius_meters: float = 0.0


def get_center(coordinates: Any, with_max_radius: bool = False) -> Optional[CenterResult]:
    """
    Find the geographic centre of a set of coordinates.

    Each (latitude, longitude) pair is converted to a unit vector on the
    sphere, the vectors are averaged, and the mean vector is converted back
    to latitude/longitude.

    Args:
        coordinates: Sequence of (latitude, longitude) pairs in degrees
        with_max_radius: Also compute the distance in meters from the centre
            to the farthest input coordinate (default: False)

    Returns:
        CenterResult(latitude, longitude, radius_meters), or None if
        coordinates is not a sequence. radius_meters is 0 unless
        with_max_radius is set.

    Raises:
        ValueError: If coordinates is an empty sequence
    """
    if not isinstance(coordinates, Sequence) or isinstance(coordinates, (str, bytes)):
        logger.debug(f"Cannot find centre of non-sequence {type(coordinates).__name__}")
        return None

    if len(coordinates) == 0:
        raise ValueError("At least one coordinate is required to find a centre")

    x = y = z = 0.0
    for coord in coordinates:
        lat = math.radians(coord[0])
        lon = math.radians(coord[1])

        x += math.cos(lat) * math.cos(lon)
        y += math.cos(lat) * math.sin(lon)
        z += math.sin(lat)

    count = len(coordinates)
    x /= count
    y /= count
    z /= count

    center_lon = math.atan2(y, x)
    hyp = math.sqrt(x * x + y * y)
    center_lat = math.atan2(z, hyp)

    center = CenterResult(math.degrees(center_lat), math.degrees(center_lon))
    logger.debug(
        f"Centre of {count} coordinates: ({center.latitude:.6f}, {center.longitude:.6f})"
    )

    if not with_max_radius:
        return center

    # NaN distances never compare greater, so they are skipped
    max_radius_km = 0.0
    for coord in coordinates:
        radius_km = distance(center.latitude, center.longitude, coord[0], coord[1])
        if radius_km > max_radius_km:
            max_radius_km = radius_km

    return center._replace(radius_meters=max_radius_km * 1000)
