#!/usr/bin/env python3
"""
Great-circle distance and distance/time offset calculations.
"""

from enum import Enum
from fractions import Fraction
from typing import NamedTuple, Union
import logging
import math

logger = logging.getLogger(__name__)

# Statute miles per degree of arc (60 nautical miles * 1.1515)
MILES_PER_DEGREE = 60 * 1.1515
KILOMETERS_PER_MILE = 1.609344
NAUTICAL_MILES_PER_MILE = 0.8684


class Position(NamedTuple):
    """Represents a geographic position with latitude and longitude."""

    latitude: float
    longitude: float


class DistanceUnit(Enum):
    """Enumeration for distance units."""

    KILOMETERS = "K"
    MILES = "M"
    NAUTICAL_MILES = "N"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value):
        # Case-insensitive lookup by code ("k") or by name ("kilometers")
        if isinstance(value, str):
            key = value.strip().upper()
            for member in cls:
                if key in (member.value, member.name):
                    return member
        return None

    @classmethod
    def coerce(cls, unit: Union["DistanceUnit", str, None]) -> "DistanceUnit":
        """
        Resolve a unit argument to a DistanceUnit.

        Unrecognised values resolve to MILES, since the raw computation is
        carried out in miles and only K and N trigger a conversion.
        """
        if isinstance(unit, cls):
            return unit
        try:
            return cls(unit)
        except ValueError:
            logger.debug(f"Unrecognised distance unit {unit!r}, using miles")
            return cls.MILES


class DistanceTimeOffset(NamedTuple):
    """Fused distance/time deviation between two timestamped fixes."""

    score: Union[int, float]  # int, or NaN when the distance is NaN
    distance_km: float
    delta_seconds: int


def distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    unit: Union[DistanceUnit, str] = DistanceUnit.KILOMETERS,
) -> float:
    """
    Calculate the great-circle distance between two coordinates.

    Uses the spherical law of cosines. The arccosine argument can land just
    outside [-1, 1] through rounding (typically for identical points), in
    which case the result is NaN rather than an exception. Input that cannot
    be converted to a float also gives NaN.

    Args:
        lat1: Start latitude in degrees (number or numeric text)
        lon1: Start longitude in degrees
        lat2: End latitude in degrees
        lon2: End longitude in degrees
        unit: DistanceUnit or its code ("K", "M", "N"), case-insensitive

    Returns:
        Distance in the requested unit, or NaN if it cannot be computed.
        Check the result with math.isnan() before using it.
    """
    unit = DistanceUnit.coerce(unit)

    try:
        lat1, lon1, lat2, lon2 = float(lat1), float(lon1), float(lat2), float(lon2)
        theta = lon1 - lon2
        lat1_rad = math.radians(lat1)
        lat2_rad = math.radians(lat2)
        cos_d = math.sin(lat1_rad) * math.sin(lat2_rad) + math.cos(
            lat1_rad
        ) * math.cos(lat2_rad) * math.cos(math.radians(theta))
        arc = math.acos(cos_d)
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(
            f"Distance undefined for ({lat1}, {lon1}) -> ({lat2}, {lon2}): {e}"
        )
        return math.nan

    miles = math.degrees(arc) * MILES_PER_DEGREE

    if unit == DistanceUnit.KILOMETERS:
        return miles * KILOMETERS_PER_MILE
    if unit == DistanceUnit.NAUTICAL_MILES:
        return miles * NAUTICAL_MILES_PER_MILE
    return miles


def _round_half_away_from_zero(value: Fraction) -> int:
    if value >= 0:
        return math.floor(value + Fraction(1, 2))
    return -math.floor(-value + Fraction(1, 2))


def get_distance_time_offset(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
    timestamp1: Union[int, str],
    timestamp2: Union[int, str],
) -> DistanceTimeOffset:
    """
    Combine the spatial and temporal separation of two location fixes.

    The score is round((distance_m + 1) * (delta_seconds + 1)), so it grows
    with both the distance and the elapsed time between the fixes.

    Args:
        lat1: Start latitude
        lng1: Start longitude
        lat2: End latitude
        lng2: End longitude
        timestamp1: Start timestamp in seconds (int or integer string)
        timestamp2: End timestamp in seconds (int or integer string)

    Returns:
        DistanceTimeOffset(score, distance_km, delta_seconds). The score is NaN
        when the distance is NaN.
    """
    distance_km = distance(lat1, lng1, lat2, lng2)
    delta_seconds = int(timestamp2) - int(timestamp1)

    if math.isnan(distance_km):
        return DistanceTimeOffset(math.nan, distance_km, delta_seconds)

    # Exact arithmetic so large timestamps do not lose precision
    product = (Fraction(distance_km) * 1000 + 1) * (delta_seconds + 1)
    score = _round_half_away_from_zero(product)

    return DistanceTimeOffset(score, distance_km, delta_seconds)
