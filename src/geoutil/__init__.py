#!/usr/bin/env python3
"""
geoutil - Geodesic utilities for GPS coordinates.

This package provides great-circle distances, a fused distance/time offset
score for pairs of GPS fixes, centroids of coordinate sets, a placeholder
coordinate filter and a point-in-polygon test, plus tools to apply them to
GPX tracks.
"""
import importlib.metadata

__version__ = importlib.metadata.version("geoutil")

# Import main functions and classes for public API
from .geometry import (
    DistanceTimeOffset,
    DistanceUnit,
    Position,
    distance,
    get_distance_time_offset,
)
from .center import CenterResult, get_center
from .coordinate_filter import is_meaningful_coordinate
from .polygon import is_point_in_polygon
from .track import Track, TrackPoint

__all__ = [
    "CenterResult",
    "DistanceTimeOffset",
    "DistanceUnit",
    "Position",
    "Track",
    "TrackPoint",
    "distance",
    "get_center",
    "get_distance_time_offset",
    "is_meaningful_coordinate",
    "is_point_in_polygon",
]
