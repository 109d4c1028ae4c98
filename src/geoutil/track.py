#!/usr/bin/env python3
"""
Track data model: a sequence of timestamped GPS fixes.
"""

from datetime import datetime, timezone
from typing import List, NamedTuple, Optional, TextIO, Tuple
import logging
import gpxpy
import gpxpy.gpx

from .center import CenterResult, get_center
from .coordinate_filter import is_meaningful_coordinate
from .geometry import DistanceTimeOffset, get_distance_time_offset

logger = logging.getLogger(__name__)


class TrackPoint(NamedTuple):
    """A GPS fix with an optional timestamp in POSIX seconds."""

    latitude: float
    longitude: float
    timestamp: Optional[int] = None


def to_posix_seconds(time: Optional[datetime]) -> Optional[int]:
    """Convert a GPX time to POSIX seconds, reading naive times as UTC."""
    if time is None:
        return None
    if time.tzinfo is None:
        time = time.replace(tzinfo=timezone.utc)
    return int(time.timestamp())


class Track:
    """Represents a recorded GPS track."""

    def __init__(self, points: List[TrackPoint]):
        """Initializes a Track object.

        Args:
            points: A list of TrackPoint objects in recording order.

        Raises:
            ValueError: If points is empty.
        """
        if not points:
            raise ValueError("Track points cannot be empty")

        self.points = points

    def get_bbox(self) -> Tuple[float, float, float, float]:
        """
        Get the bounding box of the track.

        Returns:
            Tuple of (south, west, north, east) in decimal degrees
        """
        latitudes = [point.latitude for point in self.points]
        longitudes = [point.longitude for point in self.points]
        return (min(latitudes), min(longitudes), max(latitudes), max(longitudes))

    def meaningful_points(self) -> List[TrackPoint]:
        """Return the points that pass the placeholder coordinate filter."""
        return [
            point
            for point in self.points
            if is_meaningful_coordinate(point.longitude, point.latitude)
        ]

    def center(
        self, with_max_radius: bool = False, meaningful_only: bool = True
    ) -> CenterResult:
        """
        Find the centre of the track.

        Args:
            with_max_radius: Also compute the radius to the farthest point
            meaningful_only: Ignore placeholder coordinates (default: True)

        Returns:
            CenterResult for the track

        Raises:
            ValueError: If no points remain after filtering
        """
        points = self.meaningful_points() if meaningful_only else self.points
        if not points:
            raise ValueError("Track has no meaningful coordinates")

        skipped = len(self.points) - len(points)
        if skipped:
            logger.info(f"Ignoring {skipped} placeholder coordinates")

        coords = [(point.latitude, point.longitude) for point in points]
        return get_center(coords, with_max_radius)

    def distance_time_offsets(self) -> List[Tuple[int, DistanceTimeOffset]]:
        """
        Compute distance/time offsets between consecutive timestamped points.

        Pairs where either point lacks a timestamp are skipped.

        Returns:
            List of (index, offset) tuples, where index is the position of
            the second point of the pair
        """
        offsets = []
        for i in range(1, len(self.points)):
            prev, curr = self.points[i - 1], self.points[i]
            if prev.timestamp is None or curr.timestamp is None:
                continue
            offset = get_distance_time_offset(
                prev.latitude,
                prev.longitude,
                curr.latitude,
                curr.longitude,
                prev.timestamp,
                curr.timestamp,
            )
            offsets.append((i, offset))

        logger.debug(f"Computed {len(offsets)} distance/time offsets")
        return offsets

    @classmethod
    def from_gpx(cls, file_input: TextIO) -> "Track":
        """
        Parse GPX data and concatenate all tracks/segments into a single track.

        Args:
            file_input: File-like object containing GPX data

        Returns:
            Track object

        Raises:
            ValueError: If the GPX data contains no track points.
            gpxpy.gpx.GPXException: If GPX data is malformed.
        """
        gpx_data = gpxpy.parse(file_input)

        points = []
        for track in gpx_data.tracks:
            for segment in track.segments:
                for point in segment.points:
                    timestamp = to_posix_seconds(point.time)
                    points.append(
                        TrackPoint(
                            latitude=point.latitude,
                            longitude=point.longitude,
                            timestamp=timestamp,
                        )
                    )

        track_obj = cls(points)
        logger.debug(f"Parsed {len(track_obj)} track points from GPX data")
        return track_obj

    @classmethod
    def from_file(cls, filename: str) -> "Track":
        """
        Load and parse a GPX file into a track.

        Raises:
            ValueError: If the file contains no track points.
            FileNotFoundError: If file doesn't exist.
            PermissionError: If file can't be read.
            gpxpy.gpx.GPXException: If GPX file is malformed.
        """
        logger.debug(f"Reading GPX file: {filename}")
        with open(filename, "r", encoding="utf-8") as f:
            return cls.from_gpx(f)

    def __len__(self) -> int:
        """Return number of points in the track."""
        return len(self.points)

    def __getitem__(self, index):
        """Allow indexing into points."""
        return self.points[index]

    def __iter__(self):
        """Allow iteration over points."""
        return iter(self.points)
