#!/usr/bin/env python3
"""
Command-line front end for the geoutil geodesic utilities.
"""

from typing import List, Optional
import webbrowser
import argparse
import logging
import math
import sys
import os
from gpxpy import gpx

from . import __version__
from .center import CenterResult
from .config import GeoUtilConfig
from .coordinate_filter import is_meaningful_coordinate
from .geometry import DistanceUnit, distance, get_distance_time_offset
from .metrics import collect_metrics, log_metrics
from .polygon import is_point_in_polygon, parse_polygon
from .track import Track
from . import visualization

# Configure logging
logger = logging.getLogger("geoutil")


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Geodesic utilities for GPS coordinates and tracks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Output structured metrics after processing a track",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"geoutil {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    distance_parser = subparsers.add_parser(
        "distance", help="Great-circle distance between two coordinates"
    )
    for name in ("lat1", "lon1", "lat2", "lon2"):
        distance_parser.add_argument(name, type=float)
    distance_parser.add_argument(
        "--unit",
        type=str,
        default="K",
        help="Distance unit: K (kilometers), M (miles) or N (nautical miles) (default: K)",
    )

    offset_parser = subparsers.add_parser(
        "offset", help="Distance/time offset score between two timestamped fixes"
    )
    for name in ("lat1", "lng1", "lat2", "lng2"):
        offset_parser.add_argument(name, type=float)
    offset_parser.add_argument("t1", type=int, help="First timestamp (seconds)")
    offset_parser.add_argument("t2", type=int, help="Second timestamp (seconds)")

    center_parser = subparsers.add_parser(
        "center", help="Centre and bounding radius of a GPX track"
    )
    center_parser.add_argument("filename", type=str, help="GPX file to process")
    center_parser.add_argument(
        "--max-radius",
        action="store_true",
        help="Also compute the distance to the farthest point in meters",
    )
    center_parser.add_argument(
        "--all-points",
        action="store_true",
        help="Include placeholder coordinates (0,0 / 1,1 / scientific notation)",
    )
    center_parser.add_argument(
        "--polygon",
        type=str,
        default=None,
        help="Polygon with x=longitude, y=latitude, as WKT (e.g. 'POLYGON ((8 47, 8.1 47, ...))') "
        "or 'lon,lat;lon,lat;...'; reports how many track points fall inside",
    )
    center_parser.add_argument(
        "--map",
        type=str,
        default=None,
        help="Write an HTML map of the track and its centre to this file",
    )
    center_parser.add_argument(
        "--no-open",
        action="store_true",
        help="Don't automatically open the HTML map in browser",
    )

    offsets_parser = subparsers.add_parser(
        "offsets", help="Distance/time offsets between consecutive GPX track points"
    )
    offsets_parser.add_argument("filename", type=str, help="GPX file to process")
    offsets_parser.add_argument(
        "--threshold",
        type=int,
        default=None,
        help="Flag pairs whose offset score exceeds this value",
    )

    check_parser = subparsers.add_parser(
        "check", help="Check whether a coordinate looks like a real GPS fix"
    )
    check_parser.add_argument("longitude", type=str)
    check_parser.add_argument("latitude", type=str)

    inside_parser = subparsers.add_parser(
        "inside", help="Check whether a point lies inside a polygon"
    )
    inside_parser.add_argument("x", type=float)
    inside_parser.add_argument("y", type=float)
    inside_parser.add_argument(
        "polygon", type=str, help="Polygon as WKT or 'x,y;x,y;...'"
    )

    return parser


def config_from_args(args: argparse.Namespace) -> GeoUtilConfig:
    """Build a GeoUtilConfig from parsed command-line arguments."""
    return GeoUtilConfig(
        unit=getattr(args, "unit", "K"),
        with_max_radius=getattr(args, "max_radius", False),
        offset_threshold=getattr(args, "threshold", None),
        log_level=args.log_level,
        metrics=args.metrics,
    )


def setup_logging(config: GeoUtilConfig) -> None:
    """Setup logging configuration."""
    level = getattr(logging, config.log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def open_file_in_browser(filename: str) -> None:
    """
    Open the specified file in the default browser.

    Args:
        filename: Path to the file to open
    """
    abs_path = os.path.abspath(filename)
    try:
        webbrowser.open(f"file://{abs_path}")
        logger.debug(f"Opening {abs_path} in your default browser...")
    except Exception as e:
        logger.warning(f"Could not automatically open browser: {e}")
        logger.warning(f"Please manually open {abs_path}")


def load_track(filename: str) -> Track:
    """
    Load a GPX track, exiting with status 1 on failure.

    Args:
        filename: Path to the GPX file

    Returns:
        Track loaded from the file
    """
    try:
        track = Track.from_file(filename)
    except FileNotFoundError:
        logger.error(f"GPX file not found: {filename}")
        sys.exit(1)
    except PermissionError:
        logger.error(f"Cannot read GPX file (permission denied): {filename}")
        sys.exit(1)
    except gpx.GPXException as e:
        logger.error(f"Invalid GPX file: {e}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Unusable GPX file {filename}: {e}")
        sys.exit(1)
    logger.info(f"Loaded GPX track with {len(track)} points")
    return track


def load_polygon(text: str):
    """Parse a polygon argument, exiting with status 1 on failure."""
    try:
        vertices = parse_polygon(text)
    except ValueError as e:
        logger.error(f"Invalid polygon: {e}")
        sys.exit(1)
    if len(vertices) < 3:
        logger.warning(f"Polygon has only {len(vertices)} vertices")
    return vertices


def run_distance(args: argparse.Namespace, config: GeoUtilConfig) -> int:
    unit = DistanceUnit.coerce(config.unit)
    result = distance(args.lat1, args.lon1, args.lat2, args.lon2, unit)
    if math.isnan(result):
        logger.error("Distance could not be computed for these coordinates")
        print("nan")
        return 1
    print(f"{result:.6f} {unit.name.lower()}")
    return 0


def run_offset(args: argparse.Namespace, config: GeoUtilConfig) -> int:
    offset = get_distance_time_offset(
        args.lat1, args.lng1, args.lat2, args.lng2, args.t1, args.t2
    )
    print(
        f"score={offset.score} distance_km={offset.distance_km:.6f} "
        f"delta_seconds={offset.delta_seconds}"
    )
    return 1 if math.isnan(offset.distance_km) else 0


def format_center(center: CenterResult, with_max_radius: bool) -> str:
    text = f"{center.latitude:.6f}, {center.longitude:.6f}"
    if with_max_radius:
        text += f" (max radius {center.radius_meters:.1f} m)"
    return text


def run_center(args: argparse.Namespace, config: GeoUtilConfig) -> int:
    track = load_track(args.filename)

    try:
        center = track.center(
            with_max_radius=config.with_max_radius, meaningful_only=not args.all_points
        )
    except ValueError as e:
        logger.error(f"Cannot find centre: {e}")
        return 1

    print(f"Centre: {format_center(center, config.with_max_radius)}")

    map_polygon = None
    if args.polygon is not None:
        polygon = load_polygon(args.polygon)
        inside = sum(
            1
            for point in track
            if is_point_in_polygon(point.longitude, point.latitude, polygon)
        )
        print(f"Points inside polygon: {inside}/{len(track)}")
        # folium takes (latitude, longitude)
        map_polygon = [(lat, lon) for lon, lat in polygon]

    log_metrics(collect_metrics(track, config.offset_threshold), config)

    if args.map is not None:
        try:
            visualization.create_center_map(track, center, args.map, map_polygon)
        except Exception as e:
            logger.error(f"Failed to create map: {e}")
            return 1
        if not args.no_open:
            open_file_in_browser(args.map)

    return 0


def run_offsets(args: argparse.Namespace, config: GeoUtilConfig) -> int:
    track = load_track(args.filename)
    offsets = track.distance_time_offsets()

    if not offsets:
        print("No timestamped point pairs found")
        return 0

    threshold = config.offset_threshold
    for index, offset in offsets:
        flagged = (
            threshold is not None
            and not math.isnan(offset.score)
            and offset.score > threshold
        )
        annotation = "!" if flagged else " "
        print(
            f"{index:6d} {annotation} score={offset.score} "
            f"distance={offset.distance_km * 1000:.1f} m "
            f"delta={offset.delta_seconds} s"
        )

    metrics = collect_metrics(track, threshold)
    if threshold is not None:
        print(f"Flagged {metrics.flagged_pairs}/{metrics.timed_pairs} pairs")
    log_metrics(metrics, config)
    return 0


def run_check(args: argparse.Namespace, config: GeoUtilConfig) -> int:
    if is_meaningful_coordinate(args.longitude, args.latitude):
        print("meaningful")
        return 0
    print("not meaningful")
    return 1


def run_inside(args: argparse.Namespace, config: GeoUtilConfig) -> int:
    polygon = load_polygon(args.polygon)
    if is_point_in_polygon(args.x, args.y, polygon):
        print("inside")
        return 0
    print("outside")
    return 1


COMMANDS = {
    "distance": run_distance,
    "offset": run_offset,
    "center": run_center,
    "offsets": run_offsets,
    "check": run_check,
    "inside": run_inside,
}


def main(argv: Optional[List[str]] = None):
    """
    Parses command-line arguments and runs the requested command.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = config_from_args(args)
    setup_logging(config)

    status = COMMANDS[args.command](args, config)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
