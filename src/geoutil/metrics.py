"""
Module for collecting and logging metrics related to a track.
"""

import logging
import math
from typing import NamedTuple, Optional

from .config import GeoUtilConfig
from .track import Track

logger = logging.getLogger(__name__)


class TrackMetrics(NamedTuple):
    """Container for track metrics data."""

    total_points: int
    meaningful_points: int
    timed_pairs: int
    flagged_pairs: int
    max_score: Optional[int]


def collect_metrics(track: Track, threshold: Optional[int] = None) -> TrackMetrics:
    """
    Collect metrics from a track.

    Args:
        track: Track to analyze
        threshold: Offset score above which a pair of fixes is flagged.
            If None, no pairs are flagged.

    Returns:
        TrackMetrics containing all collected metrics
    """
    offsets = track.distance_time_offsets()
    scores = [offset.score for _, offset in offsets if not math.isnan(offset.score)]

    flagged = 0
    if threshold is not None:
        flagged = sum(1 for score in scores if score > threshold)

    return TrackMetrics(
        total_points=len(track),
        meaningful_points=len(track.meaningful_points()),
        timed_pairs=len(offsets),
        flagged_pairs=flagged,
        max_score=max(scores) if scores else None,
    )


def log_metrics(metrics: TrackMetrics, config: GeoUtilConfig) -> None:
    """
    Log detailed metrics.

    Args:
        metrics: TrackMetrics containing collected metrics
        config: GeoUtilConfig with the metrics flag
    """
    if not config.metrics:
        return

    logger.debug("=== GEOUTIL_METRICS ===")
    logger.debug(f"total_points={metrics.total_points}")
    logger.debug(f"meaningful_points={metrics.meaningful_points}")
    logger.debug(
        f"rejected_points={metrics.total_points - metrics.meaningful_points}"
    )
    logger.debug(f"timed_pairs={metrics.timed_pairs}")
    logger.debug(f"flagged_pairs={metrics.flagged_pairs}")
    if metrics.max_score is not None:
        logger.debug(f"max_offset_score={metrics.max_score}")
    logger.debug("=== END_GEOUTIL_METRICS ===")
