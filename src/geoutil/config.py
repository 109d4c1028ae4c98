from dataclasses import dataclass
from typing import Optional


@dataclass
class GeoUtilConfig:
    """Configuration for the geoutil CLI."""

    unit: str = "K"
    with_max_radius: bool = False
    offset_threshold: Optional[int] = None
    log_level: str = "WARNING"
    metrics: bool = False
