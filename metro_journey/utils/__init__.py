"""Utility modules"""

from .geo import haversine_distance, coerce_position
from .duration import (
    LineState,
    DurationBreakdown,
    DurationEstimate,
    advance_line_state,
    count_line_changes,
    estimate_duration,
)

__all__ = [
    # geo
    "haversine_distance",
    "coerce_position",
    # duration
    "LineState",
    "DurationBreakdown",
    "DurationEstimate",
    "advance_line_state",
    "count_line_changes",
    "estimate_duration",
]
