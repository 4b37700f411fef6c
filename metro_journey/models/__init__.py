"""데이터 모델"""

from .schemas import (
    Coordinates,
    Station,
    MetroLine,
    DurationBreakdownModel,
    DurationModel,
    RouteResponse,
    NearestStationResponse,
    ProgressRequest,
    ProgressResponse,
)

__all__ = [
    "Coordinates",
    "Station",
    "MetroLine",
    "DurationBreakdownModel",
    "DurationModel",
    "RouteResponse",
    "NearestStationResponse",
    "ProgressRequest",
    "ProgressResponse",
]
