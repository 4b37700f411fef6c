"""여정 계획 서비스 모듈"""
from .graph_builder import build_graph
from .route_finder import find_route
from .nearest_station import NearestStation, find_nearest_station, find_nearest_with_distance
from .progress import JourneyProgress, StationChangeTracker, compute_progress
from .network_data import MetroNetwork, load_network_data
from .journey import Journey, JourneyService, journey_service, check_journey_service

__all__ = [
    "build_graph",
    "find_route",
    "NearestStation",
    "find_nearest_station",
    "find_nearest_with_distance",
    "JourneyProgress",
    "StationChangeTracker",
    "compute_progress",
    "MetroNetwork",
    "load_network_data",
    "Journey",
    "JourneyService",
    "journey_service",
    "check_journey_service",
]
