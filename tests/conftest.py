"""
pytest fixtures for metro_journey tests
"""
from typing import List, Optional

import pytest

from metro_journey.config import DEFAULT_NETWORK_DATA_FILE, DurationConfig
from metro_journey.models.schemas import Coordinates, MetroLine, Station
from metro_journey.services.network_data import MetroNetwork


def make_station(
    station_id: str,
    name: str,
    lat: float,
    lng: float,
    lines: Optional[List[str]] = None
) -> Station:
    return Station(
        id=station_id,
        name=name,
        coordinates=Coordinates(lat=lat, lng=lng),
        lines=lines or [],
    )


@pytest.fixture
def single_line():
    """한 노선 위 A-B-C (0.01도 간격)"""
    stations = {
        "A": make_station("A", "Alpha", 28.60, 77.20, ["L1"]),
        "B": make_station("B", "Bravo", 28.61, 77.20, ["L1"]),
        "C": make_station("C", "Charlie", 28.62, 77.20, ["L1"]),
    }
    lines = [MetroLine(id="L1", name="Line 1", color="#ff0000", stations=["A", "B", "C"])]
    return stations, lines


@pytest.fixture
def interchange_network():
    """
    L1: P1 - X1(Central)
    L2: X2(Central) - Q2
    X1, X2는 역명만 같고 노선 구간은 없음
    """
    stations = {
        "P1": make_station("P1", "West", 28.60, 77.20, ["L1"]),
        "X1": make_station("X1", "Central", 28.61, 77.20, ["L1"]),
        "X2": make_station("X2", "Central", 28.6101, 77.2001, ["L2"]),
        "Q2": make_station("Q2", "East", 28.62, 77.21, ["L2"]),
    }
    lines = [
        MetroLine(id="L1", name="Line 1", color="#ff0000", stations=["P1", "X1"]),
        MetroLine(id="L2", name="Line 2", color="#0000ff", stations=["X2", "Q2"]),
    ]
    return stations, lines


@pytest.fixture
def three_platform_network():
    """승강장 3개가 같은 역명(Hub)을 공유하는 네트워크"""
    stations = {
        "a1": make_station("a1", "North", 28.70, 77.10, ["LA"]),
        "h1": make_station("h1", "Hub", 28.65, 77.15, ["LA"]),
        "h2": make_station("h2", "Hub", 28.6501, 77.1501, ["LB"]),
        "h3": make_station("h3", "Hub", 28.6502, 77.1502, ["LC"]),
        "b2": make_station("b2", "South", 28.60, 77.15, ["LB"]),
        "c3": make_station("c3", "East", 28.65, 77.25, ["LC"]),
    }
    lines = [
        MetroLine(id="LA", name="A", stations=["a1", "h1"]),
        MetroLine(id="LB", name="B", stations=["h2", "b2"]),
        MetroLine(id="LC", name="C", stations=["h3", "c3"]),
    ]
    return stations, lines


@pytest.fixture
def sample_network() -> MetroNetwork:
    """패키지 내장 샘플 노선 데이터 (1~4호선 일부)"""
    return MetroNetwork.from_json(DEFAULT_NETWORK_DATA_FILE)


@pytest.fixture
def default_config() -> DurationConfig:
    return DurationConfig()


@pytest.fixture
def station_factory():
    """Station 생성 헬퍼"""
    return make_station
