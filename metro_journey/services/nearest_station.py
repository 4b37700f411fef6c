"""
최근접 역 검색

전체 역(글로벌) 또는 진행 중인 경로의 역(경로 한정)을 대상으로
Haversine 거리 최소 역을 선형 탐색합니다. 두 모드는 같은 거리 함수를 씁니다.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from metro_journey.models.schemas import Station
from metro_journey.utils.geo import coerce_position, distance_to


Candidates = Union[Mapping[str, Station], Iterable[Station]]


@dataclass(frozen=True)
class NearestStation:
    """최근접 역 검색 결과

    Attributes:
        station: 가장 가까운 역
        distance_meters: 현재 위치에서의 거리 (m)
    """
    station: Station
    distance_meters: float


def find_nearest_with_distance(
    position: Any,
    candidates: Candidates
) -> Optional[NearestStation]:
    """
    위치에서 가장 가까운 역과 거리 반환

    Args:
        position: 위치 (coerce_position()이 지원하는 형식)
        candidates: {id: Station} 또는 Station 목록 (경로 등)

    Returns:
        NearestStation 또는 None (후보가 없거나 위치를 해석할 수 없는 경우)
        거리가 같으면 먼저 나온 후보가 선택됩니다.
    """
    coords = coerce_position(position)
    if coords is None:
        return None

    if isinstance(candidates, Mapping):
        candidates = candidates.values()

    nearest: Optional[Station] = None
    min_dist = float("inf")

    for station in candidates:
        dist = distance_to(coords, station.coordinates.lat, station.coordinates.lng)
        if dist < min_dist:
            min_dist = dist
            nearest = station

    if nearest is None:
        return None

    return NearestStation(station=nearest, distance_meters=min_dist)


def find_nearest_station(position: Any, candidates: Candidates) -> Optional[Station]:
    """위치에서 가장 가까운 역 (없으면 None)"""
    result = find_nearest_with_distance(position, candidates)
    return result.station if result else None
