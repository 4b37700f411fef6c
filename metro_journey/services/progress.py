"""여정 진행 상황 계산

현재 위치에서 경로 내 최근접 역을 찾아 진행 위치(인덱스)를 계산합니다.
도착 알림 발송은 외부 알림 모듈 담당이며, 여기서는 현재 역과
경로 내 위치만 제공합니다.
"""

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from metro_journey.models.schemas import Station
from metro_journey.models.types import JourneyProgressDict
from metro_journey.services.nearest_station import find_nearest_with_distance


STATUS_CURRENT = "CURRENT"
STATUS_ARRIVED = "ARRIVED"


@dataclass(frozen=True)
class JourneyProgress:
    """여정 진행 상황

    Attributes:
        current_station: 경로 내 현재 위치에서 가장 가까운 역
        current_index: 경로 내 current_station 인덱스
        previous_station: 직전 역 (출발역이면 None)
        next_station: 다음 역 (도착역이면 None)
        visited_count: 지나온 역 수 (현재 역 포함)
        is_finished: 도착역 도달 여부
        distance_meters: 현재 위치 ~ current_station 거리 (m)
    """
    current_station: Station
    current_index: int
    previous_station: Optional[Station]
    next_station: Optional[Station]
    visited_count: int
    is_finished: bool
    distance_meters: float

    @property
    def status(self) -> str:
        return STATUS_ARRIVED if self.is_finished else STATUS_CURRENT

    def to_dict(self) -> JourneyProgressDict:
        return {
            "current_station": self.current_station,
            "current_index": self.current_index,
            "previous_station": self.previous_station,
            "next_station": self.next_station,
            "visited_count": self.visited_count,
            "is_finished": self.is_finished,
            "status": self.status,
            "distance_meters": self.distance_meters,
        }


def compute_progress(route: Sequence[Station], position: Any) -> Optional[JourneyProgress]:
    """
    경로 한정 최근접 역 기반 진행 상황 계산

    Args:
        route: 출발~도착 Station 리스트
        position: 현재 위치

    Returns:
        JourneyProgress 또는 None (경로가 비었거나 위치 해석 불가)
    """
    if not route:
        return None

    nearest = find_nearest_with_distance(position, route)
    if nearest is None:
        return None

    # 같은 역이 경로에 두 번 나오지 않으므로 첫 일치 인덱스 사용
    index = next(i for i, s in enumerate(route) if s.id == nearest.station.id)
    last = len(route) - 1

    return JourneyProgress(
        current_station=nearest.station,
        current_index=index,
        previous_station=route[index - 1] if index > 0 else None,
        next_station=route[index + 1] if index < last else None,
        visited_count=index + 1,
        is_finished=index == last,
        distance_meters=nearest.distance_meters,
    )


class StationChangeTracker:
    """현재 역이 바뀐 경우에만 진행 상황을 전달 (역마다 1회 알림)"""

    def __init__(self):
        self._last_station_id: Optional[str] = None

    @property
    def last_station_id(self) -> Optional[str]:
        return self._last_station_id

    def update(self, progress: Optional[JourneyProgress]) -> Optional[JourneyProgress]:
        """
        Returns:
            현재 역이 직전 보고와 다르면 progress, 같거나 None이면 None
        """
        if progress is None:
            return None

        station_id = progress.current_station.id
        if station_id == self._last_station_id:
            return None

        self._last_station_id = station_id
        return progress

    def reset(self):
        """여정 종료/재시작 시 초기화"""
        self._last_station_id = None
