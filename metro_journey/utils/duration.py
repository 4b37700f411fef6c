"""여정 소요시간 추정 유틸리티

총 소요시간 = 주행 시간 + 정차 시간 + 환승 도보 시간 + 노선 변경 대기 시간

노선 변경 판별은 (현재 노선, 변경 횟수) 누산기를 구간마다 갱신하는 fold입니다.
"""

from dataclasses import asdict, dataclass
from functools import reduce
from typing import List, NamedTuple, Optional, Sequence

from metro_journey.config import DurationConfig
from metro_journey.models.schemas import Station
from metro_journey.models.types import DurationBreakdownDict, DurationEstimateDict
from metro_journey.utils.geo import haversine_distance


class LineState(NamedTuple):
    """노선 변경 누산기

    Attributes:
        current_line: 현재 탑승 중인 노선 (미정/도보 환승 직후면 None)
        line_change_count: 지금까지의 노선 변경 횟수
    """
    current_line: Optional[str] = None
    line_change_count: int = 0


@dataclass(frozen=True)
class DurationBreakdown:
    """소요시간 구성 요소"""
    distance_meters: float
    running_seconds: float
    dwell_seconds: int
    stop_count: int
    interchange_count: int
    transfer_seconds: int
    line_change_count: int
    line_change_seconds: int

    def to_dict(self) -> DurationBreakdownDict:
        return DurationBreakdownDict(**asdict(self))


@dataclass(frozen=True)
class DurationEstimate:
    """여정 예상 소요시간

    Attributes:
        total_seconds: 총 소요시간 (초, 반올림 없음)
        breakdown: 항목별 구성
    """
    total_seconds: float
    breakdown: DurationBreakdown

    @property
    def total_minutes(self) -> int:
        """표시용 분 단위 (반올림)"""
        return int(round(self.total_seconds / 60))

    def to_dict(self) -> DurationEstimateDict:
        return {
            "total_seconds": self.total_seconds,
            "total_minutes": self.total_minutes,
            "breakdown": self.breakdown.to_dict(),
        }


def common_lines(a: Station, b: Station) -> List[str]:
    """두 역을 모두 지나는 노선 (a.lines 순서 유지)"""
    return [line for line in a.lines if line in b.lines]


def is_interchange(a: Station, b: Station) -> bool:
    """같은 역명, 다른 id → 환승 통로 이동"""
    return a.name == b.name and a.id != b.id


def advance_line_state(state: LineState, a: Station, b: Station) -> LineState:
    """
    구간 (a → b) 하나만큼 노선 상태 갱신

    - 공통 노선이 없으면: 노선 변경 1회, 현재 노선 해제
    - 현재 노선이 공통 노선에 있으면: 유지
    - 현재 노선이 없으면: 첫 공통 노선으로 시작 (변경 아님)
    - 그 외: 노선 변경 1회, 첫 공통 노선으로 교체
    """
    shared = common_lines(a, b)

    if not shared:
        return LineState(None, state.line_change_count + 1)

    if state.current_line in shared:
        return state

    if state.current_line is None:
        return LineState(shared[0], state.line_change_count)

    return LineState(shared[0], state.line_change_count + 1)


def count_line_changes(route: Sequence[Station]) -> int:
    """경로 전체의 노선 변경 횟수"""
    pairs = zip(route, route[1:])
    final = reduce(lambda state, pair: advance_line_state(state, *pair), pairs, LineState())
    return final.line_change_count


def estimate_duration(
    route: Sequence[Station],
    config: Optional[DurationConfig] = None
) -> Optional[DurationEstimate]:
    """
    경로 소요시간 추정

    Args:
        route: 출발~도착 Station 리스트
        config: 추정 상수 (None이면 settings 값 사용)

    Returns:
        DurationEstimate 또는 None (역이 2개 미만)
    """
    if route is None or len(route) < 2:
        return None

    config = config or DurationConfig.from_settings()
    route = list(route)
    pairs = list(zip(route, route[1:]))

    distance = sum(
        haversine_distance(
            a.coordinates.lat, a.coordinates.lng,
            b.coordinates.lat, b.coordinates.lng
        )
        for a, b in pairs
    )
    interchanges = sum(1 for a, b in pairs if is_interchange(a, b))
    line_changes = count_line_changes(route)

    # 정차 횟수 = 구간 수 (len(route) - 1)
    stop_count = len(pairs)

    running_seconds = distance / config.meters_per_second
    dwell_seconds = config.dwell_seconds_per_stop * stop_count
    transfer_seconds = config.interchange_penalty_seconds * interchanges
    line_change_seconds = config.line_change_penalty_seconds * line_changes

    breakdown = DurationBreakdown(
        distance_meters=distance,
        running_seconds=running_seconds,
        dwell_seconds=dwell_seconds,
        stop_count=stop_count,
        interchange_count=interchanges,
        transfer_seconds=transfer_seconds,
        line_change_count=line_changes,
        line_change_seconds=line_change_seconds,
    )

    total = running_seconds + dwell_seconds + transfer_seconds + line_change_seconds
    return DurationEstimate(total_seconds=total, breakdown=breakdown)
