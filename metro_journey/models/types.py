"""TypedDict 정의 - to_dict() 결과 구조

Pydantic 모델은 노선 데이터 검증과 API 응답용이고,
TypedDict는 계산 결과를 dict로 넘길 때의 구조를 표현합니다.
"""

from typing import Optional, TypedDict

from metro_journey.models.schemas import Station


class DurationBreakdownDict(TypedDict):
    """DurationBreakdown.to_dict() 반환 구조"""
    distance_meters: float
    running_seconds: float
    dwell_seconds: int
    stop_count: int
    interchange_count: int
    transfer_seconds: int
    line_change_count: int
    line_change_seconds: int


class DurationEstimateDict(TypedDict):
    """DurationEstimate.to_dict() 반환 구조"""
    total_seconds: float
    total_minutes: int
    breakdown: DurationBreakdownDict


class JourneyProgressDict(TypedDict):
    """JourneyProgress.to_dict() 반환 구조"""
    current_station: Station
    current_index: int
    previous_station: Optional[Station]
    next_station: Optional[Station]
    visited_count: int
    is_finished: bool
    status: str
    distance_meters: float
