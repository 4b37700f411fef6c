"""Pydantic 스키마 정의 - 노선 데이터 + API 요청/응답"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """위경도 좌표 (유한값, 범위 내)"""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Station(BaseModel):
    """역 (노선별 승강장 단위)

    같은 위치의 환승역은 노선마다 별도 id를 가지며 name만 공유합니다.
    name 완전 일치가 환승역을 판별하는 유일한 기준입니다.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    coordinates: Coordinates
    lines: List[str]


class MetroLine(BaseModel):
    """노선 - stations 배열 순서가 곧 인접 관계"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    color: str = ""
    stations: List[str] = Field(default_factory=list)


# ========== API 스키마 ==========

class DurationBreakdownModel(BaseModel):
    """소요시간 구성 요소"""
    distance_meters: float = Field(description="총 이동거리 (m)")
    running_seconds: float = Field(description="주행 시간 (초)")
    dwell_seconds: int = Field(description="정차 시간 (초)")
    stop_count: int = Field(description="정차 횟수")
    interchange_count: int = Field(description="환승 통로 이동 횟수")
    transfer_seconds: int = Field(description="환승 도보 시간 (초)")
    line_change_count: int = Field(description="노선 변경 횟수")
    line_change_seconds: int = Field(description="노선 변경 대기 시간 (초)")


class DurationModel(BaseModel):
    """예상 소요시간"""
    total_seconds: float
    total_minutes: int
    breakdown: DurationBreakdownModel


class RouteResponse(BaseModel):
    """경로 탐색 응답"""
    from_station: Station
    to_station: Station
    route: List[Station]
    hops: int = Field(description="구간 수 (역 수 - 1)")
    duration: Optional[DurationModel] = None


class NearestStationResponse(BaseModel):
    """최근접 역 응답"""
    station: Station
    distance_meters: float


class ProgressRequest(BaseModel):
    """여정 진행 상황 요청"""
    route: List[str] = Field(..., min_length=1, description="경로 역 id 목록 (출발→도착)")
    lat: float = Field(..., ge=-90, le=90, description="현재 위도")
    lng: float = Field(..., ge=-180, le=180, description="현재 경도")
    accuracy: Optional[float] = Field(None, description="측위 정확도 (m)")


class ProgressResponse(BaseModel):
    """여정 진행 상황 응답"""
    current_station: Station
    current_index: int
    previous_station: Optional[Station] = None
    next_station: Optional[Station] = None
    visited_count: int
    is_finished: bool
    status: str
    distance_meters: float
