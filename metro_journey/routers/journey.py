"""여정 API 라우터"""

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from metro_journey.models.schemas import (
    DurationBreakdownModel,
    DurationModel,
    NearestStationResponse,
    ProgressRequest,
    ProgressResponse,
    RouteResponse,
    Station,
)
from metro_journey.services.journey import JourneyService, journey_service

router = APIRouter()


def get_service() -> JourneyService:
    """사용 가능한 서비스 반환 (미초기화면 503)"""
    if not journey_service.is_available():
        raise HTTPException(status_code=503, detail="노선 데이터가 로드되지 않았습니다.")
    return journey_service


@router.get("/stations", response_model=List[Station])
async def list_stations(
    q: str = Query("", max_length=100, description="역명 검색어"),
    limit: Optional[int] = Query(None, ge=1, le=500)
):
    """역 목록 (역명 순, 부분 일치 검색)"""
    return get_service().search_stations(q, limit)


@router.get("/stations/nearest", response_model=NearestStationResponse)
async def nearest_station(
    lat: float = Query(..., ge=-90, le=90),
    lng: float = Query(..., ge=-180, le=180)
):
    """
    현재 위치에서 가장 가까운 역

    Args:
        lat: 위도
        lng: 경도
    """
    result = get_service().nearest_station((lat, lng))
    if result is None:
        raise HTTPException(status_code=404, detail="가까운 역을 찾을 수 없습니다.")

    return NearestStationResponse(station=result.station, distance_meters=result.distance_meters)


@router.get("/route", response_model=RouteResponse)
async def find_route(
    from_id: str = Query(..., min_length=1, description="출발역 ID"),
    to_id: str = Query(..., min_length=1, description="도착역 ID")
):
    """
    출발역 → 도착역 최소 구간 경로 + 예상 소요시간

    잘못된 역 ID와 도달 불가 경로는 모두 404로 응답합니다.
    """
    journey = get_service().plan_journey(from_id, to_id)

    if journey is None:
        raise HTTPException(status_code=404, detail="경로를 찾을 수 없습니다.")

    duration = None
    if journey.duration is not None:
        duration = DurationModel(
            total_seconds=journey.duration.total_seconds,
            total_minutes=journey.duration.total_minutes,
            breakdown=DurationBreakdownModel(**journey.duration.breakdown.to_dict()),
        )

    return RouteResponse(
        from_station=journey.from_station,
        to_station=journey.to_station,
        route=journey.route,
        hops=journey.hops,
        duration=duration,
    )


@router.post("/journey/progress", response_model=ProgressResponse)
async def journey_progress(request: ProgressRequest):
    """
    진행 중인 여정에서 현재 위치에 해당하는 역

    Returns:
        현재 역, 경로 내 인덱스, 이전/다음 역, 도착 여부
    """
    progress = get_service().journey_progress(request.route, (request.lat, request.lng))
    if progress is None:
        raise HTTPException(status_code=404, detail="경로 내 현재 역을 찾을 수 없습니다.")

    return ProgressResponse(**progress.to_dict())
