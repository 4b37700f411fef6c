"""
여정 계획 서비스

MetroNetwork를 초기화·보관하고 API 계층에 경로/최근접 역/진행 상황을 제공합니다.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from metro_journey.config import DurationConfig, settings
from metro_journey.exceptions import MetroJourneyError, ServiceUnavailableError
from metro_journey.models.schemas import Station
from metro_journey.services.nearest_station import NearestStation
from metro_journey.services.network_data import MetroNetwork
from metro_journey.services.progress import JourneyProgress
from metro_journey.utils.duration import DurationEstimate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Journey:
    """확정된 여정 (요청마다 생성, 종료/재선택 시 폐기)"""
    from_station: Station
    to_station: Station
    route: List[Station]
    duration: Optional[DurationEstimate]

    @property
    def hops(self) -> int:
        return len(self.route) - 1


class JourneyService:
    """노선 데이터 기반 여정 계획 서비스"""

    def __init__(
        self,
        network: Optional[MetroNetwork] = None,
        duration_config: Optional[DurationConfig] = None
    ):
        self._network = network
        self._duration_config = duration_config
        self._initialized = network is not None

    def initialize(self, data_file: Optional[str] = None) -> bool:
        """
        서비스 초기화 - 노선 데이터 로드

        Args:
            data_file: JSON 경로 (None이면 settings.NETWORK_DATA_FILE)

        Returns:
            성공 여부
        """
        if self._initialized:
            return True

        path = data_file or settings.NETWORK_DATA_FILE
        try:
            self._network = MetroNetwork.from_json(path)
            stats = self._network.get_stats()
            self._initialized = stats["stations"] > 0
            if self._initialized:
                logger.info(
                    f"JourneyService 초기화 완료: "
                    f"{stats['stations']}개 역, {stats['lines']}개 노선, 환승역 {stats['interchanges']}곳"
                )
            else:
                logger.error(f"JourneyService 초기화 실패: 역 데이터 없음 ({path})")
        except MetroJourneyError as e:
            logger.error(f"JourneyService 초기화 오류: {e}")
            self._initialized = False

        return self._initialized

    def is_available(self) -> bool:
        """서비스 사용 가능 여부"""
        return self._initialized and self._network is not None

    @property
    def network(self) -> MetroNetwork:
        if not self.is_available():
            raise ServiceUnavailableError("노선 데이터가 로드되지 않았습니다")
        return self._network

    @property
    def duration_config(self) -> DurationConfig:
        return self._duration_config or DurationConfig.from_settings()

    def plan_journey(self, from_id: str, to_id: str) -> Optional[Journey]:
        """
        출발/도착역으로 여정 생성

        Returns:
            Journey 또는 None (잘못된 id 또는 도달 불가 - 호출 측에서 구분하지 않음)
        """
        network = self.network
        route = network.find_route(from_id, to_id)
        if not route:
            logger.info(f"경로 없음: {from_id} → {to_id}")
            return None

        duration = network.estimate_duration(route, self.duration_config)
        return Journey(
            from_station=route[0],
            to_station=route[-1],
            route=route,
            duration=duration,
        )

    def nearest_station(self, position: Any) -> Optional[NearestStation]:
        return self.network.nearest_station(position)

    def journey_progress(
        self,
        route_ids: Sequence[str],
        position: Any
    ) -> Optional[JourneyProgress]:
        """경로 id 목록 + 현재 위치 → 진행 상황"""
        network = self.network
        route = network.route_from_ids(route_ids)
        if route is None:
            return None
        return network.progress(route, position)

    def search_stations(self, query: str = "", limit: Optional[int] = None) -> List[Station]:
        return self.network.search_stations(query, limit)

    def get_stats(self) -> Dict[str, int]:
        """통계 정보"""
        if self.is_available():
            return self._network.get_stats()
        return {"stations": 0, "lines": 0, "edges": 0, "interchanges": 0}


# 싱글톤 인스턴스
journey_service = JourneyService()


def initialize_journey_service() -> bool:
    """서비스 초기화 (main.py lifespan에서 호출)"""
    return journey_service.initialize()


def check_journey_service() -> bool:
    """서비스 상태 확인"""
    return journey_service.is_available()
