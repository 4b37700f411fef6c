"""
노선 데이터 로드 및 네트워크 스냅샷

노선/역 데이터는 시작 시 1회 로드되는 읽기 전용 설정입니다.
MetroNetwork는 한 스냅샷을 감싸 그래프를 최초 사용 시 빌드해 재사용하고,
경로 탐색·최근접 역·소요시간 계산에 같은 데이터를 명시적으로 전달합니다.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from metro_journey.config import DurationConfig
from metro_journey.exceptions import NetworkDataError
from metro_journey.logging_config import log_timing
from metro_journey.models.schemas import MetroLine, Station
from metro_journey.services.graph_builder import Graph, build_graph, group_by_name
from metro_journey.services.nearest_station import NearestStation, find_nearest_with_distance
from metro_journey.services.progress import JourneyProgress, compute_progress
from metro_journey.services.route_finder import find_route
from metro_journey.utils.duration import DurationEstimate, estimate_duration

logger = logging.getLogger(__name__)


def load_network_data(path: str) -> Tuple[Dict[str, Station], List[MetroLine]]:
    """
    JSON 파일에서 노선 데이터 로드

    Args:
        path: {"stations": [...], "lines": [...]} 형식 JSON 경로

    Returns:
        ({station_id: Station}, [MetroLine, ...])

    Raises:
        NetworkDataError: 파일 없음, JSON 파싱 실패, 최상위 형식 오류
    """
    data_path = Path(path)
    if not data_path.exists():
        raise NetworkDataError(f"노선 데이터 파일 없음: {data_path}")

    try:
        with open(data_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise NetworkDataError(f"노선 데이터 읽기 실패: {data_path}: {e}") from e

    return parse_network_data(data)


def parse_network_data(data: Any) -> Tuple[Dict[str, Station], List[MetroLine]]:
    """
    원본 dict를 Station/MetroLine으로 변환

    stations는 배열 또는 {id: record} 객체 모두 허용합니다.
    형식이 잘못된 개별 레코드는 경고 후 건너뜁니다.
    """
    if not isinstance(data, Mapping):
        raise NetworkDataError("노선 데이터 최상위는 객체여야 합니다")

    station_records = data.get("stations") or []
    if isinstance(station_records, Mapping):
        station_records = list(station_records.values())
    line_records = data.get("lines") or []

    if not isinstance(station_records, list) or not isinstance(line_records, list):
        raise NetworkDataError("stations/lines는 배열이어야 합니다")

    stations: Dict[str, Station] = {}
    for record in station_records:
        try:
            station = Station.model_validate(record)
        except ValidationError as e:
            logger.warning(f"역 레코드 건너뜀: {_preview(record)} ({e.error_count()}개 오류)")
            continue

        if station.id in stations:
            logger.warning(f"중복 역 id 건너뜀: {station.id}")
            continue
        stations[station.id] = station

    lines: List[MetroLine] = []
    for record in line_records:
        try:
            lines.append(MetroLine.model_validate(record))
        except ValidationError as e:
            logger.warning(f"노선 레코드 건너뜀: {_preview(record)} ({e.error_count()}개 오류)")

    logger.info(f"노선 데이터 로드: {len(stations)}개 역, {len(lines)}개 노선")
    return stations, lines


def _preview(record: Any, max_len: int = 80) -> str:
    text = repr(record)
    return text if len(text) <= max_len else text[:max_len - 3] + "..."


class MetroNetwork:
    """노선 데이터 스냅샷 + 파생 그래프"""

    def __init__(self, stations: Mapping[str, Station], lines: Sequence[MetroLine]):
        self._stations = MappingProxyType(dict(stations))
        self._lines: Tuple[MetroLine, ...] = tuple(lines)
        self._graph: Optional[Graph] = None

    @classmethod
    def from_json(cls, path: str) -> "MetroNetwork":
        """JSON 파일에서 생성 (NetworkDataError 전파)"""
        stations, lines = load_network_data(path)
        return cls(stations, lines)

    @classmethod
    def from_dict(cls, data: Any) -> "MetroNetwork":
        stations, lines = parse_network_data(data)
        return cls(stations, lines)

    @property
    def stations(self) -> Mapping[str, Station]:
        return self._stations

    @property
    def lines(self) -> Tuple[MetroLine, ...]:
        return self._lines

    @property
    def graph(self) -> Graph:
        """인접 그래프 (최초 접근 시 1회 빌드, 데이터가 불변이므로 무효화 없음)"""
        if self._graph is None:
            with log_timing("그래프 빌드", logger):
                self._graph = build_graph(self._stations, self._lines)
        return self._graph

    def get_station(self, station_id: str) -> Optional[Station]:
        return self._stations.get(station_id)

    def find_route(self, start_id: str, end_id: str) -> Optional[List[Station]]:
        """최소 구간 경로 (없으면 None)"""
        return find_route(start_id, end_id, self._stations, graph=self.graph)

    def route_from_ids(self, station_ids: Sequence[str]) -> Optional[List[Station]]:
        """역 id 목록 → Station 목록 (알 수 없는 id가 있으면 None)"""
        route = [self._stations.get(station_id) for station_id in station_ids]
        if not route or any(station is None for station in route):
            return None
        return route

    def nearest_station(self, position: Any) -> Optional[NearestStation]:
        """전체 역 대상 최근접 역"""
        return find_nearest_with_distance(position, self._stations)

    def nearest_on_route(self, position: Any, route: Sequence[Station]) -> Optional[NearestStation]:
        """경로 한정 최근접 역"""
        return find_nearest_with_distance(position, route)

    def estimate_duration(
        self,
        route: Sequence[Station],
        config: Optional[DurationConfig] = None
    ) -> Optional[DurationEstimate]:
        return estimate_duration(route, config)

    def progress(self, route: Sequence[Station], position: Any) -> Optional[JourneyProgress]:
        return compute_progress(route, position)

    def sorted_stations(self) -> List[Station]:
        """역명 순 정렬 (역 선택 목록용)"""
        return sorted(self._stations.values(), key=lambda s: (s.name.casefold(), s.id))

    def search_stations(self, query: str, limit: Optional[int] = None) -> List[Station]:
        """
        역명 부분 일치 검색 (대소문자 무시)

        빈 검색어는 전체 목록을 반환합니다.
        """
        needle = (query or "").strip().casefold()
        results = [s for s in self.sorted_stations() if needle in s.name.casefold()]
        return results[:limit] if limit else results

    def get_stats(self) -> Dict[str, int]:
        """통계 정보"""
        graph = self.graph
        interchanges = sum(1 for ids in group_by_name(self._stations).values() if len(ids) > 1)
        return {
            "stations": len(self._stations),
            "lines": len(self._lines),
            "edges": sum(len(neighbors) for neighbors in graph.values()) // 2,
            "interchanges": interchanges,
        }
