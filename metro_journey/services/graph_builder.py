"""
역/노선 인접 그래프 빌드

노선 내 연속 역 연결 + 같은 역명을 가진 승강장 간 환승 연결로
무방향·무가중치 인접 리스트를 구성합니다.
"""

import logging
from typing import Dict, List, Mapping, Sequence

from metro_journey.models.schemas import MetroLine, Station

logger = logging.getLogger(__name__)


# 인접 리스트: {station_id: [neighbor_id, ...]} (삽입 순서 유지)
Graph = Dict[str, List[str]]


def build_graph(
    stations: Mapping[str, Station],
    lines: Sequence[MetroLine]
) -> Graph:
    """
    인접 그래프 생성

    1) 노선별 stations 배열에서 i-1, i+1 역과 양방향 연결
    2) 역명이 같은 승강장끼리 모든 쌍을 양방향 연결 (환승)

    Args:
        stations: {station_id: Station}
        lines: 노선 목록 (선언 순서가 BFS 탐색 순서를 결정)

    Returns:
        인접 리스트. stations 또는 lines가 비어 있으면 빈 dict
    """
    if not stations or not lines:
        return {}

    adjacency: Graph = {station_id: [] for station_id in stations}
    skipped = 0

    # 노선 구간 엣지
    for line in lines:
        sequence = line.stations
        for i, station_id in enumerate(sequence):
            if station_id not in adjacency:
                skipped += 1
                continue

            if i > 0 and not _link(adjacency, station_id, sequence[i - 1]):
                skipped += 1
            if i < len(sequence) - 1 and not _link(adjacency, station_id, sequence[i + 1]):
                skipped += 1

    # 환승 엣지 (역명 그룹 내 완전 연결)
    name_to_ids = group_by_name(stations)
    interchange_count = 0
    for ids in name_to_ids.values():
        if len(ids) < 2:
            continue
        interchange_count += 1
        for from_id in ids:
            for to_id in ids:
                _link(adjacency, from_id, to_id)

    if skipped:
        logger.debug(f"알 수 없는 역 id 참조 {skipped}건 건너뜀")
    logger.debug(f"그래프 빌드: {len(adjacency)}개 역, 환승역 {interchange_count}곳")

    return adjacency


def group_by_name(stations: Mapping[str, Station]) -> Dict[str, List[str]]:
    """역명 → station_id 목록 (대소문자 구분 완전 일치)"""
    name_to_ids: Dict[str, List[str]] = {}
    for station_id, station in stations.items():
        name_to_ids.setdefault(station.name, []).append(station_id)
    return name_to_ids


def _link(adjacency: Graph, from_id: str, to_id: str) -> bool:
    """from_id → to_id 엣지 추가. 대상 역이 없으면 False"""
    if to_id not in adjacency:
        return False
    if from_id == to_id:
        return True

    neighbors = adjacency[from_id]
    if to_id not in neighbors:
        neighbors.append(to_id)
    return True
