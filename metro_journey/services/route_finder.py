"""
BFS 최단 경로 탐색 (구간 수 기준)

경로 복원은 부모 포인터 방식으로 하며, 큐에는 역 id만 담습니다.
"""

import logging
from collections import deque
from typing import Dict, List, Mapping, Optional, Sequence

from metro_journey.models.schemas import MetroLine, Station
from metro_journey.services.graph_builder import Graph, build_graph

logger = logging.getLogger(__name__)


def find_route(
    start_id: str,
    end_id: str,
    stations: Mapping[str, Station],
    graph: Optional[Graph] = None,
    lines: Optional[Sequence[MetroLine]] = None,
) -> Optional[List[Station]]:
    """
    출발역 → 도착역 최소 구간 경로 탐색

    동일 구간 수 경로가 여러 개면 그래프 삽입 순서(노선 선언 순서,
    노선 내 역 순서)에서 먼저 발견된 경로를 반환합니다.

    Args:
        start_id: 출발역 ID
        end_id: 도착역 ID
        stations: {station_id: Station}
        graph: build_graph() 결과 (None이면 lines로 즉시 빌드)
        lines: graph가 없을 때 사용할 노선 목록

    Returns:
        출발~도착 Station 리스트 (양 끝 포함) 또는 None (잘못된 id, 도달 불가)
    """
    if not start_id or not end_id:
        return None
    if start_id not in stations or end_id not in stations:
        return None

    if start_id == end_id:
        return [stations[start_id]]

    if graph is None:
        graph = build_graph(stations, lines or [])

    if start_id not in graph:
        return None

    path_ids = _bfs(graph, start_id, end_id)
    if path_ids is None:
        logger.debug(f"경로 없음: {start_id} → {end_id}")
        return None

    return [stations[station_id] for station_id in path_ids]


def _bfs(graph: Graph, start_id: str, end_id: str) -> Optional[List[str]]:
    # 큐에 넣는 시점에 방문 처리 → 최초 발견 = 최단 구간 수
    previous: Dict[str, Optional[str]] = {start_id: None}
    queue = deque([start_id])

    while queue:
        current = queue.popleft()

        if current == end_id:
            return _reconstruct(previous, end_id)

        for neighbor in graph.get(current, []):
            if neighbor in previous:
                continue
            previous[neighbor] = current
            queue.append(neighbor)

    return None


def _reconstruct(previous: Dict[str, Optional[str]], end_id: str) -> List[str]:
    path = []
    node: Optional[str] = end_id
    while node is not None:
        path.append(node)
        node = previous[node]
    return path[::-1]
