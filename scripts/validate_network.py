#!/usr/bin/env python3
"""
노선 데이터 검증 스크립트

노선 데이터를 로드해 그래프를 빌드하고 연결성을 확인합니다:
- BFS 연결 커버리지 (90% 미만이면 실패)
- 호선별 역 수
- 환승역 (같은 역명, 2개 이상 승강장)

사용법:
python scripts/validate_network.py [data_file]
"""

import sys
from collections import defaultdict, deque
from pathlib import Path

# 프로젝트 루트 (설치 없이 실행할 때)
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from metro_journey.config import settings  # noqa: E402
from metro_journey.exceptions import NetworkDataError  # noqa: E402
from metro_journey.services.graph_builder import group_by_name  # noqa: E402
from metro_journey.services.network_data import MetroNetwork  # noqa: E402

MIN_COVERAGE = 90.0


def connected_coverage(network: MetroNetwork) -> float:
    """첫 역에서 BFS로 도달 가능한 역 비율 (%)"""
    stations = network.stations
    if not stations:
        return 0.0

    graph = network.graph
    start = next(iter(stations))
    visited = {start}
    queue = deque([start])

    while queue:
        node = queue.popleft()
        for neighbor in graph.get(node, []):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    coverage = len(visited) / len(stations) * 100
    print(f"연결된 역: {len(visited)}/{len(stations)} ({coverage:.1f}%)")

    if len(visited) < len(stations):
        disconnected = [s for s in stations if s not in visited]
        print(f"연결 안 된 역 (샘플): {disconnected[:5]}")

    return coverage


def print_line_stats(network: MetroNetwork):
    """호선별 역 수 / 알 수 없는 역 참조"""
    line_stats = defaultdict(int)
    unknown = defaultdict(list)

    for line in network.lines:
        for station_id in line.stations:
            if station_id in network.stations:
                line_stats[line.name] += 1
            else:
                unknown[line.name].append(station_id)

    print("\n호선별 역 수:")
    for name in sorted(line_stats):
        print(f"  {name}: {line_stats[name]}개")

    for name, ids in unknown.items():
        print(f"  경고: {name} 노선의 알 수 없는 역 {len(ids)}개 (샘플: {ids[:3]})")


def print_interchanges(network: MetroNetwork):
    groups = {
        name: ids for name, ids in group_by_name(network.stations).items() if len(ids) > 1
    }
    print(f"\n환승역: {len(groups)}곳")
    for name, ids in groups.items():
        print(f"  {name}: {', '.join(ids)}")


def main() -> int:
    data_file = sys.argv[1] if len(sys.argv) > 1 else settings.NETWORK_DATA_FILE
    print(f"노선 데이터 검증: {data_file}\n")

    try:
        network = MetroNetwork.from_json(data_file)
    except NetworkDataError as e:
        print(f"오류: {e}")
        return 1

    print("=== 그래프 검증 ===")
    coverage = connected_coverage(network)
    print_line_stats(network)
    print_interchanges(network)

    if coverage < MIN_COVERAGE:
        print("\n경고: 그래프 연결성이 낮습니다. 데이터를 확인하세요.")
        return 1

    print("\n검증 완료!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
