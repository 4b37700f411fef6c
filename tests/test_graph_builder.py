"""그래프 빌드 테스트"""

from metro_journey.models.schemas import MetroLine
from metro_journey.services.graph_builder import build_graph, group_by_name


class TestBuildGraph:
    """build_graph 테스트"""

    def test_line_neighbors(self, single_line):
        stations, lines = single_line
        graph = build_graph(stations, lines)

        assert graph["A"] == ["B"]
        assert graph["B"] == ["A", "C"]
        assert graph["C"] == ["B"]

    def test_empty_inputs(self, single_line):
        stations, lines = single_line
        assert build_graph({}, lines) == {}
        assert build_graph(stations, []) == {}

    def test_interchange_edge(self, interchange_network):
        stations, lines = interchange_network
        graph = build_graph(stations, lines)

        assert "X2" in graph["X1"]
        assert "X1" in graph["X2"]

    def test_interchange_is_clique(self, three_platform_network):
        stations, lines = three_platform_network
        graph = build_graph(stations, lines)

        for hub in ("h1", "h2", "h3"):
            others = {"h1", "h2", "h3"} - {hub}
            assert others <= set(graph[hub])

    def test_undirected(self, three_platform_network):
        stations, lines = three_platform_network
        graph = build_graph(stations, lines)

        for node, neighbors in graph.items():
            for neighbor in neighbors:
                assert node in graph[neighbor]

    def test_no_self_edges_or_duplicates(self, single_line):
        stations, _ = single_line
        # 같은 구간을 두 노선이 공유
        lines = [
            MetroLine(id="L1", name="1", stations=["A", "B", "C"]),
            MetroLine(id="L9", name="9", stations=["A", "A", "B"]),
        ]
        graph = build_graph(stations, lines)

        for node, neighbors in graph.items():
            assert node not in neighbors
            assert len(neighbors) == len(set(neighbors))

    def test_unknown_station_id_skipped(self, single_line):
        stations, _ = single_line
        lines = [MetroLine(id="L1", name="1", stations=["A", "GHOST", "C"])]
        graph = build_graph(stations, lines)

        assert graph["A"] == []
        assert graph["C"] == []
        assert "GHOST" not in graph

    def test_every_station_has_entry(self, single_line, station_factory):
        stations, lines = single_line
        stations = dict(stations)
        stations["Z"] = station_factory("Z", "Island", 0, 0, [])
        graph = build_graph(stations, lines)

        assert graph["Z"] == []

    def test_name_match_is_case_sensitive(self, station_factory):
        stations = {
            "x1": station_factory("x1", "Central", 0, 0, ["L1"]),
            "x2": station_factory("x2", "central", 0, 0, ["L2"]),
        }
        lines = [
            MetroLine(id="L1", name="1", stations=["x1"]),
            MetroLine(id="L2", name="2", stations=["x2"]),
        ]
        graph = build_graph(stations, lines)

        assert graph["x1"] == []
        assert graph["x2"] == []


class TestGroupByName:
    """group_by_name 테스트"""

    def test_groups_in_insertion_order(self, three_platform_network):
        stations, _ = three_platform_network
        groups = group_by_name(stations)

        assert groups["Hub"] == ["h1", "h2", "h3"]
        assert groups["North"] == ["a1"]
