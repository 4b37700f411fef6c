"""JourneyService 테스트"""

import pytest

from metro_journey.config import DEFAULT_NETWORK_DATA_FILE, DurationConfig
from metro_journey.exceptions import ServiceUnavailableError
from metro_journey.services.journey import JourneyService


@pytest.fixture
def service(sample_network):
    return JourneyService(network=sample_network, duration_config=DurationConfig())


class TestJourneyServiceInitialize:
    """초기화 테스트"""

    def test_initialize_from_bundled_data(self):
        service = JourneyService()

        assert service.initialize(DEFAULT_NETWORK_DATA_FILE) is True
        assert service.is_available()
        assert service.get_stats()["stations"] == 20

    def test_initialize_missing_file(self, tmp_path):
        service = JourneyService()

        assert service.initialize(str(tmp_path / "missing.json")) is False
        assert not service.is_available()

    def test_initialize_empty_data(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text('{"stations": [], "lines": []}', encoding="utf-8")

        assert JourneyService().initialize(str(path)) is False

    def test_unavailable_service(self):
        service = JourneyService()

        with pytest.raises(ServiceUnavailableError):
            service.plan_journey("a", "b")
        assert service.get_stats() == {"stations": 0, "lines": 0, "edges": 0, "interchanges": 0}


class TestPlanJourney:
    """plan_journey 테스트"""

    def test_plan(self, service):
        journey = service.plan_journey("line1_서울역", "line2_을지로입구역")

        assert journey.from_station.id == "line1_서울역"
        assert journey.to_station.id == "line2_을지로입구역"
        assert journey.hops == 3
        assert journey.duration.breakdown.interchange_count == 1
        assert journey.duration.breakdown.line_change_count == 1

    def test_same_station_has_no_duration(self, service):
        journey = service.plan_journey("line1_서울역", "line1_서울역")

        assert journey.hops == 0
        assert journey.duration is None

    def test_unknown_station(self, service):
        assert service.plan_journey("line1_서울역", "nowhere") is None


class TestJourneyProgress:
    """journey_progress 테스트"""

    def test_progress(self, service):
        route_ids = ["line1_서울역", "line1_시청역", "line2_시청역", "line2_을지로입구역"]

        progress = service.journey_progress(route_ids, (37.5658, 126.9772))

        assert progress.current_station.id == "line2_시청역"
        assert progress.current_index == 2

    def test_unknown_route_station(self, service):
        assert service.journey_progress(["line1_서울역", "nowhere"], (37.55, 126.97)) is None

    def test_nearest_station(self, service):
        result = service.nearest_station({"latitude": 37.5547, "longitude": 126.9707})

        assert result.station.id == "line1_서울역"
        assert result.distance_meters == 0.0
