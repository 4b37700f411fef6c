"""HTTP API 테스트"""

import pytest
from fastapi.testclient import TestClient

from metro_journey.config import DurationConfig
from metro_journey.main import app
from metro_journey.routers import journey as journey_router
from metro_journey.services.journey import JourneyService


@pytest.fixture
def client(monkeypatch, sample_network):
    service = JourneyService(network=sample_network, duration_config=DurationConfig())
    monkeypatch.setattr(journey_router, "journey_service", service)
    return TestClient(app)


@pytest.fixture
def unavailable_client(monkeypatch):
    monkeypatch.setattr(journey_router, "journey_service", JourneyService())
    return TestClient(app)


class TestStationsEndpoint:
    """GET /stations"""

    def test_list_all(self, client):
        response = client.get("/stations")

        assert response.status_code == 200
        assert len(response.json()) == 20

    def test_search(self, client):
        response = client.get("/stations", params={"q": "서울"})

        assert response.status_code == 200
        assert {s["id"] for s in response.json()} == {"line1_서울역", "line4_서울역"}

    def test_nearest(self, client):
        response = client.get("/stations/nearest", params={"lat": 37.5547, "lng": 126.9707})

        assert response.status_code == 200
        body = response.json()
        assert body["station"]["id"] == "line1_서울역"
        assert body["distance_meters"] == 0.0

    def test_nearest_out_of_range(self, client):
        response = client.get("/stations/nearest", params={"lat": 123, "lng": 126.9})
        assert response.status_code == 422


class TestRouteEndpoint:
    """GET /route"""

    def test_route(self, client):
        response = client.get(
            "/route", params={"from_id": "line1_서울역", "to_id": "line2_을지로입구역"}
        )

        assert response.status_code == 200
        body = response.json()
        assert [s["id"] for s in body["route"]] == [
            "line1_서울역", "line1_시청역", "line2_시청역", "line2_을지로입구역"
        ]
        assert body["hops"] == 3
        assert body["duration"]["breakdown"]["transfer_seconds"] == 120
        assert body["duration"]["breakdown"]["dwell_seconds"] == 60

    def test_route_not_found(self, client):
        response = client.get("/route", params={"from_id": "line1_서울역", "to_id": "nowhere"})
        assert response.status_code == 404

    def test_service_unavailable(self, unavailable_client):
        response = unavailable_client.get("/route", params={"from_id": "a", "to_id": "b"})
        assert response.status_code == 503


class TestProgressEndpoint:
    """POST /journey/progress"""

    def test_progress(self, client):
        response = client.post("/journey/progress", json={
            "route": ["line1_서울역", "line1_시청역", "line2_시청역", "line2_을지로입구역"],
            "lat": 37.5660,
            "lng": 126.9826,
        })

        assert response.status_code == 200
        body = response.json()
        assert body["current_station"]["id"] == "line2_을지로입구역"
        assert body["status"] == "ARRIVED"
        assert body["next_station"] is None
        assert body["previous_station"]["id"] == "line2_시청역"

    def test_progress_unknown_station(self, client):
        response = client.post("/journey/progress", json={
            "route": ["nowhere"],
            "lat": 37.5660,
            "lng": 126.9826,
        })
        assert response.status_code == 404

    @pytest.mark.parametrize("lat, lng", [(91.0, 126.98), (37.56, 181.0)])
    def test_progress_out_of_range(self, client, lat, lng):
        response = client.post("/journey/progress", json={
            "route": ["line1_서울역", "line1_시청역"],
            "lat": lat,
            "lng": lng,
        })
        assert response.status_code == 422

    def test_progress_empty_route(self, client):
        response = client.post("/journey/progress", json={"route": [], "lat": 0, "lng": 0})
        assert response.status_code == 422


class TestHealthEndpoint:
    """GET /health"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
