"""
Tests for the HTTP layer.
"""

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestApi:
    """Round trips through the FastAPI app."""

    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}

    def test_simulate_seeded(self, client: TestClient) -> None:
        body = {"arrival_rate": 2.0, "service_rate": 0.8, "num_servers": 4, "duration": 60, "seed": 42}
        r1 = client.post("/simulate", json=body)
        r2 = client.post("/simulate", json=body)
        assert r1.status_code == 200
        assert r1.json() == r2.json()

        data = r1.json()
        ids = [e["id"] for e in data["entities"]]
        assert ids == list(range(1, data["total_entities"] + 1))
        assert 0 <= data["server_utilization"] <= 100
        assert data["dropped_rows"] == 0

    def test_simulate_rejects_zero_servers(self, client: TestClient) -> None:
        r = client.post("/simulate", json={"arrival_rate": 1, "service_rate": 1, "num_servers": 0, "duration": 10})
        assert r.status_code == 422

    @pytest.mark.parametrize("field", ["arrival_rate", "service_rate", "duration"])
    def test_simulate_rejects_infinity(self, client: TestClient, field: str) -> None:
        values = {"arrival_rate": "1", "service_rate": "1", "num_servers": "1", "duration": "10"}
        values[field] = "Infinity"
        body = "{" + ", ".join(f'"{k}": {v}' for k, v in values.items()) + "}"
        r = client.post("/simulate", content=body, headers={"Content-Type": "application/json"})
        assert r.status_code == 422

    def test_dataset(self, client: TestClient) -> None:
        r = client.post("/simulate/dataset", json={"csv": "iat,service\n2,3\n4,1\nx,1\n", "num_servers": 1})
        assert r.status_code == 200
        data = r.json()
        assert [e["end_service_time"] for e in data["entities"]] == [3.0, 5.0]
        assert data["dropped_rows"] == 1

    def test_compare(self, client: TestClient) -> None:
        body = {
            "scenario_a": {"num_servers": 1, "csv": "iat,service\n0,5\n1,5\n1,5\n"},
            "scenario_b": {"num_servers": 3, "csv": "iat,service\n0,5\n1,5\n1,5\n"},
        }
        r = client.post("/compare", json=body)
        assert r.status_code == 200
        data = r.json()
        assert data["scenario_a"]["total_entities"] == 3
        assert data["scenario_b"]["avg_wait_time"] == 0.0
        rows = {row["metric"]: row for row in data["rows"]}
        assert rows["avg_wait_time"]["difference"] < 0
        assert data["wait_status_b"] == "good"

    def test_analytical(self, client: TestClient) -> None:
        r = client.post("/analytical", json={"arrival_rate": 0.5, "service_rate": 1.0, "num_servers": 1})
        assert r.status_code == 200
        assert r.json()["L"] == 1.0

    def test_analytical_unstable(self, client: TestClient) -> None:
        r = client.post("/analytical", json={"arrival_rate": 2.0, "service_rate": 0.8, "num_servers": 2})
        assert r.status_code == 200
        data = r.json()
        assert data["Lq"] is None
        assert data["note"]
