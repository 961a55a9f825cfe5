"""Tests for the HTTP API."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from weatherapp.forecast.assembler import assemble_forecast
from weatherapp.models.errors import ErrorKind, WeatherLookupError
from weatherapp.models.forecast import Coordinates
from weatherapp.server import app
from weatherapp.tests.factories import make_timeseries


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestWeatherEndpoint:
    def test_success(self, client: TestClient):
        result = assemble_forecast(Coordinates(59.91, 10.74), make_timeseries(30))
        with patch("weatherapp.server.lookup_weather", return_value=result) as lw:
            resp = client.get("/api/weather", params={"city": "Oslo"})

        assert resp.status_code == 200
        assert lw.call_args.args[0] == "Oslo"
        body = resp.json()
        assert body["coordinates"] == {"lat": 59.91, "lon": 10.74}
        assert len(body["hourly"]) == 24
        assert body["daily"][0]["date"] == "2026-02-11"
        assert set(body["daily"][0]["temp"]) == {"min", "max", "day", "night"}

    @pytest.mark.parametrize(
        "kind, status",
        [
            (ErrorKind.VALIDATION_FAILURE, 400),
            (ErrorKind.NOT_FOUND, 404),
            (ErrorKind.UPSTREAM_FAILURE, 502),
        ],
    )
    def test_errors_mapped_to_status(self, client: TestClient, kind, status):
        err = WeatherLookupError(kind, "something went wrong")
        with patch("weatherapp.server.lookup_weather", side_effect=err):
            resp = client.get("/api/weather", params={"city": "Oslo"})

        assert resp.status_code == status
        assert resp.json() == {"error": kind.value, "message": "something went wrong"}

    def test_missing_city_is_validation_failure(self, client: TestClient):
        resp = client.get("/api/weather")
        assert resp.status_code == 400
        assert resp.json()["error"] == "VALIDATION_FAILURE"


class TestHealth:
    def test_ok(self, client: TestClient):
        resp = client.get("/api/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"
