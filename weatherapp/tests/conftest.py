"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from weatherapp.config.schema import AppConfig
from weatherapp.tests.factories import make_timeseries


@pytest.fixture
def metno_payload() -> dict:
    """A met.no compact response with 30 hourly entries."""
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [10.7522, 59.9133, 14]},
        "properties": {
            "meta": {"updated_at": "2026-02-10T23:12:41Z"},
            "timeseries": make_timeseries(30),
        },
    }


@pytest.fixture
def nominatim_oslo() -> list[dict]:
    return [
        {
            "place_id": 1,
            "lat": "59.9133301",
            "lon": "10.7389701",
            "display_name": "Oslo, Norway",
        }
    ]


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "geocoding": {"base_url": "https://test-geo.example.com"},
        "forecast": {"base_url": "https://test-metno.example.com", "timeout_seconds": 5},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
