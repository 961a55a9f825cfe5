"""Tests for forecast assembly from a raw met.no time series."""

import pytest

from weatherapp.forecast.assembler import assemble_forecast, parse_observation
from weatherapp.models.common import parse_timestamp, to_epoch
from weatherapp.models.forecast import Coordinates
from weatherapp.tests.factories import make_entry, make_timeseries

OSLO = Coordinates(lat=59.9133, lon=10.7390)


class TestParseObservation:
    def test_full_entry(self):
        obs = parse_observation(
            make_entry("2026-02-11T10:00:00Z", temp=3.5, symbol="rain", precip=0.7)
        )
        assert obs.timestamp == to_epoch(parse_timestamp("2026-02-11T10:00:00Z"))
        assert obs.air_temperature == 3.5
        assert obs.relative_humidity == 81.2
        assert obs.air_pressure_at_sea_level == 1012.3
        assert obs.wind_speed == 4.1
        assert obs.wind_from_direction == 220.5
        assert obs.cloud_area_fraction == 75.0
        assert obs.symbol_code == "rain"
        assert obs.precipitation_amount == 0.7

    def test_without_next_hour(self):
        obs = parse_observation(
            make_entry("2026-02-11T10:00:00Z", symbol=None, precip=None)
        )
        assert obs.symbol_code is None
        assert obs.precipitation_amount is None

    def test_precipitation_string_converted_to_float(self):
        entry = make_entry("2026-02-11T10:00:00Z", precip=None)
        entry["data"]["next_1_hours"]["details"]["precipitation_amount"] = "0.8"
        obs = parse_observation(entry)
        assert obs.precipitation_amount == 0.8
        assert isinstance(obs.precipitation_amount, float)

    def test_missing_instant_details_raises(self):
        with pytest.raises(KeyError):
            parse_observation({"time": "2026-02-11T10:00:00Z", "data": {}})


class TestAssembleForecast:
    def test_current_is_first_entry(self):
        series = [
            make_entry("2026-02-11T10:00:00Z", temp=3.5, symbol="clearsky_day"),
            make_entry("2026-02-11T11:00:00Z", temp=4.0, symbol="rain"),
        ]
        result = assemble_forecast(OSLO, series)
        c = result.current
        assert c.dt == to_epoch(parse_timestamp("2026-02-11T10:00:00Z"))
        assert c.temp == 3.5
        assert c.humidity == 81.2
        assert c.pressure == 1012.3
        assert c.wind_speed == 4.1
        assert c.wind_deg == 220.5
        assert c.clouds == 75.0
        assert c.description == "Clear sky"
        assert c.icon == "01d"
        assert result.coordinates == OSLO

    def test_current_without_symbol(self):
        series = [make_entry("2026-02-11T10:00:00Z", symbol=None, precip=None)]
        result = assemble_forecast(OSLO, series)
        assert result.current.description == "N/A"
        assert result.current.icon == "04d"

    def test_hourly_capped_at_24(self):
        series = make_timeseries(30)
        result = assemble_forecast(OSLO, series)
        assert len(result.hourly) == 24
        assert [h.temp for h in result.hourly] == [float(i) for i in range(24)]

    def test_hourly_shorter_series(self):
        result = assemble_forecast(OSLO, make_timeseries(10))
        assert len(result.hourly) == 10

    def test_hourly_precipitation_defaults_to_zero(self):
        series = [
            make_entry("2026-02-11T10:00:00Z", precip=None),
            make_entry("2026-02-11T11:00:00Z", precip=0.3),
        ]
        result = assemble_forecast(OSLO, series)
        assert result.hourly[0].precipitation_amount == 0.0
        assert result.hourly[1].precipitation_amount == 0.3

    def test_daily_covers_full_series(self):
        # 30 hours from midnight spans two UTC days
        result = assemble_forecast(OSLO, make_timeseries(30))
        assert [d.date for d in result.daily] == ["2026-02-11", "2026-02-12"]
        assert result.daily[0].temp.max == 23.0
        assert result.daily[1].temp.min == 24.0

    def test_empty_series_raises(self):
        with pytest.raises(ValueError):
            assemble_forecast(OSLO, [])

    def test_out_of_order_tolerated_by_default(self):
        series = [
            make_entry("2026-02-11T11:00:00Z", temp=2.0),
            make_entry("2026-02-11T10:00:00Z", temp=1.0),
        ]
        result = assemble_forecast(OSLO, series)
        assert result.current.temp == 2.0

    def test_out_of_order_rejected_when_strict(self):
        series = [
            make_entry("2026-02-11T11:00:00Z"),
            make_entry("2026-02-11T10:00:00Z"),
        ]
        with pytest.raises(ValueError, match="out of order"):
            assemble_forecast(OSLO, series, require_chronological=True)
