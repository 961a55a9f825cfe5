"""Build current/hourly/daily views from a met.no compact time series."""

import logging

from weatherapp.forecast.daily import aggregate_daily
from weatherapp.forecast.symbols import resolve_symbol
from weatherapp.models.common import parse_timestamp, to_epoch
from weatherapp.models.forecast import (
    Coordinates,
    CurrentWeather,
    ForecastResult,
    HourlyForecast,
    Observation,
)

logger = logging.getLogger(__name__)

HOURLY_LIMIT = 24


def parse_observation(entry: dict) -> Observation:
    """Map one ``properties.timeseries`` entry to an Observation.

    Raises KeyError/TypeError/ValueError on a malformed entry.
    """
    data = entry["data"]
    details = data["instant"]["details"]
    next_hour = data.get("next_1_hours") or {}
    precipitation = next_hour.get("details", {}).get("precipitation_amount")

    return Observation(
        timestamp=to_epoch(parse_timestamp(entry["time"])),
        air_temperature=float(details["air_temperature"]),
        relative_humidity=float(details["relative_humidity"]),
        air_pressure_at_sea_level=float(details["air_pressure_at_sea_level"]),
        wind_speed=float(details["wind_speed"]),
        wind_from_direction=float(details["wind_from_direction"]),
        cloud_area_fraction=float(details["cloud_area_fraction"]),
        precipitation_amount=float(precipitation) if precipitation is not None else None,
        symbol_code=next_hour.get("summary", {}).get("symbol_code"),
    )


def assemble_forecast(
    coordinates: Coordinates,
    raw_timeseries: list[dict],
    require_chronological: bool = False,
) -> ForecastResult:
    """Assemble a ForecastResult from a non-empty raw time series.

    The first entry is taken as "current" and the first 24 as "hourly", so
    the series is expected in ascending time order. Out-of-order input is
    logged, or rejected with ValueError when ``require_chronological`` is set.
    """
    if not raw_timeseries:
        raise ValueError("Cannot assemble a forecast from an empty time series")

    observations = [parse_observation(e) for e in raw_timeseries]
    _check_order(observations, require_chronological)

    return ForecastResult(
        coordinates=coordinates,
        current=_current_view(observations[0]),
        hourly=[_hourly_view(o) for o in observations[:HOURLY_LIMIT]],
        daily=aggregate_daily(observations),
    )


def _current_view(obs: Observation) -> CurrentWeather:
    info = resolve_symbol(obs.symbol_code)
    return CurrentWeather(
        dt=obs.timestamp,
        temp=obs.air_temperature,
        humidity=obs.relative_humidity,
        pressure=obs.air_pressure_at_sea_level,
        wind_speed=obs.wind_speed,
        wind_deg=obs.wind_from_direction,
        clouds=obs.cloud_area_fraction,
        description=info.description,
        icon=info.icon,
    )


def _hourly_view(obs: Observation) -> HourlyForecast:
    info = resolve_symbol(obs.symbol_code)
    return HourlyForecast(
        dt=obs.timestamp,
        temp=obs.air_temperature,
        description=info.description,
        icon=info.icon,
        precipitation_amount=obs.precipitation_amount or 0.0,
    )


def _check_order(observations: list[Observation], strict: bool) -> None:
    for prev, cur in zip(observations, observations[1:]):
        if cur.timestamp < prev.timestamp:
            if strict:
                raise ValueError(
                    f"Time series out of order at {cur.timestamp} "
                    f"(after {prev.timestamp})"
                )
            logger.warning(
                "Time series out of order at %d (after %d); current/hourly "
                "views assume ascending input",
                cur.timestamp, prev.timestamp,
            )
            return
