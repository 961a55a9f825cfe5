"""Lookup pipeline: city name -> coordinates -> forecast -> assembled views."""

import logging
from enum import StrEnum

from weatherapp.config.schema import AppConfig
from weatherapp.forecast.assembler import assemble_forecast
from weatherapp.ingest.geocoding_client import NominatimClient
from weatherapp.ingest.metno_client import MetNoClient
from weatherapp.models.errors import ErrorKind, WeatherLookupError
from weatherapp.models.forecast import Coordinates, ForecastResult

logger = logging.getLogger(__name__)


class LookupState(StrEnum):
    IDLE = "idle"
    RESOLVING_LOCATION = "resolving-location"
    RESOLVING_FORECAST = "resolving-forecast"
    DONE = "done"
    FAILED = "failed"


def not_found_message(city: str) -> str:
    return f'City "{city}" not found.'


def forecast_failure_message(city: str) -> str:
    return f"Failed to fetch weather data for {city}. Please try again later."


def location_failure_message(city: str) -> str:
    return f"Failed to look up location for {city}. Please try again later."


class WeatherLookup:
    """One sequential lookup. Build a fresh instance per query."""

    def __init__(
        self,
        geocoder: NominatimClient,
        forecaster: MetNoClient,
        require_chronological: bool = False,
    ):
        self.geocoder = geocoder
        self.forecaster = forecaster
        self.require_chronological = require_chronological
        self.state = LookupState.IDLE

    def run(self, city: str) -> ForecastResult:
        """Resolve a city and return its assembled forecast.

        Raises WeatherLookupError with kind NOT_FOUND when the geocoder has
        no match, or UPSTREAM_FAILURE for anything that goes wrong upstream.
        """
        city = city.strip()
        coordinates = self._resolve_location(city)
        result = self._resolve_forecast(city, coordinates)
        self.state = LookupState.DONE
        logger.info(
            "Forecast for %s (%.4f, %.4f): %d hourly, %d daily",
            city, coordinates.lat, coordinates.lon,
            len(result.hourly), len(result.daily),
        )
        return result

    def _resolve_location(self, city: str) -> Coordinates:
        self.state = LookupState.RESOLVING_LOCATION
        try:
            candidates = self.geocoder.search(city)
        except Exception as e:
            self.state = LookupState.FAILED
            logger.exception("Location lookup failed for %s", city)
            raise WeatherLookupError(
                ErrorKind.UPSTREAM_FAILURE, location_failure_message(city), cause=e
            ) from e

        if not candidates:
            self.state = LookupState.FAILED
            logger.info("No location match for %s", city)
            raise WeatherLookupError(ErrorKind.NOT_FOUND, not_found_message(city))

        first = candidates[0]
        try:
            return Coordinates(lat=float(first["lat"]), lon=float(first["lon"]))
        except (KeyError, TypeError, ValueError) as e:
            self.state = LookupState.FAILED
            logger.exception("Malformed location candidate for %s: %r", city, first)
            raise WeatherLookupError(
                ErrorKind.UPSTREAM_FAILURE, location_failure_message(city), cause=e
            ) from e

    def _resolve_forecast(self, city: str, coordinates: Coordinates) -> ForecastResult:
        self.state = LookupState.RESOLVING_FORECAST
        try:
            raw = self.forecaster.get_forecast(coordinates.lat, coordinates.lon)
            timeseries = _extract_timeseries(raw)
            if not timeseries:
                raise ValueError("Invalid or empty weather data response from met.no")
            return assemble_forecast(
                coordinates, timeseries, self.require_chronological
            )
        except Exception as e:
            self.state = LookupState.FAILED
            logger.exception(
                "Failed to fetch forecast for %s at (%s, %s)",
                city, coordinates.lat, coordinates.lon,
            )
            raise WeatherLookupError(
                ErrorKind.UPSTREAM_FAILURE, forecast_failure_message(city), cause=e
            ) from e


def lookup_weather(city: str, config: AppConfig | None = None) -> ForecastResult:
    """Top-level query: validate the city name, then run one lookup."""
    if not city or not city.strip():
        raise WeatherLookupError(
            ErrorKind.VALIDATION_FAILURE, "Please enter a city name."
        )

    if config is None:
        config = AppConfig()

    lookup = WeatherLookup(
        NominatimClient(
            base_url=config.geocoding.base_url,
            user_agent=config.geocoding.user_agent,
            timeout=config.geocoding.timeout_seconds,
        ),
        MetNoClient(
            base_url=config.forecast.base_url,
            user_agent=config.forecast.user_agent,
            timeout=config.forecast.timeout_seconds,
        ),
        require_chronological=config.forecast.require_chronological,
    )
    return lookup.run(city)


def _extract_timeseries(raw: dict) -> list[dict] | None:
    if not isinstance(raw, dict):
        return None
    properties = raw.get("properties") or {}
    timeseries = properties.get("timeseries")
    if not isinstance(timeseries, list):
        return None
    return timeseries
