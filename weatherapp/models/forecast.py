"""Forecast data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


@dataclass(frozen=True)
class Observation:
    """One instant of the provider time series plus its next-hour summary."""

    timestamp: int  # seconds since epoch, UTC
    air_temperature: float
    relative_humidity: float
    air_pressure_at_sea_level: float
    wind_speed: float
    wind_from_direction: float
    cloud_area_fraction: float
    precipitation_amount: float | None = None
    symbol_code: str | None = None


@dataclass(frozen=True)
class SymbolInfo:
    description: str
    icon: str


@dataclass(frozen=True)
class CurrentWeather:
    dt: int
    temp: float
    humidity: float
    pressure: float
    wind_speed: float
    wind_deg: float
    clouds: float
    description: str
    icon: str


@dataclass(frozen=True)
class HourlyForecast:
    dt: int
    temp: float
    description: str
    icon: str
    precipitation_amount: float


@dataclass(frozen=True)
class DailyTemperature:
    min: float
    max: float
    day: float | None  # None when no sample fell in 06:00-18:00 UTC
    night: float | None


@dataclass(frozen=True)
class DailyForecast:
    date: str  # YYYY-MM-DD, UTC
    dt: int
    temp: DailyTemperature
    symbol_code: str
    description: str
    icon: str
    precipitation_amount: float


@dataclass(frozen=True)
class ForecastResult:
    coordinates: Coordinates
    current: CurrentWeather
    hourly: list[HourlyForecast]
    daily: list[DailyForecast]
