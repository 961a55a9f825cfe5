"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherapp.ingest import geocoding_client, metno_client


class GeocodingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = geocoding_client.NOMINATIM_BASE_URL
    user_agent: str = geocoding_client.DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = metno_client.METNO_BASE_URL
    user_agent: str = metno_client.DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    require_chronological: bool = False


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding: GeocodingConfig = GeocodingConfig()
    forecast: ForecastConfig = ForecastConfig()
