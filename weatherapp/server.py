"""Weather lookup API: FastAPI backend for the browser front end."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weatherapp.config.loader import load_config
from weatherapp.models.common import utc_now_iso
from weatherapp.models.errors import ErrorKind, WeatherLookupError
from weatherapp.pipeline.lookup import lookup_weather
from weatherapp.reporting.formatters import forecast_to_dict


CONFIG_PATH = Path(__file__).parent.parent / "configs" / "default.yaml"

STATUS_BY_KIND = {
    ErrorKind.VALIDATION_FAILURE: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UPSTREAM_FAILURE: 502,
}

app = FastAPI(title="Weather Lookup", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def _config():
    return load_config(CONFIG_PATH if CONFIG_PATH.exists() else None)


@app.get("/api/weather")
def get_weather(city: str = ""):
    """Current, hourly and daily forecast for a city name."""
    try:
        result = lookup_weather(city, _config())
    except WeatherLookupError as e:
        return JSONResponse(
            status_code=STATUS_BY_KIND[e.kind],
            content={"error": e.kind.value, "message": e.message},
        )
    return forecast_to_dict(result)


@app.get("/api/health")
def health():
    return {"status": "ok", "timestamp": utc_now_iso()}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8777)
