"""Output formatters for assembled forecasts."""

import json
from dataclasses import asdict
from datetime import UTC, datetime

from weatherapp.models.forecast import ForecastResult


def forecast_to_dict(result: ForecastResult) -> dict:
    return asdict(result)


def format_forecast_json(result: ForecastResult) -> str:
    """JSON forecast for programmatic consumption."""
    return json.dumps(forecast_to_dict(result), indent=2)


def format_forecast_text(city: str, result: ForecastResult) -> str:
    """Plain text forecast for the terminal."""
    c = result.current
    lines = [
        f"=== Weather for {city} "
        f"({result.coordinates.lat:.4f}, {result.coordinates.lon:.4f}) ===",
        f"Now: {c.temp:.1f}°C, {c.description} | "
        f"Humidity {c.humidity:.0f}% | Pressure {c.pressure:.0f} hPa",
        f"Wind: {c.wind_speed:.1f} m/s from {c.wind_deg:.0f}° | "
        f"Clouds {c.clouds:.0f}%",
        "",
        "Next hours:",
    ]
    for h in result.hourly:
        lines.append(
            f"  {_hhmm(h.dt)}  {h.temp:5.1f}°C  {h.precipitation_amount:4.1f} mm  "
            f"{h.description}"
        )
    lines.append("")
    lines.append("Daily:")
    for d in result.daily:
        day = f"{d.temp.day:.1f}" if d.temp.day is not None else "-"
        night = f"{d.temp.night:.1f}" if d.temp.night is not None else "-"
        lines.append(
            f"  {d.date}  min {d.temp.min:.1f} / max {d.temp.max:.1f}°C  "
            f"day {day} / night {night}  "
            f"{d.precipitation_amount:.1f} mm  {d.description}"
        )
    return "\n".join(lines)


def _hhmm(ts: int) -> str:
    return datetime.fromtimestamp(ts, UTC).strftime("%H:%M")
