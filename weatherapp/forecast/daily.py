"""Daily aggregation of an hourly observation series."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from weatherapp.forecast.symbols import resolve_symbol
from weatherapp.models.common import date_key_to_epoch, utc_date_key, utc_hour
from weatherapp.models.forecast import DailyForecast, DailyTemperature, Observation

DAY_START_HOUR = 6
DAY_END_HOUR = 18
DEFAULT_SYMBOL_CODE = "clearsky_day"


@dataclass
class _DayBucket:
    temps: list[float] = field(default_factory=list)
    day_temps: list[float] = field(default_factory=list)
    night_temps: list[float] = field(default_factory=list)
    precipitation: float = 0.0
    symbol_codes: list[str] = field(default_factory=list)


def aggregate_daily(observations: Iterable[Observation]) -> list[DailyForecast]:
    """Collapse observations into one record per UTC calendar day.

    Days are keyed by the UTC date of each timestamp. Temperatures sampled
    between 06:00 and 18:00 UTC feed the day average, the rest the night
    average. The representative symbol is the most frequent next-hour code,
    ties going to the code seen first that day.
    """
    buckets: dict[str, _DayBucket] = {}

    for obs in observations:
        key = utc_date_key(obs.timestamp)
        bucket = buckets.setdefault(key, _DayBucket())

        bucket.temps.append(obs.air_temperature)
        bucket.precipitation += obs.precipitation_amount or 0.0
        if obs.symbol_code:
            bucket.symbol_codes.append(obs.symbol_code)

        if DAY_START_HOUR <= utc_hour(obs.timestamp) < DAY_END_HOUR:
            bucket.day_temps.append(obs.air_temperature)
        else:
            bucket.night_temps.append(obs.air_temperature)

    daily: list[DailyForecast] = []
    for key in sorted(buckets):
        bucket = buckets[key]
        if not bucket.temps:
            continue

        symbol_code = _majority_symbol(bucket.symbol_codes)
        info = resolve_symbol(symbol_code)
        daily.append(
            DailyForecast(
                date=key,
                dt=date_key_to_epoch(key),
                temp=DailyTemperature(
                    min=min(bucket.temps),
                    max=max(bucket.temps),
                    day=_mean(bucket.day_temps),
                    night=_mean(bucket.night_temps),
                ),
                symbol_code=symbol_code,
                description=info.description,
                icon=info.icon,
                precipitation_amount=bucket.precipitation,
            )
        )
    return daily


def _majority_symbol(codes: list[str]) -> str:
    if not codes:
        return DEFAULT_SYMBOL_CODE
    # Counter keeps insertion order and most_common() is stable, so a tie
    # resolves to the earliest first occurrence.
    return Counter(codes).most_common(1)[0][0]


def _mean(values: list[float]) -> float | None:
    if not values:
        return None
    return sum(values) / len(values)
