"""met.no symbol code lookup: description and icon id."""

from types import MappingProxyType

from weatherapp.models.forecast import SymbolInfo

GENERIC_ICON = "04d"
NOT_AVAILABLE = "N/A"

SYMBOL_MAP = MappingProxyType(
    {
        "clearsky_day": SymbolInfo("Clear sky", "01d"),
        "clearsky_night": SymbolInfo("Clear sky", "01n"),
        "fair_day": SymbolInfo("Fair", "02d"),
        "fair_night": SymbolInfo("Fair", "02n"),
        "partlycloudy_day": SymbolInfo("Partly cloudy", "03d"),
        "partlycloudy_night": SymbolInfo("Partly cloudy", "03n"),
        "cloudy": SymbolInfo("Cloudy", "04d"),
        # Rain showers
        "lightrainshowers_day": SymbolInfo("Light rain showers", "09d"),
        "lightrainshowers_night": SymbolInfo("Light rain showers", "09n"),
        "rainshowers_day": SymbolInfo("Rain showers", "09d"),
        "rainshowers_night": SymbolInfo("Rain showers", "09n"),
        "heavyrainshowers_day": SymbolInfo("Heavy rain showers", "09d"),
        "heavyrainshowers_night": SymbolInfo("Heavy rain showers", "09n"),
        # Rain
        "lightrain": SymbolInfo("Light rain", "10d"),
        "rain": SymbolInfo("Rain", "10d"),
        "heavyrain": SymbolInfo("Heavy rain", "10d"),
        # Thunder
        "lightrainandthunder": SymbolInfo("Light rain with thunder", "11d"),
        "rainandthunder": SymbolInfo("Rain with thunder", "11d"),
        "heavyrainandthunder": SymbolInfo("Heavy rain with thunder", "11d"),
        # Snow showers
        "lightsnowshowers_day": SymbolInfo("Light snow showers", "13d"),
        "lightsnowshowers_night": SymbolInfo("Light snow showers", "13n"),
        "snowshowers_day": SymbolInfo("Snow showers", "13d"),
        "snowshowers_night": SymbolInfo("Snow showers", "13n"),
        "heavysnowshowers_day": SymbolInfo("Heavy snow showers", "13d"),
        "heavysnowshowers_night": SymbolInfo("Heavy snow showers", "13n"),
        # Snow
        "lightsnow": SymbolInfo("Light snow", "13d"),
        "snow": SymbolInfo("Snow", "13d"),
        "heavysnow": SymbolInfo("Heavy snow", "13d"),
        "fog": SymbolInfo("Fog", "50d"),
    }
)


def resolve_symbol(code: str | None) -> SymbolInfo:
    """Map a symbol code to its description and icon. Never raises."""
    if not code:
        return SymbolInfo(NOT_AVAILABLE, GENERIC_ICON)
    info = SYMBOL_MAP.get(code)
    if info is not None:
        return info
    return SymbolInfo(code.replace("_", " "), GENERIC_ICON)
