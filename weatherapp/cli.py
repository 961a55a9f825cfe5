"""CLI entry point for the weather lookup service."""

import argparse
import logging

from weatherapp.config.loader import get_config_value, load_config
from weatherapp.models.errors import WeatherLookupError
from weatherapp.pipeline.lookup import lookup_weather
from weatherapp.reporting.formatters import format_forecast_json, format_forecast_text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherapp",
        description="City weather lookup (Nominatim + met.no)",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")

    sub = parser.add_subparsers(dest="command")

    # lookup
    lookup_p = sub.add_parser("lookup", help="Look up the forecast for a city")
    lookup_p.add_argument("city", nargs="+", help="City name")
    lookup_p.add_argument("--json", action="store_true", help="Print JSON")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. forecast.timeout_seconds")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "lookup":
        return _cmd_lookup(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_lookup(config, args) -> int:
    city = " ".join(args.city)
    try:
        result = lookup_weather(city, config)
    except WeatherLookupError as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        print(format_forecast_json(result))
    else:
        print(format_forecast_text(city.strip(), result))
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config get key")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
