"""CLI entry point for the weather.gov client."""

import argparse
import logging

import httpx

from noaa.client.noaa_client import NoaaClient
from noaa.config.loader import load_config
from noaa.config.store import ConfigStore
from noaa.errors import NoaaError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="noaa",
        description="Query the api.weather.gov forecast service",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--units", default=None, help="us or si")
    parser.add_argument("--user-agent", default=None, help="User-Agent header")
    parser.add_argument("--base-url", default=None, help="API base URL")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    points_p = sub.add_parser("points", help="Show point metadata")
    _add_lat_lon(points_p)

    forecast_p = sub.add_parser("forecast", help="Show the forecast for a point")
    _add_lat_lon(forecast_p)
    forecast_p.add_argument(
        "--hourly", action="store_true", help="Hourly instead of 12-hour periods"
    )

    grid_p = sub.add_parser("gridpoint", help="Show raw gridpoint forecast data")
    _add_lat_lon(grid_p)

    stations_p = sub.add_parser("stations", help="List observation stations")
    _add_lat_lon(stations_p)

    office_p = sub.add_parser("office", help="Show forecast office details")
    office_p.add_argument("office_id", help="Office code, e.g. LOT")

    obs_p = sub.add_parser("observation", help="Show station observations")
    obs_p.add_argument("station_id", help="Station code, e.g. KMDW")
    obs_p.add_argument(
        "--all", action="store_true", help="All recent observations, not only the latest"
    )

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        settings = _build_settings(args)
    except (NoaaError, OSError) as e:
        print(f"Error: {e}")
        return 1

    logging.basicConfig(
        level=logging.DEBUG if settings.config.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "config":
        return _cmd_config(settings, args)

    client = NoaaClient(settings)
    handlers = {
        "points": _cmd_points,
        "forecast": _cmd_forecast,
        "gridpoint": _cmd_gridpoint,
        "stations": _cmd_stations,
        "office": _cmd_office,
        "observation": _cmd_observation,
    }
    try:
        return handlers[args.command](client, args)
    except (NoaaError, httpx.RequestError) as e:
        print(f"Error: {e}")
        return 1


def _add_lat_lon(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("lat", help="Latitude in decimal degrees")
    parser.add_argument("lon", help="Longitude in decimal degrees")


def _build_settings(args) -> ConfigStore:
    settings = ConfigStore(load_config(args.config))
    if args.units is not None:
        settings.set_units(args.units)
    if args.user_agent is not None:
        settings.set_user_agent(args.user_agent)
    if args.base_url is not None:
        settings.set_base_url(args.base_url)
    if args.verbose:
        settings.set_config(settings.config.model_copy(update={"debug": True}))
    return settings


def _cmd_points(client: NoaaClient, args) -> int:
    point = client.points(args.lat, args.lon)
    print(point.model_dump_json(indent=2))
    return 0


def _cmd_forecast(client: NoaaClient, args) -> int:
    if args.hourly:
        result = client.hourly_forecast(args.lat, args.lon)
    else:
        result = client.forecast(args.lat, args.lon)

    for period in result.periods:
        label = period.name or period.start_time
        temperature = (
            f"{period.display_temperature:.0f}{period.temperature_unit}"
            if period.display_temperature is not None
            else "n/a"
        )
        print(
            f"{label:<25} ---> Windspeed: {period.display_wind_speed:<15} "
            f"Temperature: {temperature}"
        )
    return 0


def _cmd_gridpoint(client: NoaaClient, args) -> int:
    result = client.gridpoint_forecast(args.lat, args.lon)
    print(f"Updated: {result.update_time}")
    print(f"Temperature ({result.temperature.uom}):")
    for entry in result.temperature.values:
        print(f"  {entry.valid_time}: {entry.value}")
    return 0


def _cmd_stations(client: NoaaClient, args) -> int:
    result = client.stations(args.lat, args.lon)
    for station in result.observation_stations:
        print(station)
    return 0


def _cmd_office(client: NoaaClient, args) -> int:
    office = client.office(args.office_id)
    print(office.model_dump_json(indent=2))
    return 0


def _cmd_observation(client: NoaaClient, args) -> int:
    if args.all:
        observations = client.observations(args.station_id).observations
    else:
        observations = [client.latest_observation(args.station_id)]

    for obs in observations:
        temp = obs.temperature
        reading = f"{temp.value:.1f} {temp.unit_code}" if temp.value is not None else "n/a"
        print(f"{obs.timestamp}  {obs.text_description:<25} Temperature: {reading}")
    return 0


def _cmd_config(settings: ConfigStore, args) -> int:
    if args.config_command == "show":
        print(settings.config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1
