"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import sys

from clothesline import __version__
from clothesline.aggregator import aggregate_by_name
from clothesline.config import configure_logging, get_settings
from clothesline.dashboard import Dashboard, default_geolocation
from clothesline.datasources.device import DeviceClient
from clothesline.device import DevicePoller, DeviceToggle
from clothesline.errors import CityNotFound, ClotheslineError, DeviceUnreachable
from clothesline.flows.refresh import refresh_dashboard
from clothesline.renderers.city import CITY_NOT_FOUND
from clothesline.renderers.device import device_status_rows
from clothesline.schemas import DeviceState, DeviceStatus


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="clothesline",
        description="Weather dashboard and smart drying-line controller",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    weather_parser = subparsers.add_parser("weather", help="Show live weather")
    weather_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    weather_parser.add_argument("--lon", type=float, default=None, help="Longitude")

    city_parser = subparsers.add_parser("city", help="Look up weather by city name")
    city_parser.add_argument("name", nargs="+", help="City name")

    device_parser = subparsers.add_parser("device", help="Control the drying line")
    device_parser.add_argument("action", choices=["on", "off", "status"])

    poll_parser = subparsers.add_parser("poll", help="Poll device status on an interval")
    poll_parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds between polls (default: device_poll_interval from settings)",
    )
    poll_parser.add_argument(
        "--count", type=int, default=None, help="Stop after this many polls"
    )

    subparsers.add_parser("refresh", help="Fetch weather and build the static page")

    serve_parser = subparsers.add_parser("serve", help="Serve the page locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    return parser


def _print_status(status: DeviceStatus) -> None:
    for label, value in device_status_rows(status):
        print(f"{label}: {value}")


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Device: {settings.device_base_url}")
    print(f"API key set: {'yes' if settings.openweather_api_key else 'no'}")
    return 0


def cmd_weather(args: argparse.Namespace) -> int:
    """Handle the 'weather' command."""
    dashboard = Dashboard()
    if args.lat is not None and args.lon is not None:
        view = dashboard.show_weather_at(args.lat, args.lon)
    else:
        view = dashboard.check_live_weather()

    print(view.location_text)
    print(f"{view.temperature_text} {view.description_text}")
    if view.error:
        print(f"Error: {view.error}", file=sys.stderr)
        return 1
    print(f"Background: {view.background}  Icon: {view.icon}")
    return 0


def cmd_city(args: argparse.Namespace) -> int:
    """Handle the 'city' command."""
    name = " ".join(args.name)
    try:
        city = aggregate_by_name(name)
    except CityNotFound:
        print(CITY_NOT_FOUND, file=sys.stderr)
        return 1
    except (ClotheslineError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"{city.place.display} {city.visual}".rstrip())
    print(city.condition_description)
    print(f"{city.temperature_c}°C, Humidity: {city.humidity_pct}%")
    print(city.advisory)
    return 0


def cmd_device(args: argparse.Namespace) -> int:
    """Handle the 'device' command."""
    settings = get_settings()
    client = DeviceClient(settings.device_base_url, timeout=settings.device_timeout)

    if args.action == "status":
        try:
            status = client.fetch_status()
        except DeviceUnreachable as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        _print_status(status)
        return 0

    # A one-shot command has no remembered state; assume the opposite of the request
    turn_on = args.action == "on"
    toggle = DeviceToggle(client, initial=DeviceState.OFF if turn_on else DeviceState.ON)
    outcome = toggle.switch(turn_on)
    print(outcome.message)
    return 0 if outcome.ok else 1


def cmd_poll(args: argparse.Namespace) -> int:
    """Handle the 'poll' command: print device status every interval."""
    settings = get_settings()
    client = DeviceClient(settings.device_base_url, timeout=settings.device_timeout)
    interval = args.interval if args.interval is not None else settings.device_poll_interval

    def _on_error(exc: DeviceUnreachable) -> None:
        print(f"Error: {exc}", file=sys.stderr)

    poller = DevicePoller(client, interval=interval, on_status=_print_status, on_error=_on_error)
    try:
        poller.run(max_polls=args.count)
    except KeyboardInterrupt:
        print("\nPolling stopped.")
    return 0


def cmd_refresh(_args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: locate, fetch weather, build the page."""
    settings = get_settings()
    try:
        coords = default_geolocation(settings).locate()
    except ClotheslineError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Refreshing weather for ({coords.lat}, {coords.lon})...")
    result = refresh_dashboard(lat=coords.lat, lon=coords.lon)
    print("Done.")
    return 0 if result.get("ok") else 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built page locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = settings.site_dir

    if not site_dir.exists():
        print("No site directory found. Run 'clothesline refresh' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging("DEBUG" if args.debug else get_settings().log_level)

    commands = {
        "info": cmd_info,
        "weather": cmd_weather,
        "city": cmd_city,
        "device": cmd_device,
        "poll": cmd_poll,
        "refresh": cmd_refresh,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
