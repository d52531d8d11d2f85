"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import functools
import http.server
import sys

import requests
from pydantic import ValidationError

from weather_glance import __version__
from weather_glance.config import get_settings
from weather_glance.exceptions import WeatherGlanceError
from weather_glance.flows.build import SITE_DIR, build_all, store
from weather_glance.flows.fetch import fetch_all
from weather_glance.schemas import Theme


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="weather-glance",
        description="Current conditions, 5-day forecast and air quality at a glance",
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
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'refresh' command - fetch data and build site
    refresh_parser = subparsers.add_parser("refresh", help="Fetch data and build site")
    refresh_parser.add_argument("--city", type=str, default=None, help="City to show")
    refresh_parser.add_argument("--lat", type=float, default=None, help="Latitude")
    refresh_parser.add_argument("--lon", type=float, default=None, help="Longitude")
    refresh_parser.add_argument(
        "--force", action="store_true", help="Fetch even if cached data is fresh"
    )

    subparsers.add_parser("build", help="Rebuild site from cached data")

    # 'serve' command - serve built site locally
    serve_parser = subparsers.add_parser("serve", help="Serve site locally")
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: api_port from settings)",
    )

    theme_parser = subparsers.add_parser("theme", help="Show or change the color theme")
    theme_parser.add_argument(
        "choice",
        nargs="?",
        choices=["dark", "light", "toggle"],
        default=None,
        help="New theme (omit to show the current one)",
    )

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    prefs = store.load_preferences()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Demo mode: {settings.demo_mode}")
    print(f"Theme: {prefs.theme.value}")
    location = prefs.location.name if prefs.location else settings.default_city
    print(f"Location: {location}")
    return 0


def cmd_refresh(args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: fetch data then build site."""
    if (args.lat is None) != (args.lon is None):
        print("Error: --lat and --lon must be given together", file=sys.stderr)
        return 1

    try:
        result = fetch_all(city=args.city, lat=args.lat, lon=args.lon, force=args.force)
    except (WeatherGlanceError, requests.RequestException, ValidationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Fetched weather for {result['location']}.")

    print("Building site...")
    build_all()

    print("Done.")
    return 0


def cmd_build(_args: argparse.Namespace) -> int:
    """Handle the 'build' command: re-render from cached data."""
    result = build_all()
    if "error" in result:
        print("No cached data. Run 'weather-glance refresh' first.", file=sys.stderr)
        return 1
    print(f"Site built: {result['output']}")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: serve the built site locally."""
    settings = get_settings()
    port = args.port if args.port is not None else settings.api_port
    site_dir = SITE_DIR

    if not site_dir.exists():
        print("No site directory found. Run 'weather-glance refresh' first.", file=sys.stderr)
        return 1

    handler = functools.partial(http.server.SimpleHTTPRequestHandler, directory=str(site_dir))

    with http.server.HTTPServer(("", port), handler) as server:
        print(f"Serving site on http://localhost:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def cmd_theme(args: argparse.Namespace) -> int:
    """Handle the 'theme' command."""
    if args.choice is None:
        print(f"Theme: {store.load_preferences().theme.value}")
        return 0

    if args.choice == "toggle":
        theme = store.toggle_theme()
    else:
        prefs = store.load_preferences()
        prefs.theme = Theme(args.choice)
        store.save_preferences(prefs)
        theme = prefs.theme
    print(f"Theme set to {theme.value}. Run 'weather-glance build' to apply it.")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.debug:
        settings = get_settings().model_dump(exclude={"openweather_api_key", "waqi_api_key"})
        print(f"Debug mode enabled. Settings: {settings}")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "info": cmd_info,
        "refresh": cmd_refresh,
        "build": cmd_build,
        "serve": cmd_serve,
        "theme": cmd_theme,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
