"""
Command-line interface for Tax Locator.
"""

import argparse
import json
import sys
from typing import List, Optional, Tuple

from . import __version__
from .lookup import Coordinate, LocationResolver, ResolutionResult, TaxLookupError
from .utils.config import Config
from .utils.logging import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Tax Locator - Sales tax lookup for a map location",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tax-locator --version
  tax-locator lookup --lat 45.5152 --lng -122.6784
  tax-locator search "Portland, Oregon"
  tax-locator search Austin TX --json
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Tax Locator {__version__}",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--log-file",
        help="Log file path",
    )

    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to a .env file with API keys (default: .env)",
    )

    # Create subparsers for different commands
    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
    )

    # Coordinate lookup command
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Find the sales tax for a latitude/longitude",
    )
    lookup_parser.add_argument("--lat", type=float, required=True, help="Latitude in decimal degrees")
    lookup_parser.add_argument("--lng", type=float, required=True, help="Longitude in decimal degrees")
    lookup_parser.add_argument("--json", action="store_true", help="Print the raw result as JSON")

    # Place search command
    search_parser = subparsers.add_parser(
        "search",
        help="Find the sales tax for a place name",
    )
    search_parser.add_argument("query", nargs="+", help="Free-text place name")
    search_parser.add_argument("--json", action="store_true", help="Print the raw result as JSON")

    return parser


def _percent(rate: Optional[float]) -> str:
    if rate is None:
        return "n/a"
    return f"{rate * 100:.4f}%"


def _print_box(lines: List[Tuple[str, str]]) -> None:
    label_width = max(len(lbl) for lbl, _ in lines)
    inner_width = max(len(f" {lbl.ljust(label_width)} : {val} ") for lbl, val in lines)
    print("┌" + "─" * inner_width + "┐")
    for lbl, val in lines:
        line = f" {lbl.ljust(label_width)} : {val}"
        print(f"│{line.ljust(inner_width)}│")
    print("└" + "─" * inner_width + "┘")


def render_result(result: ResolutionResult, as_json: bool = False) -> None:
    """Print a resolution result for a human (boxed summary) or as JSON."""
    coord = result.coordinate
    if as_json:
        payload = result.to_dict()
        if coord is not None:
            payload["coordinate"] = {"lat": coord.latitude, "lng": coord.longitude}
        print(json.dumps(payload, indent=2))
        return

    if not result.success:
        print(f"No sales tax data found. This location is in {result.fallback_location}.")
        return

    data = result.data
    area = ", ".join(p for p in (data.city, data.county, data.state, data.country) if p)
    _print_box([
        ("Coordinates", f"{coord.latitude}, {coord.longitude}" if coord else "-"),
        ("Location", area or "-"),
        ("ZIP Code", data.zip_code or "-"),
        ("Sales Tax", f"{data.total_rate * 100:.2f}%"),
    ])
    print("\nRATE BREAKDOWN:")
    print("=" * 40)
    print(f"Total Rate:   {_percent(data.total_rate)}")
    print(f"State Rate:   {_percent(data.state_rate)}")
    print(f"City Rate:    {_percent(data.city_rate)}")
    print(f"County Rate:  {_percent(data.county_rate)}")


def lookup_coordinate(resolver: LocationResolver, lat: float, lng: float, as_json: bool = False) -> int:
    """Resolve a coordinate and print the result. Returns the exit code."""
    result = resolver.resolve(Coordinate(lat, lng))
    render_result(result, as_json=as_json)
    return 0


def search_place(resolver: LocationResolver, query: str, as_json: bool = False) -> int:
    """Forward-geocode a place name, then resolve it. Returns the exit code."""
    result = resolver.search(query)
    if result is None:
        print(f"No location found for '{query}'.")
        return 1
    render_result(result, as_json=as_json)
    return 0


def main(args: Optional[list] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    config = Config(parsed_args.env_file)

    # Set up logging
    log_level = "DEBUG" if parsed_args.verbose else config.get("log_level", "INFO")
    logger = setup_logging(level=log_level, log_file=parsed_args.log_file)

    if not parsed_args.command:
        parser.print_help()
        return 1

    try:
        resolver = LocationResolver.from_config(config)
        if parsed_args.command == "lookup":
            logger.info(f"Looking up sales tax for {parsed_args.lat}, {parsed_args.lng}")
            return lookup_coordinate(resolver, parsed_args.lat, parsed_args.lng, as_json=parsed_args.json)
        if parsed_args.command == "search":
            query = " ".join(parsed_args.query)
            logger.info(f"Searching for '{query}'")
            return search_place(resolver, query, as_json=parsed_args.json)
    except TaxLookupError as e:
        logger.error(f"Error: {e}")
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
