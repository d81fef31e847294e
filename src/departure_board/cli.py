"""CLI tool for finding stop ids and previewing the board in a terminal."""

import asyncio
import json
import sys
from dataclasses import asdict

import aiohttp

from departure_board.adapters.config import AppConfig
from departure_board.adapters.transit_api import (
    TransitDepartureRepository,
    TransitHttpClient,
    TransitStopRepository,
)
from departure_board.adapters.web.formatters import DepartureFormatter
from departure_board.domain.models import Departure, Stop


def format_board_lines(departures: list[Departure], formatter: DepartureFormatter) -> list[str]:
    """Render departures as aligned text rows, "now" for departing vehicles."""
    if not departures:
        return []
    name_width = max(len(d.line_name) for d in departures)
    destination_width = max(len(d.destination) for d in departures)
    lines = []
    for departure in departures:
        time_label = "now" if departure.is_now else formatter.format_minutes(departure)
        if departure.is_cancelled:
            time_label = "cancelled"
        lines.append(
            f"  {departure.line_name:<{name_width}}  "
            f"{departure.destination:<{destination_width}}  "
            f"{time_label:>9}  ({formatter.format_clock_time(departure)})"
        )
    return lines


def format_stop_lines(stops: list[Stop]) -> list[str]:
    """Render stop search results."""
    lines = []
    for stop in stops:
        lines.append(f"  {stop.name} ({stop.kind})")
        lines.append(f"    ID: {stop.id}")
    return lines


async def search_stops(config: AppConfig, query: str) -> list[Stop]:
    """Search stops via the configured transit API."""
    async with aiohttp.ClientSession() as session:
        client = TransitHttpClient(
            session, base_url=config.transit_api_base_url, timeout_seconds=config.api_timeout_seconds
        )
        return await TransitStopRepository(client).search_stops(query)


async def fetch_departures(config: AppConfig, stop_id: str, results: int) -> list[Departure]:
    """Fetch departures once via the configured transit API."""
    async with aiohttp.ClientSession() as session:
        client = TransitHttpClient(
            session, base_url=config.transit_api_base_url, timeout_seconds=config.api_timeout_seconds
        )
        return await TransitDepartureRepository(client).get_departures(
            stop_id, results=results, duration_minutes=config.departure_duration_minutes
        )


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Departure board helper - find stops and preview departures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search for a stop
  departure-board-cli search "Kottbusser Tor"

  # Show the configured stop once
  departure-board-cli departures

  # Show another stop with more rows
  departure-board-cli departures 900000100003 --results 10
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    search_parser = subparsers.add_parser("search", help="Search for stops")
    search_parser.add_argument("query", help="Stop name to search for")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    departures_parser = subparsers.add_parser("departures", help="Print upcoming departures")
    departures_parser.add_argument(
        "stop_id", nargs="?", default=None, help="Stop ID (defaults to the configured stop)"
    )
    departures_parser.add_argument(
        "--results", type=int, default=None, help="Number of departures to show"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig()
        config.load_config_file()
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)
    formatter = DepartureFormatter(config.timezone)

    try:
        if args.command == "search":
            stops = await search_stops(config, args.query)
            if args.json:
                print(json.dumps([asdict(s) for s in stops], indent=2, ensure_ascii=False))
            else:
                if not stops:
                    print(f"No stops found for '{args.query}'", file=sys.stderr)
                    sys.exit(1)
                print(f"\nFound {len(stops)} stop(s):\n")
                print("\n".join(format_stop_lines(stops)))

        elif args.command == "departures":
            stop_id = args.stop_id or config.stop_id
            departures = await fetch_departures(
                config, stop_id, args.results or config.result_count
            )
            if not departures:
                print(f"No departures for stop {stop_id}", file=sys.stderr)
                sys.exit(1)
            print(f"\nDepartures for stop {stop_id}:\n")
            print("\n".join(format_board_lines(departures, formatter)))

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
