"""Command line interface for border wait times."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp

from border_wait_times.adapters.cbp_feed import CsvHistoricalSource, FeedHttpClient, RssFeedSource
from border_wait_times.adapters.config import AppConfig
from border_wait_times.application.historical_table_parser import port_names
from border_wait_times.application.services import HistoricalService, LiveFeedService
from border_wait_times.application.time_labels import hour_axis_labels
from border_wait_times.application.wait_levels import classify_lane, heat_level, order_ports
from border_wait_times.domain.errors import BorderWaitError
from border_wait_times.domain.models import (
    HistoricalSlotMap,
    LaneSummary,
    PortRecord,
    WaitThresholds,
)

logger = logging.getLogger(__name__)

SECTION_TITLES = {
    "vehicles": "Passenger Vehicles",
    "pedestrians": "Pedestrians",
    "pedwest": "PedWest",
}


async def fetch_live(config: AppConfig) -> dict[str, PortRecord]:
    """Fetch and parse the live feed once."""
    async with aiohttp.ClientSession() as session:
        source = RssFeedSource(FeedHttpClient(session), config.live_feed_url)
        return await LiveFeedService(source).fetch_port_records()


async def fetch_historical(config: AppConfig) -> HistoricalSlotMap:
    """Fetch and parse the historical export once."""
    async with aiohttp.ClientSession() as session:
        source = CsvHistoricalSource(FeedHttpClient(session), config.historical_csv_url)
        return await HistoricalService(source).load()


def format_port(record: PortRecord, thresholds: WaitThresholds) -> list[str]:
    """Render one port as indented text lines."""
    status = "open" if record.is_open else "closed"
    lines = [f"{record.port_name} ({status}, hours: {record.operating_hours})"]

    for name, section in record.populated_sections().items():
        lines.append(f"  {SECTION_TITLES[name]} - {section.operating_hours}")
        for lane_name, lane in section.lanes.items():
            level = classify_lane(lane, thresholds)
            if lane.is_open:
                detail = f"{lane.wait_time_minutes} min, {lane.lanes_open_label} open"
                if lane.update_time:
                    detail += f" (at {lane.update_time})"
            else:
                detail = lane.status.value
            lines.append(f"    {lane_name:<8} {detail} [{level.value}]")
    return lines


def format_lane_summary(lane_key: str, summary: LaneSummary) -> list[str]:
    """Render one lane's hourly averages with their heat levels."""
    lines = [f"  {lane_key}"]
    for label, average in zip(hour_axis_labels(), summary.hourly, strict=True):
        lines.append(f"    {label}  {average:>4} min  {heat_level(average).value}")
    return lines


def _select_ports(records: dict[str, PortRecord], requested: list[str] | None) -> list[str]:
    if not requested:
        return list(records)
    missing = [name for name in requested if name not in records]
    for name in missing:
        print(f"Port '{name}' not found in live feed.", file=sys.stderr)
    return [name for name in requested if name in records]


async def show_live(config: AppConfig, ports: list[str] | None, as_json: bool) -> None:
    records = await fetch_live(config)
    names = order_ports(_select_ports(records, ports), config.favorites())

    if as_json:
        print(json.dumps([records[name].to_dict() for name in names], indent=2))
        return

    if not names:
        print("No ports found in live feed.", file=sys.stderr)
        sys.exit(1)

    thresholds = config.thresholds()
    for name in names:
        print("\n".join(format_port(records[name], thresholds)))
        print()


async def show_historical(config: AppConfig, port: str | None, as_json: bool) -> None:
    slot_map = await fetch_historical(config)
    names = port_names(slot_map)
    if not names:
        print("Historical data contains no ports.", file=sys.stderr)
        sys.exit(1)

    # Default to the first port, as the dashboard does.
    selected = port or names[0]
    summaries = HistoricalService.summarize(slot_map, selected)
    if summaries is None:
        print(f"No historical data for port '{selected}'.", file=sys.stderr)
        sys.exit(1)

    if as_json:
        payload: dict[str, Any] = {
            "port_name": selected,
            "lanes": {key: summary.to_dict() for key, summary in summaries.items()},
        }
        print(json.dumps(payload, indent=2))
        return

    print(f"Average hourly wait times at {selected}:\n")
    for key, summary in summaries.items():
        print("\n".join(format_lane_summary(key, summary)))
        print()


async def show_ports(config: AppConfig) -> None:
    slot_map = await fetch_historical(config)
    for name in port_names(slot_map):
        print(name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Border crossing wait times from the CBP feeds",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show live wait times for all ports
  bwt live

  # Show live wait times for one port as JSON
  bwt live --port "San Ysidro" --json

  # Show historical hourly averages for a port
  bwt historical --port "San Ysidro"

  # List ports with historical data
  bwt ports
        """,
    )
    parser.add_argument("--config", help="Path to TOML configuration file")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    live_parser = subparsers.add_parser("live", help="Show live wait times")
    live_parser.add_argument(
        "--port", action="append", dest="ports", help="Port name (repeatable)"
    )
    live_parser.add_argument("--json", action="store_true", help="Output as JSON")

    historical_parser = subparsers.add_parser(
        "historical", help="Show historical hourly averages for a port"
    )
    historical_parser.add_argument("--port", help="Port name (defaults to the first port)")
    historical_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("ports", help="List ports with historical data")
    return parser


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig(config_file=args.config) if args.config else AppConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        config.load_toml()
        if args.command == "live":
            await show_live(config, args.ports, as_json=args.json)
        elif args.command == "historical":
            await show_historical(config, args.port, as_json=args.json)
        elif args.command == "ports":
            await show_ports(config)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (BorderWaitError, ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
