"""Application services (use cases) for live and historical wait times."""

import logging
from typing import TYPE_CHECKING

from border_wait_times.application.aggregator import summarize_port
from border_wait_times.application.historical_table_parser import (
    parse_historical_table,
    select_port,
)
from border_wait_times.application.live_feed_extractor import build_port_records

if TYPE_CHECKING:
    from border_wait_times.domain.models import HistoricalSlotMap, LaneSummary, PortRecord
    from border_wait_times.domain.ports import HistoricalSource, LiveFeedSource

logger = logging.getLogger(__name__)


class LiveFeedService:
    """Fetches the live feed and normalizes it into port records."""

    def __init__(self, feed_source: "LiveFeedSource") -> None:
        """Initialize with a live feed source."""
        self._feed_source = feed_source

    async def fetch_port_records(self) -> dict[str, "PortRecord"]:
        """Fetch the feed and build a fresh set of port records.

        Transport and empty-payload errors from the source propagate to the caller.
        """
        items = await self._feed_source.fetch_items()
        records = build_port_records(items)
        logger.info(f"Parsed {len(records)} port(s) from {len(items)} feed item(s)")
        return records


class HistoricalService:
    """Fetches and aggregates the historical wait-time export."""

    def __init__(self, historical_source: "HistoricalSource") -> None:
        """Initialize with a historical export source."""
        self._historical_source = historical_source

    async def load(self) -> "HistoricalSlotMap":
        """Fetch and parse the export.

        Raises the source's transport errors and the parser's payload errors.
        """
        text = await self._historical_source.fetch_text()
        slot_map = parse_historical_table(text)
        logger.info(f"Loaded historical data for {len(slot_map)} port(s)")
        return slot_map

    @staticmethod
    def summarize(slot_map: "HistoricalSlotMap", port: str) -> dict[str, "LaneSummary"] | None:
        """Per-lane aggregates for one port, or None when the port has no data."""
        lane_map = select_port(slot_map, port)
        if lane_map is None:
            logger.warning(f"No historical data for port: {port}")
            return None
        return summarize_port(lane_map)
