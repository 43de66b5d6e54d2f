"""Ports (interfaces) for the ports-and-adapters architecture."""

from border_wait_times.domain.ports.historical_source import HistoricalSource
from border_wait_times.domain.ports.live_feed_source import LiveFeedSource
from border_wait_times.domain.ports.wait_time_services import (
    HistoricalServicePort,
    LiveFeedServicePort,
)

__all__ = [
    "HistoricalServicePort",
    "HistoricalSource",
    "LiveFeedServicePort",
    "LiveFeedSource",
]
