"""Adapters layer - external system integrations."""

from border_wait_times.adapters.cbp_feed import (
    CsvHistoricalSource,
    FeedHttpClient,
    RssFeedSource,
)
from border_wait_times.adapters.config import AppConfig

__all__ = [
    "AppConfig",
    "CsvHistoricalSource",
    "FeedHttpClient",
    "RssFeedSource",
]
