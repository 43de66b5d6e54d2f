"""Adapters for the CBP border wait time feeds."""

from border_wait_times.adapters.cbp_feed.csv_historical_source import CsvHistoricalSource
from border_wait_times.adapters.cbp_feed.http_client import FeedHttpClient
from border_wait_times.adapters.cbp_feed.rss_feed_source import RssFeedSource

__all__ = ["CsvHistoricalSource", "FeedHttpClient", "RssFeedSource"]
