"""Pollers and loaders feeding the application state."""

from border_wait_times.adapters.pollers.historical_loader import HistoricalDataLoader
from border_wait_times.adapters.pollers.live_feed_poller import LiveFeedPoller

__all__ = ["HistoricalDataLoader", "LiveFeedPoller"]
