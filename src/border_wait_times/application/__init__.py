"""Application layer - feed parsing, aggregation and use cases."""

from border_wait_times.application.services import HistoricalService, LiveFeedService

__all__ = ["HistoricalService", "LiveFeedService"]
