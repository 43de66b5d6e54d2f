"""Domain layer - core models, errors and ports."""

from border_wait_times.domain.models import (
    FeedItem,
    LaneState,
    LaneStatus,
    PortRecord,
    SectionStatus,
)
from border_wait_times.domain.ports import HistoricalSource, LiveFeedSource

__all__ = [
    "FeedItem",
    "HistoricalSource",
    "LaneState",
    "LaneStatus",
    "LiveFeedSource",
    "PortRecord",
    "SectionStatus",
]
