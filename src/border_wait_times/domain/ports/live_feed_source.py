"""Live feed source port."""

from typing import Protocol

from border_wait_times.domain.models.feed_item import FeedItem


class LiveFeedSource(Protocol):
    """Port for retrieving the items of the live wait-time feed."""

    async def fetch_items(self) -> list[FeedItem]:
        """Fetch the current feed items."""
        ...
