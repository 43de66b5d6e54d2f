"""Live feed source reading the CBP RSS feed with feedparser."""

import io
import logging
from typing import TYPE_CHECKING

import feedparser

from border_wait_times.domain.errors import EmptyPayloadError
from border_wait_times.domain.models.feed_item import FeedItem

if TYPE_CHECKING:
    from border_wait_times.adapters.cbp_feed.http_client import FeedHttpClient

logger = logging.getLogger(__name__)


def parse_feed(payload: bytes) -> list[FeedItem]:
    """Parse an RSS document into feed items.

    Feeds that are not well-formed are still read as far as feedparser gets;
    entries without a title or description are kept and skipped downstream.
    """
    parsed = feedparser.parse(io.BytesIO(payload))
    if parsed.bozo:
        logger.warning(f"Live feed is not well-formed: {parsed.get('bozo_exception')}")

    return [
        FeedItem(title=entry.get("title"), description=entry.get("description"))
        for entry in parsed.entries
    ]


class RssFeedSource:
    """LiveFeedSource backed by the RSS endpoint."""

    def __init__(self, http_client: "FeedHttpClient", url: str) -> None:
        """Initialize with an HTTP client and the feed URL."""
        self._http_client = http_client
        self._url = url

    async def fetch_items(self) -> list[FeedItem]:
        """Fetch and parse the feed.

        Raises:
            FeedFetchError: The feed could not be retrieved.
            EmptyPayloadError: The feed returned an empty body.
        """
        payload = await self._http_client.fetch_bytes(self._url)
        if not payload.strip():
            raise EmptyPayloadError()

        items = parse_feed(payload)
        logger.debug(f"Read {len(items)} item(s) from live feed")
        return items
