"""Historical source reading the published CSV export."""

import logging
import time
from typing import TYPE_CHECKING

from border_wait_times.adapters.cbp_feed.constants import CACHE_BUSTING_PARAM

if TYPE_CHECKING:
    from border_wait_times.adapters.cbp_feed.http_client import FeedHttpClient

logger = logging.getLogger(__name__)


def with_cache_buster(url: str, timestamp_ms: int) -> str:
    """Append the cache-busting parameter to url, keeping any existing query."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{CACHE_BUSTING_PARAM}={timestamp_ms}"


class CsvHistoricalSource:
    """HistoricalSource backed by the published CSV export."""

    def __init__(self, http_client: "FeedHttpClient", url: str) -> None:
        """Initialize with an HTTP client and the export URL."""
        self._http_client = http_client
        self._url = url

    async def fetch_text(self) -> str:
        """Fetch the export, bypassing caches that may hold an empty response."""
        url = with_cache_buster(self._url, int(time.time() * 1000))
        logger.info(f"Fetching historical data from {self._url}")
        return await self._http_client.fetch_text(url)
