"""HTTP client for the public wait-time feeds."""

import logging
from typing import TYPE_CHECKING

import aiohttp

from border_wait_times.adapters.cbp_feed.constants import DEFAULT_HEADERS
from border_wait_times.domain.errors import FeedFetchError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class FeedHttpClient:
    """Fetches feed documents over unauthenticated GET requests.

    Non-success responses and client errors are raised as FeedFetchError; no
    retry is attempted here, the next poll is the retry.
    """

    def __init__(self, session: "ClientSession") -> None:
        """Initialize with an aiohttp session owned by the caller."""
        self._session = session

    async def _log_error_response(self, response: "ClientResponse", url: str) -> None:
        """Log error response details."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"Feed returned status {response.status} for {url}: "
            f"{error_body} (Content-Type: {content_type})"
        )

    async def _ensure_ok(self, response: "ClientResponse", url: str) -> None:
        if 200 <= response.status < 300:
            return
        await self._log_error_response(response, url)
        raise FeedFetchError(url, response.status, response.reason or "")

    async def fetch_text(self, url: str) -> str:
        """GET url and return the decoded body.

        Raises:
            FeedFetchError: The response was not successful or the request failed.
        """
        logger.debug(f"Fetching {url}")
        try:
            async with self._session.get(url, headers=DEFAULT_HEADERS) as response:
                await self._ensure_ok(response, url)
                return await response.text()
        except aiohttp.ClientError as e:
            logger.error(f"Error fetching {url}: {e}")
            raise FeedFetchError(url, reason=str(e)) from e

    async def fetch_bytes(self, url: str) -> bytes:
        """GET url and return the raw body, leaving decoding to the caller.

        Raises:
            FeedFetchError: The response was not successful or the request failed.
        """
        logger.debug(f"Fetching {url}")
        try:
            async with self._session.get(url, headers=DEFAULT_HEADERS) as response:
                await self._ensure_ok(response, url)
                return await response.read()
        except aiohttp.ClientError as e:
            logger.error(f"Error fetching {url}: {e}")
            raise FeedFetchError(url, reason=str(e)) from e
