"""Tests for the CBP feed adapters."""

from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from border_wait_times.adapters.cbp_feed import CsvHistoricalSource, FeedHttpClient, RssFeedSource
from border_wait_times.adapters.cbp_feed.csv_historical_source import with_cache_buster
from border_wait_times.adapters.cbp_feed.rss_feed_source import parse_feed
from border_wait_times.domain.errors import EmptyPayloadError, FeedFetchError

FEED_URL = "https://bwt.example.test/rss"

RSS_DOCUMENT = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Border Wait Times</title>
    <item>
      <title>San Ysidro - San Diego</title>
      <description>Passenger Vehicles: 24 hrs/day
General Lanes: At 2:00 pm PDT 45 min delay 20 lane(s) open</description>
    </item>
    <item>
      <title>Tecate - Tecate</title>
    </item>
  </channel>
</rss>
"""


def _mock_session(
    status: int = 200, body: bytes = b"", reason: str = "OK"
) -> tuple[MagicMock, MagicMock]:
    response = MagicMock()
    response.status = status
    response.reason = reason
    response.headers = {"Content-Type": "text/plain"}
    response.read = AsyncMock(return_value=body)
    response.text = AsyncMock(return_value=body.decode())

    session = MagicMock()
    session.get.return_value.__aenter__.return_value = response
    return session, response


@pytest.mark.asyncio
async def test_fetch_text_returns_body_on_success() -> None:
    """Given a 200 response, when fetching text, then the body is returned."""
    session, _ = _mock_session(body=b"a,b\n1,2")

    text = await FeedHttpClient(session).fetch_text(FEED_URL)

    assert text == "a,b\n1,2"
    session.get.assert_called_once()
    assert session.get.call_args.args == (FEED_URL,)


@pytest.mark.asyncio
async def test_when_status_not_ok_then_feed_fetch_error_with_status() -> None:
    """Given a 503 response, when fetching, then FeedFetchError carries the status and reason."""
    session, _ = _mock_session(status=503, body=b"down", reason="Service Unavailable")

    with pytest.raises(FeedFetchError) as exc_info:
        await FeedHttpClient(session).fetch_bytes(FEED_URL)

    assert exc_info.value.status_code == 503
    assert exc_info.value.reason == "Service Unavailable"
    assert "Network response was not ok: 503 Service Unavailable" in str(exc_info.value)


@pytest.mark.asyncio
async def test_when_client_error_then_feed_fetch_error_without_status() -> None:
    """Given a connection failure, when fetching, then FeedFetchError has no status code."""
    session = MagicMock()
    session.get.side_effect = aiohttp.ClientConnectionError("connection refused")

    with pytest.raises(FeedFetchError) as exc_info:
        await FeedHttpClient(session).fetch_text(FEED_URL)

    assert exc_info.value.status_code is None
    assert "connection refused" in exc_info.value.reason


def test_parse_feed_keeps_entries_without_description() -> None:
    """Given an RSS document, when parsing, then every item becomes a FeedItem."""
    items = parse_feed(RSS_DOCUMENT)

    assert len(items) == 2
    assert items[0].title == "San Ysidro - San Diego"
    assert items[0].description is not None
    assert "45 min delay" in items[0].description
    assert items[1].title == "Tecate - Tecate"
    assert items[1].description is None


@pytest.mark.asyncio
async def test_rss_source_fetches_and_parses_items() -> None:
    """Given an HTTP client returning RSS, when fetching items, then the parsed items are returned."""
    http_client = MagicMock(spec=FeedHttpClient)
    http_client.fetch_bytes = AsyncMock(return_value=RSS_DOCUMENT)

    items = await RssFeedSource(http_client, FEED_URL).fetch_items()

    http_client.fetch_bytes.assert_awaited_once_with(FEED_URL)
    assert [item.title for item in items] == ["San Ysidro - San Diego", "Tecate - Tecate"]


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [b"", b"  \n"])
async def test_rss_source_rejects_empty_body(payload: bytes) -> None:
    """Given an empty body, when fetching items, then an empty-payload error is raised."""
    http_client = MagicMock(spec=FeedHttpClient)
    http_client.fetch_bytes = AsyncMock(return_value=payload)

    with pytest.raises(EmptyPayloadError):
        await RssFeedSource(http_client, FEED_URL).fetch_items()


def test_with_cache_buster_appends_to_existing_query() -> None:
    """Given URLs with and without a query, when busting the cache, then the parameter is appended."""
    assert with_cache_buster("https://x.test/pub?output=csv", 123) == (
        "https://x.test/pub?output=csv&_=123"
    )
    assert with_cache_buster("https://x.test/pub", 123) == "https://x.test/pub?_=123"


@pytest.mark.asyncio
async def test_csv_source_fetches_with_cache_buster() -> None:
    """Given a CSV source, when fetching, then the export URL is requested with a timestamp."""
    http_client = MagicMock(spec=FeedHttpClient)
    http_client.fetch_text = AsyncMock(return_value="header\nrow")

    with patch(
        "border_wait_times.adapters.cbp_feed.csv_historical_source.time.time",
        return_value=1700000000.5,
    ):
        text = await CsvHistoricalSource(http_client, "https://x.test/pub?output=csv").fetch_text()

    assert text == "header\nrow"
    http_client.fetch_text.assert_awaited_once_with(
        "https://x.test/pub?output=csv&_=1700000000500"
    )
