"""Main entry point: keep the live wait times refreshed until interrupted."""

import asyncio
import logging
import sys

import aiohttp

from border_wait_times.adapters.cbp_feed import CsvHistoricalSource, FeedHttpClient, RssFeedSource
from border_wait_times.adapters.config import AppConfig
from border_wait_times.adapters.pollers import HistoricalDataLoader, LiveFeedPoller
from border_wait_times.adapters.state import AppState, LogStateBroadcaster, StateUpdater
from border_wait_times.application.services import HistoricalService, LiveFeedService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main(load_historical: bool = True) -> None:
    """Main application entry point."""
    config = AppConfig()
    try:
        config.load_toml()
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    config.configure_logging()

    app_state = AppState()
    state_updater = StateUpdater(app_state)
    broadcaster = LogStateBroadcaster(app_state)

    # Create aiohttp session for efficient HTTP connections
    async with aiohttp.ClientSession() as session:
        http_client = FeedHttpClient(session)
        live_service = LiveFeedService(RssFeedSource(http_client, config.live_feed_url))
        poller = LiveFeedPoller(
            live_service,
            state_updater,
            broadcaster,
            refresh_interval_seconds=config.refresh_interval_seconds,
        )

        if load_historical:
            historical_service = HistoricalService(
                CsvHistoricalSource(http_client, config.historical_csv_url)
            )
            loader = HistoricalDataLoader(historical_service, state_updater)
            if await loader.ensure_loaded() and app_state.historical is not None:
                logger.info(f"Historical data available for {len(app_state.historical)} ports")

        await poller.start()
        try:
            await poller.wait()
        except asyncio.CancelledError:
            logger.info("Shutting down...")
            await poller.stop()
            raise


def run() -> None:
    """Synchronous entry point for the watcher command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    run()
