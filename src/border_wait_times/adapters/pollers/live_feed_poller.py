"""Poller that periodically refreshes the live port records."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from border_wait_times.adapters.pollers.error_details import extract_error_details
from border_wait_times.domain.contracts.poller import PollerProtocol
from border_wait_times.domain.contracts.state_broadcaster import (
    StateBroadcasterProtocol,  # noqa: TC001 - Runtime dependency: used in __init__ signature
)
from border_wait_times.domain.contracts.state_updater import (
    StateUpdaterProtocol,  # noqa: TC001 - Runtime dependency: used in __init__ signature
)

if TYPE_CHECKING:
    from border_wait_times.domain.ports import LiveFeedServicePort

logger = logging.getLogger(__name__)

LIVE_TOPIC = "live"


class LiveFeedPoller(PollerProtocol):
    """Refreshes the live port records on a fixed interval.

    Each refresh replaces the whole record set. A failed refresh keeps the
    previous records, marks the live status as "error" and waits for the next
    tick; there is no separate retry.
    """

    def __init__(
        self,
        live_service: LiveFeedServicePort,
        state_updater: StateUpdaterProtocol,
        state_broadcaster: StateBroadcasterProtocol,
        refresh_interval_seconds: int,
        broadcast_topic: str = LIVE_TOPIC,
    ) -> None:
        """Initialize the live feed poller.

        Args:
            live_service: Service producing fresh port records.
            state_updater: Updater for state.
            state_broadcaster: Broadcaster for state updates.
            refresh_interval_seconds: Seconds between refreshes.
            broadcast_topic: The topic to broadcast updates on.
        """
        self.live_service = live_service
        self.state_updater = state_updater
        self.state_broadcaster = state_broadcaster
        self.refresh_interval_seconds = refresh_interval_seconds
        self.broadcast_topic = broadcast_topic
        self._task: asyncio.Task | None = None

    async def start(self) -> None:
        """Start the live feed poller."""
        if self._task is not None and not self._task.done():
            logger.warning("Live feed poller already running")
            return

        self._task = asyncio.create_task(self._poll_loop())
        logger.info(
            f"Started live feed poller (refresh every {self.refresh_interval_seconds}s)"
        )

    async def stop(self) -> None:
        """Stop the live feed poller."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Live feed poller cancelled")
            logger.info("Stopped live feed poller")

    async def wait(self) -> None:
        """Block until the poller task finishes."""
        if self._task is not None:
            await self._task

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        # Do initial refresh immediately
        await self.refresh()

        try:
            while True:
                await asyncio.sleep(self.refresh_interval_seconds)
                await self.refresh()
        except asyncio.CancelledError:
            logger.info("Live feed poller cancelled")
            raise

    async def refresh(self) -> bool:
        """Run one fetch-parse cycle and broadcast the result.

        Returns:
            True when the port records were replaced.
        """
        try:
            ports = await self.live_service.fetch_port_records()
        except Exception as e:
            error_details = extract_error_details(e)
            logger.error(
                f"Failed to refresh live data: {error_details.reason} "
                f"(status: {error_details.status_code}, error: {e})"
            )
            self.state_updater.update_live_status("error", error_details)
            await self.state_broadcaster.broadcast_update(self.broadcast_topic)
            return False

        self.state_updater.update_ports(ports)
        self.state_updater.update_last_update_time(datetime.now(UTC))
        self.state_updater.update_live_status("success")
        logger.debug(f"Live feed poller updated {len(ports)} ports at {datetime.now(UTC)}")

        await self.state_broadcaster.broadcast_update(self.broadcast_topic)
        return True
