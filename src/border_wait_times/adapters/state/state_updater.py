"""Updater for application state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from border_wait_times.adapters.state.app_state import (
    AppState,  # noqa: TC001 - Runtime dependency: used in __init__
)
from border_wait_times.domain.contracts.state_updater import StateUpdaterProtocol

if TYPE_CHECKING:
    from datetime import datetime

    from border_wait_times.domain.models.error_details import ErrorDetails
    from border_wait_times.domain.models.historical import HistoricalSlotMap
    from border_wait_times.domain.models.port_record import PortRecord

logger = logging.getLogger(__name__)


class StateUpdater(StateUpdaterProtocol):
    """Writes fetch results into the AppState."""

    def __init__(self, app_state: AppState) -> None:
        """Initialize the state updater.

        Args:
            app_state: The AppState instance to update.
        """
        self.app_state = app_state

    def update_ports(self, ports: dict[str, PortRecord]) -> None:
        """Replace the live port records.

        Args:
            ports: Port records keyed by port name.
        """
        self.app_state.ports = ports
        self.app_state.port_names = sorted(ports)
        logger.debug(f"Updated port records: {len(ports)} ports")

    def update_live_status(self, status: str, error: ErrorDetails | None = None) -> None:
        """Update the live feed status.

        Args:
            status: The feed status ("success" or "error").
            error: Details of the last failure, if any.
        """
        self.app_state.live_status = status
        self.app_state.live_error = error
        logger.debug(f"Updated live status: {status}")

    def update_last_update_time(self, time: datetime) -> None:
        """Update the last successful refresh timestamp.

        Args:
            time: The timestamp of the last update.
        """
        self.app_state.last_update = time
        logger.debug(f"Updated last update time: {time}")

    def update_historical(
        self, slot_map: HistoricalSlotMap | None, error: ErrorDetails | None = None
    ) -> None:
        """Store the historical slot map, or the error that prevented loading it.

        Args:
            slot_map: Parsed historical data, or None on failure.
            error: Details of the failure, if any.
        """
        self.app_state.historical = slot_map
        self.app_state.historical_error = error
        logger.debug(f"Updated historical data: {len(slot_map or {})} ports")
