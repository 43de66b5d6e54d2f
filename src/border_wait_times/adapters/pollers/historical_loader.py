"""One-shot loader for the historical wait-time export."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from border_wait_times.adapters.pollers.error_details import extract_error_details
from border_wait_times.domain.contracts.state_updater import (
    StateUpdaterProtocol,  # noqa: TC001 - Runtime dependency: used in __init__ signature
)

if TYPE_CHECKING:
    from border_wait_times.domain.ports import HistoricalServicePort

logger = logging.getLogger(__name__)


class HistoricalDataLoader:
    """Loads the historical export the first time it is needed."""

    def __init__(
        self,
        historical_service: HistoricalServicePort,
        state_updater: StateUpdaterProtocol,
    ) -> None:
        """Initialize the loader.

        Args:
            historical_service: Service that fetches and parses the export.
            state_updater: Updater for state.
        """
        self.historical_service = historical_service
        self.state_updater = state_updater
        self.loaded = False

    async def ensure_loaded(self) -> bool:
        """Load the export unless a load was already started.

        Returns:
            True when this call loaded the data successfully.
        """
        if self.loaded:
            return False
        # Mark before awaiting so a second caller does not start another fetch.
        self.loaded = True

        try:
            slot_map = await self.historical_service.load()
        except Exception as e:
            error_details = extract_error_details(e)
            logger.error(f"Failed to load historical data: {error_details.reason} ({e})")
            self.state_updater.update_historical(None, error_details)
            return False

        self.state_updater.update_historical(slot_map)
        return True
