"""Broadcaster that reports state changes to the log."""

from __future__ import annotations

import logging

from border_wait_times.adapters.state.app_state import (
    AppState,  # noqa: TC001 - Runtime dependency: used in __init__
)
from border_wait_times.domain.contracts.state_broadcaster import StateBroadcasterProtocol

logger = logging.getLogger(__name__)


class LogStateBroadcaster(StateBroadcasterProtocol):
    """Logs a one-line summary of the state whenever it changes."""

    def __init__(self, app_state: AppState) -> None:
        """Initialize with the state to summarize."""
        self.app_state = app_state

    def summary(self) -> str:
        state = self.app_state
        open_ports = sum(1 for record in state.ports.values() if record.is_open)
        summary = f"{len(state.ports)} ports ({open_ports} open), live status: {state.live_status}"
        if state.live_error is not None:
            summary += f" ({state.live_error.label})"
        return summary

    async def broadcast_update(self, topic: str) -> None:
        """Log the current state summary under the given topic."""
        logger.info(f"[{topic}] {self.summary()}")
