"""Protocols shared between pollers and state adapters."""

from border_wait_times.domain.contracts.poller import PollerProtocol
from border_wait_times.domain.contracts.state_broadcaster import StateBroadcasterProtocol
from border_wait_times.domain.contracts.state_updater import StateUpdaterProtocol

__all__ = [
    "PollerProtocol",
    "StateBroadcasterProtocol",
    "StateUpdaterProtocol",
]
