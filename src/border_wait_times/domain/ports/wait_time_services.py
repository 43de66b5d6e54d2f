"""Service ports consumed by pollers and entry points."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from border_wait_times.domain.models.historical import HistoricalSlotMap
    from border_wait_times.domain.models.port_record import PortRecord


class LiveFeedServicePort(Protocol):
    """Port for producing a fresh set of live port records."""

    async def fetch_port_records(self) -> dict[str, "PortRecord"]:
        """Fetch the live feed and return port records keyed by port name."""
        ...


class HistoricalServicePort(Protocol):
    """Port for loading the historical slot map."""

    async def load(self) -> "HistoricalSlotMap":
        """Fetch and parse the historical export."""
        ...
