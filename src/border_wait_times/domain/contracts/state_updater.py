"""Protocol for updating application state."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from border_wait_times.domain.models.error_details import ErrorDetails
    from border_wait_times.domain.models.historical import HistoricalSlotMap
    from border_wait_times.domain.models.port_record import PortRecord


class StateUpdaterProtocol(Protocol):
    """Protocol for writing fetch results into the application state."""

    def update_ports(self, ports: dict[str, "PortRecord"]) -> None:
        """Replace the live port records.

        Args:
            ports: Port records keyed by port name.
        """
        ...

    def update_live_status(self, status: str, error: "ErrorDetails | None" = None) -> None:
        """Update the live feed status.

        Args:
            status: The feed status ("success" or "error").
            error: Details of the last failure, if any.
        """
        ...

    def update_last_update_time(self, time: "datetime") -> None:
        """Update the last successful refresh timestamp.

        Args:
            time: The timestamp of the last update.
        """
        ...

    def update_historical(
        self, slot_map: "HistoricalSlotMap | None", error: "ErrorDetails | None" = None
    ) -> None:
        """Store the historical slot map, or the error that prevented loading it.

        Args:
            slot_map: Parsed historical data, or None on failure.
            error: Details of the failure, if any.
        """
        ...
