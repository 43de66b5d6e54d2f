"""Application state dataclass."""

from dataclasses import dataclass, field
from datetime import datetime

from border_wait_times.domain.models.error_details import ErrorDetails
from border_wait_times.domain.models.historical import HistoricalSlotMap
from border_wait_times.domain.models.port_record import PortRecord


@dataclass
class AppState:
    """Process-wide state written by the live and historical cycles.

    The two cycles write disjoint fields, so no locking is needed.
    """

    ports: dict[str, PortRecord] = field(default_factory=dict)
    port_names: list[str] = field(default_factory=list)
    last_update: datetime | None = None
    live_status: str = "unknown"
    live_error: ErrorDetails | None = None
    historical: HistoricalSlotMap | None = None
    historical_error: ErrorDetails | None = None
