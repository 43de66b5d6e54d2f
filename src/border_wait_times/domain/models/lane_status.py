"""Lane status domain model."""

from dataclasses import dataclass
from enum import StrEnum


class LaneState(StrEnum):
    """Operational state of a single lane."""

    OPEN = "Open"
    CLOSED = "Closed"
    NOT_AVAILABLE = "NotAvailable"


@dataclass(frozen=True)
class LaneStatus:
    """Status of one lane type (General, Ready, Sentri) within a section.

    NOT_AVAILABLE means the lane was not found in the feed text, or was found
    without a delay figure. It is not the same as CLOSED.
    """

    status: LaneState = LaneState.NOT_AVAILABLE
    wait_time_minutes: int | None = None
    lanes_open: int | None = None
    update_time: str | None = None

    def __post_init__(self) -> None:
        if self.status is LaneState.OPEN and self.wait_time_minutes is None:
            raise ValueError("An open lane requires wait_time_minutes")
        if self.status is LaneState.CLOSED and (self.wait_time_minutes or self.lanes_open):
            raise ValueError("A closed lane cannot report a wait time or open lanes")

    @classmethod
    def not_available(cls) -> "LaneStatus":
        return cls()

    @classmethod
    def closed(cls, update_time: str | None = None) -> "LaneStatus":
        return cls(status=LaneState.CLOSED, lanes_open=0, update_time=update_time)

    @property
    def is_open(self) -> bool:
        return self.status is LaneState.OPEN

    @property
    def lanes_open_label(self) -> str:
        """Open-lane count for display; "?" when an open lane did not report one."""
        if self.lanes_open is None:
            return "?" if self.is_open else "N/A"
        return str(self.lanes_open)

    def to_dict(self) -> dict[str, str | int | None]:
        return {
            "status": self.status.value,
            "wait_time_minutes": self.wait_time_minutes,
            "lanes_open": self.lanes_open,
            "update_time": self.update_time,
        }
