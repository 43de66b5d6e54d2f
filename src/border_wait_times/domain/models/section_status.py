"""Per-mode section (vehicles, pedestrians, PedWest) domain models."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from border_wait_times.domain.models.lane_status import LaneStatus

HOURS_NOT_AVAILABLE = "N/A"
HOURS_ALWAYS_OPEN = "24 Hours"


class HoursStrategy(StrEnum):
    """Which rule recovered the operating-hours text from a description."""

    TAB_COLUMN = "tab_column"
    REGEX_FALLBACK = "regex_fallback"


@dataclass(frozen=True)
class OperatingHours:
    """Operating hours text and the open flag derived from it."""

    text: str = HOURS_NOT_AVAILABLE
    is_open: bool = True
    strategy: HoursStrategy | None = None  # None when no strategy matched


@dataclass(frozen=True)
class SectionStatus:
    """Lanes of one traveler mode at a port, plus its operating hours."""

    lanes: dict[str, LaneStatus] = field(default_factory=dict)
    operating_hours: str = HOURS_NOT_AVAILABLE
    is_open: bool = True
    hours_strategy: HoursStrategy | None = None

    @property
    def is_populated(self) -> bool:
        return bool(self.lanes)

    @property
    def has_open_lanes(self) -> bool:
        return any(lane.is_open for lane in self.lanes.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "operating_hours": self.operating_hours,
            "is_open": self.is_open,
            "hours_strategy": self.hours_strategy.value if self.hours_strategy else None,
            "lanes": {name: lane.to_dict() for name, lane in self.lanes.items()},
        }
