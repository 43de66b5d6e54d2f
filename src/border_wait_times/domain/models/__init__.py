"""Domain models for border wait times."""

from border_wait_times.domain.models.day_hour_grid import (
    HOURS_PER_DAY,
    WEEKDAYS,
    DayHourCell,
    DayHourGrid,
    LaneSummary,
)
from border_wait_times.domain.models.error_details import ErrorDetails
from border_wait_times.domain.models.feed_item import FeedItem
from border_wait_times.domain.models.historical import (
    HistoricalLayout,
    HistoricalSlotMap,
    HourlyAverageVector,
    LaneSlotMap,
    SlotSamples,
)
from border_wait_times.domain.models.lane_status import LaneState, LaneStatus
from border_wait_times.domain.models.port_record import PortRecord
from border_wait_times.domain.models.section_status import (
    HOURS_ALWAYS_OPEN,
    HOURS_NOT_AVAILABLE,
    HoursStrategy,
    OperatingHours,
    SectionStatus,
)
from border_wait_times.domain.models.wait_level import HeatLevel, WaitLevel, WaitThresholds

__all__ = [
    "HOURS_ALWAYS_OPEN",
    "HOURS_NOT_AVAILABLE",
    "HOURS_PER_DAY",
    "WEEKDAYS",
    "DayHourCell",
    "DayHourGrid",
    "ErrorDetails",
    "FeedItem",
    "HeatLevel",
    "HistoricalLayout",
    "HistoricalSlotMap",
    "HourlyAverageVector",
    "HoursStrategy",
    "LaneSlotMap",
    "LaneState",
    "LaneStatus",
    "LaneSummary",
    "OperatingHours",
    "PortRecord",
    "SectionStatus",
    "SlotSamples",
    "WaitLevel",
    "WaitThresholds",
]
