"""Day-by-hour aggregation grid domain models."""

from dataclasses import dataclass, field
from typing import Any

from border_wait_times.domain.models.historical import HourlyAverageVector

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
HOURS_PER_DAY = 24


@dataclass(frozen=True)
class DayHourCell:
    """Accumulated samples for one weekday and hour.

    An average of 0 is only distinguishable from "no data" through count.
    """

    total: int = 0
    count: int = 0
    average: int = 0


@dataclass(frozen=True)
class DayHourGrid:
    """7 x 24 grid of DayHourCell, keyed by weekday abbreviation (Mon..Sun)."""

    cells: dict[str, tuple[DayHourCell, ...]] = field(
        default_factory=lambda: {day: (DayHourCell(),) * HOURS_PER_DAY for day in WEEKDAYS}
    )

    def cell(self, day: str, hour: int) -> DayHourCell:
        return self.cells[day][hour]

    @property
    def total_count(self) -> int:
        return sum(cell.count for row in self.cells.values() for cell in row)

    def to_dict(self) -> dict[str, list[dict[str, int]]]:
        return {
            day: [
                {"total": cell.total, "count": cell.count, "average": cell.average}
                for cell in row
            ]
            for day, row in self.cells.items()
        }


@dataclass(frozen=True)
class LaneSummary:
    """Hourly average vector and day/hour grid for one port lane."""

    hourly: HourlyAverageVector
    grid: DayHourGrid

    def to_dict(self) -> dict[str, Any]:
        return {"hourly": list(self.hourly), "grid": self.grid.to_dict()}
