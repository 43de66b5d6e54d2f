"""Hourly and day-by-hour aggregation of historical wait samples."""

import math
from collections.abc import Iterable, Mapping

from border_wait_times.application.time_labels import is_valid_hour, slot_day, slot_hour
from border_wait_times.domain.models.day_hour_grid import (
    HOURS_PER_DAY,
    WEEKDAYS,
    DayHourCell,
    DayHourGrid,
    LaneSummary,
)
from border_wait_times.domain.models.historical import HourlyAverageVector

# Slot maps from the parser hold sample tuples; plain label -> minutes maps are accepted too.
SlotValues = Mapping[str, int | Iterable[int]]


def round_half_up(total: int, count: int) -> int:
    """Rounded mean, with halves rounded up; 0 when there are no samples."""
    if count <= 0:
        return 0
    return math.floor(total / count + 0.5)


def _samples(value: int | Iterable[int]) -> tuple[int, ...]:
    if isinstance(value, int):
        return (value,)
    return tuple(value)


def hourly_averages(slot_map: SlotValues) -> HourlyAverageVector:
    """Average wait per hour of day across all weekdays.

    The hour is the trailing number of each slot label; labels whose hour is
    missing or outside 0..23 are ignored. Hours without samples are 0.
    """
    totals = [0] * HOURS_PER_DAY
    counts = [0] * HOURS_PER_DAY

    for label, value in slot_map.items():
        hour = slot_hour(label)
        if not is_valid_hour(hour):
            continue
        for minutes in _samples(value):
            totals[hour] += minutes
            counts[hour] += 1

    return [round_half_up(totals[hour], counts[hour]) for hour in range(HOURS_PER_DAY)]


def day_hour_grid(slot_map: SlotValues) -> DayHourGrid:
    """Average wait per weekday and hour.

    Only labels that start with a weekday abbreviation (Mon..Sun) and end with
    an hour in 0..23 contribute; others are ignored.
    """
    totals = {day: [0] * HOURS_PER_DAY for day in WEEKDAYS}
    counts = {day: [0] * HOURS_PER_DAY for day in WEEKDAYS}

    for label, value in slot_map.items():
        day = slot_day(label)
        hour = slot_hour(label)
        if day is None or not is_valid_hour(hour):
            continue
        for minutes in _samples(value):
            totals[day][hour] += minutes
            counts[day][hour] += 1

    return DayHourGrid(
        cells={
            day: tuple(
                DayHourCell(
                    total=totals[day][hour],
                    count=counts[day][hour],
                    average=round_half_up(totals[day][hour], counts[day][hour]),
                )
                for hour in range(HOURS_PER_DAY)
            )
            for day in WEEKDAYS
        }
    )


def summarize_port(lane_map: Mapping[str, SlotValues]) -> dict[str, LaneSummary]:
    """Hourly vector and day/hour grid for every lane of one port."""
    return {
        key: LaneSummary(hourly=hourly_averages(slots), grid=day_hour_grid(slots))
        for key, slots in lane_map.items()
    }
