"""Clock and slot-label helpers."""

from border_wait_times.application.text_patterns import CLOCK_TIME, SLOT_DAY, SLOT_HOUR
from border_wait_times.domain.models.day_hour_grid import HOURS_PER_DAY


def parse_clock_hour(label: str) -> int | None:
    """Convert a 12-hour clock label ("3:15 PM") to a 24-hour hour.

    PM adds 12 below noon and 12 AM maps to 0; "12:00 PM" stays 12. Labels
    without a modifier are taken as already 24-hour. Returns None when no hour
    can be read.
    """
    match = CLOCK_TIME.match(label or "")
    if not match:
        return None

    hour = int(match.group("hour"))
    modifier = (match.group("modifier") or "").upper()
    if modifier == "PM" and hour < 12:
        hour += 12
    if modifier == "AM" and hour == 12:
        hour = 0
    return hour


def slot_label(day: str, hour: int) -> str:
    return f"{day} {hour}"


def slot_hour(label: str) -> int | None:
    """Trailing hour number of a slot label ("Fri 14" -> 14)."""
    match = SLOT_HOUR.search(label.strip())
    return int(match.group(1)) if match else None


def slot_day(label: str) -> str | None:
    """Leading weekday abbreviation of a slot label ("Fri 14" -> "Fri")."""
    match = SLOT_DAY.match(label.strip())
    return match.group(1) if match else None


def split_slot_label(label: str) -> tuple[str | None, int | None]:
    return slot_day(label), slot_hour(label)


def is_valid_hour(hour: int | None) -> bool:
    return hour is not None and 0 <= hour < HOURS_PER_DAY


def hour_axis_labels() -> list[str]:
    """Chart axis labels "00:00" .. "23:00"."""
    return [f"{hour:02d}:00" for hour in range(HOURS_PER_DAY)]
