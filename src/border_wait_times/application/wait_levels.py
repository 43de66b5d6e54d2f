"""Severity classification of live waits and historical averages."""

from collections.abc import Iterable

from border_wait_times.domain.models.lane_status import LaneStatus
from border_wait_times.domain.models.wait_level import HeatLevel, WaitLevel, WaitThresholds

# Upper bounds (inclusive, minutes) of each heat level, lowest first.
HEAT_LEVEL_BOUNDS = (
    (15, HeatLevel.LOW),
    (30, HeatLevel.MEDIUM),
    (45, HeatLevel.HIGH),
    (60, HeatLevel.VHIGH),
)


def classify_lane(lane: LaneStatus, thresholds: WaitThresholds | None = None) -> WaitLevel:
    thresholds = thresholds or WaitThresholds()
    if not lane.is_open:
        return WaitLevel.CLOSED
    if lane.wait_time_minutes is None:
        return WaitLevel.UNKNOWN
    if lane.wait_time_minutes <= thresholds.green:
        return WaitLevel.GREEN
    if lane.wait_time_minutes <= thresholds.yellow:
        return WaitLevel.YELLOW
    return WaitLevel.RED


def heat_level(average: int) -> HeatLevel:
    """Heatmap bucket of an average wait; 0 or less means no data."""
    if average <= 0:
        return HeatLevel.NO_DATA
    for bound, level in HEAT_LEVEL_BOUNDS:
        if average <= bound:
            return level
    return HeatLevel.EXTREME


def order_ports(port_names: Iterable[str], favorites: Iterable[str] = ()) -> list[str]:
    """Favorite ports first, then alphabetical."""
    favorite_set = set(favorites)
    return sorted(port_names, key=lambda name: (name not in favorite_set, name))
