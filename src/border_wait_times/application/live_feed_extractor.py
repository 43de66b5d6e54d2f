"""Extraction of structured lane facts from live-feed item text.

The feed describes each port in free text. Facts are recovered by position
(text following a "<Lane> Lanes:" marker, the line naming a section) and by
the patterns in text_patterns. Anything that cannot be found is reported as
NotAvailable / "N/A" rather than raised.
"""

import logging
from collections.abc import Iterable
from dataclasses import replace

from border_wait_times.application.text_patterns import (
    CLOSED_WORD,
    LANE_CLOSED_MARKER,
    LANES_OPEN,
    PEDESTRIAN_MARKER,
    PEDESTRIANS_SECTION_ID,
    PEDWEST_TITLE_MARKER,
    TITLE_SEPARATOR,
    UPDATE_TIME,
    VEHICLES_MARKER,
    WAIT_MINUTES,
    first_line_containing,
    first_tab_column,
    hours_with_date,
    match_int,
    region_between,
    text_after,
)
from border_wait_times.domain.models.feed_item import FeedItem
from border_wait_times.domain.models.lane_status import LaneState, LaneStatus
from border_wait_times.domain.models.port_record import PortRecord
from border_wait_times.domain.models.section_status import (
    HOURS_ALWAYS_OPEN,
    HOURS_NOT_AVAILABLE,
    HoursStrategy,
    OperatingHours,
    SectionStatus,
)

logger = logging.getLogger(__name__)

LANE_TYPES = ("General", "Ready", "Sentri")

# Order in which operating-hours strategies are tried; the first that yields text wins.
HOURS_STRATEGY_ORDER = (HoursStrategy.TAB_COLUMN, HoursStrategy.REGEX_FALLBACK)


def lane_marker(lane_type: str) -> str:
    return f"{lane_type} Lanes"


def extract_lane(text: str, lane_full_name: str) -> LaneStatus:
    """Recover the status of one lane from a section's text.

    Everything after the first "<lane_full_name>:" is searched, including the
    text of lanes listed after it.

    Args:
        text: Section text to search.
        lane_full_name: Lane label as written in the feed, e.g. "General Lanes".

    Returns:
        The lane status. A lane whose text has no delay figure is NotAvailable
        even when its marker was found.
    """
    if not text:
        return LaneStatus.not_available()

    chunk = text_after(text, f"{lane_full_name}:")
    if chunk is None:
        return LaneStatus.not_available()

    if LANE_CLOSED_MARKER in chunk:
        return LaneStatus.closed()

    wait = match_int(WAIT_MINUTES, chunk)
    if wait is None:
        return LaneStatus.not_available()

    update = UPDATE_TIME.search(chunk)
    return LaneStatus(
        status=LaneState.OPEN,
        wait_time_minutes=wait,
        lanes_open=match_int(LANES_OPEN, chunk),
        update_time=update.group(1) if update else None,
    )


def _hours_from_tab_column(description: str, section_id: str) -> str | None:
    line = first_line_containing(description, section_id)
    if line is None:
        return None
    return first_tab_column(line) or None


def _hours_from_regex_fallback(description: str, section_id: str) -> str | None:
    # Older exports ran the hours text and a revision date together on one line.
    match = hours_with_date(section_id).search(description)
    if not match:
        return None
    return match.group(1).strip() or None


_HOURS_RULES = {
    HoursStrategy.TAB_COLUMN: _hours_from_tab_column,
    HoursStrategy.REGEX_FALLBACK: _hours_from_regex_fallback,
}


def resolve_hours(description: str, section_id: str) -> OperatingHours:
    """Resolve the operating hours of a section from an item description.

    Falls back to "N/A" and open when no strategy finds the hours.
    """
    for strategy in HOURS_STRATEGY_ORDER:
        text = _HOURS_RULES[strategy](description or "", section_id)
        if text:
            return OperatingHours(
                text=text,
                is_open=CLOSED_WORD not in text.lower(),
                strategy=strategy,
            )

    # Unknown hours count as open so they never hide otherwise valid lane data.
    return OperatingHours()


def parse_section(region: str, hours: OperatingHours) -> SectionStatus:
    """Build a section from its text region and resolved hours."""
    lanes: dict[str, LaneStatus] = {}
    for lane_type in LANE_TYPES:
        lane = extract_lane(region, lane_marker(lane_type))
        if not hours.is_open:
            # Stated closing hours override stale per-lane text.
            lane = LaneStatus.closed(update_time=lane.update_time)
        lanes[lane_type] = lane

    operating_hours = hours.text
    has_open_lanes = any(lane.is_open for lane in lanes.values())
    if operating_hours == HOURS_NOT_AVAILABLE and has_open_lanes:
        operating_hours = HOURS_ALWAYS_OPEN

    return SectionStatus(
        lanes=lanes,
        operating_hours=operating_hours,
        is_open=hours.is_open,
        hours_strategy=hours.strategy,
    )


def port_name_from_title(title: str) -> str:
    return title.split(TITLE_SEPARATOR)[0].strip()


def is_pedwest_title(title: str) -> bool:
    return PEDWEST_TITLE_MARKER in title


def parse_item(item: FeedItem) -> tuple[str, dict[str, SectionStatus]] | None:
    """Parse one feed item into its port name and the sections it describes.

    Returns None for items missing a title or description.
    """
    if not item.title or not item.description:
        logger.debug(f"Skipping malformed feed item: title={item.title!r}")
        return None

    port_name = port_name_from_title(item.title)
    if not port_name:
        logger.debug(f"Skipping feed item without a port name: {item.title!r}")
        return None

    description = item.description
    if is_pedwest_title(item.title):
        # PedWest items carry a single pedestrian block and no vehicle data.
        hours = resolve_hours(description, PEDESTRIANS_SECTION_ID)
        return port_name, {"pedwest": parse_section(description, hours)}

    vehicles_region = region_between(description, VEHICLES_MARKER, PEDESTRIAN_MARKER)
    pedestrians_region = region_between(description, PEDESTRIAN_MARKER)
    return port_name, {
        "vehicles": parse_section(
            vehicles_region, resolve_hours(description, VEHICLES_MARKER)
        ),
        "pedestrians": parse_section(
            pedestrians_region, resolve_hours(description, PEDESTRIANS_SECTION_ID)
        ),
    }


def build_port_records(items: Iterable[FeedItem]) -> dict[str, PortRecord]:
    """Group feed items into one fresh PortRecord per port name.

    Items for the same port accumulate; a later item replaces the sections it
    describes. Malformed items are skipped.
    """
    records: dict[str, PortRecord] = {}
    skipped = 0

    for item in items:
        parsed = parse_item(item)
        if parsed is None:
            skipped += 1
            continue

        port_name, sections = parsed
        record = records.get(port_name) or PortRecord(port_name=port_name)
        records[port_name] = replace(record, **sections)

    if skipped:
        logger.debug(f"Skipped {skipped} malformed feed item(s)")
    logger.debug(f"Built {len(records)} port record(s)")
    return records
