"""Parser for the historical wait-time CSV export.

Two layouts are in circulation:

- Header-indexed: one row per (port, category, lane, day, report time) sample,
  with columns located by name. Rows whose hour or wait cannot be read are
  dropped.
- Wide fixed-position: the first three columns are port, category and lane
  type; every further column is a "<Day> <hour>" slot. Unreadable waits count
  as 0.

The layout is chosen by inspecting the header row (see detect_layout). Only
whole-payload problems raise; bad rows are dropped so that partial history is
still usable.
"""

import csv
import logging
from collections.abc import Iterable

from border_wait_times.application.text_patterns import (
    LANES_SUFFIX,
    LEADING_INT,
    NO_DELAY,
    SLOT_LABEL,
    match_int,
)
from border_wait_times.application.time_labels import parse_clock_hour, slot_label
from border_wait_times.domain.errors import (
    EmptyPayloadError,
    IncompletePayloadError,
    MissingColumnError,
)
from border_wait_times.domain.models.historical import (
    HistoricalLayout,
    HistoricalSlotMap,
    LaneSlotMap,
)

logger = logging.getLogger(__name__)

PORT_COLUMN = "Port Name"
CATEGORY_COLUMN = "Category"
LANE_COLUMN = "Lane Type"
DAY_COLUMN = "Day Label"
TIME_COLUMN = "Report Time"
WAIT_COLUMN = "Average Wait Time"

REQUIRED_COLUMNS = (
    PORT_COLUMN,
    CATEGORY_COLUMN,
    LANE_COLUMN,
    DAY_COLUMN,
    TIME_COLUMN,
    WAIT_COLUMN,
)

# Port, category and lane type precede the slot columns in the wide layout.
WIDE_KEY_COLUMNS = 3


def _split_rows(lines: Iterable[str]) -> list[list[str]]:
    return [[cell.strip() for cell in row] for row in csv.reader(lines)]


def lane_key(category: str, lane_type: str) -> str:
    """Compose "<Category> - <LaneType>" with a trailing " Lanes" removed."""
    return f"{category} - {lane_type.removesuffix(LANES_SUFFIX)}"


def detect_layout(header: list[str]) -> HistoricalLayout:
    """Select the layout from the header row.

    A header naming every required column is header-indexed. Failing that, a
    header with at least one slot-label column after the key columns is wide.
    Anything else is read as header-indexed, so an unrecognized header fails
    with a missing-column error.
    """
    if all(column in header for column in REQUIRED_COLUMNS):
        return HistoricalLayout.HEADER_INDEXED
    if any(SLOT_LABEL.match(cell) for cell in header[WIDE_KEY_COLUMNS:]):
        return HistoricalLayout.WIDE_FIXED
    return HistoricalLayout.HEADER_INDEXED


def _add_sample(result: HistoricalSlotMap, port: str, key: str, label: str, minutes: int) -> None:
    slots = result.setdefault(port, {}).setdefault(key, {})
    slots[label] = (*slots.get(label, ()), minutes)


def _parse_header_indexed(header: list[str], rows: list[list[str]]) -> HistoricalSlotMap:
    header_line = ",".join(header)
    index: dict[str, int] = {}
    for column in REQUIRED_COLUMNS:
        if column not in header:
            raise MissingColumnError(column, header_line)
        index[column] = header.index(column)

    result: HistoricalSlotMap = {}
    dropped = 0
    for cells in rows:
        if len(cells) < len(header):
            dropped += 1
            continue

        port = cells[index[PORT_COLUMN]]
        category = cells[index[CATEGORY_COLUMN]]
        lane_type = cells[index[LANE_COLUMN]]
        day = cells[index[DAY_COLUMN]][:3]
        hour = parse_clock_hour(cells[index[TIME_COLUMN]])
        wait = match_int(LEADING_INT, cells[index[WAIT_COLUMN]])

        if not port or not category or not lane_type or not day or hour is None or wait is None:
            dropped += 1
            continue

        _add_sample(result, port, lane_key(category, lane_type), slot_label(day, hour), wait)

    if dropped:
        logger.debug(f"Dropped {dropped} malformed historical row(s)")
    return result


def parse_wide_cell(value: str) -> int:
    """Wait minutes of a wide-layout cell; "No Delay" and unreadable values are 0."""
    if value.strip().lower() == NO_DELAY:
        return 0
    minutes = match_int(LEADING_INT, value)
    return minutes if minutes is not None else 0


def _parse_wide_fixed(header: list[str], rows: list[list[str]]) -> HistoricalSlotMap:
    slot_columns = [
        (position, label)
        for position, label in enumerate(header)
        if position >= WIDE_KEY_COLUMNS and label
    ]

    result: HistoricalSlotMap = {}
    dropped = 0
    for cells in rows:
        if len(cells) < WIDE_KEY_COLUMNS or not cells[0]:
            dropped += 1
            continue

        port, category, lane_type = cells[:WIDE_KEY_COLUMNS]
        key = lane_key(category, lane_type)
        for position, label in slot_columns:
            if position >= len(cells):
                break
            _add_sample(result, port, key, label, parse_wide_cell(cells[position]))

    if dropped:
        logger.debug(f"Dropped {dropped} malformed historical row(s)")
    return result


def parse_historical_table(text: str) -> HistoricalSlotMap:
    """Parse a historical CSV export into port -> lane key -> slot label -> samples.

    Raises:
        EmptyPayloadError: The text is empty or whitespace only.
        IncompletePayloadError: There is no data row after the header.
        MissingColumnError: A header-indexed export lacks a required column.
    """
    if not text or not text.strip():
        raise EmptyPayloadError()

    lines = text.strip().splitlines()
    if len(lines) < 2:
        raise IncompletePayloadError()

    header, *rows = _split_rows(lines)
    layout = detect_layout(header)
    logger.debug(f"Parsing {len(rows)} historical row(s) as {layout.value} layout")

    if layout is HistoricalLayout.WIDE_FIXED:
        return _parse_wide_fixed(header, rows)
    return _parse_header_indexed(header, rows)


def port_names(slot_map: HistoricalSlotMap) -> list[str]:
    return sorted(slot_map)


def select_port(slot_map: HistoricalSlotMap, port: str) -> LaneSlotMap | None:
    """Read-only projection of one port's lanes; None for an unknown port."""
    return slot_map.get(port)
