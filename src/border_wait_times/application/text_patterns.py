"""Named text rules for reading the human-oriented feed exports.

Every literal marker and regular expression used to pull facts out of feed
text lives here, so a change in the upstream wording only touches this module.
"""

import re

# Live feed lane text, e.g. "General Lanes: At 2:30 pm PDT 15 min delay 3 lane(s) open"
LANE_CLOSED_MARKER = "Lanes Closed"
WAIT_MINUTES = re.compile(r"(\d+)\s*min delay")
LANES_OPEN = re.compile(r"(\d+)\s*lane\(s\)\s+open")
UPDATE_TIME = re.compile(r"At\s+(\d{1,2}:\d{2}[ \t]*[ap]m[ \t]+\w+)")

# Live feed section markers
VEHICLES_MARKER = "Passenger Vehicles"
PEDESTRIAN_MARKER = "Pedestrian"
PEDESTRIANS_SECTION_ID = "Pedestrians"
PEDWEST_TITLE_MARKER = "PedWest"
TITLE_SEPARATOR = " - "
CLOSED_WORD = "closed"

# Revision date that older exports appended to the hours text on the same line
DATE_TOKEN = r"\d{1,2}/\d{1,2}/\d{4}"

# Historical slot labels, e.g. "Fri 14"
SLOT_DAY = re.compile(r"^(Mon|Tue|Wed|Thu|Fri|Sat|Sun)")
SLOT_HOUR = re.compile(r"(\d+)$")
SLOT_LABEL = re.compile(r"^(Mon|Tue|Wed|Thu|Fri|Sat|Sun)\s+\d{1,2}$")

# Historical cells
LEADING_INT = re.compile(r"^\s*(\d+)")
CLOCK_TIME = re.compile(
    r"^\s*(?P<hour>\d{1,2})(?::\d{2}){0,2}\s*(?P<modifier>[AP]M)?\b", re.IGNORECASE
)
NO_DELAY = "no delay"
LANES_SUFFIX = " Lanes"


def hours_with_date(section_id: str) -> re.Pattern[str]:
    """Match "<section_id> ...: ..." up to, not including, a following date token."""
    return re.compile(rf"({re.escape(section_id)}.*?:.*?)(?=\s+{DATE_TOKEN})")


def match_int(pattern: re.Pattern[str], text: str) -> int | None:
    """Return the first capture group of pattern in text as an int."""
    match = pattern.search(text)
    if not match:
        return None
    return int(match.group(1))


def text_after(text: str, marker: str) -> str | None:
    """Return the text following the first occurrence of marker, or None."""
    index = text.find(marker)
    if index == -1:
        return None
    return text[index + len(marker) :]


def region_between(text: str, start: str, end: str | None = None) -> str:
    """Return the text after start and before the next end marker.

    Returns an empty string when start does not occur. Without an end marker,
    or when end does not follow start, the region runs to the end of text.
    """
    after = text_after(text, start)
    if after is None:
        return ""
    if end is None:
        return after
    end_index = after.find(end)
    return after if end_index == -1 else after[:end_index]


def first_line_containing(text: str, needle: str) -> str | None:
    for line in text.split("\n"):
        if needle in line:
            return line
    return None


def first_tab_column(line: str) -> str:
    """First non-empty tab-separated column of line, stripped; "" when there is none."""
    return next((column.strip() for column in line.split("\t") if column.strip()), "")
