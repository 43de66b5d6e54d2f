"""Tests for the historical CSV parser."""

import pytest

from border_wait_times.application.historical_table_parser import (
    detect_layout,
    lane_key,
    parse_historical_table,
    parse_wide_cell,
    port_names,
    select_port,
)
from border_wait_times.domain.errors import (
    EmptyPayloadError,
    HistoricalDataError,
    IncompletePayloadError,
    MissingColumnError,
)
from border_wait_times.domain.models import HistoricalLayout

HEADER = "Port Name,Category,Lane Type,Day Label,Report Time,Average Wait Time"


def test_when_header_names_all_columns_then_header_indexed() -> None:
    """Given a header naming every required column, when detecting the layout, then it is header-indexed."""
    assert detect_layout(HEADER.split(",")) is HistoricalLayout.HEADER_INDEXED


def test_when_header_has_slot_columns_then_wide_fixed() -> None:
    """Given key columns followed by slot labels, when detecting the layout, then it is wide."""
    header = ["Port Name", "Category", "Lane Type", "Mon 0", "Mon 1"]

    assert detect_layout(header) is HistoricalLayout.WIDE_FIXED


def test_when_header_unrecognized_then_header_indexed() -> None:
    """Given a header without required columns or slot labels, when detecting, then it is header-indexed."""
    assert detect_layout(["a", "b", "c", "d"]) is HistoricalLayout.HEADER_INDEXED


def test_lane_key_drops_lanes_suffix() -> None:
    """Given a lane type ending in " Lanes", when building the key, then the suffix is removed."""
    assert lane_key("Vehicles", "General Lanes") == "Vehicles - General"
    assert lane_key("Pedestrians", "Ready") == "Pedestrians - Ready"


def test_when_duplicate_slot_rows_then_samples_kept_in_order() -> None:
    """Given two rows for the same slot, when parsing, then both samples are kept."""
    text = "\n".join(
        [
            HEADER,
            "San Ysidro,Vehicles,General Lanes,Friday,2:00 PM,20",
            "San Ysidro,Vehicles,General Lanes,Friday,2:30 PM,30",
        ]
    )

    slot_map = parse_historical_table(text)

    assert slot_map == {"San Ysidro": {"Vehicles - General": {"Fri 14": (20, 30)}}}


def test_when_columns_reordered_then_located_by_name() -> None:
    """Given columns in a different order, when parsing, then values are read by column name."""
    text = "\n".join(
        [
            "Average Wait Time,Report Time,Day Label,Lane Type,Category,Port Name,Extra",
            "45,12:00 AM,Monday,Sentri Lanes,Vehicles,Otay Mesa,x",
            "10,7:00 AM,Tuesday,Ready Lanes,Pedestrians,Otay Mesa,y",
        ]
    )

    slot_map = parse_historical_table(text)

    assert slot_map["Otay Mesa"]["Vehicles - Sentri"] == {"Mon 0": (45,)}
    assert slot_map["Otay Mesa"]["Pedestrians - Ready"] == {"Tue 7": (10,)}


def test_when_header_indexed_row_unparseable_then_dropped() -> None:
    """Given rows with bad waits, times, empty fields or missing cells, when parsing, then they are dropped."""
    text = "\n".join(
        [
            HEADER,
            "Tecate,Vehicles,General,Sunday,3:15 PM,--",
            "Tecate,Vehicles,General,Sunday,noon,10",
            "Tecate,,General,Sunday,3:15 PM,10",
            "Tecate,Vehicles,General,Sunday",
            "Tecate,Vehicles,General,Sunday,3:15 PM,12 min",
        ]
    )

    slot_map = parse_historical_table(text)

    assert slot_map == {"Tecate": {"Vehicles - General": {"Sun 15": (12,)}}}


def test_when_quoted_cells_then_commas_inside_quotes_kept() -> None:
    """Given a quoted port name containing a comma, when parsing, then it stays one cell."""
    text = "\n".join([HEADER, '"Andrade, CA",Vehicles,General,Saturday,9:00 AM,5'])

    assert port_names(parse_historical_table(text)) == ["Andrade, CA"]


def test_when_wide_layout_then_every_slot_column_read() -> None:
    """Given a wide export, when parsing, then each slot column yields a sample."""
    text = "\n".join(
        [
            "Port,Category,Lane,Fri 13,Fri 14,Sat 0",
            "Calexico East,Vehicles,General Lanes,15,No Delay,--",
            "Calexico East,Pedestrians,Ready,5",
            ",Vehicles,General,1,2,3",
        ]
    )

    slot_map = parse_historical_table(text)

    assert slot_map == {
        "Calexico East": {
            "Vehicles - General": {"Fri 13": (15,), "Fri 14": (0,), "Sat 0": (0,)},
            "Pedestrians - Ready": {"Fri 13": (5,)},
        }
    }


def test_when_wide_header_uses_required_names_then_still_wide() -> None:
    """Given a wide export whose key columns carry required names, when parsing, then it is read as wide."""
    text = "\n".join(["Port Name,Category,Lane Type,Mon 8", "Tecate,Vehicles,General,7"])

    assert parse_historical_table(text) == {"Tecate": {"Vehicles - General": {"Mon 8": (7,)}}}


@pytest.mark.parametrize(
    ("value", "expected"),
    [("No Delay", 0), ("no delay", 0), ("--", 0), ("", 0), ("25", 25), (" 7 min", 7)],
)
def test_parse_wide_cell(value: str, expected: int) -> None:
    """Given a wide-layout cell, when parsing, then "No Delay" and unreadable values become 0."""
    assert parse_wide_cell(value) == expected


def test_when_same_token_in_both_layouts_then_wide_keeps_zero_and_indexed_drops() -> None:
    """Given "--" as a wait, when parsing each layout, then wide records 0 while header-indexed drops the row."""
    wide = parse_historical_table("Port,Category,Lane,Fri 14\nTecate,Vehicles,General,--")
    indexed = parse_historical_table(f"{HEADER}\nTecate,Vehicles,General,Friday,2:00 PM,--")

    assert wide == {"Tecate": {"Vehicles - General": {"Fri 14": (0,)}}}
    assert indexed == {}


@pytest.mark.parametrize("text", ["", "   \n  "])
def test_when_payload_empty_then_empty_payload_error(text: str) -> None:
    """Given an empty payload, when parsing, then an empty-payload error is raised."""
    with pytest.raises(EmptyPayloadError, match="Received empty data from the server"):
        parse_historical_table(text)


def test_when_payload_header_only_then_incomplete_error() -> None:
    """Given only a header line, when parsing, then an incomplete-payload error is raised."""
    with pytest.raises(IncompletePayloadError, match="Historical data is incomplete"):
        parse_historical_table(HEADER + "\n")


def test_empty_and_incomplete_errors_are_distinct() -> None:
    """Given empty and header-only payloads, when parsing, then the errors have distinct messages."""
    with pytest.raises(EmptyPayloadError) as empty:
        parse_historical_table("")
    with pytest.raises(IncompletePayloadError) as incomplete:
        parse_historical_table(HEADER)

    assert str(empty.value) != str(incomplete.value)
    assert not isinstance(empty.value, HistoricalDataError)
    assert isinstance(incomplete.value, HistoricalDataError)


def test_when_required_column_missing_then_missing_column_error() -> None:
    """Given a header without the wait column, when parsing, then the column and header are named."""
    text = "Port Name,Category,Lane Type,Day Label,Report Time\nTecate,Vehicles,General,Monday,1:00 AM"

    with pytest.raises(MissingColumnError) as exc_info:
        parse_historical_table(text)

    assert exc_info.value.column == "Average Wait Time"
    assert 'missing required column: "Average Wait Time"' in str(exc_info.value)
    assert "Header was: Port Name,Category" in str(exc_info.value)


def test_select_port_returns_lanes_or_none() -> None:
    """Given a parsed slot map, when selecting ports, then known ports return lanes and unknown ones None."""
    slot_map = parse_historical_table(f"{HEADER}\nTecate,Vehicles,General,Monday,1:00 AM,4")

    assert select_port(slot_map, "Tecate") == {"Vehicles - General": {"Mon 1": (4,)}}
    assert select_port(slot_map, "Nowhere") is None
