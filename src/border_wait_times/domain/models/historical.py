"""Historical wait-time domain types."""

from enum import StrEnum

# slot label ("Fri 14") -> wait-minute samples recorded under that label, in row order
SlotSamples = dict[str, tuple[int, ...]]

# lane key ("Vehicles - General") -> slot samples
LaneSlotMap = dict[str, SlotSamples]

# port name -> lane slot map
HistoricalSlotMap = dict[str, LaneSlotMap]

# 24 rounded averages indexed by hour of day
HourlyAverageVector = list[int]


class HistoricalLayout(StrEnum):
    """Column layout of a historical CSV export."""

    HEADER_INDEXED = "header_indexed"
    WIDE_FIXED = "wide_fixed"
