"""Wait-level classification domain models."""

from dataclasses import dataclass
from enum import StrEnum


class WaitLevel(StrEnum):
    """Severity bucket of a live lane wait."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CLOSED = "closed"
    UNKNOWN = "unknown"


class HeatLevel(StrEnum):
    """Heatmap bucket of a historical average wait."""

    NO_DATA = "no_data"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VHIGH = "vhigh"
    EXTREME = "extreme"


@dataclass(frozen=True)
class WaitThresholds:
    """Upper bounds (inclusive, in minutes) of the green and yellow wait levels."""

    green: int = 20
    yellow: int = 45

    def __post_init__(self) -> None:
        if self.green >= self.yellow:
            raise ValueError("green threshold must be lower than yellow threshold")
