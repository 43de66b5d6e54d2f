"""Port record domain model."""

from dataclasses import dataclass, field
from typing import Any

from border_wait_times.domain.models.section_status import HOURS_NOT_AVAILABLE, SectionStatus


@dataclass(frozen=True)
class PortRecord:
    """Live status of one border-crossing port, keyed by port_name.

    A fresh set of records is built on every feed fetch; records are replaced,
    never mutated.
    """

    port_name: str
    vehicles: SectionStatus = field(default_factory=SectionStatus)
    pedestrians: SectionStatus = field(default_factory=SectionStatus)
    pedwest: SectionStatus = field(default_factory=SectionStatus)

    def sections(self) -> dict[str, SectionStatus]:
        return {
            "vehicles": self.vehicles,
            "pedestrians": self.pedestrians,
            "pedwest": self.pedwest,
        }

    def populated_sections(self) -> dict[str, SectionStatus]:
        return {name: s for name, s in self.sections().items() if s.is_populated}

    @property
    def operating_hours(self) -> str:
        """Hours of the first populated section that states any."""
        for section in self.populated_sections().values():
            if section.operating_hours != HOURS_NOT_AVAILABLE:
                return section.operating_hours
        return HOURS_NOT_AVAILABLE

    @property
    def is_open(self) -> bool:
        populated = self.populated_sections()
        if not populated:
            return True
        return any(section.is_open for section in populated.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "port_name": self.port_name,
            "operating_hours": self.operating_hours,
            "is_open": self.is_open,
            **{name: section.to_dict() for name, section in self.sections().items()},
        }
