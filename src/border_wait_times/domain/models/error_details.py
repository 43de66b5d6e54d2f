"""Failure summary kept in state when a live refresh or historical load fails."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetails(BaseModel):
    """Why the last feed cycle produced no data.

    status_code is only set when the feed answered with a non-2xx response.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int | None = Field(default=None, ge=100, le=599)
    reason: str = Field(min_length=1)

    @property
    def label(self) -> str:
        """Reason for display, with the status code unless the reason already names it."""
        if self.status_code is None or str(self.status_code) in self.reason:
            return self.reason
        return f"{self.reason}, status {self.status_code}"
