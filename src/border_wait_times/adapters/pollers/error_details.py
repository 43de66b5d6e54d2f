"""Conversion of fetch-cycle exceptions into ErrorDetails."""

from border_wait_times.domain.errors import (
    EmptyPayloadError,
    FeedFetchError,
    HistoricalDataError,
)
from border_wait_times.domain.models.error_details import ErrorDetails

_STATUS_REASONS = {
    429: "Rate limit exceeded",
    502: "Bad gateway (server error)",
    503: "Service unavailable",
    504: "Gateway timeout",
}


def extract_error_details(error: Exception) -> ErrorDetails:
    """Extract HTTP status code and a display reason from a fetch-cycle exception."""
    if isinstance(error, FeedFetchError):
        status_code = error.status_code
        if status_code in _STATUS_REASONS:
            reason = _STATUS_REASONS[status_code]
        elif status_code is not None:
            reason = f"HTTP {status_code}"
        else:
            reason = f"Connection error: {error.reason}" if error.reason else "Connection error"
        return ErrorDetails(status_code=status_code, reason=reason)

    if isinstance(error, EmptyPayloadError):
        return ErrorDetails(reason="Data source temporarily unavailable")

    if isinstance(error, HistoricalDataError):
        return ErrorDetails(reason=str(error))

    return ErrorDetails(reason="Unknown error")
