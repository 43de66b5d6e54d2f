"""Exceptions raised when a fetch or parse cycle cannot produce usable data.

Row-level and lane-level problems are never raised; they only reduce the
completeness of the result.
"""


class BorderWaitError(Exception):
    """Base class for fatal fetch/parse errors."""


class FeedFetchError(BorderWaitError):
    """The upstream server did not return a successful response."""

    def __init__(self, url: str, status_code: int | None = None, reason: str = "") -> None:
        self.url = url
        self.status_code = status_code
        self.reason = reason
        detail = f"{status_code} {reason}".strip() if status_code is not None else reason
        super().__init__(f"Network response was not ok: {detail or 'unknown error'} ({url})")


class HistoricalDataError(BorderWaitError):
    """The historical export cannot be parsed at all."""


class EmptyPayloadError(BorderWaitError):
    """The server returned an empty body."""

    def __init__(self) -> None:
        super().__init__(
            "Received empty data from the server. "
            "The data source might be temporarily unavailable."
        )


class IncompletePayloadError(HistoricalDataError):
    """The payload has a header but no data rows."""

    def __init__(self) -> None:
        super().__init__("Historical data is incomplete (missing headers or data rows).")


class MissingColumnError(HistoricalDataError):
    """A required column is absent from a header-indexed export."""

    def __init__(self, column: str, header: str) -> None:
        self.column = column
        self.header = header
        super().__init__(
            f'Historical data is missing required column: "{column}" (Header was: {header})'
        )
