"""Historical export source port."""

from typing import Protocol


class HistoricalSource(Protocol):
    """Port for retrieving the raw historical CSV export."""

    async def fetch_text(self) -> str:
        """Fetch the raw comma-separated export text."""
        ...
