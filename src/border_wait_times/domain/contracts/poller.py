"""Protocol for feed polling."""

from typing import Protocol


class PollerProtocol(Protocol):
    """Protocol for polling a feed and updating state."""

    async def start(self) -> None:
        """Start the poller."""
        ...

    async def stop(self) -> None:
        """Stop the poller."""
        ...
