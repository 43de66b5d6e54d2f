"""Protocol for announcing state changes."""

from typing import Protocol


class StateBroadcasterProtocol(Protocol):
    """Protocol for notifying consumers that the application state changed."""

    async def broadcast_update(self, topic: str) -> None:
        """Announce an update on the given topic."""
        ...
