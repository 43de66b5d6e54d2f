"""Feed item domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FeedItem:
    """The title and free-text description of one live-feed item.

    Either field may be missing in a malformed feed.
    """

    title: str | None
    description: str | None
