"""Protocols for dependency injection."""

from typing import Protocol, runtime_checkable

from ycnews.models.item import Item


@runtime_checkable
class ClientProtocol(Protocol):
    """Protocol for Hacker News API clients."""

    def item(self, item_id: int) -> Item:
        """Fetch one item by ID."""
        ...

    def top_stories(self) -> list[int]:
        """Fetch the ordered front page story IDs."""
        ...
