"""Fake implementations for testing without the network."""

from ycnews.errors import FetchError, YcNewsError
from ycnews.models.item import Item


class FakeClient:
    """In-memory fake for HackerNewsApi.

    Serves registered items and records every item request for assertions.
    Unregistered IDs fail the way a missing remote record would.
    """

    def __init__(self) -> None:
        self.items: dict[int, Item] = {}
        self.failures: dict[int, YcNewsError] = {}
        self.story_ids: list[int] = []
        self.story_ids_error: YcNewsError | None = None
        self.calls: list[int] = []

    def add_item(self, item: Item) -> Item:
        """Register an item and return it."""
        self.items[item.id] = item
        return item

    def fail(self, item_id: int, error: YcNewsError | None = None) -> None:
        """Make fetching item_id raise error (a FetchError by default)."""
        self.failures[item_id] = error or FetchError(f"item/{item_id}.json", "503 Unavailable")

    def item(self, item_id: int) -> Item:
        """Return the registered item and record the call."""
        self.calls.append(item_id)
        if item_id in self.failures:
            raise self.failures[item_id]
        if item_id not in self.items:
            raise FetchError(f"item/{item_id}.json", "404 Not Found")
        return self.items[item_id]

    def top_stories(self) -> list[int]:
        """Return the registered story list."""
        if self.story_ids_error is not None:
            raise self.story_ids_error
        return list(self.story_ids)


STORY = Item(
    id=100,
    type="story",
    by="pg",
    title="Show HN: A terminal reader",
    url="https://example.com/reader",
    score=321,
    time=1_700_000_000,
    kids=(101, 104),
    descendants=4,
)

COMMENTS = [
    Item(id=101, type="comment", by="alice", text="Nice work.<p>Second paragraph.", kids=(102,)),
    Item(id=102, type="comment", by="bob", text="Agreed with <i>alice</i>.", kids=(103,)),
    Item(id=103, type="comment", by="carol", text="Deep reply."),
    Item(id=104, type="comment", by="dave", text="Top level again."),
]
