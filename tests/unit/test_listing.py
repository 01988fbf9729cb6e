"""Tests for the front page listing."""

import io
from datetime import datetime

import pytest

from tests.unit.fakes import FakeClient
from ycnews.ansi import RED, RESET, YELLOW
from ycnews.core.listing import format_score, format_story_line, list_top_stories
from ycnews.core.locator import parse_item_id
from ycnews.errors import FetchError
from ycnews.models.item import Item


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (1001, f"{RED}1001{RESET}"),
        (1000, f"{YELLOW}1000{RESET}"),
        (501, f"{YELLOW} 501{RESET}"),
        (500, " 500"),
        (7, "   7"),
    ],
)
def test_format_score_thresholds_are_exclusive(score: int, expected: str) -> None:
    assert format_score(score) == expected


def test_format_story_line_layout() -> None:
    item = Item(id=12345, title="Foo", score=42, time=1_700_000_000, kids=(1, 2, 3))
    stamp = datetime.fromtimestamp(1_700_000_000).strftime("%Y-%m-%d %H:%M")

    assert format_story_line(item) == f"{stamp}    42     3  Foo [12345]"


@pytest.mark.parametrize(
    "title",
    ["Foo", "[pdf] The paper (2019) [video]", "Use a[i] for indexing"],
)
def test_story_line_round_trips_through_locator(title: str) -> None:
    """Whatever the title, the locator recovers the ID from a listing line."""
    item = Item(id=12345, title=title, score=2000, time=1_700_000_000)
    assert parse_item_id(format_story_line(item)) == 12345


def test_list_top_stories_writes_one_line_per_story() -> None:
    client = FakeClient()
    client.add_item(Item(id=1, title="First", score=10))
    client.add_item(Item(id=2, title="Second", score=20))
    client.story_ids = [2, 1]
    out = io.StringIO()

    assert list_top_stories(client, out) == 2

    lines = out.getvalue().splitlines()
    assert [line.rsplit(" ", 1)[1] for line in lines] == ["[2]", "[1]"]


def test_list_top_stories_tolerates_failed_story() -> None:
    """One failing story gives a diagnostic line in its slot; the rest are listed."""
    client = FakeClient()
    client.add_item(Item(id=1, title="First"))
    client.add_item(Item(id=3, title="Third"))
    client.fail(2)
    client.story_ids = [1, 2, 3]
    out = io.StringIO()

    assert list_top_stories(client, out) == 2

    lines = out.getvalue().splitlines()
    assert len(lines) == 3
    assert lines[0].endswith("First [1]")
    assert lines[1] == "2: error fetching"
    assert lines[2].endswith("Third [3]")


def test_list_top_stories_respects_limit() -> None:
    client = FakeClient()
    for i in range(1, 6):
        client.add_item(Item(id=i, title=f"Story {i}"))
    client.story_ids = [1, 2, 3, 4, 5]
    out = io.StringIO()

    list_top_stories(client, out, limit=2)

    assert len(out.getvalue().splitlines()) == 2
    assert client.calls == [1, 2]


def test_list_top_stories_propagates_story_list_failure() -> None:
    client = FakeClient()
    client.story_ids_error = FetchError("topstories.json", "timed out")

    with pytest.raises(FetchError, match="timed out"):
        list_top_stories(client, io.StringIO())
