"""Tests for locating an item from a listing line."""

import pytest

from tests.unit.fakes import FakeClient
from ycnews.core.locator import locate, parse_item_id
from ycnews.errors import FetchError, LocatorError
from ycnews.models.item import Item


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("anything [42]", 42),
        ("2024-01-02 10:00    99     3  Some title [8863]", 8863),
        ("with newline [7]\n", 7),
        ("\x1b[31m1200\x1b[0m  title [5]", 5),
        ("[1]", 1),
    ],
)
def test_parse_item_id(line: str, expected: int) -> None:
    assert parse_item_id(line) == expected


@pytest.mark.parametrize(
    "line",
    ["no brackets here", "", "title [abc]", "title []", "title [-5]", "1234: error fetching"],
)
def test_parse_item_id_rejects_bad_lines(line: str) -> None:
    with pytest.raises(LocatorError):
        parse_item_id(line)


def test_locate_fetches_item() -> None:
    client = FakeClient()
    item = client.add_item(Item(id=12345, title="Foo"))

    assert locate(client, "Foo [12345]") == item
    assert client.calls == [12345]


def test_locate_wraps_fetch_failure() -> None:
    client = FakeClient()

    with pytest.raises(LocatorError, match="error fetching item 404") as excinfo:
        locate(client, "Gone [404]")

    assert isinstance(excinfo.value.__cause__, FetchError)


def test_locate_does_not_fetch_for_bad_line() -> None:
    client = FakeClient()

    with pytest.raises(LocatorError, match="invalid item token"):
        locate(client, "no id")

    assert client.calls == []
