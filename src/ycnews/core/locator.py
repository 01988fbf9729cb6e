"""Recover an item from a listing line handed back by fzf."""

from ycnews.errors import DecodeError, FetchError, LocatorError
from ycnews.models.item import Item
from ycnews.protocols import ClientProtocol


def parse_item_id(line: str) -> int:
    """Extract the ID from a line ending in "[<digits>]".

    The last "[" is used, so titles containing brackets still parse.

    Raises:
        LocatorError: no "[" in the line, or the bracketed value is not a number.
    """
    _head, sep, tail = line.rpartition("[")
    if not sep:
        msg = f"invalid item token: {line!r}"
        raise LocatorError(msg)
    sid = tail.strip().rstrip("]")
    if not (sid.isascii() and sid.isdigit()):
        msg = f"cannot convert item id: {sid!r}"
        raise LocatorError(msg)
    return int(sid)


def locate(client: ClientProtocol, line: str) -> Item:
    """Fetch the item named by a listing line."""
    item_id = parse_item_id(line)
    try:
        return client.item(item_id)
    except (FetchError, DecodeError) as exc:
        msg = f"error fetching item {item_id}: {exc}"
        raise LocatorError(msg) from exc
