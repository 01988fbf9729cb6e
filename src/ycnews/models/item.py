"""Domain models for Hacker News records."""

import json
from dataclasses import dataclass
from typing import Any

from ycnews.errors import DecodeError


@dataclass(frozen=True)
class Item:
    """A single Hacker News record: story, comment, job or poll."""

    id: int
    type: str = ""
    by: str = ""
    title: str = ""
    text: str = ""
    url: str = ""
    score: int = 0
    time: int = 0
    kids: tuple[int, ...] = ()
    descendants: int = 0
    parent: int | None = None
    deleted: bool = False
    dead: bool = False


def parse_item(data: dict[str, Any]) -> Item:
    """Convert a decoded JSON object into an Item.

    Unknown keys are ignored; missing or null keys fall back to zero values.
    """
    return Item(
        id=int(data["id"]),
        type=data.get("type") or "",
        by=data.get("by") or "",
        title=data.get("title") or "",
        text=data.get("text") or "",
        url=data.get("url") or "",
        score=int(data.get("score") or 0),
        time=int(data.get("time") or 0),
        kids=tuple(int(k) for k in data.get("kids") or ()),
        descendants=int(data.get("descendants") or 0),
        parent=data.get("parent"),
        deleted=bool(data.get("deleted", False)),
        dead=bool(data.get("dead", False)),
    )


def decode_item(raw: bytes, *, locator: str) -> Item:
    """Decode an item/<id>.json response body.

    Raises:
        DecodeError: body is not JSON, is null (unknown ID), or lacks an id.
    """
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(locator, str(exc)) from exc
    if data is None:
        raise DecodeError(locator, "no such item")
    if not isinstance(data, dict):
        raise DecodeError(locator, f"expected an object, got {type(data).__name__}")
    try:
        return parse_item(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise DecodeError(locator, f"bad item fields: {exc!r}") from exc


def decode_story_ids(raw: bytes, *, locator: str) -> list[int]:
    """Decode a story list (topstories.json and friends) into item IDs."""
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(locator, str(exc)) from exc
    if not isinstance(data, list):
        raise DecodeError(locator, f"expected a list, got {type(data).__name__}")
    try:
        return [int(x) for x in data]
    except (TypeError, ValueError) as exc:
        raise DecodeError(locator, f"bad story id: {exc!r}") from exc


def decode_max_item(raw: bytes, *, locator: str) -> int:
    try:
        return int(json.loads(raw))
    except (UnicodeDecodeError, json.JSONDecodeError, TypeError, ValueError) as exc:
        raise DecodeError(locator, str(exc)) from exc
