"""Front page listing, one line per story, in the format fzf consumes."""

from datetime import datetime
from typing import TextIO

from loguru import logger

from ycnews.ansi import RED, YELLOW, colorize
from ycnews.errors import DecodeError, FetchError
from ycnews.models.item import Item
from ycnews.protocols import ClientProtocol

TIME_FORMAT = "%Y-%m-%d %H:%M"


def format_score(score: int) -> str:
    """Right-align score to four columns, red above 1000, yellow above 500."""
    text = f"{score:4d}"
    if score > 1000:
        return colorize(text, RED)
    if score > 500:
        return colorize(text, YELLOW)
    return text


def format_story_line(item: Item) -> str:
    """Format one listing line. The trailing "[<id>]" is what the locator reads."""
    stamp = datetime.fromtimestamp(item.time).strftime(TIME_FORMAT)
    return f"{stamp}  {format_score(item.score)}  {len(item.kids):4d}  {item.title} [{item.id}]"


def list_top_stories(client: ClientProtocol, out: TextIO, *, limit: int | None = None) -> int:
    """Write one line per current top story to out.

    The story list itself is fetched fresh; a failure there propagates. A story
    that cannot be fetched is reported on its own line and skipped.

    Returns:
        Number of stories listed.
    """
    story_ids = client.top_stories()
    if limit is not None:
        story_ids = story_ids[:limit]

    listed = 0
    for story_id in story_ids:
        try:
            item = client.item(story_id)
        except (FetchError, DecodeError) as exc:
            logger.debug("Story {} unavailable: {}", story_id, exc)
            out.write(f"{story_id}: error fetching\n")
            continue
        out.write(format_story_line(item) + "\n")
        listed += 1

    logger.debug("Listed {} of {} stories", listed, len(story_ids))
    return listed
