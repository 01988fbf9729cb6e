"""Render a story's comment tree as indented terminal text."""

from typing import TextIO

from loguru import logger

from ycnews.ansi import YELLOW, colorize
from ycnews.config import WRAP_WIDTH
from ycnews.core.tree.markup import format_fragment
from ycnews.errors import DecodeError, FetchError
from ycnews.models.item import Item
from ycnews.protocols import ClientProtocol

INDENT_UNIT = "\t"


def author_label(item: Item) -> str:
    """Return the bracketed author tag text for a comment."""
    if item.by:
        return item.by
    if item.deleted:
        return "deleted"
    if item.dead:
        return "dead"
    return "unknown"


def render_comments(
    client: ClientProtocol,
    root: Item,
    out: TextIO,
    *,
    width: int = WRAP_WIDTH,
) -> int:
    """Write root's title and its whole reply tree to out.

    Replies are fetched lazily, one request per uncached item, and written in
    depth-first pre-order with children in API order. Each level is indented
    one tab deeper than its parent. A reply that cannot be fetched becomes a
    single error line; its siblings are still rendered.

    Args:
        client: API client used to fetch replies.
        root: The story (or comment) whose replies to render.
        out: Text stream to write to.
        width: Wrap width for comment bodies, indent excluded.

    Returns:
        Number of replies rendered (failed fetches not included).
    """
    out.write(f"{colorize(root.title, YELLOW)}\n\n")
    if root.text:
        out.write(format_fragment(root.text, width=width))
        out.write("\n")

    # The remote graph is not guaranteed acyclic; an ID is rendered once per call.
    visited: set[int] = {root.id}
    todo: list[tuple[int, int]] = [(kid, 0) for kid in reversed(root.kids)]
    rendered = 0

    while todo:
        item_id, depth = todo.pop()
        if item_id in visited:
            logger.debug("Skipping item {} already rendered in this thread", item_id)
            continue
        visited.add(item_id)
        indent = INDENT_UNIT * depth

        try:
            item = client.item(item_id)
        except (FetchError, DecodeError) as exc:
            out.write(f"{indent}{exc}\n")
            continue

        out.write(f"{indent}{colorize('[' + author_label(item) + ']', YELLOW)}\n")
        out.write(format_fragment(item.text, indent=indent, width=width))
        out.write("\n")
        rendered += 1

        todo.extend((kid, depth + 1) for kid in reversed(item.kids))

    return rendered
