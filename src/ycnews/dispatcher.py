"""Decide what one invocation does, and do it.

The same program serves as the interactive entry point and as every callback
fzf runs: the list source, the preview command and the key bindings. Each of
those re-invokes this program with different flags.
"""

import enum
import os
import shlex
import subprocess
import sys
from datetime import datetime
from typing import TextIO

from loguru import logger

from ycnews.ansi import RED, colorize
from ycnews.config import DISCUSSION_URL, TERMINAL_BROWSERS, Settings
from ycnews.core.listing import list_top_stories
from ycnews.core.locator import locate
from ycnews.core.tree.comments import render_comments
from ycnews.models.item import Item
from ycnews.protocols import ClientProtocol


class Action(enum.Enum):
    OPEN = "open"
    PREVIEW = "preview"
    VIEW_COMMENTS = "view-comments"
    LIST = "list"
    INTERACTIVE = "interactive"


def select_action(
    *,
    open_with: str | None,
    preview: bool,
    view_comments: bool,
    list_stories: bool,
) -> Action:
    """Pick the action for a flag combination. First match wins."""
    if open_with:
        return Action.OPEN
    if preview:
        return Action.PREVIEW
    if view_comments:
        return Action.VIEW_COMMENTS
    if list_stories:
        return Action.LIST
    return Action.INTERACTIVE


def self_command(argv0: str | None = None) -> str:
    """Return the shell command that re-invokes this program."""
    argv0 = argv0 if argv0 is not None else sys.argv[0]
    if not argv0 or argv0.endswith("__main__.py") or argv0 == "-m":
        return shlex.join([sys.executable, "-m", "ycnews"])
    return shlex.quote(argv0)


def story_url(item: Item) -> str:
    """The story's link, or its discussion page for text posts."""
    return item.url or DISCUSSION_URL.format(item_id=item.id)


def open_url(opener: str, url: str) -> None:
    """Open url with opener.

    Terminal browsers take over the terminal until they exit; anything else is
    started in the background and left running.
    """
    cmd = [opener, url]
    logger.debug("Running: {}", shlex.join(cmd))
    try:
        if os.path.basename(opener) in TERMINAL_BROWSERS:
            result = subprocess.run(cmd, check=False)
            if result.returncode != 0:
                logger.error("{} exited with status {}", opener, result.returncode)
            return
        subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        logger.error("Cannot start {}: {}", opener, exc)


def _missing(settings: Settings, name: str) -> str:
    if settings.is_installed(name):
        return ""
    return " " + colorize(f"({name} is not installed)", RED)


def format_preview(item: Item, settings: Settings) -> str:
    """Key legend followed by the item's metadata, as shown in fzf's preview pane."""
    created = datetime.fromtimestamp(item.time).strftime("%Y-%m-%d %H:%M:%S")
    lines = [
        f"{colorize('F2', RED)}          -- open URL in elinks{_missing(settings, 'elinks')}",
        f"{colorize('F3', RED)}          -- open URL in firefox{_missing(settings, 'firefox')}",
        f"{colorize('F4 or Enter', RED)} -- open comments in less (Q -- quit)",
        f"{colorize('F10', RED)}         -- quit",
        "",
        "",
        f"time:     {created}",
        f"by:       {item.by}",
        f"title:    {item.title}",
        f"score:    {item.score}",
        f"id:       {item.id}",
        f"comments: {len(item.kids)}",
        f"url:      {story_url(item)}",
    ]
    return "\n".join(lines) + "\n"


def fzf_arguments(prog: str) -> list[str]:
    """Arguments that wire fzf's preview and key bindings back to prog."""
    comments = f"{prog} --view-comments --line {{}} | less -r"
    return [
        "--ansi",
        f"--preview={prog} --preview --line {{}}",
        "--preview-window=right:40%:wrap",
        "--bind=alt-p:preview-up,alt-n:preview-down,alt-u:preview-page-up,alt-d:preview-page-down",
        "--bind=f10:abort",
        f"--bind=f2:execute({prog} --open elinks --line {{}})",
        f"--bind=f3:execute({prog} --open firefox --line {{}})",
        f"--bind=f4:execute({comments})",
        f"--bind=enter:execute({comments})",
    ]


def launch_selector(settings: Settings, *, prog: str | None = None) -> int:
    """Hand the terminal to fzf, with this program as its list source.

    Returns:
        fzf's exit status, or 1 when fzf is not installed.
    """
    if not settings.is_installed("fzf"):
        logger.error("fzf is not installed; run with --list to print stories instead")
        return 1
    prog = prog or self_command()
    env = {**os.environ, "FZF_DEFAULT_COMMAND": f"{prog} --list"}
    cmd = ["fzf", *fzf_arguments(prog)]
    logger.debug("Running: {}", shlex.join(cmd))
    return subprocess.run(cmd, env=env, check=False).returncode


def dispatch(
    action: Action,
    client: ClientProtocol,
    settings: Settings,
    *,
    line: str = "",
    open_with: str | None = None,
    limit: int | None = None,
    out: TextIO | None = None,
) -> None:
    """Run one action.

    Errors (YcNewsError) propagate; the caller reports them.
    """
    out = out if out is not None else sys.stdout

    if action is Action.OPEN:
        item = locate(client, line)
        open_url(open_with or "", story_url(item))
    elif action is Action.PREVIEW:
        out.write(format_preview(locate(client, line), settings))
    elif action is Action.VIEW_COMMENTS:
        render_comments(client, locate(client, line), out, width=settings.wrap_width)
    elif action is Action.LIST:
        list_top_stories(client, out, limit=limit)
    else:
        launch_selector(settings)
