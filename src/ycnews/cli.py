"""Command-line interface for ycnews.

Run without flags to browse the front page in fzf. The flags are what fzf
uses to call back into this program; they also work by hand.
"""

from typing import Annotated

import typer
from loguru import logger

from ycnews.api import HackerNewsApi
from ycnews.config import Settings
from ycnews.dispatcher import dispatch, select_action
from ycnews.errors import YcNewsError
from ycnews.logging_config import configure_logging

app = typer.Typer(
    help="Browse Hacker News stories and comments in the terminal.", add_completion=False
)


@app.command()
def main(
    line: Annotated[
        str,
        typer.Option(
            "--line",
            "-line",
            metavar="RECORD",
            help="Story to open or preview. RECORD should be 'whatever [ITEM_ID]'",
        ),
    ] = "",
    preview: Annotated[
        bool, typer.Option("--preview", "-preview", help="Preview the story")
    ] = False,
    list_stories: Annotated[
        bool, typer.Option("--list", "-list", help="List top stories")
    ] = False,
    open_with: Annotated[
        str | None,
        typer.Option("--open", "-open", metavar="PROGRAM", help="Open the story URL in PROGRAM"),
    ] = None,
    view_comments: Annotated[
        bool,
        typer.Option("--view-comments", "-view-comments", help="Print the story's comments"),
    ] = False,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", min=1, help="List at most this many stories"),
    ] = None,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Browse Hacker News: list, preview, open, or read comments."""
    configure_logging(verbose=verbose)

    action = select_action(
        open_with=open_with,
        preview=preview,
        view_comments=view_comments,
        list_stories=list_stories,
    )
    logger.debug("Action: {}", action.value)

    settings = Settings.from_env()
    try:
        api = HackerNewsApi(settings)
        dispatch(action, api, settings, line=line, open_with=open_with, limit=limit)
    except YcNewsError as exc:
        logger.error("{}", exc)
