"""Shared test fixtures."""

from collections.abc import Iterator

import pytest
from loguru import logger

from tests.unit.fakes import COMMENTS, STORY, FakeClient


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop log sinks a test configured, so later tests never write to closed streams."""
    yield
    logger.remove()


@pytest.fixture
def thread_client() -> FakeClient:
    """A client serving one story with a small reply tree.

    100 story
        101 alice
            102 bob
                103 carol
        104 dave
    """
    client = FakeClient()
    client.add_item(STORY)
    for comment in COMMENTS:
        client.add_item(comment)
    client.story_ids = [STORY.id]
    return client
