"""Hacker News API client with an on-disk response cache."""

import os
import tempfile
from pathlib import Path
from urllib.parse import urlsplit

import requests
from loguru import logger

from ycnews.config import API_VERSION_SEGMENT, Settings
from ycnews.errors import DecodeError, FetchError
from ycnews.models.item import Item, decode_item, decode_max_item, decode_story_ids


def cache_key(locator: str) -> str:
    """Map a locator to a cache file name.

    The API version segment is dropped and path separators become dashes:
    https://hacker-news.firebaseio.com/v0/item/8863.json -> item-8863.json
    """
    path = urlsplit(locator).path
    return path.replace(API_VERSION_SEGMENT, "", 1).strip("/").replace("/", "-")


class HackerNewsApi:
    """Encapsulated Hacker News API with caching.

    Cached responses are never refreshed: items are treated as immutable once
    fetched. Story lists are always requested fresh.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.base_url = settings.api_base_url.rstrip("/")
        self.cache_dir = Path(settings.cache_dir)
        self.sess = requests.Session()

        self.cache_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("API ready: base {!r}, cache_dir {!r}", self.base_url, str(self.cache_dir))

    def item_url(self, item_id: int) -> str:
        return f"{self.base_url}/item/{item_id}.json"

    def cache_path(self, locator: str) -> Path:
        return self.cache_dir / cache_key(locator)

    def fetch(self, locator: str, *, use_cache: bool) -> bytes:
        """Return the raw response body for locator.

        With use_cache, a cached body is returned without touching the network,
        and a fresh body is stored for next time.

        Raises:
            FetchError: transport failure or non-success status.
        """
        cache_file = self.cache_path(locator)
        if use_cache:
            try:
                body = cache_file.read_bytes()
            except OSError:
                pass
            else:
                logger.debug("Filled from cache: {!r}", str(cache_file))
                return body

        logger.debug("Making request: {!r}", locator)
        try:
            r = self.sess.get(locator, timeout=self.settings.timeout)
            r.raise_for_status()
            body = r.content
        except requests.RequestException as exc:
            raise FetchError(locator, str(exc)) from exc

        if use_cache:
            self._store(cache_file, body)
        return body

    def _store(self, cache_file: Path, body: bytes) -> None:
        """Write body to cache_file atomically. Failures are only logged."""
        try:
            fd, tmp_name = tempfile.mkstemp(dir=cache_file.parent, prefix=".tmp-")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(body)
                os.replace(tmp_name, cache_file)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            logger.debug("Cannot write cache file {!r}: {}", str(cache_file), exc)

    def invalidate(self, locator: str) -> None:
        """Drop the cached body for locator, if any."""
        cache_file = self.cache_path(locator)
        try:
            cache_file.unlink(missing_ok=True)
        except OSError as exc:
            logger.debug("Cannot remove cache file {!r}: {}", str(cache_file), exc)

    def item(self, item_id: int) -> Item:
        """Fetch and decode one item, using the cache.

        A cached body that fails to decode is discarded and fetched again once.
        Bodies that do not decode, such as the null returned for unknown IDs,
        are never left in the cache.
        """
        locator = self.item_url(item_id)
        was_cached = self.cache_path(locator).exists()
        raw = self.fetch(locator, use_cache=True)
        try:
            return decode_item(raw, locator=locator)
        except DecodeError:
            self.invalidate(locator)
            if not was_cached:
                raise
            logger.warning("Discarding unreadable cache entry for item {}", item_id)

        raw = self.fetch(locator, use_cache=True)
        try:
            return decode_item(raw, locator=locator)
        except DecodeError:
            self.invalidate(locator)
            raise

    def top_stories(self) -> list[int]:
        """Fetch the current front page ranking. Never cached."""
        locator = f"{self.base_url}/topstories.json"
        return decode_story_ids(self.fetch(locator, use_cache=False), locator=locator)

    def max_item(self) -> int:
        """Fetch the largest item ID assigned so far. Never cached."""
        locator = f"{self.base_url}/maxitem.json"
        return decode_max_item(self.fetch(locator, use_cache=False), locator=locator)
