"""Browse Hacker News stories and comment threads from the terminal."""

from ycnews.api import HackerNewsApi
from ycnews.config import Settings
from ycnews.errors import DecodeError, FetchError, LocatorError, YcNewsError
from ycnews.models.item import Item
from ycnews.protocols import ClientProtocol

__all__ = [
    "ClientProtocol",
    "DecodeError",
    "FetchError",
    "HackerNewsApi",
    "Item",
    "LocatorError",
    "Settings",
    "YcNewsError",
]
