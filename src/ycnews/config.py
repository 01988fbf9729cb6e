"""Configuration constants and runtime settings for ycnews."""

import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path

API_BASE_URL: str = "https://hacker-news.firebaseio.com/v0"

# Path segment stripped from request paths when naming cache files.
API_VERSION_SEGMENT: str = "/v0/"

# Discussion page, used when a story has no external link (Ask HN, jobs).
DISCUSSION_URL: str = "https://news.ycombinator.com/item?id={item_id}"

# Default cache location. YCNEWS_CACHE_DIR overrides it.
DEFAULT_CACHE_DIR: Path = Path("~/.cache/ycnews").expanduser()

# Comment text is wrapped to this many columns (indent not included).
WRAP_WIDTH: int = 72

# Browsers that take over the terminal and must be run attached.
TERMINAL_BROWSERS: frozenset[str] = frozenset({"elinks", "lynx", "w3m"})

# Programs whose presence changes what the preview and launcher offer.
PROBED_TOOLS: tuple[str, ...] = ("fzf", "elinks", "firefox")


def detect_installed_tools(names: tuple[str, ...] = PROBED_TOOLS) -> frozenset[str]:
    """Return the subset of names found on PATH."""
    return frozenset(name for name in names if shutil.which(name) is not None)


def resolve_cache_dir() -> Path:
    """Return the cache directory from the environment, or the default."""
    override = os.environ.get("YCNEWS_CACHE_DIR")
    if override:
        return Path(override).expanduser()
    return Path(os.environ.get("HOME", "~"), ".cache", "ycnews").expanduser()


@dataclass(frozen=True)
class Settings:
    """Runtime settings, built once per process and passed to components."""

    cache_dir: Path = DEFAULT_CACHE_DIR
    api_base_url: str = API_BASE_URL
    timeout: float | None = None
    wrap_width: int = WRAP_WIDTH
    installed_tools: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(cache_dir=resolve_cache_dir(), installed_tools=detect_installed_tools())

    def is_installed(self, name: str) -> bool:
        return name in self.installed_tools
