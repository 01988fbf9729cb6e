"""Error taxonomy for ycnews."""


class YcNewsError(Exception):
    """Base class for all errors reported to the user."""


class FetchError(YcNewsError):
    """Network, transport or HTTP status failure for one locator."""

    def __init__(self, locator: str, reason: str) -> None:
        super().__init__(f"cannot fetch {locator}: {reason}")
        self.locator = locator


class DecodeError(YcNewsError):
    """Response body could not be decoded into the expected shape."""

    def __init__(self, locator: str, reason: str) -> None:
        super().__init__(f"cannot decode body for {locator}: {reason}")
        self.locator = locator


class LocatorError(YcNewsError):
    """A selector line did not name a record, or the record is unavailable."""
