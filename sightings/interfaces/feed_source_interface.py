"""
Feed Source Interface

Abstract interface for fetching the raw sightings feed.
The scheduler depends on this abstraction, not on HTTP.
"""

from abc import ABC, abstractmethod
from typing import Optional


class FeedSourceInterface(ABC):
    """
    Abstract base class for feed sources.

    Any implementation (HTTP, local file, canned test data) must return the
    feed's raw bytes or raise FeedTransportError.
    """

    @abstractmethod
    def fetch(self, url: str) -> bytes:
        """
        Fetch the raw feed document.

        This is a single blocking call; there is no retry.

        Args:
            url: Feed location

        Returns:
            Raw feed bytes (undecoded XML)

        Raises:
            FeedTransportError: If the feed could not be retrieved
        """

    @abstractmethod
    def close(self) -> None:
        """Release any connections held by the source."""


class FeedTransportError(Exception):
    """
    Raised when the feed cannot be retrieved.

    Attributes:
        status_code: HTTP status if the server answered, None if the request
            never completed (DNS, connection, timeout)
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
