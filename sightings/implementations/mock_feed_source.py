"""
Mock Feed Source

Canned feed source for testing without network access.
Similar to MockLEDStrip in the hardware module.
"""

import logging
import threading
from typing import Sequence, Union

from sightings.interfaces.feed_source_interface import (
    FeedSourceInterface,
    FeedTransportError,
)

# Each canned response is either feed bytes or an error to raise
Response = Union[bytes, Exception]


class MockFeedSource(FeedSourceInterface):
    """
    Feed source that replays canned responses.

    Responses are served in order; once exhausted, the last one repeats.

    Example:
        # Same feed on every poll
        source = MockFeedSource(feed_bytes)

        # First poll works, second one fails
        source = MockFeedSource([feed_bytes, FeedTransportError("down", 503)])
    """

    def __init__(self, responses: Union[Response, Sequence[Response]]):
        self.logger = logging.getLogger(__name__)

        if isinstance(responses, (bytes, Exception)):
            responses = [responses]
        if not responses:
            raise ValueError("MockFeedSource needs at least one response")

        self._responses = list(responses)

        # Track fetch history for testing
        self.fetch_history: list[str] = []
        self._fetched = threading.Condition()
        self.closed = False

    def fetch(self, url: str) -> bytes:
        with self._fetched:
            index = min(len(self.fetch_history), len(self._responses) - 1)
            self.fetch_history.append(url)
            self._fetched.notify_all()

        response = self._responses[index]
        self.logger.debug(f"[MOCK] Fetch #{len(self.fetch_history)} of {url}")

        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True

    def get_fetch_count(self) -> int:
        """Number of fetch() calls so far"""
        with self._fetched:
            return len(self.fetch_history)

    def wait_for_fetches(self, count: int, timeout: float = 5.0) -> bool:
        """
        Block until fetch() has been called at least `count` times.

        Returns:
            True if reached, False on timeout
        """
        with self._fetched:
            return self._fetched.wait_for(
                lambda: len(self.fetch_history) >= count,
                timeout=timeout,
            )


def transport_failure(status_code: int = 503) -> FeedTransportError:
    """Convenience: a canned HTTP failure for MockFeedSource"""
    return FeedTransportError(
        f"Feed request returned HTTP {status_code}",
        status_code=status_code,
    )
