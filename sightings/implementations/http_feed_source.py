"""
HTTP Feed Source

Fetches the "Spot the Station" RSS feed over HTTP(S) with requests.
One blocking GET per poll cycle; failures are raised, never retried.
"""

import logging

import requests

from config.settings import FEED_HTTP_TIMEOUT, FEED_USER_AGENT
from sightings.interfaces.feed_source_interface import (
    FeedSourceInterface,
    FeedTransportError,
)


class HTTPFeedSource(FeedSourceInterface):
    """
    Feed source backed by a requests.Session.

    Usage:
        source = HTTPFeedSource()
        raw = source.fetch(FEED_URL)
    """

    def __init__(self, timeout: float = FEED_HTTP_TIMEOUT):
        self.logger = logging.getLogger(__name__)
        self.timeout = timeout

        self._session = requests.Session()
        self._session.headers["User-Agent"] = FEED_USER_AGENT

    def fetch(self, url: str) -> bytes:
        self.logger.info(f"Retrieving sightings feed from {url}")

        try:
            resp = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FeedTransportError(f"Failed to fetch feed: {e}") from e

        if not resp.ok:
            raise FeedTransportError(
                f"Feed request returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        self.logger.debug(f"Fetched {len(resp.content)} bytes")
        return resp.content

    def close(self) -> None:
        self._session.close()
