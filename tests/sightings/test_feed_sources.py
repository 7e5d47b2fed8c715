"""
Feed Source Tests

HTTPFeedSource is tested with its session patched; no network access.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from sightings.implementations.http_feed_source import HTTPFeedSource
from sightings.implementations.mock_feed_source import MockFeedSource, transport_failure
from sightings.interfaces.feed_source_interface import FeedTransportError

FEED_URL = "https://spotthestation.nasa.gov/sightings/xml_files/test.xml"


def _response(status_code: int, content: bytes = b"") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = status_code < 400
    resp.content = content
    return resp


class TestHTTPFeedSource:
    """Test HTTP fetching and error mapping"""

    def test_fetch_returns_body(self, nasa_feed_bytes):
        source = HTTPFeedSource(timeout=5)

        with patch.object(
            source._session, "get", return_value=_response(200, nasa_feed_bytes)
        ) as get:
            raw = source.fetch(FEED_URL)

        assert raw == nasa_feed_bytes
        get.assert_called_once_with(FEED_URL, timeout=5)
        source.close()

    def test_sends_user_agent(self):
        source = HTTPFeedSource()

        assert "iss-notify" in source._session.headers["User-Agent"]
        source.close()

    def test_http_error_status_is_reported(self):
        source = HTTPFeedSource()

        with patch.object(source._session, "get", return_value=_response(503)):
            with pytest.raises(FeedTransportError) as exc_info:
                source.fetch(FEED_URL)

        assert exc_info.value.status_code == 503
        source.close()

    def test_connection_failure_has_no_status(self):
        source = HTTPFeedSource()

        with patch.object(
            source._session, "get", side_effect=requests.ConnectionError("refused")
        ):
            with pytest.raises(FeedTransportError) as exc_info:
                source.fetch(FEED_URL)

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
        source.close()

    def test_timeout_is_a_transport_error(self):
        source = HTTPFeedSource()

        with patch.object(source._session, "get", side_effect=requests.Timeout()):
            with pytest.raises(FeedTransportError):
                source.fetch(FEED_URL)
        source.close()


class TestMockFeedSource:
    """Test canned response sequencing"""

    def test_single_response_repeats(self, mock_feed_source, nasa_feed_bytes):
        assert mock_feed_source.fetch(FEED_URL) == nasa_feed_bytes
        assert mock_feed_source.fetch(FEED_URL) == nasa_feed_bytes
        assert mock_feed_source.get_fetch_count() == 2
        assert mock_feed_source.fetch_history == [FEED_URL, FEED_URL]

    def test_sequence_then_last_repeats(self):
        source = MockFeedSource([b"first", b"second"])

        assert source.fetch(FEED_URL) == b"first"
        assert source.fetch(FEED_URL) == b"second"
        assert source.fetch(FEED_URL) == b"second"

    def test_error_response_is_raised(self):
        source = MockFeedSource([b"ok", transport_failure(404)])

        source.fetch(FEED_URL)
        with pytest.raises(FeedTransportError) as exc_info:
            source.fetch(FEED_URL)

        assert exc_info.value.status_code == 404

    def test_empty_responses_rejected(self):
        with pytest.raises(ValueError):
            MockFeedSource([])

    def test_close_is_tracked(self):
        source = MockFeedSource(b"")
        source.close()

        assert source.closed

    def test_wait_for_fetches_times_out(self):
        source = MockFeedSource(b"")

        assert not source.wait_for_fetches(1, timeout=0.05)
        source.fetch(FEED_URL)
        assert source.wait_for_fetches(1, timeout=0.05)
