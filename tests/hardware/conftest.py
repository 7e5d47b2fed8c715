"""
Hardware Test Fixtures

Fixtures shared by the LED strip, factory and animation engine tests.

To use pytest:
    pip install -e ".[test]"
    pytest tests/hardware/
"""

import queue
from unittest.mock import MagicMock

import pytest

from hardware.implementations.mock_led_strip import MockLEDStrip


# =============================================================================
# LED STRIP FIXTURES
# =============================================================================

@pytest.fixture
def mock_strip():
    """
    Provide a fresh 8-pixel MockLEDStrip for each test.

    Usage in test:
        def test_something(mock_strip):
            mock_strip.set_pixel(0, 255, 0, 0)
            mock_strip.show()
    """
    strip = MockLEDStrip(pixel_count=8)
    yield strip
    strip.cleanup()


@pytest.fixture
def fake_blinkt(monkeypatch):
    """
    Make the blinkt library look installed, backed by a MagicMock.

    Lets BlinktStrip and the factory's real path run on any machine.

    Usage:
        def test_real(fake_blinkt):
            strip = BlinktStrip()
            strip.show()
            fake_blinkt.show.assert_called_once()
    """
    from hardware.implementations import blinkt_strip

    fake = MagicMock()
    fake.NUM_PIXELS = 8
    monkeypatch.setattr(blinkt_strip, "blinkt", fake, raising=False)
    monkeypatch.setattr(blinkt_strip, "BLINKT_AVAILABLE", True)
    return fake


@pytest.fixture
def no_blinkt(monkeypatch):
    """Make the blinkt library look missing."""
    from hardware.implementations import blinkt_strip

    monkeypatch.setattr(blinkt_strip, "BLINKT_AVAILABLE", False)


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def command_queue():
    """Command queue between a test (acting as scheduler) and the engine."""
    return queue.Queue()
