"""
Hardware Implementations Package

Concrete implementations of the hardware interfaces:
- BlinktStrip: Pimoroni Blinkt! on a Raspberry Pi
- MockLEDStrip: in-memory strip for development and tests
"""

from hardware.implementations.blinkt_strip import BlinktStrip
from hardware.implementations.mock_led_strip import MockLEDStrip

__all__ = [
    "BlinktStrip",
    "MockLEDStrip",
]
