"""
Hardware Factory

Factory pattern for creating the LED strip implementation.
Selects the Blinkt! strip or the in-memory mock based on configuration
(LED_STRIP_MODE) and library availability.

Controllers receive an LEDStripInterface and never know which one they got.
"""

import logging
from typing import Literal

from hardware.implementations.blinkt_strip import BlinktStrip
from hardware.implementations.mock_led_strip import MockLEDStrip
from hardware.interfaces.led_strip_interface import LEDStripInterface

# Type aliases for better type hints
HardwareMode = Literal["auto", "real", "mock"]


class HardwareFactory:
    """
    Factory for creating hardware interface implementations.

    Usage:
        # Auto-detect (uses the Blinkt! if available, mock otherwise)
        strip = HardwareFactory.create_led_strip()

        # Force mock mode (useful for testing)
        strip = HardwareFactory.create_led_strip(mode="mock")

        # Force real hardware (raises error if not available)
        strip = HardwareFactory.create_led_strip(mode="real")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_led_strip(
        cls,
        mode: HardwareMode = "auto",
    ) -> LEDStripInterface:
        """
        Create an LED strip instance.

        Args:
            mode: "auto" (detect), "real" (force Blinkt!),
                  "mock" (force simulation)

        Returns:
            LEDStripInterface implementation (BlinktStrip or MockLEDStrip)

        Raises:
            RuntimeError: If mode="real" but the Blinkt! is not available
            ValueError: If mode is not one of auto/real/mock
        """
        if mode == "mock":
            cls._logger.info("Creating Mock LED strip (forced)")
            return MockLEDStrip()

        if mode == "real":
            try:
                strip = BlinktStrip()
                cls._logger.info("Creating Blinkt! LED strip (forced)")
                return strip
            except Exception as e:
                raise RuntimeError(
                    f"Real LED strip requested but not available: {e}",
                ) from e

        if mode != "auto":
            raise ValueError(f"Unknown hardware mode: {mode!r}")

        # mode == "auto" - try real first, fall back to mock
        try:
            strip = BlinktStrip()
            cls._logger.info("Creating Blinkt! LED strip (auto-detected)")
            return strip
        except Exception as e:
            cls._logger.warning(
                f"Blinkt! not available ({e}), using Mock LED strip",
            )
            return MockLEDStrip()


def create_led_strip(force_mock: bool = False) -> LEDStripInterface:
    """
    Quick LED strip creation with simple mock override.

    Args:
        force_mock: If True, always use mock (good for testing)

    Returns:
        LED strip interface
    """
    mode = "mock" if force_mock else "auto"
    return HardwareFactory.create_led_strip(mode=mode)
