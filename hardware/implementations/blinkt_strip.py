"""
Blinkt! LED Strip Implementation

Concrete implementation of LEDStripInterface for the Pimoroni Blinkt!
(8 APA102 pixels on the Raspberry Pi GPIO header) using the `blinkt` library.

The blinkt library keeps its own module-level pixel buffer, which maps
one-to-one onto our buffered set_*/show() contract.
"""

import logging

try:
    import blinkt

    BLINKT_AVAILABLE = True
except (ImportError, RuntimeError):  # RPi.GPIO raises RuntimeError off-Pi
    BLINKT_AVAILABLE = False

from hardware.interfaces.led_strip_interface import (
    LEDStripError,
    LEDStripInterface,
    validate_brightness,
    validate_channel,
)


class BlinktStrip(LEDStripInterface):
    """
    Pimoroni Blinkt! strip driven through the blinkt library.

    Clear-on-exit is disabled so the last frame (e.g. the red shutdown
    pixel) stays lit after the process exits.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

        if not BLINKT_AVAILABLE:
            raise LEDStripError(
                "blinkt library not available. Install with: pip install blinkt",
            )

        try:
            blinkt.set_clear_on_exit(False)
            self._pixel_count = blinkt.NUM_PIXELS
        except Exception as e:
            raise LEDStripError(f"Failed to initialize Blinkt!: {e}") from e

        self.logger.info(f"Blinkt! initialized ({self._pixel_count} pixels)")

    @property
    def pixel_count(self) -> int:
        return self._pixel_count

    def set_pixel(self, index: int, red: int, green: int, blue: int) -> None:
        if not 0 <= index < self._pixel_count:
            raise LEDStripError(
                f"Pixel {index} outside 0-{self._pixel_count - 1}",
            )
        for value in (red, green, blue):
            validate_channel(value)
        blinkt.set_pixel(index, red, green, blue)

    def set_all(self, red: int, green: int, blue: int) -> None:
        for value in (red, green, blue):
            validate_channel(value)
        blinkt.set_all(red, green, blue)

    def set_brightness(self, brightness: float) -> None:
        validate_brightness(brightness)
        blinkt.set_brightness(brightness)

    def show(self) -> None:
        try:
            blinkt.show()
            # Don't log every show - the rainbow runs at ~100 frames/s
        except Exception as e:
            self.logger.error(f"Blinkt! show failed: {e}")
            raise LEDStripError(f"Failed to write to Blinkt!: {e}") from e

    def clear(self) -> None:
        blinkt.clear()

    def cleanup(self) -> None:
        # Pixels keep their last state (clear-on-exit disabled)
        self.logger.info("Blinkt! released")

    def is_available(self) -> bool:
        return BLINKT_AVAILABLE
