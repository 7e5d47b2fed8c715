"""
Mock LED Strip Implementation

Simulated LED strip for development and testing without a Blinkt! attached.

This is a "Fake" test double: it keeps a real pixel buffer and records every
frame passed to show(), so tests can assert exactly what the strip displayed.
"""

import logging
import threading
from collections import deque
from typing import Optional

from hardware.constants import (
    COLOR_OFF,
    DEFAULT_PIXEL_COUNT,
    MOCK_FRAME_HISTORY_SIZE,
)
from hardware.interfaces.led_strip_interface import (
    LEDStripError,
    LEDStripInterface,
    validate_brightness,
    validate_channel,
)

# (red, green, blue) per pixel
Frame = tuple[tuple[int, int, int], ...]


class MockLEDStrip(LEDStripInterface):
    """
    In-memory LED strip.

    - buffer: what set_pixel/set_all/clear have written
    - shown frame: what the last show() pushed "to the pixels"
    - frame history: the last shown frames, oldest first

    Usage:
        strip = MockLEDStrip()
        strip.set_pixel(0, 255, 0, 0)
        strip.show()
        assert strip.get_shown_frame()[0] == (255, 0, 0)
    """

    def __init__(
        self,
        pixel_count: int = DEFAULT_PIXEL_COUNT,
        history_size: int = MOCK_FRAME_HISTORY_SIZE,
    ):
        self.logger = logging.getLogger(__name__)

        self._pixel_count = pixel_count
        self._buffer: list[tuple[int, int, int]] = [COLOR_OFF] * pixel_count
        self._shown: Frame = tuple(self._buffer)
        self._brightness = 0.0
        self._shown_brightness = 0.0

        self._show_count = 0
        self._history: deque[Frame] = deque(maxlen=history_size)

        # Fault injection: show() raises once this many successful shows happened
        self._fail_after: Optional[int] = None

        # Tests read state from another thread while the engine writes
        self._lock = threading.Lock()
        self._shown_event = threading.Condition(self._lock)

        self.logger.info(f"Mock LED strip initialized ({pixel_count} pixels)")

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

        with self._lock:
            self._buffer[index] = (red, green, blue)

    def set_all(self, red: int, green: int, blue: int) -> None:
        for value in (red, green, blue):
            validate_channel(value)

        with self._lock:
            self._buffer = [(red, green, blue)] * self._pixel_count

    def set_brightness(self, brightness: float) -> None:
        validate_brightness(brightness)
        self._brightness = brightness
        self.logger.debug(f"[MOCK] Brightness set to {brightness}")

    def show(self) -> None:
        with self._lock:
            if self._fail_after is not None and self._show_count >= self._fail_after:
                raise LEDStripError("Simulated LED strip write failure")

            self._shown = tuple(self._buffer)
            self._shown_brightness = self._brightness
            self._show_count += 1
            self._history.append(self._shown)
            self._shown_event.notify_all()

    def clear(self) -> None:
        with self._lock:
            self._buffer = [COLOR_OFF] * self._pixel_count

    def cleanup(self) -> None:
        self.logger.debug("[MOCK] LED strip cleanup")

    def is_available(self) -> bool:
        return False

    # =========================================================================
    # TEST HELPERS (not part of LEDStripInterface)
    # =========================================================================

    def get_shown_frame(self) -> Frame:
        """Last frame pushed with show()"""
        with self._lock:
            return self._shown

    def get_shown_brightness(self) -> float:
        """Brightness in effect at the last show()"""
        return self._shown_brightness

    def get_show_count(self) -> int:
        """Total number of show() calls that succeeded"""
        with self._lock:
            return self._show_count

    def get_frame_history(self) -> list[Frame]:
        """Recently shown frames, oldest first"""
        with self._lock:
            return list(self._history)

    def wait_for_shows(self, count: int, timeout: float = 5.0) -> bool:
        """
        Block until at least `count` frames have been shown.

        Returns:
            True if reached, False on timeout
        """
        with self._shown_event:
            return self._shown_event.wait_for(
                lambda: self._show_count >= count,
                timeout=timeout,
            )

    def fail_show_after(self, successful_shows: Optional[int]) -> None:
        """
        Make show() raise LEDStripError once `successful_shows` frames went out.

        Pass None to disable.
        """
        with self._lock:
            self._fail_after = successful_shows
