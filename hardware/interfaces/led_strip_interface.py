"""
LED Strip Interface - Abstract Hardware Layer

This defines the contract (interface) that any addressable LED strip
implementation must follow. The animation engine only ever talks to this
interface, never to a concrete driver.

Implementations:
- BlinktStrip: Pimoroni Blinkt! (8 APA102 pixels) on a Raspberry Pi
- MockLEDStrip: in-memory strip that records the frames it is shown

Writes are buffered: set_pixel/set_all/clear/set_brightness only change the
local buffer, show() pushes the buffer to the pixels.
"""

from abc import ABC, abstractmethod


class LEDStripInterface(ABC):
    """
    Abstract base class for addressable RGB LED strips.

    Channel values are integers in [0, 255]. Brightness is a float in
    [0.0, 1.0] applied to every pixel.
    """

    @property
    @abstractmethod
    def pixel_count(self) -> int:
        """Number of addressable pixels on the strip"""

    @abstractmethod
    def set_pixel(self, index: int, red: int, green: int, blue: int) -> None:
        """
        Set one pixel's color in the local buffer.

        Args:
            index: Pixel position, 0 is the first pixel
            red: Red channel (0-255)
            green: Green channel (0-255)
            blue: Blue channel (0-255)

        Raises:
            LEDStripError: If index or a channel value is out of range
        """

    @abstractmethod
    def set_all(self, red: int, green: int, blue: int) -> None:
        """
        Set every pixel to the same color in the local buffer.

        Raises:
            LEDStripError: If a channel value is out of range
        """

    @abstractmethod
    def set_brightness(self, brightness: float) -> None:
        """
        Set global brightness for all pixels.

        Args:
            brightness: 0.0 (off) to 1.0 (full)

        Raises:
            LEDStripError: If brightness is outside [0.0, 1.0]
        """

    @abstractmethod
    def show(self) -> None:
        """
        Push the local buffer to the physical pixels.

        Raises:
            LEDStripError: If the hardware write fails
        """

    @abstractmethod
    def clear(self) -> None:
        """Set every pixel in the local buffer to off (needs show())."""

    @abstractmethod
    def cleanup(self) -> None:
        """Release hardware resources. Pixels keep their last shown state."""

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if real LED hardware is behind this strip.

        Returns:
            True on real hardware, False if simulated
        """


class LEDStripError(Exception):
    """
    Raised when an LED strip operation fails.

    Covers invalid arguments (pixel index, channel value, brightness) and
    failures reported by the hardware driver on show().
    """


def validate_channel(value: int) -> None:
    """Raise LEDStripError unless value is a byte (0-255)."""
    if not 0 <= value <= 255:
        raise LEDStripError(f"Channel value {value} outside 0-255")


def validate_brightness(brightness: float) -> None:
    """Raise LEDStripError unless brightness is within [0.0, 1.0]."""
    if not 0.0 <= brightness <= 1.0:
        raise LEDStripError(f"Brightness {brightness} outside 0.0-1.0")
