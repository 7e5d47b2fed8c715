"""
Hardware Interfaces Package

Exposes abstract interfaces that define contracts for hardware components.
"""

from hardware.interfaces.led_strip_interface import LEDStripError, LEDStripInterface

# Public API (sorted alphabetically)
__all__ = [
    "LEDStripError",
    "LEDStripInterface",
]
