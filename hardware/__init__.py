"""
Hardware Module

LED strip abstraction and animation for the ISS notifier.

Provides automatic detection and graceful fallback between the real Blinkt!
strip and a mock implementation for testing.

Public API:
    - HardwareFactory: Factory for creating hardware components
    - create_led_strip: Quick LED strip creation with auto-detection
    - LEDStripInterface: LED strip contract
    - LEDStripError: LED strip failure
    - AnimationEngine: Heartbeat / approach / shutdown animations

Usage:
    from hardware import AnimationEngine, create_led_strip

    # Auto-detects real vs mock hardware
    strip = create_led_strip()
    engine = AnimationEngine(strip, command_queue)
"""

from hardware.controllers.animation_engine import AnimationEngine, rainbow_color
from hardware.factory import HardwareFactory, create_led_strip
from hardware.interfaces.led_strip_interface import LEDStripError, LEDStripInterface

__all__ = [
    "AnimationEngine",
    "HardwareFactory",
    "LEDStripError",
    "LEDStripInterface",
    "create_led_strip",
    "rainbow_color",
]
