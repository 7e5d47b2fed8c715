"""
Hardware Constants

This file centralizes the colors, animation geometry and timing values used by
the LED strip and the animation engine. User tunables (brightness, intervals,
strip mode) live in config/settings.py instead.
"""

from enum import Enum

from config.settings import (
    LED_BRIGHTNESS,
    LED_FRAME_INTERVAL,
    LED_PIXEL_COUNT,
    LED_REFRESH_INTERVAL,
)

# =============================================================================
# STRIP CONFIGURATION
# =============================================================================
# Import from central config.settings to maintain single source of truth
# NEVER modify here - change in config/settings.py instead!

DEFAULT_PIXEL_COUNT = LED_PIXEL_COUNT
DEFAULT_BRIGHTNESS = LED_BRIGHTNESS

# Frames kept by MockLEDStrip for test assertions
MOCK_FRAME_HISTORY_SIZE = 1000


# =============================================================================
# COLORS (R, G, B)
# =============================================================================

COLOR_OFF = (0, 0, 0)
COLOR_SHUTDOWN = (255, 0, 0)  # Pixel 0 full red after Terminate

# Heartbeat pixel toggles its green channel between these two values
HEARTBEAT_PIXEL = 0
HEARTBEAT_LOW = 0
HEARTBEAT_HIGH = 255


# =============================================================================
# ANIMATION TIMING
# =============================================================================

# Idle tick: command receive timeout, one heartbeat frame per timeout
HEARTBEAT_INTERVAL = LED_REFRESH_INTERVAL

# Sleep between rainbow frames while a sighting is approaching
RAINBOW_FRAME_INTERVAL = LED_FRAME_INTERVAL


# =============================================================================
# RAINBOW GEOMETRY
# =============================================================================
# Hue runs 0..357 in steps of 3 degrees, one frame per step (120 frames/sweep)

RAINBOW_HUE_STEP = 3
RAINBOW_FULL_TURN = 360

# Each pixel is phase shifted by this much along the strip
RAINBOW_PIXEL_PHASE = 30

# Channel phase offsets (R, G, B)
RAINBOW_CHANNEL_PHASES = (0, 120, 240)

# sin() in [-1, 1] maps to 127 * (1 + sin) in [0, 254]
RAINBOW_AMPLITUDE = 127


# =============================================================================
# ENGINE STATES
# =============================================================================


class EngineState(Enum):
    """What the animation engine is currently rendering"""

    IDLE = "idle"  # Heartbeat on pixel 0
    APPROACHING = "approaching"  # Rainbow chase until the sighting time
    SHUTDOWN = "shutdown"  # Red pixel 0, run loop exited
