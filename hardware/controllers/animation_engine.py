"""
Animation Engine

Drives the LED strip from commands sent by the notification scheduler.
It runs on its own thread and is the only code that touches the strip once
started.

State Flow:
    IDLE (heartbeat) ⇄ APPROACHING (rainbow) → IDLE
      ↓
    SHUTDOWN (red pixel 0, terminal)

Run loop:
- Wait up to HEARTBEAT_INTERVAL for a command
- Timeout: one heartbeat frame (pixel 0 green toggles on/off)
- ApproachingUntil: rainbow chase until the deadline, then clear
- Terminate: red pixel 0 and return

Commands are serviced one at a time. A command that arrives while the rainbow
is running waits in the queue until the approach loop ends.
"""

import logging
import math
import queue
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from core.commands import ApproachingUntil, Command, Terminate
from hardware.constants import (
    COLOR_OFF,
    COLOR_SHUTDOWN,
    DEFAULT_BRIGHTNESS,
    HEARTBEAT_HIGH,
    HEARTBEAT_INTERVAL,
    HEARTBEAT_LOW,
    HEARTBEAT_PIXEL,
    RAINBOW_AMPLITUDE,
    RAINBOW_CHANNEL_PHASES,
    RAINBOW_FRAME_INTERVAL,
    RAINBOW_FULL_TURN,
    RAINBOW_HUE_STEP,
    RAINBOW_PIXEL_PHASE,
    EngineState,
)
from hardware.interfaces.led_strip_interface import LEDStripInterface


def rainbow_color(hue: int, pixel: int) -> tuple[int, int, int]:
    """
    Color of one pixel for one rainbow frame.

    Each channel is a sine wave over the hue, shifted per pixel along the strip
    and per channel (0/120/240 degrees), mapped from [-1, 1] to [0, 254].

    Args:
        hue: Hue position in degrees (0-359)
        pixel: Pixel index on the strip

    Returns:
        (red, green, blue)

    Example:
        rainbow_color(0, 0)  # (127, 236, 17)
    """
    phase = hue + pixel * RAINBOW_PIXEL_PHASE
    red, green, blue = (
        int(RAINBOW_AMPLITUDE * (1.0 + math.sin(math.radians(phase + offset))))
        for offset in RAINBOW_CHANNEL_PHASES
    )
    return red, green, blue


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AnimationEngine:
    """
    LED state machine fed by a command queue.

    Usage:
        commands = queue.Queue()
        engine = AnimationEngine(create_led_strip(), commands)
        threading.Thread(target=engine.run).start()

        commands.put(ApproachingUntil(sighting.when))
        commands.put(Terminate())
    """

    def __init__(
        self,
        led_strip: LEDStripInterface,
        command_queue: "queue.Queue[Command]",
        refresh_interval: float = HEARTBEAT_INTERVAL,
        frame_interval: float = RAINBOW_FRAME_INTERVAL,
        brightness: float = DEFAULT_BRIGHTNESS,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            led_strip: Strip to draw on (owned by the engine once run() starts)
            command_queue: Commands from the scheduler
            refresh_interval: Command wait timeout, one heartbeat per timeout
            frame_interval: Sleep between rainbow frames
            brightness: Global strip brightness (0.0-1.0)
            clock: Returns the current timezone-aware time (tests inject one)
        """
        self.logger = logging.getLogger(__name__)

        self.led_strip = led_strip
        self.command_queue = command_queue
        self.refresh_interval = refresh_interval
        self.frame_interval = frame_interval
        self.brightness = brightness
        self._clock = clock or _utc_now

        self._state = EngineState.IDLE
        self._heartbeat_level = HEARTBEAT_LOW
        self._heartbeat_count = 0
        self._approach_count = 0

    @property
    def state(self) -> EngineState:
        return self._state

    def run(self) -> None:
        """
        Run the engine until a Terminate command is processed.

        Blocks the calling thread.

        Raises:
            LEDStripError: If the strip fails to show a frame (fatal)
            TypeError: If something other than a Command is queued
        """
        self.logger.info(
            f"Animation engine started ({self.led_strip.pixel_count} pixels, "
            f"brightness {self.brightness})",
        )
        self.led_strip.set_brightness(self.brightness)

        while True:
            try:
                command = self.command_queue.get(timeout=self.refresh_interval)
            except queue.Empty:
                self._heartbeat()
                continue

            if isinstance(command, Terminate):
                self._terminate()
                return

            if isinstance(command, ApproachingUntil):
                self._approach(command.until)
                continue

            raise TypeError(f"Unknown animation command: {command!r}")

    # =========================================================================
    # RENDERING
    # =========================================================================

    def _heartbeat(self) -> None:
        """Toggle pixel 0's green channel, everything else off"""
        self._heartbeat_level = HEARTBEAT_HIGH - self._heartbeat_level
        self._heartbeat_count += 1

        self.led_strip.set_all(*COLOR_OFF)
        self.led_strip.set_pixel(HEARTBEAT_PIXEL, 0, self._heartbeat_level, 0)
        self.led_strip.show()

    def _approach(self, until: datetime) -> None:
        """
        Rainbow chase until `until`, then clear the strip.

        The deadline is checked once per full hue sweep, so the animation can
        overrun `until` by at most one sweep (~1.2s at 10ms per frame).
        """
        self.logger.info(f"ISS approaching, animating until {until}")
        self._state = EngineState.APPROACHING
        self._approach_count += 1

        while self._clock() < until:
            for hue in range(0, RAINBOW_FULL_TURN, RAINBOW_HUE_STEP):
                for pixel in range(self.led_strip.pixel_count):
                    self.led_strip.set_pixel(pixel, *rainbow_color(hue, pixel))
                self.led_strip.show()
                time.sleep(self.frame_interval)

        self.led_strip.clear()
        self.led_strip.show()

        self._state = EngineState.IDLE
        self.logger.info("Approach animation finished")

    def _terminate(self) -> None:
        """Final frame: pixel 0 red, everything else off"""
        self.logger.warning("Animation engine received Terminate")

        self.led_strip.set_all(*COLOR_OFF)
        self.led_strip.set_pixel(HEARTBEAT_PIXEL, *COLOR_SHUTDOWN)
        self.led_strip.show()

        self._state = EngineState.SHUTDOWN
        self.logger.info("Animation engine stopped")

    def get_status(self) -> Dict[str, Any]:
        """
        Get engine status for diagnostics.

        Returns:
            Dictionary with state and counters
        """
        return {
            "state": self._state.value,
            "heartbeat_level": self._heartbeat_level,
            "heartbeats": self._heartbeat_count,
            "approaches": self._approach_count,
            "pending_commands": self.command_queue.qsize(),
        }
