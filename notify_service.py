"""
ISS Notify Service

Main service coordinator for the ISS sighting notifier.
Wires the notification scheduler and the animation engine together and owns
their shutdown.

Architecture:
- Two threads, no shared state between them
- Command queue: scheduler → animation engine (ApproachingUntil, Terminate)
- Interrupt queue: signal handler → scheduler (one item per process)
- Only the scheduler sends Terminate; the signal handler just interrupts it

Shutdown Flow:
    SIGINT/SIGTERM → interrupt queue → scheduler wakes, sends Terminate, returns
                                       → engine shows red pixel 0, returns
    main thread joins scheduler, then engine, then exits

Failures:
- Feed or parse error: scheduler dies, run() raises ServiceError (exit 1)
- LED strip error: engine dies, scheduler is interrupted, run() raises
  ServiceError (exit 1)
"""

import logging
import queue
import signal
import sys
import threading
from pathlib import Path
from typing import Any, Dict, Optional

from config.settings import (
    LED_STRIP_MODE,
    LOG_DATE_FORMAT,
    LOG_FALLBACK_DIR,
    LOG_FILE,
    LOG_FORMAT,
    LOG_LEVEL,
)
from core.commands import Command
from core.scheduler import NotificationScheduler
from hardware import AnimationEngine, HardwareFactory, LEDStripInterface
from sightings import FeedSourceInterface, HTTPFeedSource


class ServiceError(Exception):
    """Raised by ISSNotifyService.run() when one of its activities failed"""


class ISSNotifyService:
    """
    Main service coordinator.

    Wires together:
    - LED strip (real or mock) and the animation engine
    - Feed source and the notification scheduler
    - Signal handling and joint shutdown

    Usage:
        service = ISSNotifyService()
        service.run()  # Blocks until shutdown
    """

    def __init__(
        self,
        led_strip: Optional[LEDStripInterface] = None,
        feed_source: Optional[FeedSourceInterface] = None,
        engine_options: Optional[Dict[str, Any]] = None,
        scheduler_options: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize queues, hardware and both activities.

        Args:
            led_strip: LED strip to drive (default: from LED_STRIP_MODE)
            feed_source: Feed source (default: HTTPFeedSource)
            engine_options: Extra keyword arguments for AnimationEngine
            scheduler_options: Extra keyword arguments for NotificationScheduler
        """
        self.logger = logging.getLogger(__name__)
        self.logger.info("Initializing ISS Notify Service...")

        self.led_strip = led_strip or HardwareFactory.create_led_strip(
            mode=LED_STRIP_MODE,
        )
        self.feed_source = feed_source or HTTPFeedSource()

        self.command_queue: "queue.Queue[Command]" = queue.Queue()
        self.interrupt_queue: "queue.Queue[None]" = queue.Queue()

        self.engine = AnimationEngine(
            self.led_strip,
            self.command_queue,
            **(engine_options or {}),
        )
        self.scheduler = NotificationScheduler(
            self.feed_source,
            self.command_queue,
            self.interrupt_queue,
            **(scheduler_options or {}),
        )

        self._engine_thread: Optional[threading.Thread] = None
        self._scheduler_thread: Optional[threading.Thread] = None
        self._engine_error: Optional[BaseException] = None
        self._scheduler_error: Optional[BaseException] = None

        self._shutdown_requested = threading.Event()

        self.logger.info("ISS Notify Service initialized")

    # =========================================================================
    # MAIN LOOP
    # =========================================================================

    def run(self, install_signal_handlers: bool = True) -> None:
        """
        Start both activities and block until both have finished.

        Args:
            install_signal_handlers: Route SIGINT/SIGTERM to request_shutdown()
                (only possible from the main thread)

        Raises:
            ServiceError: If the scheduler or the engine failed
        """
        if install_signal_handlers:
            signal.signal(signal.SIGTERM, self._signal_handler)
            signal.signal(signal.SIGINT, self._signal_handler)

        self._engine_thread = threading.Thread(
            target=self._run_engine,
            daemon=True,
            name="animation-engine",
        )
        self._scheduler_thread = threading.Thread(
            target=self._run_scheduler,
            daemon=True,
            name="notification-scheduler",
        )

        self._engine_thread.start()
        self._scheduler_thread.start()
        self.logger.info("ISS Notify Service running")

        try:
            self._scheduler_thread.join()
            if self._scheduler_error is not None:
                raise ServiceError(
                    f"Notification scheduler failed: {self._scheduler_error}",
                ) from self._scheduler_error

            self._engine_thread.join()
            if self._engine_error is not None:
                raise ServiceError(
                    f"Animation engine failed: {self._engine_error}",
                ) from self._engine_error
        finally:
            self.cleanup()

        self.logger.info("ISS Notify Service shutdown complete")

    def _run_engine(self) -> None:
        try:
            self.engine.run()
        except Exception as e:
            self.logger.error(f"Animation engine crashed: {e}", exc_info=True)
            self._engine_error = e
            # Wake the scheduler so the service can exit
            self.request_shutdown()

    def _run_scheduler(self) -> None:
        try:
            self.scheduler.run()
        except Exception as e:
            self.logger.error(f"Notification scheduler crashed: {e}", exc_info=True)
            self._scheduler_error = e

    # =========================================================================
    # SHUTDOWN HANDLING
    # =========================================================================

    def request_shutdown(self) -> bool:
        """
        Interrupt the scheduler. Only the first call has an effect.

        Never blocks and never touches the command queue: the scheduler decides
        when Terminate is sent.

        Returns:
            True if this call forwarded the interrupt
        """
        if self._shutdown_requested.is_set():
            return False
        self._shutdown_requested.set()
        self.interrupt_queue.put_nowait(None)
        return True

    def _signal_handler(self, signum, _frame):
        """
        Handle shutdown signals.

        Args:
            signum: Signal number
            _frame: Current stack frame (unused, required by signal API)
        """
        signal_name = signal.Signals(signum).name
        if self.request_shutdown():
            self.logger.warning(f"Received signal {signal_name}, exiting")
        else:
            self.logger.debug(f"Received signal {signal_name}, already exiting")

    def cleanup(self):
        """Release resources once the activities are done."""
        if self._engine_thread and self._engine_thread.is_alive():
            # Only reached when the scheduler failed; the engine dies with us
            self.logger.warning("Animation engine still running, leaving LED strip as is")
        else:
            self.led_strip.cleanup()

        self.feed_source.close()

    def get_status(self) -> Dict[str, Any]:
        """
        Get service status for diagnostics.

        Returns:
            Dictionary with thread liveness and per-activity status
        """
        return {
            "shutdown_requested": self._shutdown_requested.is_set(),
            "engine_alive": bool(self._engine_thread and self._engine_thread.is_alive()),
            "scheduler_alive": bool(
                self._scheduler_thread and self._scheduler_thread.is_alive(),
            ),
            "engine": self.engine.get_status(),
            "scheduler": self.scheduler.get_status(),
        }


def setup_logging():
    """
    Setup logging to console and an append-only log file.

    Format: "2025-01-03 21:40:00 INFO Sending ISS notification"
    Falls back to logs/iss-notify.log if LOG_FILE cannot be opened.
    """
    logger = logging.getLogger()
    logger.setLevel(LOG_LEVEL)

    log_format = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_format)
    logger.addHandler(console_handler)

    try:
        file_handler = logging.FileHandler(LOG_FILE, mode="a", encoding="utf-8")
    except OSError:
        logs_dir = Path(LOG_FALLBACK_DIR)
        logs_dir.mkdir(exist_ok=True)

        fallback_log = logs_dir / Path(LOG_FILE).name
        logger.warning(f"Cannot write to {LOG_FILE}, using fallback: {fallback_log}")

        file_handler = logging.FileHandler(fallback_log, mode="a", encoding="utf-8")

    file_handler.setFormatter(log_format)
    logger.addHandler(file_handler)


def main():
    """
    Main entry point for the service.

    Sets up logging and runs the service. Any failure exits with status 1.
    """
    setup_logging()

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("ISS Notify Service Starting")
    logger.info("=" * 60)

    try:
        service = ISSNotifyService()
        service.run()
    except Exception as e:
        logger.critical(f"Fatal error in main: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
