"""
Notification Scheduler

Polls the sightings feed and tells the animation engine when an ISS pass is
about to start. Runs on its own thread.

State Flow:
    POLLING → WAITING → NOTIFYING ─┐
       ↑         ↓                 │ (next sighting)
       │     SKIPPING (past event) │
       └─────────────────────────-─┘ (feed exhausted)
    Any wait ──interrupt──→ TERMINATED

Each wait is a timed get() on the interrupt queue, so a shutdown signal ends
it immediately. This is also the only place Terminate is ever sent to the
engine.

Feed or parse failures are not caught here: they end the scheduler and the
service with it.
"""

import logging
import queue
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Optional

from config.settings import (
    FEED_REPOLL_DELAY,
    FEED_TIMEZONE,
    FEED_URL,
    NOTIFY_LEAD_SECONDS,
)
from core.commands import ApproachingUntil, Command, Terminate
from sightings.interfaces.feed_source_interface import FeedSourceInterface
from sightings.models.sighting import Sighting
from sightings.parser import TimezoneLike, parse_sightings


class SchedulerState(Enum):
    POLLING = "polling"
    WAITING = "waiting"
    NOTIFYING = "notifying"
    SKIPPING = "skipping"
    TERMINATED = "terminated"


def compute_wait(
    event_time: datetime,
    now: datetime,
    lead_seconds: float = NOTIFY_LEAD_SECONDS,
) -> Optional[float]:
    """
    How long to wait before notifying about an event.

    Args:
        event_time: When the sighting starts (timezone-aware)
        now: Current time (timezone-aware)
        lead_seconds: How early the notification should start

    Returns:
        Seconds to wait (0 if the lead window has already begun),
        or None if the event is in the past

    Example:
        compute_wait(now + timedelta(seconds=400), now, 300)  # 100.0
        compute_wait(now + timedelta(seconds=200), now, 300)  # 0.0
        compute_wait(now - timedelta(seconds=1), now, 300)    # None
    """
    time_to_event = (event_time - now).total_seconds()
    if time_to_event < 0:
        return None
    return max(time_to_event - lead_seconds, 0.0)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class NotificationScheduler:
    """
    Feed polling loop that emits animation commands.

    Usage:
        scheduler = NotificationScheduler(
            HTTPFeedSource(), command_queue, interrupt_queue,
        )
        threading.Thread(target=scheduler.run).start()

        # From the signal handler:
        interrupt_queue.put_nowait(None)
    """

    def __init__(
        self,
        feed_source: FeedSourceInterface,
        command_queue: "queue.Queue[Command]",
        interrupt_queue: "queue.Queue[None]",
        feed_url: str = FEED_URL,
        feed_timezone: TimezoneLike = FEED_TIMEZONE,
        lead_seconds: float = NOTIFY_LEAD_SECONDS,
        repoll_delay: float = FEED_REPOLL_DELAY,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            feed_source: Where the raw feed comes from
            command_queue: Commands to the animation engine
            interrupt_queue: Receives one item when the service must stop
            feed_url: Feed to poll
            feed_timezone: Timezone of the feed's local times
            lead_seconds: Notify this long before each sighting
            repoll_delay: Pause between poll cycles (0 = immediate)
            clock: Returns the current timezone-aware time (tests inject one)
        """
        self.logger = logging.getLogger(__name__)

        self.feed_source = feed_source
        self.command_queue = command_queue
        self.interrupt_queue = interrupt_queue
        self.feed_url = feed_url
        self.feed_timezone = feed_timezone
        self.lead_seconds = lead_seconds
        self.repoll_delay = repoll_delay
        self._clock = clock or _utc_now

        self._state = SchedulerState.POLLING
        self._poll_count = 0
        self._notified_count = 0
        self._skipped_count = 0

    @property
    def state(self) -> SchedulerState:
        return self._state

    def run(self) -> None:
        """
        Poll, wait and notify until interrupted.

        Blocks the calling thread. Returns after sending Terminate.

        Raises:
            FeedTransportError: If the feed cannot be fetched
            SightingParseError: If the feed cannot be parsed
        """
        self.logger.info(
            f"Notification scheduler started (lead time {self.lead_seconds}s)",
        )

        while True:
            self._state = SchedulerState.POLLING
            self._poll_count += 1

            raw = self.feed_source.fetch(self.feed_url)
            sightings = parse_sightings(raw, self.feed_timezone)
            self.logger.info(f"Feed lists {len(sightings)} sightings")

            for sighting in sightings:
                if not self._process_sighting(sighting):
                    return

            if self.repoll_delay > 0:
                self.logger.debug(f"Feed exhausted, re-polling in {self.repoll_delay}s")
            if self._wait_for_interrupt(self.repoll_delay):
                self._terminate()
                return

    def _process_sighting(self, sighting: Sighting) -> bool:
        """
        Wait for one sighting's notify time and notify.

        Returns:
            False if interrupted (Terminate already sent), True otherwise
        """
        now = self._clock()
        wait = compute_wait(sighting.when, now, self.lead_seconds)

        if wait is None:
            self._state = SchedulerState.SKIPPING
            self._skipped_count += 1
            self.logger.debug(f"Ignoring past event {sighting.when}")
            return True

        self._state = SchedulerState.WAITING
        time_to_event = (sighting.when - now).total_seconds()
        self.logger.info(
            f"Next sighting in {time_to_event:.0f} sec, notifying in {wait:.0f} sec: "
            f"{sighting.describe()}",
        )

        if self._wait_for_interrupt(wait):
            self._terminate()
            return False

        self._state = SchedulerState.NOTIFYING
        self.logger.info("Sending ISS notification")
        self.command_queue.put(ApproachingUntil(sighting.when))
        self._notified_count += 1
        return True

    def _wait_for_interrupt(self, timeout: float) -> bool:
        """
        Block up to `timeout` seconds for an interrupt.

        A zero timeout still picks up an interrupt that is already queued.

        Returns:
            True if interrupted, False if the timeout elapsed
        """
        try:
            self.interrupt_queue.get(timeout=timeout)
        except queue.Empty:
            return False
        return True

    def _terminate(self) -> None:
        """Stop the engine. Called once, right before run() returns."""
        self.logger.warning("Interrupt received, terminating animation engine")
        self.command_queue.put(Terminate())
        self._state = SchedulerState.TERMINATED

    def get_status(self) -> Dict[str, Any]:
        """
        Get scheduler status for diagnostics.

        Returns:
            Dictionary with state and counters
        """
        return {
            "state": self._state.value,
            "polls": self._poll_count,
            "notified": self._notified_count,
            "skipped": self._skipped_count,
        }
