"""
Core scheduling modules.

Public API:
    - ApproachingUntil, Terminate: Commands for the animation engine
    - NotificationScheduler: Feed polling and notification timing
    - compute_wait: How long to wait before notifying about a sighting

Usage:
    from core import NotificationScheduler

    scheduler = NotificationScheduler(feed_source, command_queue, interrupt_queue)
    scheduler.run()
"""

from core.commands import ApproachingUntil, Command, Terminate
from core.scheduler import NotificationScheduler, SchedulerState, compute_wait

__all__ = [
    "ApproachingUntil",
    "Command",
    "NotificationScheduler",
    "SchedulerState",
    "Terminate",
    "compute_wait",
]
