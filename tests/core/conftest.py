"""
Core Test Fixtures

The scheduler blocks on its interrupt queue for every wait. ScriptedInterruptQueue
turns those waits into instant, recorded calls so scheduling tests never sleep.
"""

import queue
from typing import Optional

import pytest


class ScriptedInterruptQueue(queue.Queue):
    """
    Interrupt queue that never blocks.

    - Every get() records the timeout it was called with
    - The `interrupt_on`-th get() (1-based) returns an interrupt
    - Any other get() returns a queued item or raises queue.Empty at once
    """

    def __init__(self, interrupt_on: Optional[int] = None):
        super().__init__()
        self.interrupt_on = interrupt_on
        self.timeouts: list = []

    def get(self, block=True, timeout=None):
        self.timeouts.append(timeout)
        if len(self.timeouts) == self.interrupt_on:
            return None
        return super().get(block=False)


@pytest.fixture
def interrupt_after():
    """
    Provide a ScriptedInterruptQueue factory.

    Usage:
        def test_wait(interrupt_after):
            interrupts = interrupt_after(2)  # second wait is interrupted
    """
    return ScriptedInterruptQueue


@pytest.fixture
def command_queue():
    """Commands the scheduler sends to the (absent) animation engine."""
    return queue.Queue()


def drain(command_queue: queue.Queue) -> list:
    """Everything currently queued, in order"""
    items = []
    while True:
        try:
            items.append(command_queue.get_nowait())
        except queue.Empty:
            return items


@pytest.fixture
def sent_commands(command_queue):
    """Callable returning the commands sent so far."""
    return lambda: drain(command_queue)
