"""
Animation Commands

Messages sent from the notification scheduler to the animation engine over the
command queue. The set is closed: the engine treats anything else as a
programming error.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Union


@dataclass(frozen=True)
class ApproachingUntil:
    """Run the approach animation until `until` (timezone-aware) is reached"""

    until: datetime


@dataclass(frozen=True)
class Terminate:
    """Show the shutdown frame and stop the engine for good"""


Command = Union[ApproachingUntil, Terminate]
