"""
Controllers Package

High-level hardware controllers for the ISS notifier.
"""

from hardware.controllers.animation_engine import AnimationEngine

# Public API (sorted alphabetically)
__all__ = [
    "AnimationEngine",
]
