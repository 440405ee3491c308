"""
Event loop that drives a scene from a timer and the keyboard.
"""

from __future__ import annotations

from .scheduler import GameLoop, RecurringTimer

__all__ = ["GameLoop", "RecurringTimer"]
