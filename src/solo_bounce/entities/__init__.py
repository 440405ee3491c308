"""
Entities package for Solo Bounce.
This package contains all entity definitions used in the game.
"""

from __future__ import annotations

from .ball import Ball
from .clock import Clock
from .court import Court
from .paddle import Paddle

__all__ = [
    "Ball",
    "Clock",
    "Court",
    "Paddle",
]
