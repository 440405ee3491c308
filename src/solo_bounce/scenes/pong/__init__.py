"""
The single-player pong scene.
"""

from __future__ import annotations

from .collision import Contact, evaluate
from .models import PongIntent, PongTickContext, PongWorld
from .rounds import RoundCoordinator, RoundState
from .scene import PongScene

__all__ = [
    "Contact",
    "PongIntent",
    "PongScene",
    "PongTickContext",
    "PongWorld",
    "RoundCoordinator",
    "RoundState",
    "evaluate",
]
