"""
Pong scene Model
"""

from __future__ import annotations

from dataclasses import dataclass

from solo_bounce.backend import Surface
from solo_bounce.entities.ball import Ball
from solo_bounce.entities.clock import Clock
from solo_bounce.entities.court import Court
from solo_bounce.entities.paddle import Paddle
from solo_bounce.scenes.pong.collision import Contact
from solo_bounce.scenes.pong.rounds import RoundCoordinator


@dataclass
class PongWorld:
    """
    Pong world state. One of each entity; the scene owns the world.

    :ivar court (Court): Playable rectangle.
    :ivar clock (Clock): Elapsed play time.
    :ivar ball (Ball): Ball entity.
    :ivar paddle (Paddle): The player's paddle.
    :ivar quit_requested (bool): The player asked to leave.
    """

    court: Court
    clock: Clock
    ball: Ball
    paddle: Paddle
    quit_requested: bool = False


@dataclass(frozen=True)
class PongIntent:
    """
    Player intent for one key press.

    :ivar move_paddle (int): -1 (up), +1 (down) or 0.
    :ivar quit (bool): Whether to end the session.
    """

    move_paddle: int = 0
    quit: bool = False


@dataclass
class PongTickContext:
    """
    Context handed to each system for one event (a tick or a key press).

    :ivar world (PongWorld): Current world state.
    :ivar surface (Surface): Where systems draw.
    :ivar rounds (RoundCoordinator): Serve/lose/game-over logic.
    :ivar intent (PongIntent | None): Player intent; None on timer ticks.
    :ivar contact (Contact | None): Result of this event's collision check.
    """

    world: PongWorld
    surface: Surface
    rounds: RoundCoordinator
    intent: PongIntent | None = None
    contact: Contact | None = None
