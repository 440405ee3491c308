"""
Ball entity for Solo Bounce.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from solo_bounce.constants import BALL_SYMBOL, MAX_DELAY, NUM_BALLS
from solo_bounce.entities.court import Court


def random_delays(rng: random.Random, max_delay: int = MAX_DELAY):
    """
    Draw a fresh (x_delay, y_delay) pair.

    Horizontal delay is capped at half the vertical one: terminals are usually
    wider than tall, so the ball should cross them faster horizontally.
    Upper bounds are exclusive.
    """
    x_delay = rng.randrange(1, max_delay // 2)
    y_delay = rng.randrange(1, max_delay)
    return x_delay, y_delay


def random_direction(rng: random.Random) -> int:
    """Either -1 or +1."""
    return rng.choice((-1, 1))


# Justification: one attribute per axis for position, direction, delay, counter
# pylint: disable=too-many-instance-attributes
@dataclass
class Ball:
    """
    Ball entity. Each axis moves one cell every ``delay`` ticks, independently.

    :ivar remaining (int): Balls (lives) left after the one in play.
    :ivar x (int): Column.
    :ivar y (int): Row.
    :ivar x_dir (int): -1 (left) or +1 (right).
    :ivar y_dir (int): -1 (up) or +1 (down).
    :ivar x_delay (int): Ticks per horizontal step.
    :ivar y_delay (int): Ticks per vertical step.
    :ivar x_count (int): Ticks left until the next horizontal step.
    :ivar y_count (int): Ticks left until the next vertical step.
    :ivar symbol (str): Character used to draw the ball.
    """

    remaining: int
    x: int = 0
    y: int = 0
    x_dir: int = 1
    y_dir: int = 1
    x_delay: int = 0
    y_delay: int = 0
    x_count: int = 0
    y_count: int = 0
    symbol: str = BALL_SYMBOL

    @classmethod
    def create(cls, lives: int = NUM_BALLS) -> "Ball":
        """New ball holding ``lives`` balls; nothing in play until served."""
        return cls(remaining=lives)

    @property
    def position(self) -> tuple[int, int]:
        """Current (row, col)."""
        return self.y, self.x

    def reinitialize(
        self,
        court: Court,
        rng: random.Random,
        max_delay: int = MAX_DELAY,
    ):
        """
        Put a new ball in play at a random spot, direction and speed.

        Consumes one life.

        :param court: Court to place the ball in.
        :type court: Court

        :param rng: Random source.
        :type rng: random.Random

        :param max_delay: Exclusive upper bound for the vertical delay.
        :type max_delay: int
        """
        # +/- 1 keeps the ball off the walls
        self.y = rng.randrange(court.top + 1, court.bottom - 1)
        self.x = rng.randrange(court.left + 1, court.right - 1)

        self.y_dir = random_direction(rng)
        self.x_dir = random_direction(rng)

        self.y_delay = rng.randrange(1, max_delay)
        self.x_delay = rng.randrange(1, max_delay // 2)
        self.y_count = self.y_delay
        self.x_count = self.x_delay

        self.remaining -= 1

    def advance(self) -> bool:
        """
        One tick of motion. Both axes are checked every tick.

        :return: Whether the ball moved on either axis.
        :rtype: bool
        """
        moved = False

        if self.y_delay > 0:
            self.y_count -= 1
            if self.y_count == 0:
                self.y += self.y_dir
                self.y_count = self.y_delay
                moved = True

        if self.x_delay > 0:
            self.x_count -= 1
            if self.x_count == 0:
                self.x += self.x_dir
                self.x_count = self.x_delay
                moved = True

        return moved


# pylint: enable=too-many-instance-attributes
