"""
Wall and paddle collisions for the ball.
"""

from __future__ import annotations

import random
from enum import Enum

from mini_arcade_core.utils import logger

from solo_bounce.constants import MAX_DELAY
from solo_bounce.entities.ball import Ball, random_delays
from solo_bounce.entities.court import Court
from solo_bounce.entities.paddle import Paddle
from solo_bounce.errors import BallOutOfBoundsError


class Contact(Enum):
    """Outcome of a collision check."""

    NO_CONTACT = 0
    BOUNCE = 1
    LOSE = -1


def evaluate(
    ball: Ball,
    paddle: Paddle,
    court: Court,
    rng: random.Random,
    max_delay: int = MAX_DELAY,
) -> Contact:
    """
    Check the ball against the walls and the paddle, redirecting it on bounce.

    Checks fire one cell inside each edge so the ball never overwrites a
    wall. The horizontal check runs second, so at a corner cell its outcome
    replaces the vertical one (a miss at the top-right corner is a LOSE even
    though the top wall also bounced the ball).

    :param ball: Ball to check; direction and delays change on bounce.
    :type ball: Ball

    :param paddle: The player's paddle.
    :type paddle: Paddle

    :param court: Court the ball plays in.
    :type court: Court

    :param rng: Random source for the new delays after a paddle hit.
    :type rng: random.Random

    :param max_delay: Exclusive upper bound for the vertical delay.
    :type max_delay: int

    :return: What happened.
    :rtype: Contact
    """
    if not court.contains(ball.y, ball.x):
        logger.error(
            f"Ball at (row={ball.y}, col={ball.x}) is outside court {court}"
        )
        raise BallOutOfBoundsError(ball.y, ball.x)

    result = Contact.NO_CONTACT

    if ball.y == court.top + 1:
        ball.y_dir = 1
        result = Contact.BOUNCE
    elif ball.y == court.bottom - 1:
        ball.y_dir = -1
        result = Contact.BOUNCE

    if ball.x == court.left + 1:
        ball.x_dir = 1
        result = Contact.BOUNCE
    elif ball.x == court.right - 1:
        if paddle.contact(ball.y):
            # new speed on every paddle hit, horizontal stays the faster axis
            ball.x_delay, ball.y_delay = random_delays(rng, max_delay)
            ball.x_dir = -1
            result = Contact.BOUNCE
        else:
            result = Contact.LOSE

    return result
