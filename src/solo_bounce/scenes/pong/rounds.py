"""
Serve / lose / game-over transitions.
"""

from __future__ import annotations

import random
from enum import Enum

from mini_arcade_core.utils import logger

from solo_bounce.backend import Surface
from solo_bounce.constants import MAX_DELAY
from solo_bounce.entities.ball import Ball
from solo_bounce.entities.court import Court
from solo_bounce.entities.paddle import Paddle
from solo_bounce.scenes.pong.collision import Contact, evaluate


class RoundState(Enum):
    """Where the game is in its serve/play cycle."""

    SERVING = "serving"
    IN_PLAY = "in_play"
    GAME_OVER = "game_over"


class RoundCoordinator:
    """
    Runs the collision check after every move and decides what comes next.

    SERVING -> IN_PLAY on serve, IN_PLAY -> SERVING on a miss with balls left,
    IN_PLAY -> GAME_OVER on a miss with none left. GAME_OVER is final.
    """

    def __init__(
        self,
        court: Court,
        surface: Surface,
        rng: random.Random,
        *,
        max_delay: int = MAX_DELAY,
    ):
        """
        :param court: Court the game is played on.
        :type court: Court

        :param surface: Where the ball is drawn and lives are reported.
        :type surface: Surface

        :param rng: Random source shared with the collision engine.
        :type rng: random.Random

        :param max_delay: Exclusive upper bound for the vertical delay.
        :type max_delay: int
        """
        self.court = court
        self.surface = surface
        self.rng = rng
        self.max_delay = max_delay
        self.state = RoundState.SERVING
        self.serves = 0

    @property
    def game_over(self) -> bool:
        """Whether the last ball has been lost."""
        return self.state is RoundState.GAME_OVER

    def serve(self, ball: Ball):
        """Put a fresh ball in play and show it."""
        if self.game_over:
            return

        ball.reinitialize(self.court, self.rng, self.max_delay)
        self.serves += 1
        self.state = RoundState.IN_PLAY
        logger.info(
            f"Serve #{self.serves} at (row={ball.y}, col={ball.x}), "
            f"{ball.remaining} balls left"
        )

        self.surface.draw_char(ball.y, ball.x, ball.symbol)
        self.surface.report_lives(ball.remaining)

    def after_move(self, ball: Ball, paddle: Paddle) -> Contact:
        """
        Check for a collision after the ball or the paddle moved.

        :param ball: Ball in play.
        :type ball: Ball

        :param paddle: The player's paddle.
        :type paddle: Paddle

        :return: Collision outcome; NO_CONTACT once the game is over.
        :rtype: Contact
        """
        if self.state is not RoundState.IN_PLAY:
            return Contact.NO_CONTACT

        result = evaluate(ball, paddle, self.court, self.rng, self.max_delay)
        if result is Contact.BOUNCE:
            logger.debug(
                f"Bounce at (row={ball.y}, col={ball.x}), "
                f"dir=({ball.y_dir}, {ball.x_dir})"
            )
        elif result is Contact.LOSE:
            # ball is past the paddle: take it off the court
            self.surface.erase_cell(ball.y, ball.x)
            if ball.remaining > 0:
                self.state = RoundState.SERVING
                self.serve(ball)
            else:
                self.state = RoundState.GAME_OVER
                logger.info("Last ball lost, game over")

        return result
