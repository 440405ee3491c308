"""
Single-player pong scene: the systems that run on each tick and key press.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from mini_arcade_core.backend.keys import Key
from mini_arcade_core.utils import logger

from solo_bounce.backend import Surface
from solo_bounce.entities.ball import Ball
from solo_bounce.entities.clock import Clock
from solo_bounce.entities.court import Court
from solo_bounce.entities.paddle import Paddle
from solo_bounce.scenes.pong.models import (
    PongIntent,
    PongTickContext,
    PongWorld,
)
from solo_bounce.scenes.pong.rounds import RoundCoordinator
from solo_bounce.settings import GameSettings

INTENTS: dict[Key, PongIntent] = {
    Key.UP: PongIntent(move_paddle=-1),
    Key.DOWN: PongIntent(move_paddle=1),
    Key.ESCAPE: PongIntent(quit=True),
}


@dataclass
class ClockSystem:
    """
    Advance the play clock and refresh the time display each second.
    """

    name: str = "pong_clock"
    order: int = 10

    def step(self, ctx: PongTickContext):
        """Tick the clock."""
        clock = ctx.world.clock
        if clock.tick():
            ctx.surface.report_elapsed_time(*clock.elapsed())


@dataclass
class PaddleSystem:
    """
    Move the paddle one row based on intent.
    """

    name: str = "pong_paddle"
    order: int = 20

    def step(self, ctx: PongTickContext):
        """Move the paddle and redraw only the two cells that changed."""
        if ctx.intent is None or ctx.intent.move_paddle == 0:
            return

        paddle = ctx.world.paddle
        if ctx.intent.move_paddle < 0:
            vacated = paddle.bottom
            if paddle.move_up():
                ctx.surface.erase_cell(vacated, paddle.column)
                ctx.surface.draw_char(paddle.top, paddle.column, paddle.symbol)
        else:
            vacated = paddle.top
            if paddle.move_down():
                ctx.surface.erase_cell(vacated, paddle.column)
                ctx.surface.draw_char(
                    paddle.bottom, paddle.column, paddle.symbol
                )


@dataclass
class BallMovementSystem:
    """
    Step the ball along whichever axes are due this tick.
    """

    name: str = "pong_ball_move"
    order: int = 30

    def step(self, ctx: PongTickContext):
        """Move the ball and redraw it if it moved."""
        ball = ctx.world.ball
        row, col = ball.position
        if ball.advance():
            ctx.surface.erase_cell(row, col)
            ctx.surface.draw_char(ball.y, ball.x, ball.symbol)


@dataclass
class CollisionSystem:
    """
    Check for bounces and misses after anything moved.
    """

    name: str = "pong_collision"
    order: int = 40

    def step(self, ctx: PongTickContext):
        """Run the collision check through the round coordinator."""
        ctx.contact = ctx.rounds.after_move(ctx.world.ball, ctx.world.paddle)


class PongScene:
    """
    Owns the world and runs one pipeline per timer tick and one per key.

    Timer tick: clock -> ball -> collision.
    Key press: paddle -> collision.
    """

    def __init__(
        self,
        surface: Surface,
        *,
        settings: GameSettings | None = None,
        rng: random.Random | None = None,
    ):
        """
        :param surface: Where the game is drawn.
        :type surface: Surface

        :param settings: Session settings.
        :type settings: GameSettings, optional

        :param rng: Random source; seeded from ``settings.seed`` when omitted.
        :type rng: random.Random, optional
        """
        self.surface = surface
        self.settings = settings or GameSettings()
        self.rng = rng or random.Random(self.settings.seed)
        self.world: PongWorld | None = None
        self.rounds: RoundCoordinator | None = None

        self.tick_systems = sorted(
            [ClockSystem(), BallMovementSystem(), CollisionSystem()],
            key=lambda system: system.order,
        )
        self.input_systems = sorted(
            [PaddleSystem(), CollisionSystem()],
            key=lambda system: system.order,
        )

    def on_enter(self):
        """Build the world, draw the court and paddle, and serve."""
        court = Court(*self.surface.playable_rect())
        self.world = PongWorld(
            court=court,
            clock=Clock(ticks_per_second=self.settings.ticks_per_sec),
            ball=Ball.create(self.settings.lives),
            paddle=Paddle.create(court),
        )
        self.rounds = RoundCoordinator(
            court,
            self.surface,
            self.rng,
            max_delay=self.settings.max_delay,
        )
        logger.info(f"New game on court {court}")

        self.world.clock.reset()
        self.surface.draw_court(court)
        paddle = self.world.paddle
        for row in paddle.cells():
            self.surface.draw_char(row, paddle.column, paddle.symbol)
        self.surface.report_elapsed_time(*self.world.clock.elapsed())

        self.rounds.serve(self.world.ball)
        self.surface.flush()

    @property
    def finished(self) -> bool:
        """Game over or quit; no more ticks or keys are processed."""
        if self.world is None or self.rounds is None:
            return False
        return self.world.quit_requested or self.rounds.game_over

    def _run(self, systems, intent: PongIntent | None = None):
        ctx = PongTickContext(
            world=self.world,
            surface=self.surface,
            rounds=self.rounds,
            intent=intent,
        )
        for system in systems:
            system.step(ctx)
        self.surface.flush()
        return ctx

    def tick(self) -> PongTickContext | None:
        """
        Advance the simulation by one timer tick.

        :return: The tick's context, or None if the game has ended.
        :rtype: PongTickContext | None
        """
        if self.finished:
            return None
        return self._run(self.tick_systems)

    def handle_key(self, key: Key) -> PongTickContext | None:
        """
        React to one key press immediately.

        :param key: The key pressed.
        :type key: Key

        :return: The event's context, or None if nothing ran.
        :rtype: PongTickContext | None
        """
        if self.finished:
            return None

        intent = INTENTS.get(key)
        if intent is None:
            return None

        if intent.quit:
            logger.info("Quit requested")
            self.world.quit_requested = True
            return None

        return self._run(self.input_systems, intent)
