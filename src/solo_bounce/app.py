"""
Main application for Solo Bounce.
"""

from __future__ import annotations

import argparse
import asyncio
import signal
import sys

from blessed import Terminal
from mini_arcade_core.utils import logger

from solo_bounce.backend.terminal import TerminalKeyboard, TerminalSurface
from solo_bounce.errors import (
    SoloBounceError,
    TerminalResizedError,
    TerminalTooSmallError,
)
from solo_bounce.runtime.scheduler import GameLoop
from solo_bounce.scenes.pong import PongScene
from solo_bounce.settings import GameSettings


def parse_args(argv: list[str] | None = None) -> GameSettings:
    """
    Build settings from the environment, then apply command line overrides.

    :param argv: Arguments without the program name; defaults to sys.argv.
    :type argv: list[str], optional

    :return: Session settings.
    :rtype: GameSettings
    """
    settings = GameSettings.from_env()

    parser = argparse.ArgumentParser(
        prog="solo-bounce",
        description="Keep the ball in play (k/m or arrows move, Q quits).",
    )
    parser.add_argument(
        "--lives", type=int, default=settings.lives, help="balls per game"
    )
    parser.add_argument(
        "--seed", type=int, default=settings.seed, help="seed for serves"
    )
    parser.add_argument(
        "--tps",
        type=int,
        default=settings.ticks_per_sec,
        help="timer ticks per second",
    )
    args = parser.parse_args(argv)

    if args.lives < 1:
        parser.error("--lives must be at least 1")
    if args.tps < 1:
        parser.error("--tps must be at least 1")

    settings.lives = args.lives
    settings.seed = args.seed
    settings.ticks_per_sec = args.tps
    return settings


def check_min_size(term: Terminal, settings: GameSettings):
    """Raise TerminalTooSmallError if the game cannot fit."""
    if term.height < settings.min_lines or term.width < settings.min_cols:
        raise TerminalTooSmallError(settings.min_cols, settings.min_lines)


async def play(
    scene: PongScene, keyboard: TerminalKeyboard, settings: GameSettings
):
    """
    Run one game until game over, quit, or a resize.

    SIGINT is ignored while playing; SIGWINCH ends the game.
    """
    game_loop = GameLoop(scene, keyboard, period_ms=settings.period_ms)
    resized = False

    def on_resize():
        nonlocal resized
        resized = True
        game_loop.stop("resized")

    loop = asyncio.get_running_loop()
    loop.add_signal_handler(
        signal.SIGINT, lambda: logger.info("Ignoring SIGINT during play")
    )
    loop.add_signal_handler(signal.SIGWINCH, on_resize)
    try:
        await game_loop.run()
    finally:
        loop.remove_signal_handler(signal.SIGINT)
        loop.remove_signal_handler(signal.SIGWINCH)

    if resized:
        raise TerminalResizedError()


def run(argv: list[str] | None = None):
    """
    Main entry point for Solo Bounce.

    - Checks the terminal is large enough.
    - Builds the court from the terminal size and serves the first ball.
    - Runs the tick/keyboard loop until the last ball is lost or Q is pressed.
    - Shows the final play time, restores the terminal and exits.
    """
    settings = parse_args(argv)
    term = Terminal()
    status = 0

    logger.info("Starting Solo Bounce...")
    try:
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            check_min_size(term, settings)
            surface = TerminalSurface(term, border=settings.border)
            scene = PongScene(surface, settings=settings)
            scene.on_enter()

            asyncio.run(play(scene, TerminalKeyboard(term), settings))

            surface.show_exit_message(*scene.world.clock.elapsed())
    except MemoryError:
        # terminal is already restored by the context managers
        print(
            "solo-bounce: Couldn't allocate memory for the game.",
            file=sys.stderr,
        )
        status = 1
    except SoloBounceError as exc:
        logger.error(f"{type(exc).__name__}: {exc}")
        print(exc, file=sys.stderr)
        status = exc.exit_status

    sys.exit(status)


if __name__ == "__main__":
    run()
