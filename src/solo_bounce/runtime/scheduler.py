"""
Single-threaded scheduler multiplexing the tick timer and keyboard input.

Both event sources run on one asyncio loop and every handler runs to
completion before the next event is dispatched, so the scene's state has a
single owner and needs no lock. A key press is handled as soon as the loop
sees it; it never waits for the next tick.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Protocol

from mini_arcade_core.backend.keys import Key
from mini_arcade_core.utils import logger

from solo_bounce.backend import Keyboard
from solo_bounce.errors import KeyboardUnavailableError


class Scene(Protocol):
    """What the loop needs from a scene."""

    @property
    def finished(self) -> bool:
        """Whether the scene wants the loop to stop."""

    def tick(self):
        """One timer tick."""

    def handle_key(self, key: Key):
        """One key press."""


class RecurringTimer:
    """
    Fixed-period timer on an asyncio loop.

    Deadlines are kept on a fixed cadence from the start time. If the loop
    falls behind, the missed fires are coalesced into one instead of being
    replayed back to back.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self.loop = loop
        self.period = 0.0
        self.fired = 0
        self.coalesced = 0
        self._callback: Callable[[], None] | None = None
        self._deadline = 0.0
        self._handle: asyncio.TimerHandle | None = None

    @property
    def active(self) -> bool:
        """Whether a fire is scheduled."""
        return self._handle is not None

    def start(self, period_ms: float, callback: Callable[[], None]):
        """
        Call ``callback`` every ``period_ms`` milliseconds until cancelled.

        :param period_ms: Period in milliseconds; must be positive.
        :type period_ms: float

        :param callback: Called with no arguments on each fire.
        :type callback: Callable[[], None]
        """
        if period_ms <= 0:
            raise ValueError(f"Timer period must be positive, got {period_ms}")

        self.cancel()
        self.period = period_ms / 1000
        self._callback = callback
        self._deadline = self.loop.time() + self.period
        self._handle = self.loop.call_at(self._deadline, self._fire)

    def cancel(self):
        """Stop the timer; no fire happens after this returns."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self):
        now = self.loop.time()
        self._deadline += self.period
        if self._deadline <= now:
            missed = int((now - self._deadline) // self.period) + 1
            self.coalesced += missed
            self._deadline += missed * self.period
        self._handle = self.loop.call_at(self._deadline, self._fire)

        self.fired += 1
        self._callback()


class GameLoop:
    """
    Drive a scene: ``scene.tick()`` every period, ``scene.handle_key()`` for
    every key as it arrives. Stops when the scene is finished, on ``stop()``,
    or when a handler raises (the error is re-raised from ``run()``).
    """

    def __init__(self, scene: Scene, keyboard: Keyboard, *, period_ms: float):
        """
        :param scene: Scene to drive.
        :type scene: Scene

        :param keyboard: Key source watched for readability.
        :type keyboard: Keyboard

        :param period_ms: Tick period in milliseconds.
        :type period_ms: float
        """
        self.scene = scene
        self.keyboard = keyboard
        self.period_ms = period_ms
        self.timer: RecurringTimer | None = None
        self.stop_reason: str | None = None
        self._done: asyncio.Event | None = None
        self._error: BaseException | None = None

    @property
    def running(self) -> bool:
        """Whether ``run()`` is active and has not been asked to stop."""
        return self._done is not None and not self._done.is_set()

    async def run(self):
        """
        Run until the scene finishes or ``stop()`` is called.

        The timer and the keyboard reader are both torn down before this
        returns, whatever the reason for stopping.
        """
        loop = asyncio.get_running_loop()
        self._done = asyncio.Event()
        self._error = None
        self.stop_reason = None

        fd = self.keyboard.fileno()
        self.timer = RecurringTimer(loop)
        reading = False

        try:
            try:
                loop.add_reader(fd, self._on_input)
            except (OSError, ValueError) as exc:
                self.stop("error")
                raise KeyboardUnavailableError(fd, exc) from exc
            reading = True

            self.timer.start(self.period_ms, self._on_timer)
            logger.info(
                f"Game loop started, tick every {self.period_ms:.1f} ms"
            )
            await self._done.wait()
        finally:
            self.timer.cancel()
            if reading:
                loop.remove_reader(fd)
            logger.info(
                f"Game loop stopped ({self.stop_reason}) after "
                f"{self.timer.fired} ticks, {self.timer.coalesced} coalesced"
            )

        if self._error is not None:
            raise self._error

    def stop(self, reason: str = "stopped"):
        """Ask the loop to stop after the current handler."""
        if self._done is None or self._done.is_set():
            return
        self.stop_reason = reason
        self._done.set()

    def _dispatch(self, handler: Callable, *args):
        if not self.running:
            return

        try:
            handler(*args)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.exception(f"Handler {handler.__name__} failed: {exc}")
            self._error = exc
            self.stop("error")
            return

        if self.scene.finished:
            self.stop("finished")

    def _on_timer(self):
        self._dispatch(self.scene.tick)

    def _on_input(self):
        try:
            keys = self.keyboard.read_keys()
        except OSError as exc:
            logger.exception(f"Reading the keyboard failed: {exc}")
            self._error = exc
            self.stop("error")
            return

        for key in keys:
            self._dispatch(self.scene.handle_key, key)
