"""
blessed-backed terminal surface and keyboard.
"""

from __future__ import annotations

import sys
import time

from blessed import Terminal
from blessed.keyboard import Keystroke
from mini_arcade_core.backend.keys import Key

from solo_bounce.constants import (
    BLANK,
    BORDER,
    COL_SYMBOL,
    ESC_DELAY,
    EXIT_FORMAT,
    EXIT_MESSAGE_SECONDS,
    LIVES_FORMAT,
    ROW_SYMBOL,
    TIME_FORMAT,
)
from solo_bounce.entities.court import Court

# classic k/m/Q layout plus w/s and q
KEY_BINDINGS: dict[str, Key] = {
    "k": Key.UP,
    "w": Key.UP,
    "m": Key.DOWN,
    "s": Key.DOWN,
    "Q": Key.ESCAPE,
    "q": Key.ESCAPE,
}


def translate(term: Terminal, keystroke: Keystroke) -> Key | None:
    """
    Map a blessed keystroke to a game key.

    :param term: Terminal the keystroke came from.
    :type term: Terminal

    :param keystroke: Keystroke read with ``inkey``.
    :type keystroke: Keystroke

    :return: The matching key, or None for unbound keys.
    :rtype: Key | None
    """
    if keystroke.is_sequence:
        return {
            term.KEY_UP: Key.UP,
            term.KEY_DOWN: Key.DOWN,
            term.KEY_ESCAPE: Key.ESCAPE,
        }.get(keystroke.code)
    return KEY_BINDINGS.get(str(keystroke))


class TerminalSurface:
    """
    Surface drawing on a blessed terminal.

    Writes are buffered and sent in one go by ``flush`` so a tick never shows
    half a frame.
    """

    def __init__(self, term: Terminal, border: int = BORDER, stream=None):
        self.term = term
        self.border = border
        self.stream = stream or sys.stdout
        self._court: Court | None = None
        self._pending: list[str] = []

    def _write_at(self, row: int, col: int, text: str):
        self._pending.append(self.term.move_yx(row, col) + text)

    def draw_char(self, row: int, col: int, symbol: str):
        self._write_at(row, col, symbol)

    def erase_cell(self, row: int, col: int):
        self._write_at(row, col, BLANK)

    def playable_rect(self) -> tuple[int, int, int, int]:
        court = Court.from_screen(
            self.term.height, self.term.width, self.border
        )
        return court.top, court.right, court.bottom, court.left

    def draw_court(self, court: Court):
        """Top and bottom walls span the court; the left wall joins them."""
        self._court = court
        row = ROW_SYMBOL * (court.right - court.left + 1)
        self._write_at(court.top, court.left, row)
        for y in range(court.top + 1, court.bottom):
            self._write_at(y, court.left, COL_SYMBOL)
        self._write_at(court.bottom, court.left, row)

    def report_lives(self, lives: int):
        if self._court is None:
            return
        self._write_at(
            self._court.top - 1, self._court.left, LIVES_FORMAT.format(lives)
        )

    def report_elapsed_time(self, minutes: int, seconds: int):
        if self._court is None:
            return
        text = TIME_FORMAT.format(minutes, seconds)
        self._write_at(
            self._court.top - 1, self._court.right - len(text), text
        )

    def park_cursor(self):
        """Move the cursor out of the way, bottom-right."""
        self._write_at(self.term.height - 1, self.term.width - 1, "")

    def flush(self):
        if not self._pending:
            return
        self.park_cursor()
        self.stream.write("".join(self._pending))
        self.stream.flush()
        self._pending.clear()

    def show_exit_message(
        self, minutes: int, seconds: int, hold: float = EXIT_MESSAGE_SECONDS
    ):
        """
        Show the final play time centered in reverse video, then hold it.

        :param minutes: Minutes played.
        :type minutes: int

        :param seconds: Seconds played.
        :type seconds: int

        :param hold: Seconds to keep the message on screen.
        :type hold: float
        """
        text = EXIT_FORMAT.format(minutes, seconds)
        row = self.term.height // 2
        col = max(0, self.term.width // 2 - len(text) // 2)
        self._write_at(row, col, self.term.reverse(text))
        self.flush()
        time.sleep(hold)


class TerminalKeyboard:
    """Keyboard reading from the terminal's input stream in cbreak mode."""

    def __init__(
        self, term: Terminal, stream=None, esc_delay: float = ESC_DELAY
    ):
        self.term = term
        self.stream = stream or sys.stdin
        # a lone ESC must not stall the tick timer
        self.esc_delay = esc_delay

    def fileno(self) -> int:
        return self.stream.fileno()

    def read_keys(self) -> list[Key]:
        keys = []
        keystroke = self._next()
        while keystroke:
            key = translate(self.term, keystroke)
            if key is not None:
                keys.append(key)
            keystroke = self._next()
        return keys

    def _next(self) -> Keystroke:
        return self.term.inkey(timeout=0, esc_delay=self.esc_delay)
