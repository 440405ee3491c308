"""
Exceptions raised by Solo Bounce.
"""

from __future__ import annotations


class SoloBounceError(Exception):
    """Base class for every error the game raises on purpose."""

    exit_status = 1


class TerminalTooSmallError(SoloBounceError):
    """The terminal is smaller than the minimum playable size."""

    def __init__(self, min_cols: int, min_lines: int):
        self.min_cols = min_cols
        self.min_lines = min_lines
        super().__init__(
            f"Terminal must be a minimum of {min_cols}x{min_lines}. "
            "Please resize and try again."
        )


class TerminalResizedError(SoloBounceError):
    """The terminal changed size while a game was running."""

    exit_status = 3

    def __init__(self):
        super().__init__("Please don't resize once the game has started.")


class BallOutOfBoundsError(SoloBounceError):
    """
    The ball left the court without passing through a collision check.

    The motion model moves at most one cell per axis per tick, so this only
    happens when the engine itself is broken.
    """

    exit_status = 2

    def __init__(self, y: int, x: int):
        self.y = y
        self.x = x
        super().__init__(f"Ball escaped the court at (row={y}, col={x})")


class KeyboardUnavailableError(SoloBounceError):
    """The keyboard input cannot be watched (e.g. stdin is a regular file)."""

    def __init__(self, fd: int, reason: Exception):
        self.fd = fd
        super().__init__(
            f"Cannot read keys from file descriptor {fd}: {reason}. "
            "Run the game from an interactive terminal."
        )
