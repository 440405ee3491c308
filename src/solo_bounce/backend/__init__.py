"""
Rendering and keyboard collaborators for Solo Bounce.

The engine only talks to these protocols; ``terminal`` provides the blessed
implementation used by the game.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from mini_arcade_core.backend.keys import Key

if TYPE_CHECKING:
    from solo_bounce.entities.court import Court


class Surface(Protocol):
    """Character-cell output used by the engine."""

    def draw_char(self, row: int, col: int, symbol: str):
        """Draw ``symbol`` at (row, col)."""

    def erase_cell(self, row: int, col: int):
        """Blank the cell at (row, col)."""

    def playable_rect(self) -> tuple[int, int, int, int]:
        """Court bounds as (top, right, bottom, left)."""

    def draw_court(self, court: Court):
        """Draw the walls of ``court``."""

    def report_lives(self, lives: int):
        """Show the number of balls left."""

    def report_elapsed_time(self, minutes: int, seconds: int):
        """Show the elapsed play time."""

    def flush(self):
        """Push pending output to the screen."""


class Keyboard(Protocol):
    """Non-blocking key source the scheduler can watch."""

    def fileno(self) -> int:
        """File descriptor that becomes readable when keys arrive."""

    def read_keys(self) -> list[Key]:
        """Every key available right now, without blocking."""


__all__ = ["Keyboard", "Surface"]
