"""
Court entity for Solo Bounce.
"""

from __future__ import annotations

from dataclasses import dataclass

from solo_bounce.constants import BORDER


@dataclass(frozen=True)
class Court:
    """
    Playable rectangle. The edges are the rows/columns the walls are drawn on;
    the ball lives strictly inside them.

    :ivar top (int): Row of the top wall.
    :ivar right (int): Column of the right edge (where the paddle sits).
    :ivar bottom (int): Row of the bottom wall.
    :ivar left (int): Column of the left wall.
    """

    top: int
    right: int
    bottom: int
    left: int

    @classmethod
    def from_screen(cls, height: int, width: int, border: int = BORDER):
        """
        Build the court for a screen of the given size.

        :param height: Screen height in rows.
        :type height: int

        :param width: Screen width in columns.
        :type width: int

        :param border: Margin between the screen edge and the court.
        :type border: int

        :return: The court for that screen.
        :rtype: Court
        """
        # -1 because rows/columns are 0-indexed
        return cls(
            top=border,
            right=width - border - 1,
            bottom=height - border - 1,
            left=border,
        )

    @property
    def inner_height(self) -> int:
        """Rows between the top and bottom walls."""
        return self.bottom - self.top - 1

    def contains(self, y: int, x: int) -> bool:
        """Whether (y, x) lies on or inside the court edges."""
        return self.top <= y <= self.bottom and self.left <= x <= self.right
