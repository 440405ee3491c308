"""
Paddle entity for Solo Bounce.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from solo_bounce.constants import PADDLE_SYMBOL
from solo_bounce.entities.court import Court


@dataclass
class Paddle:
    """
    Vertical paddle on the right edge of the court.

    :ivar top (int): First row covered by the paddle.
    :ivar bottom (int): Last row covered by the paddle (inclusive).
    :ivar column (int): Column the paddle is drawn on.
    :ivar min_top (int): The paddle's top never reaches this row.
    :ivar max_bottom (int): The paddle's bottom never reaches this row.
    :ivar symbol (str): Character used to draw the paddle.
    """

    top: int
    bottom: int
    column: int
    min_top: int
    max_bottom: int
    symbol: str = PADDLE_SYMBOL

    @classmethod
    def create(cls, court: Court, height_divisor: int = 3) -> "Paddle":
        """
        Create a paddle a third of the court tall, centered vertically.

        :param court: Court the paddle plays on.
        :type court: Court

        :param height_divisor: Court height is divided by this.
        :type height_divisor: int

        :return: New paddle.
        :rtype: Paddle
        """
        height = max(1, court.inner_height // height_divisor)
        # screen midpoint: the court sits `border` rows in from both edges
        middle = (court.top + court.bottom + 1) // 2
        top = middle - height // 2
        return cls(
            top=top,
            bottom=top + height - 1,
            column=court.right,
            min_top=court.top,
            max_bottom=court.bottom,
        )

    @property
    def height(self) -> int:
        """Rows covered by the paddle."""
        return self.bottom - self.top + 1

    def cells(self) -> Iterator[int]:
        """Rows currently covered, top to bottom."""
        return iter(range(self.top, self.bottom + 1))

    def move_up(self) -> bool:
        """
        Move one row up if there is room.

        :return: Whether the paddle moved.
        :rtype: bool
        """
        if self.top - 1 > self.min_top:
            self.top -= 1
            self.bottom -= 1
            return True
        return False

    def move_down(self) -> bool:
        """
        Move one row down if there is room.

        :return: Whether the paddle moved.
        :rtype: bool
        """
        if self.bottom + 1 < self.max_bottom:
            self.top += 1
            self.bottom += 1
            return True
        return False

    def contact(self, y: int) -> bool:
        """Whether row ``y`` is covered by the paddle."""
        return self.top <= y <= self.bottom
