"""
Play-time clock for Solo Bounce.
"""

from __future__ import annotations

from dataclasses import dataclass

from solo_bounce.constants import TICKS_PER_SEC

MINUTE = 60


@dataclass
class Clock:
    """
    Tick counter converted to minutes and seconds of play.

    :ivar ticks_per_second (int): Timer ticks that make up one second.
    :ivar minutes (int): Whole minutes elapsed (unbounded).
    :ivar seconds (int): Seconds within the current minute, 0-59.
    :ivar ticks (int): Ticks within the current second.
    """

    ticks_per_second: int = TICKS_PER_SEC
    minutes: int = 0
    seconds: int = 0
    ticks: int = 0

    def reset(self):
        """Zero the clock."""
        self.minutes = 0
        self.seconds = 0
        self.ticks = 0

    def tick(self) -> bool:
        """
        Advance by one timer tick.

        :return: True when a full second has elapsed on this tick.
        :rtype: bool
        """
        self.ticks += 1
        if self.ticks < self.ticks_per_second:
            return False

        self.ticks = 0
        self.seconds += 1
        if self.seconds == MINUTE:
            self.seconds = 0
            self.minutes += 1
        return True

    def elapsed(self) -> tuple[int, int]:
        """Elapsed (minutes, seconds)."""
        return self.minutes, self.seconds

    def format_elapsed(self) -> str:
        """Elapsed time as MM:SS."""
        return f"{self.minutes:02d}:{self.seconds:02d}"
