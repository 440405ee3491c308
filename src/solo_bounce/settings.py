"""
Runtime settings for Solo Bounce.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from solo_bounce.constants import (
    BORDER,
    MAX_DELAY,
    MIN_COLS,
    MIN_LINES,
    NUM_BALLS,
    TICKS_PER_SEC,
)

ENV_PREFIX = "SOLO_BOUNCE_"


@dataclass
class GameSettings:
    """
    Tunable settings for one game session.

    - ticks_per_sec: timer frequency; the clock and the ball both run on it.
    - lives: number of balls served before game over.
    - max_delay: upper bound (exclusive) for the vertical step delay.
    - seed: optional RNG seed for reproducible serves.
    """

    ticks_per_sec: int = TICKS_PER_SEC
    lives: int = NUM_BALLS
    max_delay: int = MAX_DELAY
    border: int = BORDER
    min_lines: int = MIN_LINES
    min_cols: int = MIN_COLS
    seed: int | None = None

    @property
    def period_ms(self) -> float:
        """Timer period in milliseconds."""
        return 1000 / self.ticks_per_sec

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "GameSettings":
        """
        Build settings from ``SOLO_BOUNCE_*`` environment variables.

        :param environ: Mapping to read from, defaults to ``os.environ``.
        :type environ: dict[str, str], optional

        :return: Settings with any overrides applied.
        :rtype: GameSettings
        """
        environ = os.environ if environ is None else environ
        seed = environ.get(f"{ENV_PREFIX}SEED")
        return cls(
            ticks_per_sec=int(
                environ.get(f"{ENV_PREFIX}TICKS_PER_SEC", TICKS_PER_SEC)
            ),
            lives=int(environ.get(f"{ENV_PREFIX}LIVES", NUM_BALLS)),
            seed=int(seed) if seed else None,
        )
