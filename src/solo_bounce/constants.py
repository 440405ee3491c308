"""
Game constants for Solo Bounce.
"""

from __future__ import annotations

# Simulation
TICKS_PER_SEC = 50  # affects speed
MAX_DELAY = 10  # slowest axis: one step every MAX_DELAY ticks
NUM_BALLS = 3

# Court layout
BORDER = 3
MIN_LINES = 11  # court is at least 3 rows tall -> paddle at least 1 row
MIN_COLS = 40

# Symbols
BALL_SYMBOL = "O"
PADDLE_SYMBOL = "#"
ROW_SYMBOL = "-"
COL_SYMBOL = "|"
BLANK = " "

# Presentation
LIVES_FORMAT = "BALLS LEFT: {:2d}"
TIME_FORMAT = "TOTAL TIME: {:02d}:{:02d}"
EXIT_FORMAT = "You lasted {:02d}:{:02d}"
EXIT_MESSAGE_SECONDS = 2.0

# Input
ESC_DELAY = 0.01  # seconds to wait for the rest of an escape sequence
