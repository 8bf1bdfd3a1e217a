# src/tictactoe/config.py

from __future__ import annotations

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Players
HUMAN_NAME = "YOU"
HUMAN_MARK = "X"
COMPUTER_NAME = "Computer"
COMPUTER_MARK = "O"

# Terminal scores, seen from the computer's side (no depth discount)
SCORE_WIN = 1
SCORE_LOSS = -1
SCORE_DRAW = 0

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

LOG_LEVEL = "WARNING"
