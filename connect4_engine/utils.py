"""
utils.py - Constants, enumerations and helpers shared by the engine

This module holds the canonical board dimensions, the player/result/outcome
enumerations and the ASCII renderer used by the terminal adapter.
"""

from enum import Enum, auto
from typing import Dict, Optional, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of pieces in a row to win


class Player(Enum):
    """Enumeration representing players and cell states."""
    EMPTY = 0
    ONE = 1    # First player
    TWO = 2    # Second player

    def other(self) -> 'Player':
        """Get the other player."""
        if self == Player.ONE:
            return Player.TWO
        elif self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return " "
        elif self == Player.ONE:
            return "X"
        else:
            return "O"


class GameResult(Enum):
    """Enumeration representing the game status."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @property
    def winner(self) -> Optional[Player]:
        if self == GameResult.PLAYER_ONE_WIN:
            return Player.ONE
        if self == GameResult.PLAYER_TWO_WIN:
            return Player.TWO
        return None

    @staticmethod
    def win_for(player: Player) -> 'GameResult':
        if player == Player.ONE:
            return GameResult.PLAYER_ONE_WIN
        if player == Player.TWO:
            return GameResult.PLAYER_TWO_WIN
        raise ValueError(f"No win result for {player!r}")


class OutcomeKind(Enum):
    """What happened on a single drop attempt."""
    CONTINUE = auto()
    WIN = auto()
    TIE = auto()
    REJECTED = auto()


class RejectReason(Enum):
    """Why a drop attempt was refused."""
    GAME_OVER = auto()
    INVALID_COLUMN = auto()
    COLUMN_FULL = auto()


class Direction(Enum):
    """Line shapes checked for four-in-a-row."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# Step (row, col) from one cell of a line to the next, row 0 being the top
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art with column numbers underneath.

    Args:
        grid: A (rows, cols) matrix of Player values

    Returns:
        ASCII representation of the board
    """
    rows, cols = grid.shape
    border = "|" + "-" * (cols * 2 - 1) + "|"

    result = [border]
    for row in range(rows):
        cells = [str(Player(int(grid[row, col]))) for col in range(cols)]
        result.append("|" + " ".join(cells) + "|")
    result.append(border)

    # Columns past 9 only show their last digit
    result.append("|" + " ".join(str(col % 10) for col in range(cols)) + "|")

    return "\n".join(result)
