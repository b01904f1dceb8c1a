"""
rules.py - Win and tie detection for Connect Four

Two win checks are provided. check_for_win rescans every line on the board
and is what the engine uses by default. check_win_at_position only looks at
lines through one cell and gives the same answer for the piece just placed.
"""

from typing import List, Tuple

import numpy as np

from connect4_engine.debug import debug
from connect4_engine.utils import CONNECT_N, DIRECTION_VECTORS, Player

Coord = Tuple[int, int]


def candidate_lines(y: int, x: int) -> List[List[Coord]]:
    """
    Build the four lines that start at (y, x).

    Lines are returned in Direction order: horizontal, vertical, diagonal
    down-right and diagonal down-left. Coordinates may fall off the board.
    """
    return [
        [(y + dy * i, x + dx * i) for i in range(CONNECT_N)]
        for dy, dx in DIRECTION_VECTORS.values()
    ]


def line_is_win(grid: np.ndarray, line: List[Coord], player: Player) -> bool:
    """True if every coordinate is on the board and holds the player's piece."""
    height, width = grid.shape
    return all(
        0 <= y < height and 0 <= x < width and grid[y, x] == player.value
        for y, x in line
    )


def find_winning_line(grid: np.ndarray, player: Player) -> List[Coord]:
    """
    Scan the whole board for a line owned by the player.

    Returns:
        Coordinates of the first qualifying line, or an empty list
    """
    height, width = grid.shape
    for y in range(height):
        for x in range(width):
            for line in candidate_lines(y, x):
                if line_is_win(grid, line, player):
                    return line
    return []


def check_for_win(grid: np.ndarray, player: Player) -> bool:
    """Full-board check for four of the player's pieces in a line."""
    return bool(find_winning_line(grid, player))


def check_win_at_position(grid: np.ndarray, row: int, col: int) -> bool:
    """
    Check whether the piece at (row, col) is part of a winning line.

    Args:
        grid: The game grid
        row: Row index of the piece
        col: Column index of the piece

    Returns:
        True if the piece completes CONNECT_N in any direction
    """
    height, width = grid.shape
    player_value = grid[row, col]
    if player_value == Player.EMPTY.value:
        return False

    for direction, (dr, dc) in DIRECTION_VECTORS.items():
        count = 1

        r, c = row + dr, col + dc
        while 0 <= r < height and 0 <= c < width and grid[r, c] == player_value:
            count += 1
            r += dr
            c += dc

        r, c = row - dr, col - dc
        while 0 <= r < height and 0 <= c < width and grid[r, c] == player_value:
            count += 1
            r -= dr
            c -= dc

        if count >= CONNECT_N:
            debug.trace(f"{direction.name} line through ({row}, {col})", "rules")
            return True

    return False
