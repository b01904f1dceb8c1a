"""
board.py - Grid storage and the drop rule for Connect Four

GridState owns the cell matrix. It knows where a piece dropped into a column
would land and how to record it, but nothing about turns or winning; the
engine is its only writer.
"""

from typing import List, Optional

import numpy as np

from connect4_engine.debug import debug
from connect4_engine.utils import ROWS, COLS, Player, render_board_ascii


class GridState:
    """
    A fixed-size Connect Four grid.

    Cells are indexed [row, col] with row 0 at the top. Each cell holds
    Player.EMPTY.value or the value of the player occupying it.
    """

    def __init__(self, width: int = COLS, height: int = ROWS):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
                raise ValueError(f"Grid {name} must be a positive integer, got {value!r}")

        self.width = int(width)
        self.height = int(height)
        self.cells = np.full((self.height, self.width), Player.EMPTY.value, dtype=np.int8)
        debug.debug(f"Created {self.width}x{self.height} grid", "board")

    def find_landing_row(self, col: int) -> Optional[int]:
        """
        Find the row a piece dropped into a column would settle in.

        Args:
            col: Column index in [0, width)

        Returns:
            The lowest empty row index, or None if the column is full
        """
        for row in range(self.height - 1, -1, -1):
            if self.cells[row, col] == Player.EMPTY.value:
                return row
        return None

    def place(self, row: int, col: int, player: Player) -> None:
        """Record a piece; the cell must be empty."""
        if self.cells[row, col] != Player.EMPTY.value:
            raise ValueError(f"Cell ({row}, {col}) is already occupied")
        debug.trace(f"Placing {player.name} at ({row}, {col})", "board")
        self.cells[row, col] = player.value

    def is_full(self) -> bool:
        return bool(np.all(self.cells != Player.EMPTY.value))

    def cell_at(self, row: int, col: int) -> Player:
        return Player(int(self.cells[row, col]))

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells != Player.EMPTY.value))

    def open_columns(self) -> List[int]:
        """Columns that still have at least one empty cell."""
        return [col for col in range(self.width)
                if self.cells[0, col] == Player.EMPTY.value]

    def snapshot(self) -> np.ndarray:
        """Read-only copy of the cell matrix."""
        view = self.cells.copy()
        view.flags.writeable = False
        return view

    def render(self) -> str:
        return render_board_ascii(self.cells)

    def __str__(self) -> str:
        return self.render()
