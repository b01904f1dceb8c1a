"""
engine.py - Turn sequencing and game termination for Connect Four

GameEngine is the only writer of its GridState. Each drop either applies
completely (piece placed, win/tie evaluated, turn advanced or frozen) or is
rejected with no change, and the caller receives a MoveOutcome describing
which of those happened.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from connect4_engine.debug import debug
from connect4_engine.game.board import GridState
from connect4_engine.game.rules import check_for_win, check_win_at_position, find_winning_line
from connect4_engine.utils import (ROWS, COLS, Player, GameResult, OutcomeKind,
                                   RejectReason)


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of a single drop attempt.

    For CONTINUE, player is the player to move next. For WIN, player is the
    winner. REJECTED outcomes carry a reason and no position.
    """
    kind: OutcomeKind
    player: Optional[Player] = None
    reason: Optional[RejectReason] = None
    position: Optional[Tuple[int, int]] = None

    @classmethod
    def continued(cls, next_player: Player, position: Tuple[int, int]) -> 'MoveOutcome':
        return cls(OutcomeKind.CONTINUE, player=next_player, position=position)

    @classmethod
    def win(cls, player: Player, position: Tuple[int, int]) -> 'MoveOutcome':
        return cls(OutcomeKind.WIN, player=player, position=position)

    @classmethod
    def tie(cls, position: Tuple[int, int]) -> 'MoveOutcome':
        return cls(OutcomeKind.TIE, position=position)

    @classmethod
    def rejected(cls, reason: RejectReason) -> 'MoveOutcome':
        return cls(OutcomeKind.REJECTED, reason=reason)

    @property
    def accepted(self) -> bool:
        return self.kind != OutcomeKind.REJECTED


class GameEngine:
    """
    Runs one game of Connect Four.

    Args:
        width: Number of columns
        height: Number of rows
        incremental_win_check: Only check lines through the placed piece
            instead of rescanning the whole board after every drop
    """

    def __init__(self, width: int = COLS, height: int = ROWS,
                 incremental_win_check: bool = False):
        self._grid = GridState(width, height)
        self._current_player = Player.ONE
        self._status = GameResult.IN_PROGRESS
        self._incremental = incremental_win_check
        self.moves_accepted = 0
        self.last_move: Optional[Tuple[int, int]] = None
        debug.debug(f"New {width}x{height} game", "engine")

    @property
    def grid(self) -> GridState:
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def current_player(self) -> Player:
        return self._current_player

    def current_status(self) -> GameResult:
        return self._status

    def cell_at(self, row: int, col: int) -> Player:
        return self._grid.cell_at(row, col)

    def is_valid_column(self, col) -> bool:
        if isinstance(col, bool) or not isinstance(col, (int, np.integer)):
            return False
        return 0 <= col < self._grid.width

    def valid_moves(self) -> List[int]:
        if self._status.is_game_over():
            return []
        return self._grid.open_columns()

    def drop_piece(self, col: int) -> MoveOutcome:
        """
        Drop the current player's piece into a column.

        Args:
            col: Column index (0-indexed)

        Returns:
            The outcome of the attempt
        """
        if self._status.is_game_over():
            return self._reject(RejectReason.GAME_OVER, col)
        if not self.is_valid_column(col):
            return self._reject(RejectReason.INVALID_COLUMN, col)

        col = int(col)
        row = self._grid.find_landing_row(col)
        if row is None:
            return self._reject(RejectReason.COLUMN_FULL, col)

        player = self._current_player
        self._grid.place(row, col, player)
        self.moves_accepted += 1
        self.last_move = (row, col)
        debug.debug(f"Player {player.name} dropped into column {col}, landed on row {row}", "engine")

        # Win must be checked before tie: the last cell can complete a line
        debug.start_timer("win_check")
        won = self._has_won(row, col, player)
        debug.end_timer("win_check", "engine")

        if won:
            self._status = GameResult.win_for(player)
            debug.info(f"Player {player.name} wins after move at {self.last_move}", "engine")
            return MoveOutcome.win(player, self.last_move)

        if self._grid.is_full():
            self._status = GameResult.DRAW
            debug.info("Game ends in a draw", "engine")
            return MoveOutcome.tie(self.last_move)

        self._current_player = player.other()
        return MoveOutcome.continued(self._current_player, self.last_move)

    def _has_won(self, row: int, col: int, player: Player) -> bool:
        if self._incremental:
            return check_win_at_position(self._grid.cells, row, col)
        return check_for_win(self._grid.cells, player)

    def _reject(self, reason: RejectReason, col) -> MoveOutcome:
        debug.debug(f"Rejected drop into column {col!r}: {reason.name}", "engine")
        return MoveOutcome.rejected(reason)

    def winning_line(self) -> List[Tuple[int, int]]:
        """Coordinates of the line that ended the game, or [] if nobody has won."""
        winner = self._status.winner
        if winner is None:
            return []
        return find_winning_line(self._grid.cells, winner)

    def snapshot(self) -> np.ndarray:
        return self._grid.snapshot()

    def render(self) -> str:
        return self._grid.render()


def new_game(width: int = COLS, height: int = ROWS, **kwargs) -> GameEngine:
    """Start a fresh game with an empty grid and player one to move."""
    return GameEngine(width, height, **kwargs)
