"""
connect4_engine.game - Core game mechanics for Connect Four

This package contains the grid representation, the win detection rules
and the engine that sequences turns.
"""

from connect4_engine.game.board import GridState
from connect4_engine.game.engine import GameEngine, MoveOutcome, new_game

__all__ = ['GridState', 'GameEngine', 'MoveOutcome', 'new_game']
