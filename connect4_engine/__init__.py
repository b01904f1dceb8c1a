"""
connect4_engine - Game-state engine for Connect Four

This package provides the grid model, the drop rule, win and tie detection
and the turn state machine for two-player Connect Four, plus a small
terminal front end that drives them.
"""

__version__ = '0.1.0'

from connect4_engine.game.engine import GameEngine, MoveOutcome, new_game
from connect4_engine.utils import Player, GameResult, OutcomeKind, RejectReason

__all__ = ['GameEngine', 'MoveOutcome', 'new_game',
           'Player', 'GameResult', 'OutcomeKind', 'RejectReason']
