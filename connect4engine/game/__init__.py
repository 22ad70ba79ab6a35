"""
connect4engine.game - Core game mechanics for Connect Four

This package contains the board representation, the rules engine, the
values it hands back to callers and a Gymnasium environment built on it.
"""

from connect4engine.game.board import Board
from connect4engine.game.engine import GameEngine, GameState
from connect4engine.game.results import Placed, Rejected, MoveResult, GameSnapshot
from connect4engine.game.env import ConnectFourEnv

__all__ = ['Board', 'GameEngine', 'GameState', 'Placed', 'Rejected', 'MoveResult',
           'GameSnapshot', 'ConnectFourEnv']
