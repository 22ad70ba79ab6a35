"""
connect4engine - Connect Four rules engine

This package provides the game-state engine for Connect Four: the board,
legal-move resolution, win and tie detection and the turn state machine,
along with a terminal front-end and a Gymnasium adapter built on top of it.
"""

__version__ = '0.1.0'
