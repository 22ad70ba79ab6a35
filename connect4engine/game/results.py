"""
results.py - Values returned to callers of the game engine

A call to GameEngine.play always returns one of the MoveResult variants
below; invalid moves are reported as Rejected values rather than exceptions.
GameSnapshot is the read-only view handed out by GameEngine.inspect.
"""

from typing import List, NamedTuple, Optional, Tuple, Union

import numpy as np

from connect4engine.utils import Player, Phase, Outcome, RejectReason, Cell


class Rejected(NamedTuple):
    """A move that was refused. Nothing about the game changed."""
    reason: RejectReason

    @property
    def accepted(self) -> bool:
        return False


class Placed(NamedTuple):
    """
    A piece that landed on the board.

    Attributes:
        row: Row the piece settled in
        column: Column it was dropped into
        player: Player who made the move
        outcome: CONTINUE, WIN or TIE
        next_player: Player to move next, None once the game is over
        winning_line: Cells of the winning run when outcome is WIN
    """
    row: int
    column: int
    player: Player
    outcome: Outcome
    next_player: Optional[Player] = None
    winning_line: Tuple[Cell, ...] = ()

    @property
    def accepted(self) -> bool:
        return True

    @property
    def game_over(self) -> bool:
        return self.outcome != Outcome.CONTINUE


MoveResult = Union[Placed, Rejected]


class GameSnapshot(NamedTuple):
    """Read-only copy of a game's state at one moment."""
    grid: np.ndarray
    current_player: Player
    phase: Phase
    winner: Optional[Player]
    last_move: Optional[Cell]
    move_count: int

    @property
    def height(self) -> int:
        return self.grid.shape[0]

    @property
    def width(self) -> int:
        return self.grid.shape[1]

    @property
    def is_over(self) -> bool:
        return self.phase.is_terminal()

    def cell(self, row: int, column: int) -> Player:
        return Player(int(self.grid[row, column]))

    def valid_columns(self) -> List[int]:
        if self.is_over:
            return []
        return [col for col in range(self.width) if self.grid[0, col] == Player.EMPTY.value]
