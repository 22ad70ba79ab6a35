"""
board.py - Grid representation for Connect Four

This module implements the Board class, which stores the pieces of one game
in a numpy array and knows how pieces settle and how lines are formed. It
does not track whose turn it is; that belongs to the GameEngine.
"""

from typing import List, Optional

import numpy as np

from connect4engine.config import GameConfig
from connect4engine.debug import debug
from connect4engine.utils import (Player, Cell, lowest_empty_row, winning_line_at,
                                  column_heights, render_board_ascii)


class Board:
    """
    A height x width Connect Four grid.

    Row 0 is the top row and row height-1 the bottom. Cells hold
    Player.EMPTY.value or the value of the occupying player.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.grid = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        self.pieces = 0
        debug.trace(f"Created {self.config.height}x{self.config.width} board", "board")

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def copy(self) -> 'Board':
        """Create an independent copy of this board."""
        new_board = Board(self.config)
        new_board.grid = self.grid.copy()
        new_board.pieces = self.pieces
        return new_board

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self.width:
            raise IndexError(f"column {column} out of range 0..{self.width - 1}")

    def lowest_empty_row(self, column: int) -> Optional[int]:
        """
        Find where a piece dropped into a column would settle.

        Returns:
            The lowest empty row, or None if the column is full
        """
        self._check_column(column)
        return lowest_empty_row(self.grid, column)

    def is_column_full(self, column: int) -> bool:
        self._check_column(column)
        return self.grid[0, column] != Player.EMPTY.value

    def is_full(self) -> bool:
        return self.pieces == self.config.cells

    def valid_columns(self) -> List[int]:
        """Columns that can still take a piece."""
        return [col for col in range(self.width) if self.grid[0, col] == Player.EMPTY.value]

    def column_heights(self) -> List[int]:
        return column_heights(self.grid)

    def drop(self, column: int, player: Player) -> Optional[int]:
        """
        Drop a piece for a player into a column.

        Args:
            column: Column to play (0-indexed)
            player: Player.ONE or Player.TWO

        Returns:
            The row the piece landed in, or None if the column is full
        """
        row = self.lowest_empty_row(column)
        if row is None:
            debug.debug(f"Column {column} is full", "board")
            return None

        self.grid[row, column] = player.value
        self.pieces += 1
        debug.trace(f"Placed {player.name} at ({row}, {column})", "board")
        return row

    def cell(self, row: int, column: int) -> Player:
        return Player(int(self.grid[row, column]))

    def check_win_at(self, row: int, column: int) -> bool:
        """Check whether the piece at (row, column) completes four in a row."""
        return bool(self.winning_line(row, column))

    def winning_line(self, row: int, column: int) -> List[Cell]:
        """
        Get the run of four or more through (row, column).

        Returns:
            The (row, col) cells of the run, or an empty list if there is none
        """
        debug.start_timer("win_check")
        line = winning_line_at(self.grid, row, column)
        debug.end_timer("win_check", "board")
        return line

    def get_state(self) -> np.ndarray:
        """Get a copy of the grid."""
        return self.grid.copy()

    def render(self) -> str:
        return render_board_ascii(self.grid)

    def __str__(self) -> str:
        return self.render()
