"""
utils.py - Constants, enumerations and grid helpers for the Connect Four engine

The helpers here work on plain numpy grids (0 = empty, 1/2 = player pieces)
so they can be shared by the Board, the engine and the analysis tools.
"""

from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

DEFAULT_WIDTH = 7
DEFAULT_HEIGHT = 6
CONNECT_N = 4  # pieces in a row needed to win

Cell = Tuple[int, int]


class Player(Enum):
    """Players, plus the EMPTY marker used for unoccupied cells."""
    EMPTY = 0
    ONE = 1
    TWO = 2

    def other(self) -> 'Player':
        """Get the opposing player."""
        if self == Player.ONE:
            return Player.TWO
        if self == Player.TWO:
            return Player.ONE
        return Player.EMPTY

    def __str__(self):
        return PIECE_SYMBOLS[self.value]


PIECE_SYMBOLS = {0: ".", 1: "X", 2: "O"}


class Phase(Enum):
    """Lifecycle phase of a game."""
    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()

    def is_terminal(self) -> bool:
        return self != Phase.IN_PROGRESS


class Outcome(Enum):
    """What a successful placement led to."""
    CONTINUE = auto()
    WIN = auto()
    TIE = auto()


class RejectReason(Enum):
    """Why a move was refused."""
    INVALID_COLUMN = auto()
    COLUMN_FULL = auto()
    GAME_OVER = auto()


class Direction(Enum):
    """The four axes a line can run along."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN_RIGHT = auto()
    DIAGONAL_DOWN_LEFT = auto()


# (row, col) step for each axis; row grows downwards
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}


def is_valid_position(grid: np.ndarray, row: int, col: int) -> bool:
    """Check whether (row, col) lies inside the grid."""
    height, width = grid.shape
    return 0 <= row < height and 0 <= col < width


def run_through(grid: np.ndarray, row: int, col: int, direction: Direction) -> List[Cell]:
    """
    Collect the contiguous same-player cells through (row, col) along one axis.

    Args:
        grid: The game grid
        row: Row of the anchor cell
        col: Column of the anchor cell
        direction: Axis to follow, in both senses

    Returns:
        The cells of the run ordered along the axis, or an empty list if the
        anchor cell is empty
    """
    value = grid[row, col]
    if value == Player.EMPTY.value:
        return []

    dr, dc = DIRECTION_VECTORS[direction]

    backward = []
    r, c = row - dr, col - dc
    while is_valid_position(grid, r, c) and grid[r, c] == value:
        backward.append((r, c))
        r -= dr
        c -= dc

    forward = []
    r, c = row + dr, col + dc
    while is_valid_position(grid, r, c) and grid[r, c] == value:
        forward.append((r, c))
        r += dr
        c += dc

    return backward[::-1] + [(row, col)] + forward


def winning_line_at(grid: np.ndarray, row: int, col: int) -> List[Cell]:
    """Return the first run of CONNECT_N or more that passes through (row, col), else []."""
    for direction in Direction:
        line = run_through(grid, row, col, direction)
        if len(line) >= CONNECT_N:
            return line
    return []


def find_winning_run(grid: np.ndarray, player: Optional[Player] = None) -> List[Cell]:
    """
    Scan the whole grid for any four-in-a-row.

    Every origin cell is tried in the four forward directions only; each line
    is still found once, from its top-most (then left-most) end.

    Args:
        grid: The game grid
        player: Restrict the search to this player's pieces

    Returns:
        The CONNECT_N cells of the first run found, or an empty list
    """
    height, width = grid.shape
    values = [player.value] if player is not None else [Player.ONE.value, Player.TWO.value]

    for y in range(height):
        for x in range(width):
            if grid[y, x] not in values:
                continue
            for dr, dc in DIRECTION_VECTORS.values():
                cells = [(y + i * dr, x + i * dc) for i in range(CONNECT_N)]
                if all(is_valid_position(grid, r, c) and grid[r, c] == grid[y, x]
                       for r, c in cells):
                    return cells
    return []


def lowest_empty_row(grid: np.ndarray, column: int) -> Optional[int]:
    """Find the row a piece dropped into this column would land in, or None if full."""
    for row in range(grid.shape[0] - 1, -1, -1):
        if grid[row, column] == Player.EMPTY.value:
            return row
    return None


def column_heights(grid: np.ndarray) -> List[int]:
    """Number of pieces stacked in each column."""
    return [int(n) for n in np.count_nonzero(grid != Player.EMPTY.value, axis=0)]


def has_valid_gravity(grid: np.ndarray) -> bool:
    """Check that no piece floats above an empty cell in its column."""
    height = grid.shape[0]
    for col, stacked in enumerate(column_heights(grid)):
        if np.any(grid[height - stacked:, col] == Player.EMPTY.value):
            return False
    return True


def render_board_ascii(grid: np.ndarray) -> str:
    """
    Render a grid as ASCII art with column numbers underneath.

    Args:
        grid: The game grid

    Returns:
        Multi-line string representation
    """
    width = grid.shape[1]
    border = "+" + "-" * (width * 2 + 1) + "+"

    lines = [border]
    for row in grid:
        lines.append("| " + " ".join(PIECE_SYMBOLS.get(int(v), "?") for v in row) + " |")
    lines.append(border)
    lines.append("  " + " ".join(str(i % 10) for i in range(width)))

    return "\n".join(lines)


def parse_position(position: str, width: int, height: int) -> np.ndarray:
    """
    Build a grid from a comma-separated, row-major string of 0/1/2 values.

    Raises:
        ValueError: if the string has the wrong length, a blank field or an unknown value
    """
    fields = position.split(',')
    if any(not field.strip() for field in fields):
        raise ValueError("Position string has an empty value")
    values = [int(field) for field in fields]
    if len(values) != width * height:
        raise ValueError(f"Position string must have {width * height} values, got {len(values)}")
    if any(v not in PIECE_SYMBOLS for v in values):
        raise ValueError("Position values must be 0, 1 or 2")

    return np.array(values, dtype=np.int8).reshape(height, width)
