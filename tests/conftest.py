"""
Pytest configuration and shared fixtures.
"""

from typing import Iterable, List

import pytest

from connect4engine.game.engine import GameEngine
from connect4engine.game.results import MoveResult

# Fills a 7x6 board without anyone connecting four. Columns 0, 1, 4, 5 end up
# as X,O,X,O,X,O from the bottom and columns 2, 3, 6 as O,X,O,X,O,X.
TIE_SEQUENCE = (
    [0, 2, 2, 0] * 3
    + [1, 3, 3, 1] * 3
    + [4, 6, 6, 4] * 3
    + [5] * 6
)

# Player ONE: 0, 1, 2, 3 on the bottom row; Player TWO stacks on top of 0-2
HORIZONTAL_WIN = [0, 0, 1, 1, 2, 2, 3]

# Player ONE ends on (2,0), (3,1), (4,2), (5,3)
DOWN_RIGHT_WIN = [3, 2, 2, 1, 0, 1, 1, 0, 6, 0, 0]

# Mirror image: Player ONE ends on (2,6), (3,5), (4,4), (5,3)
DOWN_LEFT_WIN = [6 - col for col in DOWN_RIGHT_WIN]


def play_all(engine: GameEngine, columns: Iterable[int]) -> List[MoveResult]:
    """Play a sequence of columns and return every result."""
    return [engine.play(col) for col in columns]


@pytest.fixture
def engine() -> GameEngine:
    """A standard 7x6 engine."""
    return GameEngine()


@pytest.fixture
def tie_sequence() -> List[int]:
    return list(TIE_SEQUENCE)
