"""
engine.py - Turn-by-turn state machine for Connect Four

This module provides the GameEngine, the single authority on legal moves,
board mutation and game outcome. Presentation layers call play(), reset()
and inspect() and react to the returned values; they never touch the
board directly.
"""

from numbers import Integral
from typing import Optional

from connect4engine.config import GameConfig, ConfigurationError
from connect4engine.debug import debug
from connect4engine.game.board import Board
from connect4engine.game.results import Placed, Rejected, MoveResult, GameSnapshot
from connect4engine.utils import (DEFAULT_WIDTH, DEFAULT_HEIGHT, Player, Phase, Outcome,
                                  RejectReason, Cell)


class GameState:
    """Mutable state of one game. Owned by exactly one GameEngine."""

    def __init__(self, config: GameConfig):
        self.board = Board(config)
        self.current_player = Player.ONE
        self.phase = Phase.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.last_move: Optional[Cell] = None
        self.move_count = 0

    def snapshot(self) -> GameSnapshot:
        grid = self.board.get_state()
        grid.setflags(write=False)
        return GameSnapshot(
            grid=grid,
            current_player=self.current_player,
            phase=self.phase,
            winner=self.winner,
            last_move=self.last_move,
            move_count=self.move_count,
        )


class GameEngine:
    """
    Connect Four rules engine.

    Args:
        config: Board dimensions; built from width/height when omitted
        width: Number of columns, used only without config
        height: Number of rows, used only without config

    Raises:
        ConfigurationError: if the dimensions are not positive integers
    """

    def __init__(self, config: Optional[GameConfig] = None, *,
                 width: Optional[int] = None, height: Optional[int] = None):
        if config is None:
            config = GameConfig(DEFAULT_WIDTH if width is None else width,
                                DEFAULT_HEIGHT if height is None else height)
        elif not isinstance(config, GameConfig):
            raise ConfigurationError(f"config must be a GameConfig, got {config!r}; "
                                     "use width=... and height=... for plain sizes")
        elif width is not None or height is not None:
            raise TypeError("pass either config or width/height, not both")

        self.config = config
        debug.debug(f"Initializing GameEngine with {config}", "engine")
        self._state = GameState(config)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def reset(self) -> None:
        """Throw away the current game and start a fresh one."""
        debug.debug("Resetting game", "engine")
        self._state = GameState(self.config)

    def inspect(self) -> GameSnapshot:
        """Get a read-only snapshot of the current game."""
        return self._state.snapshot()

    def _is_column(self, column) -> bool:
        if isinstance(column, bool) or not isinstance(column, Integral):
            return False
        return 0 <= column < self.width

    def play(self, column: int) -> MoveResult:
        """
        Drop the current player's piece into a column.

        Args:
            column: Column to play (0-indexed)

        Returns:
            Placed describing where the piece landed and what it caused, or
            Rejected if the move was not allowed (the game is left untouched)
        """
        state = self._state

        if state.phase.is_terminal():
            debug.debug(f"Rejected column {column!r}: game is over ({state.phase.name})", "engine")
            return Rejected(RejectReason.GAME_OVER)

        if not self._is_column(column):
            debug.debug(f"Rejected column {column!r}: out of range", "engine")
            return Rejected(RejectReason.INVALID_COLUMN)

        column = int(column)
        player = state.current_player
        row = state.board.drop(column, player)
        if row is None:
            return Rejected(RejectReason.COLUMN_FULL)

        state.last_move = (row, column)
        state.move_count += 1

        winning_line = state.board.winning_line(row, column)
        if winning_line:
            state.phase = Phase.WON
            state.winner = player
            debug.info(f"Player {player.name} wins with move at {state.last_move}", "engine")
            return Placed(row, column, player, Outcome.WIN, winning_line=tuple(winning_line))

        if state.board.is_full():
            state.phase = Phase.TIED
            debug.info(f"Game tied after {state.move_count} moves", "engine")
            return Placed(row, column, player, Outcome.TIE)

        state.current_player = player.other()
        debug.debug(f"Switching to player {state.current_player.name}", "engine")
        return Placed(row, column, player, Outcome.CONTINUE, next_player=state.current_player)
