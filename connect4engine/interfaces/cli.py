"""
cli.py - Command-line front-end for the Connect Four engine

This module provides a terminal interface for playing hot-seat games and
for analysing board positions. All game decisions are made by GameEngine;
this module only reads what it returns and prints it.
"""

import argparse
from typing import List, Optional, Union

import numpy as np

from connect4engine.config import GameConfig, ConfigurationError
from connect4engine.debug import debug, DebugLevel
from connect4engine.game.engine import GameEngine
from connect4engine.game.results import MoveResult, Placed
from connect4engine.utils import (DEFAULT_WIDTH, DEFAULT_HEIGHT, Player, Outcome, RejectReason,
                                  find_winning_run, has_valid_gravity, lowest_empty_row,
                                  parse_position, render_board_ascii)

QUIT = 'quit'
RESTART = 'restart'

Command = Union[int, str]


def player_label(player: Player) -> str:
    return f"Player {player.value} ({player})"


class SimpleCLI:
    """Command-line interface for Connect Four."""

    def __init__(self):
        self.args = None
        self.engine: Optional[GameEngine] = None

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(description='Connect Four')
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--width', type=int, default=DEFAULT_WIDTH,
                            help=f'Number of columns (default: {DEFAULT_WIDTH})')
        common.add_argument('--height', type=int, default=DEFAULT_HEIGHT,
                            help=f'Number of rows (default: {DEFAULT_HEIGHT})')
        common.add_argument('--debug', action='store_true',
                            help='Enable debug logging (same as --debug-level debug)')
        common.add_argument('--debug-level',
                            choices=[level.name.lower() for level in DebugLevel],
                            default='warning', help='Logging verbosity')

        subparsers.add_parser('play', parents=[common],
                              help='Play a two-player game in the terminal')

        analyze_parser = subparsers.add_parser('analyze', parents=[common],
                                               help='Analyse a board position')
        analyze_parser.add_argument('--position', type=str, required=True,
                                    help='Comma-separated cell values (0, 1, 2), row by row '
                                         'from the top')
        return parser

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        self.args = self.build_parser().parse_args(argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the command given on the command line.

        Returns:
            Process exit code
        """
        if self.args is None:
            self.parse_args(argv)

        if self.args.command is None:
            print("Please specify a command. Use --help for options.")
            return 1

        try:
            config = GameConfig(self.args.width, self.args.height)
        except ConfigurationError as e:
            print(f"Invalid board size: {e}")
            return 2

        if self.args.command == 'play':
            return self.play_game(config)
        return self.analyze_position(config)

    def play_game(self, config: GameConfig) -> int:
        """Play hot-seat games until the user quits."""
        self.engine = GameEngine(config)
        last_column = config.width - 1

        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{last_column}) to drop a piece, "
              "'r' to restart or 'q' to quit.")
        print(self.render())

        while True:
            command = self.get_command()
            if command is None:
                continue
            if command == QUIT:
                print("Quitting game.")
                return 0
            if command == RESTART:
                self.engine.reset()
                print("Game restarted.")
                print(self.render())
                continue

            result = self.engine.play(command)
            self.show_result(result, command)

    def get_command(self) -> Optional[Command]:
        """
        Read one command from the user.

        Returns:
            A column number, QUIT, RESTART, or None if the input was not understood
        """
        snapshot = self.engine.inspect()
        if snapshot.is_over:
            prompt = "Game over. 'r' to play again, 'q' to quit: "
        else:
            prompt = f"{player_label(snapshot.current_player)} move: "

        try:
            user_input = input(prompt).strip().lower()
        except EOFError:
            return QUIT

        if user_input in ('q', 'quit'):
            return QUIT
        if user_input in ('r', 'restart'):
            return RESTART

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Enter a column number, 'r' or 'q'.")
            return None

    def show_result(self, result: MoveResult, column: int) -> None:
        if not isinstance(result, Placed):
            if result.reason == RejectReason.INVALID_COLUMN:
                print(f"Column must be between 0 and {self.engine.width - 1}.")
            elif result.reason == RejectReason.COLUMN_FULL:
                print(f"Column {column} is full.")
            else:
                print("The game is over. Enter 'r' to play again or 'q' to quit.")
            return

        print(self.render())
        if result.outcome == Outcome.WIN:
            print(f"{player_label(result.player)} wins!")
        elif result.outcome == Outcome.TIE:
            print("It's a tie!")

    def render(self) -> str:
        return render_board_ascii(self.engine.inspect().grid)

    def analyze_position(self, config: GameConfig) -> int:
        """Report wins, gravity and playable columns for a position string."""
        try:
            grid = parse_position(self.args.position, config.width, config.height)
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 2

        print("Loaded position:")
        print(render_board_ascii(grid))

        winner = None
        for player in (Player.ONE, Player.TWO):
            run = find_winning_run(grid, player)
            if run:
                winner = player
                print(f"Win for {player_label(player)}: {run}")
        if winner is None:
            print("No win detected for any player")

        if not has_valid_gravity(grid):
            print("Position is not reachable: a piece is floating above an empty cell")

        if np.all(grid != Player.EMPTY.value):
            print("Board is full")
        else:
            print(f"Empty cells: {int(np.sum(grid == Player.EMPTY.value))}")
            playable = [col for col in range(config.width)
                        if lowest_empty_row(grid, col) is not None]
            print(f"Playable columns: {playable}")

        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point."""
    return SimpleCLI().run(argv)
