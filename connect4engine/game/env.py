"""
env.py - Gymnasium environment wrapper around the Connect Four engine

The environment holds no game rules of its own: every step is a call to
GameEngine.play and rewards are derived from the returned MoveResult.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4engine.debug import debug
from connect4engine.game.engine import GameEngine
from connect4engine.game.results import Placed
from connect4engine.utils import DEFAULT_WIDTH, DEFAULT_HEIGHT, Outcome, render_board_ascii


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Both players act through the same environment; rewards are given from
    the point of view of the player who made the step.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 render_mode: Optional[str] = None):
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")
        self.engine = GameEngine(width=width, height=height)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(width)
        self.observation_space = spaces.Box(low=0, high=2, shape=(height, width), dtype=np.int8)

        self.reward_win = 1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01  # nudges towards shorter games

        self._last_result = None

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict[str, Any]] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        debug.debug("Resetting environment", "env")

        self.engine.reset()
        self._last_result = None

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Play one move for the current player.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        result = self.engine.play(action)
        self._last_result = result

        if not isinstance(result, Placed):
            debug.warning(f"Invalid action {action}: {result.reason.name}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = result.game_over
        if result.outcome == Outcome.WIN:
            reward = self.reward_win
        elif result.outcome == Outcome.TIE:
            reward = self.reward_draw

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode is None:
            return None

        text = render_board_ascii(self.engine.inspect().grid)
        if self.render_mode == "human":
            print(text)
            return None
        return text

    def _get_observation(self) -> np.ndarray:
        return np.array(self.engine.inspect().grid, dtype=np.int8)

    def _get_info(self) -> Dict[str, Any]:
        snapshot = self.engine.inspect()
        valid_moves = snapshot.valid_columns()
        result = self._last_result
        winning_line = list(result.winning_line) if isinstance(result, Placed) else []

        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': snapshot.current_player.value,
            'phase': snapshot.phase.name,
            'winner': snapshot.winner.value if snapshot.winner else None,
            'moves_made': snapshot.move_count,
            'last_move': snapshot.last_move,
            'winning_line': winning_line,
        }
