"""
Gymnasium environment wrapper for Minesweeper.

Exposes a Board through the standard RL interface.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .grid import Position, index_to_position, position_to_index


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = undecided tile
        - -2 = flagged tile
        - 0-8 = revealed tile with adjacent mine count
        - 9 = exploded mine

    Actions:
        Discrete action space of size rows * cols.
        Action i uncovers the tile at (i // cols, i % cols).

    Rewards:
        - +1 for revealing a safe tile
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action on a tile that is not undecided
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 15% mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )

        # One action per tile
        self.action_space = spaces.Discrete(self.config.rows * self.config.cols)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a fresh board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(0, 2**32))
        self.board = Board(self.config, rng=random.Random(board_seed))
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Tile index to uncover (row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.board.get_observation()
        terminated = self.board.is_ended
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Position:
        """Convert flat action index to (row, col) position."""
        return index_to_position(self.config.cols, int(action))

    def _calculate_reward(self, row: int, col: int) -> float:
        """
        Uncover a tile and score the result.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        if self.board.is_ended or not self.board.is_undecided(row, col):
            return -0.1

        self.board.uncover(row, col)

        if self.board.is_ended_with_win:
            return 10.0
        if self.board.is_ended_with_loss:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.config.safe_tiles - self.board.tiles_remaining,
            "total_safe": self.config.safe_tiles,
            "flags_remaining": self.board.flags_remaining,
            "game_state": self.board.game_state.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.board.render()
        if self.render_mode == "human":
            print(self.board.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            int8 array where 1 = undecided tile.
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for row, col in self.board.get_valid_actions():
            mask[position_to_index(self.config.cols, row, col)] = 1
        return mask
