"""
Gymnasium environment wrapper for the hex puzzle.

Provides a standard RL interface so agents can be run and evaluated
against a level.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board
from .coord import AxialCoord
from .hints import find_hint
from .level import LevelConfig
from .levels import LEVEL_1


# ============================================================================
# Hexcells Environment
# ============================================================================

class HexcellsEnv(gym.Env):
    """
    Gymnasium environment for a fixed hex puzzle level.

    Observation:
        2D array of shape (rows, cols), indexed [r, q], where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-6 = revealed cell with neighbor mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols reveals cell (q, r) = (i % cols, i // cols).
        Action i >= rows * cols toggles the flag on cell i - rows * cols.

    Rewards:
        - +1 for revealing a safe cell
        - +1 for flagging a mine
        - -1 for flagging a safe cell or unflagging a mine
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed, or flagging a revealed cell)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        level: Optional[LevelConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            level: Level to play (default: built-in level 1).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.level = level or LEVEL_1
        self.board = Board.from_level(self.level)
        self.render_mode = render_mode

        self._num_cells = self.level.rows * self.level.cols

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.level.rows, self.level.cols),
            dtype=np.int8,
        )

        # Reveal actions first, then flag actions
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0
        self._total_safe_cells = self._num_cells - self.board.count_mines()

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment by reloading the level.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board.initialize(self.level)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal or flag action index.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        coord, is_flag = self.decode_action(action)
        self._steps += 1

        if is_flag:
            reward = self._flag_reward(coord)
        else:
            reward = self._reveal_reward(coord)

        observation = self.board.get_observation()
        terminated = self.board.is_game_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    # ========================================================================
    # Action Encoding
    # ========================================================================

    def decode_action(self, action: int) -> Tuple[AxialCoord, bool]:
        """Convert an action index to (coordinate, is_flag)."""
        action = int(action)
        is_flag = action >= self._num_cells
        index = action - self._num_cells if is_flag else action
        return AxialCoord(index % self.level.cols, index // self.level.cols), is_flag

    def encode_action(self, coord: AxialCoord, flag: bool = False) -> int:
        """Convert a coordinate and action kind to an action index."""
        index = coord[1] * self.level.cols + coord[0]
        return index + self._num_cells if flag else index

    # ========================================================================
    # Rewards
    # ========================================================================

    def _reveal_reward(self, coord: AxialCoord) -> float:
        """Perform a reveal and score it."""
        if not self.board.reveal_cell(coord):
            return -0.1
        if self.board.is_game_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        return 1.0

    def _flag_reward(self, coord: AxialCoord) -> float:
        """Toggle a flag and score it."""
        if not self.board.toggle_flag(coord):
            return -0.1
        if self.board.is_game_won:
            return 10.0
        cell = self.board.get_cell(coord)
        return 1.0 if cell.is_flagged == cell.is_mine else -1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.count_revealed(),
            "flags": self.board.count_flags(),
            "total_safe": self._total_safe_cells,
            "game_state": self.board.game_state.name,
            "hint_available": find_hint(self.board) is not None,
        }

    # ========================================================================
    # Rendering and Masks
    # ========================================================================

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.board.render_text()
        if self.render_mode == "human":
            print(self.board.render_text())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action. Hidden cells can be
            revealed; hidden and flagged cells can have their flag toggled.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.board.is_game_over:
            return mask
        for coord in self.board.coords():
            cell = self.board.get_cell(coord)
            if cell.is_hidden:
                mask[self.encode_action(coord)] = True
            if not cell.is_revealed:
                mask[self.encode_action(coord, flag=True)] = True
        return mask
