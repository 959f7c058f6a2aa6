"""
Random agent for the hex puzzle.

Serves as a baseline by revealing random hidden cells.
"""
from typing import Optional

import numpy as np

from hexcells import Board

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that reveals hidden cells uniformly at random.

    It never flags, so it cannot win a level with mines; it provides a
    floor for comparing other agents.
    """

    def __init__(
        self,
        board_rows: int,
        board_cols: int,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            board_rows: Number of rows in the board.
            board_cols: Number of columns in the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_rows, board_cols)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        board: Board,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random reveal action.

        Args:
            board: Board being played.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random reveal action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_board(board)

        valid_indices = np.where(valid_actions[: self.total_cells])[0]

        if len(valid_indices) == 0:
            # No valid actions, return any action (will be invalid)
            return 0

        return int(self.rng.choice(valid_indices))
