"""
Hint-following agent for the hex puzzle.

Plays by asking the hint engine for a deduction each turn: safe cells
are revealed, mines are flagged. When the engine has nothing to say the
agent guesses a random hidden cell.
"""
from typing import Optional

import numpy as np

from hexcells import Board, find_hint

from .base_agent import BaseAgent


# ============================================================================
# Hint Agent
# ============================================================================

class HintAgent(BaseAgent):
    """
    Agent that follows the hint engine and guesses otherwise.

    Attributes:
        hints_followed: Moves taken from a hint this episode.
        guesses_made: Moves taken without a hint this episode.
    """

    def __init__(
        self,
        board_rows: int,
        board_cols: int,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(board_rows, board_cols)
        self.rng = np.random.default_rng(seed)
        self.hints_followed = 0

    def select_action(
        self,
        board: Board,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select the hinted action, or a random reveal.

        Args:
            board: Board being played.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_board(board)

        hint = find_hint(board)
        if hint is not None:
            action = self.position_to_action(hint.coord, flag=hint.is_mine)
            if valid_actions[action]:
                self.hints_followed += 1
                return action

        return self._guess(valid_actions)

    def _guess(self, valid_actions: np.ndarray) -> int:
        """Reveal a random hidden cell."""
        valid_indices = np.where(valid_actions[: self.total_cells])[0]
        if len(valid_indices) == 0:
            return 0
        self.guesses_made += 1
        return int(self.rng.choice(valid_indices))

    def reset(self) -> None:
        """Clear per-episode counters."""
        super().reset()
        self.hints_followed = 0
