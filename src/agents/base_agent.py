"""
Base agent interface for hex puzzle players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from hexcells import AxialCoord, Board


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for hex puzzle agents.

    Agents see the board and pick an action index in the HexcellsEnv
    encoding: indices below rows * cols reveal a cell, the rest toggle
    a flag.

    Attributes:
        guesses_made: Moves chosen without a deduction this episode.
            Stays 0 for agents that do not track guesses.
    """

    def __init__(self, board_rows: int, board_cols: int) -> None:
        """
        Initialize the agent.

        Args:
            board_rows: Number of rows in the board.
            board_cols: Number of columns in the board.
        """
        self.board_rows = board_rows
        self.board_cols = board_cols
        self.total_cells = board_rows * board_cols
        self.guesses_made = 0

    @abstractmethod
    def select_action(
        self,
        board: Board,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action for the current board.

        Args:
            board: Board being played. Agents must not mutate it.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index.
        """
        pass

    def action_to_position(self, action: int) -> Tuple[AxialCoord, bool]:
        """Convert action index to (coordinate, is_flag)."""
        is_flag = action >= self.total_cells
        index = action - self.total_cells if is_flag else action
        return AxialCoord(index % self.board_cols, index // self.board_cols), is_flag

    def position_to_action(self, coord: AxialCoord, flag: bool = False) -> int:
        """Convert a coordinate to a reveal (or flag) action index."""
        index = coord[1] * self.board_cols + coord[0]
        return index + self.total_cells if flag else index

    def get_valid_actions_from_board(self, board: Board) -> np.ndarray:
        """
        Get a mask of valid actions from the board.

        Returns:
            Boolean mask over the full action space, laid out like
            HexcellsEnv.get_action_mask().
        """
        mask = np.zeros(2 * self.total_cells, dtype=bool)
        if board.is_game_over:
            return mask
        for coord in board.coords():
            cell = board.get_cell(coord)
            if cell.is_hidden:
                mask[self.position_to_action(coord)] = True
            if not cell.is_revealed:
                mask[self.position_to_action(coord, flag=True)] = True
        return mask

    def reset(self) -> None:
        """Reset agent state for new episode."""
        self.guesses_made = 0
