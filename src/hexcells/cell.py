"""
Cell module for the hex puzzle.

Represents individual cells on the board with their state
(hidden/revealed/flagged), content (mine or not) and the cached
count of neighboring mines.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

UNKNOWN_VALUE = -1


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the hex grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        state: Current visual state (hidden, revealed, or flagged).
        revealed_value: Mines among the neighbors, counted when the cell
            was revealed. UNKNOWN_VALUE until then, and always for mines.
    """

    is_mine: bool = False
    state: CellState = CellState.HIDDEN
    revealed_value: int = UNKNOWN_VALUE

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def reset(self) -> None:
        """Return the cell to an empty, hidden, unflagged state."""
        self.is_mine = False
        self.state = CellState.HIDDEN
        self.revealed_value = UNKNOWN_VALUE

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to an observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-6: Revealed cell with neighbor mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return max(self.revealed_value, 0)
