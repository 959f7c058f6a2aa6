"""
Board module for the hex puzzle.

Implements the hex grid with level loading, cell revealing and
flagging, neighbor queries and game state management.
"""
import logging
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, UNKNOWN_VALUE
from .coord import AxialCoord, HEX_DIRECTIONS, as_coord
from .level import LevelConfig
from .rules import Rule

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    ACTIVE = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Hex puzzle board.

    Owns a fixed rows x cols grid of cells addressed by axial
    coordinates (q = column, r = row) and the rules of the current level.
    Reveal and flag operations report failure by returning False rather
    than raising; lookups off the grid return None or an empty list.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """
        Create an empty board.

        Args:
            rows: Number of rows (must be > 0).
            cols: Number of columns (must be > 0).
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Board dimensions must be positive: {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._grid: List[List[Cell]] = [
            [Cell() for _ in range(cols)] for _ in range(rows)
        ]
        self._rules: Tuple[Rule, ...] = ()
        self._game_state = GameState.ACTIVE

    @classmethod
    def from_level(cls, level: LevelConfig) -> "Board":
        """Create a board sized for a level and initialize it."""
        board = cls(level.rows, level.cols)
        board.initialize(level)
        return board

    # ========================================================================
    # Level Initialization (Low-level)
    # ========================================================================

    def initialize(self, level: LevelConfig) -> None:
        """
        Load a level, replacing all cell state and rules.

        Mine and revealed coordinates outside the grid are ignored. The
        board keeps its own dimensions even when the level's differ.

        Args:
            level: Parsed level description.
        """
        if (level.rows, level.cols) != (self._rows, self._cols):
            logger.warning(
                "Level %r is %dx%d but board is %dx%d; clipping to board",
                level.name, level.rows, level.cols, self._rows, self._cols,
            )

        self._game_state = GameState.ACTIVE
        self._rules = ()
        for cell in self._iter_cells():
            cell.reset()

        for coord in level.mines:
            cell = self.get_cell(coord)
            if cell is None:
                logger.debug("Ignoring mine outside the grid at %s", coord)
                continue
            cell.is_mine = True

        for coord in level.revealed:
            cell = self.get_cell(coord)
            if cell is None:
                logger.debug("Ignoring revealed cell outside the grid at %s", coord)
                continue
            cell.reveal()

        self._rules = level.build_rules()
        self.recompute_revealed_values()
        logger.debug(
            "Initialized level %r: %d mines, %d rules",
            level.name, self.count_mines(), len(self._rules),
        )

    def recompute_revealed_values(self) -> None:
        """Recount neighbor mines for every revealed non-mine cell."""
        for coord in self.coords():
            cell = self._cell_at(coord)
            if cell.is_revealed and not cell.is_mine:
                cell.revealed_value = self._count_adjacent_mines(coord)

    def _count_adjacent_mines(self, coord: AxialCoord) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor in self.get_neighbors(coord):
            if self._cell_at(neighbor).is_mine:
                count += 1
        return count

    # ========================================================================
    # Grid Utilities (Low-level)
    # ========================================================================

    def is_in_bounds(self, coord: AxialCoord) -> bool:
        """Check if a coordinate lies on the board."""
        q, r = coord
        return 0 <= q < self._cols and 0 <= r < self._rows

    def coords(self) -> Iterator[AxialCoord]:
        """Yield every coordinate in row-major order (row outer, column inner)."""
        for r in range(self._rows):
            for q in range(self._cols):
                yield AxialCoord(q, r)

    def _cell_at(self, coord: AxialCoord) -> Cell:
        return self._grid[coord[1]][coord[0]]

    def _iter_cells(self) -> Iterator[Cell]:
        for row in self._grid:
            yield from row

    def get_cell(self, coord: AxialCoord) -> Optional[Cell]:
        """Get cell at a coordinate, or None if it is off the board."""
        if not self.is_in_bounds(coord):
            return None
        return self._cell_at(coord)

    def get_neighbors(self, coord: AxialCoord) -> List[AxialCoord]:
        """
        Get in-bounds neighbors of a coordinate.

        Args:
            coord: Center coordinate. May itself be off the board.

        Returns:
            Up to six coordinates, in HEX_DIRECTIONS order.
        """
        center = as_coord(coord)
        neighbors = []
        for direction in HEX_DIRECTIONS:
            neighbor = center.neighbor(direction)
            if self.is_in_bounds(neighbor):
                neighbors.append(neighbor)
        return neighbors

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal_cell(self, coord: AxialCoord) -> bool:
        """
        Reveal the cell at a coordinate.

        Revealing a mine loses the game. Otherwise the cell's neighbor
        mine count is stored and the win condition is checked.

        Args:
            coord: Cell to reveal.

        Returns:
            True if the cell was revealed, False otherwise.
        """
        if not self.is_playing:
            return False
        cell = self.get_cell(coord)
        if cell is None or not cell.reveal():
            return False

        if cell.is_mine:
            self._game_state = GameState.LOST
            logger.debug("Mine revealed at %s, game lost", coord)
            return True

        cell.revealed_value = self._count_adjacent_mines(as_coord(coord))
        self.check_win_condition()
        return True

    def toggle_flag(self, coord: AxialCoord) -> bool:
        """
        Toggle flag on a cell.

        Args:
            coord: Cell to flag or unflag.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if not self.is_playing:
            return False
        cell = self.get_cell(coord)
        if cell is None or not cell.toggle_flag():
            return False
        self.check_win_condition()
        return True

    def check_win_condition(self) -> bool:
        """
        Check if every mine is flagged and every other cell revealed.

        Marks the game as won when it is.

        Returns:
            True if the board is solved.
        """
        for cell in self._iter_cells():
            if cell.is_mine and not cell.is_flagged:
                return False
            if not cell.is_mine and not cell.is_revealed:
                return False
        if self._game_state != GameState.WON:
            logger.debug("Board solved, game won")
        self._game_state = GameState.WON
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def active_rules(self) -> Tuple[Rule, ...]:
        """Rules of the current level. The tuple is read-only."""
        return self._rules

    def get_active_rules(self) -> Tuple[Rule, ...]:
        """Rules of the current level. The tuple is read-only."""
        return self._rules

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.ACTIVE

    @property
    def is_game_over(self) -> bool:
        """Check if the game has ended, won or lost."""
        return self._game_state != GameState.ACTIVE

    @property
    def is_game_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    def count_mines(self) -> int:
        """Total mines on the board."""
        return sum(1 for cell in self._iter_cells() if cell.is_mine)

    def count_flags(self) -> int:
        """Total flagged cells."""
        return sum(1 for cell in self._iter_cells() if cell.is_flagged)

    def count_revealed(self) -> int:
        """Total revealed cells."""
        return sum(1 for cell in self._iter_cells() if cell.is_revealed)

    def remaining_mines(self) -> int:
        """Mines minus flags, as shown on a counter. May go negative."""
        return self.count_mines() - self.count_flags()

    def get_valid_actions(self) -> List[AxialCoord]:
        """
        Get cells that can still be revealed.

        Returns:
            Hidden, unflagged coordinates in row-major order.
        """
        return [coord for coord in self.coords() if self._cell_at(coord).is_hidden]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            int8 array of shape (rows, cols), indexed [r, q], where:
                -1 = hidden
                -2 = flagged
                0-6 = revealed with neighbor mine count
                9 = revealed mine
        """
        obs = np.zeros((self._rows, self._cols), dtype=np.int8)
        for r in range(self._rows):
            for q in range(self._cols):
                obs[r, q] = self._grid[r][q].to_observation()
        return obs

    def render_text(self, show_mines: bool = False) -> str:
        """
        Render the board as text, shifting each row to suggest the hex layout.

        Args:
            show_mines: Draw hidden mines as 'x' (for debugging).
        """
        lines = []
        for r in range(self._rows):
            symbols = []
            for q in range(self._cols):
                cell = self._grid[r][q]
                if cell.is_flagged:
                    symbols.append("F")
                elif cell.is_revealed and cell.is_mine:
                    symbols.append("*")
                elif cell.is_revealed:
                    value = cell.revealed_value
                    symbols.append("?" if value == UNKNOWN_VALUE else str(value))
                elif show_mines and cell.is_mine:
                    symbols.append("x")
                else:
                    symbols.append(".")
            lines.append(" " * r + " ".join(symbols))
        return "\n".join(lines)
