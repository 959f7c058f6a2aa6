"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hexcells import (
    AxialCoord,
    Board,
    Cell,
    EdgeRuleSpec,
    GroupRuleSpec,
    LevelConfig,
    SequenceRuleSpec,
)


# ============================================================================
# Level Fixtures
# ============================================================================

@pytest.fixture
def make_board():
    """Return a factory that builds an initialized board from plain lists."""
    def _make(rows, cols, mines=(), rules=(), revealed=()):
        level = LevelConfig(rows, cols, list(mines), list(rules), revealed=list(revealed))
        return Board.from_level(level)
    return _make


@pytest.fixture
def row_level() -> LevelConfig:
    """Single row of three cells with a mine at the right end."""
    return LevelConfig(rows=1, cols=3, mines=[(2, 0)], rules=[])


@pytest.fixture
def square_level() -> LevelConfig:
    """2x2 grid with one mine in the bottom-right corner."""
    return LevelConfig(rows=2, cols=2, mines=[(1, 1)], rules=[])


@pytest.fixture
def ruled_level() -> LevelConfig:
    """4x4 grid with one rule of each kind, all consistent with the mines."""
    return LevelConfig(
        rows=4,
        cols=4,
        mines=[(1, 1), (2, 1), (3, 3)],
        rules=[
            EdgeRuleSpec((1, 2), 2),
            GroupRuleSpec([(0, 0), (3, 3), (3, 0)], 1),
            SequenceRuleSpec([(0, 1), (1, 1), (2, 1), (3, 1)], 2),
        ],
    )


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def row_board(row_level: LevelConfig) -> Board:
    """Board loaded with the single-row level."""
    return Board.from_level(row_level)


@pytest.fixture
def square_board(square_level: LevelConfig) -> Board:
    """Board loaded with the 2x2 level."""
    return Board.from_level(square_level)


@pytest.fixture
def ruled_board(ruled_level: LevelConfig) -> Board:
    """Board loaded with the 4x4 level that carries rules."""
    return Board.from_level(ruled_level)


@pytest.fixture
def empty_board() -> Board:
    """3x3 board with no mines, no rules and nothing revealed."""
    return Board.from_level(LevelConfig(rows=3, cols=3, mines=[], rules=[]))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with two mines around it."""
    cell = Cell(revealed_value=2)
    cell.reveal()
    return cell


@pytest.fixture
def center() -> AxialCoord:
    """Interior coordinate of a 3x3 board."""
    return AxialCoord(1, 1)
