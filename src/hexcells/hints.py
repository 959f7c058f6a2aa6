"""
Hint engine.

Looks at the board and its rules and suggests one cell that is certainly
safe or certainly a mine. It is a greedy single pass over individual
clues:

    1. Revealed number cells, in row-major order. A number equal to its
       flagged neighbors means every other hidden neighbor is safe; a
       number equal to flagged plus hidden neighbors means they are all
       mines.
    2. Level rules, in stored order, with the same two checks against the
       rule's expected count.

Information from different clues is never combined, so some deductions a
full solver would find are missed.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from .board import Board
from .coord import AxialCoord
from .rules import Rule


# ============================================================================
# Hint Types
# ============================================================================

class HintType(Enum):
    """What the hint says about its cell."""

    MINE = "mine"
    SAFE = "safe"


@dataclass(frozen=True)
class Hint:
    """
    A single deduction.

    Attributes:
        coord: The cell the deduction is about.
        hint_type: MINE or SAFE.
        source: Revealed cell coordinate or rule the deduction came from.
    """

    coord: AxialCoord
    hint_type: HintType
    source: Union[AxialCoord, Rule, None] = None

    @property
    def is_safe(self) -> bool:
        return self.hint_type == HintType.SAFE

    @property
    def is_mine(self) -> bool:
        return self.hint_type == HintType.MINE

    def explain(self) -> str:
        """One line explanation for players."""
        verdict = "safe" if self.is_safe else "a mine"
        if isinstance(self.source, Rule):
            origin = f"rule {self.source.describe()}"
        elif self.source is not None:
            origin = f"revealed cell {self.source}"
        else:
            origin = "the board"
        return f"{self.coord} is {verdict} (from {origin})"


# ============================================================================
# Decision Logic
# ============================================================================

def _decide(
    expected: int, known: int, candidates: Sequence[AxialCoord]
) -> Optional[Tuple[AxialCoord, HintType]]:
    """
    Apply the two counting checks.

    Args:
        expected: Mines the clue asks for.
        known: Mines already accounted for.
        candidates: Hidden, unflagged cells the remaining mines could be in.

    Returns:
        (first candidate, verdict) or None.
    """
    if not candidates:
        return None
    if expected == known:
        return candidates[0], HintType.SAFE
    if expected == known + len(candidates):
        return candidates[0], HintType.MINE
    return None


def _tally_neighbors(board: Board, coord: AxialCoord) -> Tuple[int, List[AxialCoord]]:
    """Count flagged neighbors and collect hidden unflagged ones."""
    flagged = 0
    hidden: List[AxialCoord] = []
    for neighbor in board.get_neighbors(coord):
        cell = board.get_cell(neighbor)
        if cell.is_flagged:
            flagged += 1
        elif not cell.is_revealed:
            hidden.append(neighbor)
    return flagged, hidden


def _tally_rule_cells(
    board: Board, coords: Iterable[AxialCoord]
) -> Tuple[int, List[AxialCoord]]:
    """Count mined-or-flagged cells and collect the remaining hidden ones."""
    known = 0
    hidden: List[AxialCoord] = []
    for coord in coords:
        cell = board.get_cell(coord)
        if cell is None:
            continue
        if cell.is_mine or cell.is_flagged:
            known += 1
        elif not cell.is_revealed:
            hidden.append(coord)
    return known, hidden


# ============================================================================
# Phases
# ============================================================================

def find_cell_hint(board: Board) -> Optional[Hint]:
    """Deduce from revealed number cells, scanning rows then columns."""
    for coord in board.coords():
        cell = board.get_cell(coord)
        if not cell.is_revealed or cell.is_mine or cell.revealed_value <= 0:
            continue
        flagged, hidden = _tally_neighbors(board, coord)
        decision = _decide(cell.revealed_value, flagged, hidden)
        if decision is not None:
            return Hint(decision[0], decision[1], coord)
    return None


def find_rule_hint(board: Board, rules: Iterable[Rule]) -> Optional[Hint]:
    """Deduce from level rules, in order."""
    for rule in rules:
        known, hidden = _tally_rule_cells(board, rule.constrained_cells(board))
        decision = _decide(rule.expected_mines(), known, hidden)
        if decision is not None:
            return Hint(decision[0], decision[1], rule)
    return None


def find_hint(board: Board, rules: Optional[Iterable[Rule]] = None) -> Optional[Hint]:
    """
    Find one safe cell or mine the player can be told about.

    Args:
        board: Board to inspect. It is not modified.
        rules: Rules to use; defaults to the board's active rules.

    Returns:
        A Hint, or None when neither phase finds a deduction.
    """
    if rules is None:
        rules = board.active_rules
    hint = find_cell_hint(board)
    if hint is not None:
        return hint
    return find_rule_hint(board, rules)
