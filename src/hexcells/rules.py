"""
Constraint rules placed on top of the grid.

Every rule states how many mines sit in some set of cells:

    EdgeRule      the neighbors of one anchor cell
    GroupRule     an arbitrary, unordered set of cells
    SequenceRule  an ordered line of cells; the number is the longest
                  unbroken run of mines along it

Rules are frozen value objects. They store coordinates only and look the
cells up on the board each time they are evaluated.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Tuple

from .coord import AxialCoord, as_coord

if TYPE_CHECKING:
    from .board import Board


# ============================================================================
# Rule Kinds
# ============================================================================

class RuleKind(Enum):
    """The closed set of rule variants."""

    EDGE = "edge"
    GROUP = "group"
    SEQUENCE = "sequence"


def freeze_coords(coords: Iterable[Tuple[int, int]]) -> Tuple[AxialCoord, ...]:
    """Copy a coordinate collection into an immutable tuple."""
    return tuple(as_coord(coord) for coord in coords)


def count_mines(board: "Board", coords: Iterable[AxialCoord]) -> int:
    """Count mined cells among coords; off-grid coordinates count as empty."""
    count = 0
    for coord in coords:
        cell = board.get_cell(coord)
        if cell is not None and cell.is_mine:
            count += 1
    return count


# ============================================================================
# Base Rule Interface
# ============================================================================

class Rule(ABC):
    """
    Abstract base for constraint rules.

    Subclasses are frozen dataclasses carrying only their own fields.
    """

    kind: RuleKind

    @abstractmethod
    def cells(self) -> Tuple[AxialCoord, ...]:
        """Coordinates the rule is declared on."""

    @abstractmethod
    def expected_mines(self) -> int:
        """The number printed on the clue."""

    @abstractmethod
    def constrained_cells(self, board: "Board") -> Tuple[AxialCoord, ...]:
        """Cells whose mines the clue counts, resolved against a board."""

    @abstractmethod
    def is_satisfied(self, board: "Board") -> bool:
        """Check the board's mine layout against the clue."""

    def describe(self) -> str:
        """Short human readable label."""
        cells = " ".join(str(coord) for coord in self.cells())
        return f"{self.kind.value} {self.expected_mines()} @ {cells}"


# ============================================================================
# Rule Variants
# ============================================================================

@dataclass(frozen=True)
class EdgeRule(Rule):
    """
    Mine count over the neighbors of a single anchor cell.

    Attributes:
        cell: Anchor coordinate. The anchor itself is not counted.
        expected: Mines expected among the anchor's in-bounds neighbors.
    """

    cell: AxialCoord
    expected: int

    kind = RuleKind.EDGE

    def __post_init__(self) -> None:
        object.__setattr__(self, "cell", as_coord(self.cell))

    def cells(self) -> Tuple[AxialCoord, ...]:
        return (self.cell,)

    def expected_mines(self) -> int:
        return self.expected

    def constrained_cells(self, board: "Board") -> Tuple[AxialCoord, ...]:
        return tuple(board.get_neighbors(self.cell))

    def is_satisfied(self, board: "Board") -> bool:
        return count_mines(board, self.constrained_cells(board)) == self.expected


@dataclass(frozen=True)
class GroupRule(Rule):
    """
    Mine count over an arbitrary set of cells.

    Attributes:
        members: Cells in the group, in declaration order. Order carries
            no meaning for satisfaction.
        expected: Mines expected among the members.
    """

    members: Tuple[AxialCoord, ...]
    expected: int

    kind = RuleKind.GROUP

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", freeze_coords(self.members))

    def cells(self) -> Tuple[AxialCoord, ...]:
        return self.members

    def expected_mines(self) -> int:
        return self.expected

    def constrained_cells(self, board: "Board") -> Tuple[AxialCoord, ...]:
        return self.members

    def is_satisfied(self, board: "Board") -> bool:
        return count_mines(board, self.members) == self.expected


@dataclass(frozen=True)
class SequenceRule(Rule):
    """
    Longest consecutive run of mines along an ordered line of cells.

    Attributes:
        members: Cells in sequence order.
        expected: Required length of the longest run of mines.
    """

    members: Tuple[AxialCoord, ...]
    expected: int

    kind = RuleKind.SEQUENCE

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", freeze_coords(self.members))

    def cells(self) -> Tuple[AxialCoord, ...]:
        return self.members

    def expected_mines(self) -> int:
        return self.expected

    def constrained_cells(self, board: "Board") -> Tuple[AxialCoord, ...]:
        return self.members

    def longest_mine_run(self, board: "Board") -> int:
        """
        Length of the longest unbroken run of mines along the sequence.

        An off-grid coordinate breaks the run like an empty cell.
        """
        longest = 0
        current = 0
        for coord in self.members:
            cell = board.get_cell(coord)
            if cell is not None and cell.is_mine:
                current += 1
                longest = max(longest, current)
            else:
                current = 0
        return longest

    def is_satisfied(self, board: "Board") -> bool:
        return self.longest_mine_run(board) == self.expected
