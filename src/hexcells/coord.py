"""
Axial coordinates for the pointy-topped hex grid.

A cell is addressed by (q, r): q is the column, r the row. Adjacency is
defined by six fixed offsets; bounds checking belongs to the board.
"""
import operator
from typing import Iterator, NamedTuple, Tuple


# ============================================================================
# Constants
# ============================================================================

# Order matters: neighbor lists and hint candidates follow it.
HEX_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (+1, 0),
    (-1, 0),
    (0, +1),
    (0, -1),
    (+1, -1),
    (-1, +1),
)


# ============================================================================
# Axial Coordinate
# ============================================================================

class AxialCoord(NamedTuple):
    """
    Integer (q, r) position on the hex grid.

    Attributes:
        q: Column index.
        r: Row index.
    """

    q: int
    r: int

    def neighbor(self, direction: Tuple[int, int]) -> "AxialCoord":
        """Return the coordinate one step away along an offset."""
        delta_q, delta_r = direction
        return AxialCoord(self.q + delta_q, self.r + delta_r)

    def neighbors(self) -> Iterator["AxialCoord"]:
        """Yield all six adjacent coordinates, unbounded."""
        for direction in HEX_DIRECTIONS:
            yield self.neighbor(direction)

    def __str__(self) -> str:
        return f"({self.q}, {self.r})"


def as_coord(value: Tuple[int, int]) -> AxialCoord:
    """
    Coerce a plain (q, r) pair into an AxialCoord.

    Raises:
        ValueError: If the value is not a pair of integers.
    """
    if isinstance(value, AxialCoord):
        return value
    try:
        q, r = value
        return AxialCoord(operator.index(q), operator.index(r))
    except TypeError:
        raise ValueError(f"Coordinates must be integer pairs: {value!r}") from None
