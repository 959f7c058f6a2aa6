"""
Unit tests for axial coordinates and hex adjacency.
"""
import pytest
from hexcells import AxialCoord, Board, HEX_DIRECTIONS
from hexcells.coord import as_coord


class TestAxialCoord:
    """Test coordinate value semantics."""

    def test_equality_and_hash_by_value(self) -> None:
        """Equal coordinates should be interchangeable in sets and dicts."""
        assert AxialCoord(2, 3) == AxialCoord(2, 3)
        assert len({AxialCoord(2, 3), AxialCoord(2, 3), AxialCoord(3, 2)}) == 2

    def test_equals_plain_tuple(self) -> None:
        """Coordinates compare equal to (q, r) tuples."""
        assert AxialCoord(1, 0) == (1, 0)

    def test_as_coord_converts_tuples(self) -> None:
        """Plain pairs should become AxialCoord."""
        coord = as_coord((4, 5))
        assert isinstance(coord, AxialCoord)
        assert (coord.q, coord.r) == (4, 5)

    @pytest.mark.parametrize("value", [(0.7, 1.9), (1, "2"), (1,), None])
    def test_as_coord_rejects_non_integer_pairs(self, value) -> None:
        """Floats and other non-integers are refused rather than truncated."""
        with pytest.raises(ValueError):
            as_coord(value)

    def test_directions_are_fixed(self) -> None:
        """The six offsets come in a fixed order."""
        assert HEX_DIRECTIONS == ((1, 0), (-1, 0), (0, 1), (0, -1), (1, -1), (-1, 1))

    def test_unbounded_neighbors(self) -> None:
        """Without a board every coordinate has six neighbors."""
        neighbors = list(AxialCoord(0, 0).neighbors())
        assert neighbors == [
            (1, 0), (-1, 0), (0, 1), (0, -1), (1, -1), (-1, 1)
        ]


class TestBoardNeighbors:
    """Test bounded neighbor lookup."""

    @pytest.mark.parametrize("rows,cols", [(1, 1), (1, 3), (2, 2), (4, 5), (6, 6)])
    def test_neighbors_are_in_bounds_and_distinct(
        self, make_board, rows: int, cols: int
    ) -> None:
        """Every neighbor list has at most six distinct in-bounds entries."""
        board = make_board(rows, cols)
        for coord in board.coords():
            neighbors = board.get_neighbors(coord)
            assert len(neighbors) <= 6
            assert len(set(neighbors)) == len(neighbors)
            offsets = {(n.q - coord.q, n.r - coord.r) for n in neighbors}
            assert offsets <= set(HEX_DIRECTIONS)
            for neighbor in neighbors:
                assert board.is_in_bounds(neighbor)

    def test_interior_cell_has_six_neighbors(self, empty_board: Board, center) -> None:
        """A cell away from the edges has all six neighbors."""
        assert len(empty_board.get_neighbors(center)) == 6

    def test_corner_neighbors_follow_direction_order(self, square_board: Board) -> None:
        """(0, 0) on a 2x2 grid only keeps (+1, 0) and (0, +1)."""
        assert square_board.get_neighbors(AxialCoord(0, 0)) == [(1, 0), (0, 1)]

    def test_opposite_corner_keeps_diagonal_neighbors(self, square_board: Board) -> None:
        """(1, 0) touches (0, 0), (1, 1) and (0, 1) through (-1, +1)."""
        assert square_board.get_neighbors(AxialCoord(1, 0)) == [(0, 0), (1, 1), (0, 1)]

    def test_no_wraparound(self, row_board: Board) -> None:
        """The ends of a single row do not touch each other."""
        assert row_board.get_neighbors(AxialCoord(0, 0)) == [(1, 0)]
        assert row_board.get_neighbors(AxialCoord(2, 0)) == [(1, 0)]

    def test_out_of_range_lookup_is_lenient(self, square_board: Board) -> None:
        """Off-grid coordinates give None and only their in-bounds neighbors."""
        assert square_board.get_cell(AxialCoord(5, 5)) is None
        assert square_board.get_neighbors(AxialCoord(9, 9)) == []
        assert square_board.get_neighbors(AxialCoord(-1, 0)) == [(0, 0)]
