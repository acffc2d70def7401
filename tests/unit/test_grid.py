"""
Unit tests for Grid class.

Tests bounds checking, neighbor enumeration and neighbor counting.
"""
import pytest
from game import Grid, DIRECTIONS_4

from conftest import make_grid


# ============================================================================
# Construction Tests
# ============================================================================

class TestGridConstruction:
    """Test grid creation."""

    def test_grid_has_correct_dimensions(self) -> None:
        """Grid should report its shape."""
        grid = Grid(3, 4)
        assert grid.rows == 3
        assert grid.cols == 4
        assert grid.size == 12
        assert len(list(grid)) == 12

    def test_zero_rows_raises_error(self) -> None:
        """A grid needs at least one row."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            Grid(0, 3)

    def test_layout_places_bombs(self) -> None:
        """Layout '*' marks should become bombs."""
        grid = make_grid(["*..", "..*"])
        assert grid.cell(0, 0).is_bomb is True
        assert grid.cell(1, 2).is_bomb is True
        assert grid.count(lambda cell: cell.is_bomb) == 2

    def test_places_are_row_major(self) -> None:
        """Places should be yielded row by row."""
        assert list(Grid(2, 2).places()) == [(0, 0), (0, 1), (1, 0), (1, 1)]


# ============================================================================
# Bounds Tests
# ============================================================================

class TestOutside:
    """Test the bounds check."""

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 4)])
    def test_positions_outside(self, row: int, col: int) -> None:
        """Positions past any edge are outside."""
        assert Grid(3, 4).outside(row, col) is True

    @pytest.mark.parametrize("row,col", [(0, 0), (2, 3), (1, 2)])
    def test_positions_inside(self, row: int, col: int) -> None:
        """Positions within the grid are inside."""
        assert Grid(3, 4).outside(row, col) is False


# ============================================================================
# Neighbor Tests
# ============================================================================

class TestNeighbors:
    """Test neighbor enumeration and counting."""

    def test_corner_has_three_neighbors(self) -> None:
        """Corner cells have exactly 3 neighbors."""
        grid = Grid(3, 3)
        assert len(grid.neighbors(0, 0)) == 3
        assert len(grid.neighbors(2, 2)) == 3

    def test_edge_has_five_neighbors(self) -> None:
        """Edge cells have exactly 5 neighbors."""
        assert len(Grid(3, 3).neighbors(0, 1)) == 5

    def test_interior_has_eight_neighbors(self) -> None:
        """Interior cells have exactly 8 neighbors."""
        assert len(Grid(3, 3).neighbors(1, 1)) == 8

    def test_orthogonal_neighbors(self) -> None:
        """Orthogonal directions skip diagonals."""
        neighbors = Grid(3, 3).neighbors(1, 1, DIRECTIONS_4)
        assert sorted(neighbors) == [(0, 1), (1, 0), (1, 2), (2, 1)]

    def test_single_cell_has_no_neighbors(self) -> None:
        """A 1x1 grid cell has nobody around it."""
        assert Grid(1, 1).neighbors(0, 0) == []

    def test_count_bomb_neighbors(self) -> None:
        """Bomb neighbors should be counted around a cell."""
        grid = make_grid(["*.*", "...", "..*"])
        assert grid.count_bomb_neighbors(1, 1) == 3
        assert grid.count_bomb_neighbors(0, 1) == 2
        assert grid.count_bomb_neighbors(2, 0) == 0

    def test_center_cell_not_counted(self) -> None:
        """A bomb does not count itself."""
        grid = make_grid(["...", ".*.", "..."])
        assert grid.count_bomb_neighbors(1, 1) == 0

    def test_count_flagged_neighbors(self) -> None:
        """Flagged neighbors should be counted regardless of kind."""
        grid = make_grid(["*..", "...", "..."])
        grid.cell(0, 0).flagged = True
        grid.cell(0, 1).flagged = True
        assert grid.count_flagged_neighbors(1, 1) == 2
        assert grid.count_flagged_neighbors(0, 0) == 1

    def test_counts_ignore_revealed(self) -> None:
        """Revealed state has no effect on either count."""
        grid = make_grid(["*.", ".."])
        grid.cell(0, 0).revealed = True
        assert grid.count_bomb_neighbors(1, 1) == 1
        assert grid.count_flagged_neighbors(1, 1) == 0

    def test_outside_center_counts_zero(self) -> None:
        """Counting around an outside position yields 0."""
        grid = make_grid(["**", "**"])
        assert grid.count_bomb_neighbors(-1, -1) == 0
        assert grid.count_bomb_neighbors(2, 0) == 0
