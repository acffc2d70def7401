"""
Grid module for the bombs game.

Owns the rectangular array of cells and the neighbor-counting
primitives that the reveal engine is built on.
"""
from typing import Callable, Iterator, List, Tuple, Sequence

from .cell import Cell


# ============================================================================
# Constants
# ============================================================================

Place = Tuple[int, int]

DIRECTIONS_4: Tuple[Place, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))
DIRECTIONS_8: Tuple[Place, ...] = DIRECTIONS_4 + (
    (1, 1), (1, -1), (-1, 1), (-1, -1),
)


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    A fixed-size rectangular collection of cells.

    Dimensions never change after construction; a new layout means a
    new grid.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("Grid dimensions must be positive")
        self._rows = rows
        self._cols = cols
        self._cells: List[List[Cell]] = [
            [Cell() for _ in range(cols)] for _ in range(rows)
        ]

    # ========================================================================
    # Shape
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
    def size(self) -> int:
        """Total number of cells."""
        return self._rows * self._cols

    def outside(self, row: int, col: int) -> bool:
        """Check if position falls outside the grid."""
        return row < 0 or col < 0 or row >= self._rows or col >= self._cols

    # ========================================================================
    # Cell Access
    # ========================================================================

    def cell(self, row: int, col: int) -> Cell:
        """Get cell at an in-bounds position."""
        return self._cells[row][col]

    def __iter__(self) -> Iterator[Cell]:
        return (cell for line in self._cells for cell in line)

    def places(self) -> Iterator[Place]:
        """Yield every (row, col) position in row-major order."""
        for row in range(self._rows):
            for col in range(self._cols):
                yield row, col

    def count(self, predicate: Callable[[Cell], bool]) -> int:
        """Count cells in the whole grid satisfying predicate."""
        return sum(1 for cell in self if predicate(cell))

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def neighbors(
        self,
        row: int,
        col: int,
        directions: Sequence[Place] = DIRECTIONS_8,
    ) -> List[Place]:
        """
        Get in-bounds neighboring positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.
            directions: Offsets to try, all 8 compass points by default.

        Returns:
            List of (row, col) tuples inside the grid.
        """
        result = []
        for delta_row, delta_col in directions:
            new_row = row + delta_row
            new_col = col + delta_col
            if not self.outside(new_row, new_col):
                result.append((new_row, new_col))
        return result

    def count_neighbors(
        self, row: int, col: int, predicate: Callable[[Cell], bool]
    ) -> int:
        """Count the up-to-8 neighbors of a position satisfying predicate."""
        if self.outside(row, col):
            return 0
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if predicate(self._cells[neighbor_row][neighbor_col]):
                count += 1
        return count

    def count_bomb_neighbors(self, row: int, col: int) -> int:
        """Count bombs adjacent to a position."""
        return self.count_neighbors(row, col, lambda cell: cell.is_bomb)

    def count_flagged_neighbors(self, row: int, col: int) -> int:
        """Count flagged cells adjacent to a position."""
        return self.count_neighbors(row, col, lambda cell: cell.flagged)
