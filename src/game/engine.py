"""
Game engine for the bombs game.

Implements cell revealing (flood expansion and chord reveals), flag
management, and the Active/Over state machine on top of a Grid.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import BOMB, FLAGGED, HIDDEN, Cell, CellKind
from .generator import BoardConfig, RandomSource, generate_grid, make_rng
from .grid import DIRECTIONS_4, DIRECTIONS_8, Grid, Place


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    ACTIVE = auto()
    OVER = auto()


class MoveResult(Enum):
    """Outcome of applying one move to one cell."""

    SUCCESS = auto()
    NOT_APPLICABLE = auto()
    LOSING_MOVE = auto()
    OUT_OF_BOUNDS = auto()


# ============================================================================
# Game Class
# ============================================================================

@dataclass
class Game:
    """
    A single game of bombs.

    Owns the grid and the counters derived from it, applies reveal and
    flag moves, and tracks whether play is still going.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: RandomSource = field(default_factory=make_rng, repr=False)
    _grid: Grid = field(init=False, repr=False)
    _state: GameState = GameState.ACTIVE
    _first_move: bool = True
    _lost: bool = False
    _bomb_count: int = 0
    _flagged_count: int = 0
    _revealed_count: int = 0

    def __post_init__(self) -> None:
        """Lay out the first grid after dataclass creation."""
        self._grid, self._bomb_count = generate_grid(self.config, self.rng)

    def restart(self) -> None:
        """Start over on a freshly generated grid of the same shape."""
        self._grid, self._bomb_count = generate_grid(self.config, self.rng)
        self._state = GameState.ACTIVE
        self._first_move = True
        self._lost = False
        self._flagged_count = 0
        self._revealed_count = 0

    # ========================================================================
    # Reveal Engine
    # ========================================================================

    def expand(self, row: int, col: int) -> None:
        """
        Flood-reveal outward from a position.

        Reveals the position unless it is outside, a bomb, revealed or
        flagged. The cascade continues through a revealed cell only when
        its flagged-neighbor count equals its bomb-neighbor count, and
        only in the four orthogonal directions.

        Args:
            row: Row index to start from.
            col: Column index to start from.
        """
        pending: List[Place] = [(row, col)]
        while pending:
            row, col = pending.pop()
            if not self._can_expand(row, col):
                continue

            self._grid.cell(row, col).revealed = True
            self._revealed_count += 1

            if not self._is_resolved(row, col):
                continue
            pending.extend(self._grid.neighbors(row, col, DIRECTIONS_4))

    def _can_expand(self, row: int, col: int) -> bool:
        """Check if expansion may reveal a position."""
        if self._grid.outside(row, col):
            return False
        cell = self._grid.cell(row, col)
        return not (cell.is_bomb or cell.revealed or cell.flagged)

    def _is_resolved(self, row: int, col: int) -> bool:
        """Check if every adjacent bomb is accounted for by a flag."""
        return (
            self._grid.count_flagged_neighbors(row, col)
            == self._grid.count_bomb_neighbors(row, col)
        )

    def try_reveal(self, place: Place) -> MoveResult:
        """
        Reveal the cell at a position.

        The first in-bounds reveal of a game turns its target empty,
        even when the target is flagged and the reveal is refused.
        Revealing an already revealed cell chords: if its flags match
        its bomb count, expansion starts from all 8 neighbors.

        Args:
            place: (row, col) position to reveal.

        Returns:
            MoveResult describing what happened.
        """
        if self._state != GameState.ACTIVE:
            return MoveResult.NOT_APPLICABLE

        row, col = place
        if self._grid.outside(row, col):
            return MoveResult.OUT_OF_BOUNDS

        cell = self._grid.cell(row, col)
        if self._first_move:
            self._handle_first_move(cell)

        if cell.flagged:
            return MoveResult.NOT_APPLICABLE

        if cell.is_bomb:
            return self._detonate(cell)

        if not cell.revealed:
            self.expand(row, col)
            return MoveResult.SUCCESS

        if self._is_resolved(row, col):
            for neighbor_row, neighbor_col in self._grid.neighbors(
                row, col, DIRECTIONS_8
            ):
                self.expand(neighbor_row, neighbor_col)
        return MoveResult.SUCCESS

    def _handle_first_move(self, cell: Cell) -> None:
        """Make the first reveal target safe."""
        self._first_move = False
        if cell.is_bomb:
            cell.kind = CellKind.EMPTY
            self._bomb_count -= 1

    def _detonate(self, cell: Cell) -> MoveResult:
        """Reveal a bomb and end the game."""
        cell.revealed = True
        self._revealed_count += 1
        self._lost = True
        self._state = GameState.OVER
        return MoveResult.LOSING_MOVE

    def reveal(self, places: Iterable[Place]) -> List[Tuple[Place, MoveResult]]:
        """
        Reveal several positions in order.

        Stops right after a losing move; later positions are left alone.

        Returns:
            (place, result) pairs for every position attempted.
        """
        results = []
        for place in places:
            result = self.try_reveal(place)
            results.append((place, result))
            if result == MoveResult.LOSING_MOVE:
                break
        return results

    # ========================================================================
    # Flag Manager
    # ========================================================================

    def try_set_flag(self, place: Place, value: bool) -> MoveResult:
        """
        Set or clear the flag on an unrevealed cell.

        Setting a flag to the value it already has changes nothing.

        Args:
            place: (row, col) position.
            value: True to flag, False to unflag.

        Returns:
            MoveResult describing what happened.
        """
        if self._state != GameState.ACTIVE:
            return MoveResult.NOT_APPLICABLE

        row, col = place
        if self._grid.outside(row, col):
            return MoveResult.OUT_OF_BOUNDS

        cell = self._grid.cell(row, col)
        if cell.revealed:
            return MoveResult.NOT_APPLICABLE

        if cell.flagged != value:
            cell.flagged = value
            self._flagged_count += 1 if value else -1
        return MoveResult.SUCCESS

    def flag(
        self, places: Iterable[Place], value: bool = True
    ) -> List[Tuple[Place, MoveResult]]:
        """Set flags on several positions in order."""
        return [(place, self.try_set_flag(place, value)) for place in places]

    # ========================================================================
    # State Machine
    # ========================================================================

    def check_win_condition(self) -> bool:
        """End the game if every safe cell is revealed."""
        if self.is_won:
            self._state = GameState.OVER
        return self.is_won

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @property
    def is_over(self) -> bool:
        """Check if play has stopped."""
        return self._state == GameState.OVER

    @property
    def is_won(self) -> bool:
        """Check if every safe cell is revealed without a loss."""
        return (
            not self._lost
            and self._revealed_count == self._grid.size - self._bomb_count
        )

    @property
    def is_lost(self) -> bool:
        """Check if a bomb was revealed."""
        return self._lost

    @property
    def is_first_move(self) -> bool:
        """Check if the first-move guarantee is still pending."""
        return self._first_move

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._grid.rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._grid.cols

    @property
    def grid(self) -> Grid:
        """Underlying grid of cells."""
        return self._grid

    @property
    def bomb_count(self) -> int:
        """Bombs currently on the grid."""
        return self._bomb_count

    @property
    def flagged_count(self) -> int:
        """Cells currently flagged."""
        return self._flagged_count

    @property
    def revealed_count(self) -> int:
        """Cells currently revealed."""
        return self._revealed_count

    @property
    def bombs_left(self) -> int:
        """Bombs not yet accounted for by a flag, never negative."""
        return max(self._bomb_count - self._flagged_count, 0)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if self._grid.outside(row, col):
            return None
        return self._grid.cell(row, col)

    def view(self, row: int, col: int) -> int:
        """
        Get what the player sees at a position.

        Returns:
            FLAGGED (-2): flagged, or a bomb once the game is won
            HIDDEN (-1): unrevealed while the game is active
            BOMB (9): a bomb, once revealed or the game is over
            0-8: bomb-neighbor count of a revealed safe cell
        """
        cell = self._grid.cell(row, col)
        if cell.flagged or (self.is_won and cell.is_bomb):
            return FLAGGED
        if self._state == GameState.ACTIVE and not cell.revealed:
            return HIDDEN
        if cell.is_bomb:
            return BOMB
        return self._grid.count_bomb_neighbors(row, col)

    def get_observation(self) -> np.ndarray:
        """
        Get visible board state as a numpy array.

        Returns:
            2D int8 array of view codes, shape (rows, cols).
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row, col in self._grid.places():
            obs[row, col] = self.view(row, col)
        return obs
