"""
Board generation for the bombs game.

Holds the board configuration and the stochastic bomb placement run at
construction and on every restart.
"""
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

import numpy as np

from .cell import CellKind
from .grid import Grid


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a bombs board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        bomb_probability: Chance for each cell to hide a bomb.
    """

    rows: int = 8
    cols: int = 8
    bomb_probability: float = 0.12

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if not 0.0 <= self.bomb_probability <= 1.0:
            raise ValueError("Bomb probability must be between 0 and 1")


class RandomSource(Protocol):
    """Anything that draws uniform floats like numpy's Generator."""

    def random(self, size: Tuple[int, int]) -> np.ndarray:
        ...


# ============================================================================
# Bomb Placement
# ============================================================================

def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the default random source, optionally seeded."""
    return np.random.default_rng(seed)


def place_bombs(grid: Grid, probability: float, rng: RandomSource) -> int:
    """
    Turn cells into bombs independently with the given probability.

    A cell becomes a bomb when its uniform draw in [0, 1) is at most
    ``probability``. The probability is used as given.

    Args:
        grid: Freshly built grid to populate.
        probability: Per-cell bomb chance.
        rng: Source of uniform draws.

    Returns:
        Number of bombs placed.
    """
    draws = rng.random((grid.rows, grid.cols))
    placed = 0
    for row, col in zip(*np.nonzero(draws <= probability)):
        grid.cell(int(row), int(col)).kind = CellKind.BOMB
        placed += 1
    return placed


def generate_grid(config: BoardConfig, rng: RandomSource) -> Tuple[Grid, int]:
    """Build a new grid for config and place its bombs."""
    grid = Grid(config.rows, config.cols)
    return grid, place_bombs(grid, config.bomb_probability, rng)
