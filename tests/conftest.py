"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Sequence, Tuple

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import BoardConfig, Cell, CellKind, Game, Grid, place_bombs


# ============================================================================
# Random Sources
# ============================================================================

class LayoutRng:
    """
    Stand-in for numpy's Generator that draws a fixed layout.

    Cells marked '*' draw 0.0 and become bombs for any probability;
    every other cell draws 1.0 and stays empty.
    """

    def __init__(self, layout: Sequence[str]) -> None:
        self.layout = list(layout)
        self.calls = 0

    def random(self, size: Tuple[int, int]) -> np.ndarray:
        self.calls += 1
        draws = np.array(
            [[0.0 if mark == "*" else 1.0 for mark in line] for line in self.layout]
        )
        assert draws.shape == tuple(size)
        return draws


def make_grid(layout: Sequence[str]) -> Grid:
    """Build a grid whose bombs sit exactly where the layout has '*'."""
    grid = Grid(len(layout), len(layout[0]))
    place_bombs(grid, 0.0, LayoutRng(layout))
    return grid


def make_game(layout: Sequence[str], probability: float = 0.12) -> Game:
    """Build a game whose bombs sit exactly where the layout has '*'."""
    config = BoardConfig(len(layout), len(layout[0]), probability)
    return Game(config, LayoutRng(layout))


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def game_from_layout():
    """Factory building games from text layouts."""
    return make_game


@pytest.fixture
def empty_game() -> Game:
    """A 5x5 game with no bombs for cascade testing."""
    return make_game(["....."] * 5)


@pytest.fixture
def center_bomb_game() -> Game:
    """A 3x3 game with a single bomb in the middle."""
    return make_game(["...", ".*.", "..."])


@pytest.fixture
def corner_bomb_game() -> Game:
    """
    A 4x4 game with one bomb in the bottom-right corner.

    Layout:
        . . . .
        . . . .
        . . . .
        . . . *
    """
    return make_game(["....", "....", "....", "...*"])


@pytest.fixture
def seeded_game() -> Game:
    """A default 8x8 game on a seeded numpy generator."""
    return Game(BoardConfig(), np.random.default_rng(1234))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden empty cell."""
    return Cell()


@pytest.fixture
def bomb_cell() -> Cell:
    """Create a cell containing a bomb."""
    return Cell(kind=CellKind.BOMB)
