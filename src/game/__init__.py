"""
Bombs game module.

Provides core game logic: the grid, bomb placement, the reveal engine,
flag management and game state.
"""
from .cell import Cell, CellKind, HIDDEN, FLAGGED, BOMB
from .grid import Grid, Place, DIRECTIONS_4, DIRECTIONS_8
from .generator import BoardConfig, place_bombs, generate_grid, make_rng
from .engine import Game, GameState, MoveResult

__all__ = [
    "Cell",
    "CellKind",
    "HIDDEN",
    "FLAGGED",
    "BOMB",
    "Grid",
    "Place",
    "DIRECTIONS_4",
    "DIRECTIONS_8",
    "BoardConfig",
    "place_bombs",
    "generate_grid",
    "make_rng",
    "Game",
    "GameState",
    "MoveResult",
]
