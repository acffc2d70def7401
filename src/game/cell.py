"""
Cell module for the bombs game.

Represents individual grid positions with their content (empty/bomb)
and their player-facing marks (revealed/flagged).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellKind(Enum):
    """What a cell hides."""

    EMPTY = auto()
    BOMB = auto()


# Visible state codes. Revealed non-bomb cells use their bomb-neighbor
# count directly (0 = blank, 1-8 = number).
HIDDEN = -1
FLAGGED = -2
BOMB = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the grid.

    Attributes:
        kind: Whether this cell is empty or hides a bomb.
        revealed: Whether the player has uncovered this cell.
        flagged: Whether the player has marked this cell as a bomb.
    """

    kind: CellKind = CellKind.EMPTY
    revealed: bool = False
    flagged: bool = False

    @property
    def is_bomb(self) -> bool:
        """Check if cell hides a bomb."""
        return self.kind == CellKind.BOMB

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.revealed and not self.flagged
