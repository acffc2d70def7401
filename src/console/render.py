"""
ANSI renderer for the bombs board.
"""
from game import BOMB, FLAGGED, HIDDEN, Game


# ============================================================================
# Constants
# ============================================================================

RESET = "\033[0m"
FLAG_STYLE = "\033[1;44m"
BOMB_STYLE = "\033[30;41;1m"
BLANK_STYLE = "\033[47m"
NUMBER_STYLE = "\033[43;30;1m"


def _paint(text: str, style: str, color: bool) -> str:
    return f"{style}{text}{RESET}" if color else text


def render_cell(code: int, color: bool = True) -> str:
    """
    Convert a view code into its on-screen glyph.

    Args:
        code: Value from Game.view.
        color: Wrap glyphs in ANSI escape sequences.

    Returns:
        A single printable glyph, possibly with escapes.
    """
    if code == FLAGGED:
        return _paint("F", FLAG_STYLE, color)
    if code == HIDDEN:
        return "."
    if code == BOMB:
        return _paint("B", BOMB_STYLE, color)
    if code == 0:
        return _paint(" ", BLANK_STYLE, color)
    return _paint(str(code), NUMBER_STYLE, color)


def render(game: Game, color: bool = True) -> str:
    """Render the whole board with row and column indices."""
    header = "   " + "".join(f"{col} " for col in range(game.cols))
    lines = [header]
    for row in range(game.rows):
        cells = "".join(
            render_cell(game.view(row, col), color) + " "
            for col in range(game.cols)
        )
        lines.append(f"{row}  {cells}")
    return "\n".join(lines) + "\n"
