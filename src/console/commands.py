"""
Text command parsing and dispatch.

Each command line is split into words; the first word selects a handler
from COMMANDS and the rest are its arguments. Handlers return True when
the board should be drawn again.
"""
from typing import Callable, Dict, List, TextIO

from game import Game, MoveResult, Place


HELP_TEXT = """H E L P:
(1.) Type "flag i1 j1 i2 j2 ... in jn" to flag the cell in the ith row (0-indexed) of the jth column (0-indexed) of the grid.
(2.) Type "unflag i1 j1 i2 j2 ... in jn" to unflag the cell in the ith row (0-indexed) of the jth column (0-indexed) of the grid.
(3.) Type "reveal i1 j1 i2 j2 ... in jn" to reveal the cell in the ith row (0-indexed) of the jth column (0-indexed) of the grid.
(4.) Type "exit" to exit the game.
(5.) Type "restart" to restart the game.
(6.) Type "bombs_left?" to query how many bombs haven't been flagged."""


class CommandError(ValueError):
    """Raised when a command line cannot be understood."""


Handler = Callable[[Game, List[str], TextIO], bool]


# ============================================================================
# Parsing
# ============================================================================

def tokenize(line: str) -> List[str]:
    """Split a command line into words."""
    return line.split()


def parse_places(args: List[str]) -> List[Place]:
    """
    Read coordinate pairs from command arguments.

    Args:
        args: Words after the command name, "i1 j1 i2 j2 ...".

    Returns:
        List of (row, col) tuples in the given order.

    Raises:
        CommandError: If the count is zero or odd, or a word is not an
            integer.
    """
    if not args or len(args) % 2:
        raise CommandError("Expected one or more pairs of coordinates.")
    numbers = []
    for word in args:
        try:
            numbers.append(int(word))
        except ValueError:
            raise CommandError(
                f"Coordinates must be integers, got {word!r}."
            ) from None
    return list(zip(numbers[::2], numbers[1::2]))


# ============================================================================
# Handlers
# ============================================================================

def _set_flags(game: Game, args: List[str], out: TextIO, value: bool) -> bool:
    """Apply one flag value to each listed cell."""
    for (row, col), result in game.flag(parse_places(args), value):
        if result == MoveResult.OUT_OF_BOUNDS:
            print(
                f"Failed (un)flagging cell: [{row}, {col}], "
                "as it does not exist in the grid.",
                file=out,
            )
        elif result == MoveResult.NOT_APPLICABLE:
            print(
                f"Failed (un)flagging cell: [{row}, {col}], "
                "as the cell has already been revealed.",
                file=out,
            )
    return True


def flag(game: Game, args: List[str], out: TextIO) -> bool:
    """Flag each listed cell."""
    return _set_flags(game, args, out, True)


def unflag(game: Game, args: List[str], out: TextIO) -> bool:
    """Unflag each listed cell."""
    return _set_flags(game, args, out, False)


def reveal(game: Game, args: List[str], out: TextIO) -> bool:
    """Reveal each listed cell, stopping at the first bomb."""
    for (row, col), result in game.reveal(parse_places(args)):
        if result == MoveResult.NOT_APPLICABLE:
            print(
                f"Failed revealing cell: [{row}, {col}], "
                "as you cannot reveal a flagged cell.",
                file=out,
            )
        elif result == MoveResult.OUT_OF_BOUNDS:
            print(
                f"Failed revealing cell: [{row}, {col}], "
                "as it does not exist in the grid.",
                file=out,
            )
    return True


def show_help(game: Game, args: List[str], out: TextIO) -> bool:
    """Print the command list."""
    print(HELP_TEXT, file=out)
    return True


def leave(game: Game, args: List[str], out: TextIO) -> bool:
    """Quit the game."""
    raise SystemExit(0)


def restart(game: Game, args: List[str], out: TextIO) -> bool:
    """Start a new game on a fresh grid."""
    game.restart()
    return True


def bombs_left(game: Game, args: List[str], out: TextIO) -> bool:
    """Print how many bombs are not yet flagged."""
    print(f"There are {game.bombs_left} bombs left.", file=out)
    return True


COMMANDS: Dict[str, Handler] = {
    "flag": flag,
    "unflag": unflag,
    "reveal": reveal,
    "help": show_help,
    "exit": leave,
    "restart": restart,
    "bombs_left?": bombs_left,
}


# ============================================================================
# Dispatch
# ============================================================================

def dispatch(game: Game, line: str, out: TextIO) -> bool:
    """
    Run one command line against the game.

    Args:
        game: Game to act on.
        line: Raw text typed by the player.
        out: Stream for messages.

    Returns:
        True if the command was accepted, False otherwise.
    """
    words = tokenize(line)
    if not words:
        return False

    name, args = words[0], words[1:]
    handler = COMMANDS.get(name)
    if handler is None:
        print(f'Unknown command "{name}".', file=out)
        return False

    try:
        return handler(game, args, out)
    except CommandError as error:
        print(error, file=out)
        return False
