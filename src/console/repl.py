"""
Read-eval-print loop driving a game from a text stream.
"""
import sys
from typing import Optional, TextIO

from game import Game, GameState

from .commands import dispatch
from .render import render


WELCOME = "Welcome to B O M B S"
PROMPT = 'Please enter a command or "help" for a list of commands.'


def run(
    game: Game,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    color: bool = True,
) -> GameState:
    """
    Play until the game is over or input runs out.

    After every command the win condition is checked; accepted commands
    redraw the board.

    Args:
        game: Game to play.
        stdin: Stream of command lines (default: sys.stdin).
        stdout: Stream for output (default: sys.stdout).
        color: Render with ANSI colors.

    Returns:
        State of the game when the loop ended.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    print(WELCOME, file=stdout)
    print(render(game, color), file=stdout)

    while not game.is_over:
        print(PROMPT, file=stdout)
        line = stdin.readline()
        if not line:
            break

        accepted = dispatch(game, line, stdout)
        game.check_win_condition()
        if accepted:
            print(render(game, color), file=stdout)

    if game.is_won:
        print("You win!", file=stdout)
    elif game.is_lost:
        print("Game over.", file=stdout)
    return game.state
