"""
Entry point for the bombs terminal game.

Usage:
    bombs [rows cols probability] [--seed N] [--no-color]
"""
from typing import Optional, Sequence

from game import Game, make_rng

from .args import parse_args
from .repl import run


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, build a game and play it."""
    config, args = parse_args(argv)
    game = Game(config, make_rng(args.seed))
    run(game, color=not args.no_color)
    return 0
