"""
Command-line argument loader.

Turns ``bombs [rows cols probability] [--seed N]`` into a BoardConfig,
clamping values into the playable range.
"""
import argparse
from typing import Optional, Sequence, Tuple

from game import BoardConfig


# ============================================================================
# Constants
# ============================================================================

MAX_SIDE = 10
MAX_PROBABILITY = 0.5

DEFAULT_ROWS = 8
DEFAULT_COLS = 8
DEFAULT_PROBABILITY = 0.12


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="bombs", description="B O M B S - terminal minesweeper"
    )
    parser.add_argument(
        "rows", type=int, nargs="?", default=DEFAULT_ROWS,
        help=f"Number of rows (at most {MAX_SIDE})",
    )
    parser.add_argument(
        "cols", type=int, nargs="?", default=DEFAULT_COLS,
        help=f"Number of columns (at most {MAX_SIDE})",
    )
    parser.add_argument(
        "probability", type=float, nargs="?", default=DEFAULT_PROBABILITY,
        help=f"Chance of each cell hiding a bomb (0 to {MAX_PROBABILITY})",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for reproducible boards",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable ANSI colors"
    )
    return parser


def parse_args(
    argv: Optional[Sequence[str]] = None,
) -> Tuple[BoardConfig, argparse.Namespace]:
    """
    Parse command-line arguments into a board configuration.

    Sides are capped at MAX_SIDE and the probability is clamped to
    [0, MAX_PROBABILITY]. Sides below 1 are a usage error.

    Returns:
        Tuple of (BoardConfig, parsed namespace).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.rows < 1 or args.cols < 1:
        parser.error("rows and cols must be at least 1")

    config = BoardConfig(
        rows=min(MAX_SIDE, args.rows),
        cols=min(MAX_SIDE, args.cols),
        bomb_probability=max(0.0, min(MAX_PROBABILITY, args.probability)),
    )
    return config, args
