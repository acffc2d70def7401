#!/usr/bin/env python3
"""
B O M B S - terminal minesweeper.

Usage:
    python main.py [rows cols probability] [--seed N] [--no-color]
"""
import sys
from pathlib import Path

# Add src to path so the game runs from a plain checkout
sys.path.insert(0, str(Path(__file__).parent / "src"))

from console import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
