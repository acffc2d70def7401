"""
Console front end for the bombs game.

Provides argument loading, rendering, command dispatch and the
interactive loop.
"""
from .args import parse_args, MAX_SIDE
from .commands import COMMANDS, CommandError, dispatch, parse_places, tokenize
from .render import render, render_cell
from .repl import run
from .app import main

__all__ = [
    "parse_args",
    "MAX_SIDE",
    "COMMANDS",
    "CommandError",
    "dispatch",
    "parse_places",
    "tokenize",
    "render",
    "render_cell",
    "run",
    "main",
]
