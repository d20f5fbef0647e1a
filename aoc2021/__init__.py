"""Advent of Code 2021 solutions.

Each day of the puzzle calendar lives in :mod:`aoc2021.days` as a
self-contained solver. The :mod:`aoc2021.registry` maps day identifiers to
those solvers and :mod:`aoc2021.cli` exposes them as subcommands.
"""

__version__ = "0.1.0"

from .errors import AocError, InputFileError, ParseError, UsageError
from .registry import get_solver, list_solvers, solve_with_solver

__all__ = [
    "AocError",
    "InputFileError",
    "ParseError",
    "UsageError",
    "get_solver",
    "list_solvers",
    "solve_with_solver",
]
